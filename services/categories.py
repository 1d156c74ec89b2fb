"""Category index kept in lockstep with the transaction store."""

from typing import Dict, List

from models.transaction import Transaction


class CategoryIndex:
    """Maps category name to the transactions in that category.

    Buckets keep insertion order. A bucket that becomes empty is dropped,
    so an emptied category and a never-seen category look the same.
    """

    def __init__(self):
        self._buckets: Dict[str, List[Transaction]] = {}

    def on_insert(self, transaction: Transaction) -> None:
        """Append a transaction to its category bucket, creating it if needed."""
        self._buckets.setdefault(transaction.category, []).append(transaction)

    def on_remove(self, transaction: Transaction) -> None:
        """Remove the entry matching the transaction's id from its bucket.

        Relative order of the remaining entries is preserved.
        """
        bucket = self._buckets.get(transaction.category)
        if bucket is None:
            return

        remaining = [t for t in bucket if t.id != transaction.id]
        if remaining:
            self._buckets[transaction.category] = remaining
        else:
            del self._buckets[transaction.category]

    def bucket(self, category: str) -> List[Transaction]:
        """Get transactions for a category in insertion order.

        Returns:
            List of Transaction objects, empty for unknown categories.
        """
        return list(self._buckets.get(category, []))

    def categories(self) -> List[str]:
        """Get category names in order of first insertion."""
        return list(self._buckets)

    def category_count(self) -> int:
        """Number of categories currently holding at least one transaction."""
        return len(self._buckets)
