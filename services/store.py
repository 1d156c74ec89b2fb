"""Append-only transaction store."""

from decimal import Decimal
from typing import List, Optional

from models.date import Date
from models.transaction import Transaction


class TransactionStore:
    """Owns the canonical ordered sequence of transactions.

    Ids start at 1 and increase by one per ``add``. Removed ids are never
    handed out again, including after an undo of the insertion.
    """

    def __init__(self):
        self._transactions: List[Transaction] = []
        self._next_id = 1

    @property
    def next_id(self) -> int:
        """The id the next ``add`` will assign."""
        return self._next_id

    def add(
        self,
        date: Date,
        category: str,
        amount: Decimal,
        description: str,
        type: str,
    ) -> Transaction:
        """Create a transaction with the next sequential id and append it.

        Returns:
            The stored Transaction.
        """
        transaction = Transaction(
            id=self._next_id,
            date=date,
            category=category,
            amount=amount,
            description=description,
            type=type,
        )
        self._next_id += 1
        self._transactions.append(transaction)
        return transaction

    def find(self, transaction_id: int) -> Optional[Transaction]:
        """Get the first transaction with the given id, or None."""
        for transaction in self._transactions:
            if transaction.id == transaction_id:
                return transaction
        return None

    def remove_by_id(self, transaction_id: int) -> Optional[Transaction]:
        """Remove the first transaction with the given id.

        Args:
            transaction_id: Id of the transaction to remove.

        Returns:
            The removed Transaction, or None if no transaction has that id.
        """
        for i, transaction in enumerate(self._transactions):
            if transaction.id == transaction_id:
                del self._transactions[i]
                return transaction
        return None

    def restore(self, transaction: Transaction) -> None:
        """Re-append a previously removed transaction, keeping its id."""
        self._transactions.append(transaction)

    def list_all(self) -> List[Transaction]:
        """Get all transactions in store order (oldest first)."""
        return list(self._transactions)

    def count(self) -> int:
        return len(self._transactions)
