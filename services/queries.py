"""Read-only reporting queries over the ledger."""

from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from models.date import Date
from models.report import RankedExpense, Statistics
from models.transaction import Transaction


class QueryService:
    """Service for reporting queries.

    Queries never mutate the store or the category index and never touch
    the undo log.
    """

    def __init__(self, store, categories):
        """Initialize the query service.

        Args:
            store: TransactionStore to read from.
            categories: CategoryIndex to read buckets from.
        """
        self.store = store
        self.categories = categories

    def by_category(self, category: str) -> List[Transaction]:
        """Get all transactions in a category, income included.

        Returns:
            List of Transaction objects in insertion order, empty if the
            category has no transactions.
        """
        return self.categories.bucket(category)

    def all(self) -> List[Transaction]:
        """Get every transaction in store order (oldest first)."""
        return self.store.list_all()

    def monthly_total(
        self, month: int, year: int, type: Optional[str] = None
    ) -> Decimal:
        """Sum amounts for a given month.

        Args:
            month: Month (1-12).
            year: Year (e.g., 2025).
            type: Optional exact type to restrict to ('Income' or 'Expense').

        Returns:
            Total amount, Decimal("0") if nothing matches.
        """
        return sum(
            (
                t.amount
                for t in self.store.list_all()
                if t.date.month == month
                and t.date.year == year
                and (type is None or t.type == type)
            ),
            Decimal("0"),
        )

    def category_summary(self) -> Dict[str, Decimal]:
        """Total expenses per category.

        Only 'Expense' transactions are summed; income is left out even
        for categories that contain it. Categories holding only income
        report Decimal("0").

        Returns:
            Dictionary mapping category name to expense total, in the
            category index's order.
        """
        summary = {}
        for category in self.categories.categories():
            summary[category] = _sum_amounts(
                t for t in self.categories.bucket(category) if t.is_expense
            )
        return summary

    def search_by_date_range(self, start: Date, end: Date) -> List[Transaction]:
        """Get transactions dated between start and end, both inclusive."""
        return [t for t in self.store.list_all() if start <= t.date <= end]

    def search_by_amount_range(
        self, min_amount: Decimal, max_amount: Decimal
    ) -> List[Transaction]:
        """Get transactions with min_amount <= amount <= max_amount."""
        return [
            t for t in self.store.list_all() if min_amount <= t.amount <= max_amount
        ]

    def search_by_keyword(
        self, keyword: str, ignore_case: bool = False
    ) -> List[Transaction]:
        """Get transactions whose description contains keyword.

        Args:
            keyword: Literal substring to look for.
            ignore_case: If True, compare case-insensitively. Matching is
                case-sensitive by default.

        Returns:
            Matching transactions in store order.
        """
        if ignore_case:
            needle = keyword.casefold()
            return [
                t for t in self.store.list_all() if needle in t.description.casefold()
            ]
        return [t for t in self.store.list_all() if keyword in t.description]

    def top_expenses(self, n: int = 5) -> List[RankedExpense]:
        """Get the n largest expenses, ranked from 1.

        Ties keep store order.

        Args:
            n: Maximum number of expenses to return.

        Returns:
            Up to n RankedExpense records, largest amount first.
        """
        if n <= 0:
            return []

        expenses = [t for t in self.store.list_all() if t.is_expense]
        expenses.sort(key=lambda t: t.amount, reverse=True)

        return [
            RankedExpense(rank=i, transaction=t)
            for i, t in enumerate(expenses[:n], start=1)
        ]

    def total_income(self) -> Decimal:
        return _sum_amounts(t for t in self.store.list_all() if t.is_income)

    def total_expenses(self) -> Decimal:
        return _sum_amounts(t for t in self.store.list_all() if t.is_expense)

    def transaction_count(self) -> int:
        return self.store.count()

    def statistics(self) -> Statistics:
        """Get ledger-wide counts and totals."""
        total_income = self.total_income()
        total_expenses = self.total_expenses()
        return Statistics(
            transaction_count=self.transaction_count(),
            total_income=total_income,
            total_expenses=total_expenses,
            net=total_income - total_expenses,
            category_count=self.categories.category_count(),
        )


def _sum_amounts(transactions: Iterable[Transaction]) -> Decimal:
    return sum((t.amount for t in transactions), Decimal("0"))
