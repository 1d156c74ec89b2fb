"""Result records returned by reporting queries."""

from dataclasses import dataclass
from decimal import Decimal

from models.transaction import Transaction


@dataclass(frozen=True)
class RankedExpense:
    """An expense with its 1-based rank in a top-N listing."""

    rank: int
    transaction: Transaction


@dataclass(frozen=True)
class Statistics:
    """Ledger-wide totals.

    Attributes:
        transaction_count: Number of transactions in the ledger.
        total_income: Sum of all 'Income' amounts.
        total_expenses: Sum of all 'Expense' amounts.
        net: total_income - total_expenses.
        category_count: Number of categories currently holding transactions.
    """

    transaction_count: int
    total_income: Decimal
    total_expenses: Decimal
    net: Decimal
    category_count: int
