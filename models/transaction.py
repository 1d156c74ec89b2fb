from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Union

from models.date import Date

INCOME = "Income"
EXPENSE = "Expense"

TRANSACTION_TYPES = (INCOME, EXPENSE)

AmountLike = Union[Decimal, int, float, str]


def to_amount(value: AmountLike) -> Decimal:
    """Convert a user-supplied amount to Decimal.

    Floats go through ``str`` so that 250.50 stays exactly 250.50.

    Raises:
        ValueError: If the value is not a finite number (NaN and
            Infinity are rejected).
    """
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"Invalid amount: {value!r}") from None

    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    return amount


@dataclass(frozen=True)
class Transaction:
    id: int  # assigned by the store, never reused
    date: Date
    category: str  # case-sensitive, used verbatim as the index key
    amount: Decimal
    description: str
    type: str  # 'Income' or 'Expense'; anything else is never aggregated

    @property
    def is_income(self) -> bool:
        return self.type == INCOME

    @property
    def is_expense(self) -> bool:
        return self.type == EXPENSE
