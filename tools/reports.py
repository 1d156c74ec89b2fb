"""Multi-month report tools."""

from datetime import date
from decimal import Decimal
from typing import Dict, Iterator, List, Tuple

from dateutil.relativedelta import relativedelta

from models.date import Date
from models.transaction import Transaction


def iter_months(start_month: Date, end_month: Date) -> Iterator[Tuple[int, int]]:
    """Yield (year, month) pairs from start_month to end_month inclusive.

    Day components are ignored.

    Raises:
        ValueError: If either month is outside 1-12.
    """
    current = date(start_month.year, start_month.month, 1)
    last = date(end_month.year, end_month.month, 1)

    while current <= last:
        yield current.year, current.month
        current += relativedelta(months=1)


def get_period_transactions(
    services, start_month: Date, end_month: Date
) -> Dict[str, List[Transaction]]:
    """Get transactions for a period, grouped by month.

    Args:
        services: Services container with the query service.
        start_month: Start of period (day component ignored).
        end_month: End of period (day component ignored).

    Returns:
        Dictionary mapping month keys (format: "YYYY/MM") to transaction
        lists in store order. Every month of the period has a key, even
        when it has no transactions.
    """
    by_month = {(year, month): [] for year, month in iter_months(start_month, end_month)}

    for transaction in services.queries.all():
        key = (transaction.date.year, transaction.date.month)
        if key in by_month:
            by_month[key].append(transaction)

    return {
        f"{year:04d}/{month:02d}": transactions
        for (year, month), transactions in by_month.items()
    }


def get_period_summary(
    services, start_month: Date, end_month: Date
) -> Dict[str, Dict]:
    """Get summarized transaction data for a period, organized by month.

    Args:
        services: Services container with the query service.
        start_month: Start of period (day component ignored).
        end_month: End of period (day component ignored).

    Returns:
        Dictionary mapping month keys (format: "YYYY/MM") to summaries:
        - "income_total": Total income for the month (Decimal)
        - "expense_total": Total expenses for the month (Decimal)
        - "net": Net amount (income - expenses) (Decimal)
        - "expenses_by_category": Dict mapping category name to expense
          amount (Decimal)

    Example:
        {
            "2025/11": {
                "income_total": Decimal("20000"),
                "expense_total": Decimal("3000.50"),
                "net": Decimal("16999.50"),
                "expenses_by_category": {
                    "Food": Decimal("900.50"),
                    "Transport": Decimal("100"),
                },
            },
            "2025/12": {...},
        }
    """
    result = {}

    for month_key, transactions in get_period_transactions(
        services, start_month, end_month
    ).items():
        income_total = Decimal("0")
        expense_total = Decimal("0")
        expenses_by_category: Dict[str, Decimal] = {}

        for transaction in transactions:
            if transaction.is_income:
                income_total += transaction.amount
            elif transaction.is_expense:
                expense_total += transaction.amount
                expenses_by_category[transaction.category] = (
                    expenses_by_category.get(transaction.category, Decimal("0"))
                    + transaction.amount
                )

        result[month_key] = {
            "income_total": income_total,
            "expense_total": expense_total,
            "net": income_total - expense_total,
            "expenses_by_category": expenses_by_category,
        }

    return result
