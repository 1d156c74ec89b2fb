"""Text rendering of ledger data for the CLI.

Every renderer returns a list of lines; callers decide where they go.
"""

from decimal import Decimal
from typing import Dict, List

from models.report import RankedExpense, Statistics
from models.transaction import Transaction


def format_amount(amount: Decimal, symbol: str) -> str:
    return f"{symbol}{amount:.2f}"


def _banner(title: str, width: int) -> List[str]:
    return ["", "=" * width, title, "=" * width]


def render_transactions(
    transactions: List[Transaction], symbol: str, title: str = "ALL TRANSACTIONS"
) -> List[str]:
    """Render a full transaction table (id, date, category, amount, description, type)."""
    lines = _banner(title, 85)
    lines.append(
        f"{'ID':<5}{'Date':<12}{'Category':<15}{'Amount':<12}{'Description':<20}Type"
    )
    lines.append("-" * 74)
    for t in transactions:
        lines.append(
            f"{t.id:<5}{str(t.date):<12}{t.category:<15}"
            f"{format_amount(t.amount, symbol):<12}{t.description:<20}{t.type}"
        )
    return lines


def render_category(
    category: str, transactions: List[Transaction], symbol: str
) -> List[str]:
    lines = _banner(f"TRANSACTIONS IN CATEGORY: {category}", 60)
    lines.append(f"{'ID':<5}{'Date':<12}{'Amount':<12}Description")
    lines.append("-" * 40)
    for t in transactions:
        lines.append(
            f"{t.id:<5}{str(t.date):<12}"
            f"{format_amount(t.amount, symbol):<12}{t.description}"
        )
    return lines


def render_category_summary(summary: Dict[str, Decimal], symbol: str) -> List[str]:
    """Render expense totals per category. Income is not part of this report."""
    lines = _banner("CATEGORY SUMMARY (EXPENSES)", 50)
    lines.append(f"{'Category':<20}Total Amount")
    lines.append("-" * 35)
    for category, total in summary.items():
        lines.append(f"{category:<20}{format_amount(total, symbol)}")
    return lines


def render_search_results(
    title: str, transactions: List[Transaction], symbol: str
) -> List[str]:
    lines = _banner(title, 60)
    lines.append(f"{'ID':<5}{'Date':<12}{'Category':<15}{'Amount':<12}Description")
    lines.append("-" * 55)
    for t in transactions:
        lines.append(
            f"{t.id:<5}{str(t.date):<12}{t.category:<15}"
            f"{format_amount(t.amount, symbol):<12}{t.description}"
        )
    return lines


def render_top_expenses(ranked: List[RankedExpense], symbol: str) -> List[str]:
    lines = _banner(f"TOP {len(ranked)} EXPENSES", 60)
    lines.append(f"{'Rank':<6}{'Category':<15}{'Amount':<12}Description")
    lines.append("-" * 45)
    for entry in ranked:
        t = entry.transaction
        lines.append(
            f"{entry.rank:<6}{t.category:<15}"
            f"{format_amount(t.amount, symbol):<12}{t.description}"
        )
    return lines


def render_statistics(stats: Statistics, symbol: str) -> List[str]:
    lines = _banner("STATISTICS", 60)
    lines.extend(
        [
            f"Total Transactions: {stats.transaction_count}",
            f"Total Income: {format_amount(stats.total_income, symbol)}",
            f"Total Expenses: {format_amount(stats.total_expenses, symbol)}",
            f"Net Balance: {format_amount(stats.net, symbol)}",
            f"Categories: {stats.category_count}",
        ]
    )
    return lines


def render_period_summary(summary: Dict[str, Dict], symbol: str) -> List[str]:
    lines = _banner("PERIOD SUMMARY", 60)
    lines.append(f"{'Month':<10}{'Income':<15}{'Expenses':<15}Net")
    lines.append("-" * 50)
    for month_key, month in summary.items():
        lines.append(
            f"{month_key:<10}"
            f"{format_amount(month['income_total'], symbol):<15}"
            f"{format_amount(month['expense_total'], symbol):<15}"
            f"{format_amount(month['net'], symbol)}"
        )
        for category, total in month["expenses_by_category"].items():
            lines.append(f"  {category:<20}{format_amount(total, symbol)}")
    return lines
