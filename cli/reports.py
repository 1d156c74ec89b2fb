#!/usr/bin/env python3

import sys
from cli.formatting import (
    format_amount,
    render_category_summary,
    render_period_summary,
    render_search_results,
    render_statistics,
    render_top_expenses,
)
from cli.parsing import parse_amount, parse_date, parse_month
from models.transaction import TRANSACTION_TYPES
from tools.reports import get_period_summary
from logger import get_logger

logger = get_logger()


def _emit(lines):
    for line in lines:
        logger.info(line)


def _emit_search_results(title, transactions, symbol, empty_message):
    if not transactions:
        logger.info(empty_message)
        return
    _emit(render_search_results(title, transactions, symbol))


def cmd_summary(args, services):
    """Show expense totals per category."""
    summary = services.queries.category_summary()

    if not summary:
        logger.info("No categories.")
        return

    _emit(render_category_summary(summary, services.config.currency_symbol))


def cmd_top(args, services):
    """Show the largest expenses."""
    n = args.n if args.n is not None else services.config.top_expenses
    ranked = services.queries.top_expenses(n)

    if not ranked:
        logger.info("No expenses found.")
        return

    _emit(render_top_expenses(ranked, services.config.currency_symbol))


def cmd_search_date(args, services):
    """Search transactions by inclusive date range."""
    transactions = services.queries.search_by_date_range(args.start, args.end)
    _emit_search_results(
        f"TRANSACTIONS FROM {args.start} TO {args.end}",
        transactions,
        services.config.currency_symbol,
        "No transactions found in this date range.",
    )


def cmd_search_amount(args, services):
    """Search transactions by inclusive amount range."""
    symbol = services.config.currency_symbol

    if args.min > args.max:
        logger.error("Minimum amount must not exceed maximum amount")
        sys.exit(1)

    transactions = services.queries.search_by_amount_range(args.min, args.max)
    _emit_search_results(
        f"TRANSACTIONS IN AMOUNT RANGE: "
        f"{format_amount(args.min, symbol)} - {format_amount(args.max, symbol)}",
        transactions,
        symbol,
        "No transactions found in this amount range.",
    )


def cmd_search_keyword(args, services):
    """Search transaction descriptions for a keyword."""
    transactions = services.queries.search_by_keyword(
        args.keyword, ignore_case=args.ignore_case
    )
    _emit_search_results(
        f'SEARCH RESULTS FOR: "{args.keyword}"',
        transactions,
        services.config.currency_symbol,
        f"No transactions found with keyword: {args.keyword}",
    )


def cmd_monthly(args, services):
    """Show the total for one month."""
    month = args.month
    total = services.queries.monthly_total(month.month, month.year, args.type)

    label = f"Total {args.type}" if args.type else "Total"
    logger.info(
        f"{label} in {month.year:04d}/{month.month:02d}: "
        f"{format_amount(total, services.config.currency_symbol)}"
    )


def cmd_period(args, services):
    """Show a month-by-month summary for a period."""
    if args.end < args.start:
        logger.error("End month must not be before start month")
        sys.exit(1)

    summary = get_period_summary(services, args.start, args.end)
    _emit(render_period_summary(summary, services.config.currency_symbol))


def cmd_stats(args, services):
    """Show ledger statistics."""
    stats = services.queries.statistics()
    _emit(render_statistics(stats, services.config.currency_symbol))


def setup_parser(subparsers):
    """Setup report commands.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    summary_parser = subparsers.add_parser(
        "summary", help="Show expense totals per category (income excluded)"
    )
    summary_parser.set_defaults(func=cmd_summary)

    top_parser = subparsers.add_parser("top", help="Show the largest expenses")
    top_parser.add_argument(
        "-n",
        type=int,
        default=None,
        help="Number of expenses to show (default: from config)",
    )
    top_parser.set_defaults(func=cmd_top)

    search_date_parser = subparsers.add_parser(
        "search-date",
        help="Search transactions by date range",
        epilog="""
Examples:
  search-date 2025/11/05 2025/11/12
        """,
    )
    search_date_parser.add_argument(
        "start", type=parse_date, help="Start date in YYYY/MM/DD format (inclusive)"
    )
    search_date_parser.add_argument(
        "end", type=parse_date, help="End date in YYYY/MM/DD format (inclusive)"
    )
    search_date_parser.set_defaults(func=cmd_search_date)

    search_amount_parser = subparsers.add_parser(
        "search-amount", help="Search transactions by amount range"
    )
    search_amount_parser.add_argument(
        "min", type=parse_amount, help="Minimum amount (inclusive)"
    )
    search_amount_parser.add_argument(
        "max", type=parse_amount, help="Maximum amount (inclusive)"
    )
    search_amount_parser.set_defaults(func=cmd_search_amount)

    search_keyword_parser = subparsers.add_parser(
        "search-keyword", help="Search transaction descriptions"
    )
    search_keyword_parser.add_argument("keyword", help="Substring to look for")
    search_keyword_parser.add_argument(
        "--ignore-case",
        action="store_true",
        help="Match regardless of case (default: case-sensitive)",
    )
    search_keyword_parser.set_defaults(func=cmd_search_keyword)

    monthly_parser = subparsers.add_parser(
        "monthly",
        help="Show the total for a month",
        epilog="""
Examples:
  monthly 2025/11 --type Expense
        """,
    )
    monthly_parser.add_argument(
        "month", type=parse_month, help="Month in YYYY/MM format"
    )
    monthly_parser.add_argument(
        "--type",
        choices=TRANSACTION_TYPES,
        help="Only count transactions of this type",
    )
    monthly_parser.set_defaults(func=cmd_monthly)

    period_parser = subparsers.add_parser(
        "period", help="Show a month-by-month summary for a period"
    )
    period_parser.add_argument(
        "start", type=parse_month, help="First month in YYYY/MM format"
    )
    period_parser.add_argument(
        "end", type=parse_month, help="Last month in YYYY/MM format"
    )
    period_parser.set_defaults(func=cmd_period)

    stats_parser = subparsers.add_parser("stats", help="Show ledger statistics")
    stats_parser.set_defaults(func=cmd_stats)
