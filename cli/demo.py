#!/usr/bin/env python3

from argparse import Namespace
from decimal import Decimal
from cli import reports, transactions
from models.date import Date
from models.transaction import EXPENSE, INCOME
from logger import get_logger

logger = get_logger()

# November 2025 sample ledger
DEMO_TRANSACTIONS = [
    (Date(2025, 11, 1), "Food", Decimal("250.50"), "Lunch at Cafe", EXPENSE),
    (Date(2025, 11, 4), "Transport", Decimal("100"), "Uber Ride", EXPENSE),
    (Date(2025, 11, 7), "Food", Decimal("650"), "Groceries", EXPENSE),
    (Date(2025, 11, 10), "Entertainment", Decimal("500"), "Movie Tickets", EXPENSE),
    (Date(2025, 11, 12), "Utilities", Decimal("1500"), "Electricity Bill", EXPENSE),
    (Date(2025, 11, 15), "Salary", Decimal("20000"), "November salary", INCOME),
]


def seed_demo(services):
    """Add the sample transactions to a ledger.

    Returns:
        List of assigned transaction ids.
    """
    return [services.transactions.add(*row) for row in DEMO_TRANSACTIONS]


def cmd_demo(args, services):
    """Seed the sample ledger and run every report against it.

    A ledger that already holds transactions (e.g. from --seed-demo) is
    reported on as-is instead of being seeded a second time.
    """
    if services.queries.transaction_count() == 0:
        logger.info("\n--- ADDING TRANSACTIONS ---")
        for transaction_id in seed_demo(services):
            logger.info(f"✓ Transaction added (ID: {transaction_id})")
    else:
        logger.info(
            f"\nLedger already holds {services.queries.transaction_count()} "
            "transaction(s), skipping sample data"
        )

    transactions.cmd_list(Namespace(), services)
    reports.cmd_stats(Namespace(), services)
    transactions.cmd_category(Namespace(category="Food"), services)
    reports.cmd_summary(Namespace(), services)
    reports.cmd_top(Namespace(n=3), services)
    reports.cmd_search_date(
        Namespace(start=Date(2025, 11, 5), end=Date(2025, 11, 12)), services
    )
    reports.cmd_search_amount(
        Namespace(min=Decimal("100"), max=Decimal("700")), services
    )
    reports.cmd_search_keyword(
        Namespace(keyword="Food", ignore_case=False), services
    )
    reports.cmd_monthly(Namespace(month=Date(2025, 11, 1), type=EXPENSE), services)

    logger.info("\n--- TESTING UNDO ---")
    transactions.cmd_undo(Namespace(), services)
    transactions.cmd_list(Namespace(), services)

    logger.info("\nDemo complete!")


def setup_parser(subparsers):
    """Setup demo command parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    demo_parser = subparsers.add_parser(
        "demo", help="Run all reports against a sample November 2025 ledger"
    )
    demo_parser.set_defaults(func=cmd_demo)
