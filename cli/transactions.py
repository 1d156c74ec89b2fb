#!/usr/bin/env python3

import sys
from cli.formatting import render_category, render_transactions
from cli.parsing import parse_amount, parse_date
from models.date import Date
from models.transaction import EXPENSE, TRANSACTION_TYPES
from models.undo import INSERTION
from logger import get_logger

logger = get_logger()


def _emit(lines):
    for line in lines:
        logger.info(line)


def cmd_add(args, services):
    """Add a transaction.

    Args:
        args: Parsed command-line arguments with date, category, amount,
              description and type
        services: Services container with the transactions service
    """
    transaction_date = args.date or Date.today()

    transaction_id = services.transactions.add(
        transaction_date, args.category, args.amount, args.description, args.type
    )
    logger.info(f"✓ Transaction added (ID: {transaction_id})")


def cmd_delete(args, services):
    """Delete a transaction by ID."""
    transaction_id = args.transaction_id

    if not services.transactions.delete(transaction_id):
        logger.error(f"Transaction with ID {transaction_id} not found.")
        sys.exit(1)

    logger.info(f"✓ Transaction (ID: {transaction_id}) deleted.")


def cmd_undo(args, services):
    """Undo the most recent add or delete."""
    if not services.transactions.can_undo:
        logger.warning("No operation to undo.")
        return

    entry = services.transactions.undo()

    if entry.kind == INSERTION:
        logger.info(
            f"✓ Undo performed: added transaction {entry.transaction.id} is now removed."
        )
    else:
        logger.info(
            f"✓ Undo performed: deleted transaction {entry.transaction.id} is now restored."
        )
    logger.info(f"  {services.transactions.undo_depth} more operation(s) can be undone")


def cmd_list(args, services):
    """List all transactions."""
    transactions = services.queries.all()

    if not transactions:
        logger.info("No transactions.")
        return

    _emit(render_transactions(transactions, services.config.currency_symbol))
    logger.info(f"\nTotal transactions: {len(transactions)}")


def cmd_category(args, services):
    """List transactions in one category."""
    transactions = services.queries.by_category(args.category)

    if not transactions:
        logger.info(f"No transactions in category: {args.category}")
        return

    _emit(
        render_category(
            args.category, transactions, services.config.currency_symbol
        )
    )


def setup_parser(subparsers):
    """Setup transaction commands.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    # add
    add_parser = subparsers.add_parser(
        "add",
        help="Add a transaction",
        epilog="""
Examples:
  add --date 2025/11/01 --category Food --amount 250.50 --description "Lunch at Cafe"
  add --category Salary --amount 20000 --description "November salary" --type Income
        """,
    )
    add_parser.add_argument(
        "--date",
        type=parse_date,
        help="Transaction date in YYYY/MM/DD format (default: today)",
    )
    add_parser.add_argument("--category", required=True, help="Category name")
    add_parser.add_argument(
        "--amount", type=parse_amount, required=True, help="Transaction amount"
    )
    add_parser.add_argument("--description", default="", help="Description")
    add_parser.add_argument(
        "--type",
        choices=TRANSACTION_TYPES,
        default=EXPENSE,
        help=f"Transaction type (default: {EXPENSE})",
    )
    add_parser.set_defaults(func=cmd_add)

    # delete
    delete_parser = subparsers.add_parser("delete", help="Delete a transaction by ID")
    delete_parser.add_argument(
        "transaction_id",
        type=int,
        help="ID of the transaction to delete",
    )
    delete_parser.set_defaults(func=cmd_delete)

    # undo
    undo_parser = subparsers.add_parser(
        "undo", help="Undo the last add or delete"
    )
    undo_parser.set_defaults(func=cmd_undo)

    # list
    list_parser = subparsers.add_parser("list", help="List all transactions")
    list_parser.set_defaults(func=cmd_list)

    # category
    category_parser = subparsers.add_parser(
        "category", help="List transactions in a category"
    )
    category_parser.add_argument("category", help="Category name (case-sensitive)")
    category_parser.set_defaults(func=cmd_category)
