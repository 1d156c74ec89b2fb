#!/usr/bin/env python3
"""
Tally CLI - In-memory personal finance ledger.

Usage:
    python -m cli [--seed-demo] <command> [options]

Every invocation starts from an empty ledger (or the sample ledger with
--seed-demo); use the shell command to keep a ledger for a whole session.

Commands:
    add, delete, undo     Change the ledger
    list, category        List transactions
    summary, top, stats   Reports
    search-date, search-amount, search-keyword
    monthly, period       Monthly totals
    demo                  Run every report against the sample ledger
    shell                 Interactive session

Examples:
    python -m cli demo
    python -m cli --seed-demo top -n 3
    python -m cli --seed-demo monthly 2025/11 --type Expense
    python -m cli shell
"""

import sys
import argparse
from cli import demo, reports, shell, transactions
from config import load_config
from services.base import Services
from logger import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tally",
        description="Tally - In-memory personal finance ledger",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--seed-demo",
        action="store_true",
        help="Start from the sample November 2025 ledger",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    # Register each command's subparser
    transactions.setup_parser(subparsers)
    reports.setup_parser(subparsers)
    demo.setup_parser(subparsers)
    shell.setup_parser(subparsers)

    return parser


def main():
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args()

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config)

            # One ledger per process
            services = Services(config)
            if args.seed_demo:
                demo.seed_demo(services)

            args.func(args, services)
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
