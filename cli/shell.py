#!/usr/bin/env python3

import argparse
import shlex
from cli import reports, transactions
from logger import get_logger

logger = get_logger()

PROMPT = "tally> "
EXIT_COMMANDS = ("quit", "exit")


def build_parser() -> argparse.ArgumentParser:
    """Build the parser used for each line typed into the shell."""
    parser = argparse.ArgumentParser(prog="", add_help=False)
    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        required=True,
    )
    transactions.setup_parser(subparsers)
    reports.setup_parser(subparsers)
    return parser


def run_line(parser, line: str, services) -> None:
    """Parse and execute one shell line.

    Argument errors and command failures end the command, not the session.
    ArithmeticError covers decimal.InvalidOperation raised by amount math.
    """
    try:
        args = parser.parse_args(shlex.split(line))
        args.func(args, services)
    except SystemExit:
        # argparse and the command handlers report their own errors
        pass
    except (ValueError, ArithmeticError) as e:
        logger.error(f"Error: {type(e).__name__}: {e}")


def cmd_shell(args, services, input_func=input):
    """Run an interactive session against one in-memory ledger.

    Args:
        args: Parsed command-line arguments (unused)
        services: Services container holding the session's ledger
        input_func: Line reader, replaceable for testing
    """
    parser = build_parser()
    logger.info("Tally interactive shell. Type 'help' for commands, 'quit' to exit.")

    while True:
        try:
            line = input_func(PROMPT).strip()
        except (EOFError, KeyboardInterrupt):
            break

        if not line:
            continue
        if line in EXIT_COMMANDS:
            break
        if line == "help":
            parser.print_help()
            continue

        run_line(parser, line, services)

    logger.info(
        f"Session ended with {services.queries.transaction_count()} transaction(s)."
    )


def setup_parser(subparsers):
    """Setup shell command parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    shell_parser = subparsers.add_parser(
        "shell", help="Start an interactive session with an in-memory ledger"
    )
    shell_parser.set_defaults(func=cmd_shell)
