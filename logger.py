"""Logging configuration for Tally.

CLI output goes to the console through the "tally" logger. A dated log
file under ``Config.log_dir`` is added only when ``Config.log_to_file``
is set; the ledger itself is never written to disk.
"""

import logging
from datetime import date
from pathlib import Path
from config import Config

LOGGER_NAME = "tally"

_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_CONSOLE_FORMAT = "%(levelname)s - %(message)s"


def get_log_file_path(config: Config) -> Path:
    """Get today's log file path (tally-YYYY-MM-DD.log in log_dir)."""
    return config.log_dir / f"{LOGGER_NAME}-{date.today().isoformat()}.log"


def setup_logging(config: Config) -> logging.Logger:
    """Set up the tally logger from configuration.

    Safe to call more than once; earlier handlers are closed and replaced.

    Args:
        config: Application configuration containing log settings.

    Returns:
        Configured logger instance.
    """
    level = config.log_level.upper()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    if config.log_to_file:
        config.log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(get_log_file_path(config), encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(file_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger.

    Returns:
        The tally logger instance.
    """
    return logging.getLogger(LOGGER_NAME)
