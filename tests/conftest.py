"""Shared pytest fixtures for all tests."""

from decimal import Decimal

import pytest

from config import Config
from models.date import Date
from models.transaction import EXPENSE, INCOME
from services.base import Services

NOVEMBER_2025 = [
    (Date(2025, 11, 1), "Food", Decimal("250.50"), "Lunch at Cafe", EXPENSE),
    (Date(2025, 11, 4), "Transport", Decimal("100"), "Uber Ride", EXPENSE),
    (Date(2025, 11, 7), "Food", Decimal("650"), "Groceries", EXPENSE),
    (Date(2025, 11, 10), "Entertainment", Decimal("500"), "Movie Tickets", EXPENSE),
    (Date(2025, 11, 12), "Utilities", Decimal("1500"), "Electricity Bill", EXPENSE),
    (Date(2025, 11, 15), "Salary", Decimal("20000"), "November salary", INCOME),
]


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to temporary directories.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "tally",
        log_level="DEBUG",
        log_dir=tmp_path / "tally" / "logs",
        log_to_file=True,
        currency_symbol="₹",
        top_expenses=5,
    )


@pytest.fixture
def services(test_config):
    """Create a Services container with an empty ledger.

    Args:
        test_config: Test configuration fixture.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_config)


@pytest.fixture
def november_services(services):
    """Services container seeded with the November 2025 sample ledger.

    Ids 1-6 are assigned in the order of NOVEMBER_2025.
    """
    for row in NOVEMBER_2025:
        services.transactions.add(*row)
    return services
