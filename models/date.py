"""Calendar-agnostic date value used for ledger entries."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, order=True)
class Date:
    """A day/month/year triple ordered by year, then month, then day.

    No calendar validation is performed: ``Date(2025, 2, 31)`` is a valid
    value and sorts after ``Date(2025, 2, 30)``.

    Attributes:
        year: Four-digit year.
        month: Month number (1-12 expected, not enforced).
        day: Day of month (not enforced).
    """

    # Field order drives the generated ordering
    year: int
    month: int
    day: int

    @classmethod
    def from_date(cls, value: date) -> "Date":
        """Build a Date from a ``datetime.date``."""
        return cls(year=value.year, month=value.month, day=value.day)

    @classmethod
    def today(cls) -> "Date":
        """Get today's date."""
        return cls.from_date(date.today())

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"
