"""Type definitions for retention planning.

- DatePattern: which date layout index names carry
- ExtractedDate: the calendar month an index belongs to
- Candidate: an index that is old enough to be deleted
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class DatePattern(str, Enum):
    """Date layout encoded at the end of index names."""

    MONTH = "month"  # YYYY-MM or YYYY.MM
    WEEK = "week"  # YYYY-W or YYYY-WW (ISO week)


@dataclass(frozen=True, order=True)
class ExtractedDate:
    """First day of the month an index belongs to, as (year, month)."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.year <= 9999:
            raise ValueError(f"year must be in 1..9999, got {self.year}")
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be in 1..12, got {self.month}")

    @classmethod
    def from_date(cls, value: date) -> "ExtractedDate":
        """Truncate a calendar date to its month."""
        return cls(value.year, value.month)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True)
class Candidate:
    """An index whose age exceeds the threshold.

    Attributes:
        index: Index name as listed by the store.
        date: Month the index belongs to.
        age_months: Whole months between that month and today.
    """

    index: str
    date: ExtractedDate
    age_months: int
