from dataclasses import dataclass, replace
from datetime import date
from typing import Optional

from src.utils.date_parsing import parse_date_input


@dataclass(frozen=True)
class DateRange:
    """
    Inclusive calendar-date range used to filter players.

    Attributes:
        start: First day to include, or None for no lower bound
        end: Last day to include, or None for no upper bound
    """
    start: Optional[date] = None
    end: Optional[date] = None

    @classmethod
    def from_strings(cls, start: Optional[str] = "", end: Optional[str] = "") -> "DateRange":
        """Build a range from date input values ("YYYY-MM-DD" or empty)."""
        return cls(start=parse_date_input(start), end=parse_date_input(end))

    @property
    def is_active(self) -> bool:
        return self.start is not None or self.end is not None

    def with_start(self, start: Optional[date]) -> "DateRange":
        return replace(self, start=start)

    def with_end(self, end: Optional[date]) -> "DateRange":
        return replace(self, end=end)

    def cleared(self) -> "DateRange":
        return DateRange()

    def describe(self) -> str:
        start = self.start.isoformat() if self.start else "…"
        end = self.end.isoformat() if self.end else "…"
        return f"{start} → {end}"
