"""Calendar dates as used by the library records, with simple day arithmetic."""

from __future__ import annotations

from dataclasses import dataclass

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


@dataclass
class Date:
    """A day/month/year triple; all parts default to zero."""

    day: int = 0
    month: int = 0
    year: int = 0

    def format(self) -> str:
        """Render as ``day/month/year`` without zero padding."""
        return f"{self.day}/{self.month}/{self.year}"

    def __str__(self) -> str:
        return self.format()

    @classmethod
    def parse(cls, text: str) -> "Date":
        """Parse a ``day/month/year`` string."""
        parts = text.strip().split("/")
        if len(parts) != 3:
            raise ValueError(f"invalid date: {text!r}")
        try:
            day, month, year = (int(part.strip()) for part in parts)
        except ValueError as exc:
            raise ValueError(f"invalid date: {text!r}") from exc
        return cls(day=day, month=month, year=year)


def total_days(date: Date) -> int:
    """Count days from a fixed origin, treating every fourth year as a leap year."""
    total = date.year * 365 + date.day
    total += sum(_DAYS_IN_MONTH[: max(date.month - 1, 0)])
    if date.month > 2 and date.year % 4 == 0:
        total += 1
    return total


def days_between(start: Date, end: Date) -> int:
    """Number of days from ``start`` to ``end``; negative if ``end`` is earlier."""
    return total_days(end) - total_days(start)