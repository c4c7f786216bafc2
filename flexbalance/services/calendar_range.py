# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Date range generation for the balance calculation."""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from flexbalance.config import MIN_START_DATE
from flexbalance.exceptions import InvalidRangeError


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of consecutive calendar dates.

    A range whose end precedes its start is empty. Iterating is restartable.
    """

    start: date
    end: date

    def __iter__(self) -> Iterator[date]:
        current = self.start
        while current <= self.end:
            yield current
            current += timedelta(days=1)

    def __len__(self) -> int:
        return max((self.end - self.start).days + 1, 0)

    def __contains__(self, day: object) -> bool:
        return isinstance(day, date) and self.start <= day <= self.end

    @property
    def is_empty(self) -> bool:
        return self.end < self.start

    @property
    def years(self) -> range:
        """Calendar years the range touches."""
        if self.is_empty:
            return range(0)
        return range(self.start.year, self.end.year + 1)


def validate_start(start: date) -> date:
    """Reject start dates the service cannot serve."""
    if start < MIN_START_DATE:
        raise InvalidRangeError(
            f"Start date {start} is before the minimum supported date {MIN_START_DATE}"
        )
    return start


def parse_start_date(value: str) -> date:
    """Parse a YYYY-MM-DD start date and validate it.

    Raises:
        InvalidRangeError: If the text is not a date or is too early.
    """
    try:
        parsed = datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError as e:
        raise InvalidRangeError(
            f"Invalid date {value!r}, expected YYYY-MM-DD"
        ) from e
    return validate_start(parsed)


def generate(start: date, include_today: bool, today: date) -> DateRange:
    """Build the range of dates to evaluate.

    Args:
        start: First date, inclusive.
        include_today: Whether today is part of the range.
        today: The current date.

    Returns:
        DateRange ending today or yesterday. Empty when the end precedes start.

    Raises:
        InvalidRangeError: If start is before the minimum supported date.
    """
    validate_start(start)
    end = today if include_today else today - timedelta(days=1)
    return DateRange(start=start, end=end)
