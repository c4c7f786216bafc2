# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Flex balance accumulation."""

from collections.abc import Iterable

from flexbalance.models.enums import DayCategory
from flexbalance.services.day_classifier import CalendarDay
from flexbalance.services.schedule_service import ScheduleExpectation


def day_delta(day: CalendarDay, actual_minutes: int, schedule: ScheduleExpectation) -> int:
    """Balance change contributed by one day.

    Working days are measured against the schedule; any time logged on
    weekends, days off and public holidays counts in full.
    """
    if day.category == DayCategory.WORKING_DAY:
        return actual_minutes - schedule.expected_minutes(day.date)
    return actual_minutes


def accumulate(
    start_balance: int,
    days: Iterable[tuple[CalendarDay, int | None]],
    schedule: ScheduleExpectation,
) -> int:
    """Fold classified days into the final balance.

    Args:
        start_balance: Carried-over balance in minutes (may be negative).
        days: (day, actual minutes) pairs in chronological order. None
            minutes count as zero.
        schedule: Expected minutes per working day.

    Returns:
        The balance in minutes.

    Raises:
        ValueError: If the days are not in strictly ascending order. Input
            built from a DateRange never trips this; it only catches callers
            passing unordered or duplicated days.
    """
    balance = start_balance
    previous = None
    for day, actual_minutes in days:
        if previous is not None and day.date <= previous:
            raise ValueError(f"Day {day.date} is not after {previous}")
        previous = day.date
        balance += day_delta(day, actual_minutes or 0, schedule)
    return balance
