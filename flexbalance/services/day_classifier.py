# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Calendar day classification."""

from collections.abc import Container
from dataclasses import dataclass
from datetime import date

from flexbalance.models.enums import DayCategory
from flexbalance.services.schedule_service import ScheduleExpectation


@dataclass(frozen=True)
class CalendarDay:
    """A date tagged with exactly one category."""

    date: date
    category: DayCategory


def classify(
    day: date,
    holidays: Container[date],
    days_off: Container[date],
    schedule: ScheduleExpectation,
) -> DayCategory:
    """Assign a single category to a date.

    Priority (highest to lowest):
    1. Public holiday - organisation-wide, overrides personal leave
    2. Day off - approved personal absence
    3. Weekend - weekday with no expected work in the schedule
    4. Working day

    Dates missing from both sets are never an error; they fall through
    to the schedule.
    """
    if day in holidays:
        return DayCategory.PUBLIC_HOLIDAY
    if day in days_off:
        return DayCategory.DAY_OFF
    if not schedule.is_working_weekday(day):
        return DayCategory.WEEKEND
    return DayCategory.WORKING_DAY


def classify_day(
    day: date,
    holidays: Container[date],
    days_off: Container[date],
    schedule: ScheduleExpectation,
) -> CalendarDay:
    return CalendarDay(date=day, category=classify(day, holidays, days_off, schedule))
