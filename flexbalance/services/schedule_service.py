# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Expected working minutes per day."""

import logging
from dataclasses import dataclass, field
from datetime import date

from flexbalance.config import DEFAULT_WORK_DAY_MINUTES, DEFAULT_WORKING_WEEKDAYS
from flexbalance.schemas.clockify import MemberProfile
from flexbalance.schemas.extra_settings import ExtraSettings

logger = logging.getLogger(__name__)

WEEKDAY_NAMES = (
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
    "SUNDAY",
)


@dataclass(frozen=True)
class ScheduleOverride:
    """Expected minutes for working weekdays inside an inclusive date span."""

    start: date
    end: date
    minutes: int


@dataclass(frozen=True)
class ScheduleExpectation:
    """Expected minutes per weekday (Monday first) plus date-span overrides.

    A weekday with zero expected minutes is a non-working weekday.
    """

    weekday_minutes: tuple[int, int, int, int, int, int, int]
    overrides: tuple[ScheduleOverride, ...] = field(default_factory=tuple)

    def is_working_weekday(self, day: date) -> bool:
        return self.weekday_minutes[day.weekday()] > 0

    def expected_minutes(self, day: date) -> int:
        if not self.is_working_weekday(day):
            return 0
        for override in self.overrides:
            if override.start <= day <= override.end:
                return override.minutes
        return self.weekday_minutes[day.weekday()]


def default_schedule() -> ScheduleExpectation:
    """7.5 hours Monday to Friday."""
    return ScheduleExpectation(
        weekday_minutes=tuple(
            DEFAULT_WORK_DAY_MINUTES if wd in DEFAULT_WORKING_WEEKDAYS else 0
            for wd in range(7)
        )
    )


def build_schedule(
    profile: MemberProfile | None,
    settings: ExtraSettings | None = None,
) -> ScheduleExpectation:
    """Build the schedule from the member profile and the user's overrides.

    Missing or zero profile values fall back to the default 7.5 h
    Monday-Friday week.
    """
    day_minutes = DEFAULT_WORK_DAY_MINUTES
    working_weekdays = set(DEFAULT_WORKING_WEEKDAYS)

    if profile is not None:
        if profile.work_capacity:
            day_minutes = int(profile.work_capacity.total_seconds() // 60)
        if profile.working_days is not None:
            working_weekdays = {
                WEEKDAY_NAMES.index(name.upper())
                for name in profile.working_days
                if name.upper() in WEEKDAY_NAMES
            }

    overrides: tuple[ScheduleOverride, ...] = ()
    if settings is not None:
        overrides = tuple(
            ScheduleOverride(
                start=item.date_start,
                end=item.date_end,
                minutes=item.minutes_per_day,
            )
            for item in settings.expected_working_hours
        )

    schedule = ScheduleExpectation(
        weekday_minutes=tuple(
            day_minutes if wd in working_weekdays else 0 for wd in range(7)
        ),
        overrides=overrides,
    )
    logger.debug(
        f"Schedule: {schedule.weekday_minutes} with {len(overrides)} overrides"
    )
    return schedule
