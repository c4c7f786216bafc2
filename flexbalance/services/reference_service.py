# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Turn Clockify payloads into the date sets and mappings the core consumes."""

import logging
from collections import defaultdict
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date, timedelta

from flexbalance.models.enums import IgnoreKind, TimeOffType
from flexbalance.schemas.clockify import TimeEntry, TimeOffRequest
from flexbalance.schemas.extra_settings import ExtraSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkEntry:
    """Minutes logged on one date."""

    date: date
    minutes: int


@dataclass(frozen=True)
class TimeOffDates:
    """Expanded time-off dates, split by policy."""

    days_off: frozenset[date]
    sick_leave: frozenset[date]

    @property
    def all_dates(self) -> frozenset[date]:
        return self.days_off | self.sick_leave


def expand_time_off(requests: Iterable[TimeOffRequest]) -> set[date]:
    """Expand multi-day requests into one entry per date (inclusive)."""
    dates: set[date] = set()
    for request in requests:
        current = request.start
        while current <= request.end:
            dates.add(current)
            current += timedelta(days=1)
    return dates


def split_time_off(requests: Iterable[TimeOffRequest]) -> TimeOffDates:
    """Expand requests and split them into day-off and sick-leave dates."""
    requests = list(requests)
    return TimeOffDates(
        days_off=frozenset(
            expand_time_off(r for r in requests if r.policy_name == TimeOffType.DAY_OFF)
        ),
        sick_leave=frozenset(
            expand_time_off(
                r for r in requests if r.policy_name == TimeOffType.SICK_LEAVE
            )
        ),
    )


def apply_ignore_items(
    dates: Iterable[date],
    kind: IgnoreKind,
    settings: ExtraSettings | None,
) -> set[date]:
    """Drop dates the user's settings say to ignore for this kind of record."""
    kept: set[date] = set()
    for day in dates:
        if settings is not None and settings.is_ignored(day, kind):
            logger.info(f"Ignore {kind.value} on {day}")
            continue
        kept.add(day)
    return kept


def work_entries_by_date(entries: Iterable[TimeEntry]) -> dict[date, int]:
    """Sum logged time per start date, in whole minutes."""
    seconds: dict[date, int] = defaultdict(int)
    for entry in entries:
        seconds[entry.entry_date] += entry.duration_seconds
    return {day: total // 60 for day, total in sorted(seconds.items())}


def first_work_date(work_entries: Mapping[date, int]) -> date | None:
    """Earliest date with logged time."""
    logged = [day for day, minutes in work_entries.items() if minutes > 0]
    return min(logged) if logged else None


def longest_work_day(work_entries: Mapping[date, int]) -> WorkEntry | None:
    """Date with the most logged minutes; the earliest wins a tie."""
    if not work_entries:
        return None
    day, minutes = max(
        sorted(work_entries.items()), key=lambda item: item[1]
    )
    return WorkEntry(date=day, minutes=minutes)
