# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Balance statistics for a date range."""

import logging
from collections import Counter
from collections.abc import Collection, Iterator, Mapping
from dataclasses import dataclass
from datetime import date, timedelta

from flexbalance.config import DEFAULT_WORK_DAY_MINUTES
from flexbalance.exceptions import DataCoverageGap
from flexbalance.models.enums import DayCategory
from flexbalance.services.balance_service import accumulate
from flexbalance.services.calendar_range import DateRange, validate_start
from flexbalance.services.day_classifier import CalendarDay, classify_day
from flexbalance.services.reference_service import WorkEntry, longest_work_day
from flexbalance.services.schedule_service import ScheduleExpectation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatsReport:
    """Result of one balance calculation.

    ``days_off`` counts every DAY_OFF date; ``sick_leave_days`` is the part
    of it booked as sick leave.
    """

    start: date
    end: date
    working_days: int
    weekend_days: int
    days_off: int
    public_holidays: int
    worked_minutes: int
    expected_minutes: int
    start_balance: int
    balance: int
    longest_day: WorkEntry | None = None
    future_days_off: int = 0
    coverage_gaps: tuple[DataCoverageGap, ...] = ()
    sick_leave_days: int = 0
    days_worked: int = 0

    @property
    def total_days(self) -> int:
        return self.working_days + self.weekend_days + self.days_off + self.public_holidays

    @property
    def vacation_days(self) -> int:
        """Days off that are not sick leave."""
        return self.days_off - self.sick_leave_days

    def balance_days(self, work_day_minutes: int = DEFAULT_WORK_DAY_MINUTES) -> int:
        """Whole work days the balance amounts to, truncated toward zero."""
        return int(self.balance / work_day_minutes)


def find_coverage_gaps(
    date_range: DateRange,
    coverage: Mapping[str, DateRange],
) -> list[DataCoverageGap]:
    """Parts of the range each source does not cover."""
    gaps: list[DataCoverageGap] = []
    if date_range.is_empty:
        return gaps
    for source, covered in coverage.items():
        if covered.is_empty:
            gaps.append(DataCoverageGap(source, date_range.start, date_range.end))
            continue
        if date_range.start < covered.start:
            gaps.append(
                DataCoverageGap(
                    source,
                    date_range.start,
                    min(date_range.end, covered.start - timedelta(days=1)),
                )
            )
        if date_range.end > covered.end:
            gaps.append(
                DataCoverageGap(
                    source,
                    max(date_range.start, covered.end + timedelta(days=1)),
                    date_range.end,
                )
            )
    return gaps


def run(
    date_range: DateRange,
    holidays: Collection[date],
    days_off: Collection[date],
    schedule: ScheduleExpectation,
    work_entries: Mapping[date, int],
    start_balance: int = 0,
    coverage: Mapping[str, DateRange] | None = None,
    sick_leave: Collection[date] = (),
) -> StatsReport:
    """Classify every date of the range and compute the balance.

    Args:
        date_range: Dates to evaluate.
        holidays: Public holiday dates.
        days_off: Expanded approved time-off dates.
        schedule: Expected minutes per day.
        work_entries: Logged minutes per date; missing dates count as zero.
        start_balance: Carried-over balance in minutes.
        coverage: Optional covered range per reference source. Uncovered
            parts are reported as gaps and otherwise ignored.
        sick_leave: Expanded sick-leave dates. They classify as days off
            and are also counted separately.

    Returns:
        StatsReport for the range. An empty range yields zero counts and
        the start balance.

    Raises:
        InvalidRangeError: If a non-empty range starts before the minimum
            supported date.
    """
    if not date_range.is_empty:
        validate_start(date_range.start)

    gaps = find_coverage_gaps(date_range, coverage or {})
    for gap in gaps:
        logger.warning(f"Data coverage gap: {gap}")

    absences = set(days_off) | set(sick_leave)
    counts: Counter[DayCategory] = Counter()
    totals = {"worked": 0, "expected": 0, "sick": 0, "days_worked": 0}

    def classified() -> Iterator[tuple[CalendarDay, int]]:
        for day in date_range:
            calendar_day = classify_day(day, holidays, absences, schedule)
            actual = work_entries.get(day, 0)
            counts[calendar_day.category] += 1
            totals["worked"] += actual
            if actual > 0:
                totals["days_worked"] += 1
            if calendar_day.category == DayCategory.WORKING_DAY:
                totals["expected"] += schedule.expected_minutes(day)
            elif calendar_day.category == DayCategory.DAY_OFF and day in sick_leave:
                totals["sick"] += 1
            yield calendar_day, actual

    balance = accumulate(start_balance, classified(), schedule)
    longest = longest_work_day(
        {
            day: minutes
            for day, minutes in work_entries.items()
            if day in date_range and minutes > 0
        }
    )

    # Only booked vacation counts as future days off
    future_days_off = sum(
        1
        for day in days_off
        if day > date_range.end
        and day not in holidays
        and day not in sick_leave
        and schedule.is_working_weekday(day)
    )

    report = StatsReport(
        start=date_range.start,
        end=date_range.end,
        working_days=counts[DayCategory.WORKING_DAY],
        weekend_days=counts[DayCategory.WEEKEND],
        days_off=counts[DayCategory.DAY_OFF],
        public_holidays=counts[DayCategory.PUBLIC_HOLIDAY],
        worked_minutes=totals["worked"],
        expected_minutes=totals["expected"],
        start_balance=start_balance,
        balance=balance,
        longest_day=longest,
        future_days_off=future_days_off,
        coverage_gaps=tuple(gaps),
        sick_leave_days=totals["sick"],
        days_worked=totals["days_worked"],
    )
    logger.info(
        f"Evaluated {report.total_days} days from {report.start} to {report.end}, "
        f"balance {report.balance} min"
    )
    return report
