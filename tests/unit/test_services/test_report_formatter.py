# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for report_formatter."""

from dataclasses import replace
from datetime import date

import pytest

from flexbalance.exceptions import DataCoverageGap
from flexbalance.services.reference_service import WorkEntry
from flexbalance.services.report_formatter import format_duration, format_report
from flexbalance.services.stats_service import StatsReport


@pytest.fixture
def report() -> StatsReport:
    return StatsReport(
        start=date(2023, 6, 1),
        end=date(2023, 6, 30),
        working_days=20,
        weekend_days=8,
        days_off=3,
        public_holidays=1,
        worked_minutes=9700,
        expected_minutes=9600,
        start_balance=-30,
        balance=70,
        longest_day=WorkEntry(date=date(2023, 6, 6), minutes=600),
        future_days_off=3,
        sick_leave_days=1,
        days_worked=19,
    )


def table_row(text: str, label: str) -> list[str]:
    """Cells of the table row starting with label."""
    for line in text.splitlines():
        cells = [cell.strip() for cell in line.strip("|").split("|")]
        if cells[0] == label:
            return cells
    raise AssertionError(f"No row {label!r}")


@pytest.mark.parametrize(
    ("minutes", "expected"),
    [
        (0, "0 hours"),
        (60, "1 hours"),
        (90, "1 hours, 30 minutes"),
        (-30, "-0 hours, 30 minutes"),
        (-125, "-2 hours, 5 minutes"),
    ],
)
def test_format_duration(minutes, expected):
    assert format_duration(minutes) == expected


def test_format_report_contains_rows(report):
    text = format_report(report)

    assert "Period: 2023-06-01 - 2023-06-30" in text
    assert "Your longest day is 10 hours. You did it on Tuesday, 2023-06-06" in text
    assert "Expected working time" in text
    assert "160 hours" in text
    assert "Work time balance" in text
    assert "1 hours, 10 minutes" in text
    assert "Start balance" not in text


def test_format_report_start_balance(report):
    text = format_report(report, show_start_balance=True)
    assert "Start balance" in text
    assert "-0 hours, 30 minutes" in text


def test_table_rows_are_aligned(report):
    table_lines = [line for line in format_report(report).splitlines() if line.startswith(("|", "+"))]
    assert len({len(line) for line in table_lines}) == 1


def test_format_report_lists_gaps(report):
    gap = DataCoverageGap("time entries", date(2023, 6, 1), date(2023, 6, 4))
    text = format_report(replace(report, coverage_gaps=(gap,)))
    assert "Warning: time entries has no data for 2023-06-01 - 2023-06-04" in text


def test_sick_leave_has_its_own_row(report):
    text = format_report(report)
    assert table_row(text, "Days off") == ["Days off", "2", ""]
    assert table_row(text, "Sick leave") == ["Sick leave", "1", ""]


def test_total_working_time_shows_days_worked(report):
    assert table_row(format_report(report), "Total working time") == [
        "Total working time",
        "19",
        "161 hours, 40 minutes",
    ]
