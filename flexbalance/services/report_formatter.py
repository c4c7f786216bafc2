# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Plain-text rendering of a StatsReport."""

from flexbalance.config import DEFAULT_WORK_DAY_MINUTES
from flexbalance.services.stats_service import StatsReport

HEADERS = ("Item", "Days", "Hours & minutes")


def format_duration(minutes: int) -> str:
    """Render minutes as 'H hours, M minutes', keeping the sign."""
    sign = "-" if minutes < 0 else ""
    hours, rest = divmod(abs(minutes), 60)
    if rest:
        return f"{sign}{hours} hours, {rest} minutes"
    return f"{sign}{hours} hours"


def _render_table(rows: list[tuple[str, str, str]]) -> str:
    widths = [max(len(row[i]) for row in [HEADERS, *rows]) for i in range(3)]

    def line(cells: tuple[str, str, str]) -> str:
        return "| " + " | ".join(c.ljust(w) for c, w in zip(cells, widths)) + " |"

    separator = "+-" + "-+-".join("-" * w for w in widths) + "-+"
    return "\n".join([separator, line(HEADERS), separator, *map(line, rows), separator])


def format_report(
    report: StatsReport,
    show_start_balance: bool = False,
    work_day_minutes: int = DEFAULT_WORK_DAY_MINUTES,
) -> str:
    """Build the text printed at the end of a run."""
    lines = []
    if report.longest_day is not None:
        longest = report.longest_day
        lines.append(
            f"Your longest day is {format_duration(longest.minutes)}. "
            f"You did it on {longest.date:%A}, {longest.date.isoformat()}"
        )

    rows = [
        ("Public holidays", str(report.public_holidays), ""),
        ("Days off", str(report.vacation_days), ""),
        ("Sick leave", str(report.sick_leave_days), ""),
        ("Future days off", str(report.future_days_off), ""),
        ("Weekend days", str(report.weekend_days), ""),
        (
            "Expected working time",
            str(report.working_days),
            format_duration(report.expected_minutes),
        ),
        (
            "Total working time",
            str(report.days_worked),
            format_duration(report.worked_minutes),
        ),
    ]
    if show_start_balance:
        rows.append(("Start balance", "", format_duration(report.start_balance)))
    rows.append(
        (
            "Work time balance",
            f"{report.balance_days(work_day_minutes)}+",
            format_duration(report.balance),
        )
    )

    lines.append(f"Period: {report.start.isoformat()} - {report.end.isoformat()}")
    lines.append(_render_table(rows))
    for gap in report.coverage_gaps:
        lines.append(f"Warning: {gap}")
    return "\n".join(lines)
