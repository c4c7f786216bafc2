# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Command line entry point."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
import time
from datetime import date, datetime, timezone
from pathlib import Path

from dotenv import load_dotenv

from flexbalance.config import (
    CACHE_PATH,
    HOLIDAY_COUNTRY,
    HOLIDAY_SUBDIVISION,
    MIN_START_DATE,
    SETTINGS_PATH,
    RunParameters,
)
from flexbalance.database import create_cache_engine, create_session_factory
from flexbalance.exceptions import FlexBalanceError, InvalidRangeError
from flexbalance.integrations.clockify import ClockifyClient
from flexbalance.models.enums import IgnoreKind
from flexbalance.services import (
    cache_service,
    calendar_range,
    extra_settings_service,
    holiday_service,
    reference_service,
    report_formatter,
    schedule_service,
    stats_service,
)
from flexbalance.services.calendar_range import DateRange
from flexbalance.services.stats_service import StatsReport

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def start_date_arg(value: str) -> date:
    """argparse type for --start-date."""
    try:
        return calendar_range.parse_start_date(value)
    except InvalidRangeError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flexbalance",
        description="Calculate your flex time balance from Clockify.",
    )
    parser.add_argument(
        "-i",
        "--include-today",
        action="store_true",
        help="Include today in calculations",
    )
    parser.add_argument("-t", "--token", help="Clockify API token (default: $TOKEN)")
    parser.add_argument(
        "-s",
        "--start-date",
        type=start_date_arg,
        help=f"Start date equal or greater than {MIN_START_DATE} (YYYY-MM-DD)",
    )
    parser.add_argument(
        "-b",
        "--start-balance",
        type=int,
        help="Start balance in minutes (requires --start-date)",
    )
    parser.add_argument(
        "--settings",
        type=Path,
        default=SETTINGS_PATH,
        help=f"Extra settings file (default: {SETTINGS_PATH})",
    )
    parser.add_argument(
        "--cache",
        type=Path,
        default=CACHE_PATH,
        help=f"First date cache file (default: {CACHE_PATH})",
    )
    parser.add_argument(
        "--country",
        default=HOLIDAY_COUNTRY,
        help=f"Public holiday country code (default: {HOLIDAY_COUNTRY})",
    )
    parser.add_argument(
        "--subdivision",
        default=HOLIDAY_SUBDIVISION,
        help="Public holiday subdivision code",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level (default: WARNING)",
    )
    parser.add_argument(
        "--log-output",
        type=Path,
        help="Write logs to this file instead of stderr",
    )
    return parser


def resolve_parameters(argv: list[str] | None = None) -> RunParameters:
    """Parse flags and environment into RunParameters."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.start_balance is not None and args.start_date is None:
        parser.error("--start-balance requires --start-date")

    token = args.token or os.environ.get("TOKEN")
    if not token:
        parser.error(
            "Clockify API token is missing! Add TOKEN=your_token_here to the "
            ".env file or pass it using -t."
        )

    return RunParameters(
        token=token,
        start_date=args.start_date,
        include_today=args.include_today,
        start_balance=args.start_balance or 0,
        settings_path=args.settings,
        cache_path=args.cache,
        holiday_country=args.country,
        holiday_subdivision=args.subdivision,
        log_level=args.log_level,
        log_output=args.log_output,
    )


def setup_logging(params: RunParameters) -> None:
    logging.basicConfig(
        level=getattr(logging, params.log_level),
        format=LOG_FORMAT,
        filename=str(params.log_output) if params.log_output else None,
    )


async def calculate(
    params: RunParameters,
    client: ClockifyClient,
    today: date | None = None,
) -> StatsReport:
    """Fetch everything for one run and compute the report."""
    today = today or datetime.now(timezone.utc).date()

    session_factory = create_session_factory(create_cache_engine(params.cache_path))
    with session_factory() as db:
        cached_first_date = None
        if params.start_date is None:
            cached_first_date = cache_service.get_cached_first_date(db, params.token)
        since = params.start_date or max(cached_first_date or MIN_START_DATE, MIN_START_DATE)
        logger.info(f"Fetching data since {since}")

        all_settings = extra_settings_service.load_extra_settings(params.settings_path)

        started = time.perf_counter()
        user = await client.get_user()
        profile, entries, requests = await asyncio.gather(
            client.get_member_profile(),
            client.get_time_entries(since, today),
            client.get_time_off_requests(),
        )
        logger.info(
            f"{len(entries) + len(requests)} items fetched from Clockify "
            f"({time.perf_counter() - started:.2f} s)"
        )

        settings = extra_settings_service.settings_for_user(all_settings, user.email)
        work_entries = reference_service.work_entries_by_date(entries)
        first_date = reference_service.first_work_date(work_entries)

        start = params.start_date or first_date or since
        date_range = calendar_range.generate(start, params.include_today, today)

        time_off = reference_service.split_time_off(requests)
        days_off = reference_service.apply_ignore_items(
            time_off.days_off, IgnoreKind.DAY_OFF, settings
        )
        sick_leave = reference_service.apply_ignore_items(
            time_off.sick_leave, IgnoreKind.SICK_LEAVE, settings
        )

        # Holidays also cover booked future time off
        holiday_range = DateRange(
            date_range.start, max([date_range.end, *days_off, *sick_leave])
        )
        holidays = reference_service.apply_ignore_items(
            holiday_service.get_public_holidays(
                holiday_range, params.holiday_country, params.holiday_subdivision
            ),
            IgnoreKind.PUBLIC_HOLIDAY,
            settings,
        )

        report = stats_service.run(
            date_range,
            holidays=holidays,
            days_off=days_off,
            sick_leave=sick_leave,
            schedule=schedule_service.build_schedule(profile, settings),
            work_entries=work_entries,
            start_balance=params.start_balance,
            coverage={"time entries": DateRange(since, today)},
        )

        if params.start_date is None and first_date is not None:
            cache_service.set_cached_first_date(db, params.token, first_date)

    return report


async def run_async(params: RunParameters) -> StatsReport:
    async with ClockifyClient(params.token) as client:
        return await calculate(params, client)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    params = resolve_parameters(argv)
    setup_logging(params)

    try:
        report = asyncio.run(run_async(params))
    except FlexBalanceError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if params.start_date is None:
        print(f"You have been working since: {report.start.isoformat()}")
    else:
        print(f"You have been working at least since: {report.start.isoformat()}")
    print(
        report_formatter.format_report(
            report, show_start_balance=params.start_date is not None
        )
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
