# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Configuration constants and the resolved run parameters."""

import os
from dataclasses import dataclass
from datetime import date
from pathlib import Path

# Clockify API base URL (token goes into the x-api-key header)
CLOCKIFY_API_URL = "https://global.api.clockify.me/"

# The service does not serve data from before this date
MIN_START_DATE = date(2023, 1, 1)

# Default work day: 7.5 hours
DEFAULT_WORK_DAY_MINUTES = 450

# Monday = 0 ... Sunday = 6
DEFAULT_WORKING_WEEKDAYS = frozenset({0, 1, 2, 3, 4})

# The timesheet endpoint rejects queries longer than 999 hours
TIME_ENTRY_CHUNK_DAYS = 41

TIME_OFF_PAGE_SIZE = 500

HTTP_TIMEOUT_SECONDS = 30.0

SETTINGS_PATH = Path(os.environ.get("FLEXBALANCE_SETTINGS", ".settings.json"))
CACHE_PATH = Path(os.environ.get("FLEXBALANCE_CACHE", ".flexbalance.db"))
HOLIDAY_COUNTRY = os.environ.get("FLEXBALANCE_COUNTRY", "FI")
HOLIDAY_SUBDIVISION = os.environ.get("FLEXBALANCE_SUBDIVISION") or None


@dataclass(frozen=True)
class RunParameters:
    """Everything one run needs, resolved once from flags and environment."""

    token: str
    start_date: date | None = None
    include_today: bool = False
    start_balance: int = 0
    settings_path: Path = SETTINGS_PATH
    cache_path: Path = CACHE_PATH
    holiday_country: str = HOLIDAY_COUNTRY
    holiday_subdivision: str | None = HOLIDAY_SUBDIVISION
    log_level: str = "WARNING"
    log_output: Path | None = None
