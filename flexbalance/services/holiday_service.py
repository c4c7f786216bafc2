# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Public holidays for the requested range."""

import logging
from datetime import date

import holidays

from flexbalance.exceptions import FlexBalanceError
from flexbalance.services.calendar_range import DateRange

logger = logging.getLogger(__name__)


def get_public_holidays(
    date_range: DateRange,
    country: str,
    subdivision: str | None = None,
) -> set[date]:
    """Get public holiday dates inside the range.

    Args:
        date_range: Range to cover.
        country: ISO country code (e.g., "FI").
        subdivision: Optional state/region code.

    Returns:
        Set of holiday dates within the range.

    Raises:
        FlexBalanceError: If the country or subdivision is not supported.
    """
    if date_range.is_empty:
        return set()

    try:
        country_holidays = holidays.country_holidays(
            country, subdiv=subdivision, years=date_range.years
        )
    except NotImplementedError as e:
        raise FlexBalanceError(
            f"No public holidays available for country {country!r}"
        ) from e

    found = {day for day in country_holidays if day in date_range}
    logger.debug(f"{len(found)} public holidays in {country} for {date_range}")
    return found
