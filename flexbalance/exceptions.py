# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Exceptions raised by flexbalance."""

from dataclasses import dataclass
from datetime import date


class FlexBalanceError(Exception):
    """Base exception for flexbalance errors."""


class InvalidRangeError(FlexBalanceError):
    """Start date is unparsable or precedes the minimum supported date."""


class ClockifyError(FlexBalanceError):
    """Clockify API call failed or returned an unexpected payload."""


class SettingsError(FlexBalanceError):
    """Extra settings file could not be parsed."""


@dataclass(frozen=True)
class DataCoverageGap:
    """Part of the requested range that a reference source does not cover.

    Advisory only: uncovered dates are treated as working days.
    """

    source: str
    start: date
    end: date

    def __str__(self) -> str:
        return f"{self.source} has no data for {self.start} - {self.end}"
