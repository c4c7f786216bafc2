# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumerations used across flexbalance."""

from enum import Enum


class DayCategory(str, Enum):
    """Category of a calendar day for balance purposes."""

    WORKING_DAY = "working_day"
    WEEKEND = "weekend"
    DAY_OFF = "day_off"
    PUBLIC_HOLIDAY = "public_holiday"


class TimeOffType(str, Enum):
    """Clockify time-off policy, keyed by the policy name the API reports."""

    DAY_OFF = "Day off"
    SICK_LEAVE = "Sick leave"


class IgnoreKind(str, Enum):
    """Which reference records an ignore item suppresses."""

    PUBLIC_HOLIDAY = "PublicHoliday"
    DAY_OFF = "DayOff"
    SICK_LEAVE = "SickLeave"
