# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for holiday_service."""

from datetime import date

import pytest

from flexbalance.exceptions import FlexBalanceError
from flexbalance.services.calendar_range import DateRange
from flexbalance.services.holiday_service import get_public_holidays


def test_finnish_holidays_in_range():
    found = get_public_holidays(DateRange(date(2023, 12, 1), date(2023, 12, 31)), "FI")
    assert date(2023, 12, 6) in found
    assert date(2023, 12, 25) in found
    assert all(date(2023, 12, 1) <= d <= date(2023, 12, 31) for d in found)


def test_spans_years():
    found = get_public_holidays(DateRange(date(2023, 12, 20), date(2024, 1, 10)), "FI")
    assert date(2023, 12, 25) in found
    assert date(2024, 1, 1) in found
    assert date(2024, 1, 6) in found


def test_subdivision():
    found = get_public_holidays(DateRange(date(2024, 12, 1), date(2024, 12, 31)), "AT", "9")
    assert date(2024, 12, 25) in found


def test_empty_range():
    assert get_public_holidays(DateRange(date(2023, 6, 2), date(2023, 6, 1)), "FI") == set()


def test_unknown_country():
    with pytest.raises(FlexBalanceError):
        get_public_holidays(DateRange(date(2023, 1, 1), date(2023, 1, 31)), "XX")
