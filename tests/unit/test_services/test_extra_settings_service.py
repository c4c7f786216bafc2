# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for extra_settings_service."""

import json
from datetime import date

import pytest

from flexbalance.exceptions import SettingsError
from flexbalance.models.enums import IgnoreKind
from flexbalance.services.extra_settings_service import (
    load_extra_settings,
    settings_for_user,
)

SETTINGS = [
    {
        "email": "worker@example.com",
        "ignoreItems": [
            {
                "name": "Company trip",
                "description": "",
                "dateStart": "2023-09-01",
                "dateEnd": "2023-09-03",
                "type": "DayOff",
            }
        ],
        "expectedWorkingHours": [
            {
                "name": "Summer",
                "description": "Shorter days",
                "dateStart": "2023-06-01",
                "dateEnd": "2023-08-31",
                "hoursPerDay": 7,
            }
        ],
    },
    {"email": "other@example.com", "ignoreItems": [], "expectedWorkingHours": []},
]


@pytest.fixture
def settings_file(tmp_path):
    path = tmp_path / ".settings.json"
    path.write_text(json.dumps(SETTINGS))
    return path


class TestLoadExtraSettings:
    """Tests for load_extra_settings."""

    def test_loads_all_users(self, settings_file):
        settings = load_extra_settings(settings_file)
        assert [s.email for s in settings] == ["worker@example.com", "other@example.com"]
        assert settings[0].expected_working_hours[0].minutes_per_day == 420
        assert settings[0].is_ignored(date(2023, 9, 2), IgnoreKind.DAY_OFF)
        assert not settings[0].is_ignored(date(2023, 9, 2), IgnoreKind.SICK_LEAVE)

    def test_missing_file_is_empty(self, tmp_path):
        assert load_extra_settings(tmp_path / "missing.json") == []

    def test_invalid_file(self, tmp_path):
        path = tmp_path / ".settings.json"
        path.write_text('[{"email": "a@example.com", "ignoreItems": [{"type": "Nope"}]}]')
        with pytest.raises(SettingsError):
            load_extra_settings(path)

    def test_end_before_start(self, tmp_path):
        path = tmp_path / ".settings.json"
        path.write_text(
            json.dumps(
                [
                    {
                        "email": "a@example.com",
                        "expectedWorkingHours": [
                            {"dateStart": "2023-06-02", "dateEnd": "2023-06-01", "hoursPerDay": 7}
                        ],
                    }
                ]
            )
        )
        with pytest.raises(SettingsError):
            load_extra_settings(path)

    def test_not_json(self, tmp_path):
        path = tmp_path / ".settings.json"
        path.write_text("not json")
        with pytest.raises(SettingsError):
            load_extra_settings(path)


class TestSettingsForUser:
    """Tests for settings_for_user."""

    def test_matches_email_case_insensitively(self, settings_file):
        settings = settings_for_user(load_extra_settings(settings_file), "Worker@Example.com")
        assert settings.email == "worker@example.com"

    def test_unknown_user_gets_empty_settings(self, settings_file):
        settings = settings_for_user(load_extra_settings(settings_file), "new@example.com")
        assert settings.ignore_items == []
        assert settings.expected_working_hours == []
