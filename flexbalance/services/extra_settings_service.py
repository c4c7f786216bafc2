# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Loading of per-user extra settings."""

import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from flexbalance.exceptions import SettingsError
from flexbalance.schemas.extra_settings import ExtraSettings

logger = logging.getLogger(__name__)

_settings_adapter = TypeAdapter(list[ExtraSettings])


def load_extra_settings(path: Path) -> list[ExtraSettings]:
    """Read the settings file.

    A missing file is not an error; the run continues without settings.

    Raises:
        SettingsError: If the file exists but is not a valid settings list.
    """
    if not path.is_file():
        logger.warning(f"Could not read extra settings: {path} not found")
        return []

    try:
        return _settings_adapter.validate_json(path.read_bytes())
    except ValidationError as e:
        raise SettingsError(f"Invalid extra settings in {path}: {e}") from e


def settings_for_user(all_settings: list[ExtraSettings], email: str) -> ExtraSettings:
    """Settings matching the email, or empty settings."""
    for settings in all_settings:
        if settings.email.lower() == email.lower():
            return settings
    return ExtraSettings(email=email)
