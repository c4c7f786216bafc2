# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Per-user extra settings schemas (.settings.json)."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, model_validator

from flexbalance.models.enums import IgnoreKind


class SettingsModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class DateSpan(SettingsModel):
    """Inclusive date span shared by the settings items."""

    name: str = ""
    description: str = ""
    date_start: date = Field(alias="dateStart")
    date_end: date = Field(alias="dateEnd")

    @model_validator(mode="after")
    def check_order(self) -> "DateSpan":
        if self.date_end < self.date_start:
            raise ValueError(
                f"dateEnd {self.date_end} is before dateStart {self.date_start}"
            )
        return self

    def contains(self, day: date) -> bool:
        return self.date_start <= day <= self.date_end


class IgnoreItem(DateSpan):
    """Suppresses holiday or time-off records of one kind inside the span."""

    kind: IgnoreKind = Field(alias="type")


class ExpectedWorkingHours(DateSpan):
    """Overrides the expected hours of working days inside the span."""

    hours_per_day: float = Field(alias="hoursPerDay", ge=0, le=24)

    @property
    def minutes_per_day(self) -> int:
        return round(self.hours_per_day * 60)


class ExtraSettings(SettingsModel):
    """Extra settings of one user, matched by email."""

    email: str = ""
    ignore_items: list[IgnoreItem] = Field(default_factory=list, alias="ignoreItems")
    expected_working_hours: list[ExpectedWorkingHours] = Field(
        default_factory=list, alias="expectedWorkingHours"
    )

    def is_ignored(self, day: date, kind: IgnoreKind) -> bool:
        return any(
            item.kind == kind and item.contains(day) for item in self.ignore_items
        )
