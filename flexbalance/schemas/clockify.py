# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Schemas for Clockify API payloads."""

from datetime import date, datetime, timedelta

from pydantic import BaseModel, ConfigDict, Field, field_validator

from flexbalance.models.enums import TimeOffType


class ClockifyModel(BaseModel):
    """Base for Clockify payloads (camelCase on the wire)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ClockifyUser(ClockifyModel):
    """The user owning the API token."""

    id: str
    workspace_id: str = Field(alias="activeWorkspace")
    name: str = ""
    email: str


class MemberProfile(ClockifyModel):
    """Working-hours profile of a workspace member."""

    work_capacity: timedelta | None = Field(default=None, alias="workCapacity")
    working_days: list[str] | None = Field(default=None, alias="workingDays")


class ProjectRef(ClockifyModel):
    name: str = ""


class UserRef(ClockifyModel):
    id: str


class TimeInterval(ClockifyModel):
    start: datetime
    end: datetime


class TimeEntry(ClockifyModel):
    """A finished time entry from the timesheet endpoint."""

    description: str | None = ""
    project: ProjectRef | None = None
    user: UserRef | None = None
    time_interval: TimeInterval = Field(alias="timeInterval")

    @property
    def entry_date(self) -> date:
        """Date the entry started on, as reported by the service."""
        return self.time_interval.start.date()

    @property
    def duration_seconds(self) -> int:
        return int((self.time_interval.end - self.time_interval.start).total_seconds())

    @property
    def project_name(self) -> str:
        return self.project.name if self.project else ""


class Period(ClockifyModel):
    start: datetime
    end: datetime


class TimeOffPeriod(ClockifyModel):
    period: Period
    half_day: bool = Field(alias="halfDay")

    @field_validator("half_day")
    @classmethod
    def reject_half_day(cls, v: bool) -> bool:
        if v:
            raise ValueError("Half day time off is not supported")
        return v


class TimeOffRequest(ClockifyModel):
    """An approved time-off request, counted in whole days."""

    user_id: str = Field(alias="userId")
    policy_name: TimeOffType = Field(alias="policyName")
    note: str | None = ""
    time_unit: str = Field(alias="timeUnit")
    time_off_period: TimeOffPeriod = Field(alias="timeOffPeriod")

    @field_validator("time_unit")
    @classmethod
    def require_days(cls, v: str) -> str:
        if v != "DAYS":
            raise ValueError(f"Time unit must be DAYS, got {v!r}")
        return v

    @property
    def start(self) -> date:
        return self.time_off_period.period.start.date()

    @property
    def end(self) -> date:
        return self.time_off_period.period.end.date()


class TimeOffResponse(ClockifyModel):
    """Response of the time-off request search."""

    count: int
    requests: list[TimeOffRequest] = Field(default_factory=list)
