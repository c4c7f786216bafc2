"""Pydantic schemas package."""
from flexbalance.schemas.clockify import (
    ClockifyUser,
    MemberProfile,
    TimeEntry,
    TimeOffRequest,
    TimeOffResponse,
)
from flexbalance.schemas.extra_settings import (
    ExpectedWorkingHours,
    ExtraSettings,
    IgnoreItem,
)

__all__ = [
    "ClockifyUser",
    "ExpectedWorkingHours",
    "ExtraSettings",
    "IgnoreItem",
    "MemberProfile",
    "TimeEntry",
    "TimeOffRequest",
    "TimeOffResponse",
]
