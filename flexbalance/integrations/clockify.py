# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Clockify API client."""

import asyncio
import logging
from datetime import date, datetime, time, timedelta, timezone
from typing import Any

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from flexbalance.config import (
    CLOCKIFY_API_URL,
    HTTP_TIMEOUT_SECONDS,
    TIME_ENTRY_CHUNK_DAYS,
    TIME_OFF_PAGE_SIZE,
)
from flexbalance.exceptions import ClockifyError
from flexbalance.schemas.clockify import (
    ClockifyUser,
    MemberProfile,
    TimeEntry,
    TimeOffRequest,
    TimeOffResponse,
)

logger = logging.getLogger(__name__)

_time_entries_adapter = TypeAdapter(list[TimeEntry])


def format_timestamp(value: datetime) -> str:
    """Format a UTC datetime the way the timesheet endpoint expects."""
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.000Z")


def time_entry_windows(
    start: datetime,
    end: datetime,
    chunk_days: int = TIME_ENTRY_CHUNK_DAYS,
) -> list[tuple[datetime, datetime]]:
    """Split a query window into consecutive chunks of at most chunk_days."""
    windows = []
    current = start
    while current < end:
        current_end = min(current + timedelta(days=chunk_days), end)
        windows.append((current, current_end))
        current = current_end
    return windows


class ClockifyClient:
    """Async client for the Clockify endpoints flexbalance needs."""

    def __init__(
        self,
        token: str,
        base_url: str = CLOCKIFY_API_URL,
        timeout: float = HTTP_TIMEOUT_SECONDS,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={"x-api-key": token},
            timeout=timeout,
        )
        self._user: ClockifyUser | None = None

    async def __aenter__(self) -> "ClockifyClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as e:
            logger.error(f"Clockify request {method} {url} failed: {e}")
            raise ClockifyError(f"Clockify request {method} {url} failed: {e}") from e
        except ValueError as e:
            raise ClockifyError(f"Clockify returned invalid JSON for {url}") from e

    @staticmethod
    def _parse(model: type[BaseModel], data: Any, what: str) -> Any:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise ClockifyError(f"Unexpected {what} payload: {e}") from e

    async def get_user(self) -> ClockifyUser:
        """Fetch the user owning the token (cached after the first call)."""
        if self._user is None:
            data = await self._request("GET", "v1/user")
            self._user = self._parse(ClockifyUser, data, "user")
            logger.info(f"Fetched Clockify user {self._user.email}")
        return self._user

    async def get_member_profile(self) -> MemberProfile:
        """Fetch the working-hours profile of the user."""
        user = await self.get_user()
        data = await self._request(
            "GET", f"v1/workspaces/{user.workspace_id}/member-profile/{user.id}"
        )
        return self._parse(MemberProfile, data, "member profile")

    async def get_time_entries(self, since: date, until: date) -> list[TimeEntry]:
        """Fetch finished time entries from since 00:00 to until 23:59:59 UTC.

        The window is split into chunks the API accepts and queried
        concurrently.
        """
        user = await self.get_user()
        url = f"workspaces/{user.workspace_id}/timeEntries/users/{user.id}/timesheet"
        start = datetime.combine(since, time.min, tzinfo=timezone.utc)
        end = datetime.combine(until, time(23, 59, 59), tzinfo=timezone.utc)

        async def fetch(window_start: datetime, window_end: datetime) -> list[TimeEntry]:
            data = await self._request(
                "GET",
                url,
                params={
                    "start": format_timestamp(window_start),
                    "end": format_timestamp(window_end),
                    "in-progress": "false",
                    "page": "0",
                    "page-size": "0",
                },
            )
            try:
                return _time_entries_adapter.validate_python(data)
            except ValidationError as e:
                raise ClockifyError(f"Unexpected time entry payload: {e}") from e

        windows = time_entry_windows(start, end)
        results = await asyncio.gather(*(fetch(s, e) for s, e in windows))
        entries = [entry for chunk in results for entry in chunk]
        logger.info(f"Fetched {len(entries)} time entries in {len(windows)} queries")
        return entries

    async def get_time_off_requests(self) -> list[TimeOffRequest]:
        """Fetch the user's approved time-off requests."""
        user = await self.get_user()
        body = {
            "page": 1,
            "pageSize": TIME_OFF_PAGE_SIZE,
            "status": ["APPROVED"],
            "users": {"contains": "CONTAINS", "ids": [user.id], "status": "ALL"},
            "userGroups": {},
        }
        data = await self._request(
            "POST", f"workspaces/{user.workspace_id}/time-off/requests", json=body
        )
        response: TimeOffResponse = self._parse(TimeOffResponse, data, "time off")
        if response.count > len(response.requests):
            logger.warning(
                f"Only {len(response.requests)} of {response.count} time-off "
                "requests were returned"
            )
        return response.requests
