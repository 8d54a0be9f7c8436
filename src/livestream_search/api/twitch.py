"""Twitch Helix API client."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Union
from urllib.parse import urlencode

from ..core.models import Entry
from ..core.settings import TwitchSettings
from .base import BaseApiClient

logger = logging.getLogger(__name__)

# Helix returns at most 100 streams per page
PAGE_SIZE = 100

# Category whose live streams are listed
GAME_ID = "1469308723"


@dataclass
class Page:
    """One page of streams, with the cursor for the next page if there is one."""

    entries: list[Entry] = field(default_factory=list)
    cursor: Optional[str] = None


class NoMoreData:
    """Outcome of a page whose response carried no stream list."""

    def __repr__(self) -> str:
        return "NO_MORE_DATA"


NO_MORE_DATA = NoMoreData()

PageResult = Union[Page, NoMoreData]


def extract_cursor(payload: Any) -> Optional[str]:
    """Get the pagination cursor from a response, or None on the last page."""
    if not isinstance(payload, dict):
        return None
    pagination = payload.get("pagination")
    if not isinstance(pagination, dict):
        return None
    cursor = pagination.get("cursor")
    if isinstance(cursor, str) and cursor:
        return cursor
    return None


class TwitchApiClient(BaseApiClient):
    """Client for the Twitch Helix streams endpoint."""

    BASE_URL = "https://api.twitch.tv/helix"

    def __init__(self, settings: TwitchSettings, now: Optional[datetime] = None) -> None:
        settings.validate()
        super().__init__(proxy=settings.proxy)
        self.settings = settings
        # Fixed reference time, used by tests; None means the current time
        self._now = now

    @property
    def name(self) -> str:
        return "Twitch"

    @property
    def streams_url(self) -> str:
        """Get the streams URL for the first page."""
        params = {"first": PAGE_SIZE, "game_id": GAME_ID}
        return f"{self.BASE_URL}/streams?{urlencode(params)}"

    def page_url(self, cursor: Optional[str] = None) -> str:
        """Get the URL for the page following cursor."""
        if cursor:
            return f"{self.streams_url}&{urlencode({'after': cursor})}"
        return self.streams_url

    def _get_headers(self) -> dict[str, str]:
        """Get headers for API requests."""
        return {
            "Authorization": f"Bearer {self.settings.access_token}",
            "Client-Id": self.settings.client_id,
        }

    async def fetch_page(self, cursor: Optional[str] = None) -> PageResult:
        """
        Fetch one page of live streams.

        Returns NO_MORE_DATA if the response has no "data" list.
        Raises ApiError if the request fails and RecordDecodeError if a
        stream record is malformed.
        """
        payload = await self._get_json(self.page_url(cursor), self._get_headers())

        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, list):
            logger.debug(f"{self.name}: Response has no data list, stopping")
            return NO_MORE_DATA

        entries = [Entry.from_json(record, self._now) for record in data]
        next_cursor = extract_cursor(payload)
        logger.debug(f"{self.name}: Got {len(entries)} streams, next cursor {next_cursor!r}")
        return Page(entries=entries, cursor=next_cursor)

    async def fetch_all(self) -> Optional[tuple[list[Entry], int]]:
        """
        Fetch every page of live streams, one after another.

        Even when only a few entries will be shown, all pages are fetched
        so the total is exact.

        Returns:
            The entries in page order and their count, or None if a page
            reported no more data.
        """
        entries: list[Entry] = []
        cursor: Optional[str] = None

        while True:
            result = await self.fetch_page(cursor)
            if isinstance(result, NoMoreData):
                return None

            entries.extend(result.entries)
            cursor = result.cursor
            if cursor is None:
                break

        return entries, len(entries)
