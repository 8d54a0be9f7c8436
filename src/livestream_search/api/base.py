"""Base API client interface."""

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

import aiohttp

logger = logging.getLogger(__name__)

# Request timeout for a single page (seconds)
DEFAULT_TIMEOUT = 30


class ApiError(Exception):
    """A request failed or its response body could not be decoded."""


async def read_json(resp: aiohttp.ClientResponse) -> Any:
    """Parse JSON from a response, raising ApiError on failure.

    This handles common error cases:
    - HTML error pages and malformed JSON (JSONDecodeError)
    - Empty bodies

    Args:
        resp: aiohttp response object

    Returns:
        Parsed JSON data

    Raises:
        ApiError: If the body is not valid JSON.
    """
    # Twitch occasionally omits the JSON content type on errors, so the
    # body is decoded directly rather than through resp.json()
    body = await resp.read()
    if not body.strip():
        raise ApiError("Failed to decode JSON response: empty body")
    try:
        return json.loads(body.decode("utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ApiError(f"Failed to decode JSON response: {e}") from e


class BaseApiClient(ABC):
    """Abstract base class for streaming platform API clients."""

    def __init__(self, proxy: Optional[str] = None) -> None:
        self._session: Optional[aiohttp.ClientSession] = None
        self.proxy = proxy

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the display name for this platform."""
        ...

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create the HTTP session."""
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=DEFAULT_TIMEOUT)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            try:
                await self._session.close()
            finally:
                self._session = None

    async def __aenter__(self) -> "BaseApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def _get_json(self, url: str, headers: dict[str, str]) -> Any:
        """
        Perform one GET request and decode the JSON body.
        Raises ApiError on transport failures, error statuses and bad JSON.
        """
        if self.proxy:
            logger.debug(f"{self.name}: GET {url} via proxy {self.proxy}")
        else:
            logger.debug(f"{self.name}: GET {url}")

        try:
            async with self.session.get(url, headers=headers, proxy=self.proxy) as resp:
                if resp.status >= 400:
                    raise ApiError(f"{self.name}: HTTP {resp.status} {resp.reason} for {url}")
                return await read_json(resp)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise ApiError(f"{self.name}: Request failed: {e!r}") from e
