"""API clients for streaming platforms."""

from .base import ApiError, BaseApiClient
from .twitch import NO_MORE_DATA, NoMoreData, Page, TwitchApiClient

__all__ = [
    "ApiError",
    "BaseApiClient",
    "TwitchApiClient",
    "Page",
    "NoMoreData",
    "NO_MORE_DATA",
]
