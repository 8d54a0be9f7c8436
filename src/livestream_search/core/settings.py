"""Settings management for Livestream Search.

All configuration comes from the environment; there is no settings file.
"""

import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Optional

from yarl import URL

logger = logging.getLogger(__name__)

ENV_CLIENT_ID = "TWITCH_CLIENT_ID"
ENV_TOKEN = "TWITCH_TOKEN"
ENV_IGNORE = "TWITCH_IGNORE"
ENV_PROXY = "https_proxy"

PROXY_SCHEMES = ("http", "https")


class ConfigError(Exception):
    """Required configuration is missing."""


def parse_proxy(value: Optional[str]) -> Optional[str]:
    """
    Parse a proxy URL from the environment.
    A bare host:port is treated as an http proxy.
    Returns None if there is no proxy or the value is malformed.
    """
    if not value:
        return None

    raw = value.strip()
    if "://" not in raw:
        raw = f"http://{raw}"

    try:
        url = URL(raw)
        # Accessing the port validates it
        port = url.port
    except ValueError as e:
        logger.warning(f"Ignoring malformed proxy URL {value!r}: {e}")
        return None

    if url.scheme not in PROXY_SCHEMES or not url.host or port is None:
        logger.warning(f"Ignoring malformed proxy URL {value!r}")
        return None

    return str(url)


def build_exclusions(exclude: Optional[Iterable[str]], ignore_list: str = "") -> frozenset[str]:
    """Merge command line exclusions with a comma separated ignore list, lowercased."""
    names = [name.strip().lower() for name in exclude or ()]
    names.extend(name.strip().lower() for name in ignore_list.split(","))
    return frozenset(name for name in names if name)


@dataclass
class TwitchSettings:
    """Twitch API settings."""

    client_id: str = ""
    access_token: str = ""
    ignore_list: str = ""
    proxy: Optional[str] = None
    excluded_channels: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        exclude: Optional[Iterable[str]] = None,
    ) -> "TwitchSettings":
        """Load settings from environment variables."""
        if environ is None:
            environ = os.environ

        ignore_list = environ.get(ENV_IGNORE, "")
        return cls(
            client_id=environ.get(ENV_CLIENT_ID, ""),
            access_token=environ.get(ENV_TOKEN, ""),
            ignore_list=ignore_list,
            proxy=parse_proxy(environ.get(ENV_PROXY)),
            excluded_channels=build_exclusions(exclude, ignore_list),
        )

    def validate(self) -> None:
        """Raise ConfigError if the client id or token is missing."""
        if not self.client_id:
            raise ConfigError("Client id missing")
        if not self.access_token:
            raise ConfigError("OAuth token missing")
