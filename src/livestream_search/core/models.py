"""Core data models for Livestream Search."""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional

logger = logging.getLogger(__name__)

TITLE_NEWLINE_REPLACEMENT = "…"


class RecordDecodeError(ValueError):
    """A stream record is missing a required field or has the wrong type."""

    def __init__(self, field: str, expected: str, message: Optional[str] = None) -> None:
        self.field = field
        self.expected = expected
        super().__init__(message or f"Stream record field '{field}' missing or not {expected}")


def _require_str(record: dict[str, Any], key: str) -> str:
    value = record.get(key)
    if not isinstance(value, str):
        raise RecordDecodeError(key, "a string")
    return value


def _require_count(record: dict[str, Any], key: str) -> int:
    value = record.get(key)
    # bool is a subclass of int, but JSON true/false is not a count
    if isinstance(value, bool) or not isinstance(value, int):
        raise RecordDecodeError(key, "an integer")
    if value < 0:
        raise RecordDecodeError(key, "a non-negative integer")
    return value


def parse_started_at(value: str) -> Optional[datetime]:
    """Parse an RFC 3339 timestamp, returning None if it is unusable."""
    value = value.strip()
    if value[-1:] in ("Z", "z"):
        value = value[:-1] + "+00:00"
    try:
        started = datetime.fromisoformat(value)
    except ValueError:
        return None
    if started.tzinfo is None:
        return None
    return started


def format_live_duration(started_at: str, now: Optional[datetime] = None) -> str:
    """
    Format the time elapsed since started_at as HH:MM.
    Hours are total hours and are not wrapped at 24.
    Returns an empty string if the timestamp can't be parsed.
    """
    started = parse_started_at(started_at)
    if started is None:
        logger.debug(f"Unparseable started_at timestamp: {started_at!r}")
        return ""

    if now is None:
        now = datetime.now(timezone.utc)

    total_seconds = max(int((now - started).total_seconds()), 0)
    hours, remainder = divmod(total_seconds, 3600)
    minutes = remainder // 60
    return f"{hours:02}:{minutes:02}"


@dataclass(frozen=True)
class Entry:
    """One live stream as shown in the report."""

    language: str
    display_name: str
    title: str
    viewer_count: int
    live_duration: str

    @classmethod
    def from_json(cls, record: Any, now: Optional[datetime] = None) -> "Entry":
        """Build an Entry from one record of the Helix streams response."""
        if not isinstance(record, dict):
            raise RecordDecodeError("<record>", "an object", "Stream record is not a JSON object")

        return cls(
            language=_require_str(record, "language"),
            display_name=_require_str(record, "user_name"),
            title=_require_str(record, "title").replace("\n", TITLE_NEWLINE_REPLACEMENT),
            viewer_count=_require_count(record, "viewer_count"),
            live_duration=format_live_duration(_require_str(record, "started_at"), now),
        )

    @property
    def stream_url(self) -> str:
        """Get the channel URL for this stream."""
        return f"https://twitch.tv/{self.display_name}"
