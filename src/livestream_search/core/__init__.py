"""Core models and utilities for Livestream Search."""

from .filter import accept
from .models import Entry, RecordDecodeError, format_live_duration
from .report import format_entry, print_report
from .settings import ConfigError, TwitchSettings

__all__ = [
    "Entry",
    "RecordDecodeError",
    "format_live_duration",
    "accept",
    "format_entry",
    "print_report",
    "ConfigError",
    "TwitchSettings",
]
