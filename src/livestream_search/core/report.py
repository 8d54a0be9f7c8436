"""Plain text report of matching streams."""

import sys
from collections.abc import Collection, Iterable
from itertools import islice
from typing import Optional, TextIO

from .filter import accept
from .models import Entry

NAME_WIDTH = 14
URL_WIDTH = len("https://twitch.tv/") + NAME_WIDTH
VIEWERS_WIDTH = 4


def format_entry(entry: Entry) -> str:
    """Format one entry as a single report line."""
    return " | ".join(
        [
            entry.language,
            f"{entry.stream_url:<{URL_WIDTH}}",
            f"{entry.viewer_count:>{VIEWERS_WIDTH}} viewers",
            entry.live_duration,
            entry.title,
        ]
    )


def print_report(
    entries: Iterable[Entry],
    total: int,
    word: bool = False,
    term: Optional[str] = None,
    excluded: Collection[str] = frozenset(),
    limit: int = 0,
    out: Optional[TextIO] = None,
) -> int:
    """
    Print matching entries followed by a "Done (shown/total)" line.
    A limit of 0 prints every match. Returns the number of entries printed.
    """
    if out is None:
        out = sys.stdout

    matches = (e for e in entries if accept(e, word, term, excluded))
    if limit > 0:
        matches = islice(matches, limit)

    found = 0
    for entry in matches:
        print(format_entry(entry), file=out)
        found += 1

    print(f"Done ({found}/{total})", file=out)
    return found
