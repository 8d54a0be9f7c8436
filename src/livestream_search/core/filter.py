"""Title and channel filtering for search results."""

from collections.abc import Collection
from itertools import groupby
from typing import Optional

from .models import Entry


def title_words(title: str) -> list[str]:
    """Split a title into lowercase alphabetic words."""
    # Anything that is not a letter separates words, digits included
    runs = groupby(title.lower(), key=str.isalpha)
    return ["".join(chars) for is_letter, chars in runs if is_letter]


def accept(
    entry: Entry,
    word: bool,
    term: Optional[str],
    excluded: Collection[str],
) -> bool:
    """
    Decide whether an entry belongs in the report.

    Excluded channels are always rejected, whatever the term. Without a
    term everything else is accepted. With a term, the title must contain
    it as a substring, or as a whole word when word is set. Both sides
    are compared in lowercase.

    Args:
        entry: The stream entry to check.
        word: Match the term only as a complete word.
        term: Optional search term.
        excluded: Lowercase channel names to drop.

    Returns:
        True if the entry should be shown.
    """
    if entry.display_name.lower() in excluded:
        return False
    if term is None:
        return True

    term = term.lower()
    if word:
        return term in title_words(entry.title)
    return term in entry.title.lower()
