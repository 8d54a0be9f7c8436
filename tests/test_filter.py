"""Tests for title and channel filtering."""

import pytest
from conftest import make_entry

from livestream_search.core.filter import accept, title_words

# --- title_words ---


def test_title_words_splits_on_non_letters():
    assert title_words("Play FOO! now-ish") == ["play", "foo", "now", "ish"]


def test_title_words_digits_separate():
    assert title_words("day12of30") == ["day", "of"]


def test_title_words_underscore_separates():
    assert title_words("foo_bar") == ["foo", "bar"]


def test_title_words_unicode_letters():
    assert title_words("Très bien…ÉTÉ") == ["très", "bien", "été"]


def test_title_words_empty():
    assert title_words("") == []


# --- no term ---


def test_no_term_accepts():
    assert accept(make_entry(), False, None, frozenset()) is True


def test_no_term_word_mode_accepts():
    assert accept(make_entry(), True, None, frozenset()) is True


# --- substring mode ---


@pytest.mark.parametrize("title", ["foobar", "xfooy", "play foo!", "FOO"])
def test_substring_matches(title):
    assert accept(make_entry(title=title), False, "foo", frozenset()) is True


def test_substring_no_match():
    assert accept(make_entry(title="fo o"), False, "foo", frozenset()) is False


def test_substring_term_case_insensitive():
    assert accept(make_entry(title="speedrun any%"), False, "Any%", frozenset()) is True


# --- word mode ---


@pytest.mark.parametrize("title", ["foo bar", "play foo!", "FOO", "1foo2", "bar…foo"])
def test_word_matches(title):
    assert accept(make_entry(title=title), True, "foo", frozenset()) is True


@pytest.mark.parametrize("title", ["foobar", "xfooy", "fo o", ""])
def test_word_no_match(title):
    assert accept(make_entry(title=title), True, "foo", frozenset()) is False


def test_word_term_case_insensitive():
    assert accept(make_entry(title="new Record today"), True, "RECORD", frozenset()) is True


def test_word_term_with_non_letters_never_matches():
    entry = make_entry(title="any% speedrun")
    assert accept(entry, True, "any%", frozenset()) is False
    assert accept(entry, False, "any%", frozenset()) is True


# --- exclusions ---


@pytest.mark.parametrize(
    "word,term",
    [(False, None), (True, None), (False, "foo"), (True, "foo")],
)
def test_excluded_always_rejected(word, term):
    entry = make_entry(display_name="BadStreamer", title="foo")
    assert accept(entry, word, term, frozenset({"badstreamer"})) is False


def test_excluded_case_insensitive():
    entry = make_entry(display_name="SHOUTY")
    assert accept(entry, False, None, {"shouty"}) is False


def test_other_channels_not_excluded():
    entry = make_entry(display_name="GoodStreamer")
    assert accept(entry, False, None, frozenset({"badstreamer"})) is True


def test_title_words_numeric_symbols_separate():
    assert title_words("foo² ½bar") == ["foo", "bar"]


def test_word_matches_next_to_superscript():
    assert accept(make_entry(title="foo² speedrun"), True, "foo", frozenset()) is True
