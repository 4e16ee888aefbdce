"""Unit tests for origin-language heuristics."""

from __future__ import annotations

import pytest
from _resolution_helpers import _title

from metatext.text.domain import TitleKind
from metatext.text.languages import (
    UNKNOWN_LANGUAGE,
    get_main_language,
    guess_origin_languages,
)


@pytest.mark.parametrize(
    ("main_language", "expected"),
    [
        ("x-jat", ["ja"]),
        ("x-other", ["ja"]),
        ("x-zht", ["zh-hans", "zh-hant", "zh-c-mcm", "zh"]),
        ("ko", ["ko"]),
        ("x-kot", ["x-kot"]),
    ],
)
def test_guess_origin_languages(main_language: str, expected: list[str]) -> None:
    """Transliteration markers map back to their source languages."""
    assert guess_origin_languages(main_language) == expected, (
        f"Expected {main_language!r} to guess {expected!r}."
    )


def test_guess_origin_languages_returns_fresh_lists() -> None:
    """Callers may mutate the returned list without affecting later calls."""
    guesses = guess_origin_languages("x-jat")
    guesses.append("en")

    assert guess_origin_languages("x-jat") == ["ja"], (
        "Expected the lookup table to be unaffected by caller mutation."
    )


def test_get_main_language_prefers_main_kind() -> None:
    """The main title's language wins over list position."""
    titles = [
        _title("Cowboy Bebop", "en", TitleKind.OFFICIAL),
        _title("Cowboy Bebop", "x-jat", TitleKind.MAIN),
    ]

    assert get_main_language(titles) == "x-jat", (
        "Expected the language of the MAIN title."
    )


def test_get_main_language_falls_back_to_first_title() -> None:
    """Without a main title, the first title's language is used."""
    titles = [_title("カウボーイビバップ", "ja"), _title("Cowboy Bebop", "en")]

    assert get_main_language(titles) == "ja", "Expected the first title's language."


def test_get_main_language_defaults_without_titles() -> None:
    """An empty record reports the unknown-language marker."""
    assert get_main_language([]) == UNKNOWN_LANGUAGE == "x-other", (
        "Expected 'x-other' for a record without titles."
    )


def test_single_romanised_title_guesses_japanese() -> None:
    """A record whose only title is romanised Japanese guesses Japanese."""
    titles = [_title("Kaubooi Bibappu", "x-jat", TitleKind.SYNONYM)]

    assert guess_origin_languages(get_main_language(titles)) == ["ja"], (
        "Expected an x-jat main language to guess ['ja']."
    )
