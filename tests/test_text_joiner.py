"""Unit tests for joining text fragments."""

from __future__ import annotations

import pytest

from metatext.text.joiner import PUNCTUATION_MARKS, join_text


@pytest.mark.parametrize(
    ("fragments", "expected"),
    [
        (["Hello.", "World"], "Hello. World"),
        (["Hello!", "World"], "Hello! World"),
        (["Hello", "World"], "Hello. World"),
        (["Is it?", "Yes"], "Is it? Yes"),
        (["(aside)", "Then"], "(aside) Then"),
        (["東京！", "大阪"], "東京！ 大阪"),
        (["「東京」・", "大阪"], "「東京」・ 大阪"),
    ],
)
def test_join_text_separates_by_trailing_punctuation(
    fragments: list[str],
    expected: str,
) -> None:
    """A period is only added when the text does not already close a clause."""
    assert join_text(fragments) == expected, (
        f"Expected {fragments!r} to join as {expected!r}."
    )


def test_join_text_removes_exact_duplicates() -> None:
    """Repeated fragments are kept once, in first-seen order."""
    assert join_text(["A", "A", "B"]) == join_text(["A", "B"]), (
        "Expected duplicate fragments to be dropped before joining."
    )
    assert join_text(["B", "A", "B"]) == "B. A", (
        "Expected first-seen order to be preserved."
    )


def test_join_text_strips_fragments_before_deduplicating() -> None:
    """Surrounding whitespace does not make fragments distinct."""
    assert join_text(["  Spike.  ", "Spike.", "\tJet\n"]) == "Spike. Jet", (
        "Expected fragments to be stripped and deduplicated."
    )


@pytest.mark.parametrize("fragments", [[], [None, "", "  "], ["\n\t"]])
def test_join_text_returns_none_without_content(
    fragments: list[str | None],
) -> None:
    """Empty or blank input signals absence rather than an empty string."""
    assert join_text(fragments) is None, "Expected no value for blank input."


def test_join_text_single_fragment_is_returned_stripped() -> None:
    """A single fragment is returned without separators."""
    assert join_text([None, " Only one "]) == "Only one", (
        "Expected the single fragment to be returned as-is after stripping."
    )


def test_join_text_accepts_generators() -> None:
    """Any iterable of fragments can be joined."""
    fragments = (text for text in ("First", "Second", "Third"))

    assert join_text(fragments) == "First. Second. Third", (
        "Expected generator input to be joined like a list."
    )


def test_punctuation_marks_cover_western_and_cjk_marks() -> None:
    """The punctuation set spans Western and CJK closing marks."""
    for mark in (".", "!", "?", ")", "，", "、", "）", "】", "》", "‽", "⁉"):
        assert mark in PUNCTUATION_MARKS, f"Expected {mark!r} to close a clause."
