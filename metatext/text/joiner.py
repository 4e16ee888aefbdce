"""Join free-text fragments into a single readable string.

Examples
--------
>>> join_text(["Hello", "World"])
'Hello. World'
>>> join_text(["Hello!", "World"])
'Hello! World'
>>> join_text([None, "  "]) is None
True
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

#: Characters that already close a clause; no period is added after them.
PUNCTUATION_MARKS: frozenset[str] = frozenset(
    {
        # Common punctuation marks
        ".",
        ",",
        ";",
        ":",
        "!",
        "?",
        ")",
        "]",
        "}",
        '"',
        "'",
        "，",  # fullwidth comma
        "、",  # ideographic comma
        "！",  # fullwidth exclamation mark
        "？",  # fullwidth question mark
        "“",  # left double quotation mark
        "”",  # right double quotation mark
        "‘",  # left single quotation mark
        "’",  # right single quotation mark
        "】",  # right black lenticular bracket
        "》",  # right double angle bracket
        "）",  # fullwidth right parenthesis
        "・",  # katakana middle dot
        # Less common punctuation marks
        "‽",  # interrobang
        "❞",  # heavy double comma quotation mark ornament
        "❝",  # heavy double turned comma quotation mark ornament
        "⁇",  # double question mark
        "⁈",  # question exclamation mark
        "❕",  # white exclamation mark ornament
        "❔",  # white question mark ornament
        "⁉",  # exclamation question mark
        "※",  # reference mark
        "⟩",  # mathematical right angle bracket
        "❯",  # heavy right-pointing angle quotation mark ornament
        "❭",  # medium right-pointing angle bracket ornament
        "〉",  # right angle bracket
        "⌉",  # right ceiling
        "⌋",  # right floor
        "⦄",  # right white curly bracket
        "⦆",  # right white parenthesis
        "⦈",  # z notation right image bracket
        "⦊",  # z notation right binding bracket
        "⦌",  # right square bracket with underbar
        "⦎",  # right square bracket with tick in bottom corner
    },
)


def _clean_fragments(fragments: cabc.Iterable[str | None]) -> list[str]:
    """Return stripped, non-blank fragments with duplicates removed."""
    # Compilations often repeat the exact same text for every entry.
    return list(
        dict.fromkeys(
            fragment.strip()
            for fragment in fragments
            if fragment is not None and fragment.strip()
        ),
    )


def join_text(fragments: cabc.Iterable[str | None]) -> str | None:
    """Join text fragments, separating them as sentences.

    Parameters
    ----------
    fragments : Iterable[str | None]
        Candidate fragments. ``None`` and blank entries are ignored and exact
        duplicates are only kept once.

    Returns
    -------
    str | None
        The joined text, or ``None`` when no fragment remains.
    """
    cleaned = _clean_fragments(fragments)
    if not cleaned:
        return None

    output = cleaned[0]
    for fragment in cleaned[1:]:
        output += " " if output[-1] in PUNCTUATION_MARKS else ". "
        output += fragment

    if len(cleaned) > 1:
        output = output.rstrip()
    return output


__all__ = ["PUNCTUATION_MARKS", "join_text"]
