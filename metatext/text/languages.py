"""Guess the language of original production from a title list.

Providers do not record a country of origin. It is inferred from the language
the main title is recorded in, where transliteration markers such as
``x-jat`` (romanised Japanese) point back to the source language.
"""

from __future__ import annotations

import typing as typ

from .domain import TitleKind

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .domain import Title

#: Language reported when a record has no titles at all.
UNKNOWN_LANGUAGE = "x-other"

_ORIGIN_LANGUAGE_GUESSES: dict[str, tuple[str, ...]] = {
    UNKNOWN_LANGUAGE: ("ja",),
    "x-jat": ("ja",),
    "x-zht": ("zh-hans", "zh-hant", "zh-c-mcm", "zh"),
}


def get_main_language(titles: cabc.Sequence[Title]) -> str:
    """Return the language code of the main title.

    Falls back to the first title's language, then to ``"x-other"``.
    """
    for title in titles:
        if title.kind is TitleKind.MAIN and title.language_code:
            return title.language_code
    if titles and titles[0].language_code:
        return titles[0].language_code
    return UNKNOWN_LANGUAGE


def guess_origin_languages(main_language: str) -> list[str]:
    """Return the likely origin language codes, most likely first.

    Parameters
    ----------
    main_language : str
        Language code of the main title.

    Returns
    -------
    list[str]
        Candidate language codes. Codes without a known mapping are returned
        as a single-item list.
    """
    return list(_ORIGIN_LANGUAGE_GUESSES.get(main_language, (main_language,)))


__all__ = ["UNKNOWN_LANGUAGE", "get_main_language", "guess_origin_languages"]
