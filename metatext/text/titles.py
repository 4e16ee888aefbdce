"""Select display titles from provider records.

Each configured ``TitleSource`` names a provider and a look-up method. The
sources are tried in the user's order and the first usable title wins.

Examples
--------
Resolve a season's main title:

>>> resolve_series_title(season, season.name, TitleType.MAIN, "en", config)
'Cowboy Bebop'
"""

from __future__ import annotations

import re
import typing as typ

from .config import TitleSource
from .domain import TitleKind
from .languages import get_main_language, guess_origin_languages

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import ResolutionConfig, TitleType
    from .domain import EpisodeAggregate, SeasonAggregate, Title

#: Positional placeholders that providers record in place of a real title.
STRUCTURAL_LABEL_PATTERN = re.compile(
    r"^(?:Special|Episode) \d+$"
    r"|^Part \d+ of \d+$"
    r"|^Volume \d$"
    r"|^(?:OVA|OAD|Movie|Complete Movie|Short Movie|TV Special|Music Video|Web|Volume)$",
    re.IGNORECASE,
)

#: Language of the default episode title when a record marks no main title.
_EPISODE_DEFAULT_LANGUAGE = "en"


def is_structural_label(value: str) -> bool:
    """Return True when ``value`` is a placeholder such as ``"Episode 3"``."""
    return STRUCTURAL_LABEL_PATTERN.search(value) is not None


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _pick_for_language(
    titles: list[Title],
    *,
    using_kinds: bool,
    allow_any: bool,
) -> str | None:
    if not using_kinds:
        return titles[0].value
    official = next(
        (title.value for title in titles if title.kind is TitleKind.OFFICIAL),
        None,
    )
    if _is_blank(official) and allow_any:
        return titles[0].value
    return official


def find_title_for_languages(
    titles: cabc.Sequence[Title],
    languages: cabc.Iterable[str | None],
    *,
    using_kinds: bool,
    allow_any: bool = False,
) -> str | None:
    """Return the first acceptable title in any of ``languages``.

    Parameters
    ----------
    titles : Sequence[Title]
        Title list to search.
    languages : Iterable[str | None]
        Language codes to try, in order. Empty entries are skipped.
    using_kinds : bool
        Prefer ``OFFICIAL`` titles within a language. Without kinds, the
        first title recorded in the language is used.
    allow_any : bool, optional
        With kinds, accept the first title of any kind when the language has
        no official title.

    Returns
    -------
    str | None
        The matching title, or ``None``. Blank titles and structural labels
        are skipped and the next language is tried.
    """
    for language in languages:
        if not language:
            continue
        in_language = [title for title in titles if title.language_code == language]
        if not in_language:
            continue
        candidate = _pick_for_language(
            in_language,
            using_kinds=using_kinds,
            allow_any=allow_any,
        )
        if _is_blank(candidate) or is_structural_label(typ.cast("str", candidate)):
            continue
        return candidate
    return None


def _main_kind_title(titles: cabc.Sequence[Title]) -> str | None:
    return next((title.value for title in titles if title.kind is TitleKind.MAIN), None)


def _episode_default_title(titles: cabc.Sequence[Title]) -> str | None:
    main = _main_kind_title(titles)
    if not _is_blank(main):
        return main
    return next(
        (
            title.value
            for title in titles
            if title.language_code == _EPISODE_DEFAULT_LANGUAGE
        ),
        None,
    )


def _first_accepted(candidates: cabc.Iterable[str | None]) -> str | None:
    for candidate in candidates:
        if not _is_blank(candidate):
            return typ.cast("str", candidate).strip()
    return None


def _series_candidate(
    source: TitleSource,
    season: SeasonAggregate,
    default_name: str,
    language: str | None,
    config: ResolutionConfig,
) -> str | None:
    match source:
        case TitleSource.SHOKO_DEFAULT:
            return default_name
        case TitleSource.ANIDB_DEFAULT | TitleSource.TMDB_DEFAULT:
            return _main_kind_title(season.external_record(source.provider).titles)
        case TitleSource.ANIDB_LIBRARY_LANGUAGE | TitleSource.TMDB_LIBRARY_LANGUAGE:
            return find_title_for_languages(
                season.external_record(source.provider).titles,
                [language],
                using_kinds=True,
                allow_any=config.title_allow_any,
            )
        case TitleSource.ANIDB_COUNTRY_OF_ORIGIN | TitleSource.TMDB_COUNTRY_OF_ORIGIN:
            titles = season.external_record(source.provider).titles
            return find_title_for_languages(
                titles,
                guess_origin_languages(get_main_language(titles)),
                using_kinds=True,
                allow_any=config.title_allow_any,
            )
        case _:
            typ.assert_never(source)


def _episode_candidate(
    source: TitleSource,
    episode: EpisodeAggregate,
    season: SeasonAggregate,
    language: str | None,
) -> str | None:
    match source:
        case TitleSource.SHOKO_DEFAULT:
            return episode.name
        case TitleSource.ANIDB_DEFAULT | TitleSource.TMDB_DEFAULT:
            return _episode_default_title(
                episode.external_record(source.provider).titles,
            )
        case TitleSource.ANIDB_LIBRARY_LANGUAGE | TitleSource.TMDB_LIBRARY_LANGUAGE:
            return find_title_for_languages(
                episode.external_record(source.provider).titles,
                [language],
                using_kinds=False,
            )
        case TitleSource.ANIDB_COUNTRY_OF_ORIGIN | TitleSource.TMDB_COUNTRY_OF_ORIGIN:
            # The origin is a property of the series, not the episode.
            season_titles = season.external_record(source.provider).titles
            return find_title_for_languages(
                episode.external_record(source.provider).titles,
                guess_origin_languages(get_main_language(season_titles)),
                using_kinds=False,
            )
        case _:
            typ.assert_never(source)


def resolve_series_title(
    season: SeasonAggregate,
    default_name: str,
    title_type: TitleType,
    language: str | None,
    config: ResolutionConfig,
) -> str | None:
    """Resolve a show or season title.

    Parameters
    ----------
    season : SeasonAggregate
        Season whose provider records are searched. Shows pass their default
        season.
    default_name : str
        Primary catalog name, used by ``TitleSource.SHOKO_DEFAULT``.
    title_type : TitleType
        Which preference list to follow.
    language : str | None
        Library metadata language.
    config : ResolutionConfig
        Preference snapshot.

    Returns
    -------
    str | None
        The stripped title, or ``None`` when no source yields one.
    """
    return _first_accepted(
        _series_candidate(source, season, default_name, language, config)
        for source in config.ordered_title_sources(title_type)
    )


def resolve_episode_title(
    episode: EpisodeAggregate,
    season: SeasonAggregate,
    title_type: TitleType,
    language: str | None,
    config: ResolutionConfig,
) -> str | None:
    """Resolve an episode title.

    Episode titles carry no reliable kinds, so language searches take the
    first title recorded in the language. The owning season decides the
    origin language.
    """
    return _first_accepted(
        _episode_candidate(source, episode, season, language)
        for source in config.ordered_title_sources(title_type)
    )


__all__ = [
    "STRUCTURAL_LABEL_PATTERN",
    "find_title_for_languages",
    "is_structural_label",
    "resolve_episode_title",
    "resolve_series_title",
]
