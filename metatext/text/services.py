"""Entity-level entry points for title and description resolution.

These functions assemble provider inputs for each entity kind and delegate to
the title and description selectors. Every call takes its configuration
snapshot explicitly and performs no I/O.

Examples
--------
Resolve the titles and description for a movie entry:

>>> main, alternate = get_movie_titles(episode, season, "en", config)
>>> overview = get_movie_description(episode, season, "en", config)
"""

from __future__ import annotations

import typing as typ

from .config import TitleType
from .descriptions import resolve_description
from .domain import EpisodeKind, Provider
from .joiner import join_text
from .titles import resolve_episode_title, resolve_series_title

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import ResolutionConfig
    from .domain import EpisodeAggregate, SeasonAggregate, ShowAggregate

#: Episode titles that only restate the entry type and add nothing to a movie.
IGNORED_SUBTITLES: frozenset[str] = frozenset(
    {
        "complete movie",
        "music video",
        "oad",
        "ova",
        "short movie",
        "special",
        "tv special",
        "web",
    },
)

#: Primary catalog name of the entry holding the full movie cut.
COMPLETE_MOVIE_NAME = "Complete Movie"

#: AniDB only carries English descriptions.
_ANIDB_DESCRIPTION_LANGUAGE = "en"

_SEASON_OFFSET_LABELS: dict[int, str] = {1: "Alternate Version"}

TitlePair: typ.TypeAlias = tuple[str | None, str | None]


def is_ignored_subtitle(subtitle: str | None) -> bool:
    """Return True when ``subtitle`` is blank or generic boilerplate."""
    if subtitle is None or not subtitle.strip():
        return True
    return subtitle.strip().casefold() in IGNORED_SUBTITLES


def get_show_titles(
    show: ShowAggregate,
    language: str | None,
    config: ResolutionConfig,
) -> TitlePair:
    """Return the main and alternate titles for a show."""
    return (
        resolve_series_title(
            show.default_season, show.name, TitleType.MAIN, language, config
        ),
        resolve_series_title(
            show.default_season, show.name, TitleType.ALTERNATE, language, config
        ),
    )


def get_season_titles(
    season: SeasonAggregate,
    language: str | None,
    config: ResolutionConfig,
    *,
    base_season_offset: int = 0,
) -> TitlePair:
    """Return the main and alternate titles for a season.

    Parameters
    ----------
    season : SeasonAggregate
        Season to resolve.
    language : str | None
        Library metadata language.
    config : ResolutionConfig
        Preference snapshot.
    base_season_offset : int, optional
        Variant offset of the season. An offset of ``1`` marks an alternate
        version and suffixes both titles with ``" (Alternate Version)"``.

    Returns
    -------
    tuple[str | None, str | None]
        The main and alternate titles.
    """
    main = resolve_series_title(season, season.name, TitleType.MAIN, language, config)
    alternate = resolve_series_title(
        season, season.name, TitleType.ALTERNATE, language, config
    )
    label = _SEASON_OFFSET_LABELS.get(base_season_offset)
    if label is None:
        return (main, alternate)
    suffix = f" ({label})"
    return (
        main + suffix if main is not None else None,
        alternate + suffix if alternate is not None else None,
    )


def get_episode_titles(
    episode: EpisodeAggregate,
    season: SeasonAggregate,
    language: str | None,
    config: ResolutionConfig,
) -> TitlePair:
    """Return the main and alternate titles for an episode."""
    return (
        resolve_episode_title(episode, season, TitleType.MAIN, language, config),
        resolve_episode_title(episode, season, TitleType.ALTERNATE, language, config),
    )


def _movie_title(
    episode: EpisodeAggregate,
    season: SeasonAggregate,
    title_type: TitleType,
    language: str | None,
    config: ResolutionConfig,
) -> str | None:
    main = resolve_series_title(season, season.name, title_type, language, config)
    subtitle = resolve_episode_title(episode, season, title_type, language, config)
    if is_ignored_subtitle(subtitle):
        return main
    if main is None:
        return subtitle
    return f"{main}: {subtitle}".strip()


def get_movie_titles(
    episode: EpisodeAggregate,
    season: SeasonAggregate,
    language: str | None,
    config: ResolutionConfig,
) -> TitlePair:
    """Return movie titles as ``"<season title>: <episode title>"``.

    The episode title is left out when it is blank or generic, such as
    ``"Complete Movie"`` or ``"OVA"``.
    """
    return (
        _movie_title(episode, season, TitleType.MAIN, language, config),
        _movie_title(episode, season, TitleType.ALTERNATE, language, config),
    )


def _anidb_description(description: str | None, language: str | None) -> str | None:
    return description if language == _ANIDB_DESCRIPTION_LANGUAGE else None


def get_show_description(
    show: ShowAggregate,
    language: str | None,
    config: ResolutionConfig,
) -> str:
    """Return the description for a show.

    Shows without their own primary record use the default season's.
    """
    season = show.default_season
    primary = show.primary_description
    if primary is None:
        primary = season.primary_description
    return resolve_description(
        {
            Provider.SHOKO: primary,
            Provider.ANIDB: _anidb_description(
                season.external_record(Provider.ANIDB).description, language
            ),
            Provider.TMDB: show.external_record(Provider.TMDB).description
            or season.external_record(Provider.TMDB).description,
        },
        config,
    )


def _entity_descriptions(
    entity: SeasonAggregate | EpisodeAggregate,
    language: str | None,
) -> dict[Provider, str | None]:
    return {
        Provider.SHOKO: entity.primary_description,
        Provider.ANIDB: _anidb_description(
            entity.external_record(Provider.ANIDB).description, language
        ),
        Provider.TMDB: entity.external_record(Provider.TMDB).description,
    }


def get_season_description(
    season: SeasonAggregate,
    language: str | None,
    config: ResolutionConfig,
) -> str:
    """Return the description for a season."""
    return resolve_description(_entity_descriptions(season, language), config)


def get_episode_description(
    episode: EpisodeAggregate,
    language: str | None,
    config: ResolutionConfig,
) -> str:
    """Return the description for an episode."""
    return resolve_description(_entity_descriptions(episode, language), config)


def get_episode_list_description(
    episodes: cabc.Iterable[EpisodeAggregate],
    language: str | None,
    config: ResolutionConfig,
) -> str:
    """Return the joined descriptions of several episodes.

    Used when one library item spans multiple episodes. Identical
    descriptions are only included once.
    """
    return (
        join_text(
            get_episode_description(episode, language, config) for episode in episodes
        )
        or ""
    )


def is_complete_movie(episode: EpisodeAggregate) -> bool:
    """Return True when ``episode`` is the canonical full-movie entry."""
    return (
        episode.kind is EpisodeKind.NORMAL
        and episode.name.strip() == COMPLETE_MOVIE_NAME
    )


def get_movie_description(
    episode: EpisodeAggregate,
    season: SeasonAggregate,
    language: str | None,
    config: ResolutionConfig,
) -> str:
    """Return the description for a movie entry.

    Only the full-movie entry of a multi-entry season inherits the season
    synopsis. Extras and alternate cuts use their own description.
    """
    is_multi_entry = season.total_episodes > 1
    if is_multi_entry and not is_complete_movie(episode):
        return get_episode_description(episode, language, config)
    return get_season_description(season, language, config)


__all__ = [
    "COMPLETE_MOVIE_NAME",
    "IGNORED_SUBTITLES",
    "TitlePair",
    "get_episode_description",
    "get_episode_list_description",
    "get_episode_titles",
    "get_movie_description",
    "get_movie_titles",
    "get_season_description",
    "get_season_titles",
    "get_show_description",
    "get_show_titles",
    "is_complete_movie",
    "is_ignored_subtitle",
]
