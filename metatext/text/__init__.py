"""Title and description resolution for provider-backed catalog entities.

This package exposes the entity models, the configuration snapshot and the
per-entity resolution entry points used by metadata providers.

Examples
--------
Resolve a season's titles and description for an English library:

>>> config = MappingSettingsSource(saved_settings).snapshot()
>>> main, alternate = get_season_titles(season, "en", config)
>>> overview = get_season_description(season, "en", config)
"""

from .config import (
    ResolutionConfig,
    SanitizerToggles,
    TitleMethod,
    TitleSource,
    TitleType,
)
from .descriptions import resolve_description
from .domain import (
    EpisodeAggregate,
    EpisodeKind,
    Provider,
    ProviderRecord,
    SeasonAggregate,
    ShowAggregate,
    Title,
    TitleKind,
)
from .joiner import join_text
from .languages import get_main_language, guess_origin_languages
from .ports import SettingsSource
from .sanitizer import sanitize_description
from .services import (
    get_episode_description,
    get_episode_list_description,
    get_episode_titles,
    get_movie_description,
    get_movie_titles,
    get_season_description,
    get_season_titles,
    get_show_description,
    get_show_titles,
)
from .titles import (
    find_title_for_languages,
    is_structural_label,
    resolve_episode_title,
    resolve_series_title,
)

# isort: split
# Adapters import the logging helpers, which the core modules above avoid.
from .adapters import (
    EnvironmentSettingsSource,
    MappingSettingsSource,
    build_resolution_config,
)

__all__: list[str] = [
    "EnvironmentSettingsSource",
    "EpisodeAggregate",
    "EpisodeKind",
    "MappingSettingsSource",
    "Provider",
    "ProviderRecord",
    "ResolutionConfig",
    "SanitizerToggles",
    "SeasonAggregate",
    "SettingsSource",
    "ShowAggregate",
    "Title",
    "TitleKind",
    "TitleMethod",
    "TitleSource",
    "TitleType",
    "build_resolution_config",
    "find_title_for_languages",
    "get_episode_description",
    "get_episode_list_description",
    "get_episode_titles",
    "get_main_language",
    "get_movie_description",
    "get_movie_titles",
    "get_season_description",
    "get_season_titles",
    "get_show_description",
    "get_show_titles",
    "guess_origin_languages",
    "is_structural_label",
    "join_text",
    "resolve_description",
    "resolve_episode_title",
    "resolve_series_title",
    "sanitize_description",
]
