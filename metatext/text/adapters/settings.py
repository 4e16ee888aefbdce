"""Reference settings adapters.

These adapters read user-editable preferences from a JSON-like mapping or
from ``METATEXT_*`` environment variables and produce ``ResolutionConfig``
snapshots. Preference lists are data rather than a contract: entries that
name no known source are dropped and logged at DEBUG level, and values of
the wrong shape fall back to the defaults.

Examples
--------
Read preferences saved by the host application:

>>> source = MappingSettingsSource(
...     {
...         "title_main_order": ["AniDB_LibraryLanguage", "Shoko_Default"],
...         "title_main_list": ["AniDB_LibraryLanguage", "Shoko_Default"],
...         "synopsis_clean_links": False,
...     }
... )
>>> source.snapshot().sanitizer.clean_links
False
"""

from __future__ import annotations

import enum
import os
import typing as typ

from metatext.logging import get_logger, log_debug
from metatext.text.config import ResolutionConfig, SanitizerToggles, TitleSource
from metatext.text.domain import Provider

from ._coercion import coerce_bool, coerce_members, coerce_names

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from metatext.text.domain import JsonMapping

logger = get_logger(__name__)

_EnumT = typ.TypeVar("_EnumT", bound=enum.StrEnum)

#: Prefix for environment variable names read by ``EnvironmentSettingsSource``.
ENVIRONMENT_PREFIX = "METATEXT_"

SETTING_KEYS: tuple[str, ...] = (
    "title_main_order",
    "title_main_list",
    "title_alternate_order",
    "title_alternate_list",
    "description_source_order",
    "description_source_list",
    "title_allow_any",
    "synopsis_clean_links",
    "synopsis_clean_misc_lines",
    "synopsis_remove_summary",
    "synopsis_clean_multi_empty_lines",
)

_DEFAULTS = ResolutionConfig()
_DEFAULT_TOGGLES = SanitizerToggles()


def _read_members(
    settings: JsonMapping,
    key: str,
    member_type: type[_EnumT],
    default: cabc.Iterable[_EnumT],
) -> tuple[_EnumT, ...]:
    names = coerce_names(settings.get(key))
    if names is None:
        return tuple(default)
    members, unknown = coerce_members(names, member_type)
    for name in unknown:
        log_debug(logger, "Ignoring unknown %s entry %r", key, name)
    return tuple(members)


def _read_flag(settings: JsonMapping, key: str, *, default: bool) -> bool:
    return coerce_bool(settings.get(key), default)


def build_resolution_config(settings: JsonMapping) -> ResolutionConfig:
    """Build a configuration snapshot from a settings mapping.

    Parameters
    ----------
    settings : JsonMapping
        Saved preferences keyed by the names in ``SETTING_KEYS``.

    Returns
    -------
    ResolutionConfig
        Snapshot with defaults filled in for missing or malformed entries.
    """
    sanitizer = SanitizerToggles(
        clean_links=_read_flag(
            settings, "synopsis_clean_links", default=_DEFAULT_TOGGLES.clean_links
        ),
        clean_misc_lines=_read_flag(
            settings,
            "synopsis_clean_misc_lines",
            default=_DEFAULT_TOGGLES.clean_misc_lines,
        ),
        remove_summary=_read_flag(
            settings,
            "synopsis_remove_summary",
            default=_DEFAULT_TOGGLES.remove_summary,
        ),
        collapse_empty_lines=_read_flag(
            settings,
            "synopsis_clean_multi_empty_lines",
            default=_DEFAULT_TOGGLES.collapse_empty_lines,
        ),
    )
    return ResolutionConfig(
        title_main_order=_read_members(
            settings, "title_main_order", TitleSource, _DEFAULTS.title_main_order
        ),
        title_main_enabled=frozenset(
            _read_members(
                settings, "title_main_list", TitleSource, _DEFAULTS.title_main_enabled
            ),
        ),
        title_alternate_order=_read_members(
            settings,
            "title_alternate_order",
            TitleSource,
            _DEFAULTS.title_alternate_order,
        ),
        title_alternate_enabled=frozenset(
            _read_members(
                settings,
                "title_alternate_list",
                TitleSource,
                _DEFAULTS.title_alternate_enabled,
            ),
        ),
        description_order=_read_members(
            settings,
            "description_source_order",
            Provider,
            _DEFAULTS.description_order,
        ),
        description_enabled=frozenset(
            _read_members(
                settings,
                "description_source_list",
                Provider,
                _DEFAULTS.description_enabled,
            ),
        ),
        title_allow_any=_read_flag(
            settings, "title_allow_any", default=_DEFAULTS.title_allow_any
        ),
        sanitizer=sanitizer,
    )


class MappingSettingsSource:
    """Settings source backed by a JSON-like mapping.

    The mapping is read on every ``snapshot()`` call, so a host that mutates
    its settings dictionary gets the new values on the next batch.
    """

    def __init__(self, settings: JsonMapping) -> None:
        self._settings = settings

    def snapshot(self) -> ResolutionConfig:
        """Return the current preferences as a ``ResolutionConfig``."""
        return build_resolution_config(self._settings)


class EnvironmentSettingsSource:
    """Settings source backed by ``METATEXT_*`` environment variables.

    Each key in ``SETTING_KEYS`` is read from the upper-cased variable name
    with ``ENVIRONMENT_PREFIX``, for example ``METATEXT_TITLE_MAIN_ORDER``.
    Lists are comma-separated and flags accept ``1/on/true/yes`` and
    ``0/off/false/no``.

    Parameters
    ----------
    environ : Mapping[str, str] | None
        Environment to read. Defaults to ``os.environ``.
    """

    def __init__(self, environ: cabc.Mapping[str, str] | None = None) -> None:
        self._environ = environ if environ is not None else os.environ

    def snapshot(self) -> ResolutionConfig:
        """Return the current environment preferences."""
        settings: JsonMapping = {}
        for key in SETTING_KEYS:
            raw_value = self._environ.get(f"{ENVIRONMENT_PREFIX}{key.upper()}")
            if raw_value is not None:
                settings[key] = raw_value
        return build_resolution_config(settings)


__all__ = [
    "ENVIRONMENT_PREFIX",
    "SETTING_KEYS",
    "EnvironmentSettingsSource",
    "MappingSettingsSource",
    "build_resolution_config",
]
