"""Resolution configuration snapshot.

A ``ResolutionConfig`` is passed explicitly to every resolver call. It holds
the user's ordered provider preferences, the subset of them that is enabled,
and the description sanitizer toggles.

Examples
--------
Prefer the library language from AniDB, then the primary name:

>>> config = ResolutionConfig(
...     title_main_order=(
...         TitleSource.ANIDB_LIBRARY_LANGUAGE,
...         TitleSource.SHOKO_DEFAULT,
...     ),
...     title_main_enabled=frozenset(TitleSource),
... )
>>> config.ordered_title_sources(TitleType.MAIN)
(<TitleSource.ANIDB_LIBRARY_LANGUAGE: 'anidb_library_language'>, ...)
"""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

from .domain import Provider

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class TitleType(enum.StrEnum):
    """Which title slot is being resolved."""

    MAIN = "main"
    ALTERNATE = "alternate"


class TitleMethod(enum.StrEnum):
    """How a provider's titles are consulted."""

    DEFAULT = "default"
    LIBRARY_LANGUAGE = "library_language"
    COUNTRY_OF_ORIGIN = "country_of_origin"


class TitleSource(enum.StrEnum):
    """A provider paired with a title look-up method."""

    SHOKO_DEFAULT = "shoko_default"
    ANIDB_DEFAULT = "anidb_default"
    ANIDB_LIBRARY_LANGUAGE = "anidb_library_language"
    ANIDB_COUNTRY_OF_ORIGIN = "anidb_country_of_origin"
    TMDB_DEFAULT = "tmdb_default"
    TMDB_LIBRARY_LANGUAGE = "tmdb_library_language"
    TMDB_COUNTRY_OF_ORIGIN = "tmdb_country_of_origin"

    @property
    def provider(self) -> Provider:
        """Return the provider half of the tag."""
        return Provider(self.value.split("_", 1)[0])

    @property
    def method(self) -> TitleMethod:
        """Return the method half of the tag."""
        return TitleMethod(self.value.split("_", 1)[1])


@dc.dataclass(frozen=True, slots=True)
class SanitizerToggles:
    """Switches for the individual description cleanup passes."""

    clean_links: bool = True
    clean_misc_lines: bool = True
    remove_summary: bool = True
    collapse_empty_lines: bool = True


DEFAULT_TITLE_ORDER: tuple[TitleSource, ...] = tuple(TitleSource)
DEFAULT_DESCRIPTION_ORDER: tuple[Provider, ...] = (
    Provider.SHOKO,
    Provider.ANIDB,
    Provider.TMDB,
)


def _require_members(
    values: cabc.Iterable[object],
    member_type: type,
    field_name: str,
) -> None:
    for value in values:
        if not isinstance(value, member_type):
            msg = (
                f"{field_name} must only contain {member_type.__name__} "
                f"members, got {value!r}."
            )
            raise TypeError(msg)


@dc.dataclass(frozen=True, slots=True)
class ResolutionConfig:
    """Immutable snapshot of the title and description preferences.

    Attributes
    ----------
    title_main_order : tuple[TitleSource, ...]
        Preference order for main titles.
    title_main_enabled : frozenset[TitleSource]
        Main-title sources the user has switched on.
    title_alternate_order : tuple[TitleSource, ...]
        Preference order for alternate titles.
    title_alternate_enabled : frozenset[TitleSource]
        Alternate-title sources the user has switched on.
    description_order : tuple[Provider, ...]
        Preference order for descriptions.
    description_enabled : frozenset[Provider]
        Description providers the user has switched on.
    title_allow_any : bool
        Accept any title in the requested language when no official title
        exists for it.
    sanitizer : SanitizerToggles
        Description cleanup switches.
    """

    title_main_order: tuple[TitleSource, ...] = DEFAULT_TITLE_ORDER
    title_main_enabled: frozenset[TitleSource] = frozenset(
        {TitleSource.SHOKO_DEFAULT},
    )
    title_alternate_order: tuple[TitleSource, ...] = DEFAULT_TITLE_ORDER
    title_alternate_enabled: frozenset[TitleSource] = frozenset(
        {TitleSource.ANIDB_COUNTRY_OF_ORIGIN},
    )
    description_order: tuple[Provider, ...] = DEFAULT_DESCRIPTION_ORDER
    description_enabled: frozenset[Provider] = frozenset(DEFAULT_DESCRIPTION_ORDER)
    title_allow_any: bool = False
    sanitizer: SanitizerToggles = dc.field(default_factory=SanitizerToggles)

    def __post_init__(self) -> None:
        """Validate member types of the preference collections."""
        _require_members(self.title_main_order, TitleSource, "title_main_order")
        _require_members(self.title_main_enabled, TitleSource, "title_main_enabled")
        _require_members(
            self.title_alternate_order, TitleSource, "title_alternate_order"
        )
        _require_members(
            self.title_alternate_enabled, TitleSource, "title_alternate_enabled"
        )
        _require_members(self.description_order, Provider, "description_order")
        _require_members(self.description_enabled, Provider, "description_enabled")

    def ordered_title_sources(self, title_type: TitleType) -> tuple[TitleSource, ...]:
        """Return the enabled title sources for ``title_type`` in order."""
        match title_type:
            case TitleType.MAIN:
                order, enabled = self.title_main_order, self.title_main_enabled
            case TitleType.ALTERNATE:
                order, enabled = (
                    self.title_alternate_order,
                    self.title_alternate_enabled,
                )
            case _:
                typ.assert_never(title_type)
        return tuple(source for source in order if source in enabled)

    def ordered_description_providers(self) -> tuple[Provider, ...]:
        """Return the enabled description providers in order."""
        return tuple(
            provider
            for provider in self.description_order
            if provider in self.description_enabled
        )


__all__ = [
    "DEFAULT_DESCRIPTION_ORDER",
    "DEFAULT_TITLE_ORDER",
    "ResolutionConfig",
    "SanitizerToggles",
    "TitleMethod",
    "TitleSource",
    "TitleType",
]
