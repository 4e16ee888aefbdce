"""Domain models for provider-backed catalog entities.

Aggregates are assembled by the ingestion collaborator once per catalog sync
and are treated as read-only by the resolution core.
"""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

JsonMapping: typ.TypeAlias = dict[str, object]


class Provider(enum.StrEnum):
    """Upstream sources of entity metadata."""

    SHOKO = "shoko"
    ANIDB = "anidb"
    TMDB = "tmdb"


class TitleKind(enum.StrEnum):
    """Provider-assigned classification of a title."""

    MAIN = "main"
    OFFICIAL = "official"
    SYNONYM = "synonym"
    SHORT = "short"
    TITLE_CARD = "title_card"
    KANA = "kana"
    NONE = "none"


class EpisodeKind(enum.StrEnum):
    """Classification of an episode within its season."""

    NORMAL = "normal"
    SPECIAL = "special"
    CREDITS = "credits"
    TRAILER = "trailer"
    PARODY = "parody"
    OTHER = "other"
    UNKNOWN = "unknown"


@dc.dataclass(frozen=True, slots=True)
class Title:
    """A single title as recorded by a provider.

    Attributes
    ----------
    value : str
        The title text.
    language_code : str
        Provider language code, such as ``"en"``, ``"ja"`` or ``"x-jat"``.
    kind : TitleKind
        Classification used to rank titles within a language.
    """

    value: str
    language_code: str
    kind: TitleKind = TitleKind.NONE


@dc.dataclass(frozen=True, slots=True)
class ProviderRecord:
    """Titles and description attached to an entity by one provider."""

    titles: tuple[Title, ...] = ()
    description: str | None = None


_EMPTY_RECORD = ProviderRecord()


@dc.dataclass(frozen=True, kw_only=True)
class _ProviderBacked:
    """Fields shared by every aggregate.

    Attributes
    ----------
    name : str
        Default display name from the primary catalog source.
    primary : ProviderRecord | None
        Record from the primary catalog source.
    external : Mapping[Provider, ProviderRecord]
        Records from external metadata sources, keyed by provider.
    """

    name: str
    primary: ProviderRecord | None = None
    external: cabc.Mapping[Provider, ProviderRecord] = dc.field(
        default_factory=dict,
    )

    def external_record(self, provider: Provider) -> ProviderRecord:
        """Return the record for ``provider``, or an empty record."""
        return self.external.get(provider, _EMPTY_RECORD)

    @property
    def primary_description(self) -> str | None:
        """Return the primary catalog description, if any."""
        return self.primary.description if self.primary is not None else None


@dc.dataclass(frozen=True, kw_only=True)
class SeasonAggregate(_ProviderBacked):
    """A season together with its provider records."""

    total_episodes: int = 0


@dc.dataclass(frozen=True, kw_only=True)
class EpisodeAggregate(_ProviderBacked):
    """An episode together with its provider records."""

    kind: EpisodeKind = EpisodeKind.NORMAL


@dc.dataclass(frozen=True, kw_only=True)
class ShowAggregate(_ProviderBacked):
    """A show together with its provider records and default season.

    Shows built from a primary-source group carry their own ``primary``
    record; other shows fall back to the default season's.
    """

    default_season: SeasonAggregate


__all__ = [
    "EpisodeAggregate",
    "EpisodeKind",
    "JsonMapping",
    "Provider",
    "ProviderRecord",
    "SeasonAggregate",
    "ShowAggregate",
    "Title",
    "TitleKind",
]
