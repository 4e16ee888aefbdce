"""Shared coercion helpers for user-editable settings values."""

from __future__ import annotations

import enum
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

_EnumT = typ.TypeVar("_EnumT", bound=enum.StrEnum)

_TRUTHY_VALUES = frozenset({"1", "on", "true", "yes"})
_FALSY_VALUES = frozenset({"0", "off", "false", "no"})


def coerce_bool(value: object, default: bool) -> bool:  # noqa: FBT001
    """Coerce ``value`` to ``bool`` and return ``default`` on failure.

    Parameters
    ----------
    value : object
        Candidate value. Booleans are returned as-is and strings are matched
        against common truthy and falsy spellings; all other input types
        immediately use ``default``.
    default : bool
        Fallback value returned when conversion is not possible.

    Returns
    -------
    bool
        Converted value when recognised; otherwise ``default``.
    """
    if isinstance(value, bool):
        return value
    if not isinstance(value, str):
        return default
    text = value.strip().lower()
    if text in _TRUTHY_VALUES:
        return True
    if text in _FALSY_VALUES:
        return False
    return default


def coerce_names(value: object) -> list[str] | None:
    """Coerce a list setting into a list of raw entry names.

    Lists and tuples are taken element-wise and strings are split on commas.
    Returns ``None`` when ``value`` has no usable shape, so callers can fall
    back to their defaults.
    """
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    if isinstance(value, (list, tuple)):
        items = typ.cast("cabc.Sequence[object]", value)
        return [str(item).strip() for item in items if str(item).strip()]
    return None


def _fold_name(name: str) -> str:
    return "".join(char for char in name.lower() if char.isalnum())


def coerce_members(
    names: cabc.Iterable[str],
    member_type: type[_EnumT],
) -> tuple[list[_EnumT], list[str]]:
    """Match names to enum members, ignoring case and separators.

    Parameters
    ----------
    names : Iterable[str]
        Raw entry names, such as ``"AniDB_LibraryLanguage"``.
    member_type : type[_EnumT]
        String enum whose values are lower-case identifiers.

    Returns
    -------
    tuple[list[_EnumT], list[str]]
        Matched members in input order with duplicates removed, and the
        names that matched nothing.
    """
    lookup = {_fold_name(member.value): member for member in member_type}
    matched: dict[_EnumT, None] = {}
    unknown: list[str] = []
    for name in names:
        member = lookup.get(_fold_name(name))
        if member is None:
            unknown.append(name)
            continue
        matched.setdefault(member, None)
    return (list(matched), unknown)
