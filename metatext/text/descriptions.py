"""Select a description from the configured providers."""

from __future__ import annotations

import typing as typ

from .sanitizer import sanitize_description

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import ResolutionConfig
    from .domain import Provider


def resolve_description(
    descriptions: cabc.Mapping[Provider, str | None],
    config: ResolutionConfig,
) -> str:
    """Return the first non-empty sanitized description.

    Parameters
    ----------
    descriptions : Mapping[Provider, str | None]
        Raw descriptions offered by each provider. Providers may be absent.
    config : ResolutionConfig
        Preference snapshot supplying the provider order and sanitizer
        toggles.

    Returns
    -------
    str
        The sanitized description, or an empty string when no enabled
        provider has one.
    """
    for provider in config.ordered_description_providers():
        raw = descriptions.get(provider)
        if raw is None:
            continue
        overview = sanitize_description(raw, config.sanitizer)
        if overview:
            return overview
    return ""


__all__ = ["resolve_description"]
