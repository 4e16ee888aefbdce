"""Port protocol for the settings collaborator.

The host application owns preference storage. Adapters implementing
``SettingsSource`` turn whatever it stores into an immutable
``ResolutionConfig`` snapshot, which callers then pass to every resolver
call in a batch.

Examples
--------
Implement a settings source backed by a fixed snapshot:

>>> class FixedSettings:
...     def snapshot(self) -> ResolutionConfig:
...         return ResolutionConfig()
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from .config import ResolutionConfig


class SettingsSource(typ.Protocol):
    """Produces resolution configuration snapshots.

    Methods
    -------
    snapshot()
        Read the current preferences into a ``ResolutionConfig``.
    """

    def snapshot(self) -> ResolutionConfig:
        """Return the current preferences as an immutable snapshot.

        Returns
        -------
        ResolutionConfig
            Preferences to use for one batch of resolution calls.
        """
        ...


__all__ = ["SettingsSource"]
