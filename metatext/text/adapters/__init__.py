"""Reference adapters for the settings port."""

from __future__ import annotations

from .settings import (
    EnvironmentSettingsSource,
    MappingSettingsSource,
    build_resolution_config,
)

__all__ = [
    "EnvironmentSettingsSource",
    "MappingSettingsSource",
    "build_resolution_config",
]
