"""Tests for the metatext public API surface.

These tests verify the symbols exposed at the package boundary.

Examples
--------
Import the package to inspect its public surface:

>>> import metatext.text
"""

from __future__ import annotations

import metatext
import metatext.text


def test_public_api_symbols_resolve() -> None:
    """Verify every exported name is importable from the package."""
    missing = [name for name in metatext.text.__all__ if not hasattr(metatext.text, name)]

    assert missing == [], f"metatext.text should expose {missing!r}."


def test_root_package_exposes_no_resolution_api() -> None:
    """Verify the root package is a namespace for the subpackages only."""
    assert not hasattr(metatext, "get_show_titles"), (
        "metatext should not re-export the resolution API."
    )
