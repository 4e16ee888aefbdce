"""Localized title and description resolution for catalog metadata.

The resolution API lives in :mod:`metatext.text`; logging helpers live in
:mod:`metatext.logging`.
"""
