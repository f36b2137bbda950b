"""Test helpers for Birdnest."""

from typing import Any

from custom_components.birdnest.const import STORAGE_KEY, STORAGE_VERSION


def stored(documents: dict[str, Any]) -> dict[str, Any]:
    """Wrap documents the way Home Assistant writes a storage file."""
    return {
        "version": STORAGE_VERSION,
        "minor_version": 1,
        "key": STORAGE_KEY,
        "data": documents,
    }
