"""Application settings management.

This package provides:
- AppPaths: Locations of the stores, bundled presets and icon output
- DecorationSettings: The live window decoration settings and their schema
"""

from .application import AppPaths
from .decoration import DecorationSettings

__all__ = ["AppPaths", "DecorationSettings"]
