"""Exception classes for silversettings.

Preset validation failures are reported as ``ImportVerdict`` values, not
exceptions. The classes here cover the store layer and callers that want
a missing preset raised rather than checked.
"""

from __future__ import annotations

from pathlib import Path


class SilverSettingsError(Exception):
    """Base error for silversettings."""


class ConfigStoreError(SilverSettingsError):
    """Raised when a configuration store cannot be read or written."""

    def __init__(self, path: Path, message: str, original_error: Exception | None = None) -> None:
        """Initialize with the store path and failure details.

        Args:
            path: Store file that failed
            message: Human-readable error message
            original_error: The original exception that was caught
        """
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message
        self.original_error = original_error


class PresetNotFoundError(SilverSettingsError):
    """Raised when a preset name is not in the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(f'Preset "{name}" not found')
        self.name = name
