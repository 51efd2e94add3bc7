"""Preset data types and the import verdict."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from silversettings.constants import PRESET_GROUP_PREFIX, PRESET_META_KEYS


class ImportVerdict(Enum):
    """Outcome of validating a preset file.

    Failures are mutually exclusive; validation reports the first one in
    declaration order.
    """

    OK = "ok"
    INVALID_GLOBAL_GROUP = "invalid-global-group"
    INVALID_VERSION = "invalid-version"
    INVALID_GROUP = "invalid-group"
    INVALID_KEY = "invalid-key"


@dataclass(frozen=True)
class Preset:
    """A named bundle of decoration settings.

    Presets are never edited in place; a new import replaces the whole
    entry.
    """

    name: str
    values: dict[str, str] = field(default_factory=dict)
    version: str | None = None
    bundled: bool = False

    @property
    def group_name(self) -> str:
        """Group holding this preset in a catalog or preset file."""
        return f"{PRESET_GROUP_PREFIX}{self.name}"

    def settings_values(self) -> dict[str, str]:
        """Return the values that apply to live settings (no catalog metadata)."""
        return {k: v for k, v in self.values.items() if k not in PRESET_META_KEYS}


@dataclass(frozen=True)
class ImportResult:
    """Verdict of an import attempt plus what it produced.

    ``preset_name`` is set on success. ``error_message`` holds the offending
    key for ``INVALID_KEY``.
    """

    verdict: ImportVerdict
    preset_name: str = ""
    error_message: str = ""
    preset: Preset | None = None

    @property
    def ok(self) -> bool:
        return self.verdict is ImportVerdict.OK

    @classmethod
    def failure(cls, verdict: ImportVerdict, error_message: str = "") -> ImportResult:
        return cls(verdict=verdict, error_message=error_message)
