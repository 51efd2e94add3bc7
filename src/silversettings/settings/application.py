"""File and directory locations used by the application."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from silversettings.constants import PRESETS_FILE_NAME, SETTINGS_FILE_NAME

# Load environment variables from .env file(s)
load_dotenv()

BUNDLED_PRESETS_DIR = Path(__file__).resolve().parents[1] / "presets" / "bundled"


def _xdg_dir(variable: str, fallback: str) -> Path:
    value = os.environ.get(variable)
    if value:
        return Path(value)
    return Path(fallback).expanduser()


@dataclass
class AppPaths:
    """Application file and directory paths.

    Centralizes the two configuration stores (live settings and the preset
    catalog), the directory of factory presets, and where generated system
    icons are written.
    """

    config_dir: Path
    icons_dir: Path
    bundled_presets_dir: Path = BUNDLED_PRESETS_DIR
    settings_file_name: str = SETTINGS_FILE_NAME
    presets_file_name: str = PRESETS_FILE_NAME

    @property
    def settings_file(self) -> Path:
        """Store holding the live decoration settings."""
        return self.config_dir / self.settings_file_name

    @property
    def presets_file(self) -> Path:
        """Store holding the preset catalog."""
        return self.config_dir / self.presets_file_name

    @classmethod
    def from_base_dir(cls, base_dir: Path) -> AppPaths:
        """Create paths rooted in one directory (used for tests and portable setups)."""
        return cls(
            config_dir=base_dir / "config",
            icons_dir=base_dir / "icons",
        )

    @classmethod
    def from_environment(cls) -> AppPaths:
        """Create paths from environment variables and XDG defaults.

        ``SILVER_CONFIG_DIR``, ``SILVER_ICONS_DIR`` and
        ``SILVER_BUNDLED_PRESETS_DIR`` override the defaults.
        """
        config_dir = os.environ.get("SILVER_CONFIG_DIR")
        icons_dir = os.environ.get("SILVER_ICONS_DIR")
        bundled_dir = os.environ.get("SILVER_BUNDLED_PRESETS_DIR")
        return cls(
            config_dir=Path(config_dir)
            if config_dir
            else _xdg_dir("XDG_CONFIG_HOME", "~/.config") / "silver",
            icons_dir=Path(icons_dir)
            if icons_dir
            else _xdg_dir("XDG_DATA_HOME", "~/.local/share") / "icons",
            bundled_presets_dir=Path(bundled_dir) if bundled_dir else BUNDLED_PRESETS_DIR,
        )
