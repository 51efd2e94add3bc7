"""Shared names for stores, groups and keys."""

from __future__ import annotations

from typing import Final

# Set for builds made from the development branch
GIT_MASTER: Final = False

APP_NAME: Final = "silver-settings"

# Store file names inside the config directory
SETTINGS_FILE_NAME: Final = "silverrc.yaml"
PRESETS_FILE_NAME: Final = "windecopresetsrc.yaml"

# Group of the settings store holding the live decoration settings
SETTINGS_GROUP: Final = "Windeco"

# Preset file / catalog layout
PRESET_FILE_GLOBAL_GROUP: Final = "Silver Window Decoration Preset File"
PRESET_GROUP_PREFIX: Final = "Windeco Preset "
GLOBAL_VERSION_KEY: Final = "version"
GLOBAL_GROUP_KEY: Final = "group"
GLOBAL_NAME_KEY: Final = "name"

# Catalog-only keys, never applied to live settings
BUNDLED_PRESET_KEY: Final = "BundledPreset"
PRESET_META_KEYS: Final = frozenset({BUNDLED_PRESET_KEY})

# Icon themes written by the icon generator
LIGHT_ICON_THEME: Final = "silver"
DARK_ICON_THEME: Final = "silver-dark"
ICON_SIZES: Final = (16, 22, 32, 48)
