"""Live window decoration settings.

The fields of ``DecorationSettings`` are the schema of recognized preset
keys: a preset key is valid only if it names a field here and its value
validates for that field.
"""

from __future__ import annotations

import logging
from typing import Any, Final, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from silversettings.constants import SETTINGS_GROUP
from silversettings.storage.store import ConfigStore, to_store_value

logger: Final = logging.getLogger(__name__)

HEX_COLOR_PATTERN: Final = r"^#[0-9a-fA-F]{6}$"


class DecorationSettings(BaseModel):
    """Window decoration settings for the running process.

    Loaded once from the settings store, changed by applying a preset, and
    then either saved whole or discarded.
    """

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    # Buttons
    button_shape: Literal["square", "small_square", "circle", "small_circle"] = Field(
        "small_circle", description="Shape of the titlebar button background"
    )
    button_icon_style: Literal["classic", "klassy", "fluent", "oxygen"] = Field(
        "klassy", description="Glyph style drawn inside titlebar buttons"
    )
    icon_size: int = Field(18, ge=8, le=48, description="Button icon size in pixels")
    button_spacing: int = Field(4, ge=0, le=24, description="Gap between buttons in pixels")
    icon_line_width: float = Field(1.0, ge=0.5, le=4.0, description="Glyph stroke width")

    # Titlebar
    titlebar_top_margin: float = Field(2.0, ge=0.0, le=20.0)
    titlebar_bottom_margin: float = Field(2.0, ge=0.0, le=20.0)
    titlebar_opacity: int = Field(100, ge=0, le=100, description="Titlebar opacity (%)")
    active_titlebar_color: str = Field("#3daee9", pattern=HEX_COLOR_PATTERN)
    inactive_titlebar_color: str = Field("#eff0f1", pattern=HEX_COLOR_PATTERN)
    draw_titlebar_separator: bool = True

    # Window
    window_corner_radius: float = Field(3.0, ge=0.0, le=30.0)
    draw_border_on_maximized_windows: bool = False

    # System icons
    system_icon_generation: bool = Field(
        True, description="Regenerate the silver system icons when settings change"
    )

    # ---- schema helpers ----
    @classmethod
    def schema_keys(cls) -> frozenset[str]:
        """Keys a preset may set."""
        return frozenset(cls.model_fields)

    @classmethod
    def is_valid_entry(cls, key: str, value: Any) -> bool:
        """Check that ``key`` is in the schema and ``value`` validates for it."""
        if key not in cls.model_fields:
            return False
        try:
            cls.model_validate({key: value})
        except ValidationError:
            return False
        return True

    # ---- persistence ----
    def to_store(self) -> dict[str, str]:
        """Return every field as store strings."""
        return {key: to_store_value(value) for key, value in self.model_dump(mode="json").items()}

    @classmethod
    def load(cls, store: ConfigStore) -> DecorationSettings:
        """Load settings from a store, falling back to defaults.

        Unknown keys and values that fail validation are skipped with a
        warning rather than aborting the load.
        """
        entries: dict[str, str] = {}
        for key, value in store.read_group(SETTINGS_GROUP).items():
            if cls.is_valid_entry(key, value):
                entries[key] = value
            else:
                logger.warning("Ignoring invalid setting %s=%r in %s", key, value, store.path)
        return cls.model_validate(entries)

    def save(self, store: ConfigStore) -> None:
        """Write all settings to the store and sync it."""
        store.write_group(SETTINGS_GROUP, self.to_store())
        store.sync()
