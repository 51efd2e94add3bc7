"""Apply a preset to live settings."""

from __future__ import annotations

import logging
from typing import Final

from silversettings.presets.models import Preset
from silversettings.settings.decoration import DecorationSettings

logger: Final = logging.getLogger(__name__)


def apply_preset(preset: Preset, settings: DecorationSettings) -> None:
    """Overlay a preset's values onto ``settings``.

    Keys the preset does not mention keep their current value. Catalog
    entries written by an older schema (dropped keys, out-of-range values)
    are skipped with a warning, the same way ``DecorationSettings.load``
    treats the settings store.
    """
    applied = 0
    for key, value in preset.settings_values().items():
        if not DecorationSettings.is_valid_entry(key, value):
            logger.warning("Skipping invalid entry %s=%r in preset %s", key, value, preset.name)
            continue
        setattr(settings, key, value)
        applied += 1
    logger.debug("Applied %d values from preset %s", applied, preset.name)
