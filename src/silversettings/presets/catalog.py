"""Catalog of named window decoration presets.

The catalog lives in its own store. Each preset is the group
``Windeco Preset <name>``; factory presets also carry ``BundledPreset``
so they can be refreshed without touching presets the user imported.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Final

import yaml

from silversettings import long_version
from silversettings.constants import (
    BUNDLED_PRESET_KEY,
    GLOBAL_GROUP_KEY,
    GLOBAL_NAME_KEY,
    GLOBAL_VERSION_KEY,
    PRESET_FILE_GLOBAL_GROUP,
    PRESET_GROUP_PREFIX,
    PRESET_META_KEYS,
)
from silversettings.errors import PresetNotFoundError
from silversettings.presets.applier import apply_preset
from silversettings.presets.models import ImportResult, ImportVerdict, Preset
from silversettings.presets.validator import validate_preset
from silversettings.protocols import Notifier
from silversettings.settings.application import BUNDLED_PRESETS_DIR
from silversettings.settings.decoration import DecorationSettings
from silversettings.storage.store import ConfigStore
from silversettings.utils.file import atomic_write_text

logger: Final = logging.getLogger(__name__)


class PresetCatalog:
    """Named presets backed by a ConfigStore.

    Examples:
        catalog = PresetCatalog(ConfigStore(paths.presets_file))
        result = catalog.import_preset_file(Path("ocean.yaml"))
        if result.ok:
            catalog.load_preset_and_save(settings, settings_store, result.preset_name)
    """

    def __init__(
        self,
        store: ConfigStore,
        app_version: str | None = None,
        bundled_dir: Path | None = None,
    ) -> None:
        """Initialize the catalog.

        Args:
            store: Store holding the catalog
            app_version: Version imported presets must match (default: running version)
            bundled_dir: Directory of factory preset files
        """
        self.store = store
        self.app_version = app_version if app_version is not None else long_version()
        self.bundled_dir = bundled_dir or BUNDLED_PRESETS_DIR

    # ---- lookup ----
    def preset_names(self) -> list[str]:
        """Return the names of all presets, sorted."""
        return sorted(
            group[len(PRESET_GROUP_PREFIX) :]
            for group in self.store.group_names()
            if group.startswith(PRESET_GROUP_PREFIX)
        )

    def is_preset_present(self, name: str) -> bool:
        return self.store.has_group(f"{PRESET_GROUP_PREFIX}{name}")

    def get_preset(self, name: str) -> Preset | None:
        group = f"{PRESET_GROUP_PREFIX}{name}"
        if not self.store.has_group(group):
            return None
        entries = self.store.read_group(group)
        return Preset(
            name=name,
            values={k: v for k, v in entries.items() if k not in PRESET_META_KEYS},
            bundled=entries.get(BUNDLED_PRESET_KEY) == "true",
        )

    def require_preset(self, name: str) -> Preset:
        """Like ``get_preset`` but raise if the preset is missing.

        Raises:
            PresetNotFoundError: If there is no preset called ``name``
        """
        preset = self.get_preset(name)
        if preset is None:
            raise PresetNotFoundError(name)
        return preset

    # ---- import ----
    def _write_preset(self, preset: Preset) -> None:
        entries = dict(preset.settings_values())
        if preset.bundled:
            entries[BUNDLED_PRESET_KEY] = "true"
        self.store.write_group(preset.group_name, entries)

    def import_preset(self, raw: str, force: bool = False) -> ImportResult:
        """Validate preset text and add it to the catalog.

        An existing preset with the same name is replaced. On any failure
        the catalog is left untouched.

        Args:
            raw: Preset file contents
            force: Accept presets made for a different version

        Returns:
            The validation result
        """
        result = validate_preset(raw, self.app_version, force)
        if not result.ok or result.preset is None:
            logger.debug("Preset rejected: %s %s", result.verdict.value, result.error_message)
            return result

        self._write_preset(result.preset)
        self.store.sync()
        logger.info("Imported preset %s", result.preset_name)
        return result

    def import_preset_file(self, path: Path, force: bool = False) -> ImportResult:
        """Import a preset file; unreadable files count as having no global group."""
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Cannot read preset file %s: %s", path, exc)
            return ImportResult.failure(ImportVerdict.INVALID_GLOBAL_GROUP)
        return self.import_preset(raw, force)

    def import_bundled_presets(self, source_dir: Path | None = None) -> list[str]:
        """Make sure every factory preset is in the catalog.

        Bundled presets are rewritten each time (so upgrades take effect)
        unless the user owns a preset with the same name. Files that fail
        validation are skipped.

        Args:
            source_dir: Directory of preset files (default: the catalog's bundled dir)

        Returns:
            Names of the bundled presets now in the catalog
        """
        directory = source_dir or self.bundled_dir
        if not directory.is_dir():
            logger.debug("No bundled presets directory at %s", directory)
            return []

        installed: list[str] = []
        for path in sorted(directory.glob("*.yaml")):
            try:
                raw = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("Skipping unreadable bundled preset %s: %s", path.name, exc)
                continue

            result = validate_preset(raw, self.app_version, force=True)
            if not result.ok or result.preset is None:
                logger.warning(
                    "Skipping bundled preset %s: %s %s",
                    path.name,
                    result.verdict.value,
                    result.error_message,
                )
                continue

            existing = self.get_preset(result.preset_name)
            if existing is not None and not existing.bundled:
                logger.debug("User preset %s shadows bundled preset", result.preset_name)
                continue

            self._write_preset(replace(result.preset, bundled=True))
            installed.append(result.preset_name)

        self.store.sync()
        return installed

    # ---- other catalog edits ----
    def save_preset_from_settings(self, settings: DecorationSettings, name: str) -> Preset:
        """Store the current settings as a user preset called ``name``."""
        preset = Preset(name=name, values=settings.to_store())
        self._write_preset(preset)
        self.store.sync()
        logger.info("Saved preset %s", name)
        return preset

    def delete_preset(self, name: str) -> bool:
        """Remove a preset.

        Returns:
            True if the preset existed
        """
        removed = self.store.delete_group(f"{PRESET_GROUP_PREFIX}{name}")
        if removed:
            self.store.sync()
            logger.info("Deleted preset %s", name)
        return removed

    def export_preset(self, name: str, path: Path) -> bool:
        """Write a preset to a file that ``import_preset_file`` accepts.

        Returns:
            False if there is no preset called ``name``
        """
        preset = self.get_preset(name)
        if preset is None:
            return False

        document = {
            PRESET_FILE_GLOBAL_GROUP: {
                GLOBAL_VERSION_KEY: self.app_version,
                GLOBAL_GROUP_KEY: preset.group_name,
                GLOBAL_NAME_KEY: preset.name,
            },
            preset.group_name: preset.settings_values(),
        }
        atomic_write_text(path, yaml.safe_dump(document, sort_keys=False, allow_unicode=True))
        logger.info("Exported preset %s to %s", name, path)
        return True

    # ---- apply ----
    def load_preset_and_save(
        self,
        settings: DecorationSettings,
        settings_store: ConfigStore,
        name: str,
        notify_window_manager: bool = False,
        notifier: Notifier | None = None,
    ) -> None:
        """Apply a preset to ``settings``, persist them, then notify.

        Does nothing if the preset is missing; check ``is_preset_present``
        first.

        Args:
            settings: Live settings to change
            settings_store: Store the settings are saved to
            name: Preset to apply
            notify_window_manager: Tell the compositor after saving
            notifier: Notifier used when ``notify_window_manager`` is set
        """
        preset = self.get_preset(name)
        if preset is None:
            logger.debug("Preset %s not in catalog; nothing loaded", name)
            return

        apply_preset(preset, settings)
        settings.save(settings_store)

        if notify_window_manager and notifier is not None:
            notifier.notify_derived_cache_stale()
            notifier.notify_config_reloaded()
