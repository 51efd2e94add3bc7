"""Command pipeline for silver-settings.

The orchestrator runs the intents requested in one invocation and turns
each stage's outcome into an ``IntentOutcome``. Nothing raised by preset
validation crosses this boundary; failures are values.

Loading a preset always regenerates the system icons afterwards, whether
or not icon generation was requested. The icons are drawn from the
settings saved by the load, after the compositor has been notified.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Final

from silversettings.presets.catalog import PresetCatalog
from silversettings.presets.models import ImportVerdict
from silversettings.protocols import IconGeneratorFactory, Notifier
from silversettings.settings.decoration import DecorationSettings
from silversettings.storage.store import ConfigStore

logger: Final = logging.getLogger(__name__)


class CommandStatus(Enum):
    """Terminal state of one invocation."""

    COMMANDS_PROCESSED_OK = "ok"
    ERROR = "error"
    NO_COMMAND = "no-command"  # caller may fall back to the interactive UI


class Intent(Enum):
    IMPORT = "import"
    LOAD_PRESET = "load-preset"
    GENERATE_ICONS = "generate-icons"
    SAVE_PRESET = "save-preset"
    EXPORT_PRESET = "export-preset"
    DELETE_PRESET = "delete-preset"
    LIST_PRESETS = "list-presets"


class CommandError(Enum):
    """Every failure the pipeline can report."""

    INVALID_GLOBAL_GROUP = "invalid-global-group"
    INVALID_VERSION = "invalid-version"
    INVALID_GROUP = "invalid-group"
    INVALID_KEY = "invalid-key"
    PRESET_NOT_FOUND = "preset-not-found"

    @classmethod
    def from_verdict(cls, verdict: ImportVerdict) -> CommandError:
        return cls[verdict.name]


@dataclass(frozen=True)
class CommandRequest:
    """Intents requested for one invocation; any combination is allowed."""

    import_preset: Path | None = None
    force_import: bool = False
    load_preset: str | None = None
    generate_icons: bool = False
    save_preset: str | None = None
    export_preset: str | None = None
    export_path: Path | None = None  # default: <name>.yaml in the working directory
    delete_preset: str | None = None
    list_presets: bool = False


@dataclass(frozen=True)
class IntentOutcome:
    intent: Intent
    ok: bool
    message: str
    error: CommandError | None = None


@dataclass
class CommandResult:
    status: CommandStatus
    outcomes: list[IntentOutcome] = field(default_factory=list)

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outcomes]

    @property
    def errors(self) -> list[CommandError]:
        return [o.error for o in self.outcomes if o.error is not None]


def import_error_message(verdict: ImportVerdict, path: Path, key: str = "") -> str:
    """Message shown for a rejected preset file."""
    if verdict is ImportVerdict.INVALID_VERSION:
        return (
            f'ERROR: The file to import at "{path}" was created for a different version '
            "of Silver.\n To force import, use the --force-import-invalid-version option."
        )
    if verdict is ImportVerdict.INVALID_GROUP:
        return f'ERROR: No preset group found in Silver Preset file at "{path}".'
    if verdict is ImportVerdict.INVALID_KEY:
        return f'ERROR: Invalid key "{key}" in Silver Preset file at "{path}".'
    return f'ERROR: Invalid Silver Preset file to import at "{path}".'


class Orchestrator:
    """Sequences import, load-preset, icon generation and catalog edits.

    The two stores are passed in and used for the whole invocation; the
    orchestrator assumes it is their only writer.
    """

    def __init__(
        self,
        settings_store: ConfigStore,
        catalog_store: ConfigStore,
        notifier: Notifier,
        icon_generator_factory: IconGeneratorFactory,
        bundled_dir: Path | None = None,
        app_version: str | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            settings_store: Store of the live decoration settings
            catalog_store: Store of the preset catalog
            notifier: Compositor notifier
            icon_generator_factory: Builds an icon generator from settings
            bundled_dir: Factory presets directory (default: package data)
            app_version: Version imported presets must match
        """
        self.settings_store = settings_store
        self.catalog = PresetCatalog(catalog_store, app_version=app_version, bundled_dir=bundled_dir)
        self.notifier = notifier
        self.icon_generator_factory = icon_generator_factory

    def run(self, request: CommandRequest) -> CommandResult:
        """Run every requested intent.

        A failed import stops a load-preset in the same run, and a failed
        load-preset skips the icon generation it would have triggered.
        Other intents run regardless.
        """
        outcomes: list[IntentOutcome] = []

        import_failed = False
        if request.import_preset is not None:
            outcome = self.import_preset(request.import_preset, request.force_import)
            outcomes.append(outcome)
            import_failed = not outcome.ok

        preset_loaded = False
        if request.load_preset is not None and import_failed:
            logger.info("Import failed; not loading preset %s", request.load_preset)
        elif request.load_preset is not None:
            outcome = self.load_preset(request.load_preset)
            outcomes.append(outcome)
            preset_loaded = outcome.ok

        if request.generate_icons or preset_loaded:
            outcomes.append(self.generate_icons())

        if request.save_preset is not None:
            outcomes.append(self.save_preset(request.save_preset))

        if request.export_preset is not None:
            outcomes.append(self.export_preset(request.export_preset, request.export_path))

        if request.delete_preset is not None:
            outcomes.append(self.delete_preset(request.delete_preset))

        if request.list_presets:
            outcomes.append(self.list_presets())

        if not outcomes:
            return CommandResult(CommandStatus.NO_COMMAND)
        if any(not o.ok for o in outcomes):
            return CommandResult(CommandStatus.ERROR, outcomes)
        return CommandResult(CommandStatus.COMMANDS_PROCESSED_OK, outcomes)

    def import_preset(self, path: Path, force: bool = False) -> IntentOutcome:
        result = self.catalog.import_preset_file(path, force)
        if not result.ok:
            logger.debug("Import of %s failed: %s", path, result.verdict.value)
            return IntentOutcome(
                Intent.IMPORT,
                ok=False,
                message=import_error_message(result.verdict, path, result.error_message),
                error=CommandError.from_verdict(result.verdict),
            )
        return IntentOutcome(Intent.IMPORT, ok=True, message=f'Preset, "{result.preset_name}" imported.')

    def load_preset(self, name: str) -> IntentOutcome:
        self.catalog.import_bundled_presets()

        if not self.catalog.is_preset_present(name):
            return IntentOutcome(
                Intent.LOAD_PRESET,
                ok=False,
                message=f'ERROR: Preset, "{name}" not found.',
                error=CommandError.PRESET_NOT_FOUND,
            )

        settings = DecorationSettings.load(self.settings_store)
        self.catalog.load_preset_and_save(
            settings, self.settings_store, name, notify_window_manager=True, notifier=self.notifier
        )
        logger.info("Loaded preset %s", name)
        return IntentOutcome(Intent.LOAD_PRESET, ok=True, message=f'Preset, "{name}" loaded...')

    def generate_icons(self) -> IntentOutcome:
        settings = DecorationSettings.load(self.settings_store)
        generator = self.icon_generator_factory(settings)
        generator.generate()
        return IntentOutcome(
            Intent.GENERATE_ICONS, ok=True, message="silver and silver-dark system icons generated."
        )

    def list_presets(self) -> IntentOutcome:
        self.catalog.import_bundled_presets()
        names = self.catalog.preset_names()
        if not names:
            return IntentOutcome(Intent.LIST_PRESETS, ok=True, message="No presets installed.")
        return IntentOutcome(Intent.LIST_PRESETS, ok=True, message="\n".join(names))

    def save_preset(self, name: str) -> IntentOutcome:
        settings = DecorationSettings.load(self.settings_store)
        self.catalog.save_preset_from_settings(settings, name)
        return IntentOutcome(Intent.SAVE_PRESET, ok=True, message=f'Preset, "{name}" saved.')

    def export_preset(self, name: str, path: Path | None = None) -> IntentOutcome:
        self.catalog.import_bundled_presets()
        target = path or Path(f"{name}.yaml")
        if not self.catalog.export_preset(name, target):
            return IntentOutcome(
                Intent.EXPORT_PRESET,
                ok=False,
                message=f'ERROR: Preset, "{name}" not found.',
                error=CommandError.PRESET_NOT_FOUND,
            )
        return IntentOutcome(
            Intent.EXPORT_PRESET, ok=True, message=f'Preset, "{name}" exported to "{target}".'
        )

    def delete_preset(self, name: str) -> IntentOutcome:
        if not self.catalog.delete_preset(name):
            return IntentOutcome(
                Intent.DELETE_PRESET,
                ok=False,
                message=f'ERROR: Preset, "{name}" not found.',
                error=CommandError.PRESET_NOT_FOUND,
            )
        return IntentOutcome(Intent.DELETE_PRESET, ok=True, message=f'Preset, "{name}" deleted.')
