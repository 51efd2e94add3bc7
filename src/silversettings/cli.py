"""Silver settings CLI application.

This module provides the command-line interface for importing, loading, saving, exporting
and deleting window decoration presets and for regenerating the system icons.
"""

from __future__ import annotations

import logging
import sys
from functools import partial
from pathlib import Path
from typing import Final

import typer

from silversettings import long_version
from silversettings.constants import APP_NAME
from silversettings.errors import ConfigStoreError
from silversettings.icons.generator import SystemIconGenerator
from silversettings.notify import DBusNotifier
from silversettings.orchestrator import CommandRequest, CommandResult, CommandStatus, Orchestrator
from silversettings.settings.application import AppPaths
from silversettings.storage.store import ConfigStore

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Silver window decoration settings", add_completion=False)

logger: Final = logging.getLogger(__name__)  # Will be "silversettings.cli"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {long_version()}")
        raise typer.Exit()


IMPORT_OPTION = typer.Option(
    None,
    "--import-preset",
    "-i",
    metavar="FILE",
    dir_okay=False,
    help="Import a Silver preset file into the preset catalog.",
)
FORCE_OPTION = typer.Option(
    False,
    "--force-import-invalid-version",
    "-f",
    help="Force the import of a preset file from a different Silver version.",
)
LOAD_OPTION = typer.Option(
    None,
    "--load-windeco-preset",
    "-w",
    metavar="NAME",
    help="Load the window decoration preset called NAME.",
)
GENERATE_OPTION = typer.Option(
    False,
    "--generate-system-icons",
    "-g",
    help="Generate the silver and silver-dark system icons.",
)
SAVE_OPTION = typer.Option(
    None, "--save-preset", "-s", metavar="NAME", help="Save the current settings as preset NAME."
)
EXPORT_OPTION = typer.Option(
    None, "--export-preset", "-e", metavar="NAME", help="Export preset NAME to a preset file."
)
EXPORT_FILE_OPTION = typer.Option(
    None,
    "--output",
    "-o",
    metavar="FILE",
    dir_okay=False,
    help="File written by --export-preset (default: NAME.yaml).",
)
DELETE_OPTION = typer.Option(
    None, "--delete-preset", "-d", metavar="NAME", help="Delete preset NAME from the catalog."
)
LIST_OPTION = typer.Option(False, "--list-presets", "-l", help="List installed presets.")
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
VERSION_OPTION = typer.Option(
    False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
)


def build_orchestrator(paths: AppPaths) -> Orchestrator:
    """Open both stores and wire the real collaborators."""
    return Orchestrator(
        settings_store=ConfigStore(paths.settings_file),
        catalog_store=ConfigStore(paths.presets_file),
        notifier=DBusNotifier(),
        icon_generator_factory=partial(SystemIconGenerator, output_dir=paths.icons_dir),
        bundled_dir=paths.bundled_presets_dir,
    )


def report(result: CommandResult) -> None:
    for outcome in result.outcomes:
        if outcome.ok:
            typer.echo(outcome.message)
        else:
            typer.secho(outcome.message, fg=typer.colors.RED, err=True)


@app.command()
def silver_settings(
    ctx: typer.Context,
    import_preset: Path | None = IMPORT_OPTION,
    force_import_invalid_version: bool = FORCE_OPTION,
    load_windeco_preset: str | None = LOAD_OPTION,
    generate_system_icons: bool = GENERATE_OPTION,
    save_preset: str | None = SAVE_OPTION,
    export_preset: str | None = EXPORT_OPTION,
    output: Path | None = EXPORT_FILE_OPTION,
    delete_preset: str | None = DELETE_OPTION,
    list_presets: bool = LIST_OPTION,
    debug: bool = DEBUG_OPTION,
    version: bool = VERSION_OPTION,
) -> None:
    """Import, load, export and apply Silver window decoration presets."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    request = CommandRequest(
        import_preset=import_preset,
        force_import=force_import_invalid_version,
        load_preset=load_windeco_preset,
        generate_icons=generate_system_icons,
        save_preset=save_preset,
        export_preset=export_preset,
        export_path=output,
        delete_preset=delete_preset,
        list_presets=list_presets,
    )

    try:
        result = build_orchestrator(AppPaths.from_environment()).run(request)
    except ConfigStoreError as exc:
        typer.secho(f"ERROR: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    report(result)

    if result.status is CommandStatus.NO_COMMAND:
        # The settings dialog is not part of this tool
        typer.echo("No command given.\n")
        typer.echo(ctx.get_help())
        return
    if result.status is CommandStatus.ERROR:
        raise typer.Exit(code=1)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    main()
