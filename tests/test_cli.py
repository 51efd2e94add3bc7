from pathlib import Path

import pytest
from PIL import Image
from typer.testing import CliRunner

from silversettings import long_version
from silversettings.cli import app
from silversettings.protocols import MockNotifier

runner = CliRunner()


@pytest.fixture
def cli_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Point the CLI at temporary stores and keep it off the session bus."""
    monkeypatch.setattr("silversettings.cli.DBusNotifier", MockNotifier)
    bundled = tmp_path / "bundled"
    bundled.mkdir()
    return {
        "SILVER_CONFIG_DIR": str(tmp_path / "config"),
        "SILVER_ICONS_DIR": str(tmp_path / "icons"),
        "SILVER_BUNDLED_PRESETS_DIR": str(bundled),
    }


def test_version() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert long_version() in result.output


def test_help_lists_options() -> None:
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for option in (
        "--import-preset",
        "--load-windeco-preset",
        "--generate-system-icons",
        "--save-preset",
        "--export-preset",
        "--delete-preset",
    ):
        assert option in result.output


def test_no_command(cli_env: dict[str, str]) -> None:
    result = runner.invoke(app, [], env=cli_env)
    assert result.exit_code == 0
    assert "No command given" in result.output


def test_import(cli_env: dict[str, str], preset_yaml, preset_file) -> None:
    result = runner.invoke(app, ["-i", str(preset_file(preset_yaml("Test")))], env=cli_env)

    assert result.exit_code == 0
    assert 'Preset, "Test" imported.' in result.output
    assert (Path(cli_env["SILVER_CONFIG_DIR"]) / "windecopresetsrc.yaml").exists()


def test_import_wrong_version_needs_force(cli_env: dict[str, str], preset_yaml, preset_file) -> None:
    path = str(preset_file(preset_yaml("Test", version="0.0.1")))

    result = runner.invoke(app, ["--import-preset", path], env=cli_env)
    assert result.exit_code == 1
    assert "different version" in result.output

    result = runner.invoke(app, ["--import-preset", path, "-f"], env=cli_env)
    assert result.exit_code == 0


def test_load_missing_preset(cli_env: dict[str, str]) -> None:
    result = runner.invoke(app, ["-w", "Missing"], env=cli_env)

    assert result.exit_code == 1
    assert 'Preset, "Missing" not found.' in result.output
    assert not (Path(cli_env["SILVER_CONFIG_DIR"]) / "silverrc.yaml").exists()


def test_import_load_and_generate_icons(cli_env: dict[str, str], preset_yaml, preset_file) -> None:
    path = str(preset_file(preset_yaml("Test", values={"button_shape": "square"})))

    result = runner.invoke(app, ["-i", path, "-w", "Test"], env=cli_env)

    assert result.exit_code == 0, result.output
    assert 'Preset, "Test" loaded...' in result.output
    assert "system icons generated" in result.output
    settings_text = (Path(cli_env["SILVER_CONFIG_DIR"]) / "silverrc.yaml").read_text()
    assert "square" in settings_text
    icon = Path(cli_env["SILVER_ICONS_DIR"]) / "silver-dark" / "32x32" / "apps" / "silver-settings.png"
    with Image.open(icon) as image:
        assert image.size == (32, 32)


def test_list_presets(cli_env: dict[str, str], preset_yaml, preset_file) -> None:
    runner.invoke(app, ["-i", str(preset_file(preset_yaml("Listed")))], env=cli_env)

    result = runner.invoke(app, ["--list-presets"], env=cli_env)

    assert result.exit_code == 0
    assert "Listed" in result.output


def test_corrupt_store_reports_error(cli_env: dict[str, str]) -> None:
    config_dir = Path(cli_env["SILVER_CONFIG_DIR"])
    config_dir.mkdir()
    (config_dir / "windecopresetsrc.yaml").write_text("- not\n- groups\n")

    result = runner.invoke(app, ["-g"], env=cli_env)

    assert result.exit_code == 1
    assert "ERROR" in result.output


def test_save_export_and_delete(cli_env: dict[str, str], tmp_path: Path) -> None:
    exported = tmp_path / "mine.yaml"

    result = runner.invoke(app, ["-s", "Mine"], env=cli_env)
    assert result.exit_code == 0, result.output
    assert 'Preset, "Mine" saved.' in result.output

    result = runner.invoke(app, ["-e", "Mine", "-o", str(exported)], env=cli_env)
    assert result.exit_code == 0, result.output
    assert exported.exists()

    result = runner.invoke(app, ["-d", "Mine", "-l"], env=cli_env)
    assert result.exit_code == 0, result.output
    assert 'Preset, "Mine" deleted.' in result.output
    assert "No presets installed." in result.output

    result = runner.invoke(app, ["-i", str(exported)], env=cli_env)
    assert result.exit_code == 0, result.output
    assert 'Preset, "Mine" imported.' in result.output


def test_delete_missing_preset(cli_env: dict[str, str]) -> None:
    result = runner.invoke(app, ["--delete-preset", "Missing"], env=cli_env)

    assert result.exit_code == 1
    assert 'Preset, "Missing" not found.' in result.output
