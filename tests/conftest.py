from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from silversettings import long_version
from silversettings.constants import PRESET_FILE_GLOBAL_GROUP, PRESET_GROUP_PREFIX
from silversettings.orchestrator import Orchestrator
from silversettings.presets.catalog import PresetCatalog
from silversettings.protocols import MockIconGeneratorFactory, MockNotifier
from silversettings.storage.store import ConfigStore

_DEFAULT_VALUES = object()


def make_preset_yaml(
    name: str = "Test",
    version: Any = _DEFAULT_VALUES,
    values: dict[str, Any] | None = None,
    global_extra: dict[str, Any] | None = None,
) -> str:
    """Build preset file text; pass ``version=None`` to omit the version."""
    group = f"{PRESET_GROUP_PREFIX}{name}"
    global_group: dict[str, Any] = {"group": group}
    if version is _DEFAULT_VALUES:
        global_group["version"] = long_version()
    elif version is not None:
        global_group["version"] = version
    global_group.update(global_extra or {})
    content = values if values is not None else {"button_shape": "circle", "icon_size": 22}
    return yaml.safe_dump({PRESET_FILE_GLOBAL_GROUP: global_group, group: content}, sort_keys=False)


@pytest.fixture
def preset_file(tmp_path: Path):
    """Write preset text to a file and return its path."""

    def _write(text: str, filename: str = "preset.yaml") -> Path:
        path = tmp_path / filename
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def empty_bundled_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "bundled"
    directory.mkdir()
    return directory


@pytest.fixture
def settings_store(tmp_path: Path) -> ConfigStore:
    return ConfigStore(tmp_path / "config" / "silverrc.yaml")


@pytest.fixture
def catalog_store(tmp_path: Path) -> ConfigStore:
    return ConfigStore(tmp_path / "config" / "windecopresetsrc.yaml")


@pytest.fixture
def catalog(catalog_store: ConfigStore, empty_bundled_dir: Path) -> PresetCatalog:
    return PresetCatalog(catalog_store, bundled_dir=empty_bundled_dir)


@pytest.fixture
def notifier() -> MockNotifier:
    return MockNotifier()


@pytest.fixture
def icon_factory() -> MockIconGeneratorFactory:
    return MockIconGeneratorFactory()


@pytest.fixture
def orchestrator(
    settings_store: ConfigStore,
    catalog_store: ConfigStore,
    notifier: MockNotifier,
    icon_factory: MockIconGeneratorFactory,
    empty_bundled_dir: Path,
) -> Orchestrator:
    return Orchestrator(
        settings_store=settings_store,
        catalog_store=catalog_store,
        notifier=notifier,
        icon_generator_factory=icon_factory,
        bundled_dir=empty_bundled_dir,
    )


@pytest.fixture
def preset_yaml():
    """The ``make_preset_yaml`` builder."""
    return make_preset_yaml
