"""Validation of preset files.

A preset file is checked in a fixed order and the first failure is
returned:

1. ``INVALID_GLOBAL_GROUP`` - not YAML, not a mapping, or no global group
2. ``INVALID_VERSION`` - version differs from the running one (unless forced)
3. ``INVALID_GROUP`` - the global group does not lead to a content group
4. ``INVALID_KEY`` - first content key outside the settings schema

The content group is found in two steps: the global group names it, then
it is fetched from the document.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Final

import yaml

from silversettings import long_version
from silversettings.constants import (
    GLOBAL_GROUP_KEY,
    GLOBAL_NAME_KEY,
    GLOBAL_VERSION_KEY,
    PRESET_FILE_GLOBAL_GROUP,
    PRESET_GROUP_PREFIX,
)
from silversettings.presets.models import ImportResult, ImportVerdict, Preset
from silversettings.settings.decoration import DecorationSettings
from silversettings.storage.store import to_store_value

logger: Final = logging.getLogger(__name__)


def parse_preset_document(raw: str) -> dict[str, Any] | None:
    """Parse raw preset text into a mapping of groups.

    Returns:
        The document, or None if it is not YAML or not a mapping
    """
    try:
        document = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        logger.debug("Preset is not valid YAML: %s", exc)
        return None
    if not isinstance(document, Mapping):
        return None
    return {str(k): v for k, v in document.items()}


def resolve_content_group_name(
    document: Mapping[str, Any], global_group: Mapping[str, Any]
) -> str | None:
    """Find the name of the content group the global group points to.

    Files without a ``group`` key (older exports) resolve to their single
    ``Windeco Preset`` group.
    """
    declared = global_group.get(GLOBAL_GROUP_KEY)
    if declared is not None:
        if not isinstance(declared, str) or not declared.startswith(PRESET_GROUP_PREFIX):
            return None
        return declared

    candidates = [
        name
        for name in document
        if name != PRESET_FILE_GLOBAL_GROUP and name.startswith(PRESET_GROUP_PREFIX)
    ]
    if len(candidates) != 1:
        return None
    return candidates[0]


def fetch_content_group(document: Mapping[str, Any], group_name: str) -> Mapping[str, Any] | None:
    content = document.get(group_name)
    if not isinstance(content, Mapping):
        return None
    return content


def first_invalid_key(content: Mapping[str, Any]) -> str | None:
    """Return the first key (in file order) the settings schema rejects."""
    for key, value in content.items():
        if not DecorationSettings.is_valid_entry(str(key), to_store_value(value)):
            return str(key)
    return None


def _display_name(global_group: Mapping[str, Any], group_name: str) -> str:
    declared = global_group.get(GLOBAL_NAME_KEY)
    if isinstance(declared, str) and declared.strip():
        return declared.strip()
    return group_name[len(PRESET_GROUP_PREFIX) :].strip()


def validate_preset(raw: str, app_version: str | None = None, force: bool = False) -> ImportResult:
    """Validate raw preset text.

    Args:
        raw: Preset file contents
        app_version: Version presets must match (default: running version)
        force: Accept presets stamped with another version

    Returns:
        ImportResult with the first failing verdict, or OK and the parsed preset
    """
    running_version = app_version if app_version is not None else long_version()

    document = parse_preset_document(raw)
    if document is None:
        return ImportResult.failure(ImportVerdict.INVALID_GLOBAL_GROUP)
    global_group = document.get(PRESET_FILE_GLOBAL_GROUP)
    if not isinstance(global_group, Mapping):
        return ImportResult.failure(ImportVerdict.INVALID_GLOBAL_GROUP)

    # Legacy presets carry no version and are accepted
    raw_version = global_group.get(GLOBAL_VERSION_KEY)
    version = to_store_value(raw_version) if raw_version is not None else None
    if version is not None and version != running_version and not force:
        logger.debug("Preset version %s does not match %s", version, running_version)
        return ImportResult.failure(ImportVerdict.INVALID_VERSION)

    group_name = resolve_content_group_name(document, global_group)
    if group_name is None:
        return ImportResult.failure(ImportVerdict.INVALID_GROUP)
    content = fetch_content_group(document, group_name)
    if content is None:
        return ImportResult.failure(ImportVerdict.INVALID_GROUP)

    bad_key = first_invalid_key(content)
    if bad_key is not None:
        return ImportResult.failure(ImportVerdict.INVALID_KEY, error_message=bad_key)

    name = _display_name(global_group, group_name)
    if not name:
        return ImportResult.failure(ImportVerdict.INVALID_GROUP)

    preset = Preset(
        name=name,
        values={str(k): to_store_value(v) for k, v in content.items()},
        version=version,
    )
    return ImportResult(verdict=ImportVerdict.OK, preset_name=name, preset=preset)
