"""YAML-backed configuration store.

A store is a file holding named groups, each a flat mapping of string keys
to string values::

    Windeco:
      button_shape: circle
      icon_size: "18"

Reads happen once when the store is opened. Changes stay in memory until
``sync()`` writes the whole file in one atomic replace.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

import yaml

from silversettings.errors import ConfigStoreError
from silversettings.utils.file import atomic_write_text

logger: Final = logging.getLogger(__name__)


def to_store_value(value: Any) -> str:
    """Convert a scalar to the string form kept in stores.

    Booleans are written lower-case so they read back the same way YAML and
    pydantic spell them.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


class ConfigStore:
    """Group/key store persisted as a YAML file."""

    def __init__(self, path: Path) -> None:
        """Open the store at ``path``, reading it if it exists.

        Args:
            path: Location of the YAML file

        Raises:
            ConfigStoreError: If the file exists but cannot be parsed
        """
        self.path = path
        self._groups: dict[str, dict[str, str]] = self._read()
        self._dirty = False

    def __repr__(self) -> str:
        return f"ConfigStore({str(self.path)!r})"

    def _read(self) -> dict[str, dict[str, str]]:
        if not self.path.exists():
            logger.debug("Store %s does not exist yet", self.path)
            return {}

        try:
            data = yaml.safe_load(self.path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigStoreError(self.path, f"unable to read store: {exc}", exc) from exc

        if data is None:
            return {}
        if not isinstance(data, Mapping):
            raise ConfigStoreError(self.path, "store content is not a mapping of groups")

        groups: dict[str, dict[str, str]] = {}
        for name, entries in data.items():
            if entries is None:
                entries = {}
            if not isinstance(entries, Mapping):
                raise ConfigStoreError(self.path, f"group {name!r} is not a mapping")
            groups[str(name)] = {str(k): to_store_value(v) for k, v in entries.items()}
        return groups

    # ---- queries ----
    @property
    def dirty(self) -> bool:
        """Whether there are changes not yet written by ``sync()``."""
        return self._dirty

    def group_names(self) -> list[str]:
        """Return group names in file order."""
        return list(self._groups)

    def has_group(self, name: str) -> bool:
        return name in self._groups

    def read_group(self, name: str) -> dict[str, str]:
        """Return a copy of a group's entries (empty if the group is absent)."""
        return dict(self._groups.get(name, {}))

    # ---- mutations ----
    def write_group(self, name: str, entries: Mapping[str, Any]) -> None:
        """Replace a group with ``entries``."""
        new_entries = {str(k): to_store_value(v) for k, v in entries.items()}
        if self._groups.get(name) == new_entries:
            return
        self._groups[name] = new_entries
        self._dirty = True

    def delete_group(self, name: str) -> bool:
        """Remove a group.

        Returns:
            True if the group existed
        """
        if name not in self._groups:
            return False
        del self._groups[name]
        self._dirty = True
        return True

    def sync(self) -> None:
        """Write pending changes to disk.

        Raises:
            ConfigStoreError: If the file cannot be written
        """
        if not self._dirty:
            return
        content = yaml.safe_dump(self._groups, sort_keys=False, allow_unicode=True)
        try:
            atomic_write_text(self.path, content)
        except OSError as exc:
            raise ConfigStoreError(self.path, f"unable to write store: {exc}", exc) from exc
        self._dirty = False
        logger.debug("Synced store %s (%d groups)", self.path, len(self._groups))
