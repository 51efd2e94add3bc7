"""Persistent group/key configuration stores."""

from .store import ConfigStore, to_store_value

__all__ = ["ConfigStore", "to_store_value"]
