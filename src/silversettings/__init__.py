"""Silver settings - window decoration preset import and apply tool."""

from __future__ import annotations

from silversettings.constants import GIT_MASTER

__version__ = "1.0.0"


def long_version() -> str:
    """Return the version string that preset files are stamped with.

    Development builds carry a ``.git`` suffix so presets exported from them
    are not mistaken for release presets.
    """
    version = __version__
    if GIT_MASTER:
        version += ".git"
    return version


__all__ = ["__version__", "long_version"]
