"""Compositor notifications over the session D-Bus."""

from __future__ import annotations

import logging
import subprocess
from typing import Final

logger: Final = logging.getLogger(__name__)

DBUS_SEND: Final = "dbus-send"
SEND_TIMEOUT_SECONDS: Final = 5.0

# (object path, interface.member) of each signal
DECORATION_COLOR_CACHE_SIGNAL: Final = (
    "/SilverDecoration",
    "org.kde.SilverDecoration.updateDecorationColorCache",
)
KWIN_RELOAD_CONFIG_SIGNAL: Final = ("/KWin", "org.kde.KWin.reloadConfig")


class DBusNotifier:
    """Notifier that emits session bus signals with ``dbus-send``.

    Each signal waits at most ``timeout`` seconds for ``dbus-send`` to exit.
    A missing ``dbus-send``, a bus-less session or a hung call is logged
    and ignored.
    """

    def __init__(self, executable: str = DBUS_SEND, timeout: float = SEND_TIMEOUT_SECONDS) -> None:
        self.executable = executable
        self.timeout = timeout

    def _send_signal(self, path: str, member: str) -> None:
        cmd = [self.executable, "--session", "--type=signal", path, member]
        try:
            subprocess.run(
                cmd,
                check=True,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.CalledProcessError as exc:
            logger.warning("Could not send %s: %s", member, exc.stderr.strip() or exc)
            return
        except subprocess.TimeoutExpired:
            logger.warning("Timed out sending %s after %.1fs", member, self.timeout)
            return
        except OSError as exc:
            logger.warning("Could not send %s: %s", member, exc)
            return
        logger.debug("Sent D-Bus signal %s %s", path, member)

    def notify_derived_cache_stale(self) -> None:
        self._send_signal(*DECORATION_COLOR_CACHE_SIGNAL)

    def notify_config_reloaded(self) -> None:
        self._send_signal(*KWIN_RELOAD_CONFIG_SIGNAL)
