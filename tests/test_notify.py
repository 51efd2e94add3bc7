import logging
import subprocess
from unittest.mock import MagicMock, patch

import pytest

from silversettings.notify import DBusNotifier
from silversettings.protocols import Notifier


def test_dbus_notifier_matches_protocol() -> None:
    assert isinstance(DBusNotifier(), Notifier)


def test_signals_sent_in_order() -> None:
    with patch("silversettings.notify.subprocess.run") as mock_run:
        notifier = DBusNotifier(timeout=2.0)
        notifier.notify_derived_cache_stale()
        notifier.notify_config_reloaded()

    commands = [c.args[0] for c in mock_run.call_args_list]
    assert commands == [
        [
            "dbus-send",
            "--session",
            "--type=signal",
            "/SilverDecoration",
            "org.kde.SilverDecoration.updateDecorationColorCache",
        ],
        ["dbus-send", "--session", "--type=signal", "/KWin", "org.kde.KWin.reloadConfig"],
    ]
    assert all(c.kwargs["timeout"] == 2.0 for c in mock_run.call_args_list)


def test_missing_dbus_send_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with (
        caplog.at_level(logging.WARNING),
        patch("silversettings.notify.subprocess.run", MagicMock(side_effect=FileNotFoundError("dbus-send"))),
    ):
        DBusNotifier().notify_config_reloaded()

    assert "org.kde.KWin.reloadConfig" in caplog.text


def test_hung_dbus_send_times_out(caplog: pytest.LogCaptureFixture) -> None:
    hang = subprocess.TimeoutExpired(cmd="dbus-send", timeout=5.0)
    with (
        caplog.at_level(logging.WARNING),
        patch("silversettings.notify.subprocess.run", MagicMock(side_effect=hang)),
    ):
        DBusNotifier().notify_derived_cache_stale()
        DBusNotifier().notify_config_reloaded()

    assert "Timed out sending org.kde.SilverDecoration.updateDecorationColorCache" in caplog.text
    assert "Timed out sending org.kde.KWin.reloadConfig" in caplog.text


def test_dbus_send_failure_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    failed = subprocess.CalledProcessError(1, "dbus-send", stderr="Failed to open connection\n")
    with (
        caplog.at_level(logging.WARNING),
        patch("silversettings.notify.subprocess.run", MagicMock(side_effect=failed)),
    ):
        DBusNotifier().notify_config_reloaded()

    assert "Failed to open connection" in caplog.text
