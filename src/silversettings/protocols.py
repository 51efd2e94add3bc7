"""Interfaces of the external collaborators and test doubles for them."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Protocol, runtime_checkable

from silversettings.settings.decoration import DecorationSettings


@runtime_checkable
class Notifier(Protocol):
    """Protocol for telling a running compositor that settings changed.

    Both calls are fire-and-forget; callers never inspect a result.
    """

    def notify_derived_cache_stale(self) -> None:
        """Ask the decoration to drop cached colors derived from settings."""
        ...

    def notify_config_reloaded(self) -> None:
        """Ask the compositor to reload its configuration."""
        ...


@runtime_checkable
class IconGenerator(Protocol):
    """Protocol for producing the light/dark system icon sets."""

    def generate(self) -> list[Path]:
        """Write the icon images.

        Returns:
            Paths of the files written
        """
        ...


# Builds a generator from a snapshot of the live settings
IconGeneratorFactory = Callable[[DecorationSettings], IconGenerator]


class MockNotifier:
    """Mock implementation of Notifier for testing."""

    def __init__(self):
        self.calls: list[str] = []

    def notify_derived_cache_stale(self) -> None:
        self.calls.append("derived_cache_stale")

    def notify_config_reloaded(self) -> None:
        self.calls.append("config_reloaded")


class MockIconGenerator:
    """Mock implementation of IconGenerator for testing."""

    def __init__(self, settings: DecorationSettings):
        self.settings = settings
        self.generate_calls = 0

    def generate(self) -> list[Path]:
        """Record the call without drawing anything."""
        self.generate_calls += 1
        return []


class MockIconGeneratorFactory:
    """Factory that hands out MockIconGenerators and remembers them."""

    def __init__(self):
        self.generators: list[MockIconGenerator] = []

    def __call__(self, settings: DecorationSettings) -> MockIconGenerator:
        generator = MockIconGenerator(settings)
        self.generators.append(generator)
        return generator

    @property
    def generate_calls(self) -> int:
        """Total ``generate()`` calls across every generator built."""
        return sum(g.generate_calls for g in self.generators)


def assert_notified_in_order(mock_notifier: MockNotifier) -> bool:
    """Assert that the notifier saw exactly cache-stale then reload.

    Args:
        mock_notifier: The mock notifier instance

    Returns:
        True if the assertion passes, raises AssertionError otherwise
    """
    expected = ["derived_cache_stale", "config_reloaded"]
    assert mock_notifier.calls == expected, f"Expected {expected}, got {mock_notifier.calls}"
    return True
