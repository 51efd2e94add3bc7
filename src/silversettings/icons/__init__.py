"""System icon generation."""

from .generator import SystemIconGenerator

__all__ = ["SystemIconGenerator"]
