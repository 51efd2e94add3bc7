"""Preset package - models, validation, applying and the catalog."""

from .applier import apply_preset
from .catalog import PresetCatalog
from .models import ImportResult, ImportVerdict, Preset
from .validator import validate_preset

__all__ = [
    "ImportResult",
    "ImportVerdict",
    "Preset",
    "PresetCatalog",
    "apply_preset",
    "validate_preset",
]
