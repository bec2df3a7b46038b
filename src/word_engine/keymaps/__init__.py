"""Declarative key -> command bindings."""

from .models import CONTROL_ALIASES, ActionRef, Binding, KeyStroke
from .registry import (
    KeymapConflictError,
    KeymapRegistry,
    RegistryStats,
    ResolutionMatch,
)

__all__ = [
    "CONTROL_ALIASES",
    "ActionRef",
    "Binding",
    "KeyStroke",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "ResolutionMatch",
]
