"""Configuration helpers for jsonmend."""

from .config import (
    ExtractionMode,
    ExtractionSettings,
    RegexSettings,
    RepairSettings,
    ResolveConfig,
)

__all__ = [
    "ExtractionMode",
    "ExtractionSettings",
    "RegexSettings",
    "RepairSettings",
    "ResolveConfig",
]
