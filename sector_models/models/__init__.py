"""Data models for Sector Models."""

from .base import SectorModelsBaseModel
from .resolution import (
    LoadOutcome,
    ModelMapping,
    ModelResolution,
    ModelsLoadResult,
    ResolutionTier,
)

__all__ = [
    "SectorModelsBaseModel",
    "LoadOutcome",
    "ModelMapping",
    "ModelResolution",
    "ModelsLoadResult",
    "ResolutionTier",
]
