"""Result models for models.yml loading and model resolution."""

from enum import Enum
from pathlib import Path
from typing import Dict, Optional

from pydantic import Field

from .base import SectorModelsBaseModel

# sector -> provider -> model name
ModelMapping = Dict[str, Dict[str, str]]


class LoadOutcome(str, Enum):
    """How the active model mapping was obtained."""

    LOADED = "loaded"  # parsed from a models file
    ABSENT = "absent"  # no models file found, defaults in use
    FAILED = "failed"  # models file unreadable or unusable, defaults in use


class ResolutionTier(str, Enum):
    """Which step of the fallback chain produced a model name."""

    SECTOR = "sector"
    FALLBACK_SECTOR = "fallback_sector"
    LITERAL = "literal"


class ModelsLoadResult(SectorModelsBaseModel):
    """Outcome of the one-time models file load."""

    outcome: LoadOutcome = Field(description="Which load path was taken")
    path: Optional[Path] = Field(default=None, description="Models file that was found, if any")
    sectors: int = Field(default=0, ge=0, description="Number of sectors in the active mapping")
    error: Optional[str] = Field(default=None, description="Failure detail when outcome is 'failed'")

    @property
    def used_defaults(self) -> bool:
        """Whether the built-in defaults are in use."""
        return self.outcome != LoadOutcome.LOADED


class ModelResolution(SectorModelsBaseModel):
    """A resolved model name together with where it came from."""

    sector: str = Field(description="Requested sector")
    provider: str = Field(description="Requested provider")
    model: str = Field(description="Resolved model name")
    tier: ResolutionTier = Field(description="Fallback step that produced the model")

    @property
    def is_fallback(self) -> bool:
        """Whether the model did not come from the requested sector."""
        return self.tier != ResolutionTier.SECTOR
