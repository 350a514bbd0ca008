"""Core components."""

from .exceptions import ConfigurationError, ModelsFileError, SectorModelsError

__all__ = ["SectorModelsError", "ConfigurationError", "ModelsFileError"]
