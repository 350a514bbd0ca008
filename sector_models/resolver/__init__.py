"""
Embedding model resolution per memory sector and provider.

Architecture:
- locator: finds an optional models.yml among fixed candidate paths
- parser: turns the two-level models.yml dialect into a mapping
- defaults: built-in mapping used when no usable file exists
- ModelResolver: loads once, caches, and resolves with fallback
- shared: one resolver per process behind module-level functions
"""

from .core import ModelResolver
from .defaults import FALLBACK_MODEL, FALLBACK_SECTOR, get_default_models
from .parser import parse_models
from .shared import (
    get_model,
    get_provider_config,
    get_resolver,
    load_models,
    reset_resolver,
)

__all__ = [
    "ModelResolver",
    "FALLBACK_MODEL",
    "FALLBACK_SECTOR",
    "get_default_models",
    "parse_models",
    "get_model",
    "get_provider_config",
    "get_resolver",
    "load_models",
    "reset_resolver",
]
