"""
Sector Models - embedding model resolution for memory sectors.

This package decides which embedding model to call for a memory sector
(episodic, semantic, procedural, emotional, reflective) and a provider
(ollama, openai, gemini, aws, local):
- Optional models.yml discovery and parsing
- Built-in defaults when no usable file exists
- A never-failing sector -> semantic -> literal fallback chain
"""

__version__ = "0.1.0"

from .config.settings import Settings
from .resolver import (
    ModelResolver,
    get_model,
    get_provider_config,
    get_resolver,
    load_models,
    reset_resolver,
)

__all__ = [
    "Settings",
    "ModelResolver",
    "get_model",
    "get_provider_config",
    "get_resolver",
    "load_models",
    "reset_resolver",
]
