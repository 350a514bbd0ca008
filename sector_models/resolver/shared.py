"""Process-wide resolver and module-level lookup functions."""

from typing import Any, Dict, Optional

from ..config.settings import Settings
from ..models.resolution import ModelMapping
from .core import ModelResolver

_resolver: Optional[ModelResolver] = None


def get_resolver(settings: Optional[Settings] = None) -> ModelResolver:
    """Get the shared resolver, creating it on first use.

    ``settings`` only applies when the resolver is created; later calls
    return the existing instance unchanged.
    """
    global _resolver
    if _resolver is None:
        _resolver = ModelResolver(settings)
    return _resolver


def reset_resolver() -> None:
    """Discard the shared resolver. Intended for tests."""
    global _resolver
    _resolver = None


def load_models() -> ModelMapping:
    """Return the shared sector -> provider -> model mapping (read-only)."""
    return get_resolver().load_models()


def get_model(sector: str, provider: str) -> str:
    """Get the model name for a sector and provider."""
    return get_resolver().get_model(sector, provider)


def get_provider_config(provider: str) -> Dict[str, Any]:
    """Get provider settings. Always empty for now."""
    return get_resolver().get_provider_config(provider)
