"""Built-in sector/provider model table used when no models file is usable."""

from typing import Dict, Tuple

from ..models.resolution import ModelMapping

# Sector consulted when a provider is missing from the requested sector
FALLBACK_SECTOR = "semantic"

# Last resort when neither the sector nor the fallback sector names a model
FALLBACK_MODEL = "nomic-embed-text"

DEFAULT_SECTORS: Tuple[str, ...] = ("episodic", "semantic", "procedural", "emotional", "reflective")
DEFAULT_PROVIDERS: Tuple[str, ...] = ("ollama", "openai", "gemini", "aws", "local")

_STANDARD_MODELS: Dict[str, str] = {
    "ollama": "nomic-embed-text",
    "openai": "text-embedding-3-small",
    "gemini": "gemini-embedding-001",
    "aws": "amazon.titan-embed-text-v2:0",
    "local": "all-MiniLM-L6-v2",
}

_SECTOR_OVERRIDES: Dict[str, Dict[str, str]] = {
    "reflective": {
        "openai": "text-embedding-3-large",
        "local": "all-mpnet-base-v2",
    },
}


def get_default_models() -> ModelMapping:
    """Build the default mapping.

    A new mapping is returned on every call, so the copy cached by a resolver
    can never alter the defaults seen by later fallbacks.
    """
    return {
        sector: {**_STANDARD_MODELS, **_SECTOR_OVERRIDES.get(sector, {})}
        for sector in DEFAULT_SECTORS
    }
