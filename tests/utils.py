"""Test utilities and shared data for Sector Models tests."""

from typing import Any, Dict, List

from sector_models.resolver.defaults import DEFAULT_PROVIDERS, DEFAULT_SECTORS


SAMPLE_MODELS_YML = """\
semantic:
  openai: custom-model-A
# comment line
episodic:
  local: custom-model-B
"""

# Expected built-in models, written out independently of the defaults module
EXPECTED_DEFAULT_MODELS = {
    "ollama": "nomic-embed-text",
    "openai": "text-embedding-3-small",
    "gemini": "gemini-embedding-001",
    "aws": "amazon.titan-embed-text-v2:0",
    "local": "all-MiniLM-L6-v2",
}

EXPECTED_REFLECTIVE_MODELS = {
    **EXPECTED_DEFAULT_MODELS,
    "openai": "text-embedding-3-large",
    "local": "all-mpnet-base-v2",
}


def expected_default_model(sector: str, provider: str) -> str:
    """Model the built-in table should give for a sector and provider."""
    table = EXPECTED_REFLECTIVE_MODELS if sector == "reflective" else EXPECTED_DEFAULT_MODELS
    return table[provider]


def default_pairs() -> List[tuple]:
    """All built-in (sector, provider) pairs."""
    return [(sector, provider) for sector in DEFAULT_SECTORS for provider in DEFAULT_PROVIDERS]


def events_at(logs: List[Dict[str, Any]], level: str) -> List[Dict[str, Any]]:
    """Filter captured structlog entries by level."""
    return [entry for entry in logs if entry["log_level"] == level]
