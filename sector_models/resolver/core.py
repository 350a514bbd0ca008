"""Sector/provider model resolver."""

from typing import Any, Dict, Optional, Tuple

from pydantic import ValidationError

from ..config.logging import LoggerMixin
from ..config.settings import Settings
from ..models.resolution import (
    LoadOutcome,
    ModelMapping,
    ModelResolution,
    ModelsLoadResult,
    ResolutionTier,
)
from .defaults import FALLBACK_MODEL, FALLBACK_SECTOR, get_default_models
from .loader import load_models_file
from .locator import locate_models_file


class ModelResolver(LoggerMixin):
    """Resolves the embedding model for a sector and provider.

    The models file is located and parsed on first use and the resulting
    mapping is kept for the lifetime of the resolver. If no file is found, or
    the file cannot be used, the built-in defaults take its place in full;
    a partially parsed file is never merged with them.

    Lookups never fail. A provider missing from the requested sector is looked
    up in the ``semantic`` sector, and when that misses too the literal
    ``nomic-embed-text`` is returned.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings if settings is not None else self._default_settings()
        self._models: Optional[ModelMapping] = None
        self._load_result: Optional[ModelsLoadResult] = None

    def _default_settings(self) -> Settings:
        try:
            return Settings()
        except ValidationError as e:
            self.logger.error("Invalid settings in environment, using built-in settings", error=str(e))
            return Settings.model_construct()

    @property
    def is_loaded(self) -> bool:
        """Whether the mapping has been loaded."""
        return self._models is not None

    @property
    def load_result(self) -> ModelsLoadResult:
        """How the active mapping was obtained. Triggers the load if needed."""
        self.load_models()
        return self._load_result

    def load_models(self) -> ModelMapping:
        """Return the active sector -> provider -> model mapping.

        Only the first call touches the filesystem. The returned mapping is
        the resolver's own cache and is shared by every caller: treat it as
        read-only, since changing it changes all later resolutions.
        """
        if self._models is not None:
            return self._models

        models, result = self._load()
        # No lock: concurrent first loads compute the same mapping and the
        # last assignment wins.
        self._load_result = result
        self._models = models
        return models

    def _load(self) -> Tuple[ModelMapping, ModelsLoadResult]:
        path = locate_models_file(self.settings)
        if path is None:
            models = get_default_models()
            self.logger.warning("models.yml not found, using defaults", sectors=len(models))
            return models, ModelsLoadResult(outcome=LoadOutcome.ABSENT, sectors=len(models))

        try:
            models = load_models_file(path)
        except Exception as e:
            models = get_default_models()
            self.logger.error(
                "Failed to parse models.yml, using defaults",
                path=str(path),
                error=str(e),
            )
            return models, ModelsLoadResult(
                outcome=LoadOutcome.FAILED,
                path=path,
                sectors=len(models),
                error=str(e),
            )

        self.logger.info("Loaded models.yml", path=str(path), sectors=len(models))
        return models, ModelsLoadResult(outcome=LoadOutcome.LOADED, path=path, sectors=len(models))

    def resolve(self, sector: str, provider: str) -> ModelResolution:
        """Resolve a model and report which fallback step produced it."""
        models = self.load_models()

        model = models.get(sector, {}).get(provider)
        if model:
            return ModelResolution(sector=sector, provider=provider, model=model, tier=ResolutionTier.SECTOR)

        model = models.get(FALLBACK_SECTOR, {}).get(provider)
        if model:
            self.logger.debug(
                "Provider not configured for sector, using fallback sector",
                sector=sector,
                provider=provider,
                fallback_sector=FALLBACK_SECTOR,
                model=model,
            )
            return ModelResolution(
                sector=sector, provider=provider, model=model, tier=ResolutionTier.FALLBACK_SECTOR
            )

        self.logger.debug(
            "No model configured, using fallback model",
            sector=sector,
            provider=provider,
            model=FALLBACK_MODEL,
        )
        return ModelResolution(
            sector=sector, provider=provider, model=FALLBACK_MODEL, tier=ResolutionTier.LITERAL
        )

    def get_model(self, sector: str, provider: str) -> str:
        """Get the model name for a sector and provider."""
        return self.resolve(sector, provider).model

    def get_provider_config(self, provider: str) -> Dict[str, Any]:
        """Get provider settings. No provider settings are defined yet."""
        return {}

    def reset(self) -> None:
        """Drop the cached mapping so the next lookup loads again."""
        self._models = None
        self._load_result = None
