"""Base model classes for Sector Models."""

from pydantic import BaseModel, ConfigDict


class SectorModelsBaseModel(BaseModel):
    """Base model with common configuration for all Sector Models result types."""

    model_config = ConfigDict(
        # Keep enum objects in memory, serialize values only when needed
        use_enum_values=False,
        # Allow population by field name or alias
        populate_by_name=True,
        # Results are snapshots; they are not edited after creation
        frozen=True,
        extra='forbid',
    )
