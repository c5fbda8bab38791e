"""Venue identity models."""

from typing import Optional
from pydantic import BaseModel, Field, field_validator


class Venue(BaseModel):
    """Venue identity as supplied by the persistence layer."""

    id: str
    name: str = ""
    slug: Optional[str] = None
    category: Optional[str] = None

    # Location
    latitude: float = 0.0
    longitude: float = 0.0

    # Curation
    expert_pick_rank: Optional[int] = None
    expert_boost_multiplier: float = Field(1.0, description="Curated boost, 1.0 means none")

    model_config = {"extra": "ignore", "frozen": True}

    @field_validator("expert_boost_multiplier", mode="before")
    @classmethod
    def default_multiplier(cls, v):
        return float(v) if v is not None else 1.0
