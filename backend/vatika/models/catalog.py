"""Pydantic v2 models for catalog planters and plants."""

from typing import Literal

from pydantic import BaseModel, Field

PlanterSize = Literal["small", "medium", "big"]
PlanterSource = Literal["proprietary", "marketplace"]
BudgetTier = Literal["starter", "classic", "premium"]
SpaceType = Literal["balcony", "living-room", "terrace"]

CrossTier = Literal["cross-tier"]
CROSS_TIER: CrossTier = "cross-tier"


class Planter(BaseModel):
    """A catalog container product. Immutable."""

    model_config = {"frozen": True}

    id: str
    name: str
    image: str
    price: int = Field(gt=0)
    size: PlanterSize
    prompt_desc: str
    source: PlanterSource

    # Optional display metadata
    category: str | None = None
    material: str | None = None
    color: str | None = None


class Plant(BaseModel):
    """A companion plant species sold with a planter."""

    model_config = {"frozen": True}

    id: str
    name: str
    price: int = Field(gt=0)
