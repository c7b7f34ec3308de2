"""Pydantic v2 models for recommendation output."""

from pydantic import BaseModel, Field

from vatika.models.catalog import BudgetTier, Plant, Planter, SpaceType


class SelectedItem(BaseModel):
    """A planter + companion plant at a given quantity."""

    model_config = {"frozen": True}

    planter: Planter
    plant: Plant
    quantity: int = Field(ge=1)

    @property
    def unit_price(self) -> int:
        return self.planter.price + self.plant.price

    @property
    def line_total(self) -> int:
        return self.unit_price * self.quantity


class Recommendation(BaseModel):
    """Ordered selections for one (budget, space type) request."""

    model_config = {"frozen": True}

    budget: int
    space_type: SpaceType
    tier: BudgetTier
    items: tuple[SelectedItem, ...]
    grand_total: int
    has_marketplace_items: bool


class RecommendationItemOut(BaseModel):
    """Wire shape of a single selection."""

    planter_id: str
    plant_id: str
    quantity: int
    unit_price: int
    line_total: int


class RecommendationOut(BaseModel):
    """Wire shape returned by ``POST /api/recommend``."""

    budget: int
    space_type: SpaceType
    tier: BudgetTier
    items: list[RecommendationItemOut]
    grand_total: int
    has_marketplace_items: bool

    @classmethod
    def from_recommendation(cls, rec: Recommendation) -> "RecommendationOut":
        return cls(
            budget=rec.budget,
            space_type=rec.space_type,
            tier=rec.tier,
            items=[
                RecommendationItemOut(
                    planter_id=item.planter.id,
                    plant_id=item.plant.id,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                    line_total=item.line_total,
                )
                for item in rec.items
            ],
            grand_total=rec.grand_total,
            has_marketplace_items=rec.has_marketplace_items,
        )
