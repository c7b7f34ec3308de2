"""Catalog, budget tier, recommendation and delivery pricing routes."""

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from vatika.catalog import PLANTS, filter_planters, get_categories
from vatika.config import BUDGET_STEP, BUDGET_TIERS, MAX_BUDGET, MIN_BUDGET
from vatika.models.catalog import BudgetTier, PlanterSize, PlanterSource, SpaceType
from vatika.models.pricing import DeliveryQuote
from vatika.models.recommendation import RecommendationOut
from vatika.services.delivery import DELIVERY_TIERS, quote_delivery
from vatika.services.recommender import recommend
from vatika.services.tiers import PLANTER_TIER

router = APIRouter(prefix="/api", tags=["catalog"])


class RecommendRequest(BaseModel):
    budget: int = Field(ge=MIN_BUDGET, le=MAX_BUDGET)
    space_type: SpaceType = "balcony"


# --------------------------------------------------------------------------- #
# 1. Catalog
# --------------------------------------------------------------------------- #

@router.get("/catalog/planters")
async def list_planters(
    source: PlanterSource | None = Query(default=None, description="proprietary or marketplace"),
    size: PlanterSize | None = Query(default=None, description="small, medium or big"),
    tier: BudgetTier | None = Query(default=None, description="Budget tier filter"),
    category: str | None = Query(default=None, description="e.g. Ceramic, Metal"),
):
    """List catalog planters with optional filters."""
    planters = filter_planters(source=source, size=size, category=category)
    if tier is not None:
        planters = [p for p in planters if PLANTER_TIER.get(p.id) == tier]

    return {
        "planters": [
            {**p.model_dump(), "tier": PLANTER_TIER.get(p.id)} for p in planters
        ],
        "total": len(planters),
        "categories": get_categories(),
    }


@router.get("/catalog/plants")
async def list_plants():
    """List companion plants."""
    return {"plants": [p.model_dump() for p in PLANTS]}


# --------------------------------------------------------------------------- #
# 2. Budget tiers
# --------------------------------------------------------------------------- #

@router.get("/tiers")
async def tiers():
    """Budget tier thresholds and slider range for the frontend."""
    return {
        "tiers": BUDGET_TIERS,
        "min_budget": MIN_BUDGET,
        "max_budget": MAX_BUDGET,
        "step": BUDGET_STEP,
    }


# --------------------------------------------------------------------------- #
# 3. Recommendation
# --------------------------------------------------------------------------- #

@router.post("/recommend", response_model=RecommendationOut)
async def recommend_products(body: RecommendRequest) -> RecommendationOut:
    """Recommend planters for a budget and space type."""
    return RecommendationOut.from_recommendation(recommend(body.budget, body.space_type))


# --------------------------------------------------------------------------- #
# 4. Delivery pricing
# --------------------------------------------------------------------------- #

@router.get("/delivery/tiers")
async def delivery_tiers():
    """The delivery discount anchor table."""
    return {"tiers": [t.model_dump() for t in DELIVERY_TIERS]}


@router.get("/delivery/quote", response_model=DeliveryQuote)
async def delivery_quote(
    total: int = Query(..., ge=0, description="Order total before discount"),
    days: float = Query(..., description="Chosen delivery lead time in days"),
) -> DeliveryQuote:
    """Price *total* for a delivery lead time; days outside the table clamp."""
    return quote_delivery(total, days)
