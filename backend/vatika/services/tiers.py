"""
Budget tier classification.

Each tier owns a completely different set of planters so that moving the
budget slider feels like browsing a new catalog rather than getting more of
the same. The railing hanger is the single cross-tier exception and is
handled by its own recommendation phase.
"""

from types import MappingProxyType

from vatika.catalog import PLANTERS, RAILING_HANGER_ID, UnknownCatalogItemError
from vatika.config import BUDGET_TIERS
from vatika.models.catalog import CROSS_TIER, BudgetTier, CrossTier, Planter

# ---------------------------------------------------------------------------
# Planter -> tier assignment
# ---------------------------------------------------------------------------
PLANTER_TIER: MappingProxyType = MappingProxyType({
    # Proprietary starter (affordable basics)
    "tokyo-tall": "starter",
    "azziano": "starter",
    "b2-fabric": "starter",
    # Proprietary classic (curated mid-range)
    "chevron": "classic",
    "fox-bowl": "classic",
    "ribbed-set": "classic",
    # Proprietary premium (statement pieces)
    "wrought-iron": "premium",
    "allegra": "premium",
    "willow": "premium",
    "amalfi": "premium",
    "quebec-rect": "premium",
    "quebec-sq": "premium",
    "go-hooked": "premium",
    "pine-skirting": "premium",
    # Railing hanger, usable in every tier
    RAILING_HANGER_ID: CROSS_TIER,
    # Marketplace starter (cheerful, woven, accessible)
    "ug-crown": "starter",
    "ug-erika": "starter",
    "ug-barca-round": "starter",
    "ug-barca-square": "starter",
    "ug-pebble": "starter",
    "ug-macrame-1": "starter",
    "ug-macrame-2": "starter",
    "ug-macrame-3": "starter",
    "ug-cosmic-hang": "starter",
    "ug-aurelius-prism": "starter",
    "ug-aurelius-round": "starter",
    "ug-grail": "starter",
    "ug-peacock": "starter",
    "ug-fluted": "starter",
    "ug-ex-cotton": "starter",
    "ug-square-cane": "starter",
    "ug-trinket": "starter",
    "ug-tokyo-round": "starter",
    "ug-milano": "starter",
    "ug-belly-dance": "starter",
    "ug-rays-cotton": "starter",
    "ug-seagrass": "starter",
    "ug-skyie": "starter",
    # Marketplace classic (designer, mid-range)
    "ug-sunflower": "classic",
    "ug-elegance": "classic",
    "ug-ridgecraft": "classic",
    "ug-aurelian": "classic",
    "ug-phoenix": "classic",
    "ug-petrichor": "classic",
    "ug-tassel": "classic",
    "ug-paris": "classic",
    "ug-faceted-3d": "classic",
    "ug-interlace-3d": "classic",
    "ug-oblique-3d": "classic",
    "ug-ridged-3d": "classic",
    "ug-faceted-wood": "classic",
    "ug-interlace-wood": "classic",
    "ug-oblique-wood": "classic",
    "ug-ridged-wood": "classic",
    "ug-imperia": "classic",
    # Marketplace premium (luxury statement pieces)
    "ug-fleeting-bliss": "premium",
    "ug-gunmetal": "premium",
    "ug-pastel-ridge": "premium",
    "ug-tokyo-high": "premium",
    "ug-golden-opulence": "premium",
    "ug-tulsi": "premium",
})

TIER_ORDER: tuple[BudgetTier, ...] = tuple(t["tier"] for t in BUDGET_TIERS)


def classify_budget(budget: int) -> BudgetTier:
    """Map a budget to its tier. Saturates at both ends, never raises."""
    for tier in BUDGET_TIERS:
        if tier["max_budget"] is None or budget <= tier["max_budget"]:
            return tier["tier"]
    return TIER_ORDER[-1]


def planter_tier_of(planter_id: str) -> BudgetTier | CrossTier:
    """Return the tier of *planter_id*, or ``"cross-tier"`` for the railing hanger."""
    try:
        return PLANTER_TIER[planter_id]
    except KeyError:
        raise UnknownCatalogItemError(planter_id) from None


def planters_for_tier(tier: BudgetTier) -> list[Planter]:
    """Planters assigned to *tier*, in catalog order. Never includes the railing hanger."""
    return [p for p in PLANTERS if PLANTER_TIER.get(p.id) == tier]
