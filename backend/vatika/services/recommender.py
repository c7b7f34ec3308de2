"""
Budget-aware planter recommendation engine.

Turns a budget and a space type into an ordered, priced list of catalog
planters with companion plants. Allocation runs as a fixed sequence of
greedy phases, each taking the current ``AllocationState`` and returning a
new one:

    0. railing hangers (balcony only, unconditional)
    1. big anchor pieces, source-diverse, capped at half of what is left
    2. medium pieces, proprietary and marketplace interleaved
    3. one small accent (starter / classic only)
    4. upgrade singles to pairs
    5. fill the remaining budget with unused planters

Principles: each tier uses a disjoint planter set, higher budgets buy better
pieces rather than more of the same, and no regular item goes past a pair.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from vatika.catalog import RAILING_HANGER_ID, get_plant, get_planter
from vatika.config import (
    ANCHOR_MAX_SHARE,
    FILL_MIN_REMAINING,
    MEDIUM_TYPES_BREAKPOINTS,
    MEDIUM_TYPES_MAX,
    PLANT_CYCLES,
    RAILING_PLANT_ID,
    RAILING_QTY_BREAKPOINTS,
    RAILING_QTY_MAX,
    SMALL_ACCENT_MIN_REMAINING,
    TWO_BIGS_MIN_BUDGET,
)
from vatika.models.catalog import BudgetTier, Planter, SpaceType
from vatika.models.recommendation import Recommendation, SelectedItem
from vatika.services.plant_cycler import PlantCycler
from vatika.services.tiers import classify_budget, planters_for_tier

logger = logging.getLogger(__name__)

MAX_PAIR_QTY = 2


class AllocationState(NamedTuple):
    """Selections so far and the budget still unspent."""

    items: tuple[SelectedItem, ...]
    remaining: int

    def selected_ids(self) -> set[str]:
        return {item.planter.id for item in self.items}

    def add(self, item: SelectedItem) -> AllocationState:
        return AllocationState(self.items + (item,), self.remaining - item.line_total)


# ---------------------------------------------------------------------------
# Parameters
# ---------------------------------------------------------------------------

def _step_value(budget: int, breakpoints: list[tuple[int, int]], top: int) -> int:
    for max_budget, value in breakpoints:
        if budget <= max_budget:
            return value
    return top


def railing_quantity(budget: int) -> int:
    """Number of railing hangers for a balcony at *budget* (3-6)."""
    return _step_value(budget, RAILING_QTY_BREAKPOINTS, RAILING_QTY_MAX)


def max_medium_types(budget: int) -> int:
    """Distinct medium planters allowed at *budget* (2-5)."""
    return _step_value(budget, MEDIUM_TYPES_BREAKPOINTS, MEDIUM_TYPES_MAX)


def max_bigs(budget: int) -> int:
    return 2 if budget >= TWO_BIGS_MIN_BUDGET else 1


def tier_candidates(tier: BudgetTier) -> list[Planter]:
    """Tier planters, most expensive first. Ties keep catalog order."""
    return sorted(planters_for_tier(tier), key=lambda p: -p.price)


def interleave_by_source(planters: list[Planter]) -> list[Planter]:
    """Alternate proprietary and marketplace planters, proprietary first."""
    proprietary = [p for p in planters if p.source == "proprietary"]
    marketplace = [p for p in planters if p.source == "marketplace"]
    merged: list[Planter] = []
    for i in range(max(len(proprietary), len(marketplace))):
        if i < len(proprietary):
            merged.append(proprietary[i])
        if i < len(marketplace):
            merged.append(marketplace[i])
    return merged


# ---------------------------------------------------------------------------
# Phases
# ---------------------------------------------------------------------------

def add_railing_hangers(
    state: AllocationState,
    budget: int,
    space_type: SpaceType,
) -> AllocationState:
    """Phase 0: balconies always get railing hangers with a flowering mix."""
    if space_type != "balcony":
        return state

    item = SelectedItem(
        planter=get_planter(RAILING_HANGER_ID),
        plant=get_plant(RAILING_PLANT_ID),
        quantity=railing_quantity(budget),
    )
    return state.add(item)


def add_anchor_pieces(
    state: AllocationState,
    candidates: list[Planter],
    budget: int,
    cycler: PlantCycler,
) -> AllocationState:
    """Phase 1: up to ``max_bigs`` big planters, preferring distinct sources."""
    bigs = [p for p in candidates if p.size == "big"]
    limit = max_bigs(budget)
    # The alternate-source affordability check prices with the first big plant
    reference_plant_price = get_plant(PLANT_CYCLES["big"][0]).price

    picked = 0
    used_sources: set[str] = set()

    for pick in bigs:
        if picked >= limit:
            break

        if picked > 0 and pick.source in used_sources:
            taken = state.selected_ids()
            alternate_available = any(
                p.source not in used_sources
                and p.id not in taken
                and p.price + reference_plant_price <= state.remaining * ANCHOR_MAX_SHARE
                for p in bigs
            )
            if alternate_available:
                continue

        plant = cycler.next("big")
        item = SelectedItem(planter=pick, plant=plant, quantity=1)
        if item.unit_price > state.remaining * ANCHOR_MAX_SHARE:
            continue

        state = state.add(item)
        used_sources.add(pick.source)
        picked += 1
        logger.debug("Anchor %s + %s (remaining %d)", pick.id, plant.id, state.remaining)

    return state


def add_medium_pieces(
    state: AllocationState,
    candidates: list[Planter],
    budget: int,
    cycler: PlantCycler,
) -> AllocationState:
    """Phase 2: medium planters alternating proprietary / marketplace."""
    mediums = interleave_by_source([p for p in candidates if p.size == "medium"])
    limit = max_medium_types(budget)

    accepted = 0
    for pick in mediums:
        if accepted >= limit:
            break
        if pick.id in state.selected_ids():
            continue

        plant = cycler.next("medium")
        item = SelectedItem(planter=pick, plant=plant, quantity=1)
        if item.unit_price > state.remaining:
            continue

        state = state.add(item)
        accepted += 1
        logger.debug("Medium %s + %s (remaining %d)", pick.id, plant.id, state.remaining)

    return state


def add_small_accent(
    state: AllocationState,
    candidates: list[Planter],
    tier: BudgetTier,
    cycler: PlantCycler,
) -> AllocationState:
    """Phase 3: a single small accent for starter and classic tiers."""
    if tier == "premium" or state.remaining <= SMALL_ACCENT_MIN_REMAINING:
        return state

    taken = state.selected_ids()
    for pick in candidates:
        if pick.size != "small" or pick.id in taken:
            continue

        plant = cycler.next("small")
        item = SelectedItem(planter=pick, plant=plant, quantity=1)
        if item.unit_price > state.remaining:
            continue

        logger.debug("Accent %s + %s", pick.id, plant.id)
        return state.add(item)

    return state


def upgrade_to_pairs(state: AllocationState) -> AllocationState:
    """Phase 4: turn singles into pairs, in selection order, while affordable."""
    remaining = state.remaining
    items: list[SelectedItem] = []

    for item in state.items:
        if (
            item.planter.id != RAILING_HANGER_ID
            and item.quantity < MAX_PAIR_QTY
            and item.unit_price <= remaining
        ):
            remaining -= item.unit_price
            item = item.model_copy(update={"quantity": MAX_PAIR_QTY})
        items.append(item)

    return AllocationState(tuple(items), remaining)


def fill_remaining_budget(
    state: AllocationState,
    candidates: list[Planter],
    cycler: PlantCycler,
) -> AllocationState:
    """Phase 5: add unused tier planters while more than the fill floor is left."""
    if state.remaining <= FILL_MIN_REMAINING:
        return state

    taken = state.selected_ids()
    unused = [p for p in candidates if p.id not in taken]

    for pick in unused:
        plant = cycler.next(pick.size)
        item = SelectedItem(planter=pick, plant=plant, quantity=1)
        if item.unit_price > state.remaining:
            continue

        state = state.add(item)
        logger.debug("Fill %s + %s (remaining %d)", pick.id, plant.id, state.remaining)
        if state.remaining < FILL_MIN_REMAINING:
            break

    return state


# ---------------------------------------------------------------------------
# Main entry-point
# ---------------------------------------------------------------------------

def grand_total(items: tuple[SelectedItem, ...] | list[SelectedItem]) -> int:
    return sum(item.line_total for item in items)


def recommend(budget: int, space_type: SpaceType = "balcony") -> Recommendation:
    """Recommend planters and plants for *budget* in a *space_type*.

    Deterministic: the same arguments always produce the same
    recommendation. Never raises for a valid space type; a budget too small
    for anything returns fewer items (for balconies, possibly just the
    mandatory railing hangers).
    """
    tier = classify_budget(budget)
    candidates = tier_candidates(tier)
    cycler = PlantCycler()

    state = AllocationState(items=(), remaining=budget)
    state = add_railing_hangers(state, budget, space_type)
    state = add_anchor_pieces(state, candidates, budget, cycler)
    state = add_medium_pieces(state, candidates, budget, cycler)
    state = add_small_accent(state, candidates, tier, cycler)
    state = upgrade_to_pairs(state)
    state = fill_remaining_budget(state, candidates, cycler)

    total = grand_total(state.items)
    has_marketplace = any(item.planter.source == "marketplace" for item in state.items)

    logger.info(
        "Recommended %d items for %s @ %d (%s tier): total %d",
        len(state.items), space_type, budget, tier, total,
    )

    return Recommendation(
        budget=budget,
        space_type=space_type,
        tier=tier,
        items=state.items,
        grand_total=total,
        has_marketplace_items=has_marketplace,
    )
