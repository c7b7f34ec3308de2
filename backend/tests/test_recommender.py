"""
Unit tests for the budget-aware recommendation engine.
Covers every phase on its own plus end-to-end scenarios.
"""
import pytest

from vatika.catalog import RAILING_HANGER_ID, get_plant, get_planter
from vatika.config import BUDGET_STEP, MAX_BUDGET, MIN_BUDGET
from vatika.models.recommendation import SelectedItem
from vatika.services.plant_cycler import PlantCycler
from vatika.services.recommender import (
    AllocationState,
    add_anchor_pieces,
    add_medium_pieces,
    add_railing_hangers,
    add_small_accent,
    fill_remaining_budget,
    grand_total,
    interleave_by_source,
    max_bigs,
    max_medium_types,
    railing_quantity,
    recommend,
    tier_candidates,
    upgrade_to_pairs,
)
from vatika.services.tiers import planter_tier_of

SPACE_TYPES = ["balcony", "living-room", "terrace"]
UI_BUDGETS = list(range(MIN_BUDGET, MAX_BUDGET + 1, BUDGET_STEP))


def _summary(rec):
    return [(i.planter.id, i.plant.id, i.quantity) for i in rec.items]


def _item(planter_id, plant_id, quantity=1):
    return SelectedItem(
        planter=get_planter(planter_id), plant=get_plant(plant_id), quantity=quantity
    )


class TestParameters:

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "budget,qty",
        [(20_000, 3), (25_000, 3), (25_001, 4), (50_000, 4), (75_000, 5), (75_001, 6), (100_000, 6)],
    )
    def test_railing_quantity(self, budget, qty):
        assert railing_quantity(budget) == qty

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "budget,count",
        [(30_000, 2), (30_001, 3), (50_000, 3), (75_000, 4), (75_001, 5)],
    )
    def test_max_medium_types(self, budget, count):
        assert max_medium_types(budget) == count

    @pytest.mark.unit
    def test_max_bigs(self):
        assert max_bigs(49_999) == 1
        assert max_bigs(50_000) == 2

    @pytest.mark.unit
    def test_candidates_sorted_by_price_descending(self):
        prices = [p.price for p in tier_candidates("classic")]
        assert prices == sorted(prices, reverse=True)

    @pytest.mark.unit
    def test_interleave_keeps_sub_list_order(self):
        mediums = [p for p in tier_candidates("classic") if p.size == "medium"]
        merged = interleave_by_source(mediums)
        assert [p.source for p in merged[:4]] == [
            "proprietary", "marketplace", "proprietary", "marketplace",
        ]
        assert [p.id for p in merged if p.source == "marketplace"] == [
            p.id for p in mediums if p.source == "marketplace"
        ]
        assert len(merged) == len(mediums)


class TestPhases:
    """Each phase is a pure function of its input state"""

    @pytest.mark.unit
    def test_railing_phase_only_for_balcony(self):
        empty = AllocationState((), 20_000)
        assert add_railing_hangers(empty, 20_000, "terrace") == empty

        state = add_railing_hangers(empty, 20_000, "balcony")
        assert _summary_items(state) == [(RAILING_HANGER_ID, "petunia-mix", 3)]
        assert state.remaining == 20_000 - 3 * 1700

    @pytest.mark.unit
    def test_railing_phase_can_overdraw(self):
        state = add_railing_hangers(AllocationState((), 1_000), 1_000, "balcony")
        assert state.remaining == 1_000 - 5_100

    @pytest.mark.unit
    def test_anchor_phase_prefers_second_source(self):
        state = add_anchor_pieces(
            AllocationState((), 100_000), tier_candidates("premium"), 100_000, PlantCycler()
        )
        assert [(i.planter.id, i.planter.source) for i in state.items] == [
            ("willow", "proprietary"),
            ("ug-fleeting-bliss", "marketplace"),
        ]

    @pytest.mark.unit
    def test_anchor_phase_allows_same_source_without_alternative(self):
        proprietary_bigs = [p for p in tier_candidates("premium") if p.source == "proprietary"]
        state = add_anchor_pieces(
            AllocationState((), 100_000), proprietary_bigs, 100_000, PlantCycler()
        )
        assert [(i.planter.id, i.plant.id) for i in state.items] == [
            ("willow", "areca-palm"),
            ("allegra", "rubber-plant"),
        ]
        assert state.remaining == 100_000 - 8_300 - 8_100

    @pytest.mark.unit
    def test_anchor_phase_respects_half_of_remaining(self):
        state = add_anchor_pieces(
            AllocationState((), 10_000), tier_candidates("classic"), 10_000, PlantCycler()
        )
        assert all(i.unit_price <= 5_000 for i in state.items)

    @pytest.mark.unit
    def test_medium_phase_caps_and_alternates(self):
        state = add_medium_pieces(
            AllocationState((), 50_000), tier_candidates("classic"), 50_000, PlantCycler()
        )
        assert [i.planter.source for i in state.items] == [
            "proprietary", "marketplace", "proprietary",
        ]
        assert len(state.items) == max_medium_types(50_000)

    @pytest.mark.unit
    def test_small_accent_skipped_for_premium(self):
        state = AllocationState((), 50_000)
        assert add_small_accent(state, tier_candidates("premium"), "premium", PlantCycler()) == state

    @pytest.mark.unit
    def test_small_accent_adds_at_most_one(self):
        state = add_small_accent(
            AllocationState((), 50_000), tier_candidates("starter"), "starter", PlantCycler()
        )
        assert len(state.items) == 1
        assert state.items[0].planter.size == "small"

    @pytest.mark.unit
    def test_small_accent_needs_more_than_floor(self):
        state = AllocationState((), 500)
        assert add_small_accent(state, tier_candidates("starter"), "starter", PlantCycler()) == state

    @pytest.mark.unit
    def test_pairs_upgrade_in_selection_order(self):
        state = AllocationState(
            (
                _item(RAILING_HANGER_ID, "petunia-mix", 3),
                _item("tokyo-tall", "snake-plant"),
                _item("azziano", "peace-lily"),
            ),
            5_000,
        )
        upgraded = upgrade_to_pairs(state)
        assert [i.quantity for i in upgraded.items] == [3, 2, 1]
        assert upgraded.remaining == 600
        # input state untouched
        assert state.items[1].quantity == 1

    @pytest.mark.unit
    def test_fill_stops_below_floor(self):
        state = fill_remaining_budget(
            AllocationState((), 3_000), tier_candidates("starter"), PlantCycler()
        )
        assert state.items == ()

        state = fill_remaining_budget(
            AllocationState((), 12_000), tier_candidates("starter"), PlantCycler()
        )
        assert state.items
        assert state.remaining >= 0

    @pytest.mark.unit
    def test_fill_stops_once_below_floor(self):
        candidates = tier_candidates("starter")
        state = fill_remaining_budget(AllocationState((), 10_000), candidates, PlantCycler())

        # tokyo-tall + snake plant leaves 5600, azziano + peace lily leaves 1250
        assert _summary_items(state) == [
            ("tokyo-tall", "snake-plant", 1),
            ("azziano", "peace-lily", 1),
        ]
        assert state.remaining == 1_250
        assert len(candidates) > 2
        ids = [i.planter.id for i in state.items]
        assert len(ids) == len(set(ids))


def _summary_items(state):
    return [(i.planter.id, i.plant.id, i.quantity) for i in state.items]


class TestScenarios:

    @pytest.mark.unit
    def test_balcony_20000(self):
        rec = recommend(20_000, "balcony")
        assert rec.tier == "starter"
        assert _summary(rec) == [
            (RAILING_HANGER_ID, "petunia-mix", 3),
            ("tokyo-tall", "snake-plant", 2),
            ("ug-tokyo-round", "peace-lily", 2),
            ("b2-fabric", "golden-pothos", 1),
        ]
        assert rec.grand_total == 19_948
        assert rec.grand_total == sum(
            (i.planter.price + i.plant.price) * i.quantity for i in rec.items
        )
        assert rec.has_marketplace_items is True

    @pytest.mark.unit
    def test_living_room_100000(self):
        rec = recommend(100_000, "living-room")
        assert rec.tier == "premium"
        assert RAILING_HANGER_ID not in {i.planter.id for i in rec.items}
        bigs = [i for i in rec.items[:2]]
        assert [i.planter.id for i in bigs] == ["willow", "ug-fleeting-bliss"]
        assert bigs[0].planter.source != bigs[1].planter.source
        assert rec.grand_total == 98_093

    @pytest.mark.unit
    def test_terrace_50000(self):
        rec = recommend(50_000, "terrace")
        assert rec.tier == "classic"
        assert _summary(rec) == [
            ("chevron", "areca-palm", 2),
            ("ug-paris", "rubber-plant", 2),
            ("fox-bowl", "snake-plant", 2),
            ("ug-sunflower", "peace-lily", 2),
            ("ribbed-set", "fern-boston", 1),
            ("ug-faceted-3d", "golden-pothos", 1),
        ]
        mediums = [i.planter.source for i in rec.items if i.planter.size == "medium"]
        assert mediums == ["proprietary", "marketplace", "proprietary"]
        assert rec.grand_total == 48_345

    @pytest.mark.unit
    def test_tiny_budget_degrades_gracefully(self):
        rec = recommend(1_000, "living-room")
        assert rec.grand_total <= 1_000

        rec = recommend(1_000, "balcony")
        assert rec.items[0].planter.id == RAILING_HANGER_ID
        assert rec.grand_total == grand_total(rec.items)

    @pytest.mark.unit
    def test_zero_budget(self):
        rec = recommend(0, "terrace")
        assert rec.items == ()
        assert rec.grand_total == 0
        assert rec.has_marketplace_items is False


class TestInvariants:

    @pytest.mark.unit
    @pytest.mark.parametrize("space_type", SPACE_TYPES)
    @pytest.mark.parametrize("budget", UI_BUDGETS)
    def test_idempotent(self, budget, space_type):
        first = recommend(budget, space_type)
        second = recommend(budget, space_type)
        assert _summary(first) == _summary(second)
        assert first.grand_total == second.grand_total

    @pytest.mark.unit
    @pytest.mark.parametrize("space_type", SPACE_TYPES)
    @pytest.mark.parametrize("budget", UI_BUDGETS + [22_500, 30_001, 49_999, 60_001, 74_999])
    def test_never_exceeds_budget(self, budget, space_type):
        rec = recommend(budget, space_type)
        assert rec.grand_total <= budget

    @pytest.mark.unit
    @pytest.mark.parametrize("space_type", SPACE_TYPES)
    @pytest.mark.parametrize("budget", UI_BUDGETS)
    def test_quantity_caps(self, budget, space_type):
        for item in recommend(budget, space_type).items:
            if item.planter.id == RAILING_HANGER_ID:
                assert 3 <= item.quantity <= 6
            else:
                assert 1 <= item.quantity <= 2

    @pytest.mark.unit
    @pytest.mark.parametrize("space_type", SPACE_TYPES)
    @pytest.mark.parametrize("budget", UI_BUDGETS)
    def test_items_unique_and_in_tier(self, budget, space_type):
        rec = recommend(budget, space_type)
        ids = [i.planter.id for i in rec.items]
        assert len(ids) == len(set(ids))
        for planter_id in ids:
            if planter_id != RAILING_HANGER_ID:
                assert planter_tier_of(planter_id) == rec.tier

    @pytest.mark.unit
    @pytest.mark.parametrize("budget", UI_BUDGETS)
    def test_railing_hanger_only_first_on_balcony(self, budget):
        assert recommend(budget, "balcony").items[0].planter.id == RAILING_HANGER_ID
        for space_type in ("living-room", "terrace"):
            assert RAILING_HANGER_ID not in {
                i.planter.id for i in recommend(budget, space_type).items
            }

    @pytest.mark.unit
    def test_order_of_calls_does_not_matter(self):
        baseline = _summary(recommend(50_000, "terrace"))
        recommend(100_000, "balcony")
        recommend(20_000, "living-room")
        assert _summary(recommend(50_000, "terrace")) == baseline
