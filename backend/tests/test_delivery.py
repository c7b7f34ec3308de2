"""
Unit tests for the delivery-time pricing curve.
"""
import pytest

from vatika.services.delivery import (
    DELIVERY_TIERS,
    MAX_DAYS,
    MIN_DAYS,
    discount_percent_for_days,
    discounted_total,
    multiplier_for_days,
    quote_delivery,
    tier_for_days,
)


class TestMultiplier:

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "days,expected",
        [(2, 1.0), (7, 0.85), (15, 0.80), (30, 0.70), (45, 0.50)],
    )
    def test_exact_at_anchors(self, days, expected):
        assert multiplier_for_days(days) == pytest.approx(expected)

    @pytest.mark.unit
    def test_interpolates_between_anchors(self):
        assert multiplier_for_days(11) == pytest.approx(0.825)
        assert multiplier_for_days(37.5) == pytest.approx(0.60)

    @pytest.mark.unit
    @pytest.mark.parametrize("days,expected", [(0, 1.0), (1, 1.0), (46, 0.5), (1000, 0.5)])
    def test_clamps_outside_range(self, days, expected):
        assert multiplier_for_days(days) == pytest.approx(expected)

    @pytest.mark.unit
    def test_monotone_non_increasing(self):
        values = [multiplier_for_days(d) for d in range(MIN_DAYS, MAX_DAYS + 1)]
        assert all(a >= b for a, b in zip(values, values[1:]))
        assert all(0.5 <= v <= 1.0 for v in values)

    @pytest.mark.unit
    def test_tiers_strictly_increasing(self):
        days = [t.days for t in DELIVERY_TIERS]
        discounts = [t.discount_percent for t in DELIVERY_TIERS]
        assert days == sorted(set(days))
        assert discounts == sorted(set(discounts))
        assert (MIN_DAYS, MAX_DAYS) == (2, 45)


class TestTierForDays:

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "days,tier_days",
        [(0, 2), (2, 2), (6, 2), (7, 7), (14, 7), (15, 15), (29, 15), (30, 30), (44, 30), (45, 45), (90, 45)],
    )
    def test_steps_down_to_anchor(self, days, tier_days):
        assert tier_for_days(days).days == tier_days

    @pytest.mark.unit
    def test_labels_present(self):
        assert all(t.label and t.description for t in DELIVERY_TIERS)


class TestQuote:

    @pytest.mark.unit
    def test_discounted_total_rounds(self):
        assert discounted_total(19_948, 45) == 9_974
        assert discounted_total(10_001, 7) == 8_501

    @pytest.mark.unit
    @pytest.mark.parametrize("total,expected", [(48_345, 24_173), (1, 1), (3, 2), (99_999, 50_000)])
    def test_half_rupee_rounds_up(self, total, expected):
        assert discounted_total(total, 45) == expected

    @pytest.mark.unit
    def test_odd_total_quote(self):
        quote = quote_delivery(48_345, 45)
        assert quote.discounted_total == 24_173
        assert quote.savings == 24_172

    @pytest.mark.unit
    def test_discount_percent(self):
        assert discount_percent_for_days(2) == 0
        assert discount_percent_for_days(30) == 30
        assert discount_percent_for_days(37.5) == 40

    @pytest.mark.unit
    def test_quote_delivery(self):
        quote = quote_delivery(20_000, 15)
        assert quote.discounted_total == 16_000
        assert quote.savings == 4_000
        assert quote.original_total == 20_000
        assert quote.discount_percent == 20
        assert quote.tier.days == 15

    @pytest.mark.unit
    def test_express_costs_full_price(self):
        quote = quote_delivery(48_345, 2)
        assert quote.discounted_total == 48_345
        assert quote.savings == 0
