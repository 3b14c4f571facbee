"""Tests for trip planner pricing."""
from dataclasses import dataclass
from datetime import date, datetime

import pytest

from wanderly.domain.errors import ValidationError
from wanderly.domain.services.trip_cost import TripCostEstimator, trip_days
from wanderly.domain.value_objects.enums import PriceTier, TransportMode


@dataclass
class Priced:
    price: PriceTier


@pytest.fixture
def estimator() -> TripCostEstimator:
    return TripCostEstimator(accommodation_per_diem=1000, food_per_diem=500)


@pytest.mark.unit
class TestEstimate:
    """Test the planning estimate."""

    def test_single_moderate_attraction_by_cab(self, estimator):
        result = estimator.estimate([Priced(PriceTier.MODERATE)], travelers=2, days=3, transport_mode="cab")

        assert result.base_cost == 500
        assert result.transport_cost == 1250
        assert result.accommodation_cost == 6000
        assert result.food_cost == 3000
        assert result.total == 10250

    def test_mixed_tiers_by_bus(self, estimator):
        selected = [Priced("free"), Priced("$"), Priced("$$$")]

        result = estimator.estimate(selected, travelers=1, days=0, transport_mode=TransportMode.BUS)

        assert result.base_cost == 1200
        assert result.transport_cost == pytest.approx(960)
        assert result.total == pytest.approx(960)

    def test_nothing_selected(self, estimator):
        result = estimator.estimate([], travelers=3, days=2, transport_mode="metro")
        assert result.transport_cost == 0
        assert result.total == 3 * 2 * 1500

    @pytest.mark.parametrize("mode, multiplier", [
        ("metro", 1.0), ("bus", 0.8), ("auto", 1.5), ("cab", 2.5), ("car", 3.0),
    ])
    def test_transport_multipliers(self, estimator, mode, multiplier):
        result = estimator.estimate([Priced("$$$")], travelers=1, days=0, transport_mode=mode)
        assert result.transport_cost == pytest.approx(1000 * multiplier)

    def test_unknown_transport_mode(self, estimator):
        with pytest.raises(ValidationError):
            estimator.estimate([], travelers=1, days=1, transport_mode="teleport")

    def test_unknown_price_tier(self, estimator):
        with pytest.raises(ValidationError):
            estimator.estimate([Priced("$$$$")], travelers=1, days=1, transport_mode="metro")

    def test_needs_a_traveler(self, estimator):
        with pytest.raises(ValidationError):
            estimator.estimate([], travelers=0, days=1, transport_mode="metro")

    def test_negative_days(self, estimator):
        with pytest.raises(ValidationError):
            estimator.estimate([], travelers=1, days=-1, transport_mode="metro")


@pytest.mark.unit
class TestCheckoutTotal:
    """Test the booking total."""

    def test_tax_and_service_fee_on_checkout_prices(self, estimator):
        result = estimator.checkout_total([Priced("$$"), Priced("$")], quantity=2)

        assert result.subtotal == 2100
        assert result.tax == pytest.approx(378)
        assert result.service_fee == pytest.approx(105)
        assert result.total == pytest.approx(2583)

    def test_checkout_uses_a_different_table_from_planning(self, estimator):
        selected = [Priced("$$")]
        planning = estimator.estimate(selected, travelers=1, days=0, transport_mode="metro")
        checkout = estimator.checkout_total(selected, quantity=1)
        assert planning.base_cost == 500
        assert checkout.subtotal == 750

    def test_unknown_price_tier(self, estimator):
        with pytest.raises(ValidationError):
            estimator.checkout_total([Priced("luxury")], quantity=1)

    def test_quantity_must_be_positive(self, estimator):
        with pytest.raises(ValidationError):
            estimator.checkout_total([Priced("$")], quantity=0)


@pytest.mark.unit
class TestTripDays:
    """Test trip duration from dates."""

    def test_whole_days(self):
        assert trip_days(date(2024, 3, 1), date(2024, 3, 4)) == 3

    def test_partial_day_rounds_up(self):
        assert trip_days(datetime(2024, 3, 1, 9), datetime(2024, 3, 2, 10)) == 2

    def test_same_day(self):
        assert trip_days(date(2024, 3, 1), date(2024, 3, 1)) == 0

    def test_missing_date(self):
        assert trip_days(None, date(2024, 3, 1)) == 0
        assert trip_days(date(2024, 3, 1), None) == 0

    def test_end_before_start(self):
        with pytest.raises(ValidationError):
            trip_days(date(2024, 3, 4), date(2024, 3, 1))
