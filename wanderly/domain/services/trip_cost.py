"""Trip planner pricing: planning estimate and checkout total.

The two use different price tables. The planning table feeds the rough
estimate shown while picking attractions; the checkout table is what the
booking step charges, with tax and service fee on top.
"""
import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Optional, Union

from wanderly.constants import (
    CHECKOUT_PRICE_TABLE,
    CHECKOUT_SERVICE_FEE_RATE,
    CHECKOUT_TAX_RATE,
    PLANNING_PRICE_TABLE,
    SECONDS_PER_DAY,
    TRANSPORT_COST_MULTIPLIERS,
)
from wanderly.domain.errors import ValidationError
from wanderly.domain.value_objects.enums import PriceTier, TransportMode


@dataclass(frozen=True)
class TripEstimate:
    """Breakdown of a planning estimate."""
    base_cost: float
    transport_cost: float
    accommodation_cost: float
    food_cost: float
    total: float


@dataclass(frozen=True)
class CheckoutTotal:
    """Breakdown of the amount charged at checkout."""
    subtotal: float
    tax: float
    service_fee: float
    total: float


def _tier(price) -> str:
    try:
        return PriceTier(price).value
    except ValueError as e:
        raise ValidationError(f"Unknown price tier: {price!r}") from e


def _mode(transport_mode) -> str:
    try:
        return TransportMode(transport_mode).value
    except ValueError as e:
        raise ValidationError(f"Unknown transport mode: {transport_mode!r}") from e


def trip_days(
    start: Optional[Union[date, datetime]],
    end: Optional[Union[date, datetime]],
) -> int:
    """Whole days between two dates, rounded up. 0 if either is missing."""
    if start is None or end is None:
        return 0
    if not isinstance(start, datetime):
        start = datetime(start.year, start.month, start.day)
    if not isinstance(end, datetime):
        end = datetime(end.year, end.month, end.day)
    seconds = (end - start).total_seconds()
    if seconds < 0:
        raise ValidationError("End date must not be before start date")
    return math.ceil(seconds / SECONDS_PER_DAY)


class TripCostEstimator:
    """Prices a set of selected attractions for the trip planner."""

    def __init__(self, accommodation_per_diem: float, food_per_diem: float):
        self.accommodation_per_diem = accommodation_per_diem
        self.food_per_diem = food_per_diem

    def estimate(
        self,
        selected: Iterable,
        travelers: int,
        days: int,
        transport_mode: Union[TransportMode, str],
    ) -> TripEstimate:
        """Planning estimate.

        base = sum of planning prices of the selected attractions
        transport = base x mode multiplier
        accommodation/food = travelers x days x per-diem
        """
        if travelers < 1:
            raise ValidationError("At least one traveler is required")
        if days < 0:
            raise ValidationError("Trip duration cannot be negative")

        mode = _mode(transport_mode)
        base_cost = float(sum(PLANNING_PRICE_TABLE[_tier(a.price)] for a in selected))
        transport_cost = base_cost * TRANSPORT_COST_MULTIPLIERS[mode]
        accommodation_cost = travelers * days * self.accommodation_per_diem
        food_cost = travelers * days * self.food_per_diem

        return TripEstimate(
            base_cost=base_cost,
            transport_cost=transport_cost,
            accommodation_cost=accommodation_cost,
            food_cost=food_cost,
            total=transport_cost + accommodation_cost + food_cost,
        )

    def checkout_total(self, selected: Iterable, quantity: int) -> CheckoutTotal:
        """Booking total: checkout prices x quantity, plus 18% tax and 5% service fee."""
        if quantity < 1:
            raise ValidationError("Quantity must be at least 1")

        subtotal = float(sum(CHECKOUT_PRICE_TABLE[_tier(a.price)] * quantity for a in selected))
        tax = subtotal * CHECKOUT_TAX_RATE
        service_fee = subtotal * CHECKOUT_SERVICE_FEE_RATE
        return CheckoutTotal(
            subtotal=subtotal,
            tax=tax,
            service_fee=service_fee,
            total=subtotal + tax + service_fee,
        )
