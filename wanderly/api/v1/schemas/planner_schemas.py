"""Pydantic schemas for trip planner endpoints."""
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from wanderly.domain.value_objects.enums import TransportMode


class TripEstimateRequestSchema(BaseModel):
    """Planning estimate request.

    Either ``days`` or both ``start_date`` and ``end_date`` give the duration.
    """
    attraction_ids: List[str] = []
    travelers: int = Field(1, ge=1)
    days: Optional[int] = Field(None, ge=0)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    transport_mode: TransportMode = TransportMode.METRO

    @model_validator(mode="after")
    def check_dates(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class TripEstimateResponseSchema(BaseModel):
    """Planning estimate breakdown."""
    model_config = ConfigDict(from_attributes=True)

    days: int
    base_cost: float
    transport_cost: float
    accommodation_cost: float
    food_cost: float
    total: float


class CheckoutRequestSchema(BaseModel):
    """Checkout request: every selected attraction is booked ``quantity`` times."""
    attraction_ids: List[str] = Field(..., min_length=1)
    quantity: int = Field(1, ge=1)


class CheckoutResponseSchema(BaseModel):
    """Checkout total breakdown."""
    model_config = ConfigDict(from_attributes=True)

    subtotal: float
    tax: float
    service_fee: float
    total: float
