"""Trip planner pricing endpoints."""
from fastapi import APIRouter, Depends

from wanderly.api.v1.schemas.planner_schemas import (
    CheckoutRequestSchema,
    CheckoutResponseSchema,
    TripEstimateRequestSchema,
    TripEstimateResponseSchema,
)
from wanderly.application.services.catalog_store import CatalogStore
from wanderly.core.dependencies import get_catalog_store, get_trip_cost_estimator
from wanderly.domain.services.trip_cost import TripCostEstimator, trip_days

router = APIRouter(prefix="/planner", tags=["planner"])


@router.post("/estimate", response_model=TripEstimateResponseSchema)
async def estimate_trip(
    payload: TripEstimateRequestSchema,
    store: CatalogStore = Depends(get_catalog_store),
    estimator: TripCostEstimator = Depends(get_trip_cost_estimator),
):
    """Rough trip cost for the attractions being planned."""
    selected = [store.get_attraction(attraction_id) for attraction_id in payload.attraction_ids]
    days = payload.days if payload.days is not None else trip_days(payload.start_date, payload.end_date)
    estimate = estimator.estimate(selected, payload.travelers, days, payload.transport_mode)
    return TripEstimateResponseSchema(
        days=days,
        base_cost=estimate.base_cost,
        transport_cost=estimate.transport_cost,
        accommodation_cost=estimate.accommodation_cost,
        food_cost=estimate.food_cost,
        total=estimate.total,
    )


@router.post("/checkout", response_model=CheckoutResponseSchema)
async def checkout(
    payload: CheckoutRequestSchema,
    store: CatalogStore = Depends(get_catalog_store),
    estimator: TripCostEstimator = Depends(get_trip_cost_estimator),
):
    """Amount charged when booking the selected attractions."""
    selected = [store.get_attraction(attraction_id) for attraction_id in payload.attraction_ids]
    return CheckoutResponseSchema.model_validate(estimator.checkout_total(selected, payload.quantity))
