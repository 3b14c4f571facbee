"""Attraction API routes - thin layer delegating to the catalog store.
Follows Single Responsibility Principle - only handles HTTP concerns."""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from wanderly.api.dependencies import require_admin
from wanderly.api.v1.schemas.attraction_schemas import (
    AttractionCreateSchema,
    AttractionResponseSchema,
    AttractionUpdateSchema,
    DistanceResponseSchema,
    LocationSchema,
    MessageSchema,
    NearbyAttractionSchema,
)
from wanderly.application.services.catalog_store import AttractionFilter, CatalogStore
from wanderly.config import Settings, get_settings
from wanderly.core.dependencies import get_catalog_store
from wanderly.core.security import Principal
from wanderly.domain.errors import ValidationError
from wanderly.domain.services.geo import distance_km, km_to_miles, travel_minutes
from wanderly.domain.value_objects.coordinates import Coordinates
from wanderly.domain.value_objects.enums import Category, PriceTier, TravelMode

logger = logging.getLogger(__name__)

router = APIRouter(tags=["attractions"])


@router.get("/attractions", response_model=List[AttractionResponseSchema])
async def list_attractions(
    q: Optional[str] = Query(None, description="Search name, description and address"),
    place: Optional[str] = Query(None, description="Match address or name"),
    category: Optional[List[Category]] = Query(None, description="Repeat to allow several categories"),
    price: Optional[PriceTier] = Query(None, description="Exact price tier"),
    min_rating: float = Query(0.0, ge=0, le=5, description="Minimum average rating"),
    store: CatalogStore = Depends(get_catalog_store),
):
    """List attractions, optionally filtered like the explore page."""
    criteria = AttractionFilter(
        query=q,
        place=place,
        categories=category or [],
        price=price,
        min_rating=min_rating,
    )
    return store.search_attractions(criteria)


@router.get("/attractions/{attraction_id}", response_model=AttractionResponseSchema)
async def get_attraction(attraction_id: str, store: CatalogStore = Depends(get_catalog_store)):
    """Get a single attraction."""
    return store.get_attraction(attraction_id)


@router.post(
    "/attractions",
    response_model=AttractionResponseSchema,
    status_code=status.HTTP_201_CREATED,
)
async def create_attraction(
    payload: AttractionCreateSchema,
    admin: Principal = Depends(require_admin),
    store: CatalogStore = Depends(get_catalog_store),
):
    """Create an attraction (admin only)."""
    return store.create_attraction(payload.to_domain_fields())


@router.put("/attractions/{attraction_id}", response_model=AttractionResponseSchema)
async def update_attraction(
    attraction_id: str,
    payload: AttractionUpdateSchema,
    admin: Principal = Depends(require_admin),
    store: CatalogStore = Depends(get_catalog_store),
):
    """Partially update an attraction (admin only).

    Fields left out of the body keep their values; lists sent are replaced
    as a whole.
    """
    return store.update_attraction(attraction_id, payload.to_domain_fields())


@router.delete("/attractions/{attraction_id}", response_model=MessageSchema)
async def delete_attraction(
    attraction_id: str,
    admin: Principal = Depends(require_admin),
    store: CatalogStore = Depends(get_catalog_store),
):
    """Delete an attraction (admin only). Reviews and favorites are not touched."""
    store.delete_attraction(attraction_id)
    return MessageSchema(message="Attraction deleted successfully")


@router.get("/attractions/{attraction_id}/distance", response_model=DistanceResponseSchema)
async def get_distance(
    attraction_id: str,
    lat: float = Query(..., ge=-90, le=90),
    lng: float = Query(..., ge=-180, le=180),
    mode: TravelMode = Query(TravelMode.DRIVING, description="driving, walking or transit"),
    store: CatalogStore = Depends(get_catalog_store),
):
    """Straight-line distance from the user to an attraction, with a travel time estimate."""
    attraction = store.get_attraction(attraction_id)
    km = distance_km(Coordinates(lat=lat, lng=lng), attraction.location)
    return DistanceResponseSchema(
        attraction_id=attraction.id,
        attraction_name=attraction.name,
        distance_km=round(km, 1),
        distance_miles=round(km_to_miles(km), 1),
        duration_minutes=travel_minutes(km, mode),
        mode=mode,
        user_location=LocationSchema(lat=lat, lng=lng),
        attraction_location=LocationSchema.model_validate(attraction.location),
    )


@router.get("/nearby", response_model=List[NearbyAttractionSchema])
async def nearby(
    lat: float = Query(..., ge=-90, le=90),
    lng: float = Query(..., ge=-180, le=180),
    radius_km: Optional[float] = Query(None, description="Negative values are treated as 0"),
    limit: Optional[int] = Query(None, ge=0),
    type_: str = Query("attraction", alias="type"),
    store: CatalogStore = Depends(get_catalog_store),
    settings: Settings = Depends(get_settings),
):
    """Attractions within ``radius_km`` of the given point, closest first."""
    if type_ != "attraction":
        raise ValidationError("Unsupported type. Use type=attraction.")

    radius = settings.NEARBY_DEFAULT_RADIUS_KM if radius_km is None else radius_km
    cap = settings.NEARBY_RESULT_LIMIT if limit is None else min(limit, settings.NEARBY_MAX_RESULT_LIMIT)

    matches = store.find_nearby(Coordinates(lat=lat, lng=lng), radius, cap)
    logger.info(f"Nearby search at ({lat}, {lng}) r={radius}km returned {len(matches)} attractions")
    return [
        NearbyAttractionSchema(
            **AttractionResponseSchema.model_validate(match.item).model_dump(),
            distance_km=match.distance_km,
        )
        for match in matches
    ]
