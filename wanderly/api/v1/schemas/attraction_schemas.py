"""Pydantic schemas for attraction endpoints."""
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from wanderly.domain.entities.attraction import BestTravelOption, TravelInfo, TravelOption
from wanderly.domain.value_objects.coordinates import Location
from wanderly.domain.value_objects.enums import Category, PriceTier, TravelMode

# Fields that may not be cleared with an explicit null on update
NON_NULLABLE_FIELDS = {
    "name", "category", "description", "location", "price", "images", "distance", "amenities",
}


class LocationSchema(BaseModel):
    """Point with address, decimal degrees."""
    model_config = ConfigDict(from_attributes=True)

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    address: str = ""


class TravelOptionSchema(BaseModel):
    """Travel option schema."""
    model_config = ConfigDict(from_attributes=True)

    mode: str
    duration: str
    cost: str
    recommended: Optional[bool] = None
    pros: Optional[str] = None
    cons: Optional[str] = None
    booking_links: List[str] = []
    companies: List[str] = []
    available: Optional[bool] = None
    note: Optional[str] = None


class BestTravelOptionSchema(BaseModel):
    """Best travel option schema."""
    model_config = ConfigDict(from_attributes=True)

    mode: str
    reason: str
    estimated_cost: Optional[str] = None


class TravelInfoSchema(BaseModel):
    """Travel info schema."""
    model_config = ConfigDict(from_attributes=True)

    from_location: str
    options: List[TravelOptionSchema] = []
    best_option: BestTravelOptionSchema

    def to_domain(self) -> TravelInfo:
        return TravelInfo(
            from_location=self.from_location,
            options=[TravelOption(**opt.model_dump()) for opt in self.options],
            best_option=BestTravelOption(**self.best_option.model_dump()),
        )


class AttractionWriteMixin:
    """Conversion of validated request bodies into domain field values."""

    def to_domain_fields(self) -> Dict[str, Any]:
        values = {}
        for name in self.model_fields_set:
            value = getattr(self, name)
            if value is None and name in NON_NULLABLE_FIELDS:
                continue
            if name == "location":
                value = Location(lat=value.lat, lng=value.lng, address=value.address)
            elif name == "travel_info" and value is not None:
                value = value.to_domain()
            values[name] = value
        return values


class AttractionCreateSchema(AttractionWriteMixin, BaseModel):
    """Body of an admin create request."""
    name: str = Field(..., min_length=1)
    category: Category
    description: str
    location: LocationSchema
    price: PriceTier
    images: List[str] = []
    distance: float = Field(0.0, ge=0)
    hours: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    amenities: List[str] = []
    travel_info: Optional[TravelInfoSchema] = None


class AttractionUpdateSchema(AttractionWriteMixin, BaseModel):
    """Body of an admin update request. Only the fields sent are changed."""
    name: Optional[str] = Field(None, min_length=1)
    category: Optional[Category] = None
    description: Optional[str] = None
    location: Optional[LocationSchema] = None
    price: Optional[PriceTier] = None
    images: Optional[List[str]] = None
    distance: Optional[float] = Field(None, ge=0)
    hours: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    amenities: Optional[List[str]] = None
    travel_info: Optional[TravelInfoSchema] = None


class AttractionResponseSchema(BaseModel):
    """Attraction as returned to clients."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    category: Category
    description: str
    location: LocationSchema
    images: List[str]
    price: PriceTier
    distance: float
    hours: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    amenities: List[str]
    travel_info: Optional[TravelInfoSchema] = None
    average_rating: float
    review_count: int
    created_at: Optional[datetime] = None


class NearbyAttractionSchema(AttractionResponseSchema):
    """Attraction with its distance from the search center."""
    distance_km: float


class DistanceResponseSchema(BaseModel):
    """Distance between a user position and an attraction."""
    attraction_id: str
    attraction_name: str
    distance_km: float
    distance_miles: float
    duration_minutes: int
    mode: TravelMode
    user_location: LocationSchema
    attraction_location: LocationSchema


class MessageSchema(BaseModel):
    """Plain acknowledgement."""
    message: str
