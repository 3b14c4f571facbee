"""Attraction domain entity - pure business logic."""
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, List, Optional

from wanderly.domain.value_objects.coordinates import Location
from wanderly.domain.value_objects.enums import Category, PriceTier
from wanderly.domain.value_objects.rating import Rating

# Fields an admin may set on create/update. Derived rating fields are absent.
EDITABLE_FIELDS = (
    "name",
    "category",
    "description",
    "location",
    "images",
    "price",
    "distance",
    "hours",
    "phone",
    "website",
    "amenities",
    "travel_info",
)


def unique_in_order(items) -> List[str]:
    """Drop repeated strings, keeping first occurrence order."""
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


@dataclass
class TravelOption:
    """One way of getting to an attraction."""
    mode: str
    duration: str
    cost: str
    recommended: Optional[bool] = None
    pros: Optional[str] = None
    cons: Optional[str] = None
    booking_links: List[str] = field(default_factory=list)
    companies: List[str] = field(default_factory=list)
    available: Optional[bool] = None
    note: Optional[str] = None


@dataclass
class BestTravelOption:
    """Recommended travel option with the reason for picking it."""
    mode: str
    reason: str
    estimated_cost: Optional[str] = None


@dataclass
class TravelInfo:
    """Structured getting-there information."""
    from_location: str
    options: List[TravelOption]
    best_option: BestTravelOption


@dataclass
class Attraction:
    """Attraction domain entity.

    ``average_rating`` and ``review_count`` are derived from the attraction's
    reviews and only change through :meth:`apply_rating`.
    ``distance`` is a legacy miles value carried from the seed data and is
    never recomputed.
    """
    id: Optional[str]
    name: str
    category: Category
    description: str
    location: Location
    price: PriceTier
    images: List[str] = field(default_factory=list)
    distance: float = 0.0
    hours: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    amenities: List[str] = field(default_factory=list)
    travel_info: Optional[TravelInfo] = None
    average_rating: float = 0.0
    review_count: int = 0
    created_at: Optional[datetime] = None

    def __post_init__(self):
        self.category = Category(self.category)
        self.price = PriceTier(self.price)
        self.images = list(self.images)
        self.amenities = unique_in_order(self.amenities)

    def is_valid(self) -> bool:
        """Validate attraction business rules."""
        return bool(
            self.name and
            self.name.strip() and
            self.description is not None and
            self.distance >= 0
        )

    def apply_rating(self, rating: Rating):
        """Overwrite the derived rating fields."""
        self.average_rating = rating.value
        self.review_count = rating.review_count

    def with_changes(self, changes: Dict[str, Any]) -> "Attraction":
        """Return a copy with ``changes`` merged in.

        Omitted fields keep their values. List fields are replaced as a whole.
        """
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValueError(f"Fields not editable: {', '.join(sorted(unknown))}")
        return replace(self, **changes)
