"""Enumerations shared by entities, services and API schemas."""
from enum import Enum


class Category(str, Enum):
    """Attraction category."""
    NATURE = "nature"
    MUSEUM = "museum"
    ADVENTURE = "adventure"
    DINING = "dining"
    HISTORIC = "historic"
    SHOPPING = "shopping"


class PriceTier(str, Enum):
    """Ordinal price band of an attraction."""
    FREE = "free"
    BUDGET = "$"
    MODERATE = "$$"
    PREMIUM = "$$$"


class Role(str, Enum):
    """User role."""
    USER = "user"
    ADMIN = "admin"


class TransportMode(str, Enum):
    """Transport options offered by the trip planner."""
    METRO = "metro"
    BUS = "bus"
    AUTO = "auto"
    CAB = "cab"
    CAR = "car"


class TravelMode(str, Enum):
    """Mode used for point-to-point travel time estimates."""
    DRIVING = "driving"
    WALKING = "walking"
    TRANSIT = "transit"
