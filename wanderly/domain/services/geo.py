"""Great-circle distance helpers."""
import math

from wanderly.constants import EARTH_RADIUS_KM, KM_TO_MILES, TRAVEL_MINUTES_PER_KM
from wanderly.domain.value_objects.enums import TravelMode


def distance_km(a, b) -> float:
    """Great-circle distance between two points on Earth in km.

    ``a`` and ``b`` are anything with ``lat``/``lng`` attributes in decimal
    degrees. Inputs are not validated.
    """
    dlat = math.radians(b.lat - a.lat)
    dlng = math.radians(b.lng - a.lng)
    h = (
        math.sin(dlat / 2) ** 2
        + math.cos(math.radians(a.lat)) * math.cos(math.radians(b.lat)) * math.sin(dlng / 2) ** 2
    )
    h = min(h, 1.0)  # rounding near antipodes
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_KM * c


def km_to_miles(km: float) -> float:
    return km * KM_TO_MILES


def travel_minutes(km: float, mode: TravelMode = TravelMode.DRIVING) -> int:
    """Rough travel time over a straight-line distance, in whole minutes."""
    return round(km * TRAVEL_MINUTES_PER_KM[TravelMode(mode).value])
