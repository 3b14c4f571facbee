"""Coordinate value objects - immutable."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinates:
    """Immutable WGS84 point in decimal degrees.

    Range is not enforced here; request schemas validate at the boundary.
    """
    lat: float
    lng: float


@dataclass(frozen=True)
class Location(Coordinates):
    """A point with a human readable address."""
    address: str = ""
