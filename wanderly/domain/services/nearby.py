"""Nearby query engine: radius filter over located entities."""
from dataclasses import dataclass
from typing import Generic, Iterable, List, TypeVar

from wanderly.domain.services.geo import distance_km

T = TypeVar("T")


@dataclass(frozen=True)
class NearbyMatch(Generic[T]):
    """A candidate that fell inside the search radius."""
    item: T
    distance_km: float


def find_nearby(center, radius_km: float, candidates: Iterable[T], limit: int) -> List[NearbyMatch[T]]:
    """Return candidates within ``radius_km`` of ``center``, closest first.

    Candidates expose ``location`` with ``lat``/``lng``. Equal distances keep
    their input order. At most ``limit`` matches are returned.

    Args:
        center: Reference point with ``lat``/``lng``
        radius_km: Search radius, assumed non-negative
        candidates: Located entities to filter
        limit: Maximum number of results

    Returns:
        Matches sorted by ascending distance
    """
    matches = []
    for candidate in candidates:
        d = distance_km(center, candidate.location)
        if d <= radius_km:
            matches.append(NearbyMatch(item=candidate, distance_km=d))

    # list.sort is stable, so ties stay in input order
    matches.sort(key=lambda m: m.distance_km)
    return matches[:max(limit, 0)]
