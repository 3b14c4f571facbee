"""In-memory implementation of AttractionRepository.
Follows Liskov Substitution Principle - can replace any AttractionRepository."""
import uuid
from copy import deepcopy
from datetime import datetime, timezone
from typing import Dict, List, Optional

from wanderly.domain.entities.attraction import Attraction
from wanderly.domain.errors import NotFoundError, ValidationError
from wanderly.domain.repositories.attraction_repository import AttractionRepository


class InMemoryAttractionRepository(AttractionRepository):
    """Dict-backed attraction storage.

    Stores and hands out deep copies so callers cannot mutate stored state
    behind the repository's back.
    """

    def __init__(self):
        self._attractions: Dict[str, Attraction] = {}

    def get_by_id(self, attraction_id: str) -> Optional[Attraction]:
        """Get attraction by ID."""
        attraction = self._attractions.get(attraction_id)
        return deepcopy(attraction) if attraction else None

    def list_all(self) -> List[Attraction]:
        """List all attractions in insertion order."""
        return [deepcopy(a) for a in self._attractions.values()]

    def create(self, attraction: Attraction) -> Attraction:
        """Create new attraction."""
        if not attraction.is_valid():
            raise ValidationError("Invalid attraction")

        stored = deepcopy(attraction)
        if stored.id is None:
            stored.id = uuid.uuid4().hex
        if stored.created_at is None:
            stored.created_at = datetime.now(timezone.utc)

        self._attractions[stored.id] = stored
        return deepcopy(stored)

    def update(self, attraction: Attraction) -> Attraction:
        """Update existing attraction."""
        if attraction.id is None or attraction.id not in self._attractions:
            raise NotFoundError("Attraction not found")

        if not attraction.is_valid():
            raise ValidationError("Invalid attraction")

        self._attractions[attraction.id] = deepcopy(attraction)
        return deepcopy(attraction)

    def delete(self, attraction_id: str) -> bool:
        """Delete attraction by ID."""
        return self._attractions.pop(attraction_id, None) is not None

    def clear(self) -> None:
        self._attractions.clear()
