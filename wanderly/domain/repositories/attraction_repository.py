"""Attraction repository interface - abstraction for data access."""
from abc import ABC, abstractmethod
from typing import List, Optional

from wanderly.domain.entities.attraction import Attraction


class AttractionRepository(ABC):
    """Repository interface for Attraction entity.

    Follows Interface Segregation Principle - focused interface.
    Follows Dependency Inversion Principle - depends on abstraction.
    """

    @abstractmethod
    def get_by_id(self, attraction_id: str) -> Optional[Attraction]:
        """Get attraction by ID."""
        pass

    @abstractmethod
    def list_all(self) -> List[Attraction]:
        """List attractions in insertion order."""
        pass

    @abstractmethod
    def create(self, attraction: Attraction) -> Attraction:
        """Create new attraction, assigning an id if missing."""
        pass

    @abstractmethod
    def update(self, attraction: Attraction) -> Attraction:
        """Replace the stored attraction with the same id."""
        pass

    @abstractmethod
    def delete(self, attraction_id: str) -> bool:
        """Delete attraction. Returns False if it did not exist."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every attraction."""
        pass
