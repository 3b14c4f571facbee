"""Review repository interface - abstraction for data access."""
from abc import ABC, abstractmethod
from typing import List

from wanderly.domain.entities.review import Review


class ReviewRepository(ABC):
    """Repository interface for Review entity.

    Reviews are append-only: there is no update or delete.
    """

    @abstractmethod
    def create(self, review: Review) -> Review:
        """Store a new review, assigning an id if missing."""
        pass

    @abstractmethod
    def list_by_attraction(self, attraction_id: str) -> List[Review]:
        """Reviews for an attraction in insertion order."""
        pass

    @abstractmethod
    def list_by_user(self, user_id: str) -> List[Review]:
        """Reviews written by a user in insertion order."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every review."""
        pass
