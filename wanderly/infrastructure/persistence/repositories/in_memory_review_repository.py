"""In-memory implementation of ReviewRepository."""
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, List

from wanderly.domain.entities.review import Review
from wanderly.domain.errors import ValidationError
from wanderly.domain.repositories.review_repository import ReviewRepository


class InMemoryReviewRepository(ReviewRepository):
    """Dict-backed review storage. Reviews are frozen so no copying is needed."""

    def __init__(self):
        self._reviews: Dict[str, Review] = {}

    def create(self, review: Review) -> Review:
        """Store a new review."""
        if not review.is_valid():
            raise ValidationError("Invalid review")

        stored = replace(
            review,
            id=review.id or uuid.uuid4().hex,
            created_at=review.created_at or datetime.now(timezone.utc),
        )
        self._reviews[stored.id] = stored
        return stored

    def list_by_attraction(self, attraction_id: str) -> List[Review]:
        """Reviews for an attraction."""
        return [r for r in self._reviews.values() if r.attraction_id == attraction_id]

    def list_by_user(self, user_id: str) -> List[Review]:
        """Reviews written by a user."""
        return [r for r in self._reviews.values() if r.user_id == user_id]

    def clear(self) -> None:
        self._reviews.clear()
