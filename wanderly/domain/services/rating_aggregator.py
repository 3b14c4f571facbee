"""Keeps an attraction's average rating and review count in step with its reviews."""
import logging
from typing import Optional

from wanderly.domain.entities.attraction import Attraction
from wanderly.domain.repositories.attraction_repository import AttractionRepository
from wanderly.domain.repositories.review_repository import ReviewRepository
from wanderly.domain.value_objects.rating import Rating

logger = logging.getLogger(__name__)


class RatingAggregator:
    """Sole writer of ``average_rating`` and ``review_count``.

    Not synchronised on its own; callers hold the catalog write lock so the
    read-then-write below cannot interleave with another review write.
    """

    def __init__(
        self,
        attraction_repository: AttractionRepository,
        review_repository: ReviewRepository,
    ):
        self._attraction_repo = attraction_repository
        self._review_repo = review_repository

    def recompute(self, attraction_id: str) -> Optional[Attraction]:
        """Recompute the aggregate from scratch.

        Args:
            attraction_id: Attraction whose reviews changed

        Returns:
            The updated attraction, or None if it no longer exists
        """
        attraction = self._attraction_repo.get_by_id(attraction_id)
        if attraction is None:
            logger.debug(f"Skipping rating recompute, attraction {attraction_id} not found")
            return None

        reviews = self._review_repo.list_by_attraction(attraction_id)
        rating = Rating.from_scores(review.rating for review in reviews)
        attraction.apply_rating(rating)
        return self._attraction_repo.update(attraction)
