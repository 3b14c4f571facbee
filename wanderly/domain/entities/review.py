"""Review domain entity."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from wanderly.constants import MAX_REVIEW_RATING, MIN_REVIEW_RATING


@dataclass(frozen=True)
class Review:
    """A user's rating and comment on an attraction. Immutable once stored.

    ``user_id`` and ``attraction_id`` are weak references; nothing enforces
    that they resolve.
    """
    id: Optional[str]
    user_id: str
    attraction_id: str
    rating: float
    comment: str
    created_at: Optional[datetime] = None

    def is_valid(self) -> bool:
        """Validate review business rules."""
        return bool(
            self.user_id and
            self.attraction_id and
            MIN_REVIEW_RATING <= self.rating <= MAX_REVIEW_RATING
        )
