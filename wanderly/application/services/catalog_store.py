"""Catalog store: the single owner of attractions, reviews and users.

Reads and writes go through one re-entrant lock. A review insert and the
rating recompute it triggers form one atomic step per attraction, and no
reader iterates a collection while it is being written.
"""
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from wanderly.constants import MAX_REVIEW_RATING, MIN_REVIEW_RATING
from wanderly.domain.entities.attraction import EDITABLE_FIELDS, Attraction
from wanderly.domain.entities.review import Review
from wanderly.domain.entities.user import User
from wanderly.domain.errors import NotFoundError, ValidationError
from wanderly.domain.repositories import AttractionRepository, ReviewRepository, UserRepository
from wanderly.domain.services.nearby import NearbyMatch, find_nearby
from wanderly.domain.services.rating_aggregator import RatingAggregator
from wanderly.domain.value_objects.enums import Category, PriceTier, Role

logger = logging.getLogger(__name__)


@dataclass
class AttractionFilter:
    """Explore-page filters. Empty fields do not filter."""
    query: Optional[str] = None
    place: Optional[str] = None
    categories: List[Category] = field(default_factory=list)
    price: Optional[PriceTier] = None
    min_rating: float = 0.0

    def matches(self, attraction: Attraction) -> bool:
        address = attraction.location.address.lower()
        name = attraction.name.lower()
        if self.query:
            q = self.query.lower()
            if q not in name and q not in attraction.description.lower() and q not in address:
                return False
        if self.place:
            place = self.place.lower()
            if place not in address and place not in name:
                return False
        if self.categories and attraction.category not in self.categories:
            return False
        if self.price is not None and attraction.price != self.price:
            return False
        return attraction.average_rating >= self.min_rating


@dataclass
class SeedData:
    """Entities to load into a freshly cleared store."""
    attractions: List[Attraction] = field(default_factory=list)
    users: List[User] = field(default_factory=list)
    reviews: List[Review] = field(default_factory=list)


class CatalogStore:
    """CRUD and relationship queries over the in-memory catalog."""

    def __init__(
        self,
        attraction_repository: AttractionRepository,
        review_repository: ReviewRepository,
        user_repository: UserRepository,
        rating_aggregator: Optional[RatingAggregator] = None,
    ):
        self._attraction_repo = attraction_repository
        self._review_repo = review_repository
        self._user_repo = user_repository
        self._aggregator = rating_aggregator or RatingAggregator(
            attraction_repository, review_repository
        )
        self._lock = threading.RLock()

    # -------- Lifecycle --------
    def reset(self) -> None:
        """Drop every entity."""
        with self._lock:
            self._review_repo.clear()
            self._attraction_repo.clear()
            self._user_repo.clear()
        logger.info("Catalog cleared")

    def reseed(self, seed: SeedData) -> None:
        """Clear the catalog and load ``seed``.

        Seeded attractions keep the rating fields recorded in the seed; seeded
        reviews do not trigger a recompute.
        """
        with self._lock:
            self.reset()
            for attraction in seed.attractions:
                self._attraction_repo.create(attraction)
            for user in seed.users:
                self._user_repo.create(user)
            for review in seed.reviews:
                self._review_repo.create(review)
        logger.info(
            f"Catalog seeded with {len(seed.attractions)} attractions, "
            f"{len(seed.users)} users, {len(seed.reviews)} reviews"
        )

    # -------- Attractions --------
    def list_attractions(self) -> List[Attraction]:
        with self._lock:
            return self._attraction_repo.list_all()

    def search_attractions(self, criteria: AttractionFilter) -> List[Attraction]:
        """Attractions matching every given filter, in catalog order."""
        with self._lock:
            attractions = self._attraction_repo.list_all()
        return [a for a in attractions if criteria.matches(a)]

    def get_attraction(self, attraction_id: str) -> Attraction:
        with self._lock:
            attraction = self._attraction_repo.get_by_id(attraction_id)
        if attraction is None:
            raise NotFoundError("Attraction not found")
        return attraction

    def create_attraction(self, fields: Dict[str, Any]) -> Attraction:
        """Create an attraction with a fresh id and zeroed rating fields."""
        values = self._editable(fields)
        try:
            attraction = Attraction(id=None, **values)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Invalid attraction: {e}") from e
        with self._lock:
            created = self._attraction_repo.create(attraction)
        logger.info(f"Created attraction {created.id} ({created.name})")
        return created

    def update_attraction(self, attraction_id: str, changes: Dict[str, Any]) -> Attraction:
        """Merge ``changes`` into the attraction. Omitted fields are kept."""
        values = self._editable(changes)
        with self._lock:
            current = self.get_attraction(attraction_id)
            try:
                merged = current.with_changes(values)
            except (TypeError, ValueError) as e:
                raise ValidationError(f"Invalid attraction: {e}") from e
            updated = self._attraction_repo.update(merged)
        logger.info(f"Updated attraction {attraction_id}: {', '.join(sorted(values)) or 'no fields'}")
        return updated

    def delete_attraction(self, attraction_id: str) -> None:
        """Remove the attraction. Its reviews and favorites are left in place."""
        with self._lock:
            if not self._attraction_repo.delete(attraction_id):
                raise NotFoundError("Attraction not found")
        logger.info(f"Deleted attraction {attraction_id}")

    def find_nearby(self, center, radius_km: float, limit: int) -> List[NearbyMatch[Attraction]]:
        """Attractions within ``radius_km`` of ``center``, closest first."""
        radius_km = max(0.0, radius_km)
        with self._lock:
            attractions = self._attraction_repo.list_all()
        return find_nearby(center, radius_km, attractions, limit)

    @staticmethod
    def _editable(fields: Dict[str, Any]) -> Dict[str, Any]:
        unknown = set(fields) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValidationError(f"Fields not editable: {', '.join(sorted(unknown))}")
        return dict(fields)

    # -------- Reviews --------
    def create_review(self, user_id: str, attraction_id: str, rating: float, comment: str) -> Review:
        """Store a review and refresh the attraction's aggregate in the same step.

        The attraction id is not checked; a review on a missing attraction is
        stored and the recompute is skipped.
        """
        if not MIN_REVIEW_RATING <= rating <= MAX_REVIEW_RATING:
            raise ValidationError(
                f"Rating must be between {MIN_REVIEW_RATING:g} and {MAX_REVIEW_RATING:g}"
            )
        review = Review(
            id=None,
            user_id=user_id,
            attraction_id=attraction_id,
            rating=float(rating),
            comment=comment,
        )
        with self._lock:
            stored = self._review_repo.create(review)
            self._aggregator.recompute(attraction_id)
        logger.info(f"User {user_id} reviewed attraction {attraction_id} ({rating:g})")
        return stored

    def recompute_rating(self, attraction_id: str) -> Optional[Attraction]:
        """Rebuild the attraction's aggregate from its stored reviews."""
        with self._lock:
            return self._aggregator.recompute(attraction_id)

    def reviews_by_attraction(self, attraction_id: str) -> List[Review]:
        with self._lock:
            return self._review_repo.list_by_attraction(attraction_id)

    def reviews_by_user(self, user_id: str) -> List[Review]:
        with self._lock:
            return self._review_repo.list_by_user(user_id)

    # -------- Users --------
    def create_user(
        self,
        username: str,
        email: str,
        password_hash: str,
        role: Role = Role.USER,
    ) -> User:
        """Create a user. Duplicate username or email raises ConflictError."""
        user = User(
            id=None,
            username=username.strip(),
            email=email.strip().lower(),
            password_hash=password_hash,
            role=role,
        )
        with self._lock:
            created = self._user_repo.create(user)
        logger.info(f"Created user {created.id} ({created.username})")
        return created

    def get_user(self, user_id: str) -> User:
        with self._lock:
            user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def get_user_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            return self._user_repo.get_by_email(email)

    # -------- Favorites --------
    def add_favorite(self, user_id: str, attraction_id: str) -> List[str]:
        """Bookmark an attraction. Adding an existing favorite changes nothing."""
        with self._lock:
            user = self.get_user(user_id)
            if user.add_favorite(attraction_id):
                self._user_repo.update(user)
        return list(user.favorites)

    def remove_favorite(self, user_id: str, attraction_id: str) -> List[str]:
        with self._lock:
            user = self.get_user(user_id)
            if user.remove_favorite(attraction_id):
                self._user_repo.update(user)
        return list(user.favorites)

    def favorites_for(self, user_id: str) -> List[Attraction]:
        """Favorite attractions in bookmark order, skipping ids that no longer resolve."""
        with self._lock:
            user = self.get_user(user_id)
            return list(self._resolve(user.favorites))

    def _resolve(self, attraction_ids: Iterable[str]) -> Iterable[Attraction]:
        for attraction_id in attraction_ids:
            attraction = self._attraction_repo.get_by_id(attraction_id)
            if attraction is not None:
                yield attraction
