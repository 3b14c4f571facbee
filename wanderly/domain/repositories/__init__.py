"""Repository interfaces."""
from wanderly.domain.repositories.attraction_repository import AttractionRepository
from wanderly.domain.repositories.review_repository import ReviewRepository
from wanderly.domain.repositories.user_repository import UserRepository

__all__ = [
    "AttractionRepository",
    "ReviewRepository",
    "UserRepository",
]
