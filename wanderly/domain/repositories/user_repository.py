"""User repository interface - abstraction for data access."""
from abc import ABC, abstractmethod
from typing import Optional

from wanderly.domain.entities.user import User


class UserRepository(ABC):
    """Repository interface for User entity."""

    @abstractmethod
    def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID."""
        pass

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email (case-insensitive)."""
        pass

    @abstractmethod
    def create(self, user: User) -> User:
        """Create new user. Raises ConflictError on duplicate username/email."""
        pass

    @abstractmethod
    def update(self, user: User) -> User:
        """Replace the stored user with the same id."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every user."""
        pass
