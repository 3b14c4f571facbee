"""In-memory implementation of UserRepository."""
import uuid
from copy import deepcopy
from datetime import datetime, timezone
from typing import Dict, Optional

from wanderly.domain.entities.user import User
from wanderly.domain.errors import ConflictError, NotFoundError, ValidationError
from wanderly.domain.repositories.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):
    """Dict-backed user storage with username and email indexes."""

    def __init__(self):
        self._users: Dict[str, User] = {}
        self._by_email: Dict[str, str] = {}
        self._by_username: Dict[str, str] = {}

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID."""
        user = self._users.get(user_id)
        return deepcopy(user) if user else None

    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        user_id = self._by_email.get(email.strip().lower())
        return self.get_by_id(user_id) if user_id else None

    def create(self, user: User) -> User:
        """Create new user."""
        if not user.is_valid():
            raise ValidationError("Invalid user")

        email_key = user.email.strip().lower()
        username_key = user.username.strip()

        # Check for duplicates before touching any index
        if email_key in self._by_email:
            raise ConflictError(f"A user with email '{user.email}' already exists")
        if username_key in self._by_username:
            raise ConflictError(f"Username '{user.username}' is already taken")

        stored = deepcopy(user)
        if stored.id is None:
            stored.id = uuid.uuid4().hex
        if stored.created_at is None:
            stored.created_at = datetime.now(timezone.utc)

        self._users[stored.id] = stored
        self._by_email[email_key] = stored.id
        self._by_username[username_key] = stored.id
        return deepcopy(stored)

    def update(self, user: User) -> User:
        """Update existing user. Username and email are not editable."""
        if user.id is None or user.id not in self._users:
            raise NotFoundError("User not found")

        current = self._users[user.id]
        if current.email != user.email or current.username != user.username:
            raise ValidationError("Username and email cannot be changed")

        self._users[user.id] = deepcopy(user)
        return deepcopy(user)

    def clear(self) -> None:
        self._users.clear()
        self._by_email.clear()
        self._by_username.clear()
