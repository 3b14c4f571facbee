"""User domain entity."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from wanderly.domain.value_objects.enums import Role


@dataclass
class User:
    """User domain entity."""
    id: Optional[str]
    username: str
    email: str
    password_hash: str
    role: Role = Role.USER
    favorites: List[str] = field(default_factory=list)
    created_at: Optional[datetime] = None

    def __post_init__(self):
        self.role = Role(self.role)
        self.favorites = list(self.favorites)

    def is_valid(self) -> bool:
        """Validate user business rules."""
        return bool(
            self.username and
            self.username.strip() and
            self.email and
            "@" in self.email and
            self.password_hash
        )

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def add_favorite(self, attraction_id: str) -> bool:
        """Append ``attraction_id`` unless already present. Returns True if added."""
        if attraction_id in self.favorites:
            return False
        self.favorites.append(attraction_id)
        return True

    def remove_favorite(self, attraction_id: str) -> bool:
        """Drop ``attraction_id``. Returns True if it was present."""
        if attraction_id not in self.favorites:
            return False
        self.favorites = [fav for fav in self.favorites if fav != attraction_id]
        return True
