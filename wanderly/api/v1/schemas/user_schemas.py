"""Pydantic schemas for auth and user endpoints."""
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from wanderly.domain.value_objects.enums import Role

EMAIL_REGEX = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class RegisterSchema(BaseModel):
    """Registration request."""
    username: str = Field(..., min_length=1)
    email: str = Field(..., pattern=EMAIL_REGEX)
    password: str = Field(..., min_length=6)


class LoginSchema(BaseModel):
    """Login request."""
    email: str = Field(..., pattern=EMAIL_REGEX)
    password: str


class UserPublicSchema(BaseModel):
    """User without credentials."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    email: str
    role: Role
    favorites: List[str]


class AuthResponseSchema(BaseModel):
    """User plus bearer token."""
    user: UserPublicSchema
    token: str


class FavoriteAddSchema(BaseModel):
    """Favorite add request."""
    attraction_id: str = Field(..., min_length=1)


class FavoritesResponseSchema(BaseModel):
    """Favorite attraction ids in bookmark order."""
    favorites: List[str]
