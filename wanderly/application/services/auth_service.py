"""Registration and login on top of the catalog's user collection."""
import logging
import re
from dataclasses import dataclass

from wanderly.application.services.catalog_store import CatalogStore
from wanderly.core.security import Principal, hash_password, issue_token, verify_password
from wanderly.constants import SECONDS_PER_DAY
from wanderly.domain.entities.user import User
from wanderly.domain.errors import UnauthorizedError, ValidationError

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
MIN_PASSWORD_LENGTH = 6


@dataclass(frozen=True)
class AuthResult:
    """A user together with a freshly issued token."""
    user: User
    token: str


class AuthService:
    """Issues tokens for registered users.

    Credentials are checked here and nowhere else; the rest of the app only
    sees the :class:`Principal` carried by a verified token.
    """

    def __init__(self, store: CatalogStore, token_secret: str, token_ttl_days: int, hash_iterations: int = 120000):
        self._store = store
        self._token_secret = token_secret
        self._token_ttl_seconds = token_ttl_days * SECONDS_PER_DAY
        self._hash_iterations = hash_iterations

    def register(self, username: str, email: str, password: str) -> AuthResult:
        """Create a ``user``-role account and log it in."""
        if not username or not username.strip():
            raise ValidationError("Username is required")
        if not EMAIL_PATTERN.match(email or ""):
            raise ValidationError("A valid email address is required")
        if len(password or "") < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

        user = self._store.create_user(
            username=username,
            email=email,
            password_hash=hash_password(password, self._hash_iterations),
        )
        logger.info(f"Registered user {user.id}")
        return AuthResult(user=user, token=self.token_for(user))

    def login(self, email: str, password: str) -> AuthResult:
        user = self._store.get_user_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            raise UnauthorizedError("Invalid credentials")
        return AuthResult(user=user, token=self.token_for(user))

    def token_for(self, user: User) -> str:
        principal = Principal(user_id=user.id, email=user.email, role=user.role)
        return issue_token(principal, self._token_secret, self._token_ttl_seconds)
