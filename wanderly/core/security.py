"""Password hashing and signed bearer tokens."""
import base64
import hashlib
import hmac
import json
import secrets
import time
from dataclasses import dataclass
from typing import Optional

from wanderly.domain.value_objects.enums import Role

HASH_ALGORITHM = "pbkdf2_sha256"


@dataclass(frozen=True)
class Principal:
    """Authenticated caller as established by token verification."""
    user_id: str
    email: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


def hash_password(password: str, iterations: int = 120000) -> str:
    """Hash a password as ``pbkdf2_sha256$iterations$salt$digest``."""
    salt = secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), iterations)
    return f"{HASH_ALGORITHM}${iterations}${salt}${digest.hex()}"


def verify_password(password: str, password_hash: str) -> bool:
    """Check ``password`` against a hash produced by :func:`hash_password`."""
    try:
        algorithm, iterations, salt, expected = password_hash.split("$")
    except ValueError:
        return False
    if algorithm != HASH_ALGORITHM:
        return False
    digest = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), int(iterations))
    return hmac.compare_digest(digest.hex(), expected)


def _b64encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode()


def _b64decode(text: str) -> bytes:
    padding = "=" * (-len(text) % 4)
    return base64.urlsafe_b64decode(text + padding)


def _sign(payload: str, secret: str) -> str:
    return _b64encode(hmac.new(secret.encode(), payload.encode(), hashlib.sha256).digest())


def issue_token(principal: Principal, secret: str, ttl_seconds: int, now: Optional[float] = None) -> str:
    """Create a ``payload.signature`` token for ``principal``.

    Args:
        principal: Identity to embed
        secret: HMAC signing key
        ttl_seconds: Lifetime of the token
        now: Issue time (epoch seconds); defaults to the current time

    Returns:
        URL-safe token string
    """
    issued_at = int(now if now is not None else time.time())
    claims = {
        "sub": principal.user_id,
        "email": principal.email,
        "role": principal.role.value,
        "iat": issued_at,
        "exp": issued_at + ttl_seconds,
    }
    payload = _b64encode(json.dumps(claims, separators=(",", ":"), sort_keys=True).encode())
    return f"{payload}.{_sign(payload, secret)}"


def verify_token(token: str, secret: str, now: Optional[float] = None) -> Optional[Principal]:
    """Return the token's principal, or None if it is malformed, forged or expired."""
    try:
        payload, signature = token.split(".")
    except ValueError:
        return None
    if not hmac.compare_digest(signature, _sign(payload, secret)):
        return None

    try:
        claims = json.loads(_b64decode(payload))
        principal = Principal(
            user_id=claims["sub"],
            email=claims["email"],
            role=Role(claims["role"]),
        )
        expires_at = int(claims["exp"])
    except (ValueError, KeyError, TypeError):
        return None

    current = now if now is not None else time.time()
    if current >= expires_at:
        return None
    return principal
