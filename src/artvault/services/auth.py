"""Session tokens and password hashing.

Tokens are stateless HS256 JWTs carrying the user id in ``sub``. They are
never persisted; verification is a pure function of the signing secret.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import jwt  # PyJWT
from passlib.context import CryptContext

TOKEN_ALGORITHM = "HS256"
DEFAULT_TOKEN_TTL = timedelta(days=7)


@dataclass
class TokenService:
    """Issues and verifies signed session tokens."""

    secret: str
    ttl: timedelta = DEFAULT_TOKEN_TTL

    def issue(self, user_id: str, issued_at: datetime | None = None) -> str:
        """Return a signed token for the user, valid for ``ttl``."""
        now = issued_at or datetime.now(tz=UTC)
        payload = {
            "sub": user_id,
            "iat": now,
            "exp": now + self.ttl,
        }
        return jwt.encode(payload, self.secret, algorithm=TOKEN_ALGORITHM)

    def verify(self, token: str) -> str | None:
        """Return the user id for a valid token, or None.

        Malformed, expired, mis-signed and expiry-less tokens all yield None.
        """
        if not token:
            return None
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[TOKEN_ALGORITHM],
                options={"require": ["exp", "sub"]},
            )
        except jwt.PyJWTError:
            return None
        user_id = payload.get("sub")
        if not isinstance(user_id, str) or not user_id:
            return None
        return user_id

    @property
    def max_age_seconds(self) -> int:
        """Token lifetime in seconds, used for the session cookie."""
        return int(self.ttl.total_seconds())


@dataclass
class PasswordHasher:
    """Salted password hashing backed by passlib."""

    context: CryptContext = field(
        default_factory=lambda: CryptContext(schemes=["argon2"], deprecated="auto")
    )

    def hash(self, plain: str) -> str:
        """Hash a plain text password."""
        return self.context.hash(plain)

    def verify(self, plain: str, hashed: str) -> bool:
        """Check a password against a stored hash."""
        try:
            return self.context.verify(plain, hashed)
        except ValueError:
            # Unknown or corrupted hash format.
            return False
