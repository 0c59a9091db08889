"""User-related business logic."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from artvault.domain.errors import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from artvault.domain.models import UserRecord
from artvault.services.auth import PasswordHasher

MIN_PASSWORD_LENGTH = 6

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user accounts."""

    def get_by_id(self, user_id: str) -> UserRecord | None:
        """Return the user with the id, or None for unknown or malformed ids."""

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user registered with the email, if present."""

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user with the username, if present."""

    def create_user(
        self, email: str, username: str, password_hash: str, created_at: datetime
    ) -> UserRecord:
        """Create and return a new user record.

        Raises ConflictError when a unique field is already taken.
        """

    def count_users(self) -> int:
        """Return the number of stored users."""

    def ensure_indexes(self) -> None:
        """Create the indexes backing user lookups."""


@dataclass
class UserService:
    """Application service for registration and sign-in."""

    repository: UserRepository
    password_hasher: PasswordHasher

    def register(self, email: str, username: str, password: str) -> UserRecord:
        """Create an account after checking input and uniqueness."""
        email = email.strip().lower()
        username = username.strip()
        if not email or not username or not password:
            raise ValidationError("All fields are required")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        if self.repository.get_by_email(email):
            raise ConflictError("Email already registered")
        if self.repository.get_by_username(username):
            raise ConflictError("Username already taken")

        user = self.repository.create_user(
            email=email,
            username=username,
            password_hash=self.password_hasher.hash(password),
            created_at=datetime.now(tz=UTC),
        )
        logger.info("Registered user %s", user.id)
        return user

    def authenticate(self, email: str, password: str) -> UserRecord:
        """Return the user for valid credentials."""
        user = self.repository.get_by_email(email.strip().lower())
        if user is None or not self.password_hasher.verify(
            password, user.password_hash
        ):
            logger.info("Rejected sign-in attempt")
            raise AuthenticationError("Invalid email or password")
        return user

    def get_user(self, user_id: str) -> UserRecord:
        """Return the user with the id."""
        user = self.repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user
