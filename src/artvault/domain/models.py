"""Domain models for ArtVault accounts."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: str
    email: str
    username: str
    password_hash: str
    created_at: datetime
    updated_at: datetime

    def public_view(self) -> dict[str, str]:
        """Return the fields safe to expose to clients."""
        return {"id": self.id, "email": self.email, "username": self.username}
