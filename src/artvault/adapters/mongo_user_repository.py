"""MongoDB-backed user repository."""

from dataclasses import dataclass
from datetime import datetime

from bson import ObjectId
from pymongo import DESCENDING
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from artvault.domain.errors import ConflictError
from artvault.domain.models import UserRecord
from artvault.services.users import UserRepository


@dataclass
class MongoUserRepository(UserRepository):
    """MongoDB implementation for user persistence."""

    collection: Collection

    def get_by_id(self, user_id: str) -> UserRecord | None:
        """Return the user by id, if present."""
        if not ObjectId.is_valid(user_id):
            return None
        doc = self.collection.find_one({"_id": ObjectId(user_id)})
        return _parse_user(doc) if doc else None

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user by email, if present."""
        doc = self.collection.find_one({"email": email})
        return _parse_user(doc) if doc else None

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user by username, if present."""
        doc = self.collection.find_one({"username": username})
        return _parse_user(doc) if doc else None

    def create_user(
        self, email: str, username: str, password_hash: str, created_at: datetime
    ) -> UserRecord:
        """Insert a user document and return it."""
        doc = {
            "email": email,
            "username": username,
            "password": password_hash,
            "createdAt": created_at,
            "updatedAt": created_at,
        }
        try:
            result = self.collection.insert_one(doc)
        except DuplicateKeyError as exc:
            key_pattern = (exc.details or {}).get("keyPattern") or {}
            if "username" in key_pattern:
                raise ConflictError("Username already taken") from exc
            raise ConflictError("Email already registered") from exc
        doc["_id"] = result.inserted_id
        return _parse_user(doc)

    def count_users(self) -> int:
        """Return the number of user documents."""
        return self.collection.count_documents({})

    def ensure_indexes(self) -> None:
        """Create unique lookup indexes."""
        self.collection.create_index("email", unique=True)
        self.collection.create_index("username", unique=True)
        self.collection.create_index([("createdAt", DESCENDING)])


def _parse_user(doc: dict[str, object]) -> UserRecord:
    created_at = doc["createdAt"]
    return UserRecord(
        id=str(doc["_id"]),
        email=str(doc["email"]),
        username=str(doc["username"]),
        password_hash=str(doc.get("password", "")),
        created_at=created_at,
        updated_at=doc.get("updatedAt") or created_at,
    )
