"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import datetime

import pytest
from bson import ObjectId

from artvault.config import Settings
from artvault.containers import AppContainer
from artvault.domain.artwork import (
    Artwork,
    ArtworkSort,
    RatingEntry,
    average_rating,
)
from artvault.domain.errors import ConflictError
from artvault.domain.models import UserRecord
from artvault.services.artwork import ArtworkRepository, ArtworkService
from artvault.services.auth import PasswordHasher, TokenService
from artvault.services.images import ImageService, ImageStorage
from artvault.services.seed import SeedService
from artvault.services.users import UserRepository, UserService


@dataclass
class InMemoryArtworkRepository(ArtworkRepository):
    """In-memory artwork repository for tests."""

    artwork: dict[str, Artwork] = field(default_factory=dict)
    indexes_ensured: bool = False

    def list_artwork(
        self, creator_id: str | None, sort: ArtworkSort, limit: int
    ) -> list[Artwork]:
        items = [
            item
            for item in self.artwork.values()
            if not creator_id or item.creator_id == creator_id
        ]
        items.sort(key=lambda item: item.created_at, reverse=True)
        if sort is ArtworkSort.TOP_RATED:
            items.sort(key=lambda item: item.average_rating, reverse=True)
        return items[:limit]

    def get_artwork(self, artwork_id: str) -> Artwork | None:
        if not ObjectId.is_valid(artwork_id):
            return None
        return self.artwork.get(artwork_id)

    def create_artwork(
        self,
        creator_id: str,
        title: str,
        description: str,
        image_url: str,
        created_at: datetime,
    ) -> Artwork:
        artwork = Artwork(
            id=str(ObjectId()),
            title=title,
            description=description,
            image_url=image_url,
            creator_id=creator_id,
            ratings=(),
            average_rating=0.0,
            total_ratings=0,
            created_at=created_at,
            updated_at=created_at,
        )
        self.artwork[artwork.id] = artwork
        return artwork

    def update_artwork(
        self, artwork_id: str, fields: dict[str, str], updated_at: datetime
    ) -> Artwork | None:
        current = self.get_artwork(artwork_id)
        if current is None:
            return None
        updated = replace(current, **fields, updated_at=updated_at)
        self.artwork[artwork_id] = updated
        return updated

    def delete_artwork(self, artwork_id: str) -> bool:
        return self.artwork.pop(artwork_id, None) is not None

    def add_rating(
        self, artwork_id: str, entry: RatingEntry, rated_at: datetime
    ) -> Artwork | None:
        current = self.get_artwork(artwork_id)
        if current is None or current.has_rating_from(entry.session_id):
            return None
        ratings = (*current.ratings, entry)
        updated = replace(
            current,
            ratings=ratings,
            average_rating=average_rating(item.rating for item in ratings),
            total_ratings=len(ratings),
            updated_at=rated_at,
        )
        self.artwork[artwork_id] = updated
        return updated

    def ensure_indexes(self) -> None:
        self.indexes_ensured = True


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[str, UserRecord] = field(default_factory=dict)
    indexes_ensured: bool = False

    def get_by_id(self, user_id: str) -> UserRecord | None:
        if not ObjectId.is_valid(user_id):
            return None
        return self.users.get(user_id)

    def get_by_email(self, email: str) -> UserRecord | None:
        return next((u for u in self.users.values() if u.email == email), None)

    def get_by_username(self, username: str) -> UserRecord | None:
        return next((u for u in self.users.values() if u.username == username), None)

    def create_user(
        self, email: str, username: str, password_hash: str, created_at: datetime
    ) -> UserRecord:
        if self.get_by_email(email) or self.get_by_username(username):
            raise ConflictError("Duplicate user")
        user = UserRecord(
            id=str(ObjectId()),
            email=email,
            username=username,
            password_hash=password_hash,
            created_at=created_at,
            updated_at=created_at,
        )
        self.users[user.id] = user
        return user

    def count_users(self) -> int:
        return len(self.users)

    def ensure_indexes(self) -> None:
        self.indexes_ensured = True


@dataclass
class FakeImageStorage(ImageStorage):
    """Image storage that keeps uploads in memory."""

    uploads: dict[str, tuple[bytes, str]] = field(default_factory=dict)

    def upload(self, path: str, content: bytes, content_type: str) -> None:
        self.uploads[path] = (content, content_type)

    def public_url(self, path: str) -> str:
        return f"https://storage.example.com/{path}"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        jwt_secret="test-secret",
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        max_upload_bytes=1024,
    )


@pytest.fixture
def artwork_repository() -> InMemoryArtworkRepository:
    return InMemoryArtworkRepository()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def image_storage() -> FakeImageStorage:
    return FakeImageStorage()


@pytest.fixture
def container(
    settings: Settings,
    artwork_repository: InMemoryArtworkRepository,
    user_repository: InMemoryUserRepository,
    image_storage: FakeImageStorage,
) -> AppContainer:
    password_hasher = PasswordHasher()

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        token_service=TokenService(secret=settings.jwt_secret),
        user_service=UserService(user_repository, password_hasher),
        artwork_service=ArtworkService(artwork_repository),
        image_service=ImageService(
            storage=image_storage, max_bytes=settings.max_upload_bytes
        ),
        seed_service=SeedService(
            artwork_repository=artwork_repository,
            user_repository=user_repository,
            password_hasher=password_hasher,
        ),
        close_resources=close_resources,
    )


def auth_headers(container: AppContainer, user_id: str) -> dict[str, str]:
    """Bearer header for a user, signed with the container's secret."""
    return {"Authorization": f"Bearer {container.token_service.issue(user_id)}"}
