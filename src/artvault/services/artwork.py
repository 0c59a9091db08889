"""Artwork gallery, ownership and rating logic."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from artvault.domain.artwork import (
    MAX_RATING,
    MIN_RATING,
    Artwork,
    ArtworkSort,
    RatingEntry,
    is_valid_rating,
)
from artvault.domain.errors import (
    ConflictError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)

DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 100
MAX_SESSION_ID_LENGTH = 128

logger = logging.getLogger(__name__)


class ArtworkRepository(Protocol):
    """Persistence interface for artwork records."""

    def list_artwork(
        self, creator_id: str | None, sort: ArtworkSort, limit: int
    ) -> list[Artwork]:
        """Return artwork in gallery order, optionally for one creator."""

    def get_artwork(self, artwork_id: str) -> Artwork | None:
        """Return the artwork, or None for unknown or malformed ids."""

    def create_artwork(
        self,
        creator_id: str,
        title: str,
        description: str,
        image_url: str,
        created_at: datetime,
    ) -> Artwork:
        """Create an artwork with an empty rating list and return it."""

    def update_artwork(
        self, artwork_id: str, fields: dict[str, str], updated_at: datetime
    ) -> Artwork | None:
        """Apply field changes and return the updated artwork, if present."""

    def delete_artwork(self, artwork_id: str) -> bool:
        """Delete the artwork and report whether a record was removed."""

    def add_rating(
        self, artwork_id: str, entry: RatingEntry, rated_at: datetime
    ) -> Artwork | None:
        """Atomically append a rating and refresh the aggregates.

        Returns None when the artwork is absent or the session already rated it.
        """

    def ensure_indexes(self) -> None:
        """Create the indexes backing gallery queries."""


@dataclass
class ArtworkService:
    """Application service for artwork operations."""

    repository: ArtworkRepository

    def list_artwork(
        self,
        creator_id: str | None = None,
        sort: ArtworkSort = ArtworkSort.NEWEST,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> list[Artwork]:
        """Return the gallery."""
        if not 1 <= limit <= MAX_PAGE_SIZE:
            raise ValidationError(f"Limit must be between 1 and {MAX_PAGE_SIZE}")
        return self.repository.list_artwork(creator_id, sort, limit)

    def get_artwork(self, artwork_id: str) -> Artwork:
        """Return a single artwork."""
        artwork = self.repository.get_artwork(artwork_id)
        if artwork is None:
            raise NotFoundError("Artwork not found")
        return artwork

    def create_artwork(
        self, creator_id: str, title: str, description: str, image_url: str
    ) -> Artwork:
        """Create an artwork owned by ``creator_id``."""
        title, description, image_url = (
            title.strip(),
            description.strip(),
            image_url.strip(),
        )
        if not title or not description or not image_url:
            raise ValidationError("Missing required fields")
        artwork = self.repository.create_artwork(
            creator_id=creator_id,
            title=title,
            description=description,
            image_url=image_url,
            created_at=datetime.now(tz=UTC),
        )
        logger.info("Created artwork %s for user %s", artwork.id, creator_id)
        return artwork

    def update_artwork(
        self,
        artwork_id: str,
        editor_id: str,
        changes: dict[str, str | None],
    ) -> Artwork:
        """Update title, description or image of an artwork the editor owns."""
        self._get_owned(artwork_id, editor_id)
        fields: dict[str, str] = {}
        for name in ("title", "description", "image_url"):
            value = changes.get(name)
            if value is None:
                continue
            value = value.strip()
            if not value:
                raise ValidationError(f"{name} must not be empty")
            fields[name] = value
        updated = self.repository.update_artwork(
            artwork_id, fields, updated_at=datetime.now(tz=UTC)
        )
        if updated is None:
            raise NotFoundError("Artwork not found")
        logger.info("Updated artwork %s (%s)", artwork_id, ", ".join(fields) or "-")
        return updated

    def delete_artwork(self, artwork_id: str, editor_id: str) -> None:
        """Delete an artwork the editor owns."""
        self._get_owned(artwork_id, editor_id)
        if not self.repository.delete_artwork(artwork_id):
            raise NotFoundError("Artwork not found")
        logger.info("Deleted artwork %s", artwork_id)

    def rate(self, artwork_id: str, rating: int, session_id: str) -> Artwork:
        """Record one rating per session and return the refreshed artwork."""
        if not is_valid_rating(rating):
            raise ValidationError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}"
            )
        session_id = session_id.strip()
        if not session_id:
            raise ValidationError("Session ID required")
        if len(session_id) > MAX_SESSION_ID_LENGTH:
            raise ValidationError("Session ID is too long")

        updated = self.repository.add_rating(
            artwork_id,
            RatingEntry(session_id=session_id, rating=rating),
            rated_at=datetime.now(tz=UTC),
        )
        if updated is not None:
            return updated
        if self.repository.get_artwork(artwork_id) is None:
            raise NotFoundError("Artwork not found")
        logger.info("Duplicate rating rejected for artwork %s", artwork_id)
        raise ConflictError("You have already rated this artwork")

    def _get_owned(self, artwork_id: str, editor_id: str) -> Artwork:
        artwork = self.get_artwork(artwork_id)
        if artwork.creator_id != editor_id:
            raise PermissionDeniedError("You can only modify your own artwork")
        return artwork
