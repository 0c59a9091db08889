"""Uploaded image handling."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import uuid4

from artvault.domain.errors import ValidationError

ALLOWED_IMAGE_TYPES = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
}

logger = logging.getLogger(__name__)


class ImageStorage(Protocol):
    """Object storage interface for uploaded images."""

    def upload(self, path: str, content: bytes, content_type: str) -> None:
        """Store the bytes under the path."""

    def public_url(self, path: str) -> str:
        """Return the public URL for a stored path."""


@dataclass
class ImageService:
    """Validates and stores uploaded artwork images."""

    storage: ImageStorage
    max_bytes: int

    def store_upload(self, owner_id: str, content: bytes, content_type: str) -> str:
        """Store an uploaded image and return its public URL."""
        media_type = content_type.split(";", 1)[0].strip().lower()
        extension = ALLOWED_IMAGE_TYPES.get(media_type)
        if extension is None:
            raise ValidationError("Only JPEG, PNG, GIF and WebP images are allowed")
        if not content:
            raise ValidationError("Uploaded file is empty")
        if len(content) > self.max_bytes:
            raise ValidationError(f"File is too large (max {self.max_bytes} bytes)")
        path = f"artwork/{owner_id}/{uuid4().hex}{extension}"
        self.storage.upload(path, content, media_type)
        logger.info("Stored upload %s (%d bytes)", path, len(content))
        return self.storage.public_url(path)
