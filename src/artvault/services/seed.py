"""Database setup: indexes and demo content."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from artvault.domain.artwork import RatingEntry
from artvault.services.artwork import ArtworkRepository
from artvault.services.auth import PasswordHasher
from artvault.services.users import UserRepository

logger = logging.getLogger(__name__)

DEMO_USERS = (
    ("demo@example.com", "demo_artist", "password123"),
    ("artist@example.com", "creative_artist", "artist123"),
    ("painter@example.com", "digital_painter", "paint123"),
)

# (title, description, owner index into DEMO_USERS, age in days, ratings)
SAMPLE_ARTWORK = (
    (
        "Digital Sunset Landscape",
        "A digital painting of a sunset over rolling mountains in orange "
        "and purple hues.",
        0,
        0,
        (5, 4, 5, 4),
    ),
    (
        "Abstract Geometric Harmony",
        "Geometric forms and bold colors at the intersection of mathematics "
        "and art.",
        1,
        1,
        (4, 3, 5),
    ),
    (
        "Serene Ocean Waves",
        "A realistic seascape capturing the movement of ocean waves and light "
        "on water.",
        0,
        2,
        (5, 5, 4, 5, 4),
    ),
    (
        "Urban Night Lights",
        "A cityscape at night with neon lights reflecting off wet streets.",
        2,
        3,
        (4, 5, 4),
    ),
    (
        "Mystical Forest Path",
        "Dappled sunlight filtering through ancient trees along a winding path.",
        1,
        4,
        (5, 5, 4, 5, 5, 4),
    ),
    (
        "Cosmic Nebula Dreams",
        "A colorful nebula with swirling gases and distant stars.",
        2,
        5,
        (5, 4),
    ),
)


@dataclass(frozen=True)
class SetupReport:
    """Outcome of a setup run."""

    users_created: int
    artwork_created: int


@dataclass
class SeedService:
    """Creates indexes and seeds an empty database with demo content."""

    artwork_repository: ArtworkRepository
    user_repository: UserRepository
    password_hasher: PasswordHasher

    def run(self, now: datetime | None = None) -> SetupReport:
        """Ensure indexes, then seed demo data when no users exist."""
        self.artwork_repository.ensure_indexes()
        self.user_repository.ensure_indexes()
        logger.info("Indexes ensured")

        if self.user_repository.count_users() > 0:
            logger.info("Users already exist, skipping demo data")
            return SetupReport(users_created=0, artwork_created=0)

        now = now or datetime.now(tz=UTC)
        user_ids = [
            self.user_repository.create_user(
                email=email,
                username=username,
                password_hash=self.password_hasher.hash(password),
                created_at=now,
            ).id
            for email, username, password in DEMO_USERS
        ]

        created = 0
        for index, (title, description, owner, age_days, ratings) in enumerate(
            SAMPLE_ARTWORK
        ):
            created_at = now - timedelta(days=age_days)
            artwork = self.artwork_repository.create_artwork(
                creator_id=user_ids[owner],
                title=title,
                description=description,
                image_url=_placeholder_url(title),
                created_at=created_at,
            )
            for position, rating in enumerate(ratings):
                self.artwork_repository.add_rating(
                    artwork.id,
                    RatingEntry(session_id=f"sample-{index}-{position}", rating=rating),
                    rated_at=created_at,
                )
            created += 1
        logger.info("Seeded %d users and %d artworks", len(user_ids), created)
        return SetupReport(users_created=len(user_ids), artwork_created=created)


def _placeholder_url(title: str) -> str:
    return f"/placeholder.svg?height=500&width=800&text={title.replace(' ', '+')}"
