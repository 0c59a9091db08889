"""Tests for database setup and demo content."""

from artvault.domain.artwork import average_rating
from artvault.services.auth import PasswordHasher
from artvault.services.seed import DEMO_USERS, SAMPLE_ARTWORK, SeedService
from tests.conftest import InMemoryArtworkRepository, InMemoryUserRepository


def _seed_service() -> tuple[
    SeedService, InMemoryArtworkRepository, InMemoryUserRepository
]:
    artwork_repository = InMemoryArtworkRepository()
    user_repository = InMemoryUserRepository()
    service = SeedService(
        artwork_repository=artwork_repository,
        user_repository=user_repository,
        password_hasher=PasswordHasher(),
    )
    return service, artwork_repository, user_repository


def test_seed_populates_empty_database() -> None:
    service, artwork_repository, user_repository = _seed_service()

    report = service.run()

    assert artwork_repository.indexes_ensured
    assert user_repository.indexes_ensured
    assert report.users_created == len(DEMO_USERS)
    assert report.artwork_created == len(SAMPLE_ARTWORK)
    assert user_repository.count_users() == len(DEMO_USERS)
    for artwork in artwork_repository.artwork.values():
        values = [entry.rating for entry in artwork.ratings]
        assert artwork.total_ratings == len(values)
        assert artwork.average_rating == average_rating(values)
        assert user_repository.get_by_id(artwork.creator_id) is not None


def test_seed_sample_average_matches_known_value() -> None:
    service, artwork_repository, _ = _seed_service()

    service.run()

    sunset = next(
        a
        for a in artwork_repository.artwork.values()
        if a.title == "Digital Sunset Landscape"
    )
    assert sunset.average_rating == 4.5
    assert sunset.total_ratings == 4


def test_seed_skips_when_users_exist() -> None:
    service, artwork_repository, _ = _seed_service()
    service.run()

    report = service.run()

    assert report.users_created == 0
    assert report.artwork_created == 0
    assert len(artwork_repository.artwork) == len(SAMPLE_ARTWORK)
