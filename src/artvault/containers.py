"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import timedelta

from pymongo import MongoClient
from supabase import create_client

from artvault.adapters.mongo_artwork_repository import MongoArtworkRepository
from artvault.adapters.mongo_user_repository import MongoUserRepository
from artvault.adapters.supabase_image_storage import SupabaseImageStorage
from artvault.config import Settings
from artvault.services.artwork import ArtworkService
from artvault.services.auth import PasswordHasher, TokenService
from artvault.services.images import ImageService
from artvault.services.seed import SeedService
from artvault.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    token_service: TokenService
    user_service: UserService
    artwork_service: ArtworkService
    image_service: ImageService
    seed_service: SeedService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container.

    The MongoDB client connects lazily on first operation; closing the
    container releases its connection pool.
    """
    resolved_settings = settings or Settings()
    mongo_client: MongoClient = MongoClient(
        resolved_settings.mongodb_uri, tz_aware=True
    )
    database = mongo_client[resolved_settings.mongodb_db]
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )

    artwork_repository = MongoArtworkRepository(database["artwork"])
    user_repository = MongoUserRepository(database["users"])
    password_hasher = PasswordHasher()
    token_service = TokenService(
        secret=resolved_settings.jwt_secret,
        ttl=timedelta(days=resolved_settings.token_ttl_days),
    )
    image_service = ImageService(
        storage=SupabaseImageStorage(
            client=supabase_client, bucket=resolved_settings.supabase_bucket
        ),
        max_bytes=resolved_settings.max_upload_bytes,
    )
    seed_service = SeedService(
        artwork_repository=artwork_repository,
        user_repository=user_repository,
        password_hasher=password_hasher,
    )

    async def close_resources() -> None:
        mongo_client.close()

    return AppContainer(
        settings=resolved_settings,
        token_service=token_service,
        user_service=UserService(user_repository, password_hasher),
        artwork_service=ArtworkService(artwork_repository),
        image_service=image_service,
        seed_service=seed_service,
        close_resources=close_resources,
    )
