"""Artwork gallery, edit and rating endpoints."""

from fastapi import APIRouter, Depends, Query, status

from artvault.api.deps import get_container, get_current_user_id
from artvault.api.schemas import ArtworkCreateRequest, ArtworkUpdateRequest, RateRequest
from artvault.containers import AppContainer
from artvault.domain.artwork import Artwork, ArtworkSort
from artvault.services.artwork import DEFAULT_PAGE_SIZE

router = APIRouter(prefix="/artwork", tags=["artwork"])


@router.get("")
def list_artwork(
    sort: ArtworkSort = ArtworkSort.NEWEST,
    creator_id: str | None = Query(default=None, alias="creatorId"),
    limit: int = DEFAULT_PAGE_SIZE,
    container: AppContainer = Depends(get_container),
) -> list[dict[str, object]]:
    """Return the gallery, newest first unless another order is requested."""
    artwork = container.artwork_service.list_artwork(
        creator_id=creator_id, sort=sort, limit=limit
    )
    return [serialize_artwork(item) for item in artwork]


@router.get("/{artwork_id}")
def get_artwork(
    artwork_id: str, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    """Return a single artwork."""
    return serialize_artwork(container.artwork_service.get_artwork(artwork_id))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_artwork(
    payload: ArtworkCreateRequest,
    user_id: str = Depends(get_current_user_id),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Create an artwork owned by the signed-in user."""
    artwork = container.artwork_service.create_artwork(
        creator_id=user_id,
        title=payload.title,
        description=payload.description,
        image_url=payload.image_url,
    )
    return serialize_artwork(artwork)


@router.put("/{artwork_id}")
def update_artwork(
    artwork_id: str,
    payload: ArtworkUpdateRequest,
    user_id: str = Depends(get_current_user_id),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Update an artwork owned by the signed-in user."""
    artwork = container.artwork_service.update_artwork(
        artwork_id,
        editor_id=user_id,
        changes=payload.model_dump(exclude_unset=True),
    )
    return serialize_artwork(artwork)


@router.delete("/{artwork_id}")
def delete_artwork(
    artwork_id: str,
    user_id: str = Depends(get_current_user_id),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Delete an artwork owned by the signed-in user."""
    container.artwork_service.delete_artwork(artwork_id, editor_id=user_id)
    return {"message": "Artwork deleted successfully"}


@router.post("/{artwork_id}/rate")
def rate_artwork(
    artwork_id: str,
    payload: RateRequest,
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Rate an artwork once per anonymous rating session."""
    artwork = container.artwork_service.rate(
        artwork_id, rating=payload.rating, session_id=payload.session_id
    )
    return serialize_artwork(artwork)


def serialize_artwork(artwork: Artwork) -> dict[str, object]:
    return {
        "_id": artwork.id,
        "title": artwork.title,
        "description": artwork.description,
        "imageUrl": artwork.image_url,
        "creatorId": artwork.creator_id,
        "ratings": [
            {"sessionId": entry.session_id, "rating": entry.rating}
            for entry in artwork.ratings
        ],
        "averageRating": artwork.average_rating,
        "totalRatings": artwork.total_ratings,
        "createdAt": artwork.created_at.isoformat(),
        "updatedAt": artwork.updated_at.isoformat(),
    }
