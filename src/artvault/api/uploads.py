"""Image upload endpoint."""

from fastapi import APIRouter, Depends, File, UploadFile

from artvault.api.deps import get_container, get_current_user_id
from artvault.containers import AppContainer

router = APIRouter(tags=["uploads"])


@router.post("/upload")
def upload_image(
    file: UploadFile = File(...),
    user_id: str = Depends(get_current_user_id),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Store an image file and return the URL to use as ``imageUrl``."""
    # One byte past the limit is enough to reject oversized files.
    content = file.file.read(container.image_service.max_bytes + 1)
    url = container.image_service.store_upload(
        owner_id=user_id,
        content=content,
        content_type=file.content_type or "",
    )
    return {"imageUrl": url}
