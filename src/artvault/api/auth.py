"""Registration and session endpoints."""

from fastapi import APIRouter, Depends, Response

from artvault.api.deps import (
    clear_session_cookie,
    get_container,
    get_current_user_id,
    set_session_cookie,
)
from artvault.api.schemas import LoginRequest, RegisterRequest
from artvault.containers import AppContainer

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register")
def register(
    payload: RegisterRequest,
    response: Response,
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Create an account and start a session."""
    user = container.user_service.register(
        email=payload.email,
        username=payload.username,
        password=payload.password,
    )
    set_session_cookie(response, container, user.id)
    return {"user": user.public_view()}


@router.post("/login")
def login(
    payload: LoginRequest,
    response: Response,
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Verify credentials and start a session."""
    user = container.user_service.authenticate(payload.email, payload.password)
    set_session_cookie(response, container, user.id)
    return {"user": user.public_view()}


@router.post("/logout")
def logout(
    response: Response, container: AppContainer = Depends(get_container)
) -> dict[str, str]:
    """End the session by clearing the cookie."""
    clear_session_cookie(response, container)
    return {"message": "Signed out"}


@router.get("/me")
def me(
    user_id: str = Depends(get_current_user_id),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the signed-in user."""
    user = container.user_service.get_user(user_id)
    return {"user": user.public_view()}
