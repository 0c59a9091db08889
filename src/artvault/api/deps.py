"""Shared FastAPI dependencies."""

from fastapi import Depends, Header, Request, Response

from artvault.containers import AppContainer
from artvault.domain.errors import AuthenticationError

SESSION_COOKIE = "auth-token"


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the running app."""
    return request.app.state.container


def get_current_user_id(
    request: Request,
    authorization: str | None = Header(default=None),
    container: AppContainer = Depends(get_container),
) -> str:
    """Resolve the authenticated user id from a bearer header or the cookie."""
    token = None
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization.split(" ", 1)[1].strip()
    if not token:
        token = request.cookies.get(SESSION_COOKIE)
    if not token:
        raise AuthenticationError("Not authenticated")

    user_id = container.token_service.verify(token)
    if user_id is None:
        raise AuthenticationError("Invalid token")
    return user_id


def set_session_cookie(
    response: Response, container: AppContainer, user_id: str
) -> None:
    """Issue a session token and attach it as an HTTP-only cookie."""
    response.set_cookie(
        SESSION_COOKIE,
        container.token_service.issue(user_id),
        max_age=container.token_service.max_age_seconds,
        httponly=True,
        secure=container.settings.cookie_secure,
        samesite="lax",
        path="/",
    )


def clear_session_cookie(response: Response, container: AppContainer) -> None:
    """Remove the session cookie."""
    response.delete_cookie(
        SESSION_COOKIE,
        path="/",
        httponly=True,
        secure=container.settings.cookie_secure,
        samesite="lax",
    )
