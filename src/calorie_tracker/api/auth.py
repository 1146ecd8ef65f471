"""Bearer token authentication backed by Supabase Auth."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from calorie_tracker.api.errors import backend_failure
from calorie_tracker.config import parse_bearer_token
from calorie_tracker.domain.models import AuthUser

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer

router = APIRouter(prefix="/auth", tags=["auth"])

logger = logging.getLogger(__name__)


def access_token(authorization: str | None = Header(default=None)) -> str:
    """Return the bearer token of the request."""
    token = parse_bearer_token(authorization)
    if token is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    return token


def current_user(request: Request, token: str = Depends(access_token)) -> AuthUser:
    """Resolve the request's token to a user or reject it."""
    container: AppContainer = request.app.state.container
    user = container.auth_service.authenticate(token)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    return user


@router.post("/sign-out", status_code=status.HTTP_204_NO_CONTENT)
async def sign_out(
    request: Request,
    token: str = Depends(access_token),
    user: AuthUser = Depends(current_user),
) -> None:
    """Invalidate the caller's session."""
    container: AppContainer = request.app.state.container
    try:
        container.auth_service.sign_out(token)
    except Exception as exc:
        raise backend_failure(request, exc, "Failed to sign out") from exc
    logger.info("Signed out: user_id=%s", user.id)
