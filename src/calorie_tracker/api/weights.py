"""Weight and progress photo endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Header, HTTPException, Query, Request, status

from calorie_tracker.api.auth import current_user
from calorie_tracker.api.errors import backend_failure
from calorie_tracker.domain.models import AuthUser
from calorie_tracker.domain.progress import ProgressPhoto, WeightEntry, WeightInput

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer

router = APIRouter(tags=["weight"])


@router.get("/weights")
async def list_weights(
    request: Request, user: AuthUser = Depends(current_user)
) -> dict[str, object]:
    """Return weight entries, most recent first, with the latest change."""
    container: AppContainer = request.app.state.container
    try:
        entries = container.weight_service.list_entries(user.id)
        summary = container.weight_service.summary(user.id)
    except Exception as exc:
        raise backend_failure(request, exc, "Failed to load weight entries") from exc
    return {
        "entries": entries,
        "latest": summary.latest,
        "change": summary.change,
    }


@router.post("/weights", status_code=status.HTTP_201_CREATED)
async def add_weight(
    payload: WeightInput, request: Request, user: AuthUser = Depends(current_user)
) -> WeightEntry:
    """Log a body weight."""
    container: AppContainer = request.app.state.container
    try:
        return container.weight_service.add_entry(user.id, payload)
    except Exception as exc:
        raise backend_failure(request, exc, "Failed to add weight entry") from exc


@router.delete("/weights/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_weight(
    entry_id: UUID, request: Request, user: AuthUser = Depends(current_user)
) -> None:
    """Delete a weight entry."""
    container: AppContainer = request.app.state.container
    try:
        container.weight_service.delete_entry(user.id, entry_id)
    except Exception as exc:
        raise backend_failure(request, exc, "Failed to delete weight entry") from exc


@router.get("/photos")
async def list_photos(
    request: Request, user: AuthUser = Depends(current_user)
) -> dict[str, object]:
    """Return progress photos with signed URLs."""
    container: AppContainer = request.app.state.container
    try:
        photos = container.photo_service.list_photos(user.id)
    except Exception as exc:
        raise backend_failure(request, exc, "Failed to load progress photos") from exc
    return {"photos": photos}


@router.post("/photos", status_code=status.HTTP_201_CREATED)
async def upload_photo(
    request: Request,
    day: date = Query(alias="date"),
    notes: str | None = None,
    content_type: str = Header(default="image/jpeg"),
    user: AuthUser = Depends(current_user),
) -> ProgressPhoto:
    """Upload the raw image in the request body as a progress photo."""
    container: AppContainer = request.app.state.container
    content = await request.body()
    if not content:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Photo content is empty"
        )
    try:
        return container.photo_service.upload_photo(
            user.id, content, content_type, day, notes
        )
    except Exception as exc:
        raise backend_failure(request, exc, "Failed to upload progress photo") from exc


@router.delete("/photos/{photo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_photo(
    photo_id: UUID, request: Request, user: AuthUser = Depends(current_user)
) -> None:
    """Delete a progress photo and its stored image."""
    container: AppContainer = request.app.state.container
    try:
        container.photo_service.delete_photo(user.id, photo_id)
    except Exception as exc:
        raise backend_failure(request, exc, "Failed to delete progress photo") from exc
