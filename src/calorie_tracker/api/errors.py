"""Conversion of backend failures into user-facing HTTP errors."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import HTTPException, Request, status

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer

logger = logging.getLogger(__name__)


def backend_failure(request: Request, exc: Exception, message: str) -> HTTPException:
    """Log a failed backend call and return the error shown to the user.

    Must be called from an ``except`` block so the traceback is logged.
    """
    container: AppContainer = request.app.state.container
    logger.exception(message)
    detail = message
    if container.settings.environment == "local":
        debug = f"{type(exc).__name__}: {exc}".strip()
        if debug:
            detail = f"{message} (debug: {debug})"
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=detail)
