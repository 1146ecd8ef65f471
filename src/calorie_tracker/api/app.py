"""FastAPI application factory."""

from fastapi import FastAPI

from calorie_tracker.api.auth import router as auth_router
from calorie_tracker.api.dashboard import router as dashboard_router
from calorie_tracker.api.foods import router as foods_router
from calorie_tracker.api.progress import router as progress_router
from calorie_tracker.api.settings import router as settings_router
from calorie_tracker.api.weights import router as weights_router
from calorie_tracker.app_logging import configure_logging
from calorie_tracker.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()

    app = FastAPI(title="Calorie Tracker")
    app.state.container = container

    app.include_router(auth_router)
    app.include_router(dashboard_router)
    app.include_router(foods_router)
    app.include_router(settings_router)
    app.include_router(weights_router)
    app.include_router(progress_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
