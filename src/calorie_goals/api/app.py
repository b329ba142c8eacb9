"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from calorie_goals.api.goals import router as goals_router
from calorie_goals.api.logs import router as logs_router
from calorie_goals.app_logging import configure_logging
from calorie_goals.containers import AppContainer
from calorie_goals.domain.errors import PersistenceError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            app.state.container.refresh()
        except Exception:
            logger.exception("Failed to load goal and daily logs")
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(goals_router)
    app.include_router(logs_router)

    @app.exception_handler(PersistenceError)
    async def persistence_error(
        request: Request, exc: PersistenceError
    ) -> JSONResponse:
        logger.exception(
            "Storage write failed", extra={"path": request.url.path}, exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"error": "persistence", "detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
