"""Daily log API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from calorie_goals.api.schemas import (
    DailyLogRequest,
    log_payload,
    progress_payload,
)
from calorie_goals.domain.errors import LogError
from calorie_goals.services.progress import summarize

if TYPE_CHECKING:
    from calorie_goals.containers import AppContainer
    from calorie_goals.services.logs import LogResult

router = APIRouter(prefix="/api/v1", tags=["logs"])


@router.get("/dailylogs")
async def list_logs(request: Request) -> dict[str, object]:
    """Return all daily logs with derived metrics."""
    container: AppContainer = request.app.state.container
    views = container.log_store.views
    return {"items": [log_payload(view) for view in views], "totalCount": len(views)}


@router.post("/dailylogs", response_model=None)
async def add_log(payload: DailyLogRequest, request: Request) -> dict | JSONResponse:
    """Add a daily log."""
    container: AppContainer = request.app.state.container
    result = container.log_store.add(
        payload.log_date, payload.kcals_burn, payload.kcals_intake
    )
    return _respond(result, created=True)


@router.delete("/dailylogs/all", response_model=None)
async def delete_all_logs(request: Request) -> dict | JSONResponse:
    """Delete every daily log."""
    container: AppContainer = request.app.state.container
    return _respond(container.log_store.delete_all())


@router.put("/dailylogs/{log_id}", response_model=None)
async def edit_log(
    log_id: UUID, payload: DailyLogRequest, request: Request
) -> dict | JSONResponse:
    """Replace the raw fields of a daily log."""
    container: AppContainer = request.app.state.container
    result = container.log_store.edit(
        log_id, payload.log_date, payload.kcals_burn, payload.kcals_intake
    )
    return _respond(result)


@router.delete("/dailylogs/{log_id}", response_model=None)
async def delete_log(log_id: UUID, request: Request) -> dict | JSONResponse:
    """Delete a single daily log."""
    container: AppContainer = request.app.state.container
    return _respond(container.log_store.delete(log_id))


@router.get("/progress")
async def progress(request: Request) -> dict[str, object]:
    """Return the overall progress summary."""
    container: AppContainer = request.app.state.container
    summary = summarize(
        container.goal_manager.goal,
        container.log_store.views,
        container.clock.today(),
    )
    return progress_payload(summary)


def _respond(result: LogResult, created: bool = False) -> dict | JSONResponse:
    if result.error is LogError.NOT_FOUND:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"error": str(result.error)}
        )
    if result.error is not None:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": str(result.error)},
        )
    body: dict[str, object] = {"items": [log_payload(view) for view in result.logs]}
    if result.entry is not None:
        body["dailyLogId"] = str(result.entry.id)
    if created:
        return JSONResponse(status_code=status.HTTP_201_CREATED, content=body)
    return body
