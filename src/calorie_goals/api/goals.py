"""Goal API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import JSONResponse

from calorie_goals.api.schemas import (
    GoalRequest,
    goal_payload,
    log_payload,
    undo_payload,
)
from calorie_goals.domain.errors import GoalError
from calorie_goals.services.goals import window_days_between

if TYPE_CHECKING:
    from calorie_goals.containers import AppContainer

router = APIRouter(prefix="/api/v1/goals", tags=["goals"])


@router.get("/active")
async def active_goal(request: Request) -> dict[str, object]:
    """Return the active goal with its daily target."""
    container: AppContainer = request.app.state.container
    goal = container.goal_manager.goal
    if goal is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return goal_payload(goal)


@router.post("", response_model=None)
async def set_goal(payload: GoalRequest, request: Request) -> dict | JSONResponse:
    """Create or replace the active goal."""
    container: AppContainer = request.app.state.container
    window_days = payload.time_window_days
    if window_days is None and payload.end_date is not None:
        window_days = window_days_between(payload.start_date, payload.end_date)
    result = container.goal_manager.set_goal(
        payload.target_kcals, window_days or 0, payload.start_date
    )
    if result.error is not None:
        return _error(result.error)
    return {
        "goal": goal_payload(result.goal),
        "logs": [log_payload(view) for view in result.logs],
        "undo": undo_payload(container.goal_manager.undo_status()),
    }


@router.get("/undo")
async def undo_status(request: Request) -> dict[str, object]:
    """Return whether the last goal change can still be undone."""
    container: AppContainer = request.app.state.container
    return undo_payload(container.goal_manager.undo_status())


@router.post("/undo", response_model=None)
async def undo_goal(request: Request) -> dict | JSONResponse:
    """Restore the previous goal while the undo window is open."""
    container: AppContainer = request.app.state.container
    result = container.goal_manager.undo()
    if result is None:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"error": "nothing_to_undo"},
        )
    return {
        "goal": goal_payload(result.goal),
        "logs": [log_payload(view) for view in result.logs],
    }


def _error(error: GoalError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(error)}
    )
