"""Pydantic models and payload helpers for the HTTP API."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from calorie_goals.domain.goals import Goal
from calorie_goals.domain.logs import DailyLogView
from calorie_goals.services.progress import GoalProgress
from calorie_goals.services.undo import UndoStatus


class GoalRequest(BaseModel):
    """Goal submission.

    Either ``timeWindowDays`` or an inclusive ``endDate`` sets the window.
    """

    model_config = ConfigDict(populate_by_name=True)

    target_kcals: int = Field(alias="targetKcals")
    time_window_days: int | None = Field(default=None, alias="timeWindowDays")
    start_date: date = Field(alias="startDate")
    end_date: date | None = Field(default=None, alias="endDate")


class DailyLogRequest(BaseModel):
    """Daily log submission. Any time of day on ``date`` is ignored."""

    model_config = ConfigDict(populate_by_name=True)

    log_date: date | datetime = Field(alias="date")
    kcals_burn: int = Field(alias="kcalsBurn")
    kcals_intake: int = Field(alias="kcalsIntake")


def goal_payload(goal: Goal) -> dict[str, object]:
    """Serialize a goal for API responses."""
    return {
        "goalId": str(goal.id),
        "targetKcals": goal.target_calories,
        "timeWindowDays": goal.window_days,
        "startDate": goal.start_date.isoformat(),
        "endDate": goal.end_date.isoformat(),
        "dailyTargetCalories": goal.daily_target,
        "goalType": "deficit" if goal.is_deficit else "surplus",
        "concurrencyStamp": goal.concurrency_stamp,
    }


def log_payload(view: DailyLogView) -> dict[str, object]:
    """Serialize a daily log with its derived metrics."""
    return {
        "dailyLogId": str(view.id),
        "date": view.date.isoformat(),
        "kcalsBurn": view.entry.calories_burned,
        "kcalsIntake": view.entry.calories_consumed,
        "kcalsDiff": view.difference,
        "sumDiffs": view.running_sum,
        "goalDelta": view.remaining_to_goal,
        "avg4Days": view.rolling_avg_4,
        "avg7Days": view.rolling_avg_7,
        "avgAll": view.overall_average,
        "dayNum": view.day_number,
        "targetKcalsPerDay": view.daily_target,
        "progressPercentage": view.goal_percentage,
        "isOnTrack": view.on_track,
        "statusIndicator": view.status_text,
    }


def undo_payload(status: UndoStatus) -> dict[str, object]:
    return {
        "available": status.available,
        "remainingSeconds": status.remaining_seconds,
    }


def progress_payload(progress: GoalProgress) -> dict[str, object]:
    return {
        "totalBalance": progress.total_balance,
        "averageDailyDifference": progress.average_daily_difference,
        "daysRemaining": progress.days_remaining,
        "loggedPercentage": progress.logged_percentage,
        "overallStatus": progress.overall_status,
        "message": progress.message,
    }
