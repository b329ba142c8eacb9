"""Overall progress summary for the active goal."""

import math
from dataclasses import dataclass
from datetime import date

from calorie_goals.domain.goals import Goal
from calorie_goals.domain.logs import DailyLogView

ON_TRACK_PERCENTAGE = 80


@dataclass(frozen=True)
class GoalProgress:
    """Aggregated progress across all logged days."""

    total_balance: int
    average_daily_difference: int
    days_remaining: int
    logged_percentage: float
    overall_status: str
    message: str


def summarize(
    goal: Goal | None, views: list[DailyLogView], today: date
) -> GoalProgress:
    """Summarize logged days against the goal as of ``today``."""
    if goal is None:
        return GoalProgress(
            total_balance=0,
            average_daily_difference=0,
            days_remaining=0,
            logged_percentage=0.0,
            overall_status="No goal set",
            message="No data available",
        )
    total_balance = views[-1].running_sum if views else 0
    average = _average_difference(views)
    logged = min(100.0, len(views) / goal.window_days * 100)
    if not views:
        status = "No entries yet"
    elif logged >= ON_TRACK_PERCENTAGE:
        status = "On Track"
    else:
        status = "Keep going!"
    return GoalProgress(
        total_balance=total_balance,
        average_daily_difference=average,
        days_remaining=days_remaining(goal, today),
        logged_percentage=logged,
        overall_status=status,
        message=_progress_message(goal, views, average),
    )


def days_remaining(goal: Goal, today: date) -> int:
    """Return the days left in the goal window, counted from today."""
    if today > goal.end_date:
        return 0
    if today < goal.start_date:
        return goal.window_days
    return (goal.end_date - today).days


def _average_difference(views: list[DailyLogView]) -> int:
    if not views:
        return 0
    total = sum(view.difference for view in views)
    return math.floor(total / len(views) + 0.5)


def _progress_message(goal: Goal, views: list[DailyLogView], average: int) -> str:
    if not views:
        return "No data available"
    target = goal.daily_target
    if goal.is_deficit:
        if average >= target:
            return (
                f"Great job! You're averaging {average} calories above your "
                f"daily target of {target}."
            )
        if views[-1].running_sum > 0:
            return (
                f"You're making progress with a total deficit of "
                f"{views[-1].running_sum} calories, but your daily average of "
                f"{average} is below your target of {target}."
            )
        return (
            f"You're currently below your target. You need to average "
            f"{target} calories deficit per day."
        )
    if average <= -target:
        return (
            f"Great job! You're averaging a surplus of {abs(average)} calories, "
            f"meeting your daily target of {target}."
        )
    return (
        f"Your calorie surplus is below your target. Try to reach "
        f"{target} calories surplus per day."
    )
