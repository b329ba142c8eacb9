"""Validation rules for goals and daily logs.

Both validators are plain functions returning ``None`` on success or a single
error kind, so the same rules apply behind the API, a CLI or a test.
"""

from collections.abc import Iterable
from datetime import date
from uuid import UUID

from calorie_goals.domain.errors import GoalError, LogError
from calorie_goals.domain.goals import Goal
from calorie_goals.domain.logs import LogEntry

MIN_WINDOW_DAYS = 1
MAX_WINDOW_DAYS = 3650
MAX_DAILY_CALORIES = 50000


def validate_goal(
    target_calories: int, window_days: int, start_date: date, today: date
) -> GoalError | None:
    """Check a goal submission and return the first failing rule."""
    if target_calories == 0:
        return GoalError.NON_ZERO_TARGET
    if not MIN_WINDOW_DAYS <= window_days <= MAX_WINDOW_DAYS:
        return GoalError.WINDOW_RANGE
    if start_date < today:
        return GoalError.START_IN_PAST
    return None


def validate_log(  # noqa: PLR0913
    day: date,
    calories_burned: int,
    calories_consumed: int,
    existing: Iterable[LogEntry],
    goal: Goal | None,
    excluding_id: UUID | None = None,
    max_calories: int = MAX_DAILY_CALORIES,
) -> LogError | None:
    """Check a daily log submission and return the first failing rule.

    The window check is skipped when no goal is active. ``excluding_id`` lets
    an edited entry keep its own date.
    """
    if calories_burned < 0 or calories_consumed < 0:
        return LogError.NEGATIVE_VALUE
    if calories_burned > max_calories or calories_consumed > max_calories:
        return LogError.UNREALISTIC
    if goal is not None and not goal.contains(day):
        return LogError.OUT_OF_WINDOW
    for entry in existing:
        if entry.id == excluding_id:
            continue
        if entry.date == day:
            return LogError.DUPLICATE_DATE
    return None
