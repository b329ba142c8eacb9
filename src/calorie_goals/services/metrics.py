"""Derived metrics for daily logs."""

from collections.abc import Iterable

from calorie_goals.domain.goals import Goal
from calorie_goals.domain.logs import DailyLogView, LogEntry

SHORT_WINDOW = 4
LONG_WINDOW = 7


def recompute(goal: Goal | None, entries: Iterable[LogEntry]) -> list[DailyLogView]:
    """Rebuild every derived field for the full log set.

    Rolling averages cover the most recent entries by position, not by
    elapsed calendar days.
    """
    ordered = sorted(entries, key=lambda entry: entry.date)
    target = goal.daily_target if goal else 0
    differences: list[int] = []
    running_sum = 0
    views: list[DailyLogView] = []
    for entry in ordered:
        difference = entry.difference
        differences.append(difference)
        running_sum += difference
        views.append(
            DailyLogView(
                entry=entry,
                day_number=_day_number(goal, entry),
                difference=difference,
                running_sum=running_sum,
                remaining_to_goal=(
                    goal.target_calories - running_sum if goal else None
                ),
                rolling_avg_4=_mean(differences[-SHORT_WINDOW:]),
                rolling_avg_7=_mean(differences[-LONG_WINDOW:]),
                overall_average=running_sum / len(differences),
                daily_target=target,
                on_track=is_on_track(goal, difference),
                goal_percentage=_goal_percentage(goal, running_sum),
            )
        )
    return views


def is_on_track(goal: Goal | None, difference: int) -> bool:
    """Classify a day's difference against the goal's sign convention."""
    if goal is None:
        return False
    if goal.is_deficit:
        return difference >= goal.daily_target
    return difference <= -goal.daily_target


def _day_number(goal: Goal | None, entry: LogEntry) -> int | None:
    if goal is None:
        return None
    return (entry.date - goal.start_date).days + 1


def _mean(values: list[int]) -> float:
    return sum(values) / len(values)


def _goal_percentage(goal: Goal | None, running_sum: int) -> float:
    if goal is None or running_sum == 0:
        return 0.0
    ratio = running_sum / abs(goal.target_calories) * 100
    return min(100.0, max(0.0, ratio))
