"""Domain models for calorie goals."""

from dataclasses import dataclass
from datetime import date, timedelta
from uuid import UUID


def daily_target(target_calories: int, window_days: int) -> int:
    """Return the per-day target, rounding halves up."""
    magnitude = abs(target_calories)
    return (2 * magnitude + window_days) // (2 * window_days)


@dataclass(frozen=True)
class Goal:
    """Calorie goal over a time window.

    A positive target is a deficit goal, a negative target a surplus goal.
    """

    id: UUID
    target_calories: int
    window_days: int
    start_date: date
    concurrency_stamp: str | None = None

    @property
    def daily_target(self) -> int:
        return daily_target(self.target_calories, self.window_days)

    @property
    def is_deficit(self) -> bool:
        return self.target_calories > 0

    @property
    def is_surplus(self) -> bool:
        return self.target_calories < 0

    @property
    def end_date(self) -> date:
        """Last calendar day inside the goal window."""
        return self.start_date + timedelta(days=self.window_days - 1)

    def contains(self, day: date) -> bool:
        """Return True when the day falls inside the goal window."""
        return self.start_date <= day <= self.end_date
