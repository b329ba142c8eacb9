"""Domain models for daily calorie logs."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID


def as_day(value: date | datetime) -> date:
    """Drop the time of day from a date or datetime."""
    if isinstance(value, datetime):
        return value.date()
    return value


@dataclass(frozen=True)
class LogEntry:
    """Raw daily log as stored."""

    id: UUID
    date: date
    calories_burned: int
    calories_consumed: int

    @property
    def difference(self) -> int:
        return self.calories_burned - self.calories_consumed


@dataclass(frozen=True)
class DailyLogView:
    """Daily log with metrics derived against the active goal."""

    entry: LogEntry
    day_number: int | None
    difference: int
    running_sum: int
    remaining_to_goal: int | None
    rolling_avg_4: float
    rolling_avg_7: float
    overall_average: float
    daily_target: int
    on_track: bool
    goal_percentage: float

    @property
    def id(self) -> UUID:
        return self.entry.id

    @property
    def date(self) -> date:
        return self.entry.date

    @property
    def status_text(self) -> str:
        return "On Track" if self.on_track else "Off Track"
