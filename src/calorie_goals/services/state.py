"""Shared in-process state for the active goal and its logs."""

from dataclasses import dataclass, field

from calorie_goals.domain.goals import Goal
from calorie_goals.domain.logs import DailyLogView, LogEntry
from calorie_goals.services.metrics import recompute


@dataclass
class TrackerState:
    """Cached goal and log entries with their derived views."""

    goal: Goal | None = None
    entries: list[LogEntry] = field(default_factory=list)
    views: list[DailyLogView] = field(default_factory=list)

    def refresh(self) -> list[DailyLogView]:
        """Recompute all log views against the current goal."""
        self.views = recompute(self.goal, self.entries)
        return self.views
