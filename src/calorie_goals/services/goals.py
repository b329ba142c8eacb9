"""Goal management with validation and timed undo."""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol
from uuid import UUID

from calorie_goals.domain.errors import GoalError
from calorie_goals.domain.goals import Goal
from calorie_goals.domain.logs import DailyLogView
from calorie_goals.services.clock import Clock
from calorie_goals.services.state import TrackerState
from calorie_goals.services.undo import UndoController, UndoStatus
from calorie_goals.services.validation import validate_goal

logger = logging.getLogger(__name__)


class GoalRepository(Protocol):
    """Persistence interface for goals."""

    def get_active_goal(self) -> Goal | None:
        """Return the active goal, if any."""

    def create_goal(
        self, target_calories: int, window_days: int, start_date: date
    ) -> Goal:
        """Create a goal and make it active."""

    def update_goal(
        self, goal_id: UUID, target_calories: int, window_days: int
    ) -> Goal:
        """Update the target and window of an existing goal."""

    def undo_goal(self, goal_id: UUID) -> Goal:
        """Revert the latest change to a goal and return the restored goal."""


@dataclass(frozen=True)
class GoalResult:
    """Outcome of a goal operation with the recomputed logs."""

    goal: Goal | None
    logs: list[DailyLogView]
    error: GoalError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class GoalManager:
    """Owns the active goal and its undo snapshot."""

    repository: GoalRepository
    clock: Clock
    undo_controller: UndoController
    state: TrackerState = field(default_factory=TrackerState)

    @property
    def goal(self) -> Goal | None:
        return self.state.goal

    def load(self) -> Goal | None:
        """Read the active goal from storage and refresh log metrics."""
        self.state.goal = self.repository.get_active_goal()
        self.state.refresh()
        return self.state.goal

    def set_goal(
        self, target_calories: int, window_days: int, start_date: date
    ) -> GoalResult:
        """Validate and persist a new goal, keeping the old one for undo."""
        error = validate_goal(
            target_calories, window_days, start_date, self.clock.today()
        )
        if error is not None:
            logger.info("Rejected goal: %s", error)
            return GoalResult(goal=self.state.goal, logs=self.state.views, error=error)

        previous = self.state.goal
        if previous is not None and previous.start_date == start_date:
            goal = self.repository.update_goal(
                previous.id, target_calories, window_days
            )
        else:
            goal = self.repository.create_goal(
                target_calories, window_days, start_date
            )
        self.state.goal = goal
        self.undo_controller.arm(previous)
        logger.info(
            "Goal %s set: target=%s window=%s daily=%s",
            goal.id,
            goal.target_calories,
            goal.window_days,
            goal.daily_target,
        )
        return GoalResult(goal=goal, logs=self.state.refresh())

    def undo(self) -> GoalResult | None:
        """Restore the previous goal while the undo window is open."""
        current = self.state.goal
        if current is None or self.undo_controller.peek() is None:
            return None
        restored = self.repository.undo_goal(current.id)
        self.undo_controller.take()
        self.state.goal = restored
        logger.info("Goal %s restored by undo", restored.id)
        return GoalResult(goal=restored, logs=self.state.refresh())

    def undo_status(self) -> UndoStatus:
        return self.undo_controller.status()


def window_days_between(start_date: date, end_date: date) -> int:
    """Return the inclusive number of days from start to end."""
    return (end_date - start_date).days + 1
