"""Single-level, time-boxed undo for goal changes."""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta

from calorie_goals.domain.goals import Goal
from calorie_goals.services.clock import Clock

DEFAULT_UNDO_SECONDS = 10


@dataclass(frozen=True)
class UndoSnapshot:
    """Goal that was active before the latest change."""

    previous_goal: Goal
    deadline: datetime


@dataclass(frozen=True)
class UndoStatus:
    """Undo availability for presentation."""

    available: bool
    remaining_seconds: int


class UndoController:
    """Holds at most one undo snapshot and expires it lazily.

    Arming replaces any earlier snapshot. Expiry and ``take`` consume the
    snapshot, and repeating either is a no-op.
    """

    def __init__(
        self, clock: Clock, window_seconds: int = DEFAULT_UNDO_SECONDS
    ) -> None:
        self.clock = clock
        self.window_seconds = window_seconds
        self._snapshot: UndoSnapshot | None = None

    def arm(self, previous_goal: Goal | None) -> None:
        """Start a fresh countdown for the previous goal."""
        if previous_goal is None:
            self._snapshot = None
            return
        deadline = self.clock.now() + timedelta(seconds=self.window_seconds)
        self._snapshot = UndoSnapshot(previous_goal=previous_goal, deadline=deadline)

    def cancel(self) -> None:
        self._snapshot = None

    def tick(self) -> bool:
        """Drop the snapshot once its deadline passes.

        Returns True only on the call that expired it.
        """
        if self._snapshot is None:
            return False
        if self.clock.now() < self._snapshot.deadline:
            return False
        self._snapshot = None
        return True

    def peek(self) -> Goal | None:
        """Return the pending goal without consuming it."""
        self.tick()
        if self._snapshot is None:
            return None
        return self._snapshot.previous_goal

    def take(self) -> Goal | None:
        """Consume and return the pending goal if it is still live."""
        previous = self.peek()
        self._snapshot = None
        return previous

    def status(self) -> UndoStatus:
        self.tick()
        if self._snapshot is None:
            return UndoStatus(available=False, remaining_seconds=0)
        left = (self._snapshot.deadline - self.clock.now()).total_seconds()
        return UndoStatus(available=True, remaining_seconds=math.ceil(left))
