"""Daily log store with validation and metric recomputation."""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Protocol
from uuid import UUID

from calorie_goals.domain.errors import LogError
from calorie_goals.domain.logs import DailyLogView, LogEntry, as_day
from calorie_goals.services.state import TrackerState
from calorie_goals.services.validation import MAX_DAILY_CALORIES, validate_log

logger = logging.getLogger(__name__)


class LogRepository(Protocol):
    """Persistence interface for daily logs."""

    def list_logs(self) -> list[LogEntry]:
        """Return all stored daily logs."""

    def create_log(
        self, day: date, calories_burned: int, calories_consumed: int
    ) -> LogEntry:
        """Create a daily log and return it."""

    def update_log(
        self, log_id: UUID, day: date, calories_burned: int, calories_consumed: int
    ) -> LogEntry:
        """Update a daily log and return it."""

    def delete_log(self, log_id: UUID) -> None:
        """Delete a single daily log."""

    def delete_all_logs(self) -> None:
        """Delete every daily log."""


@dataclass(frozen=True)
class LogResult:
    """Outcome of a log mutation with the recomputed views."""

    logs: list[DailyLogView]
    error: LogError | None = None
    entry: LogEntry | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class LogStore:
    """Ordered daily logs interpreted against the shared goal."""

    repository: LogRepository
    state: TrackerState = field(default_factory=TrackerState)
    max_calories: int = MAX_DAILY_CALORIES

    @property
    def views(self) -> list[DailyLogView]:
        return self.state.views

    def load(self) -> list[DailyLogView]:
        """Read all logs from storage and recompute their metrics."""
        self.state.entries = list(self.repository.list_logs())
        return self.state.refresh()

    def get(self, log_id: UUID) -> LogEntry | None:
        for entry in self.state.entries:
            if entry.id == log_id:
                return entry
        return None

    def add(
        self, day: date | datetime, calories_burned: int, calories_consumed: int
    ) -> LogResult:
        """Validate and store a new daily log."""
        day = as_day(day)
        error = validate_log(
            day,
            calories_burned,
            calories_consumed,
            self.state.entries,
            self.state.goal,
            max_calories=self.max_calories,
        )
        if error is not None:
            return self._rejected(error)
        entry = self.repository.create_log(day, calories_burned, calories_consumed)
        self.state.entries = [*self.state.entries, entry]
        logger.info("Added daily log %s for %s", entry.id, entry.date)
        return LogResult(logs=self.state.refresh(), entry=entry)

    def edit(
        self,
        log_id: UUID,
        day: date | datetime,
        calories_burned: int,
        calories_consumed: int,
    ) -> LogResult:
        """Validate and replace the raw fields of an existing log."""
        if self.get(log_id) is None:
            return self._rejected(LogError.NOT_FOUND)
        day = as_day(day)
        error = validate_log(
            day,
            calories_burned,
            calories_consumed,
            self.state.entries,
            self.state.goal,
            excluding_id=log_id,
            max_calories=self.max_calories,
        )
        if error is not None:
            return self._rejected(error)
        updated = self.repository.update_log(
            log_id, day, calories_burned, calories_consumed
        )
        self.state.entries = [
            updated if entry.id == log_id else entry for entry in self.state.entries
        ]
        logger.info("Updated daily log %s", log_id)
        return LogResult(logs=self.state.refresh(), entry=updated)

    def delete(self, log_id: UUID) -> LogResult:
        """Remove a single log."""
        if self.get(log_id) is None:
            return self._rejected(LogError.NOT_FOUND)
        self.repository.delete_log(log_id)
        self.state.entries = [
            entry for entry in self.state.entries if entry.id != log_id
        ]
        logger.info("Deleted daily log %s", log_id)
        return LogResult(logs=self.state.refresh())

    def delete_all(self) -> LogResult:
        """Remove every log."""
        self.repository.delete_all_logs()
        self.state.entries = []
        logger.info("Deleted all daily logs")
        return LogResult(logs=self.state.refresh())

    def _rejected(self, error: LogError) -> LogResult:
        logger.info("Rejected daily log: %s", error)
        return LogResult(logs=self.state.views, error=error)
