"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from calorie_goals.config import Settings
from calorie_goals.containers import AppContainer
from calorie_goals.domain.errors import PersistenceError
from calorie_goals.domain.goals import Goal
from calorie_goals.domain.logs import LogEntry
from calorie_goals.services.clock import Clock
from calorie_goals.services.goals import GoalManager, GoalRepository
from calorie_goals.services.logs import LogRepository, LogStore
from calorie_goals.services.state import TrackerState
from calorie_goals.services.undo import UndoController

TODAY = date(2026, 3, 2)


@dataclass
class FakeClock(Clock):
    """Clock that only moves when told to."""

    current: datetime = field(
        default_factory=lambda: datetime(2026, 3, 2, 9, 0, tzinfo=UTC)
    )

    def now(self) -> datetime:
        return self.current

    def today(self) -> date:
        return self.current.date()

    def advance(self, seconds: float) -> None:
        self.current = self.current + timedelta(seconds=seconds)


@dataclass
class InMemoryGoalRepository(GoalRepository):
    """In-memory goal repository that keeps one level of history."""

    active: Goal | None = None
    history: dict[UUID, Goal] = field(default_factory=dict)
    fail: bool = False
    calls: list[str] = field(default_factory=list)

    def get_active_goal(self) -> Goal | None:
        return self.active

    def create_goal(
        self, target_calories: int, window_days: int, start_date: date
    ) -> Goal:
        self._check("create_goal")
        goal = Goal(
            id=uuid4(),
            target_calories=target_calories,
            window_days=window_days,
            start_date=start_date,
            concurrency_stamp=str(uuid4()),
        )
        if self.active is not None:
            self.history[goal.id] = self.active
        self.active = goal
        return goal

    def update_goal(
        self, goal_id: UUID, target_calories: int, window_days: int
    ) -> Goal:
        self._check("update_goal")
        current = self.active
        if current is None or current.id != goal_id:
            raise PersistenceError(f"Goal {goal_id} not found")
        updated = replace(
            current,
            target_calories=target_calories,
            window_days=window_days,
            concurrency_stamp=str(uuid4()),
        )
        self.history[goal_id] = current
        self.active = updated
        return updated

    def undo_goal(self, goal_id: UUID) -> Goal:
        self._check("undo_goal")
        previous = self.history.pop(goal_id, None)
        if previous is None:
            raise PersistenceError(f"Goal {goal_id} has no change to undo")
        self.active = previous
        return previous

    def _check(self, name: str) -> None:
        self.calls.append(name)
        if self.fail:
            raise PersistenceError(f"{name} failed")


@dataclass
class InMemoryLogRepository(LogRepository):
    """In-memory daily log repository."""

    logs: dict[UUID, LogEntry] = field(default_factory=dict)
    fail: bool = False

    def list_logs(self) -> list[LogEntry]:
        return sorted(self.logs.values(), key=lambda entry: entry.date)

    def create_log(
        self, day: date, calories_burned: int, calories_consumed: int
    ) -> LogEntry:
        self._check("create_log")
        entry = LogEntry(
            id=uuid4(),
            date=day,
            calories_burned=calories_burned,
            calories_consumed=calories_consumed,
        )
        self.logs[entry.id] = entry
        return entry

    def update_log(
        self, log_id: UUID, day: date, calories_burned: int, calories_consumed: int
    ) -> LogEntry:
        self._check("update_log")
        if log_id not in self.logs:
            raise PersistenceError(f"Daily log {log_id} not found")
        entry = LogEntry(
            id=log_id,
            date=day,
            calories_burned=calories_burned,
            calories_consumed=calories_consumed,
        )
        self.logs[log_id] = entry
        return entry

    def delete_log(self, log_id: UUID) -> None:
        self._check("delete_log")
        self.logs.pop(log_id, None)

    def delete_all_logs(self) -> None:
        self._check("delete_all_logs")
        self.logs.clear()

    def _check(self, name: str) -> None:
        if self.fail:
            raise PersistenceError(f"{name} failed")


def make_goal(
    target_calories: int = 100000,
    window_days: int = 100,
    start_date: date = TODAY,
) -> Goal:
    return Goal(
        id=uuid4(),
        target_calories=target_calories,
        window_days=window_days,
        start_date=start_date,
    )


def make_entry(day: date, burned: int, consumed: int) -> LogEntry:
    return LogEntry(
        id=uuid4(), date=day, calories_burned=burned, calories_consumed=consumed
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def goal_repository() -> InMemoryGoalRepository:
    return InMemoryGoalRepository()


@pytest.fixture
def log_repository() -> InMemoryLogRepository:
    return InMemoryLogRepository()


@pytest.fixture
def state() -> TrackerState:
    return TrackerState()


@pytest.fixture
def goal_manager(
    goal_repository: InMemoryGoalRepository, clock: FakeClock, state: TrackerState
) -> GoalManager:
    return GoalManager(
        repository=goal_repository,
        clock=clock,
        undo_controller=UndoController(clock),
        state=state,
    )


@pytest.fixture
def log_store(log_repository: InMemoryLogRepository, state: TrackerState) -> LogStore:
    return LogStore(repository=log_repository, state=state)


@pytest.fixture
def container(
    settings: Settings,
    clock: FakeClock,
    state: TrackerState,
    goal_manager: GoalManager,
    log_store: LogStore,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        clock=clock,
        state=state,
        goal_manager=goal_manager,
        log_store=log_store,
    )
