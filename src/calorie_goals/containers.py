"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from calorie_goals.adapters.supabase_goal_repository import SupabaseGoalRepository
from calorie_goals.adapters.supabase_log_repository import SupabaseLogRepository
from calorie_goals.config import Settings, parse_timezone
from calorie_goals.services.clock import Clock, SystemClock
from calorie_goals.services.goals import GoalManager
from calorie_goals.services.logs import LogStore
from calorie_goals.services.state import TrackerState
from calorie_goals.services.undo import UndoController


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    clock: Clock
    state: TrackerState
    goal_manager: GoalManager
    log_store: LogStore

    def refresh(self) -> None:
        """Reload the active goal and all logs from storage."""
        self.goal_manager.load()
        self.log_store.load()


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    clock = SystemClock(parse_timezone(resolved_settings.timezone))
    state = TrackerState()
    goal_manager = GoalManager(
        repository=SupabaseGoalRepository(supabase_client),
        clock=clock,
        undo_controller=UndoController(
            clock, window_seconds=resolved_settings.undo_window_seconds
        ),
        state=state,
    )
    log_store = LogStore(
        repository=SupabaseLogRepository(supabase_client),
        state=state,
        max_calories=resolved_settings.max_daily_calories,
    )
    return AppContainer(
        settings=resolved_settings,
        clock=clock,
        state=state,
        goal_manager=goal_manager,
        log_store=log_store,
    )
