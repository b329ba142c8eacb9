"""Supabase repository for calorie goals."""

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID, uuid4

from supabase import Client

from calorie_goals.domain.errors import PersistenceError
from calorie_goals.domain.goals import Goal
from calorie_goals.services.goals import GoalRepository

_GOAL_COLUMNS = (
    "id, target_kcals, time_window_days, start_date, concurrency_stamp, "
    "previous_goal_id, previous_snapshot"
)

logger = logging.getLogger(__name__)


@dataclass
class SupabaseGoalRepository(GoalRepository):
    """Supabase implementation for goals.

    Creating a goal inserts the new active row first and only then
    deactivates the current one, remembering it in ``previous_goal_id``.
    Updating a goal keeps its old target and window in ``previous_snapshot``.
    ``undo_goal`` reverts whichever of the two is set.
    """

    client: Client

    def get_active_goal(self) -> Goal | None:
        """Return the active goal row."""
        response = (
            self.client.table("goals")
            .select(_GOAL_COLUMNS)
            .eq("is_active", True)
            .order("created_at", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_goal(response.data[0])

    def create_goal(
        self, target_calories: int, window_days: int, start_date: date
    ) -> Goal:
        """Insert a new active goal, then deactivate the previous one."""
        active = self.get_active_goal()
        response = (
            self.client.table("goals")
            .insert(
                {
                    "target_kcals": target_calories,
                    "time_window_days": window_days,
                    "start_date": start_date.isoformat(),
                    "is_active": True,
                    "concurrency_stamp": str(uuid4()),
                    "previous_goal_id": str(active.id) if active else None,
                }
            )
            .execute()
        )
        if not response.data:
            raise PersistenceError("Failed to create goal")
        goal = _parse_goal(response.data[0])
        if active is not None and not self._deactivate(active.id):
            # get_active_goal picks the newest active row.
            logger.warning("Goal %s is still marked active", active.id)
        return goal

    def update_goal(
        self, goal_id: UUID, target_calories: int, window_days: int
    ) -> Goal:
        """Update target and window, keeping the old values for undo."""
        row = self._get_row(goal_id)
        if row is None:
            raise PersistenceError(f"Goal {goal_id} not found")
        response = (
            self.client.table("goals")
            .update(
                {
                    "target_kcals": target_calories,
                    "time_window_days": window_days,
                    "concurrency_stamp": str(uuid4()),
                    "previous_snapshot": {
                        "target_kcals": row["target_kcals"],
                        "time_window_days": row["time_window_days"],
                    },
                }
            )
            .eq("id", str(goal_id))
            .execute()
        )
        if not response.data:
            raise PersistenceError(f"Failed to update goal {goal_id}")
        return _parse_goal(response.data[0])

    def undo_goal(self, goal_id: UUID) -> Goal:
        """Revert the latest update or creation of a goal."""
        row = self._get_row(goal_id)
        if row is None:
            raise PersistenceError(f"Goal {goal_id} not found")
        snapshot = row.get("previous_snapshot")
        if snapshot:
            response = (
                self.client.table("goals")
                .update(
                    {
                        "target_kcals": snapshot["target_kcals"],
                        "time_window_days": snapshot["time_window_days"],
                        "concurrency_stamp": str(uuid4()),
                        "previous_snapshot": None,
                    }
                )
                .eq("id", str(goal_id))
                .execute()
            )
        elif row.get("previous_goal_id"):
            response = (
                self.client.table("goals")
                .update({"is_active": True})
                .eq("id", str(row["previous_goal_id"]))
                .execute()
            )
            if not response.data:
                raise PersistenceError(f"Failed to undo goal {goal_id}")
            if not self._deactivate(goal_id):
                raise PersistenceError(f"Failed to deactivate goal {goal_id}")
            return _parse_goal(response.data[0])
        else:
            raise PersistenceError(f"Goal {goal_id} has no change to undo")
        if not response.data:
            raise PersistenceError(f"Failed to undo goal {goal_id}")
        return _parse_goal(response.data[0])

    def _deactivate(self, goal_id: UUID) -> bool:
        response = (
            self.client.table("goals")
            .update({"is_active": False})
            .eq("id", str(goal_id))
            .execute()
        )
        return bool(response.data)

    def _get_row(self, goal_id: UUID) -> dict[str, object] | None:
        response = (
            self.client.table("goals")
            .select(_GOAL_COLUMNS)
            .eq("id", str(goal_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0]


def _parse_goal(row: dict[str, object]) -> Goal:
    stamp = row.get("concurrency_stamp")
    return Goal(
        id=UUID(str(row["id"])),
        target_calories=int(row["target_kcals"]),
        window_days=int(row["time_window_days"]),
        start_date=date.fromisoformat(str(row["start_date"])[:10]),
        concurrency_stamp=str(stamp) if stamp else None,
    )
