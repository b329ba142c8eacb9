"""Supabase repository for daily logs."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from calorie_goals.domain.errors import PersistenceError
from calorie_goals.domain.logs import LogEntry
from calorie_goals.services.logs import LogRepository

_NIL_ID = "00000000-0000-0000-0000-000000000000"


@dataclass
class SupabaseLogRepository(LogRepository):
    """Supabase implementation for daily logs."""

    client: Client

    def list_logs(self) -> list[LogEntry]:
        """Return all daily logs ordered by date."""
        response = (
            self.client.table("daily_logs")
            .select("id, log_date, kcals_burn, kcals_intake")
            .order("log_date", desc=False)
            .execute()
        )
        return [_parse_log(row) for row in response.data or []]

    def create_log(
        self, day: date, calories_burned: int, calories_consumed: int
    ) -> LogEntry:
        """Insert a daily log row."""
        response = (
            self.client.table("daily_logs")
            .insert(
                {
                    "log_date": day.isoformat(),
                    "kcals_burn": calories_burned,
                    "kcals_intake": calories_consumed,
                }
            )
            .execute()
        )
        if not response.data:
            raise PersistenceError("Failed to create daily log")
        return _parse_log(response.data[0])

    def update_log(
        self, log_id: UUID, day: date, calories_burned: int, calories_consumed: int
    ) -> LogEntry:
        """Update a daily log row."""
        response = (
            self.client.table("daily_logs")
            .update(
                {
                    "log_date": day.isoformat(),
                    "kcals_burn": calories_burned,
                    "kcals_intake": calories_consumed,
                }
            )
            .eq("id", str(log_id))
            .execute()
        )
        if not response.data:
            raise PersistenceError(f"Failed to update daily log {log_id}")
        return _parse_log(response.data[0])

    def delete_log(self, log_id: UUID) -> None:
        """Delete a daily log row."""
        self.client.table("daily_logs").delete().eq("id", str(log_id)).execute()

    def delete_all_logs(self) -> None:
        """Delete every daily log row."""
        # PostgREST refuses unfiltered deletes.
        self.client.table("daily_logs").delete().neq("id", _NIL_ID).execute()


def _parse_log(row: dict[str, object]) -> LogEntry:
    return LogEntry(
        id=UUID(str(row["id"])),
        date=date.fromisoformat(str(row["log_date"])[:10]),
        calories_burned=int(row.get("kcals_burn") or 0),
        calories_consumed=int(row.get("kcals_intake") or 0),
    )
