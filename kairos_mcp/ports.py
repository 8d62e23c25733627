"""Collaborator contracts the planning core depends on.

Stores are owned by the persistence layer; the core only reads through them,
except for the two bulk updates used by the bankruptcy resolver.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Protocol

from kairos_mcp.models.task import CompletedTask, TaskWithGoal


class TaskStore(Protocol):
    def sum_pending_minutes(self, user_id: int) -> int: ...

    def find_pending_with_goal_context(self, user_id: int) -> list[TaskWithGoal]: ...

    def get_completed_since(self, user_id: int, since: datetime) -> list[CompletedTask]: ...

    def get_distinct_completion_dates(self, user_id: int) -> list[date]:
        """Calendar days with at least one completion, most recent first."""
        ...

    def archive_where_goal_score_below(self, user_id: int, threshold: int) -> int: ...

    def clear_scheduled_time_for_backlog(self, user_id: int) -> int: ...


class UserStore(Protocol):
    """User profile reads. Both methods return ``None`` for unknown users."""

    def get_work_end_time(self, user_id: int) -> str | None: ...

    def get_current_energy(self, user_id: int) -> int | None: ...


class EventPublisher(Protocol):
    def publish(self, event: dict[str, Any]) -> Any: ...
