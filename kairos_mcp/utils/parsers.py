"""Parser helpers for Kairos data."""

from collections.abc import Mapping
from datetime import date, datetime, time
from typing import Any

from kairos_mcp.config import DEFAULT_ENERGY, DEFAULT_ESTIMATED_MINUTES, DEFAULT_PRIORITY
from kairos_mcp.errors import InvalidInputError
from kairos_mcp.models.task import CompletedTask, TaskWithGoal


def _parse_work_end_time(value: str) -> time:
    """
    Parse an ``HH:MM`` work end time.

    Args:
        value: Time string as stored on the user profile

    Returns:
        The parsed wall-clock time

    Raises:
        InvalidInputError: If the value is not a valid 24h ``HH:MM`` time
    """
    try:
        hour_str, minute_str = value.strip().split(":")
        return time(int(hour_str), int(minute_str))
    except (AttributeError, ValueError) as e:
        raise InvalidInputError(f"Invalid work end time {value!r}, expected HH:MM") from e


def _parse_task_with_goal(row: Mapping[str, Any]) -> TaskWithGoal:
    """
    Parse a joined task/goal row into a TaskWithGoal.

    NULL columns fall back to the task table defaults; a missing goal
    score becomes 0.
    """
    return TaskWithGoal(
        id=row["id"],
        title=row.get("title") or "",
        estimated_minutes=row.get("estimated_minutes") or DEFAULT_ESTIMATED_MINUTES,
        priority_override=row.get("priority_override") or DEFAULT_PRIORITY,
        is_fixed=bool(row.get("is_fixed")),
        required_energy=row.get("required_energy") or DEFAULT_ENERGY,
        goal_title=row.get("goal_title"),
        goal_meta_score=row.get("meta_score") or 0,
        scheduled_start_time=row.get("scheduled_start_time"),
    )


def _parse_completed_task(row: Mapping[str, Any]) -> CompletedTask:
    """Parse a completed task row; ``estimated_minutes`` stays None when missing."""
    return CompletedTask(
        id=row["id"],
        title=row.get("title") or "",
        estimated_minutes=row.get("estimated_minutes"),
        goal_meta_score=row.get("meta_score") or 0,
        completed_at=row.get("completed_at"),
    )


def _to_calendar_day(value: date | datetime) -> date:
    """Truncate a timestamp to its calendar day."""
    if isinstance(value, datetime):
        return value.date()
    return value
