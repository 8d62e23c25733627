"""Shared builders for kairos-mcp tests."""

from datetime import datetime

from kairos_mcp.models.task import CompletedTask, TaskWithGoal

# Monday 2026-10-19, 09:00
NOW = datetime(2026, 10, 19, 9, 0)


def make_task(task_id: int, **overrides) -> TaskWithGoal:
    """Build a TaskWithGoal with neutral defaults (score 0, energy 3, priority 3)."""
    fields = {"id": task_id, "title": f"Task {task_id}"}
    fields.update(overrides)
    return TaskWithGoal(**fields)


def make_completed(task_id: int, minutes: int | None = 30, meta_score: int = 5) -> CompletedTask:
    return CompletedTask(id=task_id, estimated_minutes=minutes, goal_meta_score=meta_score, completed_at=NOW)
