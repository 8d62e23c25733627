"""Task DTOs consumed by the planning core."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from kairos_mcp.config import DEFAULT_ENERGY, DEFAULT_ESTIMATED_MINUTES, DEFAULT_PRIORITY


class TaskWithGoal(BaseModel):
    """A pending task enriched with its parent goal's strategic weight.

    ``goal_meta_score`` is 0 when the task has no goal (or the goal carries
    no score); real goal scores range from 1 to 10.
    """

    id: int
    title: str = ""
    estimated_minutes: int = Field(default=DEFAULT_ESTIMATED_MINUTES, gt=0)
    priority_override: int = Field(default=DEFAULT_PRIORITY, ge=1, le=5)
    is_fixed: bool = False
    required_energy: int = Field(default=DEFAULT_ENERGY, ge=1, le=5)
    goal_title: str | None = None
    goal_meta_score: int = Field(default=0, ge=0, le=10)
    scheduled_start_time: datetime | None = None


class CompletedTask(BaseModel):
    """A finished task as seen by the analytics feed."""

    id: int
    title: str = ""
    estimated_minutes: int | None = None
    goal_meta_score: int = 0
    completed_at: datetime | None = None

