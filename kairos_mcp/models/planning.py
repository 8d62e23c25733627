"""Output models produced by the planning core."""

from datetime import datetime

from pydantic import BaseModel, Field

from kairos_mcp.enums import ImportanceTier


class LoadStatus(BaseModel):
    """Capacity against demand for the rest of today.

    ``overload_ratio`` is ``inf`` when there is demand but no capacity left.
    """

    capacity_minutes: int
    demand_minutes: int
    is_overloaded: bool
    overload_ratio: float


class ScheduleBlock(BaseModel):
    """One contiguous time block in a daily plan."""

    start: datetime
    end: datetime
    duration_minutes: int
    task_id: int
    title: str
    tier: ImportanceTier
    goal_title: str


class DailySchedule(BaseModel):
    """Ranked tasks laid out back to back from the generation time."""

    generated_at: datetime
    blocks: list[ScheduleBlock] = Field(default_factory=list)
    finish_time: datetime
    total_minutes: int = 0


class WeeklyStats(BaseModel):
    """Trailing 7-day productivity figures."""

    velocity: int = 0  # Average minutes completed per day
    impact_score: int = 0  # Percent of completed tasks under high-value goals
    streak: int = 0  # Consecutive active days ending today or yesterday


class OverloadReport(BaseModel):
    """Warnings raised after comparing today's load with recent velocity."""

    load: LoadStatus
    velocity: int
    reality_check: bool = False
    bankruptcy_prompt: bool = False
    messages: list[str] = Field(default_factory=list)
