"""Pydantic models for Kairos MCP."""

from kairos_mcp.models.inputs import BankruptcyInput, LoadInput, PlanInput, StatsInput
from kairos_mcp.models.planning import (
    DailySchedule,
    LoadStatus,
    OverloadReport,
    ScheduleBlock,
    WeeklyStats,
)
from kairos_mcp.models.task import CompletedTask, TaskWithGoal

__all__ = [
    # Task models
    "TaskWithGoal",
    "CompletedTask",
    # Planning output models
    "LoadStatus",
    "ScheduleBlock",
    "DailySchedule",
    "WeeklyStats",
    "OverloadReport",
    # Tool input models
    "PlanInput",
    "LoadInput",
    "BankruptcyInput",
    "StatsInput",
]
