"""
MCP Server for Kairos.

This server exposes Kairos' daily planning core as MCP tools: ranking pending
tasks into a time-blocked plan, detecting overload against the capacity left
in the work day, liquidating an overloaded day ("task bankruptcy"), and
reporting weekly velocity, impact and streak.
"""

# Re-export enums
from kairos_mcp.enums import BankruptcyOption, ImportanceTier, ResponseFormat, TaskStatus

# Re-export errors
from kairos_mcp.errors import InvalidInputError, KairosError, NotFoundError, StorageFailureError

# Re-export models
from kairos_mcp.models import (
    BankruptcyInput,
    CompletedTask,
    DailySchedule,
    LoadInput,
    LoadStatus,
    OverloadReport,
    PlanInput,
    ScheduleBlock,
    StatsInput,
    TaskWithGoal,
    WeeklyStats,
)

# Re-export planning core
from kairos_mcp.planning import (
    NO_PENDING_TASKS_MESSAGE,
    build_schedule,
    calculate_daily_load,
    calculate_impact,
    calculate_streak,
    calculate_velocity,
    check_overload,
    energy_fit,
    evaluate_overload,
    execute_bankruptcy,
    format_schedule,
    generate_daily_plan,
    get_weekly_stats,
    prioritize,
    strategic_score,
)

# Re-export MCP server instance
from kairos_mcp.server import mcp

# Re-export tools
from kairos_mcp.tools import kairos_bankruptcy, kairos_load, kairos_plan, kairos_stats

__all__ = [
    # Enums
    "ResponseFormat",
    "TaskStatus",
    "BankruptcyOption",
    "ImportanceTier",
    # Errors
    "KairosError",
    "NotFoundError",
    "InvalidInputError",
    "StorageFailureError",
    # Models
    "TaskWithGoal",
    "CompletedTask",
    "LoadStatus",
    "ScheduleBlock",
    "DailySchedule",
    "WeeklyStats",
    "OverloadReport",
    "PlanInput",
    "LoadInput",
    "BankruptcyInput",
    "StatsInput",
    # Planning core
    "calculate_daily_load",
    "energy_fit",
    "strategic_score",
    "prioritize",
    "NO_PENDING_TASKS_MESSAGE",
    "build_schedule",
    "format_schedule",
    "generate_daily_plan",
    "execute_bankruptcy",
    "check_overload",
    "evaluate_overload",
    "calculate_velocity",
    "calculate_impact",
    "calculate_streak",
    "get_weekly_stats",
    # Tools
    "kairos_plan",
    "kairos_load",
    "kairos_bankruptcy",
    "kairos_stats",
    # MCP server instance
    "mcp",
]
