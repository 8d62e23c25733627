"""Daily planning core: load model, priority scorer, schedule, bankruptcy and analytics."""

from kairos_mcp.planning.analytics import (
    calculate_impact,
    calculate_streak,
    calculate_velocity,
    get_weekly_stats,
    recent_velocity,
)
from kairos_mcp.planning.bankruptcy import (
    BANKRUPTCY_PROMPT,
    LIQUIDATED_EVENT,
    check_overload,
    evaluate_overload,
    execute_bankruptcy,
)
from kairos_mcp.planning.load import calculate_daily_load, compute_load_status, remaining_work_minutes
from kairos_mcp.planning.priority import energy_fit, prioritize, strategic_score
from kairos_mcp.planning.schedule import (
    NO_PENDING_TASKS_MESSAGE,
    build_schedule,
    format_schedule,
    generate_daily_plan,
    importance_tier,
    plan_schedule,
)

__all__ = [
    # Load model
    "calculate_daily_load",
    "compute_load_status",
    "remaining_work_minutes",
    # Priority scorer
    "energy_fit",
    "strategic_score",
    "prioritize",
    # Schedule formatter
    "NO_PENDING_TASKS_MESSAGE",
    "importance_tier",
    "build_schedule",
    "format_schedule",
    "plan_schedule",
    "generate_daily_plan",
    # Bankruptcy resolver
    "BANKRUPTCY_PROMPT",
    "LIQUIDATED_EVENT",
    "execute_bankruptcy",
    "check_overload",
    "evaluate_overload",
    # Analytics feed
    "calculate_velocity",
    "calculate_impact",
    "calculate_streak",
    "recent_velocity",
    "get_weekly_stats",
]
