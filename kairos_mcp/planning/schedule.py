"""Schedule formatter: lays ranked tasks out as time blocks from now."""

import logging
from collections.abc import Sequence
from datetime import datetime, timedelta

from kairos_mcp.config import DEFAULT_ENERGY, HIGH_TIER_THRESHOLD, MEDIUM_TIER_THRESHOLD
from kairos_mcp.enums import ImportanceTier
from kairos_mcp.models.planning import DailySchedule, ScheduleBlock
from kairos_mcp.models.task import TaskWithGoal
from kairos_mcp.planning.priority import prioritize
from kairos_mcp.ports import TaskStore
from kairos_mcp.utils.formatters import _format_schedule_markdown

logger = logging.getLogger(__name__)

NO_PENDING_TASKS_MESSAGE = "🎉 No pending tasks! Enjoy your free day."
UNASSIGNED_GOAL_LABEL = "Unassigned"


def importance_tier(meta_score: int) -> ImportanceTier:
    if meta_score >= HIGH_TIER_THRESHOLD:
        return ImportanceTier.HIGH
    if meta_score >= MEDIUM_TIER_THRESHOLD:
        return ImportanceTier.MEDIUM
    return ImportanceTier.LOW


def build_schedule(ordered_tasks: Sequence[TaskWithGoal], now: datetime) -> DailySchedule:
    """
    Allocate contiguous blocks in the given order, starting at ``now``.

    Each task occupies ``[cursor, cursor + estimated_minutes)`` and the cursor
    moves to the end of the block.
    """
    cursor = now
    total = 0
    blocks: list[ScheduleBlock] = []

    for task in ordered_tasks:
        end = cursor + timedelta(minutes=task.estimated_minutes)
        blocks.append(
            ScheduleBlock(
                start=cursor,
                end=end,
                duration_minutes=task.estimated_minutes,
                task_id=task.id,
                title=task.title,
                tier=importance_tier(task.goal_meta_score),
                goal_title=task.goal_title or UNASSIGNED_GOAL_LABEL,
            )
        )
        cursor = end
        total += task.estimated_minutes

    return DailySchedule(generated_at=now, blocks=blocks, finish_time=cursor, total_minutes=total)


def format_schedule(ordered_tasks: Sequence[TaskWithGoal], now: datetime) -> str:
    """Render ranked tasks as a markdown time-blocked schedule."""
    return _format_schedule_markdown(build_schedule(ordered_tasks, now))


def plan_schedule(
    user_id: int,
    tasks: TaskStore,
    user_energy: int = DEFAULT_ENERGY,
    now: datetime | None = None,
) -> DailySchedule | None:
    """Fetch, rank and lay out a user's pending tasks; None when there are none."""
    pending = tasks.find_pending_with_goal_context(user_id)
    if not pending:
        return None

    ranked = prioritize(pending, user_energy)
    schedule = build_schedule(ranked, now or datetime.now())
    logger.debug(
        "Planned %d task(s) for user %s at energy %s, %d min total",
        len(schedule.blocks),
        user_id,
        user_energy,
        schedule.total_minutes,
    )
    return schedule


def generate_daily_plan(
    user_id: int,
    tasks: TaskStore,
    user_energy: int = DEFAULT_ENERGY,
    now: datetime | None = None,
) -> str:
    """
    Build today's plan as markdown.

    Returns ``NO_PENDING_TASKS_MESSAGE`` without ranking anything when the
    user has no pending tasks.
    """
    schedule = plan_schedule(user_id, tasks, user_energy, now)
    if schedule is None:
        return NO_PENDING_TASKS_MESSAGE
    return _format_schedule_markdown(schedule)
