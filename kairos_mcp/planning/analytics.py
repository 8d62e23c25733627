"""Analytics feed: velocity, impact and streak over the trailing week."""

import logging
import math
from collections.abc import Iterable, Sequence
from datetime import date, datetime, timedelta

from kairos_mcp.config import ANALYTICS_WINDOW_DAYS, DEFAULT_ESTIMATED_MINUTES, HIGH_IMPACT_THRESHOLD
from kairos_mcp.models.planning import WeeklyStats
from kairos_mcp.models.task import CompletedTask
from kairos_mcp.ports import TaskStore
from kairos_mcp.utils.parsers import _to_calendar_day

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def calculate_velocity(completed: Sequence[CompletedTask], days: int = ANALYTICS_WINDOW_DAYS) -> int:
    """Average minutes completed per day; tasks without an estimate count as 30."""
    total = sum(t.estimated_minutes or DEFAULT_ESTIMATED_MINUTES for t in completed)
    return _round_half_up(total / days)


def calculate_impact(completed: Sequence[CompletedTask], threshold: int = HIGH_IMPACT_THRESHOLD) -> int:
    """Percentage of completed tasks whose goal scores at least ``threshold``."""
    if not completed:
        return 0
    high_impact = sum(1 for t in completed if t.goal_meta_score >= threshold)
    return _round_half_up(high_impact / len(completed) * 100)


def calculate_streak(completion_days: Iterable[date | datetime], today: date) -> int:
    """
    Count consecutive active calendar days ending today or yesterday.

    Timestamps are truncated to their day and duplicates collapse. A most
    recent day older than yesterday means the streak is broken (0); any gap
    of more than one day stops the count. Days after ``today`` are ignored.
    """
    active = {_to_calendar_day(d) for d in completion_days}
    days = sorted((d for d in active if d <= today), reverse=True)
    if not days or (today - days[0]).days > 1:
        return 0

    streak = 1
    for previous, current in zip(days, days[1:]):
        if (previous - current).days != 1:
            break
        streak += 1
    return streak


def recent_velocity(user_id: int, tasks: TaskStore, now: datetime | None = None) -> int:
    """Velocity over the trailing window, without the streak lookup."""
    now = now or datetime.now()
    return calculate_velocity(tasks.get_completed_since(user_id, now - timedelta(days=ANALYTICS_WINDOW_DAYS)))


def get_weekly_stats(user_id: int, tasks: TaskStore, now: datetime | None = None) -> WeeklyStats:
    now = now or datetime.now()
    since = now - timedelta(days=ANALYTICS_WINDOW_DAYS)

    completed = tasks.get_completed_since(user_id, since)
    stats = WeeklyStats(
        velocity=calculate_velocity(completed),
        impact_score=calculate_impact(completed),
        streak=calculate_streak(tasks.get_distinct_completion_dates(user_id), now.date()),
    )
    logger.debug("Weekly stats for user %s: %s", user_id, stats.model_dump())
    return stats
