"""Load model: remaining work capacity for today against pending demand."""

import logging
import math
from datetime import datetime

from kairos_mcp.config import CAPACITY_SAFETY_MARGIN
from kairos_mcp.errors import NotFoundError
from kairos_mcp.models.planning import LoadStatus
from kairos_mcp.ports import TaskStore, UserStore
from kairos_mcp.utils.parsers import _parse_work_end_time

logger = logging.getLogger(__name__)


def remaining_work_minutes(work_end_time: str, now: datetime) -> float:
    """Minutes from ``now`` until today's work end, clamped at 0."""
    end = _parse_work_end_time(work_end_time)
    work_end = now.replace(hour=end.hour, minute=end.minute, second=0, microsecond=0)
    remaining = (work_end - now).total_seconds() / 60
    return max(remaining, 0.0)


def compute_load_status(
    demand_minutes: int,
    work_end_time: str,
    now: datetime,
    margin: float = CAPACITY_SAFETY_MARGIN,
) -> LoadStatus:
    """
    Compare pending demand with the capacity left before work end.

    Args:
        demand_minutes: Sum of estimated minutes over pending tasks
        work_end_time: User's work end as ``HH:MM``
        now: Current wall-clock time
        margin: Share of the remaining window held back

    Returns:
        LoadStatus with capacity, demand, overload flag and ratio
    """
    capacity = math.floor(remaining_work_minutes(work_end_time, now) * (1 - margin))

    if capacity > 0:
        ratio = demand_minutes / capacity
    elif demand_minutes > 0:
        ratio = math.inf
    else:
        ratio = 0.0

    return LoadStatus(
        capacity_minutes=capacity,
        demand_minutes=demand_minutes,
        is_overloaded=demand_minutes > capacity,
        overload_ratio=ratio,
    )


def calculate_daily_load(
    user_id: int,
    tasks: TaskStore,
    users: UserStore,
    now: datetime | None = None,
    margin: float = CAPACITY_SAFETY_MARGIN,
) -> LoadStatus:
    """
    Compute today's LoadStatus for a user.

    Raises:
        NotFoundError: If the user does not exist
        InvalidInputError: If the stored work end time is malformed
    """
    work_end_time = users.get_work_end_time(user_id)
    if work_end_time is None:
        raise NotFoundError(user_id)

    demand = tasks.sum_pending_minutes(user_id)
    status = compute_load_status(demand, work_end_time, now or datetime.now(), margin)
    logger.debug(
        "Load for user %s: capacity=%sm demand=%sm overloaded=%s",
        user_id,
        status.capacity_minutes,
        status.demand_minutes,
        status.is_overloaded,
    )
    return status
