"""Bankruptcy resolver: liquidation strategies for an overloaded day."""

import logging
from datetime import datetime

from kairos_mcp.config import CAPACITY_SAFETY_MARGIN, HARD_BANKRUPTCY_THRESHOLD, VELOCITY_TOLERANCE
from kairos_mcp.enums import BankruptcyOption
from kairos_mcp.errors import InvalidInputError
from kairos_mcp.models.planning import LoadStatus, OverloadReport
from kairos_mcp.planning.load import calculate_daily_load
from kairos_mcp.ports import EventPublisher, TaskStore, UserStore

logger = logging.getLogger(__name__)

LIQUIDATED_EVENT = "tasks.liquidated"
BANKRUPTCY_CHOICES = "|".join(option.value for option in BankruptcyOption)

BANKRUPTCY_PROMPT = (
    "🚨 **Task bankruptcy**: today's pending work does not fit in the time you have left.\n"
    "Choose how to liquidate:\n"
    "- **HARD**: archive every pending task under goals scoring below 5\n"
    "- **SOFT**: send unfixed tasks back to the backlog pool\n"
    "- **MANUAL**: clean up task by task yourself"
)


def execute_bankruptcy(
    user_id: int,
    option: BankruptcyOption,
    tasks: TaskStore,
    publisher: EventPublisher | None = None,
) -> str:
    """
    Apply a liquidation strategy and describe the result.

    HARD and SOFT each map to one bulk update, so rerunning either on an
    already processed backlog reports 0.

    Raises:
        InvalidInputError: If ``option`` is not a known strategy
    """
    try:
        option = BankruptcyOption(option)
    except ValueError as e:
        raise InvalidInputError(f"Unknown bankruptcy option: {option!r}") from e

    if option == BankruptcyOption.MANUAL:
        return "🛠 **Manual**: complete or archive specific tasks one by one to free up today's time."

    if option == BankruptcyOption.HARD:
        count = tasks.archive_where_goal_score_below(user_id, HARD_BANKRUPTCY_THRESHOLD)
        message = f"🔥 **Hard reset**: archived {count} low-priority task(s)."
    else:
        count = tasks.clear_scheduled_time_for_backlog(user_id)
        message = f"🍃 **Soft reset**: moved {count} task(s) back to the general backlog (no fixed time)."

    logger.info("Bankruptcy %s for user %s affected %d task(s)", option.value, user_id, count)
    if publisher is not None and count > 0:
        publisher.publish(
            {
                "type": LIQUIDATED_EVENT,
                "user_id": user_id,
                "payload": {"option": option.value, "count": count},
            }
        )
    return message


def check_overload(
    user_id: int,
    tasks: TaskStore,
    users: UserStore,
    now: datetime | None = None,
    margin: float = CAPACITY_SAFETY_MARGIN,
) -> bool:
    return calculate_daily_load(user_id, tasks, users, now, margin).is_overloaded


def evaluate_overload(
    load: LoadStatus,
    velocity: int,
    tolerance: float = VELOCITY_TOLERANCE,
) -> OverloadReport:
    """
    Decide which overload warnings to surface.

    The reality check compares demand with the recent daily velocity and is
    informational; the bankruptcy prompt fires on capacity overload and asks
    the user to pick a strategy. Both can fire, reality check first.
    """
    report = OverloadReport(load=load, velocity=velocity)

    if load.demand_minutes > velocity * (1 + tolerance):
        report.reality_check = True
        report.messages.append(
            f"⚠️ **Reality check**: you have {load.demand_minutes}m pending, "
            f"but over the last week you completed about {velocity}m per day."
        )

    if load.is_overloaded:
        report.bankruptcy_prompt = True
        report.messages.append(BANKRUPTCY_PROMPT)

    return report
