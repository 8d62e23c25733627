"""Planning MCP tools for Kairos."""

import json
from datetime import datetime

from mcp.server.fastmcp import Context
from mcp.types import ToolAnnotations

from kairos_mcp.context import KairosServices
from kairos_mcp.enums import ResponseFormat
from kairos_mcp.errors import KairosError, NotFoundError
from kairos_mcp.models.inputs import BankruptcyInput, LoadInput, PlanInput, StatsInput
from kairos_mcp.models.planning import OverloadReport
from kairos_mcp.planning.analytics import get_weekly_stats, recent_velocity
from kairos_mcp.planning.bankruptcy import BANKRUPTCY_CHOICES, evaluate_overload, execute_bankruptcy
from kairos_mcp.planning.load import calculate_daily_load
from kairos_mcp.planning.schedule import NO_PENDING_TASKS_MESSAGE, plan_schedule
from kairos_mcp.server import mcp
from kairos_mcp.utils.formatters import (
    _format_load_markdown,
    _format_overload_messages,
    _format_ratio,
    _format_schedule_concise,
    _format_schedule_markdown,
    _format_stats_markdown,
)

# ============================================================================
# Helper Functions
# ============================================================================


def _services(ctx: Context) -> KairosServices:
    return ctx.request_context.lifespan_context


def _overload_report(user_id: int, services: KairosServices, now: datetime) -> OverloadReport:
    """Load status plus the reality-check and bankruptcy warnings for it."""
    load = calculate_daily_load(user_id, services.tasks, services.users, now, services.config.capacity_margin)
    velocity = recent_velocity(user_id, services.tasks, now)
    return evaluate_overload(load, velocity, services.config.velocity_tolerance)


def _report_dict(report: OverloadReport) -> dict:
    return {
        "load": report.load.model_dump(),
        "velocity": report.velocity,
        "reality_check": report.reality_check,
        "bankruptcy_prompt": report.bankruptcy_prompt,
        "messages": report.messages,
    }


# ============================================================================
# Tool Definitions
# ============================================================================


@mcp.tool(
    name="kairos_plan",
    annotations=ToolAnnotations(
        title="Daily Plan",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def kairos_plan(params: PlanInput, ctx: Context) -> str:
    """
    Generate today's time-blocked plan from the user's pending tasks.

    USE THIS WHEN:
    - User asks "what should I do today?" or wants a schedule
    - Energy level changed and the day needs re-ranking

    DO NOT USE WHEN:
    - You only need to know whether the day is overloaded → use kairos_load

    Tasks are ranked fixed-first, then by goal meta score plus energy fit,
    then by priority override, and laid out back to back starting now.
    Overload warnings (reality check, bankruptcy prompt) follow the plan.

    Args:
        params: PlanInput with user_id, optional energy override, and format

    Returns:
        Schedule with time blocks, finish time and total load
    """
    services = _services(ctx)
    now = services.clock()

    try:
        energy = params.energy or services.users.get_current_energy(params.user_id)
        if energy is None:
            raise NotFoundError(params.user_id)

        schedule = plan_schedule(params.user_id, services.tasks, energy, now)
        if schedule is None:
            if params.response_format == ResponseFormat.JSON:
                return json.dumps({"schedule": None, "message": NO_PENDING_TASKS_MESSAGE}, indent=2)
            return NO_PENDING_TASKS_MESSAGE

        report = _overload_report(params.user_id, services, now)
    except KairosError as e:
        return f"Error: {e}"

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(
            {
                "energy": energy,
                "schedule": schedule.model_dump(mode="json"),
                **_report_dict(report),
            },
            indent=2,
        )

    if params.response_format == ResponseFormat.CONCISE:
        output = _format_schedule_concise(schedule)
        flags = []
        if report.reality_check:
            flags.append("reality-check")
        if report.bankruptcy_prompt:
            flags.append(f"overloaded: {BANKRUPTCY_CHOICES}")
        if flags:
            output += f"\n! {', '.join(flags)}"
        return output

    output = _format_schedule_markdown(schedule)
    warnings = _format_overload_messages(report)
    if warnings:
        output += f"\n\n{warnings}"
    return output


@mcp.tool(
    name="kairos_load",
    annotations=ToolAnnotations(
        title="Daily Load",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def kairos_load(params: LoadInput, ctx: Context) -> str:
    """
    Compare the work capacity left today with pending demand.

    Capacity is the time until the user's work end, minus a 20% safety
    margin. When demand exceeds it, the response carries the bankruptcy
    prompt with the HARD, SOFT and MANUAL options (see kairos_bankruptcy).

    Args:
        params: LoadInput with user_id and format

    Returns:
        Capacity, demand, overload ratio and any warnings
    """
    services = _services(ctx)

    try:
        report = _overload_report(params.user_id, services, services.clock())
    except KairosError as e:
        return f"Error: {e}"

    load = report.load
    if params.response_format == ResponseFormat.JSON:
        return json.dumps(_report_dict(report), indent=2)

    if params.response_format == ResponseFormat.CONCISE:
        status = f"overloaded ({BANKRUPTCY_CHOICES})" if load.is_overloaded else "ok"
        return (
            f"{status} | capacity {load.capacity_minutes}m | demand {load.demand_minutes}m"
            f" | load {_format_ratio(load.overload_ratio)}"
        )

    output = _format_load_markdown(load)
    warnings = _format_overload_messages(report)
    if warnings:
        output += f"\n\n{warnings}"
    return output


@mcp.tool(
    name="kairos_bankruptcy",
    annotations=ToolAnnotations(
        title="Declare Task Bankruptcy",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def kairos_bankruptcy(params: BankruptcyInput, ctx: Context) -> str:
    """
    Liquidate an overloaded day with one of three strategies.

    OPTIONS:
    - HARD: archive every pending task whose goal meta score is below 5
    - SOFT: clear the scheduled start of every pending, non-fixed task
    - MANUAL: change nothing, explain how to clean up task by task

    Args:
        params: BankruptcyInput with user_id and option

    Returns:
        Result message with the number of affected tasks
    """
    services = _services(ctx)

    try:
        return execute_bankruptcy(params.user_id, params.option, services.tasks, services.events)
    except KairosError as e:
        return f"Error: {e}"


@mcp.tool(
    name="kairos_stats",
    annotations=ToolAnnotations(
        title="Weekly Stats",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def kairos_stats(params: StatsInput, ctx: Context) -> str:
    """
    Report velocity, impact and streak over the last 7 days.

    - Velocity: average minutes of completed work per day
    - Impact: share of completed tasks under goals scoring 7 or more
    - Streak: consecutive days with a completion, ending today or yesterday

    Args:
        params: StatsInput with user_id and format

    Returns:
        Weekly statistics
    """
    services = _services(ctx)

    try:
        stats = get_weekly_stats(params.user_id, services.tasks, services.clock())
    except KairosError as e:
        return f"Error: {e}"

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(stats.model_dump(), indent=2)

    if params.response_format == ResponseFormat.CONCISE:
        return f"velocity {stats.velocity}m/day | impact {stats.impact_score}% | streak {stats.streak}d"

    return _format_stats_markdown(stats)
