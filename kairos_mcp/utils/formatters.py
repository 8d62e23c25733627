"""Formatting utilities for planning output."""

import math
from datetime import datetime

from kairos_mcp.enums import ImportanceTier
from kairos_mcp.models.planning import DailySchedule, LoadStatus, OverloadReport, WeeklyStats

TIER_GLYPHS = {
    ImportanceTier.HIGH: "🌟",
    ImportanceTier.MEDIUM: "🎯",
    ImportanceTier.LOW: "📝",
}


def _format_clock(moment: datetime) -> str:
    """Format a timestamp as a 24h ``HH:MM`` wall-clock time."""
    return moment.strftime("%H:%M")


def _format_duration(minutes: int) -> str:
    """Format minutes as hours and minutes: 90 -> "1h 30m"."""
    return f"{minutes // 60}h {minutes % 60}m"


def _format_ratio(ratio: float) -> str:
    if math.isinf(ratio):
        return "∞"
    return f"{ratio:.0%}"


def _format_schedule_markdown(schedule: DailySchedule) -> str:
    """
    Format a daily schedule as markdown.

    Output:
    # Daily Plan (generated 09:00)

    ⏰ **09:00 - 09:30** (30m)
    🌟 **[#15] Write report**
       └ Goal: _Ship v1_

    🏁 **Estimated finish:** 09:30
    ⏱️ **Total load:** 0h 30m
    """
    lines = [f"# Daily Plan (generated {_format_clock(schedule.generated_at)})", ""]

    for block in schedule.blocks:
        lines.append(
            f"⏰ **{_format_clock(block.start)} - {_format_clock(block.end)}** ({block.duration_minutes}m)"
        )
        lines.append(f"{TIER_GLYPHS[block.tier]} **[#{block.task_id}] {block.title}**")
        lines.append(f"   └ Goal: _{block.goal_title}_")
        lines.append("")

    lines.append(f"🏁 **Estimated finish:** {_format_clock(schedule.finish_time)}")
    lines.append(f"⏱️ **Total load:** {_format_duration(schedule.total_minutes)}")
    return "\n".join(lines)


def _format_schedule_concise(schedule: DailySchedule) -> str:
    """
    Format a daily schedule with one line per block.

    Output:
    3 block(s) | finish 11:00 | 2h 0m
    09:00-09:30 #15: Write report (high)
    """
    lines = [
        f"{len(schedule.blocks)} block(s) | finish {_format_clock(schedule.finish_time)}"
        f" | {_format_duration(schedule.total_minutes)}"
    ]
    for block in schedule.blocks:
        lines.append(
            f"{_format_clock(block.start)}-{_format_clock(block.end)} "
            f"#{block.task_id}: {block.title[:50]} ({block.tier.value})"
        )
    return "\n".join(lines)


def _format_load_markdown(load: LoadStatus) -> str:
    status = "⚠️ OVERLOADED" if load.is_overloaded else "✅ Within capacity"
    lines = [
        "# Daily Load",
        "",
        f"**Status**: {status}",
        f"**Capacity**: {_format_duration(load.capacity_minutes)} ({load.capacity_minutes}m)",
        f"**Demand**: {_format_duration(load.demand_minutes)} ({load.demand_minutes}m)",
        f"**Load**: {_format_ratio(load.overload_ratio)}",
    ]
    return "\n".join(lines)


def _format_overload_messages(report: OverloadReport) -> str:
    """Render the overload warnings in order, or an empty string when there are none."""
    return "\n\n".join(report.messages)


def _format_stats_markdown(stats: WeeklyStats) -> str:
    lines = [
        "# Weekly Stats (last 7 days)",
        "",
        f"**Velocity**: {stats.velocity} min/day",
        f"**Impact**: {stats.impact_score}% high-impact tasks",
        f"**Streak**: {stats.streak} day(s)",
    ]
    return "\n".join(lines)
