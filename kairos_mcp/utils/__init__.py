"""Utility functions for Kairos MCP."""

from kairos_mcp.utils.formatters import (
    _format_duration,
    _format_load_markdown,
    _format_schedule_concise,
    _format_schedule_markdown,
    _format_stats_markdown,
)
from kairos_mcp.utils.parsers import _parse_completed_task, _parse_task_with_goal, _parse_work_end_time

__all__ = [
    "_parse_work_end_time",
    "_parse_task_with_goal",
    "_parse_completed_task",
    "_format_duration",
    "_format_schedule_markdown",
    "_format_schedule_concise",
    "_format_load_markdown",
    "_format_stats_markdown",
]
