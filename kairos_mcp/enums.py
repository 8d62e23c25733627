"""Enums for Kairos MCP."""

from enum import Enum


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    CONCISE = "concise"  # One line per item, for chaining
    MARKDOWN = "markdown"  # Human-readable (default)
    JSON = "json"  # Machine-readable with all fields


class TaskStatus(str, Enum):
    """Task lifecycle states as stored in the tasks table."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    DONE = "done"
    ARCHIVED = "archived"


class BankruptcyOption(str, Enum):
    """Liquidation strategies offered when the day is overloaded."""

    HARD = "HARD"  # Archive tasks under low-value goals
    SOFT = "SOFT"  # Send unfixed tasks back to the backlog pool
    MANUAL = "MANUAL"  # No mutation, user cleans up task by task


class ImportanceTier(str, Enum):
    """Strategic weight bucket derived from a goal's meta score."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
