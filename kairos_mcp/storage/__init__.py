"""Relational store backing Kairos."""

from kairos_mcp.storage.models import Base, GoalRow, TaskRow, UserRow
from kairos_mcp.storage.sql import SqlTaskStore, SqlUserStore, build_engine, create_schema

__all__ = [
    "Base",
    "UserRow",
    "GoalRow",
    "TaskRow",
    "SqlTaskStore",
    "SqlUserStore",
    "build_engine",
    "create_schema",
]
