"""Pytest configuration and fixtures for kairos-mcp tests."""

from unittest.mock import MagicMock

import pytest

from kairos_mcp.config import KairosConfig
from kairos_mcp.context import KairosServices
from kairos_mcp.events import EventBus
from helpers import NOW


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def task_store():
    """TaskStore mock with an empty, idle user."""
    store = MagicMock()
    store.sum_pending_minutes.return_value = 0
    store.find_pending_with_goal_context.return_value = []
    store.get_completed_since.return_value = []
    store.get_distinct_completion_dates.return_value = []
    store.archive_where_goal_score_below.return_value = 0
    store.clear_scheduled_time_for_backlog.return_value = 0
    return store


@pytest.fixture
def user_store():
    """UserStore mock for a user working until 18:00 at energy 3."""
    store = MagicMock()
    store.get_work_end_time.return_value = "18:00"
    store.get_current_energy.return_value = 3
    return store


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def services(task_store, user_store, event_bus):
    return KairosServices(
        tasks=task_store,
        users=user_store,
        events=event_bus,
        config=KairosConfig(),
        clock=lambda: NOW,
    )


@pytest.fixture
def ctx(services):
    """Stand-in for the FastMCP request context."""
    context = MagicMock()
    context.request_context.lifespan_context = services
    return context
