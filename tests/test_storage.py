"""Tests for the SQLAlchemy task and user stores."""

from datetime import date, datetime

import pytest
from sqlalchemy import create_engine, select
from sqlalchemy.orm import Session

from kairos_mcp import StorageFailureError, get_weekly_stats
from kairos_mcp.storage import GoalRow, SqlTaskStore, SqlUserStore, TaskRow, UserRow, create_schema


@pytest.fixture
def engine():
    engine = create_engine("sqlite://")
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def seeded(engine):
    """Two users; user 1 owns a high and a low value goal and a mix of tasks."""
    scheduled = datetime(2026, 10, 19, 14, 0)
    with Session(engine) as session, session.begin():
        session.add_all(
            [
                UserRow(id=1, telegram_id="t1", work_end_time="17:30", current_energy=4),
                UserRow(id=2, telegram_id="t2"),
                GoalRow(id=10, user_id=1, title="Ship v1", meta_score=9),
                GoalRow(id=11, user_id=1, title="Side quest", meta_score=3),
                GoalRow(id=20, user_id=2, title="Other", meta_score=2),
            ]
        )
        session.flush()
        session.add_all(
            [
                TaskRow(id=1, user_id=1, goal_id=10, title="Write spec", estimated_minutes=60,
                        priority_override=4, required_energy=5, scheduled_start_time=scheduled),
                TaskRow(id=2, user_id=1, goal_id=11, title="Tidy desk", estimated_minutes=15,
                        scheduled_start_time=scheduled),
                TaskRow(id=3, user_id=1, goal_id=11, title="Dentist", estimated_minutes=45,
                        is_fixed=True, scheduled_start_time=scheduled),
                TaskRow(id=4, user_id=1, goal_id=None, title="Loose end", estimated_minutes=20),
                TaskRow(id=5, user_id=1, goal_id=11, title="Old chore", status="archived"),
                TaskRow(id=6, user_id=1, goal_id=10, title="Draft", estimated_minutes=90, status="done",
                        completed_at=datetime(2026, 10, 19, 8, 0)),
                TaskRow(id=7, user_id=1, goal_id=11, title="Email", estimated_minutes=10, status="done",
                        completed_at=datetime(2026, 10, 19, 7, 0)),
                TaskRow(id=8, user_id=1, goal_id=10, title="Plan", estimated_minutes=30, status="done",
                        completed_at=datetime(2026, 10, 10, 9, 0)),
                TaskRow(id=9, user_id=2, goal_id=20, title="Not mine", estimated_minutes=500,
                        scheduled_start_time=scheduled),
                TaskRow(id=10, user_id=1, goal_id=None, title="Errand", estimated_minutes=70, status="done",
                        completed_at=datetime(2026, 10, 19, 8, 30)),
            ]
        )
    return engine


@pytest.fixture
def tasks(seeded):
    return SqlTaskStore(seeded)


@pytest.fixture
def users(seeded):
    return SqlUserStore(seeded)


def _statuses(engine) -> dict[int, str]:
    with Session(engine) as session:
        return dict(session.execute(select(TaskRow.id, TaskRow.status)).all())


def _scheduled(engine) -> dict[int, datetime | None]:
    with Session(engine) as session:
        return dict(session.execute(select(TaskRow.id, TaskRow.scheduled_start_time)).all())


class TestSqlTaskStoreReads:
    """Read queries."""

    def test_sum_pending_minutes(self, tasks):
        assert tasks.sum_pending_minutes(1) == 60 + 15 + 45 + 20

    def test_sum_pending_minutes_no_tasks(self, tasks):
        assert tasks.sum_pending_minutes(3) == 0

    def test_pending_with_goal_context(self, tasks):
        pending = {t.id: t for t in tasks.find_pending_with_goal_context(1)}

        assert sorted(pending) == [1, 2, 3, 4]
        assert pending[1].goal_title == "Ship v1"
        assert pending[1].goal_meta_score == 9
        assert pending[1].required_energy == 5
        assert pending[1].priority_override == 4
        assert pending[3].is_fixed is True
        assert pending[4].goal_title is None
        assert pending[4].goal_meta_score == 0

    def test_completed_since(self, tasks):
        completed = tasks.get_completed_since(1, datetime(2026, 10, 12, 9, 0))

        assert sorted(t.id for t in completed) == [6, 7]
        by_id = {t.id: t for t in completed}
        assert by_id[6].goal_meta_score == 9
        assert by_id[7].estimated_minutes == 10

    def test_completed_since_skips_tasks_without_goal(self, tasks):
        completed = tasks.get_completed_since(1, datetime(2026, 10, 12, 9, 0))
        assert 10 not in {t.id for t in completed}

    def test_weekly_stats_ignore_tasks_without_goal(self, tasks):
        stats = get_weekly_stats(1, tasks, datetime(2026, 10, 19, 9, 0))

        # 90m + 10m over 7 days; one of two tasks under a goal scoring 7+
        assert stats.velocity == 14
        assert stats.impact_score == 50

    def test_distinct_completion_dates(self, tasks):
        assert tasks.get_distinct_completion_dates(1) == [date(2026, 10, 19), date(2026, 10, 10)]

    def test_distinct_completion_dates_none(self, tasks):
        assert tasks.get_distinct_completion_dates(2) == []


class TestSqlTaskStoreUpdates:
    """Bankruptcy bulk updates."""

    def test_archive_below_threshold(self, tasks, seeded):
        assert tasks.archive_where_goal_score_below(1, 5) == 2

        statuses = _statuses(seeded)
        assert statuses[2] == "archived"
        assert statuses[3] == "archived"
        assert statuses[1] == "pending"
        assert statuses[4] == "pending"
        assert statuses[7] == "done"
        assert statuses[9] == "pending"

    def test_archive_is_idempotent(self, tasks):
        tasks.archive_where_goal_score_below(1, 5)
        assert tasks.archive_where_goal_score_below(1, 5) == 0

    def test_clear_scheduled_time_skips_fixed(self, tasks, seeded):
        assert tasks.clear_scheduled_time_for_backlog(1) == 2

        scheduled = _scheduled(seeded)
        assert scheduled[1] is None
        assert scheduled[2] is None
        assert scheduled[3] is not None
        assert scheduled[9] is not None

    def test_clear_scheduled_time_is_idempotent(self, tasks):
        tasks.clear_scheduled_time_for_backlog(1)
        assert tasks.clear_scheduled_time_for_backlog(1) == 0


class TestSqlUserStore:
    """User profile reads."""

    def test_work_end_time(self, users):
        assert users.get_work_end_time(1) == "17:30"
        assert users.get_work_end_time(2) == "18:00"

    def test_current_energy(self, users):
        assert users.get_current_energy(1) == 4
        assert users.get_current_energy(2) == 3

    def test_unknown_user(self, users):
        assert users.get_work_end_time(99) is None
        assert users.get_current_energy(99) is None


class TestStorageFailure:
    """Driver errors surface as StorageFailureError."""

    def test_missing_schema(self):
        engine = create_engine("sqlite://")
        with pytest.raises(StorageFailureError) as exc_info:
            SqlTaskStore(engine).sum_pending_minutes(1)
        assert exc_info.value.__cause__ is not None
        engine.dispose()
