"""SQLAlchemy implementations of the task and user stores."""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import date, datetime
from typing import TypeVar

from sqlalchemy import Date, Engine, create_engine, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from kairos_mcp.enums import TaskStatus
from kairos_mcp.errors import StorageFailureError
from kairos_mcp.models.task import CompletedTask, TaskWithGoal
from kairos_mcp.storage.models import Base, GoalRow, TaskRow, UserRow
from kairos_mcp.utils.parsers import _parse_completed_task, _parse_task_with_goal

logger = logging.getLogger(__name__)

T = TypeVar("T")


def build_engine(database_url: str) -> Engine:
    return create_engine(database_url, future=True)


def create_schema(engine: Engine) -> None:
    """Create the users, goals and tasks tables if they do not exist."""
    Base.metadata.create_all(engine)


class _SqlStore:
    def __init__(self, engine: Engine):
        self.engine = engine

    @contextmanager
    def _session(self) -> Iterator[Session]:
        """Session in a single transaction, with driver errors wrapped as StorageFailureError."""
        try:
            with Session(self.engine) as session, session.begin():
                yield session
        except SQLAlchemyError as e:
            logger.error("Storage operation failed: %s", e)
            raise StorageFailureError(f"Storage operation failed: {type(e).__name__}") from e

    def _run(self, operation: Callable[[Session], T]) -> T:
        with self._session() as session:
            return operation(session)


class SqlTaskStore(_SqlStore):
    """Task queries used by the planner, analytics and bankruptcy flows."""

    def sum_pending_minutes(self, user_id: int) -> int:
        stmt = select(func.coalesce(func.sum(TaskRow.estimated_minutes), 0)).where(
            TaskRow.user_id == user_id,
            TaskRow.status == TaskStatus.PENDING.value,
        )
        return int(self._run(lambda s: s.execute(stmt).scalar_one()))

    def find_pending_with_goal_context(self, user_id: int) -> list[TaskWithGoal]:
        stmt = (
            select(
                TaskRow.id,
                TaskRow.title,
                TaskRow.estimated_minutes,
                TaskRow.priority_override,
                TaskRow.is_fixed,
                TaskRow.required_energy,
                TaskRow.scheduled_start_time,
                GoalRow.title.label("goal_title"),
                GoalRow.meta_score,
            )
            .outerjoin(GoalRow, TaskRow.goal_id == GoalRow.id)
            .where(TaskRow.user_id == user_id, TaskRow.status == TaskStatus.PENDING.value)
            .order_by(TaskRow.id)
        )
        rows = self._run(lambda s: s.execute(stmt).mappings().all())
        return [_parse_task_with_goal(row) for row in rows]

    def get_completed_since(self, user_id: int, since: datetime) -> list[CompletedTask]:
        """Completed tasks under a goal, finished at or after ``since``."""
        stmt = (
            select(
                TaskRow.id,
                TaskRow.title,
                TaskRow.estimated_minutes,
                TaskRow.completed_at,
                GoalRow.meta_score,
            )
            .join(GoalRow, TaskRow.goal_id == GoalRow.id)
            .where(
                TaskRow.user_id == user_id,
                TaskRow.status == TaskStatus.DONE.value,
                TaskRow.completed_at >= since,
            )
        )
        rows = self._run(lambda s: s.execute(stmt).mappings().all())
        return [_parse_completed_task(row) for row in rows]

    def get_distinct_completion_dates(self, user_id: int) -> list[date]:
        completion_day = func.date(TaskRow.completed_at, type_=Date).label("completion_day")
        stmt = (
            select(completion_day)
            .where(
                TaskRow.user_id == user_id,
                TaskRow.status == TaskStatus.DONE.value,
                TaskRow.completed_at.is_not(None),
            )
            .distinct()
            .order_by(completion_day.desc())
        )
        return list(self._run(lambda s: s.execute(stmt).scalars().all()))

    def archive_where_goal_score_below(self, user_id: int, threshold: int) -> int:
        low_value_goals = select(GoalRow.id).where(GoalRow.meta_score < threshold)
        stmt = (
            update(TaskRow)
            .where(
                TaskRow.user_id == user_id,
                TaskRow.status == TaskStatus.PENDING.value,
                TaskRow.goal_id.in_(low_value_goals),
            )
            .values(status=TaskStatus.ARCHIVED.value)
            .execution_options(synchronize_session=False)
        )
        return self._run(lambda s: s.execute(stmt).rowcount)

    def clear_scheduled_time_for_backlog(self, user_id: int) -> int:
        stmt = (
            update(TaskRow)
            .where(
                TaskRow.user_id == user_id,
                TaskRow.status == TaskStatus.PENDING.value,
                TaskRow.is_fixed.is_(False),
                TaskRow.scheduled_start_time.is_not(None),
            )
            .values(scheduled_start_time=None)
            .execution_options(synchronize_session=False)
        )
        return self._run(lambda s: s.execute(stmt).rowcount)


class SqlUserStore(_SqlStore):
    def get_work_end_time(self, user_id: int) -> str | None:
        stmt = select(UserRow.work_end_time).where(UserRow.id == user_id)
        return self._run(lambda s: s.execute(stmt).scalar_one_or_none())

    def get_current_energy(self, user_id: int) -> int | None:
        stmt = select(UserRow.current_energy).where(UserRow.id == user_id)
        return self._run(lambda s: s.execute(stmt).scalar_one_or_none())
