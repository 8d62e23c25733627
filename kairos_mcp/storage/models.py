"""SQLAlchemy table models for the Kairos relational store."""

from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.sql import func


class Base(DeclarativeBase):
    pass


class UserRow(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    telegram_id = Column(String(255), unique=True)
    username = Column(String(255))
    timezone = Column(String(100), nullable=False, default="UTC")
    work_start_time = Column(String(5), nullable=False, default="09:00")
    work_end_time = Column(String(5), nullable=False, default="18:00")
    current_energy = Column(Integer, nullable=False, default=3)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (CheckConstraint("current_energy BETWEEN 1 AND 5", name="ck_users_current_energy"),)


class GoalRow(Base):
    __tablename__ = "goals"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(500), nullable=False)
    meta_score = Column(Integer, nullable=False)
    status = Column(String(50), nullable=False, default="active")
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (CheckConstraint("meta_score BETWEEN 1 AND 10", name="ck_goals_meta_score"),)


class TaskRow(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    goal_id = Column(Integer, ForeignKey("goals.id", ondelete="CASCADE"), index=True)
    title = Column(String(255), nullable=False)
    estimated_minutes = Column(Integer, nullable=False, default=30)
    status = Column(String(50), nullable=False, default="pending", index=True)
    priority_override = Column(Integer, default=3)
    is_fixed = Column(Boolean, nullable=False, default=False)
    required_energy = Column(Integer, nullable=False, default=3)
    scheduled_start_time = Column(DateTime(timezone=True))
    completed_at = Column(DateTime(timezone=True))
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'in_progress', 'done', 'archived')",
            name="ck_tasks_status",
        ),
        CheckConstraint("priority_override BETWEEN 1 AND 5", name="ck_tasks_priority_override"),
        CheckConstraint("required_energy BETWEEN 1 AND 5", name="ck_tasks_required_energy"),
    )
