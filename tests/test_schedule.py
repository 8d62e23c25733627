"""Tests for the schedule formatter and plan generation."""

from datetime import datetime
from unittest.mock import patch

from helpers import NOW, make_task
from kairos_mcp import (
    NO_PENDING_TASKS_MESSAGE,
    ImportanceTier,
    build_schedule,
    format_schedule,
    generate_daily_plan,
)
from kairos_mcp.planning.schedule import importance_tier, plan_schedule
from kairos_mcp.utils.formatters import _format_duration


class TestImportanceTier:
    """Tests for importance_tier."""

    def test_tiers(self):
        assert importance_tier(10) == ImportanceTier.HIGH
        assert importance_tier(8) == ImportanceTier.HIGH
        assert importance_tier(7) == ImportanceTier.MEDIUM
        assert importance_tier(5) == ImportanceTier.MEDIUM
        assert importance_tier(4) == ImportanceTier.LOW
        assert importance_tier(0) == ImportanceTier.LOW


class TestBuildSchedule:
    """Tests for build_schedule."""

    def test_blocks_are_contiguous_from_now(self):
        tasks = [make_task(1, estimated_minutes=30), make_task(2, estimated_minutes=90), make_task(3)]
        schedule = build_schedule(tasks, NOW)

        starts = [b.start for b in schedule.blocks]
        ends = [b.end for b in schedule.blocks]
        assert starts == [NOW, datetime(2026, 10, 19, 9, 30), datetime(2026, 10, 19, 11, 0)]
        assert ends == [datetime(2026, 10, 19, 9, 30), datetime(2026, 10, 19, 11, 0), datetime(2026, 10, 19, 11, 30)]
        assert schedule.finish_time == datetime(2026, 10, 19, 11, 30)
        assert schedule.total_minutes == 150

    def test_block_details(self):
        tasks = [
            make_task(15, title="Write report", goal_title="Ship v1", goal_meta_score=9),
            make_task(16, title="Inbox zero"),
        ]
        first, second = build_schedule(tasks, NOW).blocks

        assert first.task_id == 15
        assert first.title == "Write report"
        assert first.goal_title == "Ship v1"
        assert first.tier == ImportanceTier.HIGH
        assert first.duration_minutes == 30
        assert second.goal_title == "Unassigned"
        assert second.tier == ImportanceTier.LOW

    def test_keeps_given_order(self):
        tasks = [make_task(3, goal_meta_score=1), make_task(1, goal_meta_score=10)]
        assert [b.task_id for b in build_schedule(tasks, NOW).blocks] == [3, 1]

    def test_empty(self):
        schedule = build_schedule([], NOW)
        assert schedule.blocks == []
        assert schedule.finish_time == NOW
        assert schedule.total_minutes == 0


class TestFormatSchedule:
    """Tests for the markdown rendering."""

    def test_markdown_blocks_and_summary(self):
        tasks = [
            make_task(15, title="Write report", goal_title="Ship v1", goal_meta_score=9, estimated_minutes=45),
            make_task(16, title="Review PR", goal_title="Team", goal_meta_score=6, estimated_minutes=30),
            make_task(17, title="Inbox zero", estimated_minutes=20),
        ]
        output = format_schedule(tasks, NOW)

        assert "# Daily Plan (generated 09:00)" in output
        assert "⏰ **09:00 - 09:45** (45m)" in output
        assert "🌟 **[#15] Write report**" in output
        assert "└ Goal: _Ship v1_" in output
        assert "🎯 **[#16] Review PR**" in output
        assert "📝 **[#17] Inbox zero**" in output
        assert "_Unassigned_" in output
        assert "**Estimated finish:** 10:35" in output
        assert "**Total load:** 1h 35m" in output

    def test_blocks_follow_rank_order(self):
        output = format_schedule([make_task(2), make_task(1)], NOW)
        assert output.index("[#2]") < output.index("[#1]")

    def test_format_duration(self):
        assert _format_duration(0) == "0h 0m"
        assert _format_duration(59) == "0h 59m"
        assert _format_duration(120) == "2h 0m"
        assert _format_duration(95) == "1h 35m"


class TestGenerateDailyPlan:
    """Tests for generate_daily_plan."""

    def test_no_pending_tasks(self, task_store):
        with (
            patch("kairos_mcp.planning.schedule.prioritize") as mock_prioritize,
            patch("kairos_mcp.planning.schedule._format_schedule_markdown") as mock_format,
        ):
            result = generate_daily_plan(1, task_store, now=NOW)

        assert result == NO_PENDING_TASKS_MESSAGE
        mock_prioritize.assert_not_called()
        mock_format.assert_not_called()

    def test_ranks_then_formats(self, task_store):
        task_store.find_pending_with_goal_context.return_value = [
            make_task(1, title="Low value", goal_meta_score=2),
            make_task(2, title="Fixed standup", is_fixed=True, estimated_minutes=15),
            make_task(3, title="High value", goal_meta_score=9),
        ]
        result = generate_daily_plan(1, task_store, user_energy=3, now=NOW)

        task_store.find_pending_with_goal_context.assert_called_once_with(1)
        assert result.index("[#2]") < result.index("[#3]") < result.index("[#1]")
        assert "⏰ **09:00 - 09:15** (15m)" in result
        assert "⏰ **09:15 - 09:45** (30m)" in result

    def test_energy_changes_order(self, task_store):
        task_store.find_pending_with_goal_context.return_value = [
            make_task(1, goal_meta_score=5, required_energy=1),
            make_task(2, goal_meta_score=5, required_energy=5),
        ]
        low = generate_daily_plan(1, task_store, user_energy=1, now=NOW)
        high = generate_daily_plan(1, task_store, user_energy=5, now=NOW)
        assert low.index("[#1]") < low.index("[#2]")
        assert high.index("[#2]") < high.index("[#1]")

    def test_plan_schedule_none_when_empty(self, task_store):
        assert plan_schedule(1, task_store, now=NOW) is None
