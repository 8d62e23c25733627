"""Priority scorer: deterministic ranking of pending tasks."""

from collections.abc import Iterable

from kairos_mcp.errors import InvalidInputError
from kairos_mcp.models.task import TaskWithGoal


def _check_energy(user_energy: int) -> None:
    if not 1 <= user_energy <= 5:
        raise InvalidInputError(f"Energy level must be between 1 and 5, got {user_energy}")


def energy_fit(task: TaskWithGoal, user_energy: int) -> int:
    """Closeness of the task's required energy to the user's: 10 on a match, down to 2."""
    return (5 - abs(user_energy - task.required_energy)) * 2


def strategic_score(task: TaskWithGoal, user_energy: int) -> int:
    """Goal weight plus energy fit."""
    return task.goal_meta_score + energy_fit(task, user_energy)


def prioritize(tasks: Iterable[TaskWithGoal], user_energy: int) -> list[TaskWithGoal]:
    """
    Rank pending tasks for today.

    Order:
    1. Fixed tasks before anything else
    2. Strategic score (goal meta score + energy fit), highest first
    3. Priority override, highest first

    The sort is stable, so tasks that tie on all three keep their input order.

    Raises:
        InvalidInputError: If ``user_energy`` is outside 1-5
    """
    _check_energy(user_energy)
    return sorted(
        tasks,
        key=lambda t: (not t.is_fixed, -strategic_score(t, user_energy), -t.priority_override),
    )
