"""Goal domain entities."""

from .criterion import Criterion
from .goal import Goal
from .goal_component import GoalComponent

__all__ = [
    "Criterion",
    "GoalComponent",
    "Goal",
]
