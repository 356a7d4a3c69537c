"""Evaluation result value objects."""

from dataclasses import dataclass
from enum import Enum


class CriterionState(str, Enum):
    """Outcome of evaluating one criterion.

    NOT_EVALUATED means no current value exists for its quantity.
    """

    NOT_EVALUATED = "not_evaluated"
    TRUE = "true"
    FALSE = "false"


@dataclass(frozen=True)
class ComponentEvaluation:
    """Evaluation of one goal component.

    Attributes:
        component_id: Evaluated component
        complete: Derived completion (manual flag when no criteria)
        criteria: (criterion id, state) pairs in component order
        auto_evaluated: False when the manual flag was kept
    """

    component_id: str
    complete: bool
    criteria: tuple[tuple[str, CriterionState], ...] = ()
    auto_evaluated: bool = True

    def state_of(self, criterion_id: str) -> CriterionState:
        for cid, state in self.criteria:
            if cid == criterion_id:
                return state
        raise KeyError(criterion_id)


@dataclass(frozen=True)
class GoalEvaluation:
    goal_id: str
    complete: bool
    components: tuple[ComponentEvaluation, ...] = ()


@dataclass(frozen=True)
class GoalProgress:
    """Completed components out of total, with a whole percentage."""

    completed: int
    total: int
    percentage: int
