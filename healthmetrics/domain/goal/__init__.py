"""Goal criteria evaluation."""

from .core.entities import Criterion, Goal, GoalComponent
from .core.exceptions import GoalDomainError, UnsupportedCriterionError
from .core.value_objects import (
    ComponentEvaluation,
    Conditional,
    CriterionState,
    ExerciseMeasure,
    GoalComponentType,
    GoalEvaluation,
    GoalProgress,
    LiteralValue,
    MeasurementSnapshot,
    NumericValue,
    QuantityKind,
    TrackedQuantity,
)
from .evaluation import CriteriaEvaluator

__all__ = [
    "Criterion",
    "Goal",
    "GoalComponent",
    "GoalDomainError",
    "UnsupportedCriterionError",
    "Conditional",
    "GoalComponentType",
    "NumericValue",
    "LiteralValue",
    "TrackedQuantity",
    "QuantityKind",
    "ExerciseMeasure",
    "MeasurementSnapshot",
    "CriterionState",
    "ComponentEvaluation",
    "GoalEvaluation",
    "GoalProgress",
    "CriteriaEvaluator",
]
