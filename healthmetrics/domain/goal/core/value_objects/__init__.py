"""Value objects for the goal domain."""

from .conditional import Conditional, GoalComponentType
from .criterion_value import CriterionValue, LiteralValue, NumericValue, criterion_value_from_raw
from .evaluation import ComponentEvaluation, CriterionState, GoalEvaluation, GoalProgress
from .measurement_snapshot import MeasurementSnapshot
from .tracked_quantity import ExerciseMeasure, QuantityKind, TrackedQuantity

__all__ = [
    "Conditional",
    "GoalComponentType",
    "CriterionValue",
    "NumericValue",
    "LiteralValue",
    "criterion_value_from_raw",
    "TrackedQuantity",
    "QuantityKind",
    "ExerciseMeasure",
    "MeasurementSnapshot",
    "CriterionState",
    "ComponentEvaluation",
    "GoalEvaluation",
    "GoalProgress",
]
