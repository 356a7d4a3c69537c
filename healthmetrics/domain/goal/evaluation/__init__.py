"""Goal evaluation services."""

from .criteria_evaluator import CriteriaEvaluator

__all__ = ["CriteriaEvaluator"]
