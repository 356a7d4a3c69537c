"""Domain exceptions for goals."""

from .domain_errors import GoalDomainError, UnsupportedCriterionError

__all__ = [
    "GoalDomainError",
    "UnsupportedCriterionError",
]
