"""Domain exceptions for exercise calculations."""

from .domain_errors import ExerciseDomainError, MissingAnthropometryError

__all__ = [
    "ExerciseDomainError",
    "MissingAnthropometryError",
]
