"""Exercise energy calculator: work and power from logged sets."""

from .calculation import WorkPowerService
from .core.exceptions import ExerciseDomainError, MissingAnthropometryError
from .core.value_objects import SetMeasures, WorkOutput, WorkPowerConstants

__all__ = [
    "WorkPowerService",
    "WorkPowerConstants",
    "SetMeasures",
    "WorkOutput",
    "ExerciseDomainError",
    "MissingAnthropometryError",
]
