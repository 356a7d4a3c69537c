"""Domain exceptions for exercise calculations."""

from typing import Sequence

from ....shared.errors import DomainError


class ExerciseDomainError(DomainError):
    """Base exception for exercise domain errors."""

    pass


class MissingAnthropometryError(ExerciseDomainError):
    """Raised when body stats required for work/power are missing.

    Attributes:
        missing_fields: Names of the absent profile fields
    """

    def __init__(self, missing_fields: Sequence[str]) -> None:
        self.missing_fields = tuple(missing_fields)
        super().__init__(
            "Body stats required to calculate work and power are missing: "
            + ", ".join(self.missing_fields)
        )
