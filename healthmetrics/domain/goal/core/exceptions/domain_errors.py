"""Domain exceptions for goals."""

from ....shared.errors import DomainError


class GoalDomainError(DomainError):
    """Base exception for goal domain errors."""

    pass


class UnsupportedCriterionError(GoalDomainError, ValueError):
    """Raised when a criterion combines an operator with a value it cannot order.

    Example: ``greater than`` against the literal value ``"advanced"``.
    """

    def __init__(self, conditional: str, value: str) -> None:
        self.conditional = conditional
        self.value = value
        super().__init__(f"Operator '{conditional}' cannot be applied to literal value '{value}'")
