"""Domain exceptions for nutritional profile."""

from ....shared.errors import DomainError


class ProfileDomainError(DomainError):
    """Base exception for nutritional profile domain errors."""

    pass


class InvalidUserDataError(ProfileDomainError, ValueError):
    """Raised when user data cannot feed the metabolic formulas.

    Examples:
    - Non-positive weight or height
    - Negative age
    - Formula result that is not a positive energy value
    """

    pass
