"""Domain exceptions for nutritional profile."""

from .domain_errors import InvalidUserDataError, ProfileDomainError

__all__ = [
    "ProfileDomainError",
    "InvalidUserDataError",
]
