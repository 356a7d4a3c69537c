"""
Domain exceptions.

Typed exceptions for explicit error handling.
Each bounded context derives its own hierarchy from DomainError.
"""

from __future__ import annotations


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain-specific exceptions inherit from this.
    Allows catching all engine errors with single except clause.
    """

    pass
