"""Shared building blocks for all bounded contexts."""

from .errors import DomainError

__all__ = ["DomainError"]
