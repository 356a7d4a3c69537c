"""Matching value objects."""

from .match_result import MatchResult

__all__ = ["MatchResult"]
