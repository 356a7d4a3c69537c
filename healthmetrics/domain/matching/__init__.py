"""Fuzzy entity matcher for catalog foods and meals."""

from .core.entities import CatalogEntity, CatalogKind
from .core.value_objects import MatchResult
from .services import (
    are_names_similar,
    dedupe_candidates,
    find_best_match,
    levenshtein_distance,
    normalize_name,
    rank_matches,
    similarity,
)

__all__ = [
    "CatalogEntity",
    "CatalogKind",
    "MatchResult",
    "levenshtein_distance",
    "similarity",
    "find_best_match",
    "rank_matches",
    "normalize_name",
    "are_names_similar",
    "dedupe_candidates",
]
