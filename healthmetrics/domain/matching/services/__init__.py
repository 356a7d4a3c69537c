"""Matching services."""

from .fuzzy_matcher import (
    are_names_similar,
    dedupe_candidates,
    find_best_match,
    levenshtein_distance,
    normalize_name,
    rank_matches,
    similarity,
)

__all__ = [
    "levenshtein_distance",
    "similarity",
    "find_best_match",
    "rank_matches",
    "normalize_name",
    "are_names_similar",
    "dedupe_candidates",
]
