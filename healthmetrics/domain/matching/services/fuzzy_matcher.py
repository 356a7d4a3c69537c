"""Fuzzy name matching against catalog entities.

Levenshtein-based similarity used to resolve free-text food and meal
names to existing catalog items.
"""

import re
from typing import Iterable, Optional

import structlog

from ....config import get_match_threshold, get_name_similarity_threshold
from ..core.entities.catalog_entity import CatalogEntity
from ..core.value_objects.match_result import MatchResult

logger = structlog.get_logger(__name__)

_WHITESPACE = re.compile(r"\s+")
_NON_WORD = re.compile(r"[^\w\s]")


def _fold(text: str) -> str:
    return text.strip().casefold()


def levenshtein_distance(a: str, b: str) -> int:
    """Edit distance between two names, ignoring case and outer whitespace.

    Example:
        >>> levenshtein_distance("Kitten", "sitting ")
        3
    """
    s1, s2 = _fold(a), _fold(b)
    if s1 == s2:
        return 0
    if not s1:
        return len(s2)
    if not s2:
        return len(s1)

    previous = list(range(len(s1) + 1))
    for i, c2 in enumerate(s2, start=1):
        current = [i]
        for j, c1 in enumerate(s1, start=1):
            if c1 == c2:
                current.append(previous[j - 1])
            else:
                current.append(min(previous[j - 1], current[j - 1], previous[j]) + 1)
        previous = current
    return previous[-1]


def similarity(a: str, b: str) -> float:
    """Similarity in [0, 1]: 1 - distance / longest length.

    Two empty names are identical (1.0).
    """
    return _similarity_from_distance(levenshtein_distance(a, b), a, b)


def _similarity_from_distance(distance: int, a: str, b: str) -> float:
    longest = max(len(_fold(a)), len(_fold(b)))
    if longest == 0:
        return 1.0
    return 1 - distance / longest


def _score(query: str, candidate: CatalogEntity) -> MatchResult:
    distance = levenshtein_distance(query, candidate.name)
    return MatchResult(
        entity=candidate,
        similarity=_similarity_from_distance(distance, query, candidate.name),
        distance=distance,
    )


def rank_matches(query: str, candidates: Iterable[CatalogEntity]) -> list[MatchResult]:
    """Score every candidate, best first.

    The sort is stable: candidates with equal similarity keep their input
    order.
    """
    if not query or not query.strip():
        return []
    results = [_score(query, candidate) for candidate in candidates]
    results.sort(key=lambda r: r.similarity, reverse=True)
    return results


def find_best_match(
    query: str,
    candidates: Iterable[CatalogEntity],
    threshold: Optional[float] = None,
) -> Optional[MatchResult]:
    """Best candidate at or above the threshold.

    Args:
        query: Free-text name
        candidates: Catalog entities to search
        threshold: Minimum similarity, defaults to HEALTHMETRICS_MATCH_THRESHOLD

    Returns:
        Best match, or None for a blank query or no candidate above threshold

    Example:
        >>> result = find_best_match(
        ...     "chicken breast",
        ...     [CatalogEntity(id="1", name="Chicken Breast"), CatalogEntity(id="2", name="Beef")],
        ... )
        >>> result.entity.id, result.similarity
        ('1', 1.0)
    """
    if threshold is None:
        threshold = get_match_threshold()

    ranked = rank_matches(query, candidates)
    if not ranked:
        return None

    best = ranked[0]
    if best.similarity >= threshold:
        return best

    logger.debug(
        "No catalog match above threshold",
        query=query,
        best=best.entity.name,
        similarity=round(best.similarity, 3),
        threshold=threshold,
    )
    return None


def normalize_name(name: str) -> str:
    """Lower-case, collapse whitespace and strip punctuation.

    Example:
        >>> normalize_name("  Ben & Jerry's   Ice-Cream ")
        'ben jerrys icecream'
    """
    text = _NON_WORD.sub("", name.lower())
    return _WHITESPACE.sub(" ", text).strip()


def are_names_similar(a: str, b: str, threshold: Optional[float] = None) -> bool:
    """Quick check whether two names likely denote the same item.

    Equal after normalization, one containing the other ("chicken" vs
    "chicken breast"), or similarity at or above the threshold.
    """
    if threshold is None:
        threshold = get_name_similarity_threshold()

    n1, n2 = normalize_name(a), normalize_name(b)
    if n1 == n2:
        return True
    if not n1 or not n2:
        return False
    if n1 in n2 or n2 in n1:
        return True
    return similarity(n1, n2) >= threshold


def dedupe_candidates(candidates: Iterable[CatalogEntity]) -> list[CatalogEntity]:
    """Drop repeated ids, keeping the first occurrence."""
    seen: set[str] = set()
    unique = []
    for candidate in candidates:
        if candidate.id in seen:
            continue
        seen.add(candidate.id)
        unique.append(candidate)
    return unique
