"""Unit tests for fuzzy catalog matching."""

import pytest
from pydantic import ValidationError

from healthmetrics.domain.matching import (
    CatalogEntity,
    CatalogKind,
    MatchResult,
    are_names_similar,
    dedupe_candidates,
    find_best_match,
    levenshtein_distance,
    normalize_name,
    rank_matches,
    similarity,
)


@pytest.fixture
def catalog() -> list[CatalogEntity]:
    return [
        CatalogEntity(id="1", name="Chicken Breast"),
        CatalogEntity(id="2", name="Beef"),
        CatalogEntity(id="3", name="Greek Yogurt"),
    ]


class TestLevenshtein:
    """Test edit distance and similarity."""

    @pytest.mark.parametrize(
        "a,b,expected",
        [
            ("kitten", "sitting", 3),
            ("Kitten", "sitting ", 3),
            ("", "abc", 3),
            ("abc", "", 3),
            ("same", "SAME", 0),
            ("flaw", "lawn", 2),
        ],
    )
    def test_distance(self, a, b, expected):
        """Test known distances."""
        assert levenshtein_distance(a, b) == expected

    def test_distance_symmetric(self):
        """Test distance does not depend on argument order."""
        assert levenshtein_distance("oatmeal", "meatloaf") == levenshtein_distance(
            "meatloaf", "oatmeal"
        )

    def test_similarity(self):
        """Test 1 - distance / longest length."""
        assert similarity("Chicken Breast", "chicken breast") == 1.0
        assert similarity("chicken breasts", "chicken breast") == pytest.approx(1 - 1 / 15)
        assert similarity("abc", "") == 0.0

    def test_empty_names_identical(self):
        """Test two empty names."""
        assert similarity("", "  ") == 1.0


class TestFindBestMatch:
    """Test find_best_match()."""

    def test_exact_match_case_insensitive(self, catalog):
        """Test exact name match."""
        result = find_best_match("chicken breast", catalog, 0.7)

        assert result.entity.id == "1"
        assert result.similarity == 1.0
        assert result.distance == 0

    def test_no_match_below_threshold(self, catalog):
        """Test unrelated query."""
        assert find_best_match("xyz123", catalog, 0.7) is None

    @pytest.mark.parametrize("query", ["", "   "])
    def test_blank_query(self, catalog, query):
        """Test blank queries never match."""
        assert find_best_match(query, catalog, 0.0) is None

    def test_no_candidates(self):
        """Test empty catalog."""
        assert find_best_match("apple", [], 0.0) is None

    def test_close_misspelling(self, catalog):
        """Test typo within threshold."""
        result = find_best_match("greek yoghurt", catalog, 0.7)

        assert result.entity.name == "Greek Yogurt"
        assert result.distance == 1

    def test_threshold_is_inclusive(self):
        """Test similarity equal to the threshold matches."""
        # distance 1 over length 4
        result = find_best_match("bee", [CatalogEntity(id="2", name="Beef")], 0.75)

        assert result is not None

    def test_ties_keep_first(self):
        """Test equal similarity keeps the earlier candidate."""
        candidates = [CatalogEntity(id="a", name="Apple"), CatalogEntity(id="b", name="APPLE")]

        assert find_best_match("apple", candidates, 0.7).entity.id == "a"

    def test_threshold_from_environment(self, catalog, monkeypatch):
        """Test default threshold comes from HEALTHMETRICS_MATCH_THRESHOLD."""
        assert find_best_match("chicken breasts", catalog) is not None

        monkeypatch.setenv("HEALTHMETRICS_MATCH_THRESHOLD", "0.95")

        assert find_best_match("chicken breasts", catalog) is None

    def test_accepts_generator(self, catalog):
        """Test any iterable of candidates."""
        result = find_best_match("beef", (c for c in catalog), 0.7)

        assert result.entity.id == "2"


class TestRankMatches:
    """Test rank_matches()."""

    def test_sorted_best_first(self, catalog):
        """Test descending similarity."""
        ranked = rank_matches("beef", catalog)

        assert ranked[0].entity.id == "2"
        scores = [r.similarity for r in ranked]
        assert scores == sorted(scores, reverse=True)
        assert len(ranked) == len(catalog)

    def test_distance_computed_once_per_candidate(self, catalog, monkeypatch):
        """Test scoring reuses one edit distance for similarity and distance."""
        from healthmetrics.domain.matching.services import fuzzy_matcher

        calls = []
        original = fuzzy_matcher.levenshtein_distance

        def counting(a, b):
            calls.append((a, b))
            return original(a, b)

        monkeypatch.setattr(fuzzy_matcher, "levenshtein_distance", counting)

        ranked = rank_matches("beef", catalog)

        assert len(calls) == len(catalog)
        for result in ranked:
            assert result.similarity == pytest.approx(
                1 - result.distance / max(len("beef"), len(result.entity.name))
            )

    def test_blank_query(self, catalog):
        """Test blank query ranks nothing."""
        assert rank_matches(" ", catalog) == []


class TestNameHelpers:
    """Test normalize_name, are_names_similar and dedupe_candidates."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("  Ben & Jerry's   Ice-Cream ", "ben jerrys icecream"),
            ("Greek\tYogurt", "greek yogurt"),
            ("", ""),
        ],
    )
    def test_normalize_name(self, raw, expected):
        """Test lower-casing, punctuation and whitespace."""
        assert normalize_name(raw) == expected

    def test_equal_after_normalization(self):
        """Test punctuation and case differences."""
        assert are_names_similar("Mac & Cheese", "mac cheese")

    def test_containment(self):
        """Test one name inside the other."""
        assert are_names_similar("Chicken", "chicken breast")
        assert are_names_similar("grilled chicken breast", "Chicken Breast")

    def test_similarity_threshold(self):
        """Test near spellings against the threshold."""
        assert are_names_similar("Greek yogurt", "Greek yoghurt")
        assert not are_names_similar("Greek yogurt", "Greek yoghurt", threshold=0.95)

    def test_different_names(self):
        """Test unrelated names."""
        assert not are_names_similar("apple", "banana")
        assert not are_names_similar("apple", "!!!")

    def test_threshold_from_environment(self, monkeypatch):
        """Test default threshold comes from HEALTHMETRICS_NAME_SIMILARITY_THRESHOLD."""
        monkeypatch.setenv("HEALTHMETRICS_NAME_SIMILARITY_THRESHOLD", "0.99")

        assert not are_names_similar("Greek yogurt", "Greek yoghurt")

    def test_dedupe_keeps_first(self):
        """Test repeated ids collapse to the first occurrence."""
        candidates = [
            CatalogEntity(id="1", name="Oats"),
            CatalogEntity(id="2", name="Milk"),
            CatalogEntity(id="1", name="Rolled Oats"),
        ]

        unique = dedupe_candidates(candidates)

        assert [(c.id, c.name) for c in unique] == [("1", "Oats"), ("2", "Milk")]


class TestCatalogEntity:
    """Test CatalogEntity and MatchResult models."""

    def test_int_id_and_extra_fields(self):
        """Test storage records with integer ids and extra fields."""
        entity = CatalogEntity.model_validate(
            {"id": 42, "name": "Banana", "kind": "meal", "calories": 105}
        )

        assert entity.id == "42"
        assert entity.kind is CatalogKind.MEAL
        assert not hasattr(entity, "calories")
        assert str(entity) == "Banana"

    def test_empty_id_rejected(self):
        """Test id is required."""
        with pytest.raises(ValidationError):
            CatalogEntity(id="", name="Banana")

    def test_frozen(self):
        """Test entities are immutable."""
        entity = CatalogEntity(id="1", name="Banana")

        with pytest.raises(ValidationError):
            entity.name = "Plantain"

    def test_match_result_bounds(self):
        """Test similarity must stay within [0, 1]."""
        entity = CatalogEntity(id="1", name="Banana")

        with pytest.raises(ValidationError):
            MatchResult(entity=entity, similarity=1.5, distance=0)
