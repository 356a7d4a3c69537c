"""Unit tests for nutrient scaling and aggregation."""

import pytest
from pydantic import ValidationError

from healthmetrics.domain.measurement import Measurement
from healthmetrics.domain.nutrition import (
    InvalidNutrientDataError,
    Macros,
    NutrientProfile,
    PortionedItem,
    aggregate,
    calculate_nutrients,
    scale,
)


class TestNutrientProfile:
    """Test NutrientProfile model."""

    def test_from_plain_dict(self):
        """Test validation from stored data."""
        profile = NutrientProfile.model_validate(
            {"calories": 165, "macros": {"protein": 31, "fat": 3.6}, "micros": {"sodium": 74}}
        )

        assert profile.calories == 165.0
        assert profile.macros.protein == 31.0
        assert profile.macros.carbs is None
        assert profile.micros == {"sodium": 74.0}

    def test_negative_values_rejected(self):
        """Test negative nutrient amounts are invalid."""
        with pytest.raises(ValidationError):
            NutrientProfile(calories=-1)
        with pytest.raises(ValidationError):
            Macros(protein=-0.5)
        with pytest.raises(ValidationError):
            NutrientProfile(micros={"iron": -2})

    def test_is_empty(self):
        """Test empty detection."""
        assert NutrientProfile().is_empty()
        assert NutrientProfile(macros=Macros()).is_empty()
        assert not NutrientProfile(calories=0).is_empty()

    def test_calories_from_macros(self):
        """Test 4-4-9 rule."""
        profile = NutrientProfile(macros=Macros(protein=10, carbs=20, fat=5))

        assert profile.calories_from_macros() == 165
        assert NutrientProfile(macros=Macros(protein=10)).calories_from_macros() is None


class TestScale:
    """Test scale()."""

    def setup_method(self):
        """Set up test fixtures."""
        self.base = NutrientProfile(
            calories=165,
            macros=Macros(protein=31.0, fat=3.6),
            micros={"sodium": 74.0},
        )

    def test_scales_present_fields(self):
        """Test every present field is multiplied."""
        scaled = scale(self.base, 1.5)

        assert scaled.calories == 247.5
        assert scaled.macros.protein == 46.5
        assert scaled.macros.fat == 5.4
        assert scaled.micros == {"sodium": 111.0}

    def test_absent_fields_stay_absent(self):
        """Test missing fields are never emitted as zero."""
        scaled = scale(self.base, 2)

        assert scaled.macros.carbs is None
        assert NutrientProfile(calories=100).model_dump(exclude_none=True) == {"calories": 100.0}
        assert scale(NutrientProfile(calories=100), 2).model_dump(exclude_none=True) == {
            "calories": 200.0
        }

    def test_empty_blocks_dropped(self):
        """Test macros/micros blocks without known values are omitted."""
        scaled = scale(NutrientProfile(calories=50, macros=Macros(), micros={}), 2)

        assert scaled.macros is None
        assert scaled.micros is None

    def test_rounds_to_two_decimals(self):
        """Test rounding."""
        scaled = scale(NutrientProfile(calories=100), 1 / 3)

        assert scaled.calories == 33.33

    @pytest.mark.parametrize("bad_ratio", [-1, float("nan"), float("inf")])
    def test_invalid_ratio_raises(self, bad_ratio):
        """Test negative or non-finite ratios are rejected."""
        with pytest.raises(InvalidNutrientDataError):
            scale(self.base, bad_ratio)


class TestAggregate:
    """Test aggregate()."""

    def setup_method(self):
        """Set up test fixtures."""
        self.a = NutrientProfile(
            calories=120.1, macros=Macros(protein=5.05, carbs=10), micros={"fiber": 2.2}
        )
        self.b = NutrientProfile(calories=80.2, macros=Macros(fat=3.3), micros={"iron": 1.1})

    def test_sums_fields(self):
        """Test field-wise sums."""
        total = aggregate([self.a, self.b])

        assert total.calories == pytest.approx(200.3)
        assert total.macros.protein == pytest.approx(5.05)
        assert total.macros.carbs == 10
        assert total.macros.fat == pytest.approx(3.3)
        assert total.micros == {"fiber": 2.2, "iron": 1.1}

    def test_order_independent(self):
        """Test aggregate([a, b]) == aggregate([b, a])."""
        assert aggregate([self.a, self.b]) == aggregate([self.b, self.a])

    def test_totals_always_present(self):
        """Test totals report zeros when nothing contributed."""
        total = aggregate([])

        assert total.calories == 0
        assert total.macros == Macros(protein=0, carbs=0, fat=0)
        assert total.micros == {}

    def test_single_item_matches_unit_scale(self):
        """Test aggregate([a]) equals scale(a, 1) with missing totals as zero."""
        total = aggregate([self.a])
        scaled = scale(self.a, 1)

        assert total.calories == scaled.calories
        assert total.macros.protein == scaled.macros.protein
        assert total.macros.carbs == scaled.macros.carbs
        assert scaled.macros.fat is None
        assert total.macros.fat == 0
        assert total.micros == scaled.micros

    def test_rounding_applied_once(self):
        """Test many small values do not accumulate rounding error."""
        items = [NutrientProfile(calories=0.004) for _ in range(1000)]

        assert aggregate(items).calories == 4.0


class TestCalculateNutrients:
    """Test calculate_nutrients()."""

    def setup_method(self):
        """Set up test fixtures."""
        self.item = PortionedItem(
            nutrients=NutrientProfile(calories=200, macros=Macros(protein=20)),
            serving_size=Measurement(100, "g"),
            name="Tofu",
        )

    def test_scales_to_portion(self):
        """Test portion in another weight unit."""
        result = calculate_nutrients(self.item, Measurement(0.25, "kg"))

        assert result.calories == 500
        assert result.macros.protein == 50

    def test_incompatible_portion_returns_empty(self):
        """Test undefined ratio yields an empty profile."""
        result = calculate_nutrients(self.item, Measurement(1, "cup"))

        assert result.is_empty()
        assert result.calories is None

    def test_serving_size_must_be_positive(self):
        """Test zero serving size is invalid."""
        with pytest.raises(ValueError):
            PortionedItem(nutrients=NutrientProfile(), serving_size=Measurement(0, "g"))
