"""Unit tests for nutritional profile value objects."""

from datetime import date, datetime

import pytest
from freezegun import freeze_time

from healthmetrics.domain.measurement import IncompatibleUnitsError, Measurement, WeightUnit
from healthmetrics.domain.nutritional_profile import (
    BMR,
    TDEE,
    ActivityLevel,
    AnthropometricProfile,
    FuelRecommendations,
    InvalidUserDataError,
    MacroSplit,
    Sex,
    age_from_birth_date,
)


class TestActivityLevel:
    """Test ActivityLevel enum."""

    def test_pal_multipliers(self):
        """Test PAL multipliers."""
        assert ActivityLevel.SEDENTARY.pal_multiplier() == 1.2
        assert ActivityLevel.LIGHTLY_ACTIVE.pal_multiplier() == 1.375
        assert ActivityLevel.MODERATELY_ACTIVE.pal_multiplier() == 1.55
        assert ActivityLevel.VERY_ACTIVE.pal_multiplier() == 1.725
        assert ActivityLevel.EXTRA_ACTIVE.pal_multiplier() == 1.9

    def test_parse(self):
        """Test label parsing."""
        assert ActivityLevel.parse("lightly_active") is ActivityLevel.LIGHTLY_ACTIVE
        assert ActivityLevel.parse(" EXTRA ACTIVE ") is ActivityLevel.EXTRA_ACTIVE
        assert ActivityLevel.parse("unknown") is ActivityLevel.SEDENTARY


class TestBMRAndTDEE:
    """Test BMR and TDEE value objects."""

    def test_positive_values(self):
        """Test valid values."""
        assert str(BMR(1780.4)) == "1780 kcal/day"
        assert TDEE(2500.0).value == 2500.0

    @pytest.mark.parametrize("value", [0, -100])
    def test_non_positive_rejected(self, value):
        """Test non-positive energy is invalid."""
        with pytest.raises(InvalidUserDataError):
            BMR(value)
        with pytest.raises(InvalidUserDataError):
            TDEE(value)


class TestMacroSplit:
    """Test MacroSplit value object."""

    def test_total_calories(self):
        """Test 4-4-9 conversion."""
        assert MacroSplit(protein_g=176, carbs_g=248, fat_g=63).total_calories() == 2263

    def test_negative_rejected(self):
        """Test negative grams are invalid."""
        with pytest.raises(ValueError):
            MacroSplit(protein_g=-1, carbs_g=0, fat_g=0)

    def test_rounded(self):
        """Test whole-gram copy."""
        assert MacroSplit(100.4, 200.6, 50.2).rounded() == MacroSplit(100, 201, 50)


class TestFuelRecommendations:
    """Test FuelRecommendations value object."""

    def test_empty(self):
        """Test empty recommendation."""
        empty = FuelRecommendations.empty()

        assert empty.is_empty()
        assert empty.to_dict() == {}

    def test_not_empty(self):
        """Test populated recommendation."""
        rec = FuelRecommendations(bmr=1780, tdee=2136, calorie_target=2136)

        assert not rec.is_empty()
        assert rec.to_dict() == {"bmr": 1780, "tdee": 2136, "calorieTarget": 2136}


class TestAgeFromBirthDate:
    """Test age derivation."""

    def test_before_birthday(self):
        """Test age one day before the birthday."""
        assert age_from_birth_date(date(1990, 6, 15), today=date(2025, 6, 14)) == 34

    def test_on_birthday(self):
        """Test age on the birthday."""
        assert age_from_birth_date(date(1990, 6, 15), today=date(2025, 6, 15)) == 35

    def test_datetime_accepted(self):
        """Test datetimes are reduced to dates."""
        assert age_from_birth_date(datetime(2000, 1, 1, 23, 59), today=date(2020, 1, 1)) == 20

    @freeze_time("2024-02-29")
    def test_defaults_to_today(self):
        """Test current date is used by default."""
        assert age_from_birth_date(date(2000, 3, 1)) == 23


class TestAnthropometricProfile:
    """Test AnthropometricProfile value object."""

    def test_from_dict_camel_case(self):
        """Test building from a stored stats record."""
        profile = AnthropometricProfile.from_dict(
            {
                "id": "stats-1",
                "weight": {"value": 180, "unit": "lbs"},
                "height": {"value": 70, "unit": "in"},
                "armLength": {"value": 25, "unit": "in"},
                "bodyFatPercentage": {"value": 15, "unit": "%"},
                "tapeMeasurements": {
                    "id": "tape-1",
                    "date": "2025-01-01",
                    "waist": {"value": 32, "unit": "in"},
                },
                "gender": "male",
                "birthDate": "1990-06-15T00:00:00.000Z",
            }
        )

        assert profile.weight.unit is WeightUnit.LB
        assert profile.arm_length.value == 25
        assert profile.leg_length is None
        assert set(profile.tape_measurements) == {"waist"}
        assert profile.sex is Sex.MALE
        assert profile.birth_date == date(1990, 6, 15)

    def test_explicit_age_wins(self):
        """Test explicit age over birth date."""
        profile = AnthropometricProfile(age=40, birth_date=date(2000, 1, 1))

        assert profile.age_years(today=date(2025, 1, 1)) == 40

    def test_age_from_birth_date(self):
        """Test age derived from birth date."""
        profile = AnthropometricProfile(birth_date=date(2000, 1, 2))

        assert profile.age_years(today=date(2025, 1, 1)) == 24
        assert AnthropometricProfile().age_years() is None

    def test_wrong_family_rejected(self):
        """Test a height given in kilograms is rejected."""
        with pytest.raises(IncompatibleUnitsError):
            AnthropometricProfile(height=Measurement(180, "kg"))
        with pytest.raises(IncompatibleUnitsError):
            AnthropometricProfile(tape_measurements={"waist": Measurement(80, "%")})

    def test_sex_label_coerced(self):
        """Test string sex labels are parsed."""
        assert AnthropometricProfile(sex="F").sex is Sex.FEMALE

    def test_missing(self, full_profile):
        """Test missing field report."""
        assert full_profile.missing("weight", "height") == []
        assert AnthropometricProfile(weight=Measurement(80, "kg")).missing(
            "weight", "arm_length", "leg_length"
        ) == ["arm_length", "leg_length"]
