"""Nutrition target calculator: BMR, TDEE, calorie target and macros."""

from ..shared.anthropometric_profile import AnthropometricProfile, Sex, age_from_birth_date
from .calculation import (
    BMRService,
    CalorieTargetService,
    MacroService,
    RecommendationService,
    TDEEService,
)
from .core.exceptions import InvalidUserDataError, ProfileDomainError
from .core.value_objects import (
    BMR,
    TDEE,
    ActivityLevel,
    FuelRecommendations,
    MacroSplit,
    WeightGoal,
)

__all__ = [
    "AnthropometricProfile",
    "Sex",
    "age_from_birth_date",
    "BMRService",
    "TDEEService",
    "CalorieTargetService",
    "MacroService",
    "RecommendationService",
    "ProfileDomainError",
    "InvalidUserDataError",
    "ActivityLevel",
    "BMR",
    "TDEE",
    "MacroSplit",
    "FuelRecommendations",
    "WeightGoal",
]
