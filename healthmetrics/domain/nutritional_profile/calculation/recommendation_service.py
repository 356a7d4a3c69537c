"""RecommendationService - daily fuel recommendations from a body profile."""

from datetime import date
from typing import Iterable, Optional, Union

import structlog

from ...goal.core.entities.goal import Goal
from ...goal.core.value_objects.conditional import GoalComponentType
from ...goal.core.value_objects.criterion_value import NumericValue
from ...measurement.core.value_objects.units import LengthUnit, UnitFamily, WeightUnit
from ...shared.anthropometric_profile import AnthropometricProfile
from ..core.exceptions.domain_errors import InvalidUserDataError
from ..core.ports.calculators import (
    IBMRCalculator,
    ICalorieTargetCalculator,
    IMacroCalculator,
    ITDEECalculator,
)
from ..core.value_objects.activity_level import ActivityLevel
from ..core.value_objects.fuel_recommendations import FuelRecommendations, WeightGoal
from .bmr_service import BMRService
from .calorie_target_service import CalorieTargetService
from .macro_service import MacroService
from .tdee_service import TDEEService

logger = structlog.get_logger(__name__)


class RecommendationService:
    """Orchestrate BMR → TDEE → calorie target → macro split.

    Calculators are injected through their ports so callers and tests can
    swap implementations; defaults are the standard services.

    A profile missing weight, height, sex or age yields an empty
    recommendation, never a partial one.
    """

    def __init__(
        self,
        bmr_calculator: Optional[IBMRCalculator] = None,
        tdee_calculator: Optional[ITDEECalculator] = None,
        calorie_target_calculator: Optional[ICalorieTargetCalculator] = None,
        macro_calculator: Optional[IMacroCalculator] = None,
    ) -> None:
        self._bmr = bmr_calculator or BMRService()
        self._tdee = tdee_calculator or TDEEService()
        self._target = calorie_target_calculator or CalorieTargetService()
        self._macros = macro_calculator or MacroService()

    def recommend(
        self,
        profile: AnthropometricProfile,
        activity_level: Optional[Union[ActivityLevel, str]] = None,
        goals: Optional[Iterable[Goal]] = None,
        today: Optional[date] = None,
    ) -> FuelRecommendations:
        """Compute daily recommendations.

        Args:
            profile: Latest body stats with sex and age/birth date
            activity_level: Activity level label, sedentary when missing
            goals: User goals, used for weight and composition targets
            today: Reference date for age derivation

        Returns:
            FuelRecommendations with whole-number values, or an empty one
        """
        age = profile.age_years(today)
        missing = profile.missing("weight", "height", "sex")
        if age is None:
            missing.append("age")
        if missing:
            logger.debug("Profile incomplete, no recommendations", missing=missing)
            return FuelRecommendations.empty()

        weight_kg = profile.weight.to(WeightUnit.KG).value
        height_cm = profile.height.to(LengthUnit.CM).value
        goals = list(goals or [])

        try:
            bmr = self._bmr.calculate(weight_kg, height_cm, age, profile.sex)
            tdee = self._tdee.calculate(bmr, ActivityLevel.parse(activity_level))
        except InvalidUserDataError as exc:
            logger.debug("Degenerate profile, no recommendations", error=str(exc))
            return FuelRecommendations.empty()

        weight_goal = extract_weight_goal(goals, weight_kg)
        calorie_target = self._target.calculate(
            tdee,
            bmr,
            weight_kg,
            weight_goal.target_weight_kg if weight_goal else None,
            weight_goal.is_weight_loss if weight_goal else None,
        )
        macros = self._macros.calculate(weight_kg, calorie_target, has_composition_goal(goals))

        logger.debug(
            "Fuel recommendations computed",
            bmr=bmr.value,
            tdee=tdee.value,
            calorie_target=calorie_target,
            weight_goal=weight_goal is not None,
        )
        return FuelRecommendations(
            bmr=round(bmr.value),
            tdee=round(tdee.value),
            calorie_target=round(calorie_target),
            macros=macros.rounded(),
        )


def extract_weight_goal(goals: Iterable[Goal], current_weight_kg: float) -> Optional[WeightGoal]:
    """Find the active body weight target.

    Among goals not flagged complete that contain a bodyweight component,
    the one with the smallest component priority wins (stable on ties).
    The first criterion of its bodyweight component carrying a weight
    value gives the target.
    """
    candidates = [
        goal
        for goal in goals
        if not goal.complete and goal.has_component_type(GoalComponentType.BODYWEIGHT)
    ]
    if not candidates:
        return None

    goal = sorted(candidates, key=lambda g: g.lowest_priority() or 0)[0]
    component = goal.components_of_type(GoalComponentType.BODYWEIGHT)[0]

    for criterion in component.criteria:
        value = criterion.value
        if isinstance(value, NumericValue) and value.measurement.family is UnitFamily.WEIGHT:
            target_kg = value.measurement.to(WeightUnit.KG).value
            return WeightGoal(target_weight_kg=target_kg, is_weight_loss=target_kg < current_weight_kg)
    return None


def has_composition_goal(goals: Iterable[Goal]) -> bool:
    """True if any goal not flagged complete tracks body composition."""
    return any(
        not goal.complete and goal.has_component_type(GoalComponentType.BODYCOMPOSITION)
        for goal in goals
    )
