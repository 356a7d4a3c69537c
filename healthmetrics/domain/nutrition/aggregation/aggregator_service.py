"""Scaling and summing of nutrient profiles."""

import math
from typing import Iterable, Optional

import structlog

from ...measurement.conversion import ratio as portion_ratio
from ...measurement.core.value_objects.measurement import Measurement
from ..core.exceptions.domain_errors import InvalidNutrientDataError
from ..core.value_objects.nutrient_profile import MACRO_FIELDS, Macros, NutrientProfile
from ..core.value_objects.portioned_item import PortionedItem

logger = structlog.get_logger(__name__)

DECIMALS = 2


def _scale_value(value: Optional[float], factor: float) -> Optional[float]:
    if value is None:
        return None
    return round(value * factor, DECIMALS)


def scale(nutrients: NutrientProfile, ratio: float) -> NutrientProfile:
    """
    Scale every known nutrient by a portion ratio.

    Fields absent on input stay absent; a macros or micros block with
    nothing known is dropped entirely.

    Args:
        nutrients: Nutrients of the base serving
        ratio: Portion ratio (portion / base serving)

    Returns:
        New NutrientProfile with values rounded to 2 decimals

    Raises:
        InvalidNutrientDataError: If ratio is negative or not finite

    Example:
        >>> base = NutrientProfile(calories=200, macros=Macros(protein=10))
        >>> scaled = scale(base, 1.5)
        >>> scaled.calories, scaled.macros.protein, scaled.macros.fat
        (300.0, 15.0, None)
    """
    if not math.isfinite(ratio) or ratio < 0:
        raise InvalidNutrientDataError(f"Portion ratio must be a non-negative number, got {ratio}")

    macros = None
    if nutrients.macros is not None and not nutrients.macros.is_empty():
        macros = Macros(
            **{name: _scale_value(getattr(nutrients.macros, name), ratio) for name in MACRO_FIELDS}
        )

    micros = None
    if nutrients.micros:
        micros = {
            name: _scale_value(amount, ratio)
            for name, amount in nutrients.micros.items()
            if amount is not None
        } or None

    return NutrientProfile(
        calories=_scale_value(nutrients.calories, ratio),
        macros=macros,
        micros=micros,
    )


def aggregate(items: Iterable[NutrientProfile]) -> NutrientProfile:
    """
    Sum nutrients from multiple sources.

    Used for meal totals from portioned foods, or day totals from meals.
    Missing values contribute nothing to a sum, but the total always reports
    calories, protein, carbs and fat (0 when nothing contributed).
    Rounding happens once, after summing.

    Example:
        >>> total = aggregate([
        ...     NutrientProfile(calories=100, macros=Macros(protein=5)),
        ...     NutrientProfile(calories=50),
        ... ])
        >>> total.calories, total.macros.protein, total.macros.fat
        (150.0, 5.0, 0.0)
    """
    calories: list[float] = []
    macros: dict[str, list[float]] = {name: [] for name in MACRO_FIELDS}
    micros: dict[str, list[float]] = {}

    for item in items:
        if item.calories is not None:
            calories.append(item.calories)
        if item.macros is not None:
            for name in MACRO_FIELDS:
                value = getattr(item.macros, name)
                if value is not None:
                    macros[name].append(value)
        for name, amount in (item.micros or {}).items():
            if amount is not None:
                micros.setdefault(name, []).append(amount)

    # fsum is exact, so totals do not depend on item order
    return NutrientProfile(
        calories=round(math.fsum(calories), DECIMALS),
        macros=Macros(**{name: round(math.fsum(values), DECIMALS) for name, values in macros.items()}),
        micros={name: round(math.fsum(values), DECIMALS) for name, values in micros.items()},
    )


def calculate_nutrients(item: PortionedItem, portion: Measurement) -> NutrientProfile:
    """
    Calculate the nutrients of a logged portion of an item.

    Args:
        item: Food with nutrients per base serving
        portion: Logged quantity

    Returns:
        Scaled NutrientProfile, or an empty profile when the portion unit
        cannot be related to the serving unit (e.g. pieces vs grams)
    """
    factor = portion_ratio(portion, item.serving_size)
    if factor is None:
        logger.warning(
            "Portion not convertible to serving size",
            item=item.name,
            portion_unit=portion.unit.value,
            serving_unit=item.serving_size.unit.value,
        )
        return NutrientProfile()
    return scale(item.nutrients, factor)
