"""Unit conversion and portion ratio functions.

These return a ``None`` sentinel instead of raising when units are
incompatible, so bulk callers can skip one bad record and keep going.
"""

from typing import Optional, Union

import structlog

from .core.exceptions.domain_errors import IncompatibleUnitsError
from .core.value_objects.measurement import Measurement
from .core.value_objects.units import (
    TimeUnit,
    Unit,
    UnitFamily,
    canonical_factor,
    family_of,
    parse_unit,
)

logger = structlog.get_logger(__name__)

UnitLike = Union[Unit, str]


def are_units_compatible(unit_a: UnitLike, unit_b: UnitLike) -> bool:
    """Check if two units can be converted into each other.

    Unknown labels are only compatible with an identical label.
    """
    a = parse_unit(unit_a)
    b = parse_unit(unit_b)
    if a is None or b is None:
        return a is None and b is None and str(unit_a).strip() == str(unit_b).strip()
    if a == b:
        return True
    family = family_of(a)
    return family == family_of(b) and family is not UnitFamily.COUNT


def convert(value: float, from_unit: UnitLike, to_unit: UnitLike) -> Optional[float]:
    """Convert a value between units of the same family.

    Args:
        value: Amount expressed in from_unit
        from_unit: Source unit
        to_unit: Target unit

    Returns:
        Converted value, or None if the units are incompatible

    Example:
        >>> round(convert(1.0, "kg", "lb"), 4)
        2.2046
        >>> convert(1.0, "kg", "cm") is None
        True
    """
    source = parse_unit(from_unit)
    target = parse_unit(to_unit)
    if source is not None and source == target:
        return value
    if source is None or target is None or not are_units_compatible(source, target):
        logger.debug("Incompatible units for conversion", from_unit=str(from_unit), to_unit=str(to_unit))
        return None
    return value * canonical_factor(source) / canonical_factor(target)


def ratio(portion: Measurement, base: Measurement) -> Optional[float]:
    """Calculate the ratio between a portion size and a base serving size.

    Returns:
        portion / base, or None if units are incompatible
        (e.g. pieces vs grams, or volume vs weight without density)
        or the base is zero.

    Example:
        >>> ratio(Measurement(150, "g"), Measurement(100, "g"))
        1.5
        >>> ratio(Measurement(1, "cup"), Measurement(100, "g")) is None
        True
    """
    if base.value == 0:
        logger.warning("Zero base serving size", base_unit=base.unit.value)
        return None

    # Same unit: skip the canonical round trip
    if portion.unit == base.unit:
        return portion.value / base.value

    if not portion.is_compatible_with(base):
        logger.warning(
            "Cannot convert between incompatible units",
            portion_unit=portion.unit.value,
            base_unit=base.unit.value,
        )
        return None

    return portion.canonical_value() / base.canonical_value()


def time_to_seconds(duration: Optional[Measurement]) -> float:
    """Convert a duration to seconds; a missing duration counts as zero.

    Raises:
        IncompatibleUnitsError: If the measurement is not a duration.
    """
    if duration is None:
        return 0.0
    if duration.family is not UnitFamily.TIME:
        raise IncompatibleUnitsError(duration.unit.value, TimeUnit.S.value)
    return duration.canonical_value()


def time_to_minutes(duration: Optional[Measurement]) -> float:
    """Convert a duration to minutes; a missing duration counts as zero."""
    return time_to_seconds(duration) / 60.0
