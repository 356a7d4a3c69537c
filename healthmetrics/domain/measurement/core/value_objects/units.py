"""Unit enumerations and conversion tables.

Every unit belongs to exactly one family. Each family has a canonical unit
(grams, centimeters, milliliters, seconds, kcal) and a fixed multiplicative
factor from every member to that canonical unit.
"""

from enum import Enum
from typing import Optional, Union


class UnitFamily(str, Enum):
    """Measurement families. Units only combine within a family."""

    WEIGHT = "weight"
    LENGTH = "length"
    VOLUME = "volume"
    TIME = "time"
    PERCENTAGE = "percentage"
    ENERGY = "energy"
    COUNT = "count"


class WeightUnit(str, Enum):
    G = "g"
    KG = "kg"
    OZ = "oz"
    LB = "lb"


class LengthUnit(str, Enum):
    MM = "mm"
    CM = "cm"
    M = "m"
    KM = "km"
    IN = "in"
    FT = "ft"
    YD = "yd"
    MI = "mi"


class VolumeUnit(str, Enum):
    ML = "ml"
    L = "l"
    FL_OZ = "fl oz"
    CUP = "cup"
    TBSP = "tbsp"
    TSP = "tsp"


class TimeUnit(str, Enum):
    S = "s"
    MIN = "min"
    HR = "hr"
    DAY = "day"
    WEEK = "week"


class PercentageUnit(str, Enum):
    PERCENT = "%"


class EnergyUnit(str, Enum):
    KCAL = "kcal"
    KJ = "kJ"


class CountUnit(str, Enum):
    """Count-based units. Each one is only compatible with itself."""

    COUNT = "count"
    SERVING = "serving"
    PIECE = "piece"
    SLICE = "slice"
    REPS = "reps"


Unit = Union[
    WeightUnit,
    LengthUnit,
    VolumeUnit,
    TimeUnit,
    PercentageUnit,
    EnergyUnit,
    CountUnit,
]

_FAMILIES: dict[type, UnitFamily] = {
    WeightUnit: UnitFamily.WEIGHT,
    LengthUnit: UnitFamily.LENGTH,
    VolumeUnit: UnitFamily.VOLUME,
    TimeUnit: UnitFamily.TIME,
    PercentageUnit: UnitFamily.PERCENTAGE,
    EnergyUnit: UnitFamily.ENERGY,
    CountUnit: UnitFamily.COUNT,
}

# Factor to the canonical unit of each family
_TO_CANONICAL: dict[Enum, float] = {
    # grams
    WeightUnit.G: 1.0,
    WeightUnit.KG: 1000.0,
    WeightUnit.OZ: 28.3495,
    WeightUnit.LB: 453.59237,
    # centimeters
    LengthUnit.MM: 0.1,
    LengthUnit.CM: 1.0,
    LengthUnit.M: 100.0,
    LengthUnit.KM: 100000.0,
    LengthUnit.IN: 2.54,
    LengthUnit.FT: 30.48,
    LengthUnit.YD: 91.44,
    LengthUnit.MI: 160934.4,
    # milliliters
    VolumeUnit.ML: 1.0,
    VolumeUnit.L: 1000.0,
    VolumeUnit.FL_OZ: 29.5735,
    VolumeUnit.CUP: 236.588,
    VolumeUnit.TBSP: 14.7868,
    VolumeUnit.TSP: 4.92892,
    # seconds
    TimeUnit.S: 1.0,
    TimeUnit.MIN: 60.0,
    TimeUnit.HR: 3600.0,
    TimeUnit.DAY: 86400.0,
    TimeUnit.WEEK: 604800.0,
    PercentageUnit.PERCENT: 1.0,
    # kcal
    EnergyUnit.KCAL: 1.0,
    EnergyUnit.KJ: 1 / 4.184,
    CountUnit.COUNT: 1.0,
    CountUnit.SERVING: 1.0,
    CountUnit.PIECE: 1.0,
    CountUnit.SLICE: 1.0,
    CountUnit.REPS: 1.0,
}

CANONICAL_UNITS: dict[UnitFamily, Unit] = {
    UnitFamily.WEIGHT: WeightUnit.G,
    UnitFamily.LENGTH: LengthUnit.CM,
    UnitFamily.VOLUME: VolumeUnit.ML,
    UnitFamily.TIME: TimeUnit.S,
    UnitFamily.PERCENTAGE: PercentageUnit.PERCENT,
    UnitFamily.ENERGY: EnergyUnit.KCAL,
}

# Labels seen in stored records that are not the enum values themselves
_ALIASES: dict[str, Unit] = {
    "gram": WeightUnit.G,
    "grams": WeightUnit.G,
    "kilogram": WeightUnit.KG,
    "kilograms": WeightUnit.KG,
    "kgs": WeightUnit.KG,
    "ounce": WeightUnit.OZ,
    "ounces": WeightUnit.OZ,
    "lbs": WeightUnit.LB,
    "pound": WeightUnit.LB,
    "pounds": WeightUnit.LB,
    "meter": LengthUnit.M,
    "meters": LengthUnit.M,
    "metre": LengthUnit.M,
    "metres": LengthUnit.M,
    "inch": LengthUnit.IN,
    "inches": LengthUnit.IN,
    "foot": LengthUnit.FT,
    "feet": LengthUnit.FT,
    "yard": LengthUnit.YD,
    "yards": LengthUnit.YD,
    "mile": LengthUnit.MI,
    "miles": LengthUnit.MI,
    "milliliter": VolumeUnit.ML,
    "milliliters": VolumeUnit.ML,
    "liter": VolumeUnit.L,
    "liters": VolumeUnit.L,
    "fl-oz": VolumeUnit.FL_OZ,
    "floz": VolumeUnit.FL_OZ,
    "cups": VolumeUnit.CUP,
    "sec": TimeUnit.S,
    "second": TimeUnit.S,
    "seconds": TimeUnit.S,
    "minute": TimeUnit.MIN,
    "minutes": TimeUnit.MIN,
    "h": TimeUnit.HR,
    "hour": TimeUnit.HR,
    "hours": TimeUnit.HR,
    "days": TimeUnit.DAY,
    "weeks": TimeUnit.WEEK,
    "percent": PercentageUnit.PERCENT,
    "calories": EnergyUnit.KCAL,
    "calorie": EnergyUnit.KCAL,
    "cal": EnergyUnit.KCAL,
    "kj": EnergyUnit.KJ,
    "servings": CountUnit.SERVING,
    "pieces": CountUnit.PIECE,
    "slices": CountUnit.SLICE,
    "rep": CountUnit.REPS,
    "repetitions": CountUnit.REPS,
}

_BY_VALUE: dict[str, Unit] = {
    member.value: member for enum_cls in _FAMILIES for member in enum_cls
}


def parse_unit(label: Union[str, Unit, None]) -> Optional[Unit]:
    """Resolve a unit label (or alias) to its enum member.

    Args:
        label: Unit label as stored, e.g. "kg", "lbs", "fl oz", "minutes"

    Returns:
        Matching unit, or None if the label is unknown

    Example:
        >>> parse_unit("lbs")
        <WeightUnit.LB: 'lb'>
        >>> parse_unit("stone") is None
        True
    """
    if label is None:
        return None
    if type(label) in _FAMILIES:
        return label  # type: ignore[return-value]

    text = str(label).strip()
    if text in _BY_VALUE:
        return _BY_VALUE[text]

    lowered = text.lower()
    return _BY_VALUE.get(lowered) or _ALIASES.get(lowered)


def family_of(unit: Unit) -> UnitFamily:
    """Get the family a unit belongs to."""
    return _FAMILIES[type(unit)]


def canonical_factor(unit: Unit) -> float:
    """Get the multiplicative factor from unit to its family canonical unit."""
    return _TO_CANONICAL[unit]
