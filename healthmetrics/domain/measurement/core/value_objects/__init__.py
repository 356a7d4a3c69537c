"""Value objects for the measurement model."""

from .measurement import Measurement
from .units import (
    CANONICAL_UNITS,
    CountUnit,
    EnergyUnit,
    LengthUnit,
    PercentageUnit,
    TimeUnit,
    Unit,
    UnitFamily,
    VolumeUnit,
    WeightUnit,
    canonical_factor,
    family_of,
    parse_unit,
)

__all__ = [
    "Measurement",
    "Unit",
    "UnitFamily",
    "WeightUnit",
    "LengthUnit",
    "VolumeUnit",
    "TimeUnit",
    "PercentageUnit",
    "EnergyUnit",
    "CountUnit",
    "CANONICAL_UNITS",
    "canonical_factor",
    "family_of",
    "parse_unit",
]
