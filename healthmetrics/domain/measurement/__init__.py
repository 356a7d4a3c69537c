"""Measurement model: tagged value/unit pairs and conversions."""

from .conversion import (
    are_units_compatible,
    convert,
    ratio,
    time_to_minutes,
    time_to_seconds,
)
from .core.exceptions import (
    IncompatibleUnitsError,
    MeasurementDomainError,
    UnknownUnitError,
)
from .core.value_objects import (
    CountUnit,
    EnergyUnit,
    LengthUnit,
    Measurement,
    PercentageUnit,
    TimeUnit,
    Unit,
    UnitFamily,
    VolumeUnit,
    WeightUnit,
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
    "parse_unit",
    "convert",
    "ratio",
    "are_units_compatible",
    "time_to_seconds",
    "time_to_minutes",
    "MeasurementDomainError",
    "IncompatibleUnitsError",
    "UnknownUnitError",
]
