"""Ports (interfaces) for nutritional profile domain."""

from .calculators import (
    IBMRCalculator,
    ICalorieTargetCalculator,
    IMacroCalculator,
    ITDEECalculator,
)

__all__ = [
    "IBMRCalculator",
    "ITDEECalculator",
    "ICalorieTargetCalculator",
    "IMacroCalculator",
]
