"""Domain exceptions for the measurement model."""

from typing import Any

from ....shared.errors import DomainError


class MeasurementDomainError(DomainError):
    """Base exception for measurement domain errors."""

    pass


class IncompatibleUnitsError(MeasurementDomainError):
    """Raised when two measurements of different unit families are combined.

    Examples:
    - Adding a weight to a length
    - Converting cups to grams (no density information)
    - Comparing two distinct count units (pieces vs servings)
    """

    def __init__(self, from_unit: Any, to_unit: Any):
        super().__init__(f"Cannot convert between incompatible units: {from_unit} and {to_unit}")
        self.from_unit = from_unit
        self.to_unit = to_unit


class UnknownUnitError(MeasurementDomainError, ValueError):
    """Raised when a unit label cannot be resolved to a known unit."""

    def __init__(self, label: Any):
        super().__init__(f"Unknown unit: {label!r}")
        self.label = label
