"""Domain exceptions for the measurement model."""

from .domain_errors import (
    IncompatibleUnitsError,
    MeasurementDomainError,
    UnknownUnitError,
)

__all__ = [
    "MeasurementDomainError",
    "IncompatibleUnitsError",
    "UnknownUnitError",
]
