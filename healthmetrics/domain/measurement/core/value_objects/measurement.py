"""Measurement value object.

Immutable value + unit pair. The unit's enum type is the tag that decides
the measurement family; all conversion dispatches on it.
"""

import math
from dataclasses import dataclass
from typing import Any, Mapping, Union

from ..exceptions.domain_errors import IncompatibleUnitsError, UnknownUnitError
from .units import (
    CountUnit,
    Unit,
    UnitFamily,
    canonical_factor,
    family_of,
    parse_unit,
)


@dataclass(frozen=True)
class Measurement:
    """Value object for a measured quantity with unit.

    Attributes:
        value: Numeric amount (finite)
        unit: Unit of measurement; string labels are resolved on creation

    Examples:
        >>> m = Measurement(180.0, "lbs")
        >>> m.unit
        <WeightUnit.LB: 'lb'>
        >>> round(m.to("kg").value, 2)
        81.65

    Raises:
        UnknownUnitError: If the unit label cannot be resolved.
        ValueError: If value is not a finite number.
    """

    value: float
    unit: Unit

    def __post_init__(self) -> None:
        """Validate measurement invariants."""
        resolved = parse_unit(self.unit)
        if resolved is None:
            raise UnknownUnitError(self.unit)
        object.__setattr__(self, "unit", resolved)

        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise ValueError(f"Measurement value must be a number, got {self.value!r}")
        if not math.isfinite(self.value):
            raise ValueError(f"Measurement value must be finite, got {self.value}")
        object.__setattr__(self, "value", float(self.value))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Measurement":
        """Create from a plain ``{"value": ..., "unit": ...}`` mapping."""
        return cls(value=data["value"], unit=data["unit"])

    def to_dict(self) -> dict[str, Union[float, str]]:
        """Plain representation for the outer layer."""
        return {"value": self.value, "unit": self.unit.value}

    @property
    def family(self) -> UnitFamily:
        """Family the measurement belongs to."""
        return family_of(self.unit)

    def is_compatible_with(self, other: "Measurement") -> bool:
        """Check whether both measurements can be combined."""
        if self.unit == other.unit:
            return True
        if self.family != other.family:
            return False
        # Distinct count units (pieces vs servings) never convert
        return self.family is not UnitFamily.COUNT

    def canonical_value(self) -> float:
        """Value expressed in the canonical unit of its family."""
        return self.value * canonical_factor(self.unit)

    def to(self, unit: Union[Unit, str]) -> "Measurement":
        """Convert to another unit of the same family.

        Raises:
            UnknownUnitError: If the target label is unknown.
            IncompatibleUnitsError: If the target is in another family.
        """
        target = parse_unit(unit)
        if target is None:
            raise UnknownUnitError(unit)
        if target == self.unit:
            return self

        other = Measurement(0.0, target)
        if not self.is_compatible_with(other):
            raise IncompatibleUnitsError(self.unit.value, target.value)
        return Measurement(self.canonical_value() / canonical_factor(target), target)

    def __add__(self, other: "Measurement") -> "Measurement":
        if not isinstance(other, Measurement):
            return NotImplemented
        return Measurement(self.value + other.to(self.unit).value, self.unit)

    def __sub__(self, other: "Measurement") -> "Measurement":
        if not isinstance(other, Measurement):
            return NotImplemented
        return Measurement(self.value - other.to(self.unit).value, self.unit)

    def scale(self, factor: float) -> "Measurement":
        """Scale measurement by factor, keeping the unit."""
        return Measurement(self.value * factor, self.unit)

    def __str__(self) -> str:
        """Human-readable representation."""
        if self.unit is CountUnit.COUNT:
            return f"{self.value:g}"
        return f"{self.value:g} {self.unit.value}"

    def __repr__(self) -> str:
        """Developer representation."""
        return f"Measurement(value={self.value}, unit='{self.unit.value}')"
