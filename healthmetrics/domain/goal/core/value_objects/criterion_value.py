"""Criterion target values: a measurement or a literal string."""

from dataclasses import dataclass
from typing import Any, Union

from ....measurement.core.value_objects.measurement import Measurement


@dataclass(frozen=True)
class NumericValue:
    """Measured target, e.g. 80 kg or 12 %."""

    measurement: Measurement

    def __str__(self) -> str:
        return str(self.measurement)


@dataclass(frozen=True)
class LiteralValue:
    """Free-text target, e.g. a skill level. Compared by equality only."""

    text: str

    def __str__(self) -> str:
        return self.text


CriterionValue = Union[NumericValue, LiteralValue]


def criterion_value_from_raw(raw: Any) -> CriterionValue:
    """Build a criterion value from stored data.

    ``{"value": ..., "unit": ...}`` mappings and Measurements become
    NumericValue; strings become LiteralValue.

    Raises:
        ValueError: For any other shape
    """
    if isinstance(raw, (NumericValue, LiteralValue)):
        return raw
    if isinstance(raw, Measurement):
        return NumericValue(raw)
    if isinstance(raw, str):
        return LiteralValue(raw)
    if isinstance(raw, dict) and "value" in raw and "unit" in raw:
        return NumericValue(Measurement.from_dict(raw))
    raise ValueError(f"Unsupported criterion value: {raw!r}")
