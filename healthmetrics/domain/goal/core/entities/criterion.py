"""Criterion entity - one testable condition of a goal component."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..exceptions.domain_errors import UnsupportedCriterionError
from ..value_objects.conditional import Conditional
from ..value_objects.criterion_value import CriterionValue, LiteralValue, criterion_value_from_raw
from ..value_objects.tracked_quantity import TrackedQuantity


@dataclass(frozen=True)
class Criterion:
    """Operator + target value, optionally bound to a tracked quantity.

    A criterion with no explicit quantity inherits one from its component
    at evaluation time (see CriteriaEvaluator.resolve_quantity).

    Attributes:
        id: Criterion identifier
        conditional: Comparison operator
        value: Target value (NumericValue or LiteralValue)
        quantity: Explicit tracked quantity reference
        initial_value: Starting value, kept for progress display
        measurement_site: Tape site for tape components ("waist", ...)
        measure_type: Exercise measure override ("distance", "time", ...)

    Raises:
        UnsupportedCriterionError: Ordering operator on a literal value
    """

    id: str
    conditional: Conditional
    value: CriterionValue
    quantity: Optional[TrackedQuantity] = None
    initial_value: Optional[CriterionValue] = None
    measurement_site: Optional[str] = None
    measure_type: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "conditional", Conditional.from_label(self.conditional))
        object.__setattr__(self, "value", criterion_value_from_raw(self.value))
        if self.initial_value is not None:
            object.__setattr__(self, "initial_value", criterion_value_from_raw(self.initial_value))

        if isinstance(self.value, LiteralValue) and self.conditional.is_ordering:
            raise UnsupportedCriterionError(self.conditional.value, self.value.text)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Criterion":
        """Build from a stored criterion record (camelCase keys)."""
        initial = data.get("initialValue", data.get("initial_value"))
        return cls(
            id=str(data["id"]),
            conditional=data["conditional"],
            value=data["value"],
            initial_value=initial,
            measurement_site=data.get("measurementSite", data.get("measurement_site")),
            measure_type=data.get("type", data.get("measure_type")),
        )
