"""MeasurementSnapshot value object - latest values of tracked quantities."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from ....measurement.core.value_objects.measurement import Measurement
from ....shared.anthropometric_profile import AnthropometricProfile
from .tracked_quantity import ExerciseMeasure, TrackedQuantity

SnapshotValue = Union[Measurement, str]
RawValue = Union[SnapshotValue, float, Mapping[str, Any]]

BODY_STAT_FIELDS = (
    "weight",
    "height",
    "arm_length",
    "leg_length",
    "body_fat_percentage",
    "muscle_mass",
)


@dataclass(frozen=True)
class MeasurementSnapshot:
    """Immutable view of the latest value per tracked quantity.

    The caller builds one snapshot per evaluation from consistent data;
    the evaluator never looks anywhere else. Exercise values given as bare
    numbers or ``{"value", "unit"}`` mappings become Measurements in the
    measure's default unit (reps, kg, m, s, kcal).

    Examples:
        >>> snapshot = MeasurementSnapshot.from_profile(
        ...     AnthropometricProfile(weight=Measurement(82.0, "kg"))
        ... )
        >>> snapshot.latest(TrackedQuantity.body_stat("weight"))
        Measurement(value=82.0, unit='kg')
    """

    values: Mapping[TrackedQuantity, SnapshotValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        values = {quantity: _coerce(quantity, value) for quantity, value in self.values.items()}
        object.__setattr__(self, "values", MappingProxyType(values))

    @classmethod
    def from_profile(
        cls,
        profile: AnthropometricProfile,
        exercise_bests: Optional[Mapping[str, Mapping[Union[ExerciseMeasure, str], RawValue]]] = None,
    ) -> "MeasurementSnapshot":
        """Build a snapshot from body stats plus per-exercise bests.

        Args:
            profile: Latest body stats
            exercise_bests: ``{exercise_id: {measure: value}}``
        """
        values: dict[TrackedQuantity, RawValue] = {}
        for name in BODY_STAT_FIELDS:
            value = getattr(profile, name)
            if value is not None:
                values[TrackedQuantity.body_stat(name)] = value
        for site, value in profile.tape_measurements.items():
            values[TrackedQuantity.tape(site)] = value
        for exercise_id, measures in (exercise_bests or {}).items():
            for measure, value in measures.items():
                if value is not None:
                    values[TrackedQuantity.exercise(exercise_id, ExerciseMeasure(measure))] = value
        return cls(values)

    def with_value(self, quantity: TrackedQuantity, value: RawValue) -> "MeasurementSnapshot":
        """Copy of the snapshot with one quantity replaced."""
        values = dict(self.values)
        values[quantity] = value
        return MeasurementSnapshot(values)

    def with_exercise(
        self, exercise_id: str, measure: Union[ExerciseMeasure, str], value: RawValue
    ) -> "MeasurementSnapshot":
        return self.with_value(TrackedQuantity.exercise(exercise_id, ExerciseMeasure(measure)), value)

    def latest(self, quantity: TrackedQuantity) -> Optional[SnapshotValue]:
        """Latest value of the quantity, None if never measured."""
        return self.values.get(quantity)

    def __len__(self) -> int:
        return len(self.values)


def _coerce(quantity: TrackedQuantity, value: RawValue) -> SnapshotValue:
    if quantity.measure is None or isinstance(value, (Measurement, str)):
        return value
    if isinstance(value, Mapping):
        return Measurement.from_dict(value)
    return Measurement(value, quantity.measure.default_unit)
