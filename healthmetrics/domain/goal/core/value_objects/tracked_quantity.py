"""TrackedQuantity value object - what a criterion is measured against."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class QuantityKind(str, Enum):
    BODY_STAT = "body_stat"
    TAPE = "tape"
    EXERCISE = "exercise"


class ExerciseMeasure(str, Enum):
    """Per-exercise value recorded in a workout set."""

    EXTERNAL_LOAD = "external_load"
    REPS = "reps"
    DISTANCE = "distance"
    TIME = "time"
    CALORIES = "calories"

    @property
    def default_unit(self) -> str:
        """Unit assumed for bare numbers recorded for this measure."""
        return _DEFAULT_UNITS[self]


_DEFAULT_UNITS: dict[ExerciseMeasure, str] = {
    ExerciseMeasure.EXTERNAL_LOAD: "kg",
    ExerciseMeasure.REPS: "reps",
    ExerciseMeasure.DISTANCE: "m",
    ExerciseMeasure.TIME: "s",
    ExerciseMeasure.CALORIES: "kcal",
}


@dataclass(frozen=True)
class TrackedQuantity:
    """Reference to a tracked quantity.

    Attributes:
        kind: Body stat, tape site or exercise measure
        key: Body stat field name, tape site, or exercise id
        measure: Exercise measure, only for EXERCISE quantities

    Examples:
        >>> TrackedQuantity.body_stat("weight")
        TrackedQuantity(kind=<QuantityKind.BODY_STAT: 'body_stat'>, key='weight', measure=None)
    """

    kind: QuantityKind
    key: str
    measure: Optional[ExerciseMeasure] = None

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("Tracked quantity key cannot be empty")
        if self.kind is QuantityKind.EXERCISE and self.measure is None:
            raise ValueError("Exercise quantities need a measure")
        if self.kind is not QuantityKind.EXERCISE and self.measure is not None:
            raise ValueError(f"{self.kind.value} quantities take no measure")

    @classmethod
    def body_stat(cls, name: str) -> "TrackedQuantity":
        return cls(QuantityKind.BODY_STAT, name)

    @classmethod
    def tape(cls, site: str) -> "TrackedQuantity":
        return cls(QuantityKind.TAPE, site)

    @classmethod
    def exercise(cls, exercise_id: str, measure: ExerciseMeasure) -> "TrackedQuantity":
        return cls(QuantityKind.EXERCISE, exercise_id, ExerciseMeasure(measure))

    def __str__(self) -> str:
        if self.measure is not None:
            return f"{self.kind.value}:{self.key}:{self.measure.value}"
        return f"{self.kind.value}:{self.key}"
