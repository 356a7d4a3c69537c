"""SetMeasures and WorkOutput value objects."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from ....measurement.core.value_objects.measurement import Measurement
from ....measurement.core.value_objects.units import WeightUnit


def _as_measurement(raw: Any, default_unit: str) -> Optional[Measurement]:
    if raw is None or isinstance(raw, Measurement):
        return raw
    if isinstance(raw, Mapping):
        return Measurement.from_dict(raw)
    return Measurement(raw, default_unit)


@dataclass(frozen=True)
class SetMeasures:
    """Values recorded for one set of an exercise.

    Attributes:
        external_load: Added weight (barbell, vest, ...)
        reps: Repetitions, missing or 0 counts as one continuous movement
        distance: Distance covered, overrides the exercise distance model
        time: Set duration
        calories: Machine-reported kcal
    """

    external_load: Optional[Measurement] = None
    reps: Optional[int] = None
    distance: Optional[Measurement] = None
    time: Optional[Measurement] = None
    calories: Optional[float] = None

    def __post_init__(self) -> None:
        if self.reps is not None and self.reps < 0:
            raise ValueError(f"Reps must be non-negative, got {self.reps}")
        if self.calories is not None and self.calories < 0:
            raise ValueError(f"Calories must be non-negative, got {self.calories}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SetMeasures":
        """Build from a logged set record.

        Bare numbers are read as kg for load, m for distance and s for
        time.
        """
        return cls(
            external_load=_as_measurement(data.get("externalLoad", data.get("external_load")), "kg"),
            reps=data.get("reps"),
            distance=_as_measurement(data.get("distance"), "m"),
            time=_as_measurement(data.get("time"), "s"),
            calories=data.get("calories"),
        )

    def external_load_kg(self) -> float:
        if self.external_load is None:
            return 0.0
        return self.external_load.to(WeightUnit.KG).value


@dataclass(frozen=True)
class WorkOutput:
    """Mechanical output of a sequence of sets.

    Attributes:
        work: Total work in joules
        power: Average power in watts, None without elapsed time
    """

    work: float
    power: Optional[float] = None

    def to_dict(self) -> dict[str, Union[float, None]]:
        data: dict[str, Union[float, None]] = {"work": self.work}
        if self.power is not None:
            data["power"] = self.power
        return data
