"""WorkPowerConstants value object - per-exercise work model factors."""

from dataclasses import dataclass, field
from typing import Any, Mapping

from ....measurement.core.exceptions.domain_errors import IncompatibleUnitsError
from ....measurement.core.value_objects.measurement import Measurement
from ....measurement.core.value_objects.units import LengthUnit, UnitFamily


def _zero_distance() -> Measurement:
    return Measurement(0.0, LengthUnit.M)


@dataclass(frozen=True)
class WorkPowerConstants:
    """How an exercise turns recorded sets into mechanical work.

    Unset factors are zero, so an all-default instance contributes no
    bodyweight, no limb distance and a 0 m default distance.

    Attributes:
        use_calories: Use machine-reported calories instead of mechanics
        bodyweight_factor: Share of bodyweight moved per rep (push-up ~0.64)
        arm_length_factor: Arm lengths travelled per rep
        leg_length_factor: Leg lengths travelled per rep
        default_distance: Distance per rep when no limb factor applies

    Examples:
        >>> squat = WorkPowerConstants(bodyweight_factor=0.85, leg_length_factor=0.5)
        >>> squat.default_distance
        Measurement(value=0.0, unit='m')
    """

    use_calories: bool = False
    bodyweight_factor: float = 0.0
    arm_length_factor: float = 0.0
    leg_length_factor: float = 0.0
    default_distance: Measurement = field(default_factory=_zero_distance)

    def __post_init__(self) -> None:
        """Validate factors and distance unit.

        Raises:
            ValueError: If a factor is negative
            IncompatibleUnitsError: If default distance is not a length
        """
        for name in ("bodyweight_factor", "arm_length_factor", "leg_length_factor"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        if self.default_distance.family is not UnitFamily.LENGTH:
            raise IncompatibleUnitsError(self.default_distance.unit.value, LengthUnit.M.value)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WorkPowerConstants":
        """Build from stored exercise options (camelCase keys)."""
        distance = data.get("defaultDistance", data.get("default_distance"))
        kwargs: dict[str, Any] = {
            "use_calories": bool(data.get("useCalories", data.get("use_calories", False))),
            "bodyweight_factor": data.get("bodyweightFactor", data.get("bodyweight_factor")) or 0.0,
            "arm_length_factor": data.get("armLengthFactor", data.get("arm_length_factor")) or 0.0,
            "leg_length_factor": data.get("legLengthFactor", data.get("leg_length_factor")) or 0.0,
        }
        if distance is not None:
            kwargs["default_distance"] = (
                distance if isinstance(distance, Measurement) else Measurement.from_dict(distance)
            )
        return cls(**kwargs)
