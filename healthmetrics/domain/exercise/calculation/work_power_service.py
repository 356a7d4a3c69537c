"""WorkPowerService - mechanical work and power of an exercise."""

from typing import Optional, Sequence, Union

import structlog

from ....config import get_gravity
from ...measurement.conversion import time_to_seconds
from ...measurement.core.value_objects.measurement import Measurement
from ...measurement.core.value_objects.units import LengthUnit, WeightUnit
from ...shared.anthropometric_profile import AnthropometricProfile
from ..core.exceptions.domain_errors import MissingAnthropometryError
from ..core.value_objects.set_measures import SetMeasures, WorkOutput
from ..core.value_objects.work_power_constants import WorkPowerConstants

logger = structlog.get_logger(__name__)

JOULES_PER_KCAL = 4184
STANDARD_GRAVITY = 9.81

DEFAULT_CONSTANTS = WorkPowerConstants()


class WorkPowerService:
    """Estimate work (J) and power (W) from logged sets.

    Per set:
        - Calorie-based exercises: work = kcal × 4184
        - Otherwise:
            mass     = bodyweight(kg) × bodyweight_factor + external load(kg)
            force    = mass × (gravity / 9.81)
            distance = default distance, replaced by the limb distance
                       (arm × arm factor + leg × leg factor) when non-zero,
                       replaced by the recorded set distance when present
            work     = force × distance × reps

    Power is total work over elapsed time, only when a time is given.
    """

    REQUIRED_FIELDS = ("weight", "arm_length", "leg_length")

    def compute_output(
        self,
        profile: AnthropometricProfile,
        measures_per_set: Sequence[SetMeasures],
        constants: Sequence[WorkPowerConstants] = (),
        elapsed_seconds: Optional[Union[float, Measurement]] = None,
        gravity: Optional[float] = None,
    ) -> WorkOutput:
        """Compute total work and average power.

        Args:
            profile: Body stats with weight, arm and leg length
            measures_per_set: Recorded values per set
            constants: Work model per set; sets past the end use defaults
            elapsed_seconds: Total duration, as seconds or a time Measurement
            gravity: Acceleration in m/s², defaults to HEALTHMETRICS_GRAVITY

        Returns:
            WorkOutput with work in J and power in W

        Raises:
            MissingAnthropometryError: If weight, arm or leg length is missing

        Example:
            >>> profile = AnthropometricProfile(
            ...     weight=Measurement(80, "kg"),
            ...     arm_length=Measurement(60, "cm"),
            ...     leg_length=Measurement(90, "cm"),
            ... )
            >>> pushup = WorkPowerConstants(bodyweight_factor=0.5, arm_length_factor=1.0)
            >>> WorkPowerService().compute_output(
            ...     profile, [SetMeasures(reps=10)], [pushup], elapsed_seconds=20
            ... ).work
            240.0
        """
        missing = profile.missing(*self.REQUIRED_FIELDS)
        if missing:
            raise MissingAnthropometryError(missing)

        if gravity is None:
            gravity = get_gravity()

        weight_kg = profile.weight.to(WeightUnit.KG).value
        arm_m = profile.arm_length.to(LengthUnit.M).value
        leg_m = profile.leg_length.to(LengthUnit.M).value

        total_work = 0.0
        for index, measures in enumerate(measures_per_set):
            set_constants = constants[index] if index < len(constants) else DEFAULT_CONSTANTS
            total_work += self._set_work(measures, set_constants, weight_kg, arm_m, leg_m, gravity)

        if isinstance(elapsed_seconds, Measurement):
            elapsed_seconds = time_to_seconds(elapsed_seconds)

        power = total_work / elapsed_seconds if elapsed_seconds else None
        logger.debug(
            "Work output computed",
            sets=len(measures_per_set),
            work=total_work,
            power=power,
        )
        return WorkOutput(work=total_work, power=power)

    def _set_work(
        self,
        measures: SetMeasures,
        constants: WorkPowerConstants,
        weight_kg: float,
        arm_m: float,
        leg_m: float,
        gravity: float,
    ) -> float:
        if constants.use_calories:
            return (measures.calories or 0.0) * JOULES_PER_KCAL

        mass = weight_kg * constants.bodyweight_factor + measures.external_load_kg()
        force = mass * (gravity / STANDARD_GRAVITY)

        distance_m = constants.default_distance.to(LengthUnit.M).value
        limb_distance_m = arm_m * constants.arm_length_factor + leg_m * constants.leg_length_factor
        if limb_distance_m != 0:
            distance_m = limb_distance_m
        if measures.distance is not None:
            distance_m = measures.distance.to(LengthUnit.M).value

        reps = measures.reps or 1
        return force * distance_m * reps
