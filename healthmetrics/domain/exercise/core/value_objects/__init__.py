"""Value objects for exercise calculations."""

from .set_measures import SetMeasures, WorkOutput
from .work_power_constants import WorkPowerConstants

__all__ = [
    "SetMeasures",
    "WorkOutput",
    "WorkPowerConstants",
]
