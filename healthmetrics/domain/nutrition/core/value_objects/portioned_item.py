"""PortionedItem value object - nutrients anchored to a serving size."""

from dataclasses import dataclass
from typing import Optional

from ....measurement.core.value_objects.measurement import Measurement
from .nutrient_profile import NutrientProfile


@dataclass(frozen=True)
class PortionedItem:
    """Nutrient profile expressed per base serving.

    Scaling to a logged portion requires the portion to share the base
    serving's unit family (weight-to-weight or volume-to-volume).

    Attributes:
        nutrients: Nutrients contained in one base serving
        serving_size: The base serving, e.g. 100 g or 1 cup
        name: Optional display name
    """

    nutrients: NutrientProfile
    serving_size: Measurement
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if self.serving_size.value <= 0:
            raise ValueError(f"Serving size must be positive, got {self.serving_size}")
