"""TDEE value object - Total Daily Energy Expenditure."""

from dataclasses import dataclass

from ..exceptions.domain_errors import InvalidUserDataError


@dataclass(frozen=True)
class TDEE:
    """Total Daily Energy Expenditure in kcal/day.

    Calculated as: TDEE = BMR × PAL (Physical Activity Level)

    Attributes:
        value: TDEE in kcal/day (must be positive)
    """

    value: float

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise InvalidUserDataError(f"TDEE must be positive, got {self.value}")

    def __str__(self) -> str:
        return f"{self.value:.0f} kcal/day"
