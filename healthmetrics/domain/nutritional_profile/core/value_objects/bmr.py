"""BMR value object - Basal Metabolic Rate."""

from dataclasses import dataclass

from ..exceptions.domain_errors import InvalidUserDataError


@dataclass(frozen=True)
class BMR:
    """Basal Metabolic Rate in kcal/day.

    Represents the minimum calories needed for basic bodily functions
    at rest (breathing, circulation, cell production, nutrient processing).

    Attributes:
        value: BMR in kcal/day (must be positive)
    """

    value: float

    def __post_init__(self) -> None:
        """Validate BMR is positive.

        Raises:
            InvalidUserDataError: If BMR is not positive
        """
        if self.value <= 0:
            raise InvalidUserDataError(f"BMR must be positive, got {self.value}")

    def __str__(self) -> str:
        return f"{self.value:.0f} kcal/day"
