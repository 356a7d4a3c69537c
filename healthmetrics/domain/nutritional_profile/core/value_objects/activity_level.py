"""ActivityLevel value object - physical activity level for TDEE."""

from enum import Enum
from typing import Union


class ActivityLevel(str, Enum):
    """Physical Activity Level (PAL) for TDEE calculation.

    Represents user's typical activity level to multiply BMR:
    - SEDENTARY: Little or no exercise (office job)
    - LIGHTLY_ACTIVE: Light exercise 1-3 days/week
    - MODERATELY_ACTIVE: Moderate exercise 3-5 days/week
    - VERY_ACTIVE: Hard exercise 6-7 days/week
    - EXTRA_ACTIVE: Very hard exercise + physical job
    """

    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly active"
    MODERATELY_ACTIVE = "moderately active"
    VERY_ACTIVE = "very active"
    EXTRA_ACTIVE = "extra active"

    @classmethod
    def parse(cls, value: Union[str, "ActivityLevel", None]) -> "ActivityLevel":
        """Parse a stored label; unknown or missing levels default to sedentary.

        Example:
            >>> ActivityLevel.parse("extra-active")
            <ActivityLevel.EXTRA_ACTIVE: 'extra active'>
            >>> ActivityLevel.parse(None)
            <ActivityLevel.SEDENTARY: 'sedentary'>
        """
        if isinstance(value, ActivityLevel):
            return value
        if value is None:
            return cls.SEDENTARY
        normalized = " ".join(str(value).strip().lower().replace("_", " ").replace("-", " ").split())
        for member in cls:
            if member.value == normalized:
                return member
        return cls.SEDENTARY

    def pal_multiplier(self) -> float:
        """Get PAL (Physical Activity Level) multiplier.

        Returns:
            float: Multiplier for BMR to calculate TDEE

        Example:
            >>> ActivityLevel.MODERATELY_ACTIVE.pal_multiplier()
            1.55
        """
        return _PAL_MULTIPLIERS[self]


_PAL_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.EXTRA_ACTIVE: 1.9,
}
