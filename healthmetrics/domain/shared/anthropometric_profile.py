"""AnthropometricProfile value object - latest body stats of a user."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Mapping, Optional, Union

from ..measurement.core.exceptions.domain_errors import IncompatibleUnitsError
from ..measurement.core.value_objects.measurement import Measurement
from ..measurement.core.value_objects.units import CANONICAL_UNITS, UnitFamily


class Sex(str, Enum):
    """Biological sex, as used by the metabolic formulas."""

    MALE = "male"
    FEMALE = "female"

    @classmethod
    def parse(cls, value: Union[str, "Sex", None]) -> Optional["Sex"]:
        """Parse stored labels ("male", "F", ...); unknown labels yield None."""
        if value is None or isinstance(value, Sex):
            return value
        text = str(value).strip().lower()
        if text in ("male", "m"):
            return cls.MALE
        if text in ("female", "f"):
            return cls.FEMALE
        return None


def age_from_birth_date(birth_date: date, today: Optional[date] = None) -> int:
    """Calculate age in whole years.

    Args:
        birth_date: Date of birth
        today: Reference date, defaults to the current date

    Example:
        >>> age_from_birth_date(date(1990, 6, 15), today=date(2025, 6, 14))
        34
    """
    if isinstance(birth_date, datetime):
        birth_date = birth_date.date()
    reference = today or date.today()
    age = reference.year - birth_date.year
    if (reference.month, reference.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


_EXPECTED_FAMILIES = {
    "weight": UnitFamily.WEIGHT,
    "height": UnitFamily.LENGTH,
    "arm_length": UnitFamily.LENGTH,
    "leg_length": UnitFamily.LENGTH,
    "body_fat_percentage": UnitFamily.PERCENTAGE,
    "muscle_mass": UnitFamily.WEIGHT,
}

_DICT_KEYS = {
    "weight": "weight",
    "height": "height",
    "armLength": "arm_length",
    "arm_length": "arm_length",
    "legLength": "leg_length",
    "leg_length": "leg_length",
    "bodyFatPercentage": "body_fat_percentage",
    "body_fat_percentage": "body_fat_percentage",
    "muscleMass": "muscle_mass",
    "muscle_mass": "muscle_mass",
}


@dataclass(frozen=True)
class AnthropometricProfile:
    """User body stats for engine calculations.

    Every field is optional so partially filled profiles can be passed in;
    each calculator decides which fields it requires.

    Attributes:
        weight: Body weight
        height: Standing height
        arm_length: Arm length (shoulder to wrist)
        leg_length: Leg length (hip to ankle)
        body_fat_percentage: Body fat in %
        muscle_mass: Skeletal muscle mass
        tape_measurements: Circumferences by site ("waist", "neck", ...)
        birth_date: Date of birth, used to derive age
        age: Explicit age in years, wins over birth_date
        sex: Biological sex
    """

    weight: Optional[Measurement] = None
    height: Optional[Measurement] = None
    arm_length: Optional[Measurement] = None
    leg_length: Optional[Measurement] = None
    body_fat_percentage: Optional[Measurement] = None
    muscle_mass: Optional[Measurement] = None
    tape_measurements: Mapping[str, Measurement] = field(default_factory=dict)
    birth_date: Optional[date] = None
    age: Optional[int] = None
    sex: Optional[Sex] = None

    def __post_init__(self) -> None:
        """Validate every measurement belongs to the expected family.

        Raises:
            IncompatibleUnitsError: e.g. a height given in kilograms
        """
        for name, family in _EXPECTED_FAMILIES.items():
            value = getattr(self, name)
            if value is not None and value.family is not family:
                raise IncompatibleUnitsError(value.unit.value, CANONICAL_UNITS[family].value)
        for site, value in self.tape_measurements.items():
            if value.family is not UnitFamily.LENGTH:
                raise IncompatibleUnitsError(value.unit.value, CANONICAL_UNITS[UnitFamily.LENGTH].value)
        if self.sex is not None and not isinstance(self.sex, Sex):
            object.__setattr__(self, "sex", Sex.parse(self.sex))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AnthropometricProfile":
        """Build a profile from a stored stats record.

        Accepts both camelCase and snake_case keys; measurements are
        ``{"value": ..., "unit": ...}`` mappings.
        """
        kwargs: dict[str, Any] = {}
        for key, attr in _DICT_KEYS.items():
            raw = data.get(key)
            if raw is not None:
                kwargs[attr] = raw if isinstance(raw, Measurement) else Measurement.from_dict(raw)

        tape = data.get("tapeMeasurements") or data.get("tape_measurements") or {}
        kwargs["tape_measurements"] = {
            site: value if isinstance(value, Measurement) else Measurement.from_dict(value)
            for site, value in tape.items()
            if site not in ("id", "date") and value is not None
        }

        birth_date = data.get("birthDate") or data.get("birth_date")
        if isinstance(birth_date, str):
            birth_date = date.fromisoformat(birth_date[:10])
        kwargs["birth_date"] = birth_date
        kwargs["age"] = data.get("age")
        kwargs["sex"] = Sex.parse(data.get("sex") or data.get("gender"))
        return cls(**kwargs)

    def age_years(self, today: Optional[date] = None) -> Optional[int]:
        """Age in years, from the explicit age or the birth date."""
        if self.age is not None:
            return self.age
        if self.birth_date is not None:
            return age_from_birth_date(self.birth_date, today)
        return None

    def missing(self, *fields: str) -> list[str]:
        """Names of the requested fields that are not set."""
        return [name for name in fields if getattr(self, name) is None]
