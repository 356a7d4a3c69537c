"""Conditional and GoalComponentType value objects."""

from enum import Enum
from typing import Union


class Conditional(str, Enum):
    """Comparison operator of a goal criterion."""

    EQUALS = "equals"
    GREATER_THAN = "greater than"
    LESS_THAN = "less than"
    GREATER_OR_EQUAL = "greater than or equal to"
    LESS_OR_EQUAL = "less than or equal to"
    NOT_EQUAL = "not equal to"

    @classmethod
    def from_label(cls, label: Union[str, "Conditional"]) -> "Conditional":
        """Parse a stored operator label.

        Accepts the full labels, short forms ("greater-or-equal",
        "not equal") and symbols (">=", "!=").

        Raises:
            ValueError: If the label is unknown

        Example:
            >>> Conditional.from_label(">=")
            <Conditional.GREATER_OR_EQUAL: 'greater than or equal to'>
        """
        if isinstance(label, Conditional):
            return label
        key = " ".join(str(label).strip().lower().replace("-", " ").replace("_", " ").split())
        try:
            return _LABELS[key]
        except KeyError:
            raise ValueError(f"Unknown conditional: {label!r}") from None

    @property
    def is_ordering(self) -> bool:
        """True for operators that need an ordered value."""
        return self not in (Conditional.EQUALS, Conditional.NOT_EQUAL)


_LABELS: dict[str, Conditional] = {member.value: member for member in Conditional}
_LABELS.update(
    {
        "equal": Conditional.EQUALS,
        "=": Conditional.EQUALS,
        "==": Conditional.EQUALS,
        ">": Conditional.GREATER_THAN,
        "<": Conditional.LESS_THAN,
        "greater or equal": Conditional.GREATER_OR_EQUAL,
        ">=": Conditional.GREATER_OR_EQUAL,
        "less or equal": Conditional.LESS_OR_EQUAL,
        "<=": Conditional.LESS_OR_EQUAL,
        "not equal": Conditional.NOT_EQUAL,
        "!=": Conditional.NOT_EQUAL,
    }
)


class GoalComponentType(str, Enum):
    """Kind of progress a goal component tracks."""

    BODYWEIGHT = "bodyweight"
    BODYCOMPOSITION = "bodycomposition"
    TAPE = "tape"
    STRENGTH = "strength"
    TIME = "time"
    REPETITIONS = "repetitions"
    SKILL = "skill"
    OTHER = "other"

    @property
    def is_exercise(self) -> bool:
        return self in (GoalComponentType.STRENGTH, GoalComponentType.TIME, GoalComponentType.REPETITIONS)
