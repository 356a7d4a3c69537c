"""GoalComponent entity."""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..value_objects.conditional import GoalComponentType
from .criterion import Criterion


@dataclass
class GoalComponent:
    """One trackable part of a goal.

    The ``complete`` attribute is the manually toggled flag. The evaluator
    only overrides it when the component has at least one criterion.

    Attributes:
        id: Component identifier
        name: Display name
        type: What the component tracks (bodyweight, tape, strength, ...)
        priority: Lower values come first
        complete: Manual completion flag
        exercise_id: Exercise tracked by strength/time/repetitions components
        criteria: Conditions that must all hold
    """

    id: str
    name: str
    type: Optional[GoalComponentType] = None
    priority: int = 0
    complete: bool = False
    exercise_id: Optional[str] = None
    criteria: list[Criterion] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.type is not None and not isinstance(self.type, GoalComponentType):
            self.type = GoalComponentType(self.type)
        self.criteria = list(self.criteria)

    def add_criterion(self, criterion: Criterion) -> None:
        self.criteria.append(criterion)

    def remove_criterion(self, criterion_id: str) -> None:
        self.criteria = [c for c in self.criteria if c.id != criterion_id]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GoalComponent":
        """Build from a stored component record (camelCase keys)."""
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            type=data.get("type"),
            priority=data.get("priority") or 0,
            complete=bool(data.get("complete", False)),
            exercise_id=data.get("exerciseId", data.get("exercise_id")),
            criteria=[Criterion.from_dict(c) for c in data.get("criteria") or []],
        )
