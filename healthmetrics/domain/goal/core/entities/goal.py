"""Goal entity - aggregate of goal components."""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..value_objects.conditional import GoalComponentType
from .goal_component import GoalComponent


@dataclass
class Goal:
    """User goal made of components.

    Attributes:
        id: Goal identifier
        name: Display name
        components: Trackable parts of the goal
        complete: Completion flag as last stored by the caller
    """

    id: str
    name: Optional[str] = None
    components: list[GoalComponent] = field(default_factory=list)
    complete: bool = False

    def __post_init__(self) -> None:
        self.components = list(self.components)

    def components_of_type(self, component_type: GoalComponentType) -> list[GoalComponent]:
        """Components tracking the given type, in stored order."""
        return [c for c in self.components if c.type is component_type]

    def has_component_type(self, component_type: GoalComponentType) -> bool:
        return any(c.type is component_type for c in self.components)

    def lowest_priority(self) -> Optional[int]:
        """Smallest priority among components, None without components."""
        if not self.components:
            return None
        return min(c.priority or 0 for c in self.components)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Goal":
        """Build from a stored goal record.

        Example:
            >>> goal = Goal.from_dict({
            ...     "id": "g1",
            ...     "complete": False,
            ...     "components": [{
            ...         "id": "c1", "name": "Cut", "type": "bodyweight",
            ...         "priority": 1, "complete": False,
            ...         "criteria": [{"id": "k1", "conditional": "less than",
            ...                       "value": {"value": 80, "unit": "kg"}}],
            ...     }],
            ... })
            >>> goal.components[0].type
            <GoalComponentType.BODYWEIGHT: 'bodyweight'>
        """
        components = data.get("components") or data.get("goalComponents") or []
        return cls(
            id=str(data["id"]),
            name=data.get("name"),
            components=[GoalComponent.from_dict(c) for c in components],
            complete=bool(data.get("complete", False)),
        )
