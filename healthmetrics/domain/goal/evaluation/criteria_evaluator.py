"""CriteriaEvaluator - goal completion from the latest measurements."""

import math
from typing import Optional

import structlog

from ...measurement.core.value_objects.measurement import Measurement
from ..core.entities.criterion import Criterion
from ..core.entities.goal import Goal
from ..core.entities.goal_component import GoalComponent
from ..core.value_objects.conditional import Conditional, GoalComponentType
from ..core.value_objects.criterion_value import LiteralValue, NumericValue
from ..core.value_objects.evaluation import (
    ComponentEvaluation,
    CriterionState,
    GoalEvaluation,
    GoalProgress,
)
from ..core.value_objects.measurement_snapshot import MeasurementSnapshot, SnapshotValue
from ..core.value_objects.tracked_quantity import ExerciseMeasure, TrackedQuantity

logger = structlog.get_logger(__name__)

# Absolute tolerance in canonical units for equality checks
EQUALITY_TOLERANCE = 1e-6

_DEFAULT_EXERCISE_MEASURE = {
    GoalComponentType.STRENGTH: ExerciseMeasure.EXTERNAL_LOAD,
    GoalComponentType.TIME: ExerciseMeasure.TIME,
    GoalComponentType.REPETITIONS: ExerciseMeasure.REPS,
}


class CriteriaEvaluator:
    """Evaluate goal criteria against a measurement snapshot.

    Results are recomputed on every call; stored completion flags are
    only used for components without criteria. Evaluation never raises:
    unresolvable or mismatched comparisons evaluate to FALSE and are
    logged.
    """

    def resolve_quantity(
        self, criterion: Criterion, component: Optional[GoalComponent] = None
    ) -> Optional[TrackedQuantity]:
        """Tracked quantity a criterion compares against.

        An explicit reference wins; otherwise it is inherited from the
        component type:
            bodyweight       -> body stat "weight"
            bodycomposition  -> body stat "body_fat_percentage"
            tape             -> tape site of the criterion
            strength/time/repetitions -> exercise measure of the component
        """
        if criterion.quantity is not None:
            return criterion.quantity
        if component is None or component.type is None:
            return None

        if component.type is GoalComponentType.BODYWEIGHT:
            return TrackedQuantity.body_stat("weight")
        if component.type is GoalComponentType.BODYCOMPOSITION:
            return TrackedQuantity.body_stat("body_fat_percentage")
        if component.type is GoalComponentType.TAPE:
            if not criterion.measurement_site:
                return None
            return TrackedQuantity.tape(criterion.measurement_site)
        if component.type.is_exercise and component.exercise_id:
            measure = _DEFAULT_EXERCISE_MEASURE[component.type]
            if criterion.measure_type:
                try:
                    measure = ExerciseMeasure(criterion.measure_type)
                except ValueError:
                    logger.debug(
                        "Unknown exercise measure, using component default",
                        criterion_id=criterion.id,
                        measure_type=criterion.measure_type,
                    )
            return TrackedQuantity.exercise(component.exercise_id, measure)
        return None

    def evaluate_criterion(
        self,
        criterion: Criterion,
        snapshot: MeasurementSnapshot,
        component: Optional[GoalComponent] = None,
    ) -> CriterionState:
        """Evaluate one criterion.

        Returns:
            NOT_EVALUATED when no current value exists, else TRUE/FALSE
        """
        quantity = self.resolve_quantity(criterion, component)
        if quantity is None:
            return CriterionState.NOT_EVALUATED

        current = snapshot.latest(quantity)
        if current is None:
            return CriterionState.NOT_EVALUATED

        if self._compare(criterion, current):
            return CriterionState.TRUE
        return CriterionState.FALSE

    def evaluate_component(
        self, component: GoalComponent, snapshot: MeasurementSnapshot
    ) -> ComponentEvaluation:
        """Evaluate a component.

        Complete iff it has at least one criterion and all are TRUE. A
        component without criteria keeps its manual flag.
        """
        if not component.criteria:
            return ComponentEvaluation(
                component_id=component.id,
                complete=component.complete,
                auto_evaluated=False,
            )

        states = tuple(
            (criterion.id, self.evaluate_criterion(criterion, snapshot, component))
            for criterion in component.criteria
        )
        complete = all(state is CriterionState.TRUE for _, state in states)
        return ComponentEvaluation(component_id=component.id, complete=complete, criteria=states)

    def evaluate_goal(self, goal: Goal, snapshot: MeasurementSnapshot) -> GoalEvaluation:
        """Evaluate a goal: complete iff it has components and all are complete."""
        components = tuple(self.evaluate_component(c, snapshot) for c in goal.components)
        complete = bool(components) and all(c.complete for c in components)
        logger.debug(
            "Goal evaluated",
            goal_id=goal.id,
            complete=complete,
            components=len(components),
        )
        return GoalEvaluation(goal_id=goal.id, complete=complete, components=components)

    def goal_progress(self, goal: Goal, snapshot: MeasurementSnapshot) -> GoalProgress:
        """Completed components over total, as a rounded percentage."""
        evaluation = self.evaluate_goal(goal, snapshot)
        total = len(evaluation.components)
        completed = sum(1 for c in evaluation.components if c.complete)
        percentage = round(completed / total * 100) if total else 0
        return GoalProgress(completed=completed, total=total, percentage=percentage)

    def _compare(self, criterion: Criterion, current: SnapshotValue) -> bool:
        target = criterion.value

        if isinstance(target, NumericValue) and isinstance(current, Measurement):
            if not current.is_compatible_with(target.measurement):
                logger.warning(
                    "Criterion unit family does not match measurement",
                    criterion_id=criterion.id,
                    current_unit=current.unit.value,
                    target_unit=target.measurement.unit.value,
                )
                return False
            if current.unit == target.measurement.unit:
                return _compare_numbers(current.value, target.measurement.value, criterion.conditional)
            return _compare_numbers(
                current.canonical_value(),
                target.measurement.canonical_value(),
                criterion.conditional,
            )

        if isinstance(target, LiteralValue) and isinstance(current, str):
            equal = current.strip() == target.text.strip()
            return equal if criterion.conditional is Conditional.EQUALS else not equal

        logger.warning(
            "Criterion value kind does not match measurement",
            criterion_id=criterion.id,
            target=str(target),
            current=str(current),
        )
        return False


def _compare_numbers(current: float, target: float, conditional: Conditional) -> bool:
    equal = math.isclose(current, target, rel_tol=1e-9, abs_tol=EQUALITY_TOLERANCE)
    if conditional is Conditional.EQUALS:
        return equal
    if conditional is Conditional.NOT_EQUAL:
        return not equal
    if conditional is Conditional.GREATER_THAN:
        return current > target and not equal
    if conditional is Conditional.LESS_THAN:
        return current < target and not equal
    if conditional is Conditional.GREATER_OR_EQUAL:
        return current > target or equal
    return current < target or equal
