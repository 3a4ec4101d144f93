"""
MaterializeProgram Use Case.

Converts a generated program into normalized, persisted records:
program template -> workouts -> exercise instances -> sets.

Each exercise is resolved against the exercise catalog and expanded into
individual sets. Re-running on the same input creates a second,
independent template.
"""

import logging
from typing import Callable, Dict, List, Optional

from application.exceptions import CatalogLookupError, MaterializationError
from application.ports import ProgramTemplateRepository
from backend.core.exercise_resolver import ExerciseResolver
from backend.core.rep_scheme import RepSchemeParseError
from backend.core.set_expander import expand_sets
from domain.models import (
    GeneratedExercise,
    GeneratedProgram,
    GeneratedWeek,
    GeneratedWorkout,
    MaterializedExerciseInstance,
    MaterializedProgramTemplate,
    MaterializedSet,
    MaterializedWorkout,
)

logger = logging.getLogger(__name__)


class ProgramMaterializer:
    """
    Use case for importing a generated program.

    Orchestrates the following workflow:
    1. Create the program template
    2. Create each workout, week by week, in input order
    3. For each exercise: resolve the catalog id, expand sets, create the
       exercise instance, bulk-insert its sets
    4. Return the materialized tree

    Any failure aborts the run with MaterializationError. Records created
    before the failure are left in place; the error carries the id of the
    last one.

    Usage:
        >>> materializer = ProgramMaterializer(
        ...     resolver=resolver,
        ...     program_repo=program_repo,
        ... )
        >>> template = materializer.materialize(program, owner_id="coach-123")
        >>> template.unmatched_exercises
        ['Landmine Rotation']
    """

    def __init__(
        self,
        resolver: ExerciseResolver,
        program_repo: ProgramTemplateRepository,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            resolver: Resolver for catalog exercise ids
            program_repo: Repository for persisting program records
        """
        self._resolver = resolver
        self._program_repo = program_repo
        self._last_created_id: Optional[str] = None
        self._last_created_kind: Optional[str] = None

    def materialize(
        self,
        program: GeneratedProgram,
        owner_id: str,
    ) -> MaterializedProgramTemplate:
        """
        Materialize a generated program.

        Args:
            program: Program produced by the generator
            owner_id: Coach profile ID that will own the template

        Returns:
            MaterializedProgramTemplate with all workouts, instances and sets

        Raises:
            MaterializationError: If persistence, catalog lookup or rep
                scheme parsing fails
        """
        self._last_created_id = None
        self._last_created_kind = None

        logger.info(
            f"Materializing program '{program.program_name}' for owner {owner_id}: "
            f"{len(program.weeks)} weeks, {program.exercise_count} exercises"
        )

        template_id = self._create(
            "program_template",
            lambda: self._program_repo.create_program_template({
                "name": program.program_name,
                "phase": program.phase,
                "weeks": program.total_weeks,
                "description": program.description,
                "fitness_level": program.fitness_level,
                "coach_id": owner_id,
                "is_public": False,
                "version": 1,
                "is_latest_version": True,
            }),
        )

        template = MaterializedProgramTemplate(
            id=template_id,
            name=program.program_name,
            phase=program.phase,
            weeks=program.total_weeks,
            description=program.description,
            fitness_level=program.fitness_level,
            owner_id=owner_id,
        )

        for week in program.weeks:
            for workout_position, workout in enumerate(week.workouts, start=1):
                template.workouts.append(
                    self._materialize_workout(template.id, week, workout, workout_position)
                )

        unmatched = template.unmatched_exercises
        if unmatched:
            logger.warning(
                f"Program {template.id} has {len(unmatched)} unmatched exercises: {unmatched}"
            )
        logger.info(
            f"Program {template.id} materialized: {template.workout_count} workouts, "
            f"{template.exercise_count} exercises, {template.set_count} sets"
        )
        return template

    def _materialize_workout(
        self,
        template_id: str,
        week: GeneratedWeek,
        workout: GeneratedWorkout,
        workout_position: int,
    ) -> MaterializedWorkout:
        """Create one workout and all of its exercises."""
        workout_id = self._create(
            "workout",
            lambda: self._program_repo.create_workout(template_id, {
                "name": workout.name,
                "day_of_week": workout.day_number,
                "week_number": week.week_number,
                "description": workout.notes,
            }),
        )

        materialized = MaterializedWorkout(
            id=workout_id,
            name=workout.name,
            day_number=workout.day_number,
            week_number=week.week_number,
            notes=workout.notes,
        )

        for order_in_workout, exercise in enumerate(workout.exercises, start=1):
            try:
                instance = self._materialize_exercise(
                    materialized.id, exercise, order_in_workout
                )
            except MaterializationError as e:
                e.exercise_name = exercise.name
                e.week_number = week.week_number
                e.workout_position = workout_position
                e.exercise_position = order_in_workout
                raise
            materialized.exercises.append(instance)

        return materialized

    def _materialize_exercise(
        self,
        workout_id: str,
        exercise: GeneratedExercise,
        order_in_workout: int,
    ) -> MaterializedExerciseInstance:
        """Resolve, expand and persist one exercise."""
        try:
            exercise_db_id = self._resolver.resolve(exercise)
        except CatalogLookupError as e:
            raise self._error(f"Catalog lookup failed for '{exercise.name}': {e}") from e

        # Expand before inserting so a bad token never leaves an instance without sets
        try:
            planned_sets = expand_sets(
                exercise.sets,
                exercise.reps,
                exercise.set_type,
                exercise.rest_seconds,
            )
        except RepSchemeParseError as e:
            raise self._error(f"Invalid reps for '{exercise.name}': {e}") from e

        instance_id = self._create(
            "exercise_instance",
            lambda: self._program_repo.create_exercise_instance(workout_id, {
                "exercise_name": exercise.name,
                "exercise_db_id": exercise_db_id,
                "order_in_workout": order_in_workout,
                "notes": exercise.notes,
                "tempo": exercise.tempo,
                "rest_period_seconds": exercise.rest_seconds,
                "sets": exercise.sets,
                "reps": exercise.reps,
            }),
        )
        exercise_sets = self._create_sets(instance_id, planned_sets)

        if exercise_db_id is None:
            logger.debug(f"Exercise '{exercise.name}' left unmatched")

        return MaterializedExerciseInstance(
            id=instance_id,
            name=exercise.name,
            exercise_db_id=exercise_db_id,
            order_in_workout=order_in_workout,
            notes=exercise.notes,
            tempo=exercise.tempo,
            rest_seconds=exercise.rest_seconds,
            sets=exercise.sets,
            reps=exercise.reps,
            exercise_sets=exercise_sets,
        )

    def _create(self, kind: str, write: Callable[[], Dict]) -> str:
        """
        Run one create-and-return-id write and record what it created.

        Returns:
            The generated id as a string

        Raises:
            MaterializationError: If the write fails or returns no id
        """
        try:
            row = write()
        except Exception as e:
            raise self._error(f"Failed to create {kind}: {e}") from e

        if not row or row.get("id") is None:
            raise self._error(f"Failed to create {kind}: no id returned")

        self._last_created_id = str(row["id"])
        self._last_created_kind = kind
        return self._last_created_id

    def _create_sets(
        self,
        exercise_instance_id: str,
        planned_sets: List[MaterializedSet],
    ) -> List[MaterializedSet]:
        """Bulk-insert the sets of one instance and return them with ids."""
        rows = [
            {
                "set_order": s.set_order,
                "type": s.type.value,
                "reps": s.reps,
                "rest_seconds": s.rest_seconds,
            }
            for s in planned_sets
        ]
        try:
            created = self._program_repo.create_exercise_sets(exercise_instance_id, rows) or []
        except Exception as e:
            raise self._error(f"Failed to create exercise sets: {e}") from e

        ids_by_order = {
            row.get("set_order"): str(row["id"])
            for row in created
            if row.get("id") is not None
        }
        if created and created[-1].get("id") is not None:
            self._last_created_id = str(created[-1]["id"])
            self._last_created_kind = "exercise_set"

        return [
            s.model_copy(update={"id": ids_by_order.get(s.set_order)})
            for s in planned_sets
        ]

    def _error(self, message: str) -> MaterializationError:
        logger.error(
            f"{message} (last created {self._last_created_kind}: {self._last_created_id})"
        )
        return MaterializationError(
            message,
            last_created_id=self._last_created_id,
            last_created_kind=self._last_created_kind,
        )
