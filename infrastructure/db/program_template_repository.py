"""
Supabase implementation of ProgramTemplateRepository.

This implementation uses the Supabase Python client to write the
program_templates, workouts, exercise_instances and exercise_sets tables.
"""

import logging
from typing import Dict, List

from supabase import Client

from application.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class SupabaseProgramTemplateRepository:
    """
    Supabase-backed program template repository implementation.

    Writes against:
    - program_templates: Program metadata, owned by a coach
    - workouts: Workouts per week/day within a template
    - exercise_instances: Exercises placed in a workout
    - exercise_sets: Individual sets of an exercise instance
    """

    def __init__(self, client: Client):
        """
        Initialize repository with Supabase client.

        Args:
            client: Authenticated Supabase client
        """
        self._client = client

    def create_program_template(self, data: Dict) -> Dict:
        """
        Create a program template.

        Args:
            data: Template data dictionary

        Returns:
            Created template dictionary with generated ID

        Raises:
            PersistenceError: If the insert fails
        """
        return self._insert_one("program_templates", data)

    def create_workout(self, program_template_id: str, data: Dict) -> Dict:
        """
        Create a workout within a program template.

        Args:
            program_template_id: The template's UUID as string
            data: Workout data dictionary

        Returns:
            Created workout dictionary with generated ID

        Raises:
            PersistenceError: If the insert fails
        """
        return self._insert_one(
            "workouts", {**data, "program_template_id": program_template_id}
        )

    def create_exercise_instance(self, workout_id: str, data: Dict) -> Dict:
        """
        Create an exercise instance within a workout.

        Args:
            workout_id: The workout's UUID as string
            data: Exercise instance data dictionary

        Returns:
            Created exercise instance dictionary with generated ID

        Raises:
            PersistenceError: If the insert fails
        """
        return self._insert_one("exercise_instances", {**data, "workout_id": workout_id})

    def create_exercise_sets(
        self,
        exercise_instance_id: str,
        sets: List[Dict],
    ) -> List[Dict]:
        """
        Insert all sets of an exercise instance in one request.

        Args:
            exercise_instance_id: The exercise instance's UUID as string
            sets: Set rows

        Returns:
            Created set dictionaries

        Raises:
            PersistenceError: If the insert fails
        """
        rows = [{**s, "exercise_instance_id": exercise_instance_id} for s in sets]
        try:
            response = self._client.table("exercise_sets").insert(rows).execute()
        except Exception as e:
            logger.error(f"Error inserting sets for exercise instance {exercise_instance_id}: {e}")
            raise PersistenceError(f"Failed to insert exercise sets: {e}") from e
        return response.data or []

    def _insert_one(self, table: str, data: Dict) -> Dict:
        try:
            response = self._client.table(table).insert(data).execute()
        except Exception as e:
            logger.error(f"Error inserting into {table}: {e}")
            raise PersistenceError(f"Failed to insert into {table}: {e}") from e

        if not response.data:
            raise PersistenceError(f"Insert into {table} returned no data")
        return response.data[0]
