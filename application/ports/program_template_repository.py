"""
Program template repository port (interface).

This Protocol defines the contract for persisting a materialized program.
Infrastructure implementations (e.g., Supabase) must satisfy this interface.
"""

from typing import Dict, List, Protocol


class ProgramTemplateRepository(Protocol):
    """
    Repository interface for program template persistence.

    All methods work with dictionaries for flexibility. Every create method
    returns the stored row including its generated `id`. Implementations
    raise PersistenceError when a write fails.
    """

    def create_program_template(self, data: Dict) -> Dict:
        """
        Create a program template.

        Args:
            data: Template data (name, phase, weeks, description,
                  fitness_level, coach_id, version, is_latest_version)

        Returns:
            Created template dictionary with generated ID
        """
        ...

    def create_workout(self, program_template_id: str, data: Dict) -> Dict:
        """
        Create a workout within a program template.

        Args:
            program_template_id: Owning template ID
            data: Workout data (name, day_of_week, week_number, description)

        Returns:
            Created workout dictionary with generated ID
        """
        ...

    def create_exercise_instance(self, workout_id: str, data: Dict) -> Dict:
        """
        Create an exercise instance within a workout.

        Args:
            workout_id: Owning workout ID
            data: Instance data (exercise_name, exercise_db_id,
                  order_in_workout, notes, tempo, rest_period_seconds,
                  sets, reps)

        Returns:
            Created exercise instance dictionary with generated ID
        """
        ...

    def create_exercise_sets(
        self,
        exercise_instance_id: str,
        sets: List[Dict],
    ) -> List[Dict]:
        """
        Bulk-insert the sets of one exercise instance.

        Args:
            exercise_instance_id: Owning exercise instance ID
            sets: Set rows (set_order, type, reps, rest_seconds)

        Returns:
            Created set dictionaries with generated IDs, in input order
        """
        ...
