"""
Application-layer exceptions.

These exceptions are used across the core, application and infrastructure
layers of the program import pipeline. "No candidates" and "no match" are
normal outcomes and never raise.
"""

from typing import Optional


class ProgramImportError(Exception):
    """Base class for program import failures."""

    pass


class CatalogLookupError(ProgramImportError):
    """Error querying the exercise catalog.

    Raised when the catalog store cannot be reached or rejects a query.
    Distinct from an empty result so an outage is never scored as
    "unmatched".
    """

    pass


class PersistenceError(ProgramImportError):
    """Error writing program records to the persistence store."""

    pass


class MaterializationError(ProgramImportError):
    """Error during program materialization.

    Fatal for the current import run. Carries the id of the last entity
    that was successfully created so the caller can clean up or retry, and
    when the failure happened on an exercise, which exercise it was.
    """

    def __init__(
        self,
        message: str,
        *,
        last_created_id: Optional[str] = None,
        last_created_kind: Optional[str] = None,
        exercise_name: Optional[str] = None,
        week_number: Optional[int] = None,
        workout_position: Optional[int] = None,
        exercise_position: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.last_created_id = last_created_id
        self.last_created_kind = last_created_kind
        self.exercise_name = exercise_name
        self.week_number = week_number
        self.workout_position = workout_position
        self.exercise_position = exercise_position

    def to_dict(self) -> dict:
        """Serialize for API error responses."""
        return {
            "message": self.message,
            "last_created_id": self.last_created_id,
            "last_created_kind": self.last_created_kind,
            "exercise_name": self.exercise_name,
            "week_number": self.week_number,
            "workout_position": self.workout_position,
            "exercise_position": self.exercise_position,
        }
