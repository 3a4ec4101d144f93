"""
Fake ExerciseCatalogRepository for testing.

This module provides an in-memory fake implementation of
ExerciseCatalogRepository that records every query it receives and can be
told to fail like an unreachable catalog store.
"""
from typing import Any, Dict, List, Optional, Tuple

from application.exceptions import CatalogLookupError
from infrastructure.db.exercise_catalog_repository import InMemoryExerciseCatalogRepository


class FakeExerciseCatalogRepository:
    """
    In-memory fake implementation of ExerciseCatalogRepository for testing.

    Matching rules are those of InMemoryExerciseCatalogRepository. Each call
    is appended to `calls` as (method, args) so tests can assert on the
    query strategy that was used.

    Usage:
        repo = FakeExerciseCatalogRepository()
        repo.seed([{"id": "ex-1", "name": "Barbell Bench Press", ...}])
        repo.simulate_failure()  # next query raises CatalogLookupError
    """

    def __init__(self, exercises: Optional[List[Dict[str, Any]]] = None):
        """
        Initialize with optional custom exercise list.

        Args:
            exercises: Custom exercise list, or None for default test data
        """
        self._exercises: List[Dict[str, Any]] = []
        self.calls: List[Tuple[str, Tuple]] = []
        self._fail_next: int = 0
        self.seed(default_catalog() if exercises is None else exercises)

    # -------------------------------------------------------------------------
    # Test Helpers
    # -------------------------------------------------------------------------

    def seed(self, exercises: List[Dict[str, Any]]) -> None:
        """Append catalog rows in store order."""
        self._exercises.extend(dict(ex) for ex in exercises)

    def reset(self) -> None:
        """Clear catalog rows, recorded calls and failure injection."""
        self._exercises.clear()
        self.calls.clear()
        self._fail_next = 0

    def simulate_failure(self, times: int = 1) -> None:
        """Make the next `times` queries raise CatalogLookupError."""
        self._fail_next = times

    def _query(self, method: str, *args) -> InMemoryExerciseCatalogRepository:
        self.calls.append((method, args))
        if self._fail_next:
            self._fail_next -= 1
            raise CatalogLookupError("Simulated catalog outage")
        return InMemoryExerciseCatalogRepository(self._exercises)

    # -------------------------------------------------------------------------
    # ExerciseCatalogRepository Protocol Methods
    # -------------------------------------------------------------------------

    def search_by_name(
        self,
        name: str,
        equipment: Optional[str] = None,
        limit: int = 20,
    ) -> List[Dict]:
        return self._query("search_by_name", name, equipment, limit).search_by_name(
            name, equipment=equipment, limit=limit
        )

    def search_by_muscle(self, target_muscle: str, limit: int = 20) -> List[Dict]:
        return self._query("search_by_muscle", target_muscle, limit).search_by_muscle(
            target_muscle, limit=limit
        )

    def fetch_page(self, offset: int, limit: int) -> List[Dict]:
        return self._query("fetch_page", offset, limit).fetch_page(offset, limit)


def default_catalog() -> List[Dict[str, Any]]:
    """Return a small catalog of common strength exercises."""
    return [
        {
            "id": "ex-bb-bench",
            "name": "Barbell Bench Press",
            "equipment": "Barbell",
            "primary_muscle_group": "Chest",
            "target": "Pectorals",
            "original_name": "Bench Press",
        },
        {
            "id": "ex-db-bench",
            "name": "Dumbbell Bench Press",
            "equipment": "Dumbbell",
            "primary_muscle_group": "Chest",
            "target": "Pectorals",
            "original_name": "DB Bench Press",
        },
        {
            "id": "ex-bb-squat",
            "name": "Barbell Back Squat",
            "equipment": "Barbell",
            "primary_muscle_group": "Quadriceps",
            "target": "Quads",
            "original_name": "Back Squat",
        },
        {
            "id": "ex-bb-row",
            "name": "Barbell Bent Over Row",
            "equipment": "Barbell",
            "primary_muscle_group": "Back",
            "target": "Lats",
            "original_name": "Bent Over Row",
        },
        {
            "id": "ex-pullup",
            "name": "Pull Up",
            "equipment": "Body Weight",
            "primary_muscle_group": "Back",
            "target": "Lats",
            "original_name": "Pull Up",
        },
        {
            "id": "ex-db-curl",
            "name": "Dumbbell Biceps Curl",
            "equipment": "Dumbbell",
            "primary_muscle_group": "Arms",
            "target": "Biceps",
            "original_name": "Biceps Curl",
        },
    ]
