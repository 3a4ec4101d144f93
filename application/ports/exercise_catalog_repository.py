"""
Exercise catalog repository port (interface).

This Protocol defines the contract for querying the reference exercise
catalog during program import. Infrastructure implementations (e.g.,
Supabase, in-memory) must satisfy this interface.
"""

from typing import Dict, List, Optional, Protocol


class ExerciseCatalogRepository(Protocol):
    """
    Repository interface for the exercise catalog.

    Exercises are read-only reference data. Rows are dictionaries with at
    least `id` and `name`, plus `equipment`, `primary_muscle_group`,
    `target` and `original_name` when known.

    Implementations raise CatalogLookupError when the store fails. An empty
    list always means "no rows matched".
    """

    def search_by_name(
        self,
        name: str,
        equipment: Optional[str] = None,
        limit: int = 20,
    ) -> List[Dict]:
        """
        Search exercises by name.

        Matches rows where name equals `name`, or name equals
        "{equipment} {name}", or name contains "{equipment} {name}"
        (case-insensitive), or original_name contains `name`
        (case-insensitive). Equipment clauses apply only when equipment
        is non-empty.

        Args:
            name: Exercise name to look for
            equipment: Optional equipment prefix
            limit: Maximum number of rows

        Returns:
            List of matching exercise dictionaries
        """
        ...

    def search_by_muscle(self, target_muscle: str, limit: int = 20) -> List[Dict]:
        """
        Search exercises by muscle.

        Matches rows whose primary_muscle_group or target contains
        `target_muscle` (case-insensitive).

        Args:
            target_muscle: Muscle name to look for
            limit: Maximum number of rows

        Returns:
            List of matching exercise dictionaries
        """
        ...

    def fetch_page(self, offset: int, limit: int) -> List[Dict]:
        """
        Fetch one page of the catalog ordered by id.

        Used to preload the whole catalog into memory.

        Args:
            offset: Index of the first row
            limit: Page size

        Returns:
            Up to `limit` exercise dictionaries; fewer means the last page
        """
        ...
