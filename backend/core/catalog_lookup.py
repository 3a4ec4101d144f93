"""
Exercise catalog lookup.

Finds the candidate catalog exercises for one generated exercise using an
ordered pair of query strategies:
1. Name match (exact name, equipment-prefixed name, alternate name)
2. Target muscle match, only if the name strategy found nothing

The candidate list is capped so downstream scoring cost stays bounded.
"""

import logging
from typing import TYPE_CHECKING, List, Optional

from backend.core.constants import CATALOG_CANDIDATE_LIMIT
from domain.models import CatalogExercise

if TYPE_CHECKING:
    from application.ports import ExerciseCatalogRepository

logger = logging.getLogger(__name__)


class ExerciseCatalogLookup:
    """
    Candidate finder over an ExerciseCatalogRepository.

    Store failures raise CatalogLookupError from the repository and are not
    caught here: an outage must never look like "no candidates".
    """

    def __init__(
        self,
        catalog_repository: "ExerciseCatalogRepository",
        limit: int = CATALOG_CANDIDATE_LIMIT,
    ):
        """
        Initialize the lookup.

        Args:
            catalog_repository: Repository for querying the exercises table
            limit: Maximum number of candidates returned per lookup
        """
        self._repo = catalog_repository
        self._limit = limit

    @property
    def limit(self) -> int:
        return self._limit

    def find_candidates(
        self,
        name: str,
        equipment: Optional[str] = None,
        target_muscle: Optional[str] = None,
    ) -> List[CatalogExercise]:
        """
        Find catalog candidates for an exercise.

        Args:
            name: Free-text exercise name
            equipment: Free-text equipment, may be empty
            target_muscle: Free-text target muscle, may be empty

        Returns:
            Up to `limit` candidates, in store order. Empty if neither
            strategy matched.

        Raises:
            CatalogLookupError: If the catalog store fails
        """
        name_term = (name or "").strip()
        equipment_term = (equipment or "").strip()
        muscle_term = (target_muscle or "").strip()

        rows = []
        if name_term:
            rows = self._repo.search_by_name(
                name_term,
                equipment=equipment_term or None,
                limit=self._limit,
            )

        if not rows and muscle_term:
            logger.debug(f"No name candidates for '{name}', falling back to muscle '{muscle_term}'")
            rows = self._repo.search_by_muscle(muscle_term, limit=self._limit)

        candidates = [
            CatalogExercise.from_row(row)
            for row in rows[: self._limit]
            if _is_usable(row)
        ]
        logger.debug(f"Lookup '{name}' returned {len(candidates)} candidates")
        return candidates


def _is_usable(row: dict) -> bool:
    """Catalog rows without an id or a name cannot be scored or referenced."""
    if row.get("id") is None or row.get("name") is None:
        logger.warning(f"Skipping catalog row with missing id or name: {row!r}")
        return False
    return True
