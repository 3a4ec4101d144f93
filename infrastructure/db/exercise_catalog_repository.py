"""
Exercise catalog repository implementations.

- SupabaseExerciseCatalogRepository queries the exercises table through
  PostgREST `or` filters.
- InMemoryExerciseCatalogRepository answers the same queries from a
  preloaded copy of the catalog, filled page by page from another
  repository.
"""

import logging
from typing import Any, Dict, List, Optional

from supabase import Client

from application.exceptions import CatalogLookupError
from backend.core.constants import CATALOG_PAGE_SIZE
from backend.core.sanitization import (
    contains_pattern,
    quote_filter_value,
    strip_like_wildcards,
)

logger = logging.getLogger(__name__)

CATALOG_COLUMNS = "id, name, primary_muscle_group, equipment, target, original_name"


class SupabaseExerciseCatalogRepository:
    """
    Supabase-backed exercise catalog implementation.

    Queries against the exercises table which stores canonical exercise
    definitions with name, equipment, primary muscle group and target.
    """

    def __init__(self, client: Client):
        """
        Initialize repository with Supabase client.

        Args:
            client: Authenticated Supabase client
        """
        self._client = client

    def search_by_name(
        self,
        name: str,
        equipment: Optional[str] = None,
        limit: int = 20,
    ) -> List[Dict]:
        """
        Search exercises by exact, equipment-prefixed or alternate name.

        Args:
            name: Exercise name, as generated
            equipment: Equipment, or None
            limit: Maximum number of rows

        Returns:
            List of matching exercise dictionaries

        Raises:
            CatalogLookupError: If the query fails
        """
        clauses = [f"name.eq.{quote_filter_value(name)}"]
        if equipment:
            prefixed = f"{equipment} {name}"
            clauses.append(f"name.eq.{quote_filter_value(prefixed)}")
            clauses.append(f"name.ilike.{contains_pattern(prefixed)}")
        clauses.append(f"original_name.ilike.{contains_pattern(name)}")

        return self._select_or(",".join(clauses), limit, f"name '{name}'")

    def search_by_muscle(self, target_muscle: str, limit: int = 20) -> List[Dict]:
        """
        Search exercises whose primary muscle group or target contains the muscle.

        Args:
            target_muscle: Muscle name
            limit: Maximum number of rows

        Returns:
            List of matching exercise dictionaries

        Raises:
            CatalogLookupError: If the query fails
        """
        pattern = contains_pattern(target_muscle)
        filters = f"primary_muscle_group.ilike.{pattern},target.ilike.{pattern}"
        return self._select_or(filters, limit, f"muscle '{target_muscle}'")

    def fetch_page(self, offset: int, limit: int) -> List[Dict]:
        """
        Fetch one page of the catalog ordered by id.

        Args:
            offset: Index of the first row
            limit: Page size

        Returns:
            Up to `limit` exercise dictionaries

        Raises:
            CatalogLookupError: If the query fails
        """
        try:
            response = (
                self._client.table("exercises")
                .select(CATALOG_COLUMNS)
                .order("id")
                .range(offset, offset + limit - 1)
                .execute()
            )
        except Exception as e:
            logger.error(f"Error fetching exercise page at offset {offset}: {e}")
            raise CatalogLookupError(f"Failed to fetch exercise catalog page: {e}") from e
        return response.data or []

    def _select_or(self, filters: str, limit: int, description: str) -> List[Dict]:
        try:
            response = (
                self._client.table("exercises")
                .select(CATALOG_COLUMNS)
                .or_(filters)
                .limit(limit)
                .execute()
            )
        except Exception as e:
            logger.error(f"Error searching exercises by {description}: {e}")
            raise CatalogLookupError(f"Exercise catalog search failed: {e}") from e
        return response.data or []


def _contains(haystack: Optional[str], needle: str) -> bool:
    return bool(haystack) and strip_like_wildcards(needle).lower() in haystack.lower()


class InMemoryExerciseCatalogRepository:
    """
    In-memory exercise catalog.

    Applies the same matching rules as the Supabase queries against a list
    of exercise rows kept in catalog order. Read-only once built.
    """

    def __init__(self, exercises: Optional[List[Dict[str, Any]]] = None):
        """
        Initialize with a list of exercise rows.

        Args:
            exercises: Catalog rows, or None for an empty catalog
        """
        self._exercises: List[Dict[str, Any]] = list(exercises or [])

    @classmethod
    def load_from(
        cls,
        source: Any,
        page_size: int = CATALOG_PAGE_SIZE,
    ) -> "InMemoryExerciseCatalogRepository":
        """
        Preload the whole catalog from another repository.

        Pages through `source.fetch_page` until a short page is returned.

        Args:
            source: Repository providing fetch_page(offset, limit)
            page_size: Rows per page

        Returns:
            Populated InMemoryExerciseCatalogRepository

        Raises:
            CatalogLookupError: If any page fails to load
        """
        exercises: List[Dict[str, Any]] = []
        offset = 0
        while True:
            page = source.fetch_page(offset, page_size)
            exercises.extend(page)
            logger.debug(f"Fetched exercise page at offset {offset}: {len(page)} rows")
            if len(page) < page_size:
                break
            offset += page_size

        logger.info(f"Loaded {len(exercises)} exercises into memory")
        return cls(exercises)

    def __len__(self) -> int:
        return len(self._exercises)

    def search_by_name(
        self,
        name: str,
        equipment: Optional[str] = None,
        limit: int = 20,
    ) -> List[Dict]:
        """Search by exact, equipment-prefixed or alternate name."""
        prefixed = f"{equipment} {name}" if equipment else None
        results = []
        for ex in self._exercises:
            ex_name = ex.get("name") or ""
            if (
                ex_name == name
                or (prefixed and ex_name == prefixed)
                or (prefixed and _contains(ex_name, prefixed))
                or _contains(ex.get("original_name"), name)
            ):
                results.append(ex)
                if len(results) >= limit:
                    break
        return results

    def search_by_muscle(self, target_muscle: str, limit: int = 20) -> List[Dict]:
        """Search by primary muscle group or target containment."""
        results = []
        for ex in self._exercises:
            if _contains(ex.get("primary_muscle_group"), target_muscle) or _contains(
                ex.get("target"), target_muscle
            ):
                results.append(ex)
                if len(results) >= limit:
                    break
        return results

    def fetch_page(self, offset: int, limit: int) -> List[Dict]:
        """Fetch one page of the in-memory catalog."""
        return self._exercises[offset: offset + limit]
