"""
Exercise resolution for generated programs.

Maps a free-text generated exercise onto a canonical catalog exercise:
1. Fetch candidates through ExerciseCatalogLookup
2. Score each candidate by name similarity plus attribute bonuses
3. Keep the first highest-scoring candidate
4. Accept it only if the score clears the threshold

"No match" is a normal outcome and resolves to None.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from backend.core.catalog_lookup import ExerciseCatalogLookup
from backend.core.constants import EXERCISE_MATCH_THRESHOLD
from backend.core.similarity import name_similarity
from domain.models import CatalogExercise, GeneratedExercise, MatchCandidate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoringWeights:
    """Weights of the resolver's scoring heuristic."""

    name_weight: float = 10.0
    equipment_bonus: float = 3.0
    primary_muscle_bonus: float = 5.0
    target_bonus: float = 4.0
    threshold: float = EXERCISE_MATCH_THRESHOLD


@dataclass
class ExerciseResolution:
    """Result of resolving one generated exercise."""

    exercise_db_id: Optional[str]
    exercise_name: Optional[str]
    score: float
    candidates: List[MatchCandidate] = field(default_factory=list)

    @property
    def is_match(self) -> bool:
        return self.exercise_db_id is not None


def _contains(haystack: Optional[str], needle: Optional[str]) -> bool:
    """Case-insensitive containment; false when either side is empty."""
    if not haystack or not needle:
        return False
    return needle.lower() in haystack.lower()


class ExerciseResolver:
    """
    Service for resolving generated exercises to catalog exercise ids.

    Scoring per candidate:
    - name similarity x name_weight (dominant term)
    - equipment_bonus if the candidate's equipment contains the exercise's
    - primary_muscle_bonus if the candidate's primary muscle group contains
      the target muscle, otherwise target_bonus if its target does
    """

    def __init__(
        self,
        catalog_lookup: ExerciseCatalogLookup,
        weights: Optional[ScoringWeights] = None,
    ):
        """
        Initialize the resolver.

        Args:
            catalog_lookup: Candidate finder for the exercise catalog
            weights: Scoring weights, defaults to ScoringWeights()
        """
        self._lookup = catalog_lookup
        self._weights = weights or ScoringWeights()

    @property
    def weights(self) -> ScoringWeights:
        return self._weights

    def score(self, exercise: GeneratedExercise, candidate: CatalogExercise) -> float:
        """
        Score one candidate against a generated exercise.

        Args:
            exercise: The generated exercise
            candidate: A catalog candidate

        Returns:
            Non-negative score
        """
        w = self._weights
        score = name_similarity(exercise.name.lower(), candidate.name.lower()) * w.name_weight

        if _contains(candidate.equipment, exercise.equipment):
            score += w.equipment_bonus

        if _contains(candidate.primary_muscle_group, exercise.target_muscle):
            score += w.primary_muscle_bonus
        elif _contains(candidate.target, exercise.target_muscle):
            score += w.target_bonus

        return score

    def resolve_match(self, exercise: GeneratedExercise) -> ExerciseResolution:
        """
        Resolve an exercise and report how the decision was made.

        Args:
            exercise: The generated exercise

        Returns:
            ExerciseResolution with the accepted id (or None), the best
            score, and every scored candidate in lookup order

        Raises:
            CatalogLookupError: If the catalog store fails
        """
        candidates = self._lookup.find_candidates(
            exercise.name,
            equipment=exercise.equipment,
            target_muscle=exercise.target_muscle,
        )

        scored: List[MatchCandidate] = []
        best: Optional[MatchCandidate] = None
        for candidate in candidates:
            entry = MatchCandidate(exercise=candidate, score=self.score(exercise, candidate))
            scored.append(entry)
            # Strict comparison keeps the first-seen maximum on ties
            if best is None or entry.score > best.score:
                best = entry

        if best is None:
            logger.debug(f"No candidates for '{exercise.name}'")
            return ExerciseResolution(exercise_db_id=None, exercise_name=None, score=0.0)

        if best.score < self._weights.threshold:
            logger.debug(
                f"Best candidate for '{exercise.name}' is '{best.exercise.name}' "
                f"with score {best.score:.2f}, below threshold"
            )
            return ExerciseResolution(
                exercise_db_id=None,
                exercise_name=None,
                score=best.score,
                candidates=scored,
            )

        logger.debug(
            f"Resolved '{exercise.name}' -> '{best.exercise.id}' (score: {best.score:.2f})"
        )
        return ExerciseResolution(
            exercise_db_id=best.exercise.id,
            exercise_name=best.exercise.name,
            score=best.score,
            candidates=scored,
        )

    def resolve(self, exercise: GeneratedExercise) -> Optional[str]:
        """
        Resolve a generated exercise to a catalog exercise id.

        Args:
            exercise: The generated exercise

        Returns:
            Catalog exercise id, or None when nothing scores high enough

        Raises:
            CatalogLookupError: If the catalog store fails
        """
        return self.resolve_match(exercise).exercise_db_id
