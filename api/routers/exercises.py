"""
Exercises router for catalog resolution previews.

Lets a client see how a generated exercise would be linked before
importing a whole program.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_exercise_resolver
from api.schemas import CandidateResponse, ResolveResponse
from application.exceptions import CatalogLookupError
from backend.core.exercise_resolver import ExerciseResolver
from domain.models import GeneratedExercise

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/exercises",
    tags=["Exercises"],
)


@router.post("/resolve", response_model=ResolveResponse)
def resolve_exercise(
    exercise: GeneratedExercise,
    resolver: ExerciseResolver = Depends(get_exercise_resolver),
) -> ResolveResponse:
    """
    Resolve one generated exercise against the exercise catalog.

    Returns the accepted catalog exercise (if any) along with every scored
    candidate in lookup order.
    """
    try:
        resolution = resolver.resolve_match(exercise)
    except CatalogLookupError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return ResolveResponse(
        exercise_db_id=resolution.exercise_db_id,
        exercise_name=resolution.exercise_name,
        score=resolution.score,
        threshold=resolver.weights.threshold,
        matched=resolution.is_match,
        candidates=[
            CandidateResponse(
                id=c.exercise.id,
                name=c.exercise.name,
                equipment=c.exercise.equipment,
                primary_muscle_group=c.exercise.primary_muscle_group,
                target=c.exercise.target,
                score=c.score,
            )
            for c in resolution.candidates
        ],
    )
