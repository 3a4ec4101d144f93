"""
Program import router.

Materializes a generated program into a program template with its
workouts, exercise instances and sets.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_current_user, get_program_materializer
from api.schemas import ProgramImportResponse
from application.exceptions import MaterializationError
from application.use_cases import ProgramMaterializer
from domain.models import GeneratedProgram

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/programs",
    tags=["Programs"],
)


@router.post("/import", response_model=ProgramImportResponse, status_code=201)
def import_program(
    program: GeneratedProgram,
    owner_id: str = Depends(get_current_user),
    materializer: ProgramMaterializer = Depends(get_program_materializer),
) -> ProgramImportResponse:
    """
    Import a generated program.

    Every exercise is linked to the catalog when a confident match exists;
    the rest are saved unlinked and listed in `unmatched_exercises`.

    A failed import returns 502 with the id of the last record created,
    since earlier records are not rolled back.
    """
    try:
        template = materializer.materialize(program, owner_id)
    except MaterializationError as e:
        raise HTTPException(status_code=502, detail=e.to_dict())
    except Exception as e:
        logger.exception(f"Unexpected error importing program '{program.program_name}': {e}")
        raise HTTPException(status_code=500, detail="Program import failed")

    return ProgramImportResponse.from_template(template)
