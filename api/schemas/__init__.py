"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- program_import: Program import and exercise resolution models
"""

from api.schemas.program_import import (
    CandidateResponse,
    ProgramImportResponse,
    ResolveResponse,
)

__all__ = [
    "CandidateResponse",
    "ProgramImportResponse",
    "ResolveResponse",
]
