"""
Application Use Cases for the Program Import API.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters. Use cases are the entry points for
business operations and contain the application's workflow logic.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return domain models, not API responses

Usage:
    from application.use_cases import ProgramMaterializer

    materializer = ProgramMaterializer(
        resolver=resolver,
        program_repo=program_repo,
    )
    template = materializer.materialize(program, owner_id="coach-123")
"""

from application.use_cases.materialize_program import ProgramMaterializer

__all__ = [
    "ProgramMaterializer",
]
