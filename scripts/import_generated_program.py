#!/usr/bin/env python3
"""
Import a generated program JSON file into Supabase.

Reads a program produced by the generator, links each exercise to the
exercise catalog where a confident match exists, and writes the program
template with its workouts, exercise instances and sets.

Usage:
    python scripts/import_generated_program.py --owner-id COACH_ID program.json

Options:
    --owner-id ID    Coach profile ID that will own the template
    --preload        Load the whole exercise catalog into memory first
    --verbose        Log each exercise resolution
"""
import os
import sys
import argparse
import json
import logging

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pydantic import ValidationError
from supabase import create_client

from application.exceptions import MaterializationError
from application.use_cases import ProgramMaterializer
from backend.core.catalog_lookup import ExerciseCatalogLookup
from backend.core.exercise_resolver import ExerciseResolver, ScoringWeights
from backend.settings import Settings
from domain.models import GeneratedProgram
from infrastructure import (
    InMemoryExerciseCatalogRepository,
    SupabaseExerciseCatalogRepository,
    SupabaseProgramTemplateRepository,
)


def load_program(path: str) -> GeneratedProgram:
    """Read and validate a generated program file."""
    with open(path, encoding="utf-8") as f:
        return GeneratedProgram.model_validate(json.load(f))


def build_materializer(settings: Settings, preload: bool = False) -> ProgramMaterializer:
    """Wire the materializer against Supabase."""
    if not settings.supabase_url or not settings.supabase_key:
        print("ERROR: SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")
        sys.exit(1)

    client = create_client(settings.supabase_url, settings.supabase_key)

    catalog_repo = SupabaseExerciseCatalogRepository(client)
    if preload or settings.catalog_preload:
        catalog_repo = InMemoryExerciseCatalogRepository.load_from(catalog_repo)

    resolver = ExerciseResolver(
        ExerciseCatalogLookup(catalog_repo, limit=settings.catalog_candidate_limit),
        weights=ScoringWeights(threshold=settings.exercise_match_threshold),
    )
    return ProgramMaterializer(
        resolver=resolver,
        program_repo=SupabaseProgramTemplateRepository(client),
    )


def main():
    parser = argparse.ArgumentParser(
        description="Import a generated program into program templates"
    )
    parser.add_argument(
        "program_file",
        help="Path to the generated program JSON"
    )
    parser.add_argument(
        "--owner-id",
        required=True,
        help="Coach profile ID that will own the template"
    )
    parser.add_argument(
        "--preload",
        action="store_true",
        help="Load the whole exercise catalog into memory first"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log each exercise resolution"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        program = load_program(args.program_file)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        print(f"ERROR: Could not read {args.program_file}: {e}")
        sys.exit(1)

    print(f"Importing '{program.program_name}' ({program.exercise_count} exercises)")
    print("=" * 50)

    materializer = build_materializer(Settings(), preload=args.preload)

    try:
        template = materializer.materialize(program, args.owner_id)
    except MaterializationError as e:
        print(f"ERROR: {e.message}")
        if e.exercise_name:
            print(
                f"  At week {e.week_number}, workout {e.workout_position}, "
                f"exercise {e.exercise_position} ('{e.exercise_name}')"
            )
        print(f"  Last created {e.last_created_kind}: {e.last_created_id}")
        sys.exit(1)

    print(f"Template: {template.id}")
    print(f"  Workouts: {template.workout_count}")
    print(f"  Exercises: {template.exercise_count}")
    print(f"  Sets: {template.set_count}")

    unmatched = template.unmatched_exercises
    if unmatched:
        print(f"  Unmatched exercises ({len(unmatched)}):")
        for name in unmatched:
            print(f"    - {name}")


if __name__ == "__main__":
    main()
