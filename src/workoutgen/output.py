"""JSON shape for programs and generation results.

Programs serialize to the camelCase shape the app front-end consumes:
    {"id", "name", "type", "difficulty", "duration", "exercises", "description",
     "benefits", "aiGenerated"}

Each exercise entry carries the catalog id as "exerciseId" and is resolved
back through the catalog on load, never re-derived from its name.
"""

from __future__ import annotations

import json
from pathlib import Path

from workoutgen.catalog import Catalog
from workoutgen.models import GenerationResult, ProgramExerciseEntry, WorkoutProgram


def entry_to_dict(entry: ProgramExerciseEntry) -> dict:
    data: dict = {
        "exerciseId": entry.exercise.id,
        "sets": entry.sets,
        "reps": entry.reps,
        "weight": entry.weight,
        "restBetweenSets": entry.rest_between_sets,
    }
    if entry.notes is not None:
        data["notes"] = entry.notes
    if entry.difficulty_justification is not None:
        data["difficultyJustification"] = entry.difficulty_justification
    return data


def program_to_dict(program: WorkoutProgram) -> dict:
    return {
        "id": program.id,
        "name": program.name,
        "type": program.type,
        "difficulty": program.difficulty,
        "duration": program.duration_minutes,
        "exercises": [entry_to_dict(entry) for entry in program.exercises],
        "description": program.description,
        "benefits": list(program.benefits),
        "aiGenerated": program.ai_generated,
    }


def entry_from_dict(data: dict, catalog: Catalog) -> ProgramExerciseEntry:
    """Raises KeyError when the exercise id is not in the catalog."""
    return ProgramExerciseEntry(
        exercise=catalog.get(data["exerciseId"]),
        sets=int(data["sets"]),
        reps=str(data["reps"]),
        weight=str(data["weight"]),
        rest_between_sets=int(data["restBetweenSets"]),
        notes=data.get("notes"),
        difficulty_justification=data.get("difficultyJustification"),
    )


def program_from_dict(data: dict, catalog: Catalog) -> WorkoutProgram:
    return WorkoutProgram(
        id=data["id"],
        name=data["name"],
        type=data["type"],
        difficulty=data["difficulty"],
        duration_minutes=int(data["duration"]),
        exercises=tuple(entry_from_dict(item, catalog) for item in data["exercises"]),
        description=data["description"],
        benefits=tuple(data["benefits"]),
        ai_generated=bool(data["aiGenerated"]),
    )


def result_to_dict(result: GenerationResult) -> dict:
    return {
        "program": program_to_dict(result.program),
        "reasoning": result.reasoning,
        "tips": list(result.tips),
    }


def result_from_dict(data: dict, catalog: Catalog) -> GenerationResult:
    return GenerationResult(
        program=program_from_dict(data["program"], catalog),
        reasoning=data["reasoning"],
        tips=tuple(data["tips"]),
    )


def write_json(result: GenerationResult, output_path: str | Path) -> int:
    """Write a generation result to a JSON file.

    Returns the number of exercises written.
    """
    path = Path(output_path)
    with path.open("w") as f:
        json.dump(result_to_dict(result), f, indent=2, ensure_ascii=False)
    return len(result.program.exercises)
