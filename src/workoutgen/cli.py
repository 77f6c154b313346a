"""CLI interface for the workout program generator."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from workoutgen.catalog import default_catalog, exercises_for_workout_type, search_exercises
from workoutgen.config import Config
from workoutgen.engine import WorkoutEngine
from workoutgen.logging import setup_logging
from workoutgen.models import CATEGORIES, DIFFICULTIES, WORKOUT_TYPES, GenerateRequest
from workoutgen.output import write_json


def _load_config() -> Config:
    try:
        return Config.from_env()
    except RuntimeError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


@click.group()
def main():
    """Workout program generator."""
    setup_logging(_load_config().log_format)


@main.command()
@click.option(
    "--type", "workout_type",
    type=click.Choice(list(WORKOUT_TYPES.keys())),
    required=True,
    help="Workout type to generate.",
)
@click.option(
    "--difficulty",
    type=click.Choice(list(DIFFICULTIES)),
    default="beginner",
    show_default=True,
)
@click.option("--duration", type=int, default=30, show_default=True, help="Target minutes.")
@click.option("--goals", type=str, default="General fitness improvement", show_default=True)
@click.option("--equipment", multiple=True, help="Available equipment (repeatable).")
@click.option("--injury", "injuries", multiple=True, help="Injury or limitation (repeatable).")
@click.option("--experience", type=str, help="Free-text experience level for the AI prompt.")
@click.option("--no-ai", is_flag=True, help="Skip the chat model and compose deterministically.")
@click.option("--output", "-o", type=click.Path(path_type=Path), help="Write the result to JSON file.")
def generate(
    workout_type: str,
    difficulty: str,
    duration: int,
    goals: str,
    equipment: tuple[str, ...],
    injuries: tuple[str, ...],
    experience: str | None,
    no_ai: bool,
    output: Path | None,
):
    """Generate a workout program."""
    if duration <= 0:
        click.echo("Error: --duration must be positive.", err=True)
        sys.exit(1)

    request = GenerateRequest(
        workout_type=workout_type,
        difficulty=difficulty,
        duration_minutes=duration,
        user_goals=goals,
        equipment=equipment or ("bodyweight",),
        injuries=injuries,
        experience=experience,
    )
    engine = WorkoutEngine.from_config(_load_config())
    result = engine.compose(request) if no_ai else engine.generate(request)
    program = result.program

    source = "AI" if program.ai_generated else "deterministic"
    click.echo(f"{program.name} [{source}] - {program.duration_minutes} min")
    targets = engine.catalog.muscle_groups_for(entry.exercise.id for entry in program.exercises)
    click.echo(f"Targets: {', '.join(sorted(targets))}")
    for entry in program.exercises:
        click.echo(
            f"  {entry.exercise.name}: {entry.sets} x {entry.reps}, "
            f"{entry.weight}, rest {entry.rest_between_sets}s"
        )
    click.echo()
    click.echo(result.reasoning)
    for tip in result.tips:
        click.echo(f"  - {tip}")

    if output:
        n = write_json(result, output)
        click.echo(f"Wrote program with {n} exercises to {output}")


@main.command("list-types")
def list_types():
    """List available workout types."""
    for tag, info in WORKOUT_TYPES.items():
        click.echo(f"{tag}: {info.name} - {info.description}")


@main.command()
@click.option("--type", "workout_type", type=click.Choice(list(WORKOUT_TYPES.keys())))
@click.option("--difficulty", type=click.Choice(list(DIFFICULTIES)))
@click.option("--category", type=click.Choice(list(CATEGORIES)))
@click.option("--muscle-group", type=str)
@click.option("--equipment", type=str, help='Equipment substring, or "none" for bodyweight.')
@click.option("--search", type=str, help="Free text over name and muscles.")
def exercises(
    workout_type: str | None,
    difficulty: str | None,
    category: str | None,
    muscle_group: str | None,
    equipment: str | None,
    search: str | None,
):
    """Search the exercise library."""
    catalog = default_catalog()
    if workout_type:
        results = exercises_for_workout_type(catalog, workout_type, difficulty)
        allowed = {r.id for r in search_exercises(
            catalog,
            muscle_group=muscle_group,
            category=category,
            equipment=equipment,
            search=search,
        )}
        results = [r for r in results if r.id in allowed]
    else:
        results = search_exercises(
            catalog,
            muscle_group=muscle_group,
            difficulty=difficulty,
            category=category,
            equipment=equipment,
            search=search,
        )

    for record in results:
        equipment_text = ", ".join(record.equipment) if record.requires_equipment else "bodyweight"
        click.echo(
            f"{record.id}: {record.name} ({record.difficulty}, {equipment_text}) "
            f"- {', '.join(record.muscle_groups)}"
        )
    click.echo(f"{len(results)} exercises")


@main.command()
@click.argument("exercise")
def show(exercise: str):
    """Show one exercise, by id or by name, with its instructions."""
    catalog = default_catalog()
    record = catalog.get(exercise) if exercise in catalog else catalog.find_by_name(exercise)
    if record is None:
        click.echo(f"Error: Unknown exercise {exercise!r}.", err=True)
        sys.exit(1)

    click.echo(f"{record.name} [{record.id}]")
    click.echo(f"  Category: {record.category}")
    click.echo(f"  Difficulty: {record.difficulty}")
    click.echo(f"  Muscle groups: {', '.join(record.muscle_groups)}")
    click.echo(f"  Primary: {', '.join(record.primary_muscles)}")
    if record.secondary_muscles:
        click.echo(f"  Secondary: {', '.join(record.secondary_muscles)}")
    click.echo(f"  Equipment: {', '.join(record.equipment) or 'bodyweight'}")
    click.echo(f"  Rest: {record.rest_time}s")
    click.echo(f"  Instruction steps: {record.total_instructions}")
    sections = (
        ("Setup", record.instructions.setup),
        ("Execution", record.instructions.execution),
        ("Tips", record.instructions.tips),
        ("Common mistakes", record.instructions.common_mistakes),
    )
    for title, lines in sections:
        if not lines:
            continue
        click.echo(f"{title}:")
        for i, line in enumerate(lines, start=1):
            click.echo(f"  {i}. {line}")


@main.command()
@click.option("--goals", type=str, required=True)
@click.option("--level", "current_level", type=str, required=True)
@click.option("--challenges", type=str, default="None", show_default=True)
def advice(goals: str, current_level: str, challenges: str):
    """Ask for personalized coaching advice."""
    engine = WorkoutEngine.from_config(_load_config())
    click.echo(engine.personalized_advice(goals, current_level, challenges))
