"""Deterministic program composer.

Turns an eligible exercise set into a bounded, ordered program with sets,
reps, rest and a weight qualifier per exercise. No randomness: ties are
broken by catalog order, and the only bias is toward exercises that were
not picked last time for the same (type, tier) key.
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable, Sequence

from workoutgen.models import (
    ExerciseRecord,
    GenerateRequest,
    GenerationResult,
    ProgramExerciseEntry,
    WorkoutProgram,
)
from workoutgen.tiers import TierSpec, get_tier
from workoutgen.variety import VarietyStore, format_key

logger = logging.getLogger(__name__)

Clock = Callable[[], int]

COMPOUND_SHARE = 0.7
PLANK_ID = "plank"

# (upper bound in minutes, exercise count); anything longer gets 7
DURATION_BUCKETS: tuple[tuple[int, int], ...] = (
    (15, 3),
    (25, 4),
    (35, 5),
    (50, 6),
)
LONG_SESSION_COUNT = 7


def epoch_ms() -> int:
    return int(time.time() * 1000)


def duration_bucket(duration_minutes: int) -> int:
    for upper, count in DURATION_BUCKETS:
        if duration_minutes <= upper:
            return count
    return LONG_SESSION_COUNT


def target_count(duration_minutes: int, tier: TierSpec, available: int) -> int:
    """Bucket by duration, clamp to the tier bounds, then to what is available."""
    count = max(tier.min_exercises, duration_bucket(duration_minutes))
    count = min(count, tier.max_exercises)
    return min(count, available)


def is_compound(exercise: ExerciseRecord) -> bool:
    return "quadriceps" in exercise.muscle_groups and "glutes" in exercise.muscle_groups


def _fresh_first(
    candidates: Sequence[ExerciseRecord],
    previous: frozenset[str],
    count: int,
) -> list[ExerciseRecord]:
    fresh = [ex for ex in candidates if ex.name not in previous]
    seen = [ex for ex in candidates if ex.name in previous]
    return (fresh + seen)[:count]


def select_exercises(
    eligible: Sequence[ExerciseRecord],
    workout_type: str,
    count: int,
    previous_names: Sequence[str] = (),
) -> list[ExerciseRecord]:
    """Pick ``count`` exercises, preferring ones absent from ``previous_names``.

    Leg days are split into compound (quadriceps and glutes) and isolation
    buckets, roughly 70/30 with the compound share rounded up. Within each
    bucket fresh exercises come before previously seen ones.
    """
    previous = frozenset(previous_names)

    if workout_type == "legs":
        compound = [ex for ex in eligible if is_compound(ex)]
        isolation = [ex for ex in eligible if not is_compound(ex)]
        compound_count = math.ceil(count * COMPOUND_SHARE)
        chosen = _fresh_first(compound, previous, compound_count)
        chosen += _fresh_first(isolation, previous, count - len(chosen))
    else:
        chosen = _fresh_first(eligible, previous, count)

    if len(chosen) < count:
        picked = {ex.id for ex in chosen}
        remaining = [ex for ex in eligible if ex.id not in picked]
        chosen += remaining[: count - len(chosen)]

    return chosen[:count]


def weight_for(exercise: ExerciseRecord, tier: TierSpec) -> str:
    return "bodyweight" if exercise.is_bodyweight else tier.weight


def assign_parameters(exercise: ExerciseRecord, tier: TierSpec) -> ProgramExerciseEntry:
    reps = tier.reps
    rest = tier.rest_seconds
    if exercise.category == "cardio":
        reps = tier.cardio_reps
        rest = tier.cardio_rest
    elif exercise.id == PLANK_ID:
        reps = tier.plank_reps
        rest = tier.plank_rest

    return ProgramExerciseEntry(
        exercise=exercise,
        sets=tier.sets,
        reps=reps,
        weight=weight_for(exercise, tier),
        rest_between_sets=rest,
    )


def _targets_text(request: GenerateRequest) -> str:
    if request.workout_type == "full-body":
        return "all major muscle groups"
    return request.type_info.name.lower()


def compose(
    eligible: Sequence[ExerciseRecord],
    request: GenerateRequest,
    variety: VarietyStore,
    *,
    clock: Clock | None = None,
) -> GenerationResult:
    """Build a deterministic program and record its exercises in ``variety``."""
    clock = clock or epoch_ms
    tier = get_tier(request.difficulty)
    info = request.type_info
    key = request.variety_key

    previous = variety.get(key)
    count = target_count(request.duration_minutes, tier, len(eligible))
    selected = select_exercises(eligible, request.workout_type, count, previous)
    entries = tuple(assign_parameters(exercise, tier) for exercise in selected)

    program = WorkoutProgram(
        id=f"smart-{request.workout_type}-{request.difficulty}-{clock()}",
        name=f"Smart {info.name} Workout ({request.difficulty})",
        type=request.workout_type,
        difficulty=request.difficulty,
        duration_minutes=request.duration_minutes,
        exercises=entries,
        description=(
            f"Algorithmically-generated {request.difficulty} level {info.name.lower()} "
            f"workout designed to {info.description.lower()}. "
            "Uses intelligent exercise selection and progression."
        ),
        benefits=(
            f"Targets {_targets_text(request)}",
            f"Optimized for {request.difficulty} fitness level",
            f"Estimated {request.duration_minutes} minute duration",
            "Progressive difficulty scaling",
            "Proper rest intervals included",
            "Intelligent exercise selection algorithm",
        ),
        ai_generated=False,
    )

    variety_note = (
        " This workout includes new exercises for variety compared to your previous session."
        if previous
        else ""
    )
    reasoning = (
        f"Smart algorithm selected {len(entries)} exercises specifically for "
        f"{request.difficulty} level {request.workout_type} training. The program follows "
        f"exercise science principles with {tier.sets} sets of {tier.reps} reps, "
        f"optimized for your fitness level and goals.{variety_note}"
    )

    variety.set(key, program.exercise_names)
    logger.info(
        "Composed %d-exercise program for %s",
        len(entries),
        format_key(key),
        extra={
            "workoutgen_workout_type": request.workout_type,
            "workoutgen_difficulty": request.difficulty,
            "workoutgen_exercise_count": len(entries),
        },
    )
    return GenerationResult(program=program, reasoning=reasoning, tips=tier.tips)
