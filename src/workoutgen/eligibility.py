"""Eligibility filter: which catalog exercises fit a (workout type, tier) request.

Two passes over the catalog, in catalog order:

1. Type match: a fixed predicate per workout type over muscle groups and
   primary muscles. ``full-body`` matches everything.
2. Tier permission: beginner sees beginner only, intermediate sees beginner
   and intermediate, advanced sees everything.

When the result is below the tier minimum it is backfilled from the adjacent
tier of the same type. When the type matches nothing at all, the first three
beginner records of the catalog are used regardless of type, so the result is
never empty for a valid catalog.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from workoutgen.errors import CatalogError
from workoutgen.models import ExerciseRecord, parse_difficulty, parse_workout_type
from workoutgen.tiers import get_tier, is_permitted

if TYPE_CHECKING:
    from workoutgen.catalog import Catalog

logger = logging.getLogger(__name__)

GLOBAL_FALLBACK_SIZE = 3

_LEG_GROUPS = frozenset({"quadriceps", "hamstrings", "glutes", "calves", "legs"})
_LEG_PRIMARY = frozenset({"quadriceps", "glutes", "hamstrings", "calves"})


def _primary_contains(record: ExerciseRecord, *needles: str) -> bool:
    return any(
        needle in muscle.lower() for muscle in record.primary_muscles for needle in needles
    )


def _full_body(record: ExerciseRecord) -> bool:
    return True


def _chest(record: ExerciseRecord) -> bool:
    return "chest" in record.muscle_groups or _primary_contains(record, "pectoral")


def _back(record: ExerciseRecord) -> bool:
    return "back" in record.muscle_groups or _primary_contains(record, "latissimus", "rhomboid")


def _legs(record: ExerciseRecord) -> bool:
    if any(group in _LEG_GROUPS for group in record.muscle_groups):
        return True
    return any(muscle.lower() in _LEG_PRIMARY for muscle in record.primary_muscles)


def _core(record: ExerciseRecord) -> bool:
    return "core" in record.muscle_groups or _primary_contains(record, "abdominis", "core")


def _arms(record: ExerciseRecord) -> bool:
    return (
        "biceps" in record.muscle_groups
        or "triceps" in record.muscle_groups
        or "biceps" in record.primary_muscles
    )


def _shoulders(record: ExerciseRecord) -> bool:
    return "shoulders" in record.muscle_groups or _primary_contains(record, "deltoid")


TYPE_PREDICATES: dict[str, Callable[[ExerciseRecord], bool]] = {
    "full-body": _full_body,
    "chest": _chest,
    "back": _back,
    "legs": _legs,
    "core": _core,
    "arms": _arms,
    "shoulders": _shoulders,
}


def matches_workout_type(record: ExerciseRecord, workout_type: str) -> bool:
    return TYPE_PREDICATES[parse_workout_type(workout_type)](record)


def type_matches(catalog: Catalog, workout_type: str) -> list[ExerciseRecord]:
    predicate = TYPE_PREDICATES[parse_workout_type(workout_type)]
    return [record for record in catalog.records if predicate(record)]


def tier_permitted(records: list[ExerciseRecord], difficulty: str) -> list[ExerciseRecord]:
    """Tier-permission pass only, before any backfill."""
    return [record for record in records if is_permitted(record.difficulty, difficulty)]


def global_fallback(catalog: Catalog) -> list[ExerciseRecord]:
    beginners = [record for record in catalog.records if record.difficulty == "beginner"]
    if not beginners:
        raise CatalogError("Catalog has no beginner exercises to fall back on")
    return beginners[:GLOBAL_FALLBACK_SIZE]


def _borrow_tier(difficulty: str) -> str:
    # beginner borrows upward, the others borrow the beginner pool
    return "intermediate" if difficulty == "beginner" else "beginner"


def select_eligible(
    catalog: Catalog,
    workout_type: str,
    difficulty: str,
) -> tuple[ExerciseRecord, ...]:
    """Return the eligible set for a request, never empty.

    Raises UnknownWorkoutType / UnknownDifficulty for bad tags and
    CatalogError when the catalog cannot satisfy the global fallback.
    """
    workout_type = parse_workout_type(workout_type)
    difficulty = parse_difficulty(difficulty)
    tier = get_tier(difficulty)
    log_extra = {"workoutgen_workout_type": workout_type, "workoutgen_difficulty": difficulty}

    if len(catalog) == 0:
        raise CatalogError("Exercise catalog is empty")

    typed = type_matches(catalog, workout_type)
    if not typed:
        fallback = global_fallback(catalog)
        logger.warning(
            "No exercises match workout type %s; using %d global beginner fallbacks",
            workout_type,
            len(fallback),
            extra=log_extra,
        )
        return tuple(fallback)

    eligible = tier_permitted(typed, difficulty)
    logger.debug(
        "Found %d %s exercises, %d permitted at %s",
        len(typed),
        workout_type,
        len(eligible),
        difficulty,
        extra=log_extra,
    )

    shortfall = tier.min_exercises - len(eligible)
    if shortfall > 0:
        borrow_from = _borrow_tier(difficulty)
        included = {record.id for record in eligible}
        borrowed = [
            record for record in typed
            if record.difficulty == borrow_from and record.id not in included
        ][:shortfall]
        eligible.extend(borrowed)
        logger.warning(
            "Insufficient exercises for %s level %s: found %d, required %d; borrowed %d %s",
            difficulty,
            workout_type,
            len(eligible) - len(borrowed),
            tier.min_exercises,
            len(borrowed),
            borrow_from,
            extra=log_extra,
        )

    if not eligible:
        # type matched only records outside the tier and nothing could be borrowed
        fallback = global_fallback(catalog)
        logger.warning(
            "No permitted %s exercises at %s; using %d global beginner fallbacks",
            workout_type,
            difficulty,
            len(fallback),
            extra=log_extra,
        )
        return tuple(fallback)

    return tuple(eligible)
