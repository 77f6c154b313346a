"""Validated, read-only exercise catalog plus the library search helpers."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from workoutgen.eligibility import matches_workout_type
from workoutgen.errors import CatalogError
from workoutgen.exercises import DEFAULT_EXERCISES
from workoutgen.models import (
    CATEGORIES,
    DIFFICULTIES,
    ExerciseRecord,
    parse_difficulty,
    parse_workout_type,
)

logger = logging.getLogger(__name__)


class Catalog:
    """Immutable table of exercises, validated once at construction.

    Insertion order is preserved and is the tie-break order everywhere
    downstream (eligibility, selection, fallback).
    """

    def __init__(self, records: Iterable[ExerciseRecord]) -> None:
        self._records: tuple[ExerciseRecord, ...] = tuple(records)
        self._by_id: dict[str, ExerciseRecord] = {}
        self._validate()

    def _validate(self) -> None:
        if not self._records:
            raise CatalogError("Exercise catalog is empty")
        for record in self._records:
            if not record.id:
                raise CatalogError(f"Exercise {record.name!r} has an empty id")
            if record.id in self._by_id:
                raise CatalogError(f"Duplicate exercise id: {record.id!r}")
            if not record.name.strip():
                raise CatalogError(f"Exercise {record.id!r} has an empty name")
            if record.category not in CATEGORIES:
                raise CatalogError(
                    f"Exercise {record.id!r} has unknown category {record.category!r}"
                )
            if record.difficulty not in DIFFICULTIES:
                raise CatalogError(
                    f"Exercise {record.id!r} has unknown difficulty {record.difficulty!r}"
                )
            if not record.muscle_groups:
                raise CatalogError(f"Exercise {record.id!r} has no muscle groups")
            self._by_id[record.id] = record

    @property
    def records(self) -> tuple[ExerciseRecord, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ExerciseRecord]:
        return iter(self._records)

    def __contains__(self, exercise_id: object) -> bool:
        return exercise_id in self._by_id

    def get(self, exercise_id: str) -> ExerciseRecord:
        """Get exercise by id. Raises KeyError if not found."""
        return self._by_id[exercise_id]

    def find_by_name(self, name: str) -> ExerciseRecord | None:
        wanted = str(name or "").strip().lower()
        for record in self._records:
            if record.name.lower() == wanted:
                return record
        return None

    def muscle_groups_for(self, exercise_ids: Iterable[str]) -> set[str]:
        """Get all muscle groups targeted by a list of exercise ids."""
        groups: set[str] = set()
        for exercise_id in exercise_ids:
            groups.update(self.get(exercise_id).muscle_groups)
        return groups


def search_exercises(
    catalog: Catalog,
    *,
    muscle_group: str | None = None,
    difficulty: str | None = None,
    category: str | None = None,
    equipment: str | None = None,
    search: str | None = None,
) -> list[ExerciseRecord]:
    """Filter the library the way the exercise browser does.

    Muscle group and equipment are case-insensitive substring matches;
    difficulty and category are exact. Equipment "none" or "bodyweight"
    selects exercises without equipment. Free text matches name, muscle
    groups and primary muscles.
    """
    results = list(catalog.records)

    if muscle_group:
        needle = muscle_group.lower()
        results = [
            r for r in results
            if any(needle in m.lower() for m in r.muscle_groups)
            or any(needle in m.lower() for m in r.primary_muscles)
        ]

    if difficulty:
        results = [r for r in results if r.difficulty == difficulty]

    if category:
        results = [r for r in results if r.category == category]

    if equipment:
        needle = equipment.lower()
        if needle in ("none", "bodyweight"):
            results = [r for r in results if r.is_bodyweight]
        else:
            results = [r for r in results if any(needle in e.lower() for e in r.equipment)]

    if search:
        needle = search.lower()
        results = [
            r for r in results
            if needle in r.name.lower()
            or any(needle in m.lower() for m in r.muscle_groups)
            or any(needle in m.lower() for m in r.primary_muscles)
        ]

    return results


def exercises_for_workout_type(
    catalog: Catalog,
    workout_type: str,
    difficulty: str | None = None,
    limit: int | None = None,
) -> list[ExerciseRecord]:
    """Type-relevant exercises, optionally narrowed to one exact difficulty."""
    workout_type = parse_workout_type(workout_type)
    results = [r for r in catalog.records if matches_workout_type(r, workout_type)]
    if difficulty:
        wanted = parse_difficulty(difficulty)
        results = [r for r in results if r.difficulty == wanted]
    if limit is not None:
        results = results[: max(0, int(limit))]
    return results


_DEFAULT_CATALOG: Catalog | None = None


def default_catalog() -> Catalog:
    global _DEFAULT_CATALOG  # noqa: PLW0603
    if _DEFAULT_CATALOG is None:
        _DEFAULT_CATALOG = Catalog(DEFAULT_EXERCISES)
        logger.debug("Loaded default exercise catalog (%d records)", len(_DEFAULT_CATALOG))
    return _DEFAULT_CATALOG
