"""Tests for the exercise catalog and library search."""

import pytest

from workoutgen.catalog import (
    Catalog,
    default_catalog,
    exercises_for_workout_type,
    search_exercises,
)
from workoutgen.errors import CatalogError, UnknownWorkoutType
from workoutgen.exercises import DEFAULT_EXERCISES


def test_exercise_count(catalog):
    assert len(catalog) == 22
    assert len(DEFAULT_EXERCISES) == 22


def test_all_exercises_have_required_fields(catalog):
    for ex in catalog:
        assert ex.id
        assert ex.name
        assert len(ex.muscle_groups) > 0
        assert len(ex.primary_muscles) > 0
        assert ex.total_instructions > 0
        assert ex.instructions.setup and ex.instructions.execution


def test_catalog_order_is_insertion_order(catalog):
    ids = [ex.id for ex in catalog.records]
    assert ids[0] == "push-ups"
    assert ids[-1] == "dips"


def test_default_catalog_is_built_once():
    assert default_catalog() is default_catalog()


def test_get_exercise(catalog):
    squats = catalog.get("squats")
    assert squats.name == "Squats"
    assert squats.is_bodyweight is True
    assert "quadriceps" in squats.muscle_groups
    assert "squats" in catalog


def test_get_exercise_unknown_raises(catalog):
    with pytest.raises(KeyError):
        catalog.get("burpees")


def test_find_by_name_is_case_insensitive(catalog):
    assert catalog.find_by_name("bench PRESS").id == "bench-press"
    assert catalog.find_by_name("  Plank ").id == "plank"
    assert catalog.find_by_name("Burpees") is None


def test_muscle_groups_for(catalog):
    groups = catalog.muscle_groups_for(["squats", "bench-press"])
    assert {"quadriceps", "glutes", "chest", "triceps"} <= groups


def test_requires_equipment(catalog):
    bench = catalog.get("bench-press")
    assert bench.requires_equipment is True
    assert bench.equipment == ("barbell", "bench")


class TestCatalogValidation:
    def test_empty_catalog_rejected(self):
        with pytest.raises(CatalogError, match="empty"):
            Catalog([])

    def test_duplicate_ids_rejected(self, make_record):
        records = [make_record("squat", ("quadriceps",)), make_record("squat", ("glutes",))]
        with pytest.raises(CatalogError, match="Duplicate exercise id"):
            Catalog(records)

    def test_unknown_difficulty_rejected(self, make_record):
        with pytest.raises(CatalogError, match="unknown difficulty"):
            Catalog([make_record("squat", ("quadriceps",), "expert")])

    def test_unknown_category_rejected(self, make_record):
        with pytest.raises(CatalogError, match="unknown category"):
            Catalog([make_record("squat", ("quadriceps",), category="yoga")])

    def test_missing_muscle_groups_rejected(self, make_record):
        with pytest.raises(CatalogError, match="no muscle groups"):
            Catalog([make_record("squat", (), primary=("quadriceps",))])

    def test_valid_records_accepted(self, make_record):
        custom = Catalog([make_record("squat", ("quadriceps",)), make_record("row", ("back",))])
        assert len(custom) == 2
        assert [r.id for r in custom] == ["squat", "row"]


class TestSearchExercises:
    def test_no_filters_returns_everything(self, catalog):
        assert len(search_exercises(catalog)) == 22

    def test_muscle_group_substring(self, catalog):
        ids = [r.id for r in search_exercises(catalog, muscle_group="chest")]
        assert ids == ["push-ups", "bench-press", "dumbbell-flyes", "dips"]

    def test_muscle_group_matches_primary_muscles(self, catalog):
        ids = [r.id for r in search_exercises(catalog, muscle_group="obliques")]
        assert ids == ["russian-twists", "bicycle-crunches"]

    def test_equipment_none_means_bodyweight(self, catalog):
        results = search_exercises(catalog, equipment="none")
        assert results
        assert all(r.is_bodyweight for r in results)
        assert search_exercises(catalog, equipment="bodyweight") == results

    def test_equipment_substring(self, catalog):
        ids = [r.id for r in search_exercises(catalog, equipment="bench")]
        assert ids == ["bench-press", "dumbbell-flyes", "bulgarian-split-squats"]

    def test_difficulty_and_category_are_exact(self, catalog):
        results = search_exercises(catalog, difficulty="intermediate", category="strength")
        assert len(results) == 10
        assert all(r.difficulty == "intermediate" for r in results)
        assert [r.id for r in search_exercises(catalog, category="cardio")] == ["mountain-climbers"]

    def test_free_text_search(self, catalog):
        assert [r.id for r in search_exercises(catalog, search="curl")] == ["bicep-curls"]
        assert "deadlifts" in [r.id for r in search_exercises(catalog, search="HAMSTRINGS")]


class TestExercisesForWorkoutType:
    def test_core_beginner(self, catalog):
        ids = [r.id for r in exercises_for_workout_type(catalog, "core", "beginner")]
        assert ids == ["plank", "mountain-climbers", "sit-ups", "russian-twists", "dead-bug"]

    def test_limit(self, catalog):
        results = exercises_for_workout_type(catalog, "core", limit=2)
        assert [r.id for r in results] == ["plank", "mountain-climbers"]

    def test_full_body_without_difficulty(self, catalog):
        assert len(exercises_for_workout_type(catalog, "full-body")) == 22

    def test_unknown_type_raises(self, catalog):
        with pytest.raises(UnknownWorkoutType):
            exercises_for_workout_type(catalog, "cardio")
