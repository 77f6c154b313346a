"""Tests for the eligibility filter."""

import logging

import pytest

from workoutgen.catalog import Catalog
from workoutgen.eligibility import select_eligible, tier_permitted, type_matches
from workoutgen.errors import CatalogError, UnknownDifficulty, UnknownWorkoutType
from workoutgen.models import DIFFICULTIES, WORKOUT_TYPES
from workoutgen.tiers import get_tier, is_permitted


def _ids(records):
    return [r.id for r in records]


class TestTypePredicates:
    def test_full_body_matches_everything(self, catalog):
        assert len(type_matches(catalog, "full-body")) == len(catalog)

    def test_legs(self, catalog):
        assert _ids(type_matches(catalog, "legs")) == [
            "squats",
            "lunges",
            "calf-raises",
            "wall-sit",
            "step-ups",
            "deadlifts",
            "bulgarian-split-squats",
        ]

    def test_back_uses_primary_muscles(self, catalog):
        assert _ids(type_matches(catalog, "back")) == [
            "pull-ups",
            "bent-over-rows",
            "deadlifts",
            "lat-pulldowns",
        ]

    def test_core(self, catalog):
        ids = _ids(type_matches(catalog, "core"))
        assert ids == [
            "plank",
            "mountain-climbers",
            "sit-ups",
            "russian-twists",
            "dead-bug",
            "bicycle-crunches",
            "leg-raises",
        ]

    def test_chest_matches_pectoral_primary(self, make_record):
        custom = Catalog([make_record("press", ("triceps",), primary=("Pectoralis major",))])
        assert _ids(type_matches(custom, "chest")) == ["press"]

    def test_shoulders_matches_deltoid_primary(self, make_record):
        custom = Catalog([make_record("raise", ("arms",), primary=("lateral deltoid",))])
        assert _ids(type_matches(custom, "shoulders")) == ["raise"]


class TestSelectEligible:
    def test_legs_beginner(self, catalog):
        eligible = select_eligible(catalog, "legs", "beginner")
        assert _ids(eligible) == ["squats", "lunges", "calf-raises", "wall-sit", "step-ups"]
        assert "Squats" in [r.name for r in eligible]

    def test_core_advanced_permits_every_difficulty(self, catalog):
        eligible = select_eligible(catalog, "core", "advanced")
        assert len(eligible) == 7
        assert {"beginner", "intermediate"} == {r.difficulty for r in eligible}

    def test_inputs_are_normalized(self, catalog):
        assert select_eligible(catalog, " Legs ", "BEGINNER") == select_eligible(
            catalog, "legs", "beginner"
        )

    def test_beginner_borrows_intermediate_of_same_type(self, catalog):
        eligible = select_eligible(catalog, "shoulders", "beginner")
        assert _ids(eligible) == ["push-ups", "mountain-climbers", "bench-press"]

    def test_borrowed_records_are_appended(self, catalog):
        eligible = select_eligible(catalog, "arms", "beginner")
        assert _ids(eligible) == ["push-ups", "bicep-curls", "bench-press"]

    def test_beginner_back_is_all_borrowed(self, catalog):
        eligible = select_eligible(catalog, "back", "beginner")
        assert _ids(eligible) == ["pull-ups", "bent-over-rows", "deadlifts"]

    def test_backfill_is_logged(self, catalog, caplog):
        with caplog.at_level(logging.WARNING, logger="workoutgen.eligibility"):
            select_eligible(catalog, "shoulders", "beginner")
        assert "borrowed 1 intermediate" in caplog.text

    def test_never_empty_for_default_catalog(self, catalog):
        for workout_type in WORKOUT_TYPES:
            for difficulty in DIFFICULTIES:
                assert len(select_eligible(catalog, workout_type, difficulty)) >= 1

    def test_tier_permission_holds_above_beginner(self, catalog):
        for workout_type in WORKOUT_TYPES:
            for difficulty in ("intermediate", "advanced"):
                for record in select_eligible(catalog, workout_type, difficulty):
                    assert is_permitted(record.difficulty, difficulty)

    def test_beginner_only_borrows_when_short(self, catalog):
        tier = get_tier("beginner")
        for workout_type in WORKOUT_TYPES:
            eligible = select_eligible(catalog, workout_type, "beginner")
            primary = [r for r in eligible if r.difficulty == "beginner"]
            if len(primary) >= tier.min_exercises:
                assert len(primary) == len(eligible)

    def test_monotonic_before_backfill(self, catalog):
        for workout_type in WORKOUT_TYPES:
            typed = type_matches(catalog, workout_type)
            beginner = set(_ids(tier_permitted(typed, "beginner")))
            intermediate = set(_ids(tier_permitted(typed, "intermediate")))
            advanced = set(_ids(tier_permitted(typed, "advanced")))
            assert beginner <= intermediate <= advanced


class TestFallbacks:
    def test_zero_type_matches_uses_first_three_beginners(self, make_record):
        custom = Catalog(
            [
                make_record("squat", ("quadriceps", "glutes")),
                make_record("deadlift", ("hamstrings",), "advanced"),
                make_record("lunge", ("quadriceps",)),
                make_record("calf-raise", ("calves",)),
                make_record("step-up", ("glutes",)),
            ]
        )
        eligible = select_eligible(custom, "chest", "advanced")
        assert _ids(eligible) == ["squat", "lunge", "calf-raise"]

    def test_type_match_outside_tier_falls_back_globally(self, make_record):
        custom = Catalog(
            [
                make_record("weighted-dip", ("chest",), "advanced"),
                make_record("squat", ("quadriceps",)),
                make_record("lunge", ("quadriceps",)),
            ]
        )
        eligible = select_eligible(custom, "chest", "beginner")
        assert _ids(eligible) == ["squat", "lunge"]

    def test_no_beginner_records_for_fallback_raises(self, make_record):
        custom = Catalog([make_record("front-squat", ("quadriceps",), "intermediate")])
        with pytest.raises(CatalogError, match="no beginner"):
            select_eligible(custom, "chest", "intermediate")

    def test_unknown_type_raises(self, catalog):
        with pytest.raises(UnknownWorkoutType):
            select_eligible(catalog, "cardio", "beginner")

    def test_unknown_difficulty_raises(self, catalog):
        with pytest.raises(UnknownDifficulty):
            select_eligible(catalog, "legs", "expert")
