"""Tests for the program JSON shape."""

import json

import pytest

from workoutgen.composer import compose
from workoutgen.eligibility import select_eligible
from workoutgen.models import GenerateRequest
from workoutgen.output import (
    entry_from_dict,
    program_to_dict,
    result_from_dict,
    result_to_dict,
    write_json,
)


@pytest.fixture
def result(catalog, store, clock):
    request = GenerateRequest("legs", "beginner", 20)
    eligible = select_eligible(catalog, "legs", "beginner")
    return compose(eligible, request, store, clock=clock)


def test_program_keys_are_camel_case(result):
    data = program_to_dict(result.program)
    assert set(data) == {
        "id",
        "name",
        "type",
        "difficulty",
        "duration",
        "exercises",
        "description",
        "benefits",
        "aiGenerated",
    }
    assert data["duration"] == 20
    assert data["aiGenerated"] is False
    first = data["exercises"][0]
    assert first == {
        "exerciseId": "squats",
        "sets": 2,
        "reps": "8-10",
        "weight": "bodyweight",
        "restBetweenSets": 75,
    }


def test_result_survives_json(result, catalog):
    data = json.loads(json.dumps(result_to_dict(result)))
    assert result_from_dict(data, catalog) == result


def test_unknown_exercise_id_is_rejected(catalog):
    data = {"exerciseId": "burpees", "sets": 3, "reps": "10", "weight": "bodyweight", "restBetweenSets": 60}
    with pytest.raises(KeyError):
        entry_from_dict(data, catalog)


def test_optional_entry_fields(catalog):
    data = {
        "exerciseId": "plank",
        "sets": 3,
        "reps": "30-45 seconds",
        "weight": "bodyweight",
        "restBetweenSets": 60,
        "notes": "Keep hips level",
    }
    entry = entry_from_dict(data, catalog)
    assert entry.exercise.name == "Plank"
    assert entry.notes == "Keep hips level"
    assert entry.difficulty_justification is None


def test_write_json(result, tmp_path):
    path = tmp_path / "program.json"
    assert write_json(result, path) == 4

    written = json.loads(path.read_text())
    assert written["program"]["id"] == result.program.id
    assert written["reasoning"] == result.reasoning
    assert written["tips"] == list(result.tips)
