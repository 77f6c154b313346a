"""Shared fixtures: default catalog, isolated variety stores, fake chat transports."""

from __future__ import annotations

import json
from collections.abc import Callable

import pytest

from workoutgen.catalog import Catalog, default_catalog
from workoutgen.models import ExerciseInstructions, ExerciseRecord
from workoutgen.variety import InMemoryVarietyStore

FIXED_MS = 1_700_000_000_000


class FakeTransport:
    """ChatTransport double. Answers the probe, then replays ``replies`` in order.

    A reply that is an exception instance is raised instead of returned.
    """

    def __init__(self, replies=(), probe_reply: object = "Hello") -> None:
        self.replies = list(replies)
        self.probe_reply = probe_reply
        self.calls: list[dict] = []

    def chat(self, prompt, *, model, temperature, max_tokens, timeout):
        self.calls.append(
            {
                "prompt": prompt,
                "model": model,
                "temperature": temperature,
                "max_tokens": max_tokens,
                "timeout": timeout,
            }
        )
        reply = self.probe_reply if prompt == "Hi" else self.replies.pop(0)
        if isinstance(reply, BaseException):
            raise reply
        return reply

    @property
    def probe_calls(self) -> list[dict]:
        return [c for c in self.calls if c["prompt"] == "Hi"]

    @property
    def program_calls(self) -> list[dict]:
        return [c for c in self.calls if c["prompt"] != "Hi"]


def reply_json(names: list[str], **extra) -> str:
    """A chat reply wrapping a JSON program in prose, like real models do."""
    exercises = []
    for name in names:
        entry = {
            "exerciseName": name,
            "sets": 2,
            "reps": "8-10",
            "restBetweenSets": 75,
            "notes": f"Form cues for {name}",
        }
        exercises.append(entry)
    body = {"selectedExercises": exercises, "reasoning": "Balanced leg day", "tips": ["Warm up"]}
    body.update(extra)
    return "Here is your workout:\n" + json.dumps(body) + "\nEnjoy!"


@pytest.fixture
def catalog() -> Catalog:
    return default_catalog()


@pytest.fixture
def store() -> InMemoryVarietyStore:
    return InMemoryVarietyStore()


@pytest.fixture
def clock() -> Callable[[], int]:
    return lambda: FIXED_MS


@pytest.fixture
def make_transport():
    return FakeTransport


@pytest.fixture
def make_reply():
    return reply_json


@pytest.fixture
def make_record():
    def _make(
        exercise_id: str,
        muscle_groups: tuple[str, ...],
        difficulty: str = "beginner",
        *,
        name: str | None = None,
        primary: tuple[str, ...] = (),
        category: str = "strength",
        equipment: tuple[str, ...] = (),
    ) -> ExerciseRecord:
        return ExerciseRecord(
            id=exercise_id,
            name=name or exercise_id.replace("-", " ").title(),
            category=category,
            muscle_groups=muscle_groups,
            primary_muscles=primary or muscle_groups[:1],
            secondary_muscles=(),
            difficulty=difficulty,
            equipment=equipment,
            instructions=ExerciseInstructions(setup=("Stand tall",)),
        )

    return _make
