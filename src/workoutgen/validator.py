"""Validation and repair of chat-model replies.

A reply is held to the same rules as the deterministic composer: tier
exercise counts, tier permission, set and rest ranges, and rep labels.
Repairable problems (too many exercises, out-of-range numbers, unknown
names) are fixed in place; anything that leaves fewer than the tier minimum
raises AIMalformedResponse so the engine falls back.
"""

from __future__ import annotations

import json
import logging
import math
import re
from collections.abc import Callable, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from workoutgen.composer import epoch_ms, weight_for
from workoutgen.errors import AIMalformedResponse
from workoutgen.models import (
    ExerciseRecord,
    GenerateRequest,
    GenerationResult,
    ProgramExerciseEntry,
    WorkoutProgram,
)
from workoutgen.tiers import TierSpec, get_tier, is_permitted, rep_label_matches
from workoutgen.variety import VarietyStore

logger = logging.getLogger(__name__)

# Greedy: first "{" to last "}", tolerating prose around the object.
_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")
_NUMBER_RE = re.compile(r"-?\d+(?:\.\d+)?")


def _coerce_int(value: Any) -> int | None:
    """Best-effort integer from a reply field. Non-finite numbers count as missing."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        number = value
    else:
        match = _NUMBER_RE.search(str(value))
        if match is None:
            return None
        number = float(match.group(0))
    if not math.isfinite(number):
        return None
    return int(round(number))


class AISelectedExercise(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    exercise_name: str = Field(default="", alias="exerciseName")
    sets: int | None = None
    reps: str | None = None
    rest_between_sets: int | None = Field(default=None, alias="restBetweenSets")
    weight: str | None = None
    notes: str | None = None
    difficulty_justification: str | None = Field(default=None, alias="difficultyJustification")

    @field_validator("exercise_name", mode="before")
    @classmethod
    def name_as_text(cls, v: Any) -> str:
        return "" if v is None else str(v).strip()

    @field_validator("sets", "rest_between_sets", mode="before")
    @classmethod
    def numeric_or_none(cls, v: Any) -> int | None:
        return _coerce_int(v)

    @field_validator("reps", "weight", "notes", "difficulty_justification", mode="before")
    @classmethod
    def text_or_none(cls, v: Any) -> str | None:
        if v is None:
            return None
        text = str(v).strip()
        return text or None


class AIReply(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    selected_exercises: list[AISelectedExercise] = Field(
        default_factory=list, alias="selectedExercises"
    )
    reasoning: str | None = None
    tips: list[str] | None = None
    estimated_duration: int | None = Field(default=None, alias="estimatedDuration")

    @field_validator("selected_exercises", mode="before")
    @classmethod
    def list_or_empty(cls, v: Any) -> Any:
        return v if v is not None else []

    @field_validator("estimated_duration", mode="before")
    @classmethod
    def positive_duration(cls, v: Any) -> int | None:
        minutes = _coerce_int(v)
        return minutes if minutes and minutes > 0 else None

    @field_validator("reasoning", mode="before")
    @classmethod
    def reasoning_as_text(cls, v: Any) -> str | None:
        if isinstance(v, list):
            v = " ".join(str(part).strip() for part in v if isinstance(part, str))
        if not isinstance(v, str):
            return None
        return v.strip() or None

    @field_validator("tips", mode="before")
    @classmethod
    def tips_as_text(cls, v: Any) -> list[str] | None:
        if not v or not isinstance(v, list):
            return None
        tips = [str(tip).strip() for tip in v if str(tip).strip()]
        return tips or None


def parse_reply(raw: str) -> AIReply:
    """Extract and schema-check the JSON object in a reply. Raises AIMalformedResponse."""
    match = _JSON_OBJECT_RE.search(raw or "")
    if match is None:
        raise AIMalformedResponse("No JSON object found in AI reply")
    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        raise AIMalformedResponse(f"AI reply is not valid JSON: {exc.msg}") from exc
    except (ValueError, RecursionError) as exc:
        # integer digit limit, or nesting too deep for the decoder
        raise AIMalformedResponse(f"AI reply is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise AIMalformedResponse("AI reply JSON is not an object")
    try:
        return AIReply.model_validate(data)
    except ValidationError as exc:
        raise AIMalformedResponse(f"AI reply failed schema validation: {exc}") from exc
    except (ArithmeticError, TypeError, ValueError) as exc:
        raise AIMalformedResponse(f"AI reply could not be coerced: {exc}") from exc


def _repair_entry(
    claimed: AISelectedExercise,
    exercise: ExerciseRecord,
    tier: TierSpec,
) -> ProgramExerciseEntry:
    sets = tier.clamp_sets(claimed.sets if claimed.sets is not None else tier.sets)
    rest = tier.clamp_rest(
        claimed.rest_between_sets if claimed.rest_between_sets is not None else tier.rest_seconds
    )
    reps = claimed.reps if claimed.reps and rep_label_matches(claimed.reps, tier) else tier.rep_labels[0]
    return ProgramExerciseEntry(
        exercise=exercise,
        sets=sets,
        reps=reps,
        weight=claimed.weight or weight_for(exercise, tier),
        rest_between_sets=rest,
        notes=claimed.notes,
        difficulty_justification=claimed.difficulty_justification,
    )


def default_tips(difficulty: str) -> tuple[str, ...]:
    return (
        f"Focus on proper form - quality over quantity for {difficulty} level",
        "Progress gradually - don't rush to the next difficulty level",
        "Listen to your body and rest when needed",
    )


def validate_reply(
    raw: str,
    request: GenerateRequest,
    eligible: Sequence[ExerciseRecord],
    variety: VarietyStore,
    *,
    clock: Callable[[], int] | None = None,
) -> GenerationResult:
    """Turn a raw reply into an AI-generated result, or raise AIMalformedResponse."""
    clock = clock or epoch_ms
    tier = get_tier(request.difficulty)
    reply = parse_reply(raw)

    claimed = reply.selected_exercises
    if len(claimed) < tier.min_exercises:
        raise AIMalformedResponse(
            f"AI selected {len(claimed)} exercises, {request.difficulty} requires "
            f"at least {tier.min_exercises}"
        )
    if len(claimed) > tier.max_exercises:
        logger.warning(
            "AI selected %d exercises, %s maximum is %d; truncating",
            len(claimed),
            request.difficulty,
            tier.max_exercises,
        )
        claimed = claimed[: tier.max_exercises]

    by_name = {exercise.name.lower(): exercise for exercise in eligible}
    entries: list[ProgramExerciseEntry] = []
    used: set[str] = set()
    for item in claimed:
        exercise = by_name.get(item.exercise_name.lower())
        if exercise is None:
            logger.warning("Dropping AI exercise not in eligible set: %r", item.exercise_name)
            continue
        if not is_permitted(exercise.difficulty, request.difficulty):
            logger.warning(
                "Dropping AI exercise %s (%s) not permitted for %s",
                exercise.name,
                exercise.difficulty,
                request.difficulty,
            )
            continue
        if exercise.id in used:
            logger.warning("Dropping duplicate AI exercise %s", exercise.name)
            continue
        used.add(exercise.id)
        entries.append(_repair_entry(item, exercise, tier))

    if len(entries) < tier.min_exercises:
        raise AIMalformedResponse(
            f"Only {len(entries)} valid exercises remain after validation, "
            f"{request.difficulty} requires {tier.min_exercises}"
        )

    info = request.type_info
    count = len(entries)
    program = WorkoutProgram(
        id=f"ai-workout-{request.workout_type}-{clock()}",
        name=f"AI {info.name} Workout ({request.difficulty})",
        type=request.workout_type,
        difficulty=request.difficulty,
        duration_minutes=reply.estimated_duration or request.duration_minutes,
        exercises=tuple(entries),
        description=(
            f"AI-generated {request.difficulty} level {request.workout_type} workout with "
            f"{count} exercises, specifically designed for your fitness level and goals."
        ),
        benefits=(
            f"Perfectly tailored to {request.difficulty} fitness level",
            f"{count} exercises meeting minimum {request.difficulty} requirements",
            f"AI-optimized for {request.workout_type} development",
            "Scientifically-backed exercise selection and progression",
            "Expert form and safety guidance for your level",
        ),
        ai_generated=True,
    )

    variety.set(request.variety_key, program.exercise_names)
    reasoning = reply.reasoning or (
        f"AI selected {count} appropriate exercises for {request.difficulty} level"
    )
    tips = tuple(reply.tips) if reply.tips else default_tips(request.difficulty)
    return GenerationResult(program=program, reasoning=reasoning, tips=tips)
