"""Generation engine: probe, call, validate, or compose.

The AI path (probe, call, parse and validate) yields an Outcome. A Failed
outcome is logged with its error kind and collapses into the deterministic
composer, so ``generate`` always returns a complete program and
``ai_generated`` is the only provenance signal.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union

from workoutgen.catalog import Catalog, default_catalog
from workoutgen.composer import Clock, compose, epoch_ms
from workoutgen.config import Config
from workoutgen.delegate import AIDelegate, build_delegate
from workoutgen.eligibility import select_eligible
from workoutgen.errors import AIError, classify_ai_error
from workoutgen.models import ExerciseRecord, GenerateRequest, GenerationResult
from workoutgen.validator import validate_reply
from workoutgen.variety import InMemoryVarietyStore, VarietyStore, format_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ok:
    result: GenerationResult


@dataclass(frozen=True)
class Failed:
    error: AIError

    @property
    def kind(self) -> str:
        return classify_ai_error(self.error)


Outcome = Union[Ok, Failed]


class WorkoutEngine:
    def __init__(
        self,
        catalog: Catalog,
        variety: VarietyStore | None = None,
        delegate: AIDelegate | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.catalog = catalog
        self.variety = variety if variety is not None else InMemoryVarietyStore()
        self.delegate = delegate if delegate is not None else AIDelegate(None)
        self.clock = clock or epoch_ms

    @classmethod
    def from_config(cls, config: Config) -> "WorkoutEngine":
        return cls(
            catalog=default_catalog(),
            variety=InMemoryVarietyStore(),
            delegate=build_delegate(config),
        )

    def eligible_for(self, request: GenerateRequest) -> tuple[ExerciseRecord, ...]:
        return select_eligible(self.catalog, request.workout_type, request.difficulty)

    def compose(self, request: GenerateRequest) -> GenerationResult:
        """Deterministic path only; never touches the chat transport."""
        return compose(self.eligible_for(request), request, self.variety, clock=self.clock)

    def generate(self, request: GenerateRequest) -> GenerationResult:
        eligible = self.eligible_for(request)
        outcome = self._try_ai(request, eligible)
        log_extra = {
            "workoutgen_workout_type": request.workout_type,
            "workoutgen_difficulty": request.difficulty,
        }

        if isinstance(outcome, Ok):
            logger.info(
                "Generated AI program for %s",
                format_key(request.variety_key),
                extra={**log_extra, "workoutgen_ai_outcome": "ok"},
            )
            return outcome.result

        level = logging.INFO if outcome.kind == "unavailable" else logging.WARNING
        logger.log(
            level,
            "AI generation %s (%s); using deterministic composer",
            outcome.kind,
            outcome.error,
            extra={**log_extra, "workoutgen_ai_outcome": outcome.kind},
        )
        return compose(eligible, request, self.variety, clock=self.clock)

    def _try_ai(self, request: GenerateRequest, eligible: Sequence[ExerciseRecord]) -> Outcome:
        try:
            self.delegate.ensure_ready()
            previous = self.variety.get(request.variety_key)
            raw = self.delegate.request_program(request, eligible, previous)
            result = validate_reply(raw, request, eligible, self.variety, clock=self.clock)
        except AIError as exc:
            return Failed(exc)
        return Ok(result)

    def personalized_advice(self, goals: str, current_level: str, challenges: str) -> str:
        return self.delegate.personalized_advice(goals, current_level, challenges)
