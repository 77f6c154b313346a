"""Error types and the stable AI failure taxonomy.

Configuration errors (bad catalog, unknown workout type or tier) are raised to
callers. AI failures are recovered inside the engine by falling back to the
deterministic composer; the taxonomy below is what gets logged.
"""

from __future__ import annotations

from typing import Literal

AIErrorKind = Literal["unavailable", "timeout", "malformed", "other"]


class WorkoutGenError(Exception):
    """Base class for all workoutgen errors."""


class CatalogError(WorkoutGenError):
    """The exercise catalog is empty or contains invalid records."""


class UnknownWorkoutType(WorkoutGenError, ValueError):
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unknown workout type: {value!r}")


class UnknownDifficulty(WorkoutGenError, ValueError):
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unknown difficulty: {value!r}")


class AIError(WorkoutGenError):
    kind: AIErrorKind = "other"


class AIUnavailable(AIError):
    """No chat capability configured, or the readiness probe failed."""

    kind = "unavailable"


class AITimeout(AIError):
    """The chat call exceeded its deadline or the transport failed."""

    kind = "timeout"


class AIMalformedResponse(AIError):
    """The reply could not be parsed or violated the tier rules."""

    kind = "malformed"


def classify_ai_error(exc: BaseException | None) -> AIErrorKind:
    if isinstance(exc, AIError):
        return exc.kind
    return "other"
