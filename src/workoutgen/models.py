"""Core data models for program generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from workoutgen.errors import UnknownDifficulty, UnknownWorkoutType

WorkoutType = Literal["full-body", "chest", "back", "legs", "core", "arms", "shoulders"]
Difficulty = Literal["beginner", "intermediate", "advanced"]
Category = Literal["strength", "cardio", "flexibility", "sports"]

DIFFICULTIES: tuple[str, ...] = ("beginner", "intermediate", "advanced")
CATEGORIES: tuple[str, ...] = ("strength", "cardio", "flexibility", "sports")


@dataclass(frozen=True)
class WorkoutTypeInfo:
    name: str
    description: str


WORKOUT_TYPES: dict[str, WorkoutTypeInfo] = {
    "full-body": WorkoutTypeInfo("Full Body", "Complete workout targeting all major muscle groups"),
    "chest": WorkoutTypeInfo("Chest", "Focus on chest muscles and supporting muscle groups"),
    "back": WorkoutTypeInfo("Back", "Strengthen your back muscles and improve posture"),
    "legs": WorkoutTypeInfo("Legs", "Lower body strength and power development"),
    "core": WorkoutTypeInfo("Core", "Strengthen your core for better stability and balance"),
    "arms": WorkoutTypeInfo("Arms", "Build arm strength with biceps and triceps focus"),
    "shoulders": WorkoutTypeInfo("Shoulders", "Develop shoulder strength and mobility"),
}


def parse_workout_type(value: str) -> WorkoutType:
    """Normalize and validate a workout type tag, raising UnknownWorkoutType."""
    normalized = str(value or "").strip().lower()
    if normalized not in WORKOUT_TYPES:
        raise UnknownWorkoutType(value)
    return normalized  # type: ignore[return-value]


def parse_difficulty(value: str) -> Difficulty:
    normalized = str(value or "").strip().lower()
    if normalized not in DIFFICULTIES:
        raise UnknownDifficulty(value)
    return normalized  # type: ignore[return-value]


@dataclass(frozen=True)
class ExerciseInstructions:
    setup: tuple[str, ...] = ()
    execution: tuple[str, ...] = ()
    tips: tuple[str, ...] = ()
    common_mistakes: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.setup) + len(self.execution) + len(self.tips) + len(self.common_mistakes)


@dataclass(frozen=True)
class ExerciseRecord:
    """Immutable catalog entry. Empty ``equipment`` means bodyweight only."""

    id: str
    name: str
    category: str
    muscle_groups: tuple[str, ...]
    primary_muscles: tuple[str, ...]
    secondary_muscles: tuple[str, ...]
    difficulty: str
    equipment: tuple[str, ...] = ()
    instructions: ExerciseInstructions = field(default_factory=ExerciseInstructions)
    estimated_duration: int = 3  # seconds per rep
    rest_time: int = 60  # recommended rest in seconds
    image_url: str | None = None
    video_url: str | None = None

    @property
    def is_bodyweight(self) -> bool:
        return not self.equipment

    @property
    def requires_equipment(self) -> bool:
        return bool(self.equipment)

    @property
    def total_instructions(self) -> int:
        return len(self.instructions)


@dataclass(frozen=True)
class ProgramExerciseEntry:
    exercise: ExerciseRecord
    sets: int
    reps: str
    weight: str
    rest_between_sets: int  # seconds
    notes: str | None = None
    difficulty_justification: str | None = None


@dataclass(frozen=True)
class WorkoutProgram:
    id: str
    name: str
    type: str
    difficulty: str
    duration_minutes: int
    exercises: tuple[ProgramExerciseEntry, ...]
    description: str
    benefits: tuple[str, ...]
    ai_generated: bool

    @property
    def exercise_names(self) -> tuple[str, ...]:
        return tuple(entry.exercise.name for entry in self.exercises)


@dataclass(frozen=True)
class GenerationResult:
    """What the engine hands back: the program plus coaching text."""

    program: WorkoutProgram
    reasoning: str
    tips: tuple[str, ...]


@dataclass(frozen=True)
class GenerateRequest:
    """Immutable generation request. Every optional field's default lives here."""

    workout_type: str
    difficulty: str = "beginner"
    duration_minutes: int = 30
    user_goals: str = "General fitness improvement"
    equipment: tuple[str, ...] = ("bodyweight",)
    injuries: tuple[str, ...] = ()
    experience: str | None = None

    def __post_init__(self) -> None:
        # frozen dataclass: normalize via object.__setattr__
        object.__setattr__(self, "workout_type", parse_workout_type(self.workout_type))
        object.__setattr__(self, "difficulty", parse_difficulty(self.difficulty))
        if int(self.duration_minutes) <= 0:
            raise ValueError(f"duration_minutes must be positive, got {self.duration_minutes}")
        object.__setattr__(self, "duration_minutes", int(self.duration_minutes))
        object.__setattr__(self, "equipment", tuple(self.equipment))
        object.__setattr__(self, "injuries", tuple(self.injuries))

    @property
    def variety_key(self) -> tuple[str, str]:
        return (self.workout_type, self.difficulty)

    @property
    def type_info(self) -> WorkoutTypeInfo:
        return WORKOUT_TYPES[self.workout_type]
