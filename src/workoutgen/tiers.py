"""Per-difficulty constants shared by the composer, prompt builder and validator."""

from __future__ import annotations

from dataclasses import dataclass

from workoutgen.models import parse_difficulty


@dataclass(frozen=True)
class TierSpec:
    name: str
    min_exercises: int
    max_exercises: int
    sets: int
    reps: str
    rest_seconds: int
    set_range: tuple[int, int]
    rest_range: tuple[int, int]
    rep_labels: tuple[str, ...]  # first label is the canonical replacement
    weight: str  # qualifier for exercises that need equipment
    cardio_reps: str
    cardio_rest: int
    plank_reps: str
    plank_rest: int
    # prompt guidance
    sets_text: str
    reps_text: str
    focus: str
    tips: tuple[str, ...]

    def clamp_sets(self, value: int) -> int:
        low, high = self.set_range
        return max(low, min(high, value))

    def clamp_rest(self, value: int) -> int:
        low, high = self.rest_range
        return max(low, min(high, value))


BEGINNER = TierSpec(
    name="beginner",
    min_exercises=3,
    max_exercises=4,
    sets=2,
    reps="8-10",
    rest_seconds=75,
    set_range=(2, 3),
    rest_range=(60, 90),
    rep_labels=("6-8", "8-10", "8-12"),
    weight="light",
    cardio_reps="20 seconds",
    cardio_rest=45,
    plank_reps="20-30 seconds hold",
    plank_rest=60,
    sets_text="2-3 sets",
    reps_text="8-12 reps",
    focus="basic movements, proper form, building foundation",
    tips=(
        "Focus on learning proper form before increasing intensity",
        "Take longer rest periods (60-90 seconds) between sets",
        "Start with bodyweight or light weights",
        "Progress gradually - consistency is more important than intensity",
    ),
)

INTERMEDIATE = TierSpec(
    name="intermediate",
    min_exercises=4,
    max_exercises=6,
    sets=3,
    reps="10-12",
    rest_seconds=60,
    set_range=(3, 4),
    rest_range=(45, 75),
    rep_labels=("10-12", "10-15", "12-15"),
    weight="moderate",
    cardio_reps="30 seconds",
    cardio_rest=30,
    plank_reps="30-45 seconds hold",
    plank_rest=45,
    sets_text="3-4 sets",
    reps_text="10-15 reps",
    focus="progressive overload, compound movements, increased volume",
    tips=(
        "Focus on progressive overload - gradually increase weight or reps",
        "Maintain proper form even as intensity increases",
        "Rest 45-75 seconds between sets for optimal recovery",
        "Challenge yourself while listening to your body",
    ),
)

ADVANCED = TierSpec(
    name="advanced",
    min_exercises=5,
    max_exercises=8,
    sets=4,
    reps="12-15",
    rest_seconds=45,
    set_range=(3, 5),
    rest_range=(30, 60),
    rep_labels=("12-15", "15-20", "12-20"),
    weight="moderate-heavy",
    cardio_reps="45 seconds",
    cardio_rest=30,
    plank_reps="45-60 seconds hold",
    plank_rest=45,
    sets_text="4-5 sets",
    reps_text="12-20 reps or advanced techniques",
    focus="complex movements, high intensity, advanced techniques",
    tips=(
        "Utilize advanced training techniques like supersets or drop sets",
        "Shorter rest periods (30-60 seconds) for increased intensity",
        "Focus on mind-muscle connection and movement quality",
        "Progressive overload through increased volume or intensity",
    ),
)

TIERS: dict[str, TierSpec] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "advanced": ADVANCED,
}

# Which catalog difficulties each requested tier may use.
PERMITTED_DIFFICULTIES: dict[str, frozenset[str]] = {
    "beginner": frozenset({"beginner"}),
    "intermediate": frozenset({"beginner", "intermediate"}),
    "advanced": frozenset({"beginner", "intermediate", "advanced"}),
}


def get_tier(difficulty: str) -> TierSpec:
    """Get the tier spec, raises UnknownDifficulty for anything else."""
    return TIERS[parse_difficulty(difficulty)]


def is_permitted(exercise_difficulty: str, tier: str) -> bool:
    return exercise_difficulty in PERMITTED_DIFFICULTIES[parse_difficulty(tier)]


def rep_label_matches(reps: str, tier: TierSpec) -> bool:
    """Loose match: a reply label passes if it mentions either endpoint of a tier label."""
    text = str(reps or "")
    if not text:
        return False
    for label in tier.rep_labels:
        low, _, high = label.partition("-")
        if low in text or (high and high in text):
            return True
    return False
