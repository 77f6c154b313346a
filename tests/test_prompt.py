"""Tests for prompt building."""

from workoutgen.eligibility import select_eligible
from workoutgen.models import GenerateRequest
from workoutgen.prompt import advice_prompt, build_prompt, exercise_line
from workoutgen.tiers import get_tier


def _prompt(catalog, previous=(), **kwargs):
    request = GenerateRequest("legs", "beginner", 20, **kwargs)
    eligible = select_eligible(catalog, "legs", "beginner")
    return build_prompt(request, eligible, previous, get_tier("beginner"))


def test_exercise_line_bodyweight(catalog):
    assert (
        exercise_line(catalog.get("squats"))
        == "- Squats: quadriceps, glutes, hamstrings (beginner, bodyweight)"
    )


def test_exercise_line_with_equipment(catalog):
    assert exercise_line(catalog.get("step-ups")).endswith("(beginner, step, box)")


def test_lists_every_eligible_exercise(catalog):
    prompt = _prompt(catalog)
    for name in ("Squats", "Lunges", "Calf Raises", "Wall Sit", "Step-ups"):
        assert f"- {name}:" in prompt
    assert "Bulgarian Split Squats" not in prompt


def test_tier_requirements(catalog):
    prompt = _prompt(catalog)
    assert "**BEGINNER LEVEL REQUIREMENTS:**" in prompt
    assert "- Minimum Exercises: 3" in prompt
    assert "- Maximum Exercises: 4" in prompt
    assert "- Recommended Sets: 2-3 sets" in prompt
    assert "- Recommended Reps: 8-12 reps" in prompt
    assert "SELECT EXACTLY 3-4 exercises" in prompt


def test_request_defaults(catalog):
    prompt = _prompt(catalog)
    assert "- Workout Type: Legs (Lower body strength and power development)" in prompt
    assert "- Duration: 20 minutes" in prompt
    assert "- User Goals: General fitness improvement" in prompt
    assert "- Available Equipment: bodyweight" in prompt
    assert "- Injuries/Limitations: None specified" in prompt
    assert "- Experience Level: beginner" in prompt


def test_request_overrides(catalog):
    prompt = _prompt(
        catalog,
        user_goals="Run a marathon",
        equipment=("dumbbells", "bench"),
        injuries=("left knee",),
        experience="returning after injury",
    )
    assert "- User Goals: Run a marathon" in prompt
    assert "- Available Equipment: dumbbells, bench" in prompt
    assert "- Injuries/Limitations: left knee" in prompt
    assert "- Experience Level: returning after injury" in prompt


def test_variety_block_only_with_previous_names(catalog):
    assert "EXERCISE VARIETY REQUIREMENT" not in _prompt(catalog)

    prompt = _prompt(catalog, previous=("Squats", "Lunges"))
    assert "EXERCISE VARIETY REQUIREMENT" in prompt
    assert "Previous exercises were: Squats, Lunges." in prompt
    assert "50-70%" in prompt


def test_response_format_fields(catalog):
    prompt = _prompt(catalog)
    for field in (
        '"selectedExercises"',
        '"exerciseName"',
        '"sets": 2,',
        '"reps": "8-12"',
        '"restBetweenSets"',
        '"weight"',
        '"notes"',
        '"difficultyJustification"',
        '"reasoning"',
        '"tips"',
        '"estimatedDuration": 20',
    ):
        assert field in prompt
    assert prompt.rstrip().endswith("meet the minimum count requirement.")


def test_advice_prompt():
    prompt = advice_prompt("Lose fat", "beginner", "Limited time")
    assert "Goals: Lose fat" in prompt
    assert "Current Level: beginner" in prompt
    assert "Challenges: Limited time" in prompt
    assert "3-4 specific, actionable recommendations" in prompt
