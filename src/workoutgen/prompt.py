"""Instruction text sent to the chat model for program generation."""

from __future__ import annotations

from collections.abc import Sequence

from workoutgen.models import ExerciseRecord, GenerateRequest
from workoutgen.tiers import TierSpec

PROBE_PROMPT = "Hi"


def exercise_line(exercise: ExerciseRecord) -> str:
    equipment = ", ".join(exercise.equipment) if exercise.equipment else "bodyweight"
    groups = ", ".join(exercise.muscle_groups)
    return f"- {exercise.name}: {groups} ({exercise.difficulty}, {equipment})"


def variety_block(previous_names: Sequence[str]) -> str:
    if not previous_names:
        return ""
    return (
        "\n\n**EXERCISE VARIETY REQUIREMENT:**\n"
        "To ensure workout variety, try to select AT LEAST 2-3 DIFFERENT exercises from the "
        f"previous workout. Previous exercises were: {', '.join(previous_names)}. "
        "Change at least 50-70% of exercises for optimal training variety."
    )


def build_prompt(
    request: GenerateRequest,
    eligible: Sequence[ExerciseRecord],
    previous_names: Sequence[str],
    tier: TierSpec,
) -> str:
    info = request.type_info
    level = request.difficulty
    level_upper = level.upper()
    exercise_list = "\n".join(exercise_line(ex) for ex in eligible)
    equipment = ", ".join(request.equipment) or "Bodyweight only"
    injuries = ", ".join(request.injuries) or "None specified"
    example_sets = tier.sets_text.split(" ")[0].split("-")[0]
    example_reps = tier.reps_text.split(" ")[0]

    return f"""You are an expert personal trainer and exercise physiologist. Create a personalized workout program with STRICT adherence to fitness level requirements.

**WORKOUT REQUIREMENTS:**
- Workout Type: {info.name} ({info.description})
- Difficulty Level: {level_upper}
- Duration: {request.duration_minutes} minutes
- User Goals: {request.user_goals}
- Available Equipment: {equipment}
- Injuries/Limitations: {injuries}
- Experience Level: {request.experience or level}

**{level_upper} LEVEL REQUIREMENTS:**
- Minimum Exercises: {tier.min_exercises}
- Maximum Exercises: {tier.max_exercises}
- Recommended Sets: {tier.sets_text}
- Recommended Reps: {tier.reps_text}
- Focus: {tier.focus}

**AVAILABLE EXERCISES (FILTERED FOR {level_upper} LEVEL):**
{exercise_list}{variety_block(previous_names)}

**CRITICAL INSTRUCTIONS:**
1. SELECT EXACTLY {tier.min_exercises}-{tier.max_exercises} exercises from the provided list
2. ALL selected exercises MUST be appropriate for {level} level
3. NO exercises above the user's difficulty level
4. Ensure proper exercise progression and muscle balance
5. Consider the specified duration when planning rest periods
6. Provide specific reasoning for each exercise selection
7. Include safety considerations for the fitness level
8. PRIORITIZE EXERCISE VARIETY - change at least 2-3 exercises from previous workouts

**RESPONSE FORMAT (JSON ONLY):**
{{
  "selectedExercises": [
    {{
      "exerciseName": "Exercise Name (MUST match exactly from available list)",
      "sets": {example_sets},
      "reps": "{example_reps}",
      "restBetweenSets": {tier.rest_seconds},
      "weight": "bodyweight/light/moderate",
      "notes": "{level} specific form cues and safety tips",
      "difficultyJustification": "Why this exercise is appropriate for {level} level"
    }}
  ],
  "reasoning": "Explain why you selected these specific exercises for a {level} trainee and how they meet the minimum requirements",
  "tips": [
    "{level}-specific form tip",
    "{level}-specific progression advice",
    "{level}-specific safety consideration"
  ],
  "estimatedDuration": {request.duration_minutes}
}}

CRITICAL: Respond ONLY with valid JSON. Ensure ALL exercises are appropriate for {level} level and meet the minimum count requirement."""


def advice_prompt(goals: str, current_level: str, challenges: str) -> str:
    return f"""As a certified personal trainer, provide personalized fitness advice for someone with:

Goals: {goals}
Current Level: {current_level}
Challenges: {challenges}

Provide 3-4 specific, actionable recommendations in a supportive tone. Keep it under 200 words."""
