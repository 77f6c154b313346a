import json

import pytest
from click.testing import CliRunner

from workoutgen import cli
from workoutgen.cli import main


@pytest.fixture(autouse=True)
def offline(monkeypatch):
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: None)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("WORKOUTGEN_TEMPERATURE", raising=False)


@pytest.fixture
def runner():
    return CliRunner()


def test_list_types(runner):
    result = runner.invoke(main, ["list-types"])
    assert result.exit_code == 0
    assert "legs: Legs - Lower body strength and power development" in result.output
    assert len(result.output.strip().splitlines()) == 7


def test_generate_without_key_is_deterministic(runner):
    result = runner.invoke(main, ["generate", "--type", "legs", "--duration", "20"])
    assert result.exit_code == 0, result.output
    assert "Smart Legs Workout (beginner) [deterministic] - 20 min" in result.output
    assert "  Squats: 2 x 8-10, bodyweight, rest 75s" in result.output


def test_generate_writes_json(runner, tmp_path):
    out = tmp_path / "program.json"
    result = runner.invoke(
        main,
        ["generate", "--type", "core", "--difficulty", "advanced", "--duration", "45", "--no-ai", "-o", str(out)],
    )
    assert result.exit_code == 0, result.output
    data = json.loads(out.read_text())
    assert data["program"]["type"] == "core"
    assert data["program"]["aiGenerated"] is False
    assert f"Wrote program with {len(data['program']['exercises'])} exercises" in result.output


def test_generate_rejects_unknown_type(runner):
    result = runner.invoke(main, ["generate", "--type", "yoga"])
    assert result.exit_code != 0
    assert "yoga" in result.output


def test_generate_rejects_non_positive_duration(runner):
    result = runner.invoke(main, ["generate", "--type", "legs", "--duration", "0"])
    assert result.exit_code == 1


def test_bad_config_exits(runner, monkeypatch):
    monkeypatch.setenv("WORKOUTGEN_TEMPERATURE", "warm")
    result = runner.invoke(main, ["list-types"])
    assert result.exit_code == 1
    assert "WORKOUTGEN_TEMPERATURE" in result.output


def test_exercises_by_type(runner):
    result = runner.invoke(main, ["exercises", "--type", "core", "--difficulty", "beginner"])
    assert result.exit_code == 0
    assert "plank: Plank (beginner, bodyweight)" in result.output
    assert result.output.strip().endswith("5 exercises")


def test_exercises_search(runner):
    result = runner.invoke(main, ["exercises", "--search", "squat"])
    assert result.exit_code == 0
    assert "squats: Squats" in result.output
    assert "bulgarian-split-squats: Bulgarian Split Squats" in result.output


def test_show(runner):
    result = runner.invoke(main, ["show", "squats"])
    assert result.exit_code == 0
    assert result.output.startswith("Squats [squats]")
    assert "Setup:" in result.output
    assert "Execution:" in result.output


def test_show_unknown(runner):
    result = runner.invoke(main, ["show", "burpees"])
    assert result.exit_code == 1
    assert "burpees" in result.output


def test_advice_without_key(runner):
    result = runner.invoke(main, ["advice", "--goals", "Get strong", "--level", "beginner"])
    assert result.exit_code == 0
    assert "consistency" in result.output


def test_show_by_name(runner):
    result = runner.invoke(main, ["show", "bench press"])
    assert result.exit_code == 0
    assert result.output.startswith("Bench Press [bench-press]")
    assert "Instruction steps:" in result.output


def test_generate_lists_targeted_muscles(runner):
    result = runner.invoke(main, ["generate", "--type", "legs", "--duration", "20", "--no-ai"])
    targets = next(line for line in result.output.splitlines() if line.startswith("Targets: "))
    assert "quadriceps" in targets
    assert "calves" in targets
