"""Structured logging for workoutgen.

Controlled via WORKOUTGEN_LOG_FORMAT env var: "text" (default) or "json".

Modules attach generation context as ``workoutgen_*`` record extras
(workout_type, difficulty, exercise_count, ai_outcome). Both formatters
render that context; the JSON one nests it under "generation" and lifts
the AI outcome to a top-level "ai_outcome" key.
"""

import json
import logging
import sys
import traceback
from datetime import datetime, timezone

EXTRA_PREFIX = "workoutgen_"

# SDK request logs are noise at INFO; shown only when debugging.
_CHATTY_LOGGERS = ("httpx", "httpcore", "openai")


def generation_context(record: logging.LogRecord) -> dict:
    return {
        key[len(EXTRA_PREFIX):]: value
        for key, value in record.__dict__.items()
        if key.startswith(EXTRA_PREFIX)
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = generation_context(record)
        if "ai_outcome" in context:
            entry["ai_outcome"] = context.pop("ai_outcome")
        if context:
            entry["generation"] = context

        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = "".join(traceback.format_exception(*record.exc_info))

        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Plain lines, with the generation context appended as ``[type-tier key=value]``."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = generation_context(record)
        if not context:
            return line

        parts = []
        workout_type = context.pop("workout_type", None)
        difficulty = context.pop("difficulty", None)
        if workout_type and difficulty:
            parts.append(f"{workout_type}-{difficulty}")
        elif workout_type or difficulty:
            parts.append(str(workout_type or difficulty))
        parts.extend(f"{key}={value}" for key, value in sorted(context.items()))
        return f"{line} [{' '.join(parts)}]"


def setup_logging(log_format: str, level: int = logging.INFO) -> None:
    """Configure the root logger with JSON or text output on stderr."""
    root = logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter() if log_format == "json" else TextFormatter())
    root.addHandler(handler)

    sdk_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(sdk_level)
