import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _env_float(name: str, default: str) -> float:
    raw = os.environ.get(name, default)
    try:
        return float(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be a number, got {raw!r}") from None


def _env_int(name: str, default: str) -> int:
    raw = os.environ.get(name, default)
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None


def _env_bool(name: str, default: str) -> bool:
    raw = os.environ.get(name, default).strip().lower()
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    raise RuntimeError(f"{name} must be true or false, got {raw!r}")


@dataclass(frozen=True)
class Config:
    openai_api_key: str | None = None
    ai_enabled: bool = True
    model: str = "gpt-4o-mini"
    base_url: str | None = None
    temperature: float = 0.7
    max_tokens: int = 1500
    probe_timeout_seconds: float = 8.0
    generation_timeout_seconds: float = 30.0
    log_format: str = "text"

    @property
    def ai_configured(self) -> bool:
        return self.ai_enabled and bool(self.openai_api_key)

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            openai_api_key=os.environ.get("OPENAI_API_KEY", "").strip() or None,
            ai_enabled=_env_bool("WORKOUTGEN_AI_ENABLED", "true"),
            model=os.environ.get("WORKOUTGEN_MODEL", "gpt-4o-mini"),
            base_url=os.environ.get("WORKOUTGEN_OPENAI_BASE_URL", "").strip() or None,
            temperature=_env_float("WORKOUTGEN_TEMPERATURE", "0.7"),
            max_tokens=_env_int("WORKOUTGEN_MAX_TOKENS", "1500"),
            probe_timeout_seconds=_env_float("WORKOUTGEN_PROBE_TIMEOUT", "8.0"),
            generation_timeout_seconds=_env_float("WORKOUTGEN_GENERATION_TIMEOUT", "30.0"),
            log_format=os.environ.get("WORKOUTGEN_LOG_FORMAT", "text"),
        )
