"""Optional chat-model path for program generation.

The delegate owns the transport and a cached readiness flag. A probe is
sent once; both success and failure are remembered until ``reprobe()`` is
called, so an unreachable endpoint costs one short timeout per process
rather than one per request.

Every failure surfaces as an ``AIError`` subclass. The engine recovers all
of them by composing a deterministic program instead.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from typing import Protocol

import httpx
import openai

from workoutgen.config import Config
from workoutgen.errors import AIError, AIMalformedResponse, AITimeout, AIUnavailable
from workoutgen.models import ExerciseRecord, GenerateRequest
from workoutgen.prompt import PROBE_PROMPT, advice_prompt, build_prompt
from workoutgen.tiers import get_tier

logger = logging.getLogger(__name__)

PROBE_MAX_TOKENS = 3
ADVICE_TEMPERATURE = 0.8
ADVICE_MAX_TOKENS = 300
DEFAULT_ADVICE = (
    "Focus on consistency, proper form, and gradual progression. "
    "Listen to your body and adjust intensity as needed."
)


class ChatTransport(Protocol):
    def chat(
        self,
        prompt: str,
        *,
        model: str,
        temperature: float | None,
        max_tokens: int,
        timeout: float,
    ) -> str: ...


class OpenAIChatTransport:
    """ChatTransport backed by the OpenAI SDK. No SDK-level retries."""

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        timeout: float = 30.0,
        client: openai.OpenAI | None = None,
    ) -> None:
        self._client = client or openai.OpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=httpx.Timeout(timeout, connect=5.0),
            max_retries=0,
        )

    def chat(
        self,
        prompt: str,
        *,
        model: str,
        temperature: float | None,
        max_tokens: int,
        timeout: float,
    ) -> str:
        params: dict = {
            "model": model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": max_tokens,
            "timeout": timeout,
        }
        if temperature is not None:
            params["temperature"] = temperature

        try:
            response = self._client.chat.completions.create(**params)
        except openai.APITimeoutError as exc:
            raise AITimeout(f"Chat request timed out after {timeout}s") from exc
        except openai.OpenAIError as exc:
            raise AITimeout(f"Chat transport failed: {exc}") from exc

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise AIMalformedResponse("Chat completion returned no content")
        return content


class AIDelegate:
    def __init__(self, transport: ChatTransport | None, config: Config | None = None) -> None:
        self.transport = transport
        self.config = config or Config()
        self._ready: bool | None = None
        self._lock = threading.Lock()

    @property
    def ready(self) -> bool | None:
        """Cached probe result; None until the first probe."""
        return self._ready

    def ensure_ready(self) -> None:
        """Probe once, then serve the cached answer. Raises AIUnavailable."""
        if self.transport is None:
            raise AIUnavailable("No chat transport configured")
        with self._lock:
            if self._ready is None:
                self._ready = self._probe()
            ready = self._ready
        if not ready:
            raise AIUnavailable("Chat endpoint failed its readiness probe")

    def reprobe(self) -> bool:
        with self._lock:
            self._ready = None
        try:
            self.ensure_ready()
        except AIUnavailable:
            return False
        return True

    def _probe(self) -> bool:
        assert self.transport is not None
        try:
            reply = self.transport.chat(
                PROBE_PROMPT,
                model=self.config.model,
                temperature=None,
                max_tokens=PROBE_MAX_TOKENS,
                timeout=self.config.probe_timeout_seconds,
            )
        except Exception as exc:
            logger.warning("AI probe failed (%s); using deterministic composer", exc)
            return False
        if not reply:
            logger.warning("AI probe returned an empty reply; using deterministic composer")
            return False
        logger.info("AI service ready (model=%s)", self.config.model)
        return True

    def _send(self, prompt: str, *, temperature: float | None, max_tokens: int, timeout: float) -> str:
        if self.transport is None:
            raise AIUnavailable("No chat transport configured")
        try:
            return self.transport.chat(
                prompt,
                model=self.config.model,
                temperature=temperature,
                max_tokens=max_tokens,
                timeout=timeout,
            )
        except AIError:
            raise
        except Exception as exc:
            raise AITimeout(f"Chat transport failed: {exc}") from exc

    def request_program(
        self,
        request: GenerateRequest,
        eligible: Sequence[ExerciseRecord],
        previous_names: Sequence[str] = (),
    ) -> str:
        """Send the generation prompt and return the raw reply text."""
        prompt = build_prompt(request, eligible, previous_names, get_tier(request.difficulty))
        return self._send(
            prompt,
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens,
            timeout=self.config.generation_timeout_seconds,
        )

    def personalized_advice(self, goals: str, current_level: str, challenges: str) -> str:
        """Three or four coaching recommendations, or a fixed default on any failure."""
        try:
            self.ensure_ready()
            reply = self._send(
                advice_prompt(goals, current_level, challenges),
                temperature=ADVICE_TEMPERATURE,
                max_tokens=ADVICE_MAX_TOKENS,
                timeout=self.config.generation_timeout_seconds,
            )
        except AIError as exc:
            logger.warning("Personalized advice unavailable (%s: %s)", exc.kind, exc)
            return DEFAULT_ADVICE
        return reply.strip() or DEFAULT_ADVICE


def build_delegate(config: Config) -> AIDelegate:
    """Delegate wired to OpenAI when a key is configured and AI is enabled."""
    transport: ChatTransport | None = None
    if config.ai_configured:
        assert config.openai_api_key is not None
        transport = OpenAIChatTransport(
            api_key=config.openai_api_key,
            base_url=config.base_url,
            timeout=config.generation_timeout_seconds,
        )
    elif config.ai_enabled:
        logger.info("OPENAI_API_KEY not set; AI generation disabled")
    return AIDelegate(transport, config)
