"""Variety memory: the exercises picked last time for each (type, tier) key.

One generation performs one read then one write per key. Concurrent
generations for the same key are last-writer-wins; that only affects which
exercises look "fresh" next time, never program validity.
"""

from __future__ import annotations

import threading
from typing import Protocol

VarietyKey = tuple[str, str]


def variety_key(workout_type: str, difficulty: str) -> VarietyKey:
    return (workout_type, difficulty)


def format_key(key: VarietyKey) -> str:
    """Render a key as ``{type}-{tier}`` for log lines."""
    return f"{key[0]}-{key[1]}"


class VarietyStore(Protocol):
    def get(self, key: VarietyKey) -> tuple[str, ...]: ...

    def set(self, key: VarietyKey, names: tuple[str, ...]) -> None: ...


class InMemoryVarietyStore:
    """Process-local store. Remembers only the most recent selection per key."""

    def __init__(self) -> None:
        self._entries: dict[VarietyKey, tuple[str, ...]] = {}
        self._lock = threading.Lock()

    def get(self, key: VarietyKey) -> tuple[str, ...]:
        with self._lock:
            return self._entries.get(key, ())

    def set(self, key: VarietyKey, names: tuple[str, ...]) -> None:
        with self._lock:
            self._entries[key] = tuple(names)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
