"""In-process backend, mainly for tests and throwaway sessions."""

from __future__ import annotations

from .base import KeyValueBackend


class MemoryBackend(KeyValueBackend):
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)
