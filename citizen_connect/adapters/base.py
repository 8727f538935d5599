"""Base interface for key-value persistence backends."""

from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueBackend(ABC):
    """String-to-string storage, durable or not depending on the backend."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value stored under ``key`` or ``None``."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete ``key``; missing keys are ignored."""
