"""Persistence of the single logged-in :class:`User` record."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from ..adapters.base import KeyValueBackend
from .errors import PersistenceReadError
from .models import User

log = logging.getLogger(__name__)

SESSION_KEY = "citizen_user"


class SessionStore:
    """Store a serialised copy of the current user under one key.

    The live :class:`User` is never shared with the backend; :meth:`load`
    always builds a fresh model from the stored JSON.
    """

    def __init__(self, backend: KeyValueBackend, key: str = SESSION_KEY) -> None:
        """Initialise the store on top of ``backend`` using ``key``."""
        self.backend = backend
        self.key = key

    # ------------------------------------------------------------------
    # Internal helpers
    @staticmethod
    def _decode(raw: str) -> User:
        try:
            return User.model_validate_json(raw)
        except ValidationError as exc:
            raise PersistenceReadError(f"Stored session is not a valid user: {exc}") from exc

    @staticmethod
    def _encode(user: User) -> str:
        return user.model_dump_json(by_alias=True)

    # ------------------------------------------------------------------
    def load(self) -> User | None:
        """Return the stored user, or ``None`` if absent or unreadable."""
        raw = self.backend.get(self.key)
        if raw is None:
            return None
        try:
            return self._decode(raw)
        except PersistenceReadError as exc:
            log.warning("Discarding session record %r: %s", self.key, exc)
            return None

    def save(self, user: User) -> None:
        """Persist ``user``, overwriting any previous record."""
        self.backend.set(self.key, self._encode(user))

    def clear(self) -> None:
        """Remove the persisted record."""
        self.backend.remove(self.key)
