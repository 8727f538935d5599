"""JSON file backend implementing :class:`~citizen_connect.adapters.base.KeyValueBackend`.

All keys live in a single JSON object on disk. The file is rewritten on
every mutation, which keeps the implementation simple while providing
durability across process restarts.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from .base import KeyValueBackend

log = logging.getLogger(__name__)


class JSONFileBackend(KeyValueBackend):
    """Persist string values to a JSON file at ``path``."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._data: dict[str, str] = {}
        if self.path.exists():
            self._load()

    # ------------------------------------------------------------------
    # Internal helpers
    def _load(self) -> None:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            log.warning("Ignoring unreadable storage file %s", self.path)
            return
        if not isinstance(data, dict):
            log.warning("Ignoring storage file %s: not a JSON object", self.path)
            return
        self._data = {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _save(self) -> None:
        """Write the current state atomically."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = Path(str(self.path) + ".tmp")
        try:
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2, ensure_ascii=False)
            os.replace(tmp, self.path)
        finally:
            # only left behind when the dump or replace failed
            tmp.unlink(missing_ok=True)

    # ------------------------------------------------------------------
    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
        self._save()

    def remove(self, key: str) -> None:
        if key in self._data:
            del self._data[key]
            self._save()
