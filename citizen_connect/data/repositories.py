"""Ordered in-memory collections owned by the store."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from ..core.models import Activity, Issue, Politician, Update

T = TypeVar("T", Issue, Politician, Update, Activity)


class Repository(Generic[T]):
    """Sequence of entities kept in display order."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def seed(self, items: Iterable[T]) -> bool:
        """Bulk load ``items`` once; later calls are ignored.

        Returns ``True`` if the items were loaded.
        """
        if self._items:
            return False
        self._items = list(items)
        return True

    def _find(self, item_id: str) -> T | None:
        return next((i for i in self._items if i.id == item_id), None)

    # Readers get copies; only the owning store mutates the live entities.
    def get(self, item_id: str) -> T | None:
        item = self._find(item_id)
        return item.model_copy() if item is not None else None

    def all(self) -> list[T]:
        return [i.model_copy() for i in self._items]

    def __iter__(self) -> Iterator[T]:
        return iter(self.all())

    def __len__(self) -> int:
        return len(self._items)


class PoliticianRepository(Repository[Politician]):
    pass


class UpdateRepository(Repository[Update]):
    pass


class IssueRepository(Repository[Issue]):
    def add(self, issue: Issue) -> None:
        """Prepend ``issue`` so the newest report comes first."""
        self._items.insert(0, issue)

    def increment_votes(self, issue_id: str) -> bool:
        """Add one supporting vote; unknown ids are ignored."""
        issue = self._find(issue_id)
        if issue is None:
            return False
        issue.votes += 1
        return True


class ActivityRepository(Repository[Activity]):
    def __init__(self, limit: int = 10) -> None:
        super().__init__()
        self.limit = limit

    def add(self, activity: Activity) -> None:
        """Prepend ``activity`` and keep only the ``limit`` most recent."""
        self._items.insert(0, activity)
        del self._items[self.limit :]
