"""Caller-owned list of classification results, most recent first."""

import uuid
from dataclasses import dataclass, field
from typing import Iterator

from core.schemas.result import ClassificationResult


@dataclass(frozen=True)
class ResultEntry:
    """A result as held in the display list.

    Attributes:
        result: The classification result
        id: Generated display identifier (not derived from the result)
    """

    result: ClassificationResult
    id: str = field(default_factory=lambda: uuid.uuid4().hex)


class ResultList:
    """Ordered container of results shown to the user.

    New entries go to the front. Entries are removed by ID, never edited.
    """

    def __init__(self) -> None:
        self._entries: list[ResultEntry] = []

    def add(self, result: ClassificationResult) -> ResultEntry:
        """Insert a result at the front of the list.

        Args:
            result: Result to display

        Returns:
            The new ResultEntry
        """
        entry = ResultEntry(result=result)
        self._entries.insert(0, entry)
        return entry

    def remove(self, entry_id: str) -> bool:
        """Remove an entry by ID.

        Args:
            entry_id: ResultEntry.id

        Returns:
            True if an entry was removed
        """
        before = len(self._entries)
        self._entries = [e for e in self._entries if e.id != entry_id]
        return len(self._entries) < before

    def clear(self) -> None:
        """Remove all entries."""
        self._entries = []

    def get(self, entry_id: str) -> ResultEntry | None:
        """Get entry by ID.

        Returns:
            ResultEntry if found, None otherwise
        """
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def results(self) -> list[ClassificationResult]:
        """Results in display order."""
        return [e.result for e in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ResultEntry]:
        return iter(list(self._entries))
