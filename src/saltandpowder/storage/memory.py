"""In-memory character store.

Implements the persistence contract the update session relies on: patches
are merged into stored JSON records, untouched fields are preserved. Useful
for tests and for hosts that keep characters in process.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from saltandpowder.core.exceptions import PersistenceError
from saltandpowder.core.logging import get_logger
from saltandpowder.engine.patch import Patch, apply_patch
from saltandpowder.models.character import Character


logger = get_logger(__name__)


@dataclass
class PatchRecord:
    """A patch the store has applied.

    Attributes:
        character_id: Character the patch was merged into.
        patch: The merged patch.
        applied_at: When it was merged.
    """

    character_id: str
    patch: Patch
    applied_at: datetime = field(default_factory=datetime.now)


class InMemoryCharacterStore:
    """Dictionary-backed store of character records.

    Args:
        latency: Seconds each update waits before merging, to mimic a slow
            backend.
    """

    def __init__(self, *, latency: float = 0.0) -> None:
        self._records: dict[str, dict[str, Any]] = {}
        self.latency = latency
        self.history: list[PatchRecord] = []

    def add(self, character: Character) -> None:
        """Store a full character record, replacing any previous one."""
        self._records[character.id] = character.model_dump(mode="json")
        logger.debug("Character stored", character_id=character.id)

    def get(self, character_id: str) -> Character:
        """Load a character.

        Raises:
            PersistenceError: If the character is unknown.
        """
        return Character.model_validate(self._record(character_id))

    def __contains__(self, character_id: object) -> bool:
        return character_id in self._records

    async def update(self, character_id: str, patch: Patch) -> None:
        """Merge a partial patch into the stored record.

        Raises:
            PersistenceError: If the character is unknown.
        """
        record = self._record(character_id)
        if self.latency:
            await asyncio.sleep(self.latency)
        self._records[character_id] = apply_patch(record, patch)
        self.history.append(PatchRecord(character_id=character_id, patch=patch))
        logger.debug("Patch merged", character_id=character_id, fields=sorted(patch))

    def _record(self, character_id: str) -> dict[str, Any]:
        try:
            return self._records[character_id]
        except KeyError as exc:
            raise PersistenceError(
                "Unknown character",
                character_id=character_id,
            ) from exc


__all__ = ["InMemoryCharacterStore", "PatchRecord"]
