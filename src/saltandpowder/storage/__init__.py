"""Storage module for Salt & Powder characters.

Provides an in-memory implementation of the persistence contract used by
``saltandpowder.engine.session``.
"""

from saltandpowder.storage.memory import InMemoryCharacterStore, PatchRecord

__all__ = [
    "InMemoryCharacterStore",
    "PatchRecord",
]
