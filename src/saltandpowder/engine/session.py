"""Update session: the seam between pure transitions and persistence.

A session holds the last persisted Character. Each user action computes the
next record synchronously, derives the minimal patch and awaits the
persistence collaborator. The local record only advances once the store has
accepted the patch. A second action fired while a patch is still in flight is
refused with UpdateInFlightError rather than racing it and losing an update.

Example:
    >>> store = InMemoryCharacterStore()
    >>> session = ConditionSession(hero, store)
    >>> patch = asyncio.run(session.toggle_wound_slot("sea", 0))
    >>> patch
    {'skills': {'sea': {'wounds': 1}}}
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from saltandpowder.core.exceptions import PersistenceError, UpdateInFlightError
from saltandpowder.core.logging import bind_context, get_logger, unbind_context
from saltandpowder.engine import condition, skills
from saltandpowder.engine.dice import SkillRoller, SkillRollResult, skill_roll
from saltandpowder.engine.patch import Patch, diff_character
from saltandpowder.engine.sheet import Localizer, skill_label
from saltandpowder.models.character import Character
from saltandpowder.models.enums import ScarSlot


logger = get_logger(__name__)

Transition = Callable[[Character], Character]


class CharacterStore(Protocol):
    """Persistence collaborator contract.

    ``update`` durably merges a partial patch into the stored record; fields
    missing from the patch stay as they are.
    """

    async def update(self, character_id: str, patch: Patch) -> None: ...


class ConditionSession:
    """Serializes condition transitions for one character.

    Attributes:
        store: The persistence collaborator patches are sent to.
    """

    def __init__(self, character: Character, store: CharacterStore) -> None:
        self._character = character
        self.store = store
        self._pending = False

    @property
    def character(self) -> Character:
        """The last record the store accepted."""
        return self._character

    @property
    def is_pending(self) -> bool:
        """Whether a patch is waiting on the store."""
        return self._pending

    async def apply(self, transition: Transition) -> Patch:
        """Run a transition and persist its patch.

        Args:
            transition: Function from the current Character to the next.

        Returns:
            The patch that was persisted, empty if nothing changed.

        Raises:
            UpdateInFlightError: If the previous patch has not been persisted.
            PersistenceError: If the store rejects the patch.
        """
        if self._pending:
            raise UpdateInFlightError(
                "Previous update has not been persisted yet",
                character_id=self._character.id,
            )

        current = self._character
        bind_context(character_id=current.id)
        try:
            return await self._persist(current, transition(current))
        finally:
            unbind_context("character_id")

    async def _persist(self, current: Character, proposed: Character) -> Patch:
        patch = diff_character(current, proposed)
        if not patch:
            return patch

        self._pending = True
        try:
            await self.store.update(current.id, patch)
        except PersistenceError:
            logger.warning("Patch rejected", patch=patch)
            raise
        except Exception as exc:
            logger.warning("Patch failed", error=str(exc))
            raise PersistenceError(
                f"Failed to persist update: {exc}",
                character_id=current.id,
            ) from exc
        finally:
            self._pending = False

        self._character = proposed
        logger.info("Patch persisted", fields=sorted(patch))
        return patch

    # -------------------------------------------------------------------------
    # Skill actions
    # -------------------------------------------------------------------------

    async def toggle_wound(self, key: str, marked: bool) -> Patch:
        return await self.apply(
            lambda c: condition.apply_to_skill(c, key, skills.toggle_wound, marked)
        )

    async def toggle_wound_slot(self, key: str, index: int) -> Patch:
        return await self.apply(
            lambda c: condition.apply_to_skill(c, key, skills.toggle_wound_slot, index)
        )

    async def toggle_scar(self, key: str, slot: ScarSlot) -> Patch:
        return await self.apply(
            lambda c: condition.apply_to_skill(c, key, skills.toggle_scar, slot)
        )

    async def toggle_scar_slot(self, key: str, index: int) -> Patch:
        return await self.apply(
            lambda c: condition.apply_to_skill(c, key, skills.toggle_scar_slot, index)
        )

    async def reduce_die(self, key: str) -> Patch:
        return await self.apply(lambda c: condition.apply_to_skill(c, key, skills.reduce_die))

    async def augment_die(self, key: str) -> Patch:
        return await self.apply(lambda c: condition.apply_to_skill(c, key, skills.augment_die))

    # -------------------------------------------------------------------------
    # Character actions
    # -------------------------------------------------------------------------

    async def toggle_stress(self, active: bool) -> Patch:
        return await self.apply(lambda c: condition.toggle_stress(c, active))

    async def toggle_stress_slot(self, index: int) -> Patch:
        return await self.apply(lambda c: condition.toggle_stress_slot(c, index))

    async def drink(self) -> Patch:
        return await self.apply(condition.drink)

    async def rest(self) -> Patch:
        return await self.apply(condition.rest)

    async def toggle_skill_editing(self) -> Patch:
        return await self.apply(condition.toggle_skill_editing)

    # -------------------------------------------------------------------------
    # Rolls
    # -------------------------------------------------------------------------

    def roll(
        self,
        key: str,
        roller: SkillRoller,
        *,
        localizer: Localizer | None = None,
    ) -> SkillRollResult:
        """Roll the named skill's current die. Rolling changes no state.

        Raises:
            UnknownSkillError: If the character has no such skill.
            DiceRollError: If the die cannot be rolled.
        """
        skill = condition.require_skill(self._character, key)
        request = skill_roll(key, skill, label=skill_label(key, localizer))
        return roller.roll(request)


__all__ = ["CharacterStore", "ConditionSession", "Transition"]
