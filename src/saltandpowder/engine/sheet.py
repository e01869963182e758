"""Read-only sheet projection of a character.

Produces everything a host renderer needs to draw the condition tracks:
localized skill labels, die icons, wound/scar/stress slot states,
intoxication flags and classified items. Nothing here renders or mutates.
"""

from __future__ import annotations

from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field

from saltandpowder.core.config import Settings, get_settings
from saltandpowder.core.constants import SKILL_LABELS
from saltandpowder.engine.condition import intoxication_flags, stress_slots
from saltandpowder.engine.dice import can_roll
from saltandpowder.engine.items import classify
from saltandpowder.engine.skills import scar_slots, wound_slots
from saltandpowder.models.character import Character, Skill
from saltandpowder.models.enums import ActorType, IntoxicationStage, ScarSlot, UnleveledSpellPolicy
from saltandpowder.models.items import Item, ItemBuckets


# =============================================================================
# Localization
# =============================================================================


class Localizer(Protocol):
    """Maps a localization key to display text."""

    def localize(self, key: str) -> str | None: ...


DEFAULT_TRANSLATIONS: dict[str, str] = {
    "SAP.Steel": "Steel",
    "SAP.Lead": "Lead",
    "SAP.Sea": "Sea",
    "SAP.Earth": "Earth",
    "SAP.Influence": "Influence",
    "SAP.Tradition": "Tradition",
}


class DictLocalizer:
    """Localizer backed by a plain translation table."""

    def __init__(self, translations: dict[str, str] | None = None) -> None:
        self._translations = dict(DEFAULT_TRANSLATIONS if translations is None else translations)

    def localize(self, key: str) -> str | None:
        return self._translations.get(key)


def skill_label(key: str, localizer: Localizer | None = None) -> str:
    """Display label of a skill, falling back to the raw key.

    Example:
        >>> skill_label("sea")
        'Sea'
        >>> skill_label("rum")
        'rum'
    """
    label_key = SKILL_LABELS.get(key)
    if label_key is None:
        return key
    return (localizer or DictLocalizer()).localize(label_key) or key


# =============================================================================
# Views
# =============================================================================


class SkillView(BaseModel):
    """Display data for one skill row."""

    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    value: int
    max: int
    dice_icon: str
    rollable: bool
    wound_slots: tuple[bool, ...]
    scar_slots: tuple[ScarSlot, ...]


class SheetView(BaseModel):
    """Display data for a whole sheet.

    NPC sheets carry items only; ``skills`` and ``stress_slots`` stay empty.
    """

    model_config = ConfigDict(frozen=True)

    character_id: str
    name: str
    type: ActorType
    editing_skills: bool = False
    skills: list[SkillView] = Field(default_factory=list)
    stress_slots: tuple[bool, ...] = ()
    intoxication: IntoxicationStage = IntoxicationStage.SOBER
    intoxication_flags: dict[str, bool] = Field(default_factory=dict)
    items: ItemBuckets = Field(default_factory=ItemBuckets)


def item_image(item: Item, settings: Settings | None = None) -> str:
    """Image of an item, the configured default when it has none."""
    return item.img or (settings or get_settings()).sheet.default_item_image


def skill_view(
    key: str,
    skill: Skill,
    *,
    localizer: Localizer | None = None,
    settings: Settings | None = None,
) -> SkillView:
    """Project a single skill."""
    settings = settings or get_settings()
    return SkillView(
        key=key,
        label=skill_label(key, localizer),
        value=skill.value,
        max=skill.max,
        dice_icon=settings.dice.icon_template.format(size=skill.value),
        rollable=can_roll(skill),
        wound_slots=wound_slots(skill),
        scar_slots=scar_slots(skill),
    )


def build_sheet(
    character: Character,
    *,
    localizer: Localizer | None = None,
    settings: Settings | None = None,
) -> SheetView:
    """Project a character into sheet display data.

    Args:
        character: The character to show.
        localizer: Label source, English defaults when omitted.
        settings: Icon and classification settings, loaded when omitted.

    Returns:
        The sheet view.
    """
    settings = settings or get_settings()
    items = [
        item if item.img else item.model_copy(update={"img": item_image(item, settings)})
        for item in character.items
    ]
    buckets = classify(
        items,
        unleveled_spells=UnleveledSpellPolicy(settings.sheet.unleveled_spells),
    )
    if character.type != ActorType.CHARACTER:
        return SheetView(
            character_id=character.id,
            name=character.name,
            type=character.type,
            items=buckets,
        )

    # Known skills first in sheet order, then any extras the host added
    ordered = [key for key in SKILL_LABELS if key in character.skills]
    ordered += [key for key in character.skills if key not in SKILL_LABELS]
    return SheetView(
        character_id=character.id,
        name=character.name,
        type=character.type,
        editing_skills=character.editing_skills,
        skills=[
            skill_view(key, character.skills[key], localizer=localizer, settings=settings)
            for key in ordered
        ],
        stress_slots=stress_slots(character),
        intoxication=character.intoxication,
        intoxication_flags=intoxication_flags(character.intoxication),
        items=buckets,
    )


__all__ = [
    "Localizer",
    "DictLocalizer",
    "DEFAULT_TRANSLATIONS",
    "skill_label",
    "SkillView",
    "SheetView",
    "item_image",
    "skill_view",
    "build_sheet",
]
