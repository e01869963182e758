"""Item classifier: sorts a character's possessions into sheet buckets.

Predicates are tested in a fixed order (item, weapon, feature, spell) and
each item lands in at most one bucket. Items are never modified.
"""

from __future__ import annotations

from collections.abc import Iterable

from saltandpowder.core.config import get_settings
from saltandpowder.core.constants import SPELL_LEVELS
from saltandpowder.core.logging import get_logger
from saltandpowder.models.enums import ItemType, UnleveledSpellPolicy
from saltandpowder.models.items import Item, ItemBuckets


logger = get_logger(__name__)


def classify(
    items: Iterable[Item],
    *,
    unleveled_spells: UnleveledSpellPolicy | None = None,
) -> ItemBuckets:
    """Group items into gear, weapons, trained skills and spells by level.

    Args:
        items: The character's items.
        unleveled_spells: Policy for spells without a level. Defaults to the
            ``sheet.unleveled_spells`` setting.

    Returns:
        The filled buckets.

    Example:
        >>> buckets = classify([Item(type="spell", spell_level=3)])
        >>> len(buckets.spells_by_level[3])
        1
    """
    if unleveled_spells is None:
        unleveled_spells = UnleveledSpellPolicy(get_settings().sheet.unleveled_spells)

    gear: list[Item] = []
    weapons: list[Item] = []
    trained_skills: list[Item] = []
    spells: dict[int, list[Item]] = {level: [] for level in SPELL_LEVELS}
    unleveled: list[Item] = []

    for item in items:
        if item.type == ItemType.ITEM:
            gear.append(item)
        elif item.type == ItemType.WEAPON:
            weapons.append(item)
        elif item.type == ItemType.FEATURE:
            trained_skills.append(item)
        elif item.type == ItemType.SPELL:
            if item.spell_level is not None:
                spells[item.spell_level].append(item)
            elif unleveled_spells == UnleveledSpellPolicy.CATCH_ALL:
                unleveled.append(item)
            else:
                logger.warning("Dropping spell without a level", item_id=item.id, name=item.name)

    return ItemBuckets(
        gear=gear,
        weapons=weapons,
        trained_skills=trained_skills,
        spells_by_level=spells,
        unleveled_spells=unleveled,
    )


def new_item(item_type: ItemType | str, **fields: object) -> Item:
    """Create a blank item of the given type named ``New <Type>``.

    Extra keyword arguments become item fields, as the sheet's create
    buttons pass their dataset along.
    """
    kind = ItemType(item_type)
    data: dict[str, object] = {"name": f"New {kind.value.capitalize()}", **fields, "type": kind}
    return Item.model_validate(data)


__all__ = ["classify", "new_item"]
