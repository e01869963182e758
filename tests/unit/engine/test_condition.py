"""Tests for the character condition tracker."""

from __future__ import annotations

import pytest

from saltandpowder.core.exceptions import UnknownSkillError
from saltandpowder.engine.condition import (
    apply_to_skill,
    drink,
    intoxication_flags,
    rest,
    restore_skills,
    stress_slots,
    toggle_skill_editing,
    toggle_stress,
    toggle_stress_slot,
)
from saltandpowder.engine.skills import augment_die, toggle_wound
from saltandpowder.models import Character, IntoxicationStage, Skill


class TestStress:
    """Tests for stress toggling."""

    def test_inactive_slot_adds_stress(self) -> None:
        assert toggle_stress(Character(stress=0), active=False).stress == 1

    def test_active_slot_relieves_stress(self) -> None:
        assert toggle_stress(Character(stress=3), active=True).stress == 2

    def test_ceiling_is_four(self) -> None:
        character = Character(stress=4)

        assert toggle_stress(character, active=False) is character

    def test_slots(self) -> None:
        assert stress_slots(Character(stress=2)) == (True, True, False, False)

    def test_toggle_slot_by_index(self) -> None:
        character = Character(stress=2)

        assert toggle_stress_slot(character, 0).stress == 1
        assert toggle_stress_slot(character, 3).stress == 3


class TestDrink:
    """Tests for drinking and intoxication escalation."""

    def test_three_drinks_from_sober(self) -> None:
        character = Character()
        stages = []
        for _ in range(3):
            character = drink(character)
            stages.append(character.intoxication)

        assert stages == [
            IntoxicationStage.DIZZY,
            IntoxicationStage.SICK,
            IntoxicationStage.DRUNK,
        ]

    def test_drunk_is_ceiling(self) -> None:
        character = Character(intoxication=IntoxicationStage.DRUNK)

        assert drink(character).intoxication == IntoxicationStage.DRUNK

    def test_drink_restores_unwounded_skills(self) -> None:
        character = Character(
            skills={
                "sea": Skill(value=4, max=8),
                "lead": Skill(value=4, max=8, wounds=1),
            }
        )

        after = drink(character)

        assert after.skills["sea"].value == 8
        assert after.skills["lead"].value == 4

    def test_drink_leaves_input_untouched(self) -> None:
        character = Character(skills={"sea": Skill(value=4, max=8)})

        drink(character)

        assert character.skills["sea"].value == 4
        assert character.intoxication == IntoxicationStage.SOBER


class TestRest:
    """Tests for resting."""

    @pytest.mark.parametrize("stage", list(IntoxicationStage))
    def test_rest_always_sobers(self, stage: IntoxicationStage) -> None:
        assert rest(Character(intoxication=stage)).intoxication == IntoxicationStage.SOBER

    def test_rest_only_clears_intoxication(self) -> None:
        character = Character(
            stress=3,
            intoxication=IntoxicationStage.SICK,
            skills={"sea": Skill(value=4, max=8, wounds=2, scars=1)},
        )

        rested = rest(character)

        assert rested.stress == 3
        assert rested.skills == character.skills


class TestIntoxicationFlags:
    """Tests for the host flag view of a stage."""

    def test_sober(self) -> None:
        assert intoxication_flags(IntoxicationStage.SOBER) == {
            "dizzy": False,
            "sick": False,
            "drunk": False,
        }

    def test_sick_raises_lower_flags(self) -> None:
        assert intoxication_flags(IntoxicationStage.SICK) == {
            "dizzy": True,
            "sick": True,
            "drunk": False,
        }

    @pytest.mark.parametrize("stage", list(IntoxicationStage))
    def test_flags_round_trip(self, stage: IntoxicationStage) -> None:
        assert IntoxicationStage.from_flags(**intoxication_flags(stage)) == stage


class TestSkillDispatch:
    """Tests for applying skill transitions by key."""

    def test_applies_to_named_skill(self) -> None:
        character = Character(skills={"sea": Skill(value=6), "steel": Skill(value=6)})

        after = apply_to_skill(character, "sea", augment_die)

        assert after.skills["sea"].value == 8
        assert after.skills["steel"].value == 6

    def test_passes_extra_arguments(self) -> None:
        character = Character(skills={"sea": Skill(wounds=1)})

        after = apply_to_skill(character, "sea", toggle_wound, True)

        assert after.skills["sea"].wounds == 0

    def test_noop_returns_same_character(self) -> None:
        character = Character(skills={"sea": Skill(value=10)})

        assert apply_to_skill(character, "sea", augment_die) is character

    def test_unknown_skill_raises(self) -> None:
        with pytest.raises(UnknownSkillError) as exc_info:
            apply_to_skill(Character(), "rum", augment_die)

        assert exc_info.value.details["skill"] == "rum"


class TestRestoreAndEditing:
    """Tests for bulk restore and edit mode."""

    def test_restore_skills(self) -> None:
        character = Character(
            skills={"sea": Skill(value=4, max=6), "earth": Skill(value=4, max=6, wounds=3)}
        )

        restored = restore_skills(character)

        assert restored.skills["sea"].value == 6
        assert restored.skills["earth"].value == 4

    def test_restore_skills_noop(self) -> None:
        character = Character(skills={"sea": Skill(value=6, max=6)})

        assert restore_skills(character) is character

    def test_toggle_skill_editing(self) -> None:
        character = toggle_skill_editing(Character())

        assert character.editing_skills is True
        assert toggle_skill_editing(character).editing_skills is False
