"""Tests for skill and character records."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from saltandpowder.models import (
    ActorType,
    Character,
    IntoxicationStage,
    ItemType,
    Skill,
    default_skills,
    snap_die_size,
)


class TestSnapDieSize:
    """Tests for snapping numbers to legal dice."""

    @pytest.mark.parametrize(
        "raw,expected",
        [(2, 4), (4, 4), (5, 4), (6, 6), (7, 6), (9, 8), (10, 10), (20, 10), ("8", 8)],
    )
    def test_snap(self, raw: object, expected: int) -> None:
        assert snap_die_size(raw) == expected


class TestSkill:
    """Tests for the Skill record."""

    def test_defaults(self) -> None:
        skill = Skill()

        assert (skill.value, skill.max, skill.wounds, skill.scars, skill.used_scars) == (
            6,
            6,
            0,
            0,
            0,
        )

    def test_counters_clamped(self) -> None:
        skill = Skill(wounds=7, scars=-2)

        assert skill.wounds == 3
        assert skill.scars == 0

    def test_used_scars_clamped_to_scars(self) -> None:
        assert Skill(scars=1, used_scars=3).used_scars == 1

    def test_used_scars_clamped_after_scar_clamp(self) -> None:
        assert Skill(scars=9, used_scars=9).used_scars == 3

    def test_string_max_coerced(self) -> None:
        """Host records store the baseline die as a string."""
        assert Skill(max="8").max == 8

    def test_non_numeric_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Skill(value="big")

    def test_frozen(self) -> None:
        skill = Skill()

        with pytest.raises(ValidationError):
            skill.value = 8  # type: ignore[misc]

    def test_is_wounded(self) -> None:
        assert Skill(wounds=1).is_wounded is True
        assert Skill().is_wounded is False


class TestCharacter:
    """Tests for the Character record."""

    def test_default_skills(self) -> None:
        assert list(Character().skills) == list(default_skills())
        assert list(Character().skills) == [
            "steel",
            "lead",
            "sea",
            "earth",
            "influence",
            "tradition",
        ]

    def test_stress_clamped(self) -> None:
        assert Character(stress=9).stress == 4
        assert Character(stress=-1).stress == 0

    def test_skill_lookup(self) -> None:
        character = Character(skills={"sea": Skill(value=8)})

        assert character.skill("sea") == Skill(value=8)
        assert character.skill("rum") is None

    def test_ids_unique(self) -> None:
        assert Character().id != Character().id


class TestFromSystemData:
    """Tests for importing host actor records."""

    def test_import(self, sample_character: Character) -> None:
        assert sample_character.id == "anne-bonny"
        assert sample_character.name == "Anne Bonny"
        assert sample_character.type == ActorType.CHARACTER
        assert sample_character.stress == 1
        assert sample_character.intoxication == IntoxicationStage.SOBER
        assert sample_character.skills["sea"].max == 10
        assert sample_character.skills["sea"].used_scars == 1
        assert [item.type for item in sample_character.items] == [
            ItemType.ITEM,
            ItemType.WEAPON,
            ItemType.FEATURE,
            ItemType.SPELL,
        ]
        assert sample_character.items[3].spell_level == 1

    def test_drunk_flags(self) -> None:
        character = Character.from_system_data(
            {"name": "Calico Jack", "system": {"drunk": {"dizzy": True, "sick": True}}}
        )

        assert character.intoxication == IntoxicationStage.SICK

    def test_minimal_record(self) -> None:
        character = Character.from_system_data({"name": "Nobody"})

        assert character.skills == {}
        assert character.stress == 0
        assert character.editing_skills is False
