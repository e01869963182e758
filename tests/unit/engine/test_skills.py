"""Tests for the skill condition tracker."""

from __future__ import annotations

from itertools import product

import pytest

from saltandpowder.core.exceptions import InvariantViolationError
from saltandpowder.engine.skills import (
    augment_die,
    check_scar_invariant,
    reduce_die,
    restore_to_max,
    scar_slot,
    scar_slots,
    toggle_scar,
    toggle_scar_slot,
    toggle_wound,
    toggle_wound_slot,
    wound_slots,
)
from saltandpowder.models import ScarSlot, Skill


class TestWounds:
    """Tests for wound toggling."""

    def test_unmarked_slot_adds_wound(self) -> None:
        assert toggle_wound(Skill(wounds=0), marked=False).wounds == 1

    def test_marked_slot_removes_wound(self) -> None:
        assert toggle_wound(Skill(wounds=2), marked=True).wounds == 1

    def test_marked_with_no_wounds_adds_one(self) -> None:
        """The decrement branch needs a wound to remove; otherwise it adds."""
        assert toggle_wound(Skill(wounds=0), marked=True).wounds == 1

    def test_full_track_is_noop(self) -> None:
        skill = Skill(wounds=3)

        assert toggle_wound(skill, marked=False) is skill

    def test_slot_flags(self) -> None:
        assert wound_slots(Skill(wounds=0)) == (False, False, False)
        assert wound_slots(Skill(wounds=2)) == (True, True, False)
        assert wound_slots(Skill(wounds=3)) == (True, True, True)

    def test_toggle_marked_slot(self) -> None:
        assert toggle_wound_slot(Skill(wounds=2), 1).wounds == 1

    def test_toggle_unmarked_slot(self) -> None:
        assert toggle_wound_slot(Skill(wounds=2), 2).wounds == 3

    @pytest.mark.parametrize("sequence", list(product([True, False], repeat=5)))
    def test_wounds_stay_in_bounds(self, sequence: tuple[bool, ...]) -> None:
        """Any sequence of toggles keeps wounds within 0-3."""
        skill = Skill()
        for marked in sequence:
            skill = toggle_wound(skill, marked)
            assert 0 <= skill.wounds <= 3


class TestScarSlots:
    """Tests for deriving scar slot states from counters."""

    def test_empty_skill_has_empty_slots(self) -> None:
        assert scar_slots(Skill()) == (ScarSlot.EMPTY, ScarSlot.EMPTY, ScarSlot.EMPTY)

    def test_mixed_slots(self) -> None:
        skill = Skill(scars=2, used_scars=1)

        assert scar_slots(skill) == (ScarSlot.BURNED, ScarSlot.FILLED, ScarSlot.EMPTY)

    def test_slot_lookup(self) -> None:
        skill = Skill(scars=3, used_scars=3)

        assert scar_slot(skill, 2) == ScarSlot.BURNED


class TestToggleScar:
    """Tests for the three-branch scar transition."""

    def test_empty_slot_gains_scars_up_to_capacity(self) -> None:
        skill = Skill()
        for _ in range(3):
            skill = toggle_scar(skill, ScarSlot.EMPTY)

        assert skill.scars == 3
        assert skill.used_scars == 0

        again = toggle_scar(skill, ScarSlot.EMPTY)
        assert again.scars == 3
        assert again is skill

    def test_filled_slot_burns_a_scar(self) -> None:
        skill = toggle_scar(Skill(scars=3), ScarSlot.FILLED)

        assert skill.scars == 2
        assert skill.used_scars == 1

    def test_burning_last_unburned_scar_clamps(self) -> None:
        """Burned scars can never exceed scars held."""
        skill = toggle_scar(Skill(scars=2, used_scars=1), ScarSlot.FILLED)

        assert skill.scars == 1
        assert skill.used_scars == 1

    def test_burning_single_scar_empties_track(self) -> None:
        skill = toggle_scar(Skill(scars=1), ScarSlot.FILLED)

        assert skill.scars == 0
        assert skill.used_scars == 0

    def test_burned_slot_unburns(self) -> None:
        skill = toggle_scar(Skill(scars=3, used_scars=1), ScarSlot.BURNED)

        assert skill.scars == 2
        assert skill.used_scars == 2

    def test_burned_slot_without_scars_gains_one(self) -> None:
        """With no scars the burned branch is skipped and capacity decides."""
        skill = toggle_scar(Skill(scars=0), ScarSlot.BURNED)

        assert skill.scars == 1
        assert skill.used_scars == 0

    def test_burned_check_precedes_capacity_check(self) -> None:
        skill = toggle_scar(Skill(scars=3, used_scars=3), ScarSlot.BURNED)

        assert skill.scars == 2
        assert skill.used_scars == 2

    def test_slot_string_values_accepted(self) -> None:
        skill = toggle_scar(Skill(scars=3), "filled")  # type: ignore[arg-type]

        assert skill.used_scars == 1

    def test_toggle_by_index(self) -> None:
        skill = Skill(scars=2, used_scars=1)

        assert toggle_scar_slot(skill, 0).scars == 1
        assert toggle_scar_slot(skill, 1).used_scars == 1
        assert toggle_scar_slot(skill, 2).scars == 3

    def test_any_click_sequence_keeps_invariant(self) -> None:
        """Clicking any slot in any order never breaks the counters."""
        starts = [
            Skill(scars=scars, used_scars=used)
            for scars in range(4)
            for used in range(scars + 1)
        ]
        for start in starts:
            for clicks in product(range(3), repeat=4):
                skill = start
                for index in clicks:
                    skill = toggle_scar_slot(skill, index)
                    check_scar_invariant(skill)
                    assert 0 <= skill.scars <= 3


class TestScarInvariant:
    """Tests for the explicit invariant check."""

    def test_valid_record_passes(self) -> None:
        check_scar_invariant(Skill(scars=2, used_scars=2))

    def test_inconsistent_record_raises(self) -> None:
        broken = Skill.model_construct(value=6, max=6, wounds=0, scars=1, used_scars=2)

        with pytest.raises(InvariantViolationError) as exc_info:
            check_scar_invariant(broken)

        assert exc_info.value.details == {"scars": 1, "used_scars": 2}


class TestDieSize:
    """Tests for reducing, augmenting and restoring the die."""

    def test_augment_then_reduce_scenario(self, sample_skill: Skill) -> None:
        skill = augment_die(sample_skill)
        assert skill.value == 8
        skill = augment_die(skill)
        assert skill.value == 10
        skill = augment_die(skill)
        assert skill.value == 10

        for _ in range(3):
            skill = reduce_die(skill)
        assert skill.value == 4

        assert reduce_die(skill).value == 4

    def test_reduce_at_minimum_returns_same_record(self) -> None:
        skill = Skill(value=4)

        assert reduce_die(skill) is skill

    @pytest.mark.parametrize("sequence", list(product([reduce_die, augment_die], repeat=6)))
    def test_value_stays_legal(self, sequence: tuple) -> None:
        skill = Skill(value=6)
        for operation in sequence:
            skill = operation(skill)
            assert skill.value in {4, 6, 8, 10}

    def test_restore_unwounded(self) -> None:
        assert restore_to_max(Skill(value=4, max=8)).value == 8

    def test_restore_skips_wounded(self) -> None:
        skill = Skill(value=4, max=8, wounds=1)

        assert restore_to_max(skill).value == 4

    def test_restore_can_lower_die(self) -> None:
        """Restoring sets the baseline even when the die was augmented past it."""
        assert restore_to_max(Skill(value=10, max=6)).value == 6

    def test_restore_is_idempotent(self) -> None:
        once = restore_to_max(Skill(value=4, max=10))

        assert restore_to_max(once) == once
