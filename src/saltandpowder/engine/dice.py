"""Skill roll formulas and their evaluation.

The condition engine decides which die a skill rolls and whether it may roll
at all; the randomness itself comes from the d20 library.

Example:
    >>> from saltandpowder.models import Skill
    >>> request = skill_roll("sea", Skill(value=8), label="Sea")
    >>> request.formula
    '1d8'
    >>> result = SkillRoller(seed=7).roll(request)
    >>> 1 <= result.total <= 8
    True
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any

import d20

from saltandpowder.core.config import DiceSettings, get_settings
from saltandpowder.core.constants import DIE_SIZES
from saltandpowder.core.exceptions import DiceRollError
from saltandpowder.core.logging import get_logger
from saltandpowder.models.character import Skill


logger = get_logger(__name__)


@dataclass(frozen=True)
class SkillRollRequest:
    """A roll the host should evaluate for a skill.

    Attributes:
        skill: Skill key the roll is for.
        die_size: Die size the formula was built from.
        formula: Dice expression, e.g. ``1d8``.
        flavor: Label shown with the result, empty when unlabelled.
    """

    skill: str
    die_size: int
    formula: str
    flavor: str = ""


@dataclass(frozen=True)
class SkillRollResult:
    """Outcome of an evaluated skill roll.

    Attributes:
        request: The request that was rolled.
        total: Total of the roll.
        dice: Face values of the kept dice.
        breakdown: d20's human-readable rendering of the roll.
    """

    request: SkillRollRequest
    total: int
    dice: list[int]
    breakdown: str


def can_roll(skill: Skill) -> bool:
    """Whether the skill currently has a legal die to roll."""
    return skill.value in DIE_SIZES


def skill_roll(
    key: str,
    skill: Skill,
    *,
    label: str | None = None,
    settings: DiceSettings | None = None,
) -> SkillRollRequest:
    """Build the roll request for a skill's current die.

    Args:
        key: Skill key.
        skill: Current skill record; only ``value`` is read.
        label: Display label; no flavour text when omitted.
        settings: Formula templates, defaults to the loaded settings.

    Returns:
        The request to hand to the roll evaluator.

    Raises:
        DiceRollError: If the skill has no legal die.
    """
    if not can_roll(skill):
        raise DiceRollError(
            f"Skill {key!r} has no legal die size",
            details={"skill": key, "value": skill.value},
        )
    dice_settings = settings or get_settings().dice
    flavor = dice_settings.flavor_template.format(label=label) if label else ""
    return SkillRollRequest(
        skill=key,
        die_size=skill.value,
        formula=dice_settings.formula_template.format(size=skill.value),
        flavor=flavor,
    )


class SkillRoller:
    """Evaluates skill roll requests with the d20 library.

    Example:
        >>> roller = SkillRoller(seed=42)
        >>> roller.roll_formula("1d6").total in range(1, 7)
        True
    """

    def __init__(self, *, seed: int | None = None) -> None:
        """Initialize the roller.

        Args:
            seed: Optional random seed for reproducible rolls. Defaults to
                the ``dice.seed`` setting.
        """
        if seed is None:
            seed = get_settings().dice.seed
        self._seed = seed
        if seed is not None:
            random.seed(seed)
        logger.debug("SkillRoller initialized", seed=seed)

    def roll(self, request: SkillRollRequest) -> SkillRollResult:
        """Evaluate a skill roll request."""
        result = self.roll_formula(request.formula)
        logger.info(
            "Skill rolled",
            skill=request.skill,
            formula=request.formula,
            total=result.total,
        )
        return SkillRollResult(
            request=request,
            total=result.total,
            dice=result.dice,
            breakdown=result.breakdown,
        )

    def roll_formula(self, formula: str) -> SkillRollResult:
        """Evaluate an arbitrary formula not tied to a skill.

        Raises:
            DiceRollError: If the formula is empty or invalid.
        """
        if not formula or not formula.strip():
            raise DiceRollError("Empty dice expression", expression=formula)
        try:
            rolled = d20.roll(formula)
        except d20.RollError as exc:
            raise DiceRollError(f"Invalid dice expression: {exc}", expression=formula) from exc

        request = SkillRollRequest(skill="", die_size=0, formula=formula)
        return SkillRollResult(
            request=request,
            total=rolled.total,
            dice=self._extract_dice_values(rolled.expr),
            breakdown=str(rolled),
        )

    def _extract_dice_values(self, expr: Any) -> list[int]:
        """Collect kept die faces from a d20 expression tree."""
        values: list[int] = []

        def traverse(node: Any) -> None:
            if isinstance(node, d20.Dice):
                for die in node.values:
                    if getattr(die, "kept", True):
                        values.append(die.number)
            elif hasattr(node, "children"):
                for child in node.children:
                    traverse(child)

        traverse(expr)
        return values


__all__ = [
    "SkillRollRequest",
    "SkillRollResult",
    "SkillRoller",
    "can_roll",
    "skill_roll",
]
