"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the Salt & Powder test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest


if TYPE_CHECKING:
    from collections.abc import Generator


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from saltandpowder.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "SALTANDPOWDER_DEBUG": "true",
        "SALTANDPOWDER_LOG_LEVEL": "DEBUG",
        "SALTANDPOWDER_DICE_SEED": "42",
        "SALTANDPOWDER_SHEET_UNLEVELED_SPELLS": "drop",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Record Fixtures
# =============================================================================


@pytest.fixture
def sample_skill() -> Any:
    """A d6 skill that restores to a d8, unwounded and unscarred.

    Returns:
        Skill instance.
    """
    from saltandpowder.models import Skill

    return Skill(value=6, max=8, wounds=0, scars=0, used_scars=0)


@pytest.fixture
def sample_system_data() -> dict[str, Any]:
    """Provide an actor record in the host's layout.

    Returns:
        Dictionary of actor data.
    """
    return {
        "_id": "anne-bonny",
        "name": "Anne Bonny",
        "type": "character",
        "system": {
            "skills": {
                "steel": {"value": 8, "max": "8", "wounds": 0, "scars": 0, "used_scars": 0},
                "lead": {"value": 4, "max": "6", "wounds": 1, "scars": 1, "used_scars": 0},
                "sea": {"value": 6, "max": "10", "wounds": 0, "scars": 2, "used_scars": 1},
                "earth": {"value": 6, "max": "6", "wounds": 0, "scars": 0, "used_scars": 0},
                "influence": {"value": 4, "max": "8", "wounds": 2, "scars": 0, "used_scars": 0},
                "tradition": {"value": 6, "max": "6", "wounds": 0, "scars": 0, "used_scars": 0},
            },
            "stress": {"value": 1},
            "drunk": {"dizzy": False, "sick": False, "drunk": False},
            "editingSkills": False,
        },
        "items": [
            {"_id": "i1", "name": "Rope", "type": "item", "system": {}},
            {"_id": "i2", "name": "Cutlass", "type": "weapon", "system": {}},
            {"_id": "i3", "name": "Navigation", "type": "feature", "system": {}},
            {"_id": "i4", "name": "Calm Waters", "type": "spell", "system": {"spellLevel": 1}},
        ],
    }


@pytest.fixture
def sample_character(sample_system_data: dict[str, Any]) -> Any:
    """Create a Character from the host record.

    Args:
        sample_system_data: Actor record.

    Returns:
        Character instance.
    """
    from saltandpowder.models import Character

    return Character.from_system_data(sample_system_data)


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def skill_roller() -> Any:
    """Create a SkillRoller with a fixed seed for reproducible tests.

    Returns:
        SkillRoller instance with fixed seed.
    """
    from saltandpowder.engine.dice import SkillRoller

    return SkillRoller(seed=42)


@pytest.fixture
def character_store(sample_character: Any) -> Any:
    """Create an in-memory store holding the sample character.

    Returns:
        InMemoryCharacterStore instance.
    """
    from saltandpowder.storage import InMemoryCharacterStore

    store = InMemoryCharacterStore()
    store.add(sample_character)
    return store
