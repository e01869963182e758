"""Core module providing configuration, logging, constants and exceptions.

Exports:
    Exceptions:
        SaltAndPowderError: Base exception for all application errors.
        ConditionEngineError, UnknownSkillError, InvariantViolationError,
        UpdateInFlightError: Condition engine errors.
        DiceRollError, PersistenceError: Collaborator failures.
        ConfigurationError, ValidationError: Configuration and input errors.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        unbind_context: Remove named keys from the logging context.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from saltandpowder.core.config import (
    DiceSettings,
    Settings,
    SheetSettings,
    clear_settings_cache,
    get_settings,
)
from saltandpowder.core.exceptions import (
    ConditionEngineError,
    ConfigurationError,
    DiceRollError,
    InvariantViolationError,
    PersistenceError,
    SaltAndPowderError,
    UnknownSkillError,
    UpdateInFlightError,
    ValidationError,
)
from saltandpowder.core.logging import (
    bind_context,
    clear_context,
    configure_from_settings,
    configure_logging,
    get_logger,
    unbind_context,
)


__all__ = [
    # Exceptions
    "SaltAndPowderError",
    "ConditionEngineError",
    "UnknownSkillError",
    "InvariantViolationError",
    "UpdateInFlightError",
    "DiceRollError",
    "PersistenceError",
    "ConfigurationError",
    "ValidationError",
    # Configuration
    "Settings",
    "DiceSettings",
    "SheetSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "bind_context",
    "unbind_context",
    "clear_context",
]
