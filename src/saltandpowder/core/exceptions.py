"""Exception hierarchy for the Salt & Powder condition engine.

Game-rule bounds are never signalled with exceptions: wounds, scars, stress
and die sizes are clamped by the transitions themselves. The classes below
cover caller mistakes (unknown skills, overlapping updates), collaborator
failures (dice evaluation, persistence) and configuration problems. All of
them inherit from SaltAndPowderError so a host can catch one type at its
boundary.

Example:
    >>> from saltandpowder.core.exceptions import UnknownSkillError
    >>> raise UnknownSkillError("No such skill", skill="rum")
"""

from __future__ import annotations

from typing import Any


class SaltAndPowderError(Exception):
    """Base exception for all Salt & Powder errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Condition Engine Exceptions
# =============================================================================


class ConditionEngineError(SaltAndPowderError):
    """Base exception for condition engine errors."""


class UnknownSkillError(ConditionEngineError):
    """Raised when a transition names a skill the character does not have."""

    def __init__(
        self,
        message: str,
        *,
        skill: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize unknown skill error with the offending key.

        Args:
            message: Human-readable error description.
            skill: The skill key that was not found.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if skill:
            combined_details["skill"] = skill
        super().__init__(message, details=combined_details)


class InvariantViolationError(ConditionEngineError):
    """Raised when a skill record breaks one of its counter invariants.

    Transitions never produce such a record; this is raised by the explicit
    invariant checks used in tests and by hosts importing foreign data.
    """

    def __init__(
        self,
        message: str,
        *,
        scars: int | None = None,
        used_scars: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize invariant violation error with the counter values.

        Args:
            message: Human-readable error description.
            scars: The scar count of the offending record.
            used_scars: The used scar count of the offending record.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if scars is not None:
            combined_details["scars"] = scars
        if used_scars is not None:
            combined_details["used_scars"] = used_scars
        super().__init__(message, details=combined_details)


class UpdateInFlightError(ConditionEngineError):
    """Raised when a transition is requested before the previous patch persisted."""

    def __init__(
        self,
        message: str,
        *,
        character_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if character_id:
            combined_details["character_id"] = character_id
        super().__init__(message, details=combined_details)


# =============================================================================
# Collaborator Exceptions
# =============================================================================


class DiceRollError(SaltAndPowderError):
    """Raised when a roll formula cannot be evaluated."""

    def __init__(
        self,
        message: str,
        *,
        expression: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize dice roll error with expression context.

        Args:
            message: Human-readable error description.
            expression: The dice expression that failed.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if expression is not None:
            combined_details["expression"] = expression
        super().__init__(message, details=combined_details)


class PersistenceError(SaltAndPowderError):
    """Raised when the persistence collaborator cannot apply a patch."""

    def __init__(
        self,
        message: str,
        *,
        character_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if character_id:
            combined_details["character_id"] = character_id
        super().__init__(message, details=combined_details)


# =============================================================================
# Configuration & Validation Exceptions
# =============================================================================


class ConfigurationError(SaltAndPowderError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class ValidationError(SaltAndPowderError):
    """Raised when host data cannot be turned into engine records at all.

    Out-of-range numbers are clamped instead; this covers structurally
    unusable input such as a patch that is not a mapping.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation error with field context.

        Args:
            message: Human-readable error description.
            field_name: Name of the field that failed validation.
            invalid_value: The value that failed validation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        super().__init__(message, details=combined_details)


__all__ = [
    "SaltAndPowderError",
    # Condition engine
    "ConditionEngineError",
    "UnknownSkillError",
    "InvariantViolationError",
    "UpdateInFlightError",
    # Collaborators
    "DiceRollError",
    "PersistenceError",
    # Configuration
    "ConfigurationError",
    "ValidationError",
]
