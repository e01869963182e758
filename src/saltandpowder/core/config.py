"""Configuration management for the Salt & Powder condition engine.

Settings are loaded with pydantic-settings from environment variables and an
optional ``.env`` file. Game constants (die sizes, track lengths) are not
configurable; see ``saltandpowder.core.constants``.

Example:
    >>> from saltandpowder.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.dice.formula_template
    '1d{size}'

Environment Variables:
    SALTANDPOWDER_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    SALTANDPOWDER_JSON_LOGS: Emit JSON log lines instead of console output
    SALTANDPOWDER_DICE_FORMULA_TEMPLATE: Roll formula, must contain ``{size}``
    SALTANDPOWDER_DICE_SEED: Optional seed for reproducible rolls
    SALTANDPOWDER_SHEET_UNLEVELED_SPELLS: ``catch_all`` or ``drop``
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from saltandpowder.core.constants import DEFAULT_ITEM_IMAGE
from saltandpowder.core.exceptions import ConfigurationError


class DiceSettings(BaseSettings):
    """Configuration for skill roll formulas.

    Attributes:
        formula_template: Roll formula built from the skill's die size.
        flavor_template: Chat flavour text built from the skill's label.
        icon_template: Image path of the die icon shown next to a skill.
        seed: Optional random seed for reproducible rolls.
    """

    model_config = SettingsConfigDict(
        env_prefix="SALTANDPOWDER_DICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    formula_template: str = Field(
        default="1d{size}",
        description="Roll formula; {size} is replaced by the die size",
    )
    flavor_template: str = Field(
        default="[ability] {label}",
        description="Roll flavour; {label} is replaced by the skill label",
    )
    icon_template: str = Field(
        default="icons/dice/d{size}black.svg",
        description="Die icon path; {size} is replaced by the die size",
    )
    seed: int | None = Field(
        default=None,
        description="Random seed for reproducible rolls",
    )

    @field_validator("formula_template", "icon_template", mode="after")
    @classmethod
    def require_size_placeholder(cls, value: str) -> str:
        """Ensure size-driven templates actually reference the die size.

        Raises:
            ConfigurationError: If ``{size}`` is missing.
        """
        if "{size}" not in value:
            raise ConfigurationError(
                f"Template {value!r} must contain the {{size}} placeholder",
                config_key="dice",
            )
        return value

    @field_validator("flavor_template", mode="after")
    @classmethod
    def require_label_placeholder(cls, value: str) -> str:
        if "{label}" not in value:
            raise ConfigurationError(
                f"Template {value!r} must contain the {{label}} placeholder",
                config_key="flavor_template",
            )
        return value


class SheetSettings(BaseSettings):
    """Configuration for the sheet projection and item classification.

    Attributes:
        unleveled_spells: What to do with spells that have no level.
        default_item_image: Image assigned to items without one.
    """

    model_config = SettingsConfigDict(
        env_prefix="SALTANDPOWDER_SHEET_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    unleveled_spells: Literal["catch_all", "drop"] = Field(
        default="catch_all",
        description="Route level-less spells to a catch-all bucket or drop them",
    )
    default_item_image: str = Field(
        default=DEFAULT_ITEM_IMAGE,
        description="Image for items that have none",
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration domains.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Application logging level.
        json_logs: Emit JSON logs.
        dice: Roll formula settings.
        sheet: Sheet projection settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="SALTANDPOWDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="Salt & Powder",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Emit JSON log lines",
    )

    dice: DiceSettings = Field(default_factory=DiceSettings)
    sheet: SheetSettings = Field(default_factory=SheetSettings)

    @property
    def is_production(self) -> bool:
        """Check if running in production mode.

        Returns:
            True if not in debug mode.
        """
        return not self.debug


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "DiceSettings",
    "SheetSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
