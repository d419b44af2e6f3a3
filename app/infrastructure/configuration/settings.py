"""Aura configuration settings - main aggregator."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.infrastructure import (
    I18nSettings,
    PacmanSettings,
)


class Settings(BaseSettings):
    """Aura configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object.

    Environment Variables:
        AURA_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        AURA_LOG_FORMAT: Diagnostic output format (console, json)

    Example:
        ```python
        from infrastructure.configuration import settings

        requested = settings.i18n.AURA_LANG
        pacman = settings.pacman.PACMAN_COMMAND
        ```
    """

    # Application-level settings
    AURA_LOG_LEVEL: str = "WARNING"
    AURA_LOG_FORMAT: Literal["console", "json"] = "console"

    # Infrastructure settings
    i18n: I18nSettings
    pacman: PacmanSettings

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "i18n": I18nSettings,
            "pacman": PacmanSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the singleton settings instance
settings = Settings()
