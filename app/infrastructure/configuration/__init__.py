"""Infrastructure configuration module - public API.

This module provides centralized configuration management for Aura using
Pydantic BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Language selection settings class (for testing)
    PacmanSettings: Package manager invocation settings class (for testing)

Example:
    ```python
    from infrastructure.configuration import settings

    requested = settings.i18n.AURA_LANG
    elevation = settings.pacman.ELEVATION_COMMAND
    ```
"""

from infrastructure.configuration.infrastructure import I18nSettings, PacmanSettings
from infrastructure.configuration.settings import Settings, settings

__all__ = ["Settings", "settings", "I18nSettings", "PacmanSettings"]
