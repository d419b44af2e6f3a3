"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.i18n import I18nSettings
from infrastructure.configuration.infrastructure.pacman import PacmanSettings

__all__ = [
    "I18nSettings",
    "PacmanSettings",
]
