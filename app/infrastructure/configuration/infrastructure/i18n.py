"""Localization settings."""

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Language selection configuration.

    Environment Variables:
        AURA_LANG: Explicitly requested language tag (e.g. ja-JP)
        LANG: POSIX process locale (e.g. ja_JP.UTF-8), used when AURA_LANG is unset

    Example:
        ```python
        from infrastructure.configuration import settings

        requested = settings.i18n.AURA_LANG or settings.i18n.LANG
        ```
    """

    AURA_LANG: str | None = Field(default=None, alias="AURA_LANG")
    LANG: str | None = Field(default=None, alias="LANG")

    @field_validator("AURA_LANG", "LANG", mode="before")
    @classmethod
    def blank_as_unset(cls, v: str | None) -> str | None:
        """Treat empty environment values as unset."""
        if v is None or not str(v).strip():
            return None
        return str(v).strip()
