"""Language resolution from configuration and the process environment.

The requested language is optional: anything that does not name a bundled
catalog falls back to the base language inside load().
"""

from typing import Optional

from infrastructure.configuration import I18nSettings, settings
from infrastructure.i18n.models import LanguageTag
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# POSIX locales that carry no language preference
_NEUTRAL_LOCALES = {"C", "POSIX"}


def language_from_env(value: Optional[str]) -> Optional[LanguageTag]:
    """Parse a POSIX locale string into a language tag.

    Strips the codeset and modifier ("ja_JP.UTF-8", "de_DE@euro").

    Args:
        value: Locale string, typically from $LANG.

    Returns:
        Parsed LanguageTag, or None if the value is empty, neutral or invalid.

    Example:
        >>> str(language_from_env("ja_JP.UTF-8"))
        'ja-JP'
    """
    if not value:
        return None

    locale_name = value.split(".", 1)[0].split("@", 1)[0].strip()
    if not locale_name or locale_name.upper() in _NEUTRAL_LOCALES:
        return None

    language = LanguageTag.try_parse(locale_name)
    if language is None:
        logger.warning("invalid_locale_string", locale=value)
    return language


def requested_language(i18n: Optional[I18nSettings] = None) -> Optional[LanguageTag]:
    """Resolve the user's requested language from configuration.

    Resolution order:
    1. AURA_LANG (an explicit language tag)
    2. LANG (the process locale)

    Args:
        i18n: Language settings (default: the application settings).

    Returns:
        Requested LanguageTag, or None when nothing usable is configured.
    """
    i18n = i18n or settings.i18n

    if i18n.AURA_LANG:
        language = LanguageTag.try_parse(i18n.AURA_LANG)
        if language is not None:
            logger.debug("resolved_from_setting", language=str(language))
            return language
        logger.warning("invalid_language_setting", value=i18n.AURA_LANG)

    language = language_from_env(i18n.LANG)
    if language is not None:
        logger.debug("resolved_from_locale", language=str(language))
    return language
