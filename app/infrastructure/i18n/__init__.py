"""i18n system - localization of user-facing messages.

Provides the bundled catalog store, language loaders with fallback to the
base language, language resolution and catalog consistency checks.

Main components:
- models: LanguageTag, MessageId, MessageCatalog
- catalogs: CatalogStore holding the bundled YAML catalogs
- loader: LanguageLoader, load(), load_all(), available_languages()
- resolvers: language_from_env(), requested_language()
- consistency: find_extra_messages(), check_consistency()
- localised: Localised/Nested protocols and report()
"""

from infrastructure.i18n.catalogs import CatalogStore, get_catalog_store
from infrastructure.i18n.consistency import (
    check_consistency,
    find_extra_messages,
    missing_messages,
)
from infrastructure.i18n.exceptions import (
    CatalogInconsistencyError,
    CatalogLoadError,
    I18nError,
    UnsupportedLanguageError,
)
from infrastructure.i18n.loader import (
    LanguageLoader,
    available_languages,
    load,
    load_all,
)
from infrastructure.i18n.localised import Localised, LocalisedError, Nested, report
from infrastructure.i18n.models import (
    BASE_LANGUAGE,
    LanguageTag,
    MessageCatalog,
    MessageId,
)
from infrastructure.i18n.resolvers import language_from_env, requested_language

__all__ = [
    "BASE_LANGUAGE",
    "LanguageTag",
    "MessageId",
    "MessageCatalog",
    "CatalogStore",
    "get_catalog_store",
    "LanguageLoader",
    "load",
    "load_all",
    "available_languages",
    "language_from_env",
    "requested_language",
    "find_extra_messages",
    "missing_messages",
    "check_consistency",
    "Localised",
    "Nested",
    "LocalisedError",
    "report",
    "I18nError",
    "UnsupportedLanguageError",
    "CatalogLoadError",
    "CatalogInconsistencyError",
]
