"""Language loaders for retrieving and interpolating translated messages.

A LanguageLoader binds one language to its catalog plus the base catalog,
which backs any message the language does not translate.

Usage:
    from infrastructure.i18n import load

    loader = load(LanguageTag.parse("ja-JP"))
    message = loader.get(MessageId("git", "clone"), dir="/tmp/aura")
"""

import re
from typing import Any, Dict, List, Optional

from infrastructure.i18n.catalogs import CatalogStore, get_catalog_store
from infrastructure.i18n.models import (
    BASE_LANGUAGE,
    LanguageTag,
    MessageCatalog,
    MessageId,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()

_PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")

# Unicode First Strong Isolate / Pop Directional Isolate
FSI = "\u2068"
PDI = "\u2069"


class LanguageLoader:
    """Resolves message ids to formatted strings for one language.

    Attributes:
        language: The bound LanguageTag.
        catalog: Catalog of the bound language.
        fallback_catalog: Base-language catalog consulted for missing ids.
        use_isolating: Whether interpolated values are wrapped in bidi
            isolation marks.
    """

    def __init__(
        self,
        language: LanguageTag,
        catalog: MessageCatalog,
        fallback_catalog: Optional[MessageCatalog] = None,
        use_isolating: bool = True,
    ):
        self.language = language
        self.catalog = catalog
        self.fallback_catalog = fallback_catalog
        self.use_isolating = use_isolating

    def set_use_isolating(self, value: bool) -> None:
        self.use_isolating = value

    def has(self, message_id: MessageId) -> bool:
        """Check whether a message id resolves for this loader.

        Args:
            message_id: Id to check.

        Returns:
            True if the bound or base catalog defines the id.
        """
        if self.catalog.has_message(message_id):
            return True
        return bool(self.fallback_catalog and self.fallback_catalog.has_message(message_id))

    def message_ids(self) -> frozenset:
        """Return the ids the bound language itself defines."""
        return self.catalog.message_ids()

    def get(self, message_id: MessageId, **args: Any) -> str:
        """Retrieve and interpolate a message.

        Performs variable substitution using {{variable_name}} syntax.
        Falls back to the base catalog if the bound language lacks the id.

        Args:
            message_id: Id of the message.
            **args: Values for the template's placeholders.

        Returns:
            Formatted message string.

        Raises:
            KeyError: If neither catalog defines the id.
            ValueError: If a placeholder has no value in args.
        """
        template = self.catalog.get_message(message_id)

        if template is None and self.fallback_catalog is not None:
            template = self.fallback_catalog.get_message(message_id)
            if template is not None:
                logger.debug(
                    "used_fallback_translation",
                    key=str(message_id),
                    requested_language=str(self.language),
                    fallback_language=str(self.fallback_catalog.language),
                )

        if template is None:
            logger.error(
                "translation_not_found",
                key=str(message_id),
                language=str(self.language),
            )
            raise KeyError(
                f"Translation not found for key {message_id} in {self.language}"
            )

        return self._interpolate(template, args)

    def _interpolate(self, template: str, variables: Dict[str, Any]) -> str:
        """Replace {{name}} placeholders with values from variables.

        Raises:
            ValueError: If a placeholder is not found in variables.
        """
        for var_name in _PLACEHOLDER.findall(template):
            if var_name not in variables:
                logger.error(
                    "missing_interpolation_variable",
                    variable=var_name,
                    available_variables=list(variables.keys()),
                )
                raise ValueError(f"Missing interpolation variable: {var_name}")

        def replace(match: "re.Match[str]") -> str:
            text = _to_text(variables[match.group(1)])
            if self.use_isolating:
                return f"{FSI}{text}{PDI}"
            return text

        return _PLACEHOLDER.sub(replace, template)


def _to_text(value: Any) -> str:
    """Convert a placeholder value to text; unconvertible values become ""."""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    try:
        return str(value)
    except Exception as e:  # pylint: disable=broad-except
        logger.warning(
            "placeholder_not_convertible",
            value_type=type(value).__name__,
            error=str(e),
        )
        return ""


def load(
    requested: Optional[LanguageTag] = None,
    store: Optional[CatalogStore] = None,
) -> LanguageLoader:
    """Load the localizations for a language, falling back to the base language.

    Bidirectional isolation marks are disabled so rendered text composes
    cleanly in terminals and logs.

    Args:
        requested: Requested language, or None for the base language.
        store: Catalog store to use (default: the bundled catalogs).

    Returns:
        LanguageLoader bound to the requested or base language.

    Raises:
        CatalogLoadError: If a catalog cannot be parsed.

    Example:
        loader = load(None)
        print(loader.get(MessageId("dependencies", "graph")))
    """
    store = store or get_catalog_store()
    base_catalog = store.catalog(BASE_LANGUAGE)

    language = BASE_LANGUAGE
    if requested is not None:
        if store.has_language(requested):
            language = requested
        else:
            logger.info(
                "unsupported_language_requested",
                requested=str(requested),
                fallback=str(BASE_LANGUAGE),
            )

    catalog = base_catalog if language == BASE_LANGUAGE else store.catalog(language)
    loader = LanguageLoader(language, catalog, fallback_catalog=base_catalog)
    loader.set_use_isolating(False)
    return loader


def load_all(store: Optional[CatalogStore] = None) -> Dict[LanguageTag, LanguageLoader]:
    """Like load(), but loads every available language.

    There is no guarantee about which language ends up first when the result
    is iterated, so this shouldn't be used for normal localization. Callers
    needing the default language should call load(None).

    Args:
        store: Catalog store to use (default: the bundled catalogs).

    Returns:
        Dict mapping each available LanguageTag to its loader.

    Raises:
        CatalogLoadError: If any catalog cannot be parsed.
    """
    store = store or get_catalog_store()
    base_catalog = store.catalog(BASE_LANGUAGE)

    result = {}
    for language in available_languages(store):
        catalog = base_catalog if language == BASE_LANGUAGE else store.catalog(language)
        result[language] = LanguageLoader(language, catalog, fallback_catalog=base_catalog)

    logger.debug("loaded_all_languages", language_count=len(result))
    return result


def available_languages(store: Optional[CatalogStore] = None) -> List[LanguageTag]:
    """The languages that have bundled catalogs (e.g. en-US), ascending."""
    store = store or get_catalog_store()
    return store.languages()
