"""Catalog consistency checks.

Every catalog must only define messages the base catalog also defines:
an extra id in a translation is a build-time defect. Ids missing from a
translation are allowed and fall back to the base text.
"""

from typing import Dict, List, Optional

from infrastructure.i18n.catalogs import CatalogStore
from infrastructure.i18n.exceptions import CatalogInconsistencyError
from infrastructure.i18n.loader import load, load_all
from infrastructure.i18n.models import BASE_LANGUAGE, LanguageTag
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def find_extra_messages(
    store: Optional[CatalogStore] = None,
) -> Dict[LanguageTag, List[str]]:
    """Find messages defined by a translation but not by the base language.

    Args:
        store: Catalog store to check (default: the bundled catalogs).

    Returns:
        Mapping of each violating language to its sorted extra message ids.
        Languages without violations are omitted.
    """
    base_ids = load(None, store=store).message_ids()
    violations = {}

    for language, loader in load_all(store=store).items():
        if language == BASE_LANGUAGE:
            continue
        extra = loader.message_ids() - base_ids
        if extra:
            logger.error(
                "extra_translations_found",
                language=str(language),
                message_ids=sorted(extra),
            )
            violations[language] = sorted(extra)

    return violations


def missing_messages(
    store: Optional[CatalogStore] = None,
) -> Dict[LanguageTag, List[str]]:
    """Find base-language messages a translation does not define.

    Args:
        store: Catalog store to check (default: the bundled catalogs).

    Returns:
        Mapping of each incomplete language to its sorted untranslated ids.
    """
    base_ids = load(None, store=store).message_ids()
    untranslated = {}

    for language, loader in load_all(store=store).items():
        missing = base_ids - loader.message_ids()
        if missing:
            untranslated[language] = sorted(missing)

    return untranslated


def check_consistency(store: Optional[CatalogStore] = None) -> None:
    """Validate that no translation defines messages absent from the base language.

    Args:
        store: Catalog store to check (default: the bundled catalogs).

    Raises:
        CatalogInconsistencyError: If any language has extra messages.
        CatalogLoadError: If any catalog cannot be parsed.
    """
    violations = find_extra_messages(store)
    if violations:
        raise CatalogInconsistencyError(
            {str(language): ids for language, ids in violations.items()}
        )
    logger.info("catalogs_consistent")
