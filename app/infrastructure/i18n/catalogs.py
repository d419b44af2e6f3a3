"""Bundled translation catalogs.

Catalogs ship as YAML resources inside the ``infrastructure.i18n.locales``
package, one entry per language named ``<tag>.yml``. The resources are read
into memory once per process; after that nothing touches the filesystem and
nothing is mutated.

Expected entry format:

    namespace:
      key1: "message with {{placeholder}}"
      key2: "message"
"""

from functools import lru_cache
from importlib import resources
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

import yaml

from infrastructure.i18n.exceptions import CatalogLoadError
from infrastructure.i18n.models import LanguageTag, MessageCatalog
from infrastructure.logging import get_module_logger

logger = get_module_logger()

LOCALES_PACKAGE = "infrastructure.i18n"
LOCALES_DIR = "locales"
# Width of the language tag prefix in entry names ("en-US.yml" -> "en-US")
TAG_PREFIX_WIDTH = 5


class CatalogStore:
    """Immutable in-memory table of catalog resources.

    Each language is parsed at most once; later calls return the same
    MessageCatalog.

    Attributes:
        entries: Read-only mapping of entry name to raw catalog text.
    """

    def __init__(self, entries: Mapping[str, str]):
        self.entries: Mapping[str, str] = MappingProxyType(dict(entries))
        self._catalogs: Dict[LanguageTag, MessageCatalog] = {}

    @classmethod
    def from_package(
        cls, package: str = LOCALES_PACKAGE, directory: str = LOCALES_DIR
    ) -> "CatalogStore":
        """Read every catalog resource shipped with a package.

        Args:
            package: Package holding the resources.
            directory: Resource directory inside the package.

        Returns:
            CatalogStore holding the raw text of each entry.
        """
        root = resources.files(package).joinpath(directory)
        entries = {
            entry.name: entry.read_text(encoding="utf-8")
            for entry in root.iterdir()
            if entry.is_file()
        }
        logger.debug("catalog_resources_read", entry_count=len(entries))
        return cls(entries)

    def entry_language(self, name: str) -> Optional[LanguageTag]:
        """Extract the language tag from an entry name's fixed-width prefix."""
        return LanguageTag.try_parse(name[:TAG_PREFIX_WIDTH])

    def languages(self) -> List[LanguageTag]:
        """Return the distinct languages with entries, in ascending order."""
        found = set()
        for name in self.entries:
            language = self.entry_language(name)
            if language is None:
                logger.debug("skipped_catalog_entry", entry=name)
                continue
            found.add(language)
        return sorted(found)

    def has_language(self, language: LanguageTag) -> bool:
        return any(True for _ in self._entries_for(language))

    def catalog(self, language: LanguageTag) -> MessageCatalog:
        """Parse the catalog for a language.

        All entries whose prefix names the language are merged in name
        order; later entries override earlier ones.

        Args:
            language: Language to parse.

        Returns:
            MessageCatalog for the language.

        Raises:
            CatalogLoadError: If no entry exists or an entry cannot be parsed.
        """
        if language in self._catalogs:
            return self._catalogs[language]

        entries = list(self._entries_for(language))
        if not entries:
            raise CatalogLoadError(str(language), "no catalog entry found")

        messages: Dict[str, str] = {}
        for name, text in entries:
            messages.update(_parse_entry(name, text))

        logger.debug(
            "catalog_loaded",
            language=str(language),
            entry_count=len(entries),
            message_count=len(messages),
        )
        catalog = MessageCatalog(language=language, messages=messages)
        self._catalogs[language] = catalog
        return catalog

    def _entries_for(self, language: LanguageTag) -> Iterable[Tuple[str, str]]:
        for name in sorted(self.entries):
            if self.entry_language(name) == language:
                yield name, self.entries[name]


def _parse_entry(name: str, text: str) -> Dict[str, str]:
    """Flatten one YAML entry into {"namespace.key": template}.

    Raises:
        CatalogLoadError: If the YAML is invalid or not namespace -> key -> str.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logger.error("yaml_parse_error", entry=name, error=str(e))
        raise CatalogLoadError(name, str(e)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise CatalogLoadError(name, "expected a mapping of namespaces")

    messages: Dict[str, str] = {}
    for namespace, entries in data.items():
        if not isinstance(entries, dict):
            raise CatalogLoadError(name, f"namespace {namespace!r} is not a mapping")
        for key, template in entries.items():
            if not isinstance(template, str):
                raise CatalogLoadError(
                    name, f"message {namespace}.{key} is not a string"
                )
            messages[f"{namespace}.{key}"] = template
    return messages


@lru_cache(maxsize=None)
def get_catalog_store() -> CatalogStore:
    """Return the process-wide store of bundled catalogs."""
    return CatalogStore.from_package()
