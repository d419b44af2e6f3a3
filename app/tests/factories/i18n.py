"""Test data factories for i18n system testing.

Provides deterministic test data builders for:
- MessageId
- MessageCatalog
- CatalogStore (in-memory catalog resources)
"""

from typing import Dict, Optional

import yaml

from infrastructure.i18n import (
    BASE_LANGUAGE,
    CatalogStore,
    LanguageTag,
    MessageCatalog,
    MessageId,
)

ENGLISH_MESSAGES = {
    "greeting": {
        "hello": "Hello, {{name}}!",
        "bye": "Goodbye.",
    },
    "package": {
        "missing": "{{pkg}} is required by {{par}}.",
    },
}

FRENCH_MESSAGES = {
    "greeting": {
        "hello": "Bonjour, {{name}} !",
    },
}


def make_message_id(namespace: str = "greeting", message_key: str = "hello") -> MessageId:
    """Create a MessageId instance."""
    return MessageId(namespace=namespace, message_key=message_key)


def make_message_catalog(
    language: LanguageTag = BASE_LANGUAGE,
    messages: Optional[Dict[str, str]] = None,
) -> MessageCatalog:
    """Create a MessageCatalog instance.

    Args:
        language: Language of the catalog.
        messages: Flat dict {"namespace.key": template}.

    Returns:
        MessageCatalog instance.
    """
    if messages is None:
        messages = {
            "greeting.hello": "Hello, {{name}}!",
            "greeting.bye": "Goodbye.",
        }
    return MessageCatalog(language=language, messages=messages)


def make_entry(messages: dict) -> str:
    """Render nested {namespace: {key: template}} data as catalog YAML."""
    return yaml.safe_dump(messages, allow_unicode=True)


def make_catalog_store(entries: Optional[Dict[str, dict]] = None) -> CatalogStore:
    """Create an in-memory CatalogStore.

    Args:
        entries: Mapping of entry name (e.g. "en-US.yml") to nested message
            data. Defaults to an English base catalog and a partial French one.

    Returns:
        CatalogStore instance.
    """
    if entries is None:
        entries = {
            "en-US.yml": ENGLISH_MESSAGES,
            "fr-FR.yml": FRENCH_MESSAGES,
        }
    return CatalogStore({name: make_entry(data) for name, data in entries.items()})
