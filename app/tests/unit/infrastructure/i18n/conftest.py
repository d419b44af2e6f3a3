"""Feature-level fixtures for i18n system tests."""

import pytest

from tests.factories.i18n import (
    ENGLISH_MESSAGES,
    FRENCH_MESSAGES,
    make_catalog_store,
)


@pytest.fixture
def sample_store():
    """In-memory store with a complete English catalog and a partial French one."""
    return make_catalog_store()


@pytest.fixture
def inconsistent_store():
    """Store whose xx-XX catalog defines a message English does not."""
    return make_catalog_store(
        {
            "en-US.yml": ENGLISH_MESSAGES,
            "fr-FR.yml": FRENCH_MESSAGES,
            "xx-XX.yml": {
                "greeting": {
                    "hello": "Xello, {{name}}!",
                    "wave": "*waves*",
                },
            },
        }
    )
