"""Shared fixtures for the Aura test suite."""

import pytest

from infrastructure.i18n import BASE_LANGUAGE, load, load_all


@pytest.fixture
def english():
    """Loader bound to the base language of the bundled catalogs."""
    return load(None)


@pytest.fixture
def all_loaders():
    """One loader per bundled language."""
    return load_all()


@pytest.fixture
def base_language():
    return BASE_LANGUAGE
