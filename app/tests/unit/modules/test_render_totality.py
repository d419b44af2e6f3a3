"""Every error variant renders to text in every bundled language."""

from unittest.mock import patch

import pytest

from infrastructure.i18n import available_languages, load, report
from infrastructure.i18n.loader import FSI, PDI
from modules.aur import AurError
from modules.dependencies import DependencyError
from tests.factories.errors import make_all_errors

ERRORS = make_all_errors()


@pytest.mark.unit
@pytest.mark.parametrize("language", available_languages(), ids=str)
@pytest.mark.parametrize("error", ERRORS, ids=lambda e: f"{type(e).__name__}-{e.kind.value}")
def test_every_variant_renders(language, error):
    message = error.localise(load(language))
    assert isinstance(message, str)
    assert message.strip()
    assert FSI not in message and PDI not in message


@pytest.mark.unit
@pytest.mark.parametrize("error", ERRORS, ids=lambda e: f"{type(e).__name__}-{e.kind.value}")
def test_every_variant_renders_with_isolation(all_loaders, error):
    """Loaders from load_all() render too, isolation marks included."""
    for loader in all_loaders.values():
        assert error.localise(loader).strip()


@pytest.mark.unit
def test_translated_languages_differ_from_english(english):
    """A full translation actually replaces the English text."""
    error = DependencyError.malformed_graph()
    french = load(next(lang for lang in available_languages() if str(lang) == "fr-FR"))
    assert error.localise(french) != error.localise(english)


@pytest.mark.unit
def test_report_logs_hidden_detail(english):
    """The lookup failure is logged; only the localised text is returned."""
    error = DependencyError.faur(
        AurError.faur_fetch("aura-bin", cause=ConnectionError("timed out"))
    )
    with patch("modules.aur.errors.logger") as mock_logger:
        message = report(error, english)
    assert message == "Failed to fetch metadata for aura-bin."
    assert "timed out" not in message
    mock_logger.error.assert_called_once_with(
        "faur_error_cause",
        kind="faur_fetch",
        package="aura-bin",
        error="timed out",
    )
