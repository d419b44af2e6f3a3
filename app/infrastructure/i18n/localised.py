"""Localisation protocols implemented by every user-facing error type.

Each error carries two renderings: localise() collapses it into one
translated message for the user, nested() writes the technical detail
(paths, I/O causes, wrapped errors) to the diagnostic log.
"""

from typing import Protocol, runtime_checkable

from infrastructure.i18n.loader import LanguageLoader


@runtime_checkable
class Localised(Protocol):
    """Any type whose contents can be localised in a meaningful way."""

    def localise(self, loader: LanguageLoader) -> str:
        """Localise the content of a value."""
        ...  # pragma: no cover


@runtime_checkable
class Nested(Protocol):
    """Any error that can log the technical detail its localisation hides."""

    def nested(self) -> None:
        """Log the underlying causes of this error."""
        ...  # pragma: no cover


class LocalisedError(Localised, Nested, Protocol):
    """An error that can be both reported to the user and logged."""


def report(error: LocalisedError, loader: LanguageLoader) -> str:
    """Log an error's technical detail and return its localised message.

    Args:
        error: Error to report.
        loader: Loader bound to the user's language.

    Returns:
        Message to display to the user.
    """
    error.nested()
    return error.localise(loader)
