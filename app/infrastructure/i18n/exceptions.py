"""Custom exceptions for the i18n system.

Catalog failures are startup or build-time conditions: they are raised
once, at load or validation time, and never per rendered message.
"""

from typing import Dict, List


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            loader = load(None)
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class UnsupportedLanguageError(I18nError, ValueError):
    """Raised when a string does not parse as a language tag.

    Example:
        >>> LanguageTag.parse("english")
        Traceback (most recent call last):
        ...
        UnsupportedLanguageError: Invalid language tag: 'english'
    """

    pass


class CatalogLoadError(I18nError):
    """Raised when a bundled catalog resource cannot be parsed.

    Attributes:
        entry: Name of the resource entry that failed (e.g. "ja-JP.yml").
    """

    def __init__(self, entry: str, reason: str):
        super().__init__(f"Failed to load catalog {entry}: {reason}")
        self.entry = entry
        self.reason = reason


class CatalogInconsistencyError(I18nError):
    """Raised when a catalog defines messages the base catalog does not.

    Attributes:
        violations: Mapping of language tag string to the extra message ids.
    """

    def __init__(self, violations: Dict[str, List[str]]):
        details = "; ".join(
            f"{language} has extra messages: {', '.join(ids)}"
            for language, ids in sorted(violations.items())
        )
        super().__init__(details)
        self.violations = violations
