"""Translation models for the i18n system.

Defines the value types shared by the catalog store, the loaders and the
localised error types.
"""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from infrastructure.i18n.exceptions import UnsupportedLanguageError

_TAG_PATTERN = re.compile(r"^([A-Za-z]{2,3})(?:[-_]([A-Za-z]{2}|[0-9]{3}))?$")


@dataclass(frozen=True, order=True)
class LanguageTag:
    """An IETF BCP 47 style language tag (e.g. en-US, ja-JP).

    Frozen and ordered so tags can key dictionaries and be listed
    deterministically.

    Attributes:
        language: Lowercase language subtag (e.g. "en").
        region: Uppercase region subtag (e.g. "US"), empty when absent.
    """

    language: str
    region: str = ""

    def __str__(self) -> str:
        """Return the tag in canonical form.

        Returns:
            Tag string (e.g. "en-US").
        """
        if self.region:
            return f"{self.language}-{self.region}"
        return self.language

    @classmethod
    def parse(cls, value: str) -> "LanguageTag":
        """Parse a language tag string.

        Accepts both "-" and "_" separators and normalizes case.

        Args:
            value: Tag string (e.g. "en-US", "ja_jp", "de").

        Returns:
            Parsed LanguageTag.

        Raises:
            UnsupportedLanguageError: If value is not a valid tag.
        """
        match = _TAG_PATTERN.match(value.strip()) if value else None
        if match is None:
            raise UnsupportedLanguageError(f"Invalid language tag: {value!r}")
        language, region = match.groups()
        return cls(language=language.lower(), region=(region or "").upper())

    @classmethod
    def try_parse(cls, value: Optional[str]) -> Optional["LanguageTag"]:
        """Parse a language tag, returning None instead of raising."""
        if value is None:
            return None
        try:
            return cls.parse(value)
        except UnsupportedLanguageError:
            return None


BASE_LANGUAGE = LanguageTag("en", "US")


@dataclass(frozen=True)
class MessageId:
    """Identifies a message in a catalog.

    Ids are hierarchical (e.g. "git.clone", "dependencies.cycle") and are
    never shown to users.

    Attributes:
        namespace: Top-level namespace (e.g. "git", "pacman").
        message_key: Specific message identifier (e.g. "clone").
    """

    namespace: str
    message_key: str

    def __str__(self) -> str:
        return f"{self.namespace}.{self.message_key}"

    @classmethod
    def from_string(cls, key_string: str) -> "MessageId":
        """Create MessageId from dot-separated string.

        Args:
            key_string: Dot-separated key (e.g. "git.clone").

        Returns:
            MessageId instance.

        Raises:
            ValueError: If key_string does not contain a dot.
        """
        parts = key_string.split(".", 1)
        if len(parts) != 2:
            raise ValueError(
                f"Message id must be in format 'namespace.key': {key_string}"
            )
        return cls(namespace=parts[0], message_key=parts[1])


@dataclass(frozen=True)
class MessageCatalog:
    """Read-only set of message templates for one language.

    Attributes:
        language: The LanguageTag this catalog is for.
        messages: Flat read-only mapping {"namespace.key": template}.
    """

    language: LanguageTag
    messages: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))

    def get_message(self, message_id: MessageId) -> Optional[str]:
        """Retrieve a template by id.

        Args:
            message_id: Id of the message.

        Returns:
            Template string, or None if not found.
        """
        return self.messages.get(str(message_id))

    def has_message(self, message_id: MessageId) -> bool:
        return str(message_id) in self.messages

    def message_ids(self) -> frozenset:
        """Return every message id this catalog defines."""
        return frozenset(self.messages)
