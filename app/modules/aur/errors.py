"""Errors for remote package index lookups.

A failed lookup either wraps the git error that stopped it, or names the
package that could not be fetched or resolved.
"""

from enum import Enum
from typing import Optional

from infrastructure.i18n import LanguageLoader, MessageId
from infrastructure.logging import get_module_logger
from modules.git import GitError

logger = get_module_logger()

FAUR_FETCH = MessageId("faur", "fetch")
FAUR_UNKNOWN = MessageId("faur", "unknown")
FAUR_TOO_MANY = MessageId("faur", "too_many")


class AurErrorKind(Enum):
    """The ways a remote package lookup can fail."""

    GIT = "git"
    FAUR_FETCH = "faur_fetch"
    PACKAGE_DOES_NOT_EXIST = "package_does_not_exist"
    TOO_MANY_FAUR_RESULTS = "too_many_faur_results"


# Payload each kind must carry to render
_REQUIRED = {
    AurErrorKind.GIT: ("git",),
    AurErrorKind.FAUR_FETCH: ("package",),
    AurErrorKind.PACKAGE_DOES_NOT_EXIST: ("package",),
    AurErrorKind.TOO_MANY_FAUR_RESULTS: ("package",),
}


class AurError(Exception):
    """Raised when a remote package lookup fails.

    Attributes:
        kind: What went wrong.
        package: Package being looked up (all kinds but GIT).
        git: Wrapped git failure (GIT only).
        cause: Underlying network or decoding exception, when there is one.

    Raises:
        ValueError: If GIT lacks the git error, or another kind lacks the package.
    """

    def __init__(
        self,
        kind: AurErrorKind,
        package: Optional[str] = None,
        git: Optional[GitError] = None,
        cause: Optional[BaseException] = None,
    ):
        self.kind = AurErrorKind(kind)
        self.package = package
        self.git = git
        self.cause = cause
        _check_required(self)
        if git is not None:
            detail = str(git)
        else:
            detail = f"{self.kind.value}: {package}"
        super().__init__(detail)

    @classmethod
    def from_git(cls, error: GitError) -> "AurError":
        return cls(AurErrorKind.GIT, git=error)

    @classmethod
    def faur_fetch(cls, package: str, cause: Optional[BaseException] = None) -> "AurError":
        return cls(AurErrorKind.FAUR_FETCH, package=package, cause=cause)

    @classmethod
    def package_does_not_exist(cls, package: str) -> "AurError":
        return cls(AurErrorKind.PACKAGE_DOES_NOT_EXIST, package=package)

    @classmethod
    def too_many_faur_results(cls, package: str) -> "AurError":
        return cls(AurErrorKind.TOO_MANY_FAUR_RESULTS, package=package)

    def localise(self, loader: LanguageLoader) -> str:
        match self.kind:
            case AurErrorKind.GIT:
                return self.git.localise(loader)
            case AurErrorKind.FAUR_FETCH:
                return loader.get(FAUR_FETCH, pkg=self.package)
            case AurErrorKind.PACKAGE_DOES_NOT_EXIST:
                return loader.get(FAUR_UNKNOWN, pkg=self.package)
            case AurErrorKind.TOO_MANY_FAUR_RESULTS:
                return loader.get(FAUR_TOO_MANY, pkg=self.package)

    def nested(self) -> None:
        if self.git is not None:
            self.git.nested()
        elif self.cause is not None:
            logger.error(
                "faur_error_cause",
                kind=self.kind.value,
                package=self.package,
                error=str(self.cause),
            )


def _check_required(error: AurError) -> None:
    for name in _REQUIRED.get(error.kind, ()):
        if getattr(error, name) is None:
            raise ValueError(f"AurError {error.kind.value} requires {name}")
