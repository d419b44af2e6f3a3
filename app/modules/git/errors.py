"""Errors for git operations on package build repositories."""

from enum import Enum
from pathlib import Path
from typing import Optional

from infrastructure.i18n import LanguageLoader, MessageId
from infrastructure.logging import get_module_logger

logger = get_module_logger()

GIT_IO = MessageId("git", "io")
GIT_CLONE = MessageId("git", "clone")
GIT_PULL = MessageId("git", "pull")
GIT_DIFF = MessageId("git", "diff")
GIT_HASH = MessageId("git", "hash")


class GitErrorKind(Enum):
    """The ways a git operation can fail."""

    IO = "io"
    CLONE = "clone"
    PULL = "pull"
    DIFF = "diff"
    READ_HASH = "read_hash"


# Payload each kind must carry to render
_REQUIRED = {
    GitErrorKind.CLONE: ("path",),
    GitErrorKind.PULL: ("path",),
    GitErrorKind.DIFF: ("path",),
}


class GitError(Exception):
    """Raised when a git operation fails.

    Attributes:
        kind: Which operation failed.
        path: Repository or file the operation ran against (all but IO and READ_HASH).
        cause: Underlying exception, when there is one.

    Raises:
        ValueError: If CLONE, PULL or DIFF is built without a path.
    """

    def __init__(
        self,
        kind: GitErrorKind,
        path: Optional[Path] = None,
        cause: Optional[BaseException] = None,
    ):
        self.kind = GitErrorKind(kind)
        self.path = path
        self.cause = cause
        _check_required(self)
        detail = f"git {self.kind.value} failed"
        if path is not None:
            detail = f"{detail}: {path}"
        super().__init__(detail)

    @classmethod
    def io(cls, cause: OSError) -> "GitError":
        return cls(GitErrorKind.IO, cause=cause)

    @classmethod
    def clone(cls, path: Path) -> "GitError":
        return cls(GitErrorKind.CLONE, path=path)

    @classmethod
    def pull(cls, path: Path) -> "GitError":
        return cls(GitErrorKind.PULL, path=path)

    @classmethod
    def diff(cls, path: Path) -> "GitError":
        return cls(GitErrorKind.DIFF, path=path)

    @classmethod
    def read_hash(cls, cause: Optional[BaseException] = None) -> "GitError":
        return cls(GitErrorKind.READ_HASH, cause=cause)

    def localise(self, loader: LanguageLoader) -> str:
        match self.kind:
            case GitErrorKind.IO:
                return loader.get(GIT_IO)
            case GitErrorKind.CLONE:
                return loader.get(GIT_CLONE, dir=self.path)
            case GitErrorKind.PULL:
                return loader.get(GIT_PULL, dir=self.path)
            case GitErrorKind.DIFF:
                return loader.get(GIT_DIFF, file=self.path)
            case GitErrorKind.READ_HASH:
                return loader.get(GIT_HASH)

    def nested(self) -> None:
        if self.cause is not None:
            logger.error(
                "git_error_cause",
                kind=self.kind.value,
                path=str(self.path) if self.path is not None else None,
                error=str(self.cause),
            )


def _check_required(error: GitError) -> None:
    for name in _REQUIRED.get(error.kind, ()):
        if getattr(error, name) is None:
            raise ValueError(f"GitError {error.kind.value} requires {name}")
