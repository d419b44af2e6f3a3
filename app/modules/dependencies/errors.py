"""Errors for dependency resolution.

Resolution walks many packages at once, so a single failure can be an
aggregate of the failures of each branch. The remote lookup failure a
resolver runs into is carried as-is in the FAUR variant: any error that
can localise itself and log its causes fits there.
"""

from enum import Enum
from pathlib import Path
from typing import Optional, Sequence

from infrastructure.i18n import LanguageLoader, LocalisedError, MessageId
from infrastructure.logging import get_module_logger
from modules.git import GitError

logger = get_module_logger()

DEP_MUTEX = MessageId("dependencies", "mutex")
DEP_POOL = MessageId("dependencies", "pool")
DEP_SRCINFO = MessageId("dependencies", "srcinfo")
DEP_MULTI = MessageId("dependencies", "multi")
DEP_EXIST = MessageId("dependencies", "exist")
DEP_EXIST_PARENT = MessageId("dependencies", "exist_parent")
DEP_GRAPH = MessageId("dependencies", "graph")
DEP_CYCLE = MessageId("dependencies", "cycle")

BULLET = " - "


class DependencyErrorKind(Enum):
    """The ways dependency resolution can fail."""

    POISONED_MUTEX = "poisoned_mutex"
    POOL = "pool"
    SRCINFO = "srcinfo"
    GIT = "git"
    RESOLUTIONS = "resolutions"
    DOESNT_EXIST = "doesnt_exist"
    DOESNT_EXIST_WITH_PARENT = "doesnt_exist_with_parent"
    MALFORMED_GRAPH = "malformed_graph"
    CYCLIC_DEP = "cyclic_dep"
    FAUR = "faur"


# Payload each kind must carry to render
_REQUIRED = {
    DependencyErrorKind.SRCINFO: ("path",),
    DependencyErrorKind.GIT: ("inner",),
    DependencyErrorKind.DOESNT_EXIST: ("package",),
    DependencyErrorKind.DOESNT_EXIST_WITH_PARENT: ("package", "parent"),
    DependencyErrorKind.CYCLIC_DEP: ("package",),
    DependencyErrorKind.FAUR: ("inner",),
}


class DependencyError(Exception):
    """Raised when dependency resolution fails.

    Attributes:
        kind: What went wrong.
        package: Package involved (DOESNT_EXIST, DOESNT_EXIST_WITH_PARENT, CYCLIC_DEP).
        parent: Package that required the missing one (DOESNT_EXIST_WITH_PARENT).
        path: .SRCINFO file that failed to parse (SRCINFO).
        cause: Underlying exception (POOL, SRCINFO).
        inner: Wrapped error (GIT, FAUR).
        errors: Sub-errors, in the order they occurred (RESOLUTIONS).

    Raises:
        ValueError: If a kind is built without the payload it renders.
    """

    def __init__(
        self,
        kind: DependencyErrorKind,
        package: Optional[str] = None,
        parent: Optional[str] = None,
        path: Optional[Path] = None,
        cause: Optional[BaseException] = None,
        inner: Optional[LocalisedError] = None,
        errors: Sequence["DependencyError"] = (),
    ):
        self.kind = DependencyErrorKind(kind)
        self.package = package
        self.parent = parent
        self.path = path
        self.cause = cause
        self.inner = inner
        self.errors = tuple(errors)
        _check_required(self)
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.inner is not None:
            return str(self.inner)
        if self.kind is DependencyErrorKind.RESOLUTIONS:
            return f"{len(self.errors)} dependency resolution errors"
        parts = [p for p in (self.package, self.parent, self.path) if p is not None]
        if parts:
            return f"{self.kind.value}: {', '.join(str(p) for p in parts)}"
        return self.kind.value

    @classmethod
    def poisoned_mutex(cls) -> "DependencyError":
        return cls(DependencyErrorKind.POISONED_MUTEX)

    @classmethod
    def pool(cls, cause: BaseException) -> "DependencyError":
        return cls(DependencyErrorKind.POOL, cause=cause)

    @classmethod
    def srcinfo(cls, path: Path, cause: BaseException) -> "DependencyError":
        return cls(DependencyErrorKind.SRCINFO, path=path, cause=cause)

    @classmethod
    def from_git(cls, error: GitError) -> "DependencyError":
        return cls(DependencyErrorKind.GIT, inner=error)

    @classmethod
    def resolutions(cls, errors: Sequence["DependencyError"]) -> "DependencyError":
        return cls(DependencyErrorKind.RESOLUTIONS, errors=errors)

    @classmethod
    def doesnt_exist(cls, package: str) -> "DependencyError":
        return cls(DependencyErrorKind.DOESNT_EXIST, package=package)

    @classmethod
    def doesnt_exist_with_parent(cls, package: str, parent: str) -> "DependencyError":
        return cls(
            DependencyErrorKind.DOESNT_EXIST_WITH_PARENT,
            package=package,
            parent=parent,
        )

    @classmethod
    def malformed_graph(cls) -> "DependencyError":
        return cls(DependencyErrorKind.MALFORMED_GRAPH)

    @classmethod
    def cyclic_dep(cls, package: str) -> "DependencyError":
        return cls(DependencyErrorKind.CYCLIC_DEP, package=package)

    @classmethod
    def faur(cls, error: LocalisedError) -> "DependencyError":
        return cls(DependencyErrorKind.FAUR, inner=error)

    def localise(self, loader: LanguageLoader) -> str:
        match self.kind:
            case DependencyErrorKind.POISONED_MUTEX:
                return loader.get(DEP_MUTEX)
            case DependencyErrorKind.POOL:
                return loader.get(DEP_POOL)
            case DependencyErrorKind.SRCINFO:
                return loader.get(DEP_SRCINFO, file=self.path)
            case DependencyErrorKind.GIT | DependencyErrorKind.FAUR:
                return self.inner.localise(loader)
            case DependencyErrorKind.RESOLUTIONS:
                lines = [loader.get(DEP_MULTI)]
                lines.extend(f"{BULLET}{e.localise(loader)}" for e in self.errors)
                return "\n".join(lines)
            case DependencyErrorKind.DOESNT_EXIST:
                return loader.get(DEP_EXIST, pkg=self.package)
            case DependencyErrorKind.DOESNT_EXIST_WITH_PARENT:
                return loader.get(DEP_EXIST_PARENT, pkg=self.package, par=self.parent)
            case DependencyErrorKind.MALFORMED_GRAPH:
                return loader.get(DEP_GRAPH)
            case DependencyErrorKind.CYCLIC_DEP:
                return loader.get(DEP_CYCLE, pkg=self.package)

    def nested(self) -> None:
        if self.inner is not None:
            self.inner.nested()
        for error in self.errors:
            error.nested()
        if self.cause is not None:
            logger.error(
                "dependency_error_cause",
                kind=self.kind.value,
                path=str(self.path) if self.path is not None else None,
                error=str(self.cause),
            )


def _check_required(error: DependencyError) -> None:
    for name in _REQUIRED.get(error.kind, ()):
        if getattr(error, name) is None:
            raise ValueError(f"DependencyError {error.kind.value} requires {name}")
