"""Errors for calls to the system package manager."""

from enum import Enum
from typing import Optional

from infrastructure.i18n import LanguageLoader, MessageId
from infrastructure.logging import get_module_logger

logger = get_module_logger()

PACMAN_EXTERNAL = MessageId("pacman", "external")
PACMAN_INSTALL_TARBALL = MessageId("pacman", "install_tarball")
PACMAN_INSTALL_REPOS = MessageId("pacman", "install_repos")
PACMAN_MISC = MessageId("pacman", "misc")


class PacmanErrorKind(Enum):
    """The ways a package manager call can fail.

    Attributes:
        EXTERNAL_CMD: The process could not be spawned.
        MISC: The process exited with a non-zero status.
        INSTALL_FROM_TARBALL: Installing built package files failed.
        INSTALL_FROM_REPOS: Installing from the official repositories failed.
    """

    EXTERNAL_CMD = "external_cmd"
    MISC = "misc"
    INSTALL_FROM_TARBALL = "install_from_tarball"
    INSTALL_FROM_REPOS = "install_from_repos"


class PacmanError(Exception):
    """Raised when a package manager call fails.

    Attributes:
        kind: What went wrong.
        cause: Exception raised while spawning the process (EXTERNAL_CMD).
        returncode: Exit status of the process (MISC).
    """

    def __init__(
        self,
        kind: PacmanErrorKind,
        cause: Optional[Exception] = None,
        returncode: Optional[int] = None,
    ):
        self.kind = PacmanErrorKind(kind)
        self.cause = cause
        self.returncode = returncode
        detail = f"pacman {self.kind.value}"
        if cause is not None:
            detail = f"{detail}: {cause}"
        elif returncode is not None:
            detail = f"{detail}: exit status {returncode}"
        super().__init__(detail)

    def localise(self, loader: LanguageLoader) -> str:
        match self.kind:
            case PacmanErrorKind.EXTERNAL_CMD:
                return loader.get(PACMAN_EXTERNAL)
            case PacmanErrorKind.INSTALL_FROM_TARBALL:
                return loader.get(PACMAN_INSTALL_TARBALL)
            case PacmanErrorKind.INSTALL_FROM_REPOS:
                return loader.get(PACMAN_INSTALL_REPOS)
            case PacmanErrorKind.MISC:
                return loader.get(PACMAN_MISC)

    def nested(self) -> None:
        if self.kind is PacmanErrorKind.EXTERNAL_CMD:
            logger.error("pacman_spawn_failed", error=str(self.cause))
