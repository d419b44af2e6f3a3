"""Calls to the system package manager and the errors they raise."""

from modules.pacman.commands import (
    install_from_repos,
    install_from_tarball,
    run,
    run_elevated,
    run_elevated_batch,
)
from modules.pacman.errors import PacmanError, PacmanErrorKind

__all__ = [
    "PacmanError",
    "PacmanErrorKind",
    "run",
    "run_elevated",
    "run_elevated_batch",
    "install_from_tarball",
    "install_from_repos",
]
