"""Sugar for calling the system package manager.

Every call inherits the parent's standard streams and blocks until the
child exits. There is no timeout and no retry: failures are raised as
PacmanError for the caller to report.
"""

import os
import subprocess
from contextlib import contextmanager
from typing import Iterable, Iterator, List, Union

from infrastructure.configuration import settings
from infrastructure.logging import get_module_logger
from modules.pacman.errors import PacmanError, PacmanErrorKind

logger = get_module_logger()

Arg = Union[str, "os.PathLike[str]"]


def _call(command: List[Arg]) -> None:
    """Run a command and map its outcome onto PacmanError.

    An argument vector the OS refuses (an embedded NUL byte, a value that is
    not a path) counts as a spawn failure, as does a missing executable.
    """
    logger.debug("pacman_call", command=[str(part) for part in command])
    try:
        completed = subprocess.run(command, check=False)
    except (OSError, ValueError, TypeError) as e:
        raise PacmanError(PacmanErrorKind.EXTERNAL_CMD, cause=e) from e

    if completed.returncode != 0:
        raise PacmanError(PacmanErrorKind.MISC, returncode=completed.returncode)


@contextmanager
def relabel_failure(kind: PacmanErrorKind, operation: str) -> Iterator[None]:
    """Replace any PacmanError raised inside the block with one of `kind`.

    The failure is logged before it is discarded; the replacement carries
    no detail of its own.

    Args:
        kind: Kind of the replacement error.
        operation: Name of the operation, for the log entry.

    Raises:
        PacmanError: Of the given kind, if the block raised a PacmanError.
    """
    try:
        yield
    except PacmanError as e:
        e.nested()
        logger.error(
            "pacman_failed",
            operation=operation,
            original_kind=e.kind.value,
            error=str(e),
        )
        raise PacmanError(kind) from None


def run(args: Iterable[Arg]) -> None:
    """Make a shell call to pacman.

    Args:
        args: Arguments passed to pacman as-is.

    Raises:
        PacmanError: EXTERNAL_CMD if pacman could not be spawned, MISC if it
            exited with a non-zero status.
    """
    _call([settings.pacman.PACMAN_COMMAND, *args])


def run_elevated(subcommand: str, flags: Iterable[Arg], args: Iterable[Arg]) -> None:
    """Make an elevated shell call to pacman.

    Args:
        subcommand: Operation flag (e.g. "-S", "-U").
        flags: Extra flags, placed after the subcommand.
        args: Targets, placed after the flags.

    Raises:
        PacmanError: EXTERNAL_CMD or MISC, as for run().
    """
    _call(
        [
            settings.pacman.ELEVATION_COMMAND,
            settings.pacman.PACMAN_COMMAND,
            subcommand,
            *flags,
            *args,
        ]
    )


def run_elevated_batch(args: Iterable[Arg]) -> None:
    """Make an elevated shell call to pacman, passing all arguments as-is.

    Raises:
        PacmanError: EXTERNAL_CMD or MISC, as for run().
    """
    _call([settings.pacman.ELEVATION_COMMAND, settings.pacman.PACMAN_COMMAND, *args])


def install_from_tarball(flags: Iterable[Arg], args: Iterable[Arg]) -> None:
    """Call `sudo pacman -U`.

    Raises:
        PacmanError: INSTALL_FROM_TARBALL on any failure.
    """
    with relabel_failure(PacmanErrorKind.INSTALL_FROM_TARBALL, "install_from_tarball"):
        run_elevated("-U", flags, args)


def install_from_repos(flags: Iterable[Arg], args: Iterable[Arg]) -> None:
    """Call `sudo pacman -S`.

    Raises:
        PacmanError: INSTALL_FROM_REPOS on any failure.
    """
    with relabel_failure(PacmanErrorKind.INSTALL_FROM_REPOS, "install_from_repos"):
        run_elevated("-S", flags, args)
