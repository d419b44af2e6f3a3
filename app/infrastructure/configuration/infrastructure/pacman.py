"""External package manager invocation settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class PacmanSettings(InfrastructureSettings):
    """Package manager command configuration.

    Environment Variables:
        PACMAN_COMMAND: Executable invoked for package operations (default: pacman)
        ELEVATION_COMMAND: Executable prefixed to elevated calls (default: sudo)

    Example:
        ```python
        from infrastructure.configuration import settings

        command = [settings.pacman.ELEVATION_COMMAND, settings.pacman.PACMAN_COMMAND]
        ```
    """

    PACMAN_COMMAND: str = Field(default="pacman", alias="PACMAN_COMMAND")
    ELEVATION_COMMAND: str = Field(default="sudo", alias="ELEVATION_COMMAND")
