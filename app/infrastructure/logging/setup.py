"""Structlog configuration and logger setup.

Configures structlog for a command line tool: short console output on
stderr by default, JSON with timestamps and callsites on request.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    # Configure logging at startup
    configure_logging()

    # Get a logger for your module
    logger = get_module_logger()
    logger.info("event_name", key="value")

Dependencies:
    - infrastructure.configuration.settings
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from infrastructure.configuration import settings


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def build_processors(log_format: str) -> List[Processor]:
    """Build the processor chain for a log format.

    Console output stays short for a person at a terminal; JSON output
    carries the timestamp and callsite for whatever collects it.

    Args:
        log_format: "console" or "json".

    Returns:
        Processors ending in the matching renderer.

    Raises:
        ValueError: If log_format is not a known format.
    """
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
    ]

    if log_format == "console":
        processors.extend(
            [
                structlog.processors.StackInfoRenderer(),
                structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
            ]
        )
    elif log_format == "json":
        processors.extend(
            [
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.CallsiteParameterAdder(
                    parameters=[
                        structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO,
                        structlog.processors.CallsiteParameter.FUNC_NAME,
                    ]
                ),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ]
        )
    else:
        raise ValueError(f"Unknown log format: {log_format}")

    return processors


def configure_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
) -> BoundLogger:
    """Configure structured logging for the command line.

    Diagnostics are written to stderr so localized messages on stdout stay
    clean. Only warnings and errors are shown unless a lower level is asked
    for.

    Args:
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.AURA_LOG_LEVEL if not provided.
        log_format: Optional override for the output format ("console" or
            "json"). Defaults to settings.AURA_LOG_FORMAT if not provided.

    Returns:
        Configured logger instance
    """
    # Suppress all logging during tests
    if _is_test_environment():
        logging.root.setLevel(logging.CRITICAL + 1)

        # Basic processors keep structlog happy; the root level keeps it quiet
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(
            format="%(message)s",
            level=logging.CRITICAL + 1,
            force=True,
        )
        return structlog.stdlib.get_logger()

    structlog.configure(
        processors=build_processors(log_format or settings.AURA_LOG_FORMAT),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or settings.AURA_LOG_LEVEL
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, effective_log_level.upper(), logging.WARNING),
    )

    return structlog.stdlib.get_logger()


# Module-level logger (auto-configured on import)
logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module with full path context.

    Automatically detects the calling module and binds component
    and module_path context for structured logging.

    Returns:
        Configured logger instance with module context

    Example:
        # In modules/pacman/commands.py
        logger = get_module_logger()
        # logger has context: {"component": "commands", "module_path": "modules.pacman.commands"}

        logger.error("pacman_failed", args=["-Syu"])
    """
    current_frame = inspect.currentframe()
    if current_frame is None:
        return logger

    frame = current_frame.f_back
    if frame is None:
        return logger

    module = inspect.getmodule(frame)
    if module:
        module_name = module.__name__
        parts = module_name.split(".")
        context = {
            "component": parts[-1],
            "module_path": module_name,
        }
        return logger.bind(**context)

    return logger.bind(component="unknown")
