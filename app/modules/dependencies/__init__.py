"""Errors raised while resolving a package's dependency graph."""

from modules.dependencies.errors import DependencyError, DependencyErrorKind

__all__ = ["DependencyError", "DependencyErrorKind"]
