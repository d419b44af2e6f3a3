"""Git errors raised while cloning, pulling and inspecting package repositories."""

from modules.git.errors import GitError, GitErrorKind

__all__ = ["GitError", "GitErrorKind"]
