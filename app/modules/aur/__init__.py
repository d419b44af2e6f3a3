"""Errors raised while looking up packages in the remote package index."""

from modules.aur.errors import AurError, AurErrorKind

__all__ = ["AurError", "AurErrorKind"]
