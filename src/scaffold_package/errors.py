"""Exception types raised by the scaffolding commands."""

from __future__ import annotations

__all__ = ["ScaffoldError", "ValidationError", "WriteError"]


class ScaffoldError(Exception):
    """Base class for errors reported to the operator."""


class ValidationError(ScaffoldError):
    """Raised when the arguments or the target directory are unusable.

    Validation happens before anything touches the filesystem, so nothing has
    been written when this is raised.
    """


class WriteError(ScaffoldError, OSError):
    """Raised when a file cannot be created, read or written.

    Files materialized before the failure are left in place.
    """
