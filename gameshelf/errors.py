"""Recoverable error kinds surfaced as hints in the instruction panel."""

from __future__ import annotations


class GameshelfError(Exception):
    """Base class; ``str(exc)`` is the user-facing hint text."""


class ValidationError(GameshelfError):
    """A form field is empty, unparsable, or names a missing file."""


class IndexOutOfRange(GameshelfError):
    """A confirmed removal references a tab or item that does not exist."""


class LaunchFailure(GameshelfError):
    """A program could not be spawned or exited with a non-zero status."""


class PersistenceFailure(GameshelfError):
    """The manifest could not be written; in-memory state stays changed."""
