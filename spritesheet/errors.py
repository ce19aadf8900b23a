"""Exceptions raised while building a spritesheet."""

from __future__ import annotations


class SpritesheetError(RuntimeError):
    """Raised when one of the build steps fails."""


class FilesystemError(SpritesheetError):
    """A directory could not be listed."""


class DecodeError(SpritesheetError):
    """A source file is missing, unreadable or not a valid PNG."""


class EncodeError(SpritesheetError):
    """The spritesheet could not be written."""


class EmptyInputError(SpritesheetError):
    """Nothing to compose: no PNG files or no subfolders."""


class UsageError(SpritesheetError):
    """Bad command-line arguments."""
