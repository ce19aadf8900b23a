"""
Spritesheet builder.

Packs a folder of PNG sprites into a single spritesheet, either as one
vertical strip or as a grid with one row per subfolder.
"""

from spritesheet.compose import ComposeResult, compose_grid, compose_strip
from spritesheet.errors import (
    DecodeError,
    EmptyInputError,
    EncodeError,
    FilesystemError,
    SpritesheetError,
    UsageError,
)
from spritesheet.scanner import OUTPUT_FILENAME

__all__ = [
    "ComposeResult",
    "compose_grid",
    "compose_strip",
    "DecodeError",
    "EmptyInputError",
    "EncodeError",
    "FilesystemError",
    "SpritesheetError",
    "UsageError",
    "OUTPUT_FILENAME",
]

__version__ = "1.0.0"
