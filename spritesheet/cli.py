#!/usr/bin/env python3
"""
Spritesheet builder command line.

Usage:
    spritesheet a <folder>           # strip: stack every PNG vertically
    spritesheet action <folder>
    spritesheet i <folder>           # grid: one row per subfolder
    spritesheet individual <folder>

Output:
    <folder>/spritesheet.png (or the name given with --output)

Exit status is 0 on success, 1 when a build step fails and 2 on a usage
error.
"""

from __future__ import annotations

import argparse
import enum
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional

from spritesheet import console
from spritesheet.compose import ComposeResult, compose_grid, compose_strip
from spritesheet.errors import SpritesheetError, UsageError
from spritesheet.scanner import OUTPUT_FILENAME, PNG_SUFFIX

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


class Mode(enum.Enum):
    STRIP = "strip"
    GRID = "grid"

    @classmethod
    def parse(cls, token: str) -> "Mode":
        try:
            return _MODE_ALIASES[token.lower()]
        except KeyError:
            raise UsageError(
                f"Unknown mode {token!r}; expected one of: {', '.join(_MODE_ALIASES)}"
            ) from None


_MODE_ALIASES: Dict[str, Mode] = {
    "a": Mode.STRIP,
    "action": Mode.STRIP,
    "i": Mode.GRID,
    "individual": Mode.GRID,
}

COMPOSERS: Dict[Mode, Callable[[Path, str], ComposeResult]] = {
    Mode.STRIP: compose_strip,
    Mode.GRID: compose_grid,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spritesheet",
        description="Pack a folder of PNG sprites into a single spritesheet.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "mode",
        help="a/action stacks the folder's PNGs vertically; "
        "i/individual builds one row per subfolder.",
    )
    parser.add_argument("folder", type=Path, help="Folder holding the sprites.")
    parser.add_argument(
        "--output",
        default=OUTPUT_FILENAME,
        help="Filename of the spritesheet written into the folder.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only print the final result or error.",
    )
    return parser


def validate_output_name(name: str) -> str:
    if not name or Path(name).name != name or name in (".", ".."):
        raise UsageError(f"Output must be a bare filename, got {name!r}")
    if not name.endswith(PNG_SUFFIX):
        raise UsageError(f"Output filename must end in {PNG_SUFFIX}, got {name!r}")
    return name


def validate_folder(folder: Path) -> Path:
    if not folder.exists():
        raise UsageError(f"Folder not found: {folder}")
    if not folder.is_dir():
        raise UsageError(f"Not a folder: {folder}")
    return folder


def report(mode: Mode, result: ComposeResult) -> None:
    console.success(f"Spritesheet created successfully: {result.output_path}")
    console.success(f"Size: {result.width}x{result.height}")
    if mode is Mode.STRIP:
        console.success(f"Rows: {result.rows}")
    else:
        console.success(f"Max columns: {result.columns}, rows (subfolders): {result.rows}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    console.set_quiet(args.quiet)

    try:
        mode = Mode.parse(args.mode)
        output_name = validate_output_name(args.output)
        folder = validate_folder(args.folder)
    except UsageError as exc:
        console.fail(str(exc))
        parser.print_usage(sys.stderr)
        return EXIT_USAGE

    try:
        result = COMPOSERS[mode](folder, output_name)
    except SpritesheetError as exc:
        console.fail(str(exc))
        return EXIT_FAILURE

    report(mode, result)
    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
