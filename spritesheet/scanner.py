"""Directory listing helpers: PNG files and subfolders of a folder."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, List

from spritesheet.errors import FilesystemError

OUTPUT_FILENAME = "spritesheet.png"
PNG_SUFFIX = ".png"


def _list_entries(folder: Path, keep: Callable[[Path], bool]) -> List[Path]:
    # Per-entry stat calls can fail too (readable but not searchable folder).
    try:
        entries = [entry for entry in folder.iterdir() if keep(entry)]
    except OSError as exc:
        raise FilesystemError(f"Scanning folder failed: {folder}: {exc.strerror or exc}") from exc
    return sorted(entries, key=lambda path: path.name)


def scan_folder(folder: Path, exclude: Iterable[str] = (OUTPUT_FILENAME,)) -> List[Path]:
    """
    Return the PNG files directly inside folder, sorted by name.

    Only files whose suffix is exactly ".png" qualify (".PNG" does not).
    Directories and any name listed in exclude are skipped, so a previous
    spritesheet in the same folder is not picked up as input.
    """
    skipped = set(exclude)
    return _list_entries(
        Path(folder),
        lambda entry: entry.suffix == PNG_SUFFIX and entry.name not in skipped and entry.is_file(),
    )


def list_subfolders(folder: Path) -> List[Path]:
    """Return the directories directly inside folder, sorted by name."""
    return _list_entries(Path(folder), lambda entry: entry.is_dir())
