"""PNG decode/encode on top of Pillow."""

from __future__ import annotations

from pathlib import Path

from PIL import Image, UnidentifiedImageError

from spritesheet.errors import DecodeError, EncodeError


def open_image(path: Path) -> Image.Image:
    """
    Load a PNG from disk as an RGBA image.

    The pixel data is read in full before the file is closed, so no handle
    outlives the call. Raises DecodeError if the file is missing,
    unreadable or not a PNG.
    """
    path = Path(path)
    try:
        with Image.open(path) as img:
            if img.format != "PNG":
                raise DecodeError(f"Opening image failed: {path}: not a PNG (found {img.format})")
            img.load()
            return img.convert("RGBA")
    except UnidentifiedImageError as exc:
        raise DecodeError(f"Opening image failed: {path}: not a valid image") from exc
    except Image.DecompressionBombError as exc:
        raise DecodeError(f"Opening image failed: {path}: {exc}") from exc
    except (OSError, SyntaxError, ValueError) as exc:
        # Pillow reports truncated/corrupt chunks as OSError or SyntaxError.
        raise DecodeError(f"Opening image failed: {path}: {exc}") from exc


def save_image(image: Image.Image, path: Path) -> None:
    """Write image to path as PNG, overwriting any existing file."""
    path = Path(path)
    try:
        image.save(path, "PNG")
    except (OSError, ValueError) as exc:
        raise EncodeError(f"Saving spritesheet failed: {path}: {exc}") from exc
