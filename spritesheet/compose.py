"""
Strip and grid composers.

Both follow the same shape: collect source paths, read sizes, plan the
layout, paste every image onto a transparent RGBA canvas and save the
result as <folder>/<output_name>.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from PIL import Image

from spritesheet import console
from spritesheet.codec import open_image, save_image
from spritesheet.errors import DecodeError, EmptyInputError
from spritesheet.layout import LayoutPlan, Placement, SizedPath, plan_grid, plan_strip
from spritesheet.scanner import OUTPUT_FILENAME, list_subfolders, scan_folder

TRANSPARENT = (0, 0, 0, 0)


@dataclass(frozen=True)
class ComposeResult:
    output_path: Path
    width: int
    height: int
    rows: int
    columns: int


def _new_canvas(plan: LayoutPlan) -> Image.Image:
    return Image.new("RGBA", plan.size, TRANSPARENT)


def _paste(canvas: Image.Image, image: Image.Image, placement: Placement) -> None:
    # No mask: source pixels (alpha included) replace the canvas region.
    canvas.paste(image, (placement.x, placement.y))


def _finish(canvas: Image.Image, plan: LayoutPlan, output_path: Path) -> ComposeResult:
    console.step(f"Saving {plan.width}x{plan.height} spritesheet")
    save_image(canvas, output_path)
    return ComposeResult(
        output_path=output_path,
        width=plan.width,
        height=plan.height,
        rows=plan.rows,
        columns=plan.columns,
    )


def compose_strip(folder: Path, output_name: str = OUTPUT_FILENAME) -> ComposeResult:
    """Stack every PNG in folder vertically, in filename order."""
    folder = Path(folder)
    console.step(f"Scanning {folder}")
    paths = scan_folder(folder, exclude=(output_name,))
    if not paths:
        raise EmptyInputError(f"Scanning folder failed: no PNG files in {folder}")

    images = []
    for path in paths:
        images.append(open_image(path))

    plan = plan_strip([(path, img.size) for path, img in zip(paths, images)])

    canvas = _new_canvas(plan)
    for img, placement in zip(images, plan.placements):
        _paste(canvas, img, placement)

    return _finish(canvas, plan, folder / output_name)


def _read_sizes(subfolder: Path, output_name: str) -> List[SizedPath]:
    sizes: List[SizedPath] = []
    for path in scan_folder(subfolder, exclude=(output_name,)):
        sizes.append((path, open_image(path).size))
    return sizes


def compose_grid(folder: Path, output_name: str = OUTPUT_FILENAME) -> ComposeResult:
    """
    Build one row per subfolder of folder, packing each subfolder's PNGs
    left to right.

    Runs in two passes. The sizing pass decodes every image to learn its
    dimensions; only once it completes is the canvas allocated. The drawing
    pass decodes the images again and pastes them at their planned offsets.
    Any failure aborts the run before anything is written.
    """
    folder = Path(folder)
    console.step(f"Listing subfolders of {folder}")
    subfolders = list_subfolders(folder)
    if not subfolders:
        raise EmptyInputError(f"Listing subfolders failed: no subfolders in {folder}")

    rows: List[List[SizedPath]] = []
    for subfolder in subfolders:
        sizes = _read_sizes(subfolder, output_name)
        if not sizes:
            console.warn(f"No PNG files in {subfolder}; leaving its row empty")
        rows.append(sizes)

    plan = plan_grid(rows)
    console.step(f"Drawing {plan.rows} rows, up to {plan.columns} columns")

    canvas = _new_canvas(plan)
    for placement in plan.placements:
        img = open_image(placement.path)
        if img.size != (placement.width, placement.height):
            raise DecodeError(
                f"Opening image failed: {placement.path} changed size during the run "
                f"({placement.width}x{placement.height} -> {img.width}x{img.height})"
            )
        _paste(canvas, img, placement)

    return _finish(canvas, plan, folder / output_name)
