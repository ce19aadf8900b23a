"""
Placement math for the two spritesheet layouts.

Strip layout:
  One column. Each image sits at x=0, directly below the previous one.
  Canvas width = widest image, canvas height = sum of heights.

Grid layout:
  One row per subfolder, each row a band maxHeight tall. Images within a
  row are packed left to right with no gap and anchored to the top of the
  band. Canvas width = widest row (sum of its image widths), canvas
  height = maxHeight * row count.

These functions only deal with sizes; no pixels are touched here.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Tuple

from spritesheet.errors import EmptyInputError

Size = Tuple[int, int]
SizedPath = Tuple[Path, Size]


@dataclass(frozen=True)
class Placement:
    path: Path
    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class LayoutPlan:
    """Canvas size plus where every source image lands on it."""

    width: int
    height: int
    placements: Tuple[Placement, ...]
    rows: int
    columns: int

    @property
    def size(self) -> Size:
        return (self.width, self.height)


def plan_strip(sizes: Sequence[SizedPath]) -> LayoutPlan:
    if not sizes:
        raise EmptyInputError("Planning strip failed: no images to stack")

    placements: List[Placement] = []
    y = 0
    for path, (width, height) in sizes:
        placements.append(Placement(path, 0, y, width, height))
        y += height

    max_width = max(width for _, (width, _) in sizes)
    return LayoutPlan(
        width=max_width,
        height=y,
        placements=tuple(placements),
        rows=len(sizes),
        columns=1,
    )


def plan_grid(rows: Sequence[Sequence[SizedPath]]) -> LayoutPlan:
    if not rows or not any(rows):
        raise EmptyInputError("Planning grid failed: no images in any subfolder")

    max_height = max(height for row in rows for _, (_, height) in row)
    max_columns = max(len(row) for row in rows)
    max_row_width = max(sum(width for _, (width, _) in row) for row in rows)

    placements: List[Placement] = []
    for row_index, row in enumerate(rows):
        y = row_index * max_height
        x = 0
        for path, (width, height) in row:
            placements.append(Placement(path, x, y, width, height))
            x += width

    return LayoutPlan(
        width=max_row_width,
        height=max_height * len(rows),
        placements=tuple(placements),
        rows=len(rows),
        columns=max_columns,
    )
