from pathlib import Path

import pytest

from spritesheet.errors import EmptyInputError
from spritesheet.layout import Placement, plan_grid, plan_strip


def test_plan_strip_stacks_and_sizes():
    plan = plan_strip([(Path("a.png"), (10, 20)), (Path("b.png"), (15, 10))])

    assert plan.size == (15, 30)
    assert plan.rows == 2
    assert plan.columns == 1
    assert plan.placements == (
        Placement(Path("a.png"), 0, 0, 10, 20),
        Placement(Path("b.png"), 0, 20, 15, 10),
    )


def test_plan_strip_empty():
    with pytest.raises(EmptyInputError):
        plan_strip([])


def test_plan_grid_uses_widest_row():
    rows = [
        [(Path("row1/x.png"), (5, 5))],
        [(Path("row2/y.png"), (5, 5)), (Path("row2/z.png"), (5, 5))],
    ]

    plan = plan_grid(rows)

    assert plan.size == (10, 10)
    assert plan.rows == 2
    assert plan.columns == 2
    assert [(p.x, p.y) for p in plan.placements] == [(0, 0), (0, 5), (5, 5)]


def test_plan_grid_width_not_tied_to_height():
    # Wide, short frames: a height * columns canvas would be far too narrow.
    rows = [[(Path("a.png"), (40, 4)), (Path("b.png"), (30, 4))]]

    plan = plan_grid(rows)

    assert plan.size == (70, 4)


def test_plan_grid_bands_use_tallest_image():
    rows = [
        [(Path("a.png"), (4, 2))],
        [(Path("b.png"), (4, 8))],
        [(Path("c.png"), (4, 3))],
    ]

    plan = plan_grid(rows)

    assert plan.height == 24
    assert [p.y for p in plan.placements] == [0, 8, 16]


def test_plan_grid_keeps_band_for_empty_row():
    rows = [[], [(Path("b.png"), (3, 3))]]

    plan = plan_grid(rows)

    assert plan.size == (3, 6)
    assert plan.placements == (Placement(Path("b.png"), 0, 3, 3, 3),)


@pytest.mark.parametrize("rows", [[], [[], []]])
def test_plan_grid_empty(rows):
    with pytest.raises(EmptyInputError):
        plan_grid(rows)
