"""Tests for the isometric projection used to map clicks onto the grid."""
import pytest

from tactics.grid import Grid, GridPos
from tactics.iso import IsoProjection


@pytest.fixture
def proj():
    return IsoProjection(64, 32, (640, 90))


@pytest.fixture
def grid():
    return Grid(12, 10)


def test_grid_to_screen(proj):
    assert proj.grid_to_screen(GridPos(0, 0)) == (640, 90)
    assert proj.grid_to_screen(GridPos(1, 0)) == (672, 106)
    assert proj.grid_to_screen(GridPos(0, 1)) == (608, 106)


def test_tile_center(proj):
    assert proj.tile_center(GridPos(2, 3)) == (608, 186)


def test_approx_inverse_at_center(proj):
    assert proj.screen_to_grid_approx(608, 186) == GridPos(2, 3)


def test_pick_every_center(proj, grid):
    for p in grid.cells():
        assert proj.pick(*proj.tile_center(p), grid=grid) == p


def test_pick_near_center(proj, grid):
    cx, cy = proj.tile_center(GridPos(5, 5))
    assert proj.pick(cx + 6, cy - 4, grid=grid) == GridPos(5, 5)


def test_pick_far_off_board(proj, grid):
    assert proj.pick(0, 0, grid=grid) is None


def test_diamond_points(proj):
    assert proj.diamond_points(GridPos(0, 0)) == [(640, 90), (672, 106), (640, 122), (608, 106)]
