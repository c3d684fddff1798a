"""Tests for grid coordinates and adjacency."""
import pytest

from tactics.grid import Grid, GridPos, chebyshev, key_of, parse_key


@pytest.fixture
def grid():
    return Grid(12, 10)


class TestGridPos:
    def test_structural_equality_and_key(self):
        a = GridPos(3, 4)
        b = GridPos(3, 4)
        assert a == b
        assert hash(a) == hash(b)
        assert key_of(a) == key_of(b) == a.key == "3,4"

    def test_parse_key_inverts_key_of(self):
        for p in (GridPos(0, 0), GridPos(11, 9), GridPos(-2, 7)):
            assert parse_key(key_of(p)) == p

    def test_chebyshev(self):
        assert chebyshev(GridPos(0, 0), GridPos(3, -2)) == 3
        assert chebyshev(GridPos(5, 5), GridPos(6, 6)) == 1
        assert chebyshev(GridPos(2, 2), GridPos(2, 2)) == 0


class TestGrid:
    def test_in_bounds(self, grid):
        assert grid.in_bounds(GridPos(0, 0))
        assert grid.in_bounds(GridPos(11, 9))
        assert not grid.in_bounds(GridPos(12, 0))
        assert not grid.in_bounds(GridPos(0, 10))
        assert not grid.in_bounds(GridPos(-1, 3))

    def test_neighbors8_order_in_open_space(self, grid):
        """Cardinals first, then diagonals, in a fixed order."""
        got = grid.neighbors8(GridPos(5, 5))
        assert got == [
            GridPos(6, 5), GridPos(4, 5), GridPos(5, 6), GridPos(5, 4),
            GridPos(6, 6), GridPos(6, 4), GridPos(4, 6), GridPos(4, 4),
        ]

    def test_neighbors8_filters_out_of_bounds(self, grid):
        assert grid.neighbors8(GridPos(0, 0)) == [GridPos(1, 0), GridPos(0, 1), GridPos(1, 1)]

    def test_neighbors4(self, grid):
        assert grid.neighbors4(GridPos(5, 5)) == [GridPos(6, 5), GridPos(4, 5), GridPos(5, 6), GridPos(5, 4)]
        assert grid.neighbors4(GridPos(11, 9)) == [GridPos(10, 9), GridPos(11, 8)]

    def test_cells_covers_grid(self, grid):
        cells = grid.cells()
        assert len(cells) == 120
        assert len(set(cells)) == 120

    def test_empty_grid_rejected(self):
        with pytest.raises(ValueError):
            Grid(0, 5)
