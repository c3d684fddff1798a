"""Shared fixtures for the tactics tests."""
import pytest

from tactics.board import Board, Terrain
from tactics.grid import Grid, GridPos
from tactics.scenario import build_board
from tactics.unit import Allegiance, Unit


@pytest.fixture
def open_board():
    """12x10 all-grass board with no obstacles."""
    return Board(Grid(12, 10))


@pytest.fixture
def scenario_board():
    """12x10 banded board with the three default rocks."""
    return build_board()


@pytest.fixture
def make_player():
    def _make(pos=(3, 4), **kw):
        params = dict(
            id="p1", name="Wheeler", allegiance=Allegiance.CONTROLLED, pos=GridPos(*pos),
            max_hp=1500, energy=1000, move_range=2, attack_range=1, attack_damage=350,
            home_terrains=frozenset({Terrain.LAVA, Terrain.SAND}),
        )
        params.update(kw)
        return Unit(**params)
    return _make


@pytest.fixture
def make_enemy():
    def _make(pos, id="e1", **kw):
        params = dict(
            id=id, name=f"Enemy {id}", allegiance=Allegiance.HOSTILE, pos=GridPos(*pos),
            max_hp=800, move_range=1, attack_range=1, attack_damage=350,
        )
        params.update(kw)
        return Unit(**params)
    return _make
