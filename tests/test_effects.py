"""Tests for end-of-move terrain effects."""
from tactics.board import Terrain, Tile
from tactics.effects import Effect, apply_end_of_move, end_of_move_effect
from tactics.grid import GridPos


def tile(terrain, polluted=False):
    return Tile(GridPos(0, 0), terrain, polluted=polluted)


def test_home_terrain_recovers(make_player):
    p = make_player(hp=1000, energy=500)
    assert apply_end_of_move(p, tile(Terrain.SAND)) is Effect.RECOVERY
    assert p.hp == 1200
    assert p.energy == 750


def test_recovery_capped(make_player):
    p = make_player(hp=1450, energy=900)
    apply_end_of_move(p, tile(Terrain.LAVA))
    assert p.hp == 1500
    assert p.energy == 1000


def test_pollution_beats_home_terrain(make_player):
    """Polluted home tile: energy penalty only, no healing."""
    p = make_player(hp=1000, energy=500)
    assert apply_end_of_move(p, tile(Terrain.SAND, polluted=True)) is Effect.POLLUTION
    assert p.hp == 1000
    assert p.energy == 450


def test_pollution_floors_energy(make_player):
    p = make_player(energy=30)
    apply_end_of_move(p, tile(Terrain.GRASS, polluted=True))
    assert p.energy == 0


def test_foreign_terrain_does_nothing(make_player):
    p = make_player(hp=1000, energy=500)
    assert apply_end_of_move(p, tile(Terrain.WATER)) is Effect.NONE
    assert (p.hp, p.energy) == (1000, 500)


def test_effect_lookup_is_pure(make_player):
    p = make_player(hp=1000, energy=500)
    assert end_of_move_effect(p, tile(Terrain.SAND)) is Effect.RECOVERY
    assert (p.hp, p.energy) == (1000, 500)
