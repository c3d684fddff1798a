"""Tests for unit construction and health/energy bookkeeping."""
import pytest

from tactics.grid import GridPos
from tactics.unit import Allegiance, Unit


class TestConstruction:
    def test_hp_defaults_to_max(self, make_enemy):
        e = make_enemy((1, 1))
        assert e.hp == e.max_hp == 800
        assert e.alive and not e.downed

    def test_zero_hp_starts_downed(self, make_enemy):
        assert make_enemy((1, 1), hp=0).downed

    @pytest.mark.parametrize("kw", [
        {"max_hp": 0},
        {"move_range": -1},
        {"attack_range": -1},
        {"attack_damage": -5},
        {"hp": 900},
        {"energy": 1001},
    ])
    def test_invalid_values_rejected(self, make_enemy, kw):
        with pytest.raises(ValueError):
            make_enemy((1, 1), **kw)

    def test_allegiance(self, make_player, make_enemy):
        p = make_player()
        e = make_enemy((4, 4))
        assert not p.hostile and e.hostile
        assert p.opposes(e) and not e.opposes(make_enemy((5, 5), id="e2"))


class TestResources:
    def test_take_damage_clamps_and_downs(self, make_enemy):
        e = make_enemy((1, 1), hp=100)
        assert e.take_damage(350) == 100
        assert e.hp == 0
        assert e.downed

    def test_heal_capped(self, make_player):
        p = make_player(hp=1450)
        assert p.heal(200) == 50
        assert p.hp == 1500

    def test_energy_bounds(self):
        u = Unit("x", "X", Allegiance.CONTROLLED, GridPos(0, 0), max_hp=10, energy=900)
        assert u.restore_energy(250) == 100
        assert u.energy == 1000
        u.energy = 30
        assert u.drain_energy(50) == 30
        assert u.energy == 0
