from __future__ import annotations
from enum import Enum, auto

import settings as S

from .board import Tile
from .unit import Unit


class Effect(Enum):
    NONE = auto()
    POLLUTION = auto()
    RECOVERY = auto()


def end_of_move_effect(unit: Unit, tile: Tile) -> Effect:
    # Pollution wins over home terrain.
    if tile.polluted:
        return Effect.POLLUTION
    if tile.terrain in unit.home_terrains:
        return Effect.RECOVERY
    return Effect.NONE


def apply_end_of_move(unit: Unit, tile: Tile) -> Effect:
    """Apply the tile's effect to a unit that just finished moving (or waited) on it."""
    effect = end_of_move_effect(unit, tile)
    if effect is Effect.POLLUTION:
        unit.drain_energy(S.POLLUTION_ENERGY_PENALTY)
    elif effect is Effect.RECOVERY:
        unit.heal(S.HOME_HP_RECOVERY)
        unit.restore_energy(S.HOME_ENERGY_RECOVERY)
    return effect
