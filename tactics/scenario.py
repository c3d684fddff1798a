from __future__ import annotations
import logging
from typing import Any, Dict, List, Mapping, Optional

import settings as S

from .board import Board, Terrain
from .grid import Grid, GridPos
from .turns import TurnManager
from .unit import Allegiance, Unit

logger = logging.getLogger(__name__)


def terrain_band(q: int, r: int) -> Terrain:
    """Deterministic vertical bands: water, then grass/stone, sand/grass, lava/ice."""
    if q <= 2:
        return Terrain.WATER
    if q <= 5:
        return Terrain.STONE if r % 3 == 0 else Terrain.GRASS
    if q <= 8:
        return Terrain.SAND if r % 2 == 0 else Terrain.GRASS
    return Terrain.ICE if r % 3 == 0 else Terrain.LAVA


def build_board(cols: int = S.GRID_COLS, rows: int = S.GRID_ROWS, obstacles=S.OBSTACLES) -> Board:
    board = Board(Grid(cols, rows), terrain_band)
    board.add_obstacles(obstacles)
    return board


def unit_from_entry(entry: Mapping[str, Any], allegiance: Allegiance) -> Unit:
    q, r = entry["pos"]
    return Unit(
        id=entry["id"],
        name=entry["name"],
        allegiance=allegiance,
        pos=GridPos(q, r),
        max_hp=entry["max_hp"],
        hp=entry.get("hp"),
        energy=entry.get("energy", 0),
        move_range=entry.get("move_range", 0),
        attack_range=entry.get("attack_range", 0),
        attack_damage=entry.get("attack_damage", 0),
        home_terrains=frozenset(Terrain(t) for t in entry.get("home_terrains", ())),
    )


def build_units(
    player: Optional[Dict[str, Any]] = None,
    enemies: Optional[List[Dict[str, Any]]] = None,
) -> List[Unit]:
    """Roster order matters: it is the order hostiles act in."""
    units = [unit_from_entry(player or S.PLAYER_UNIT, Allegiance.CONTROLLED)]
    for entry in S.ENEMY_UNITS if enemies is None else enemies:
        units.append(unit_from_entry(entry, Allegiance.HOSTILE))
    return units


def build_encounter(board: Optional[Board] = None, units: Optional[List[Unit]] = None) -> TurnManager:
    board = board if board is not None else build_board()
    units = units if units is not None else build_units()
    tm = TurnManager(board, units)
    logger.info("encounter ready: %dx%d board, %d hostiles", board.cols, board.rows, len(tm.hostiles))
    return tm
