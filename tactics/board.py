from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, Iterator, Optional, Set, Tuple

from .grid import Grid, GridPos, key_of

logger = logging.getLogger(__name__)


class Terrain(Enum):
    GRASS = "grass"
    WATER = "water"
    SAND = "sand"
    STONE = "stone"
    LAVA = "lava"
    ICE = "ice"


@dataclass
class Tile:
    pos: GridPos
    terrain: Terrain = Terrain.GRASS
    walkable: bool = True
    polluted: bool = False


class Board:
    """
    Per-cell tile data plus the set of cells hosting a live unit.

    `revision` bumps on every occupancy or walkability change so callers can
    tell whether a cached search result still matches the board.
    """

    def __init__(self, grid: Grid, terrain_at: Optional[Callable[[int, int], Terrain]] = None) -> None:
        self.grid = grid
        self.tiles: Dict[str, Tile] = {}
        self.occupied: Set[str] = set()
        self.revision = 0
        for p in grid.cells():
            terrain = terrain_at(p.q, p.r) if terrain_at else Terrain.GRASS
            self.tiles[key_of(p)] = Tile(p, terrain)

    @property
    def cols(self) -> int:
        return self.grid.cols

    @property
    def rows(self) -> int:
        return self.grid.rows

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles.values())

    def tile_at(self, p: GridPos) -> Optional[Tile]:
        return self.tiles.get(key_of(p))

    def is_walkable(self, p: GridPos) -> bool:
        t = self.tile_at(p)
        return t is not None and t.walkable

    def is_occupied(self, p: GridPos) -> bool:
        return key_of(p) in self.occupied

    # --- Terrain ---
    def set_obstacle(self, p: GridPos) -> None:
        t = self.tile_at(p)
        if t is None:
            raise ValueError(f"obstacle {tuple(p)} is outside the {self.cols}x{self.rows} grid")
        if t.walkable:
            t.walkable = False
            self.revision += 1

    def add_obstacles(self, cells: Iterable[Tuple[int, int]]) -> None:
        for q, r in cells:
            self.set_obstacle(GridPos(q, r))

    def pollute(self, p: GridPos) -> bool:
        """Mark a tile polluted. Returns True only the first time."""
        t = self.tile_at(p)
        if t is None or t.polluted:
            return False
        t.polluted = True
        logger.debug("tile %s polluted", key_of(p))
        return True

    # --- Occupancy ---
    def occupy(self, p: GridPos) -> None:
        self.occupied.add(key_of(p))
        self.revision += 1

    def vacate(self, p: GridPos) -> None:
        self.occupied.discard(key_of(p))
        self.revision += 1

    def relocate(self, old: GridPos, new: GridPos) -> None:
        """Move one occupant in a single bookkeeping step."""
        self.occupied.discard(key_of(old))
        self.occupied.add(key_of(new))
        self.revision += 1
