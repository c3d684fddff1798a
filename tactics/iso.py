from __future__ import annotations
import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .grid import Grid, GridPos

Point = Tuple[int, int]


@dataclass(frozen=True)
class IsoProjection:
    """
    Classic 2:1 iso projection. `origin` is where the top vertex of tile (0,0)
    lands on screen.

        x = (q - r) * (tile_w // 2) + origin_x
        y = (q + r) * (tile_h // 2) + origin_y
    """
    tile_w: int
    tile_h: int
    origin: Point

    @property
    def half_w(self) -> int:
        return self.tile_w // 2

    @property
    def half_h(self) -> int:
        return self.tile_h // 2

    def grid_to_screen(self, p: GridPos) -> Point:
        """Top vertex of the diamond for p."""
        ox, oy = self.origin
        return (p.q - p.r) * self.half_w + ox, (p.q + p.r) * self.half_h + oy

    def tile_center(self, p: GridPos) -> Point:
        sx, sy = self.grid_to_screen(p)
        return sx, sy + self.half_h

    def screen_to_grid_approx(self, x: float, y: float) -> GridPos:
        """
        Invert the projection about tile centers and round.

            q' = (dx / half_w + dy / half_h) / 2
            r' = (dy / half_h - dx / half_w) / 2
        """
        ox, oy = self.origin
        dx = x - ox
        dy = y - oy - self.half_h
        hw = self.tile_w / 2.0
        hh = self.tile_h / 2.0
        q_f = (dx / hw + dy / hh) / 2.0
        r_f = (dy / hh - dx / hw) / 2.0
        return GridPos(int(round(q_f)), int(round(r_f)))

    def pick(self, x: float, y: float, grid: Grid) -> Optional[GridPos]:
        """In-bounds tile whose center is nearest (x, y), checking around the rounded guess."""
        approx = self.screen_to_grid_approx(x, y)
        best: Optional[GridPos] = None
        best_d = math.inf
        for dr in (-1, 0, 1):
            for dq in (-1, 0, 1):
                p = approx.offset(dq, dr)
                if not grid.in_bounds(p):
                    continue
                cx, cy = self.tile_center(p)
                d = math.hypot(x - cx, y - cy)
                if d < best_d:
                    best_d = d
                    best = p
        return best

    def diamond_points(self, p: GridPos) -> List[Point]:
        """Polygon for p. Order: top -> right -> bottom -> left."""
        tx, ty = self.grid_to_screen(p)
        return [
            (tx, ty),
            (tx + self.half_w, ty + self.half_h),
            (tx, ty + self.tile_h),
            (tx - self.half_w, ty + self.half_h),
        ]
