from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

# Fixed enumeration order keeps searches reproducible.
CARDINAL_DELTAS: Tuple[Tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
DIAGONAL_DELTAS: Tuple[Tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))


@dataclass(frozen=True)
class GridPos:
    q: int  # column
    r: int  # row

    @property
    def key(self) -> str:
        return key_of(self)

    def offset(self, dq: int, dr: int) -> "GridPos":
        return GridPos(self.q + dq, self.r + dr)

    def __iter__(self):
        yield self.q
        yield self.r


def key_of(p: GridPos) -> str:
    return f"{p.q},{p.r}"


def parse_key(k: str) -> GridPos:
    q, r = k.split(",")
    return GridPos(int(q), int(r))


def chebyshev(a: GridPos, b: GridPos) -> int:
    """Distance where a diagonal step costs the same as a straight one."""
    return max(abs(a.q - b.q), abs(a.r - b.r))


class Grid:
    def __init__(self, cols: int, rows: int) -> None:
        if cols <= 0 or rows <= 0:
            raise ValueError(f"grid must be non-empty, got {cols}x{rows}")
        self.cols = cols
        self.rows = rows

    def in_bounds(self, p: GridPos) -> bool:
        return 0 <= p.q < self.cols and 0 <= p.r < self.rows

    def _around(self, p: GridPos, deltas) -> List[GridPos]:
        out: List[GridPos] = []
        for dq, dr in deltas:
            n = p.offset(dq, dr)
            if self.in_bounds(n):
                out.append(n)
        return out

    def neighbors8(self, p: GridPos) -> List[GridPos]:
        """Cardinal cells first (E, W, S, N), then diagonals (SE, NE, SW, NW)."""
        return self._around(p, CARDINAL_DELTAS + DIAGONAL_DELTAS)

    def neighbors4(self, p: GridPos) -> List[GridPos]:
        return self._around(p, CARDINAL_DELTAS)

    def cells(self) -> List[GridPos]:
        """Every in-bounds cell, row-major."""
        return [GridPos(q, r) for r in range(self.rows) for q in range(self.cols)]
