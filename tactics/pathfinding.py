from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from .board import Board
from .grid import GridPos, key_of, parse_key


@dataclass
class Reachability:
    reachable: Set[str] = field(default_factory=set)
    came_from: Dict[str, Optional[str]] = field(default_factory=dict)
    distance: Dict[str, int] = field(default_factory=dict)

    def __contains__(self, p: GridPos) -> bool:
        return key_of(p) in self.reachable


def bfs_reachable(board: Board, start: GridPos, max_steps: int, occupied: Optional[Set[str]] = None) -> Reachability:
    """
    Uniform-cost 8-direction BFS limited by max_steps.

    Diagonals cost 1 like straight steps. Occupied cells are impassable except
    the start cell itself. Nodes at distance == max_steps are not expanded.
    """
    if occupied is None:
        occupied = board.occupied
    grid = board.grid
    start_k = key_of(start)

    result = Reachability()
    result.reachable.add(start_k)
    result.came_from[start_k] = None
    result.distance[start_k] = 0

    frontier = deque([start])
    while frontier:
        cur = frontier.popleft()
        cur_k = key_of(cur)
        d = result.distance[cur_k]
        if d >= max_steps:
            continue
        for n in grid.neighbors8(cur):
            nk = key_of(n)
            if nk in result.distance:
                continue
            if not board.is_walkable(n):
                continue
            if nk in occupied and nk != start_k:
                continue
            result.distance[nk] = d + 1
            result.came_from[nk] = cur_k
            result.reachable.add(nk)
            frontier.append(n)
    return result


def reconstruct_path(came_from: Dict[str, Optional[str]], start: GridPos, goal: GridPos) -> List[GridPos]:
    """Path from start to goal, both included. Empty if goal was never reached."""
    goal_k = key_of(goal)
    if goal_k not in came_from:
        return []
    keys: List[str] = []
    cur: Optional[str] = goal_k
    while cur is not None:
        keys.append(cur)
        cur = came_from.get(cur)
    keys.reverse()
    if keys[0] != key_of(start):
        return []
    return [parse_key(k) for k in keys]


def route_toward(board: Board, start: GridPos, goal: GridPos, occupied: Optional[Set[str]] = None) -> List[GridPos]:
    """
    4-direction BFS from start to goal with no step limit.

    The goal may be occupied (it is usually the target's own cell); every cell
    in between must be walkable and free. Returns start..goal inclusive, or []
    when the goal cannot be reached.
    """
    if occupied is None:
        occupied = board.occupied
    grid = board.grid
    start_k = key_of(start)
    goal_k = key_of(goal)

    came_from: Dict[str, Optional[str]] = {start_k: None}
    frontier = deque([start])
    while frontier:
        cur = frontier.popleft()
        if key_of(cur) == goal_k:
            break
        for n in grid.neighbors4(cur):
            nk = key_of(n)
            if nk in came_from:
                continue
            if not board.is_walkable(n):
                continue
            if nk in occupied and nk != goal_k:
                continue
            came_from[nk] = key_of(cur)
            frontier.append(n)

    return reconstruct_path(came_from, start, goal)
