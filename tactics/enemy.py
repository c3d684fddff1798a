from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .board import Board
from .combat import AttackResult, can_target, resolve_attack
from .grid import GridPos
from .pathfinding import route_toward
from .unit import Unit

logger = logging.getLogger(__name__)


@dataclass
class EnemyReport:
    unit_id: str
    start: GridPos
    steps: List[GridPos] = field(default_factory=list)
    attack: Optional[AttackResult] = None

    @property
    def moved(self) -> bool:
        return bool(self.steps)


def plan_advance(route: List[GridPos], move_range: int, target: GridPos) -> List[GridPos]:
    """
    Cells to step onto along `route` (which starts at the mover's own cell).
    Takes up to move_range steps and stops short of the target's cell.
    """
    steps: List[GridPos] = []
    for p in route[1:move_range + 1]:
        if p == target:
            break
        steps.append(p)
    return steps


def take_turn(unit: Unit, target: Unit, board: Board) -> EnemyReport:
    """Advance toward target unless already in range, then attack if able."""
    report = EnemyReport(unit.id, unit.pos)

    if not unit.in_attack_range(target.pos):
        route = route_toward(board, unit.pos, target.pos)
        if len(route) > 1:
            steps = plan_advance(route, unit.move_range, target.pos)
            if steps:
                for p in steps:
                    board.pollute(p)
                board.relocate(unit.pos, steps[-1])
                unit.pos = steps[-1]
                report.steps = steps
                logger.debug("%s advances %s -> %s", unit.name, tuple(report.start), tuple(unit.pos))
        else:
            logger.debug("%s has no route to %s", unit.name, target.name)

    if can_target(unit, target):
        report.attack = resolve_attack(unit, target, board)
    return report
