from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .board import Board
from .grid import Grid, GridPos, chebyshev
from .unit import Unit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttackResult:
    attacker_id: str
    target_id: str
    damage: int
    hp_after: int
    downed: bool


def unit_at(units: Iterable[Unit], p: GridPos) -> Optional[Unit]:
    """Live unit standing on p, if any."""
    for u in units:
        if u.alive and u.pos == p:
            return u
    return None


def can_target(attacker: Unit, target: Unit) -> bool:
    return (
        attacker.alive
        and target.alive
        and attacker.opposes(target)
        and chebyshev(attacker.pos, target.pos) <= attacker.attack_range
    )


def targets_in_range(attacker: Unit, units: Iterable[Unit]) -> List[Unit]:
    return [u for u in units if can_target(attacker, u)]


def attack_cells(grid: Grid, unit: Unit) -> List[GridPos]:
    """In-bounds cells within attack range, excluding the unit's own cell."""
    cells: List[GridPos] = []
    rng = unit.attack_range
    for dr in range(-rng, rng + 1):
        for dq in range(-rng, rng + 1):
            if dq == 0 and dr == 0:
                continue
            p = unit.pos.offset(dq, dr)
            if grid.in_bounds(p):
                cells.append(p)
    return cells


def resolve_attack(attacker: Unit, target: Unit, board: Board) -> AttackResult:
    """
    Deal attacker.attack_damage to target. A target brought to 0 hp is downed
    and leaves the occupancy set in the same call.
    """
    dealt = target.take_damage(attacker.attack_damage)
    if target.downed:
        board.vacate(target.pos)
        logger.info("%s downed by %s", target.name, attacker.name)
    else:
        logger.info("%s hits %s for %d (%d/%d)", attacker.name, target.name, dealt, target.hp, target.max_hp)
    return AttackResult(attacker.id, target.id, dealt, target.hp, target.downed)
