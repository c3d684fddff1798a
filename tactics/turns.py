from __future__ import annotations
import copy
import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Deque, FrozenSet, List, Mapping, Optional, Tuple

import settings as S

from .board import Board, Tile
from .combat import attack_cells, resolve_attack, targets_in_range, unit_at
from .effects import Effect, apply_end_of_move
from .enemy import take_turn
from .grid import GridPos, key_of
from .pathfinding import Reachability, bfs_reachable, reconstruct_path
from .unit import Allegiance, Unit

logger = logging.getLogger(__name__)


class Phase(Enum):
    PLAYER_MOVE = auto()
    PLAYER_ATTACK = auto()
    ENEMY_TURN = auto()


class Action(Enum):
    IGNORED = auto()
    MOVE_STARTED = auto()
    WAITED = auto()
    ATTACKED = auto()
    PASSED = auto()


@dataclass(frozen=True)
class Snapshot:
    """Read-only view handed to the presentation layer."""
    phase: Phase
    turn: int
    selected: bool
    moving: bool
    tiles: Tuple[Tile, ...]
    units: Tuple[Unit, ...]
    reachable: FrozenSet[str]
    came_from: Mapping[str, Optional[str]]
    attack_cells: FrozenSet[GridPos]
    log: Tuple[str, ...]


class TurnManager:
    """
    Owns the roster and the board and decides what each cell activation means
    in the current phase.

    Moves play out one cell per `step_time` seconds and the enemy turn starts
    `enemy_delay` seconds after the player attacks; both are pumped by
    `update(dt)`. Input is refused while either is pending.
    """

    def __init__(
        self,
        board: Board,
        units: List[Unit],
        step_time: float = S.MOVE_STEP_TIME,
        enemy_delay: float = S.ENEMY_TURN_DELAY,
    ) -> None:
        controlled = [u for u in units if u.allegiance is Allegiance.CONTROLLED]
        if len(controlled) != 1:
            raise ValueError(f"roster needs exactly one controlled unit, got {len(controlled)}")
        self.board = board
        self.units = list(units)
        self.player = controlled[0]
        self.step_time = step_time
        self.enemy_delay = enemy_delay

        # Validate the whole roster before touching the board's occupancy.
        ids = set()
        taken = set()
        for u in self.units:
            if u.id in ids:
                raise ValueError(f"duplicate unit id {u.id!r}")
            ids.add(u.id)
            if not board.is_walkable(u.pos):
                raise ValueError(f"{u.id} placed on blocked or missing tile {tuple(u.pos)}")
            if u.alive:
                if u.pos.key in taken or board.is_occupied(u.pos):
                    raise ValueError(f"{u.id} shares tile {tuple(u.pos)} with another unit")
                taken.add(u.pos.key)
        for u in self.units:
            if u.alive:
                board.occupy(u.pos)

        self.turn: int = 1
        self.phase: Phase = Phase.PLAYER_MOVE
        self.selected = True
        self.log: List[str] = []

        self._path: Deque[GridPos] = deque()
        self._step_timer = 0.0
        self._enemy_timer = 0.0
        self._reach: Optional[Reachability] = None
        self._reach_rev = -1

    # ---------- Queries ----------

    @property
    def hostiles(self) -> List[Unit]:
        return [u for u in self.units if u.hostile]

    def any_hostile_alive(self) -> bool:
        return any(u.alive for u in self.hostiles)

    def is_moving(self) -> bool:
        return bool(self._path)

    def input_locked(self) -> bool:
        return self.player.downed or self.phase is Phase.ENEMY_TURN or self.is_moving()

    def reachability(self) -> Optional[Reachability]:
        """Move range for the overlay, or None when no move is currently possible."""
        if self.phase is not Phase.PLAYER_MOVE or not self.selected or self.input_locked():
            return None
        if self._reach is None or self._reach_rev != self.board.revision:
            self._reach = bfs_reachable(self.board, self.player.pos, self.player.move_range)
            self._reach_rev = self.board.revision
        return self._reach

    def attack_range_cells(self) -> List[GridPos]:
        if self.phase is not Phase.PLAYER_ATTACK or self.player.downed:
            return []
        return attack_cells(self.board.grid, self.player)

    def snapshot(self) -> Snapshot:
        reach = self.reachability()
        return Snapshot(
            phase=self.phase,
            turn=self.turn,
            selected=self.selected,
            moving=self.is_moving(),
            tiles=tuple(copy.copy(t) for t in self.board),
            units=tuple(copy.copy(u) for u in self.units),
            reachable=frozenset(reach.reachable) if reach else frozenset(),
            came_from=MappingProxyType(dict(reach.came_from) if reach else {}),
            attack_cells=frozenset(self.attack_range_cells()),
            log=tuple(self.log[-S.LOG_LINES:]),
        )

    # ---------- Input ----------

    def activate(self, p: GridPos) -> Action:
        """Interpret a click on cell p for the current phase."""
        if self.input_locked():
            logger.debug("input ignored at %s: locked", key_of(p))
            return Action.IGNORED
        if not self.board.grid.in_bounds(p):
            return Action.IGNORED

        if self.phase is Phase.PLAYER_MOVE:
            if p == self.player.pos:
                return self._wait()
            return self._begin_move(p)
        if self.phase is Phase.PLAYER_ATTACK:
            return self._attack(p)
        return Action.IGNORED

    def _wait(self) -> Action:
        self._note(f"{self.player.name} waits at {key_of(self.player.pos)}")
        self._end_player_move()
        return Action.WAITED

    def _begin_move(self, dest: GridPos) -> Action:
        if not self.selected:
            return Action.IGNORED
        reach = self.reachability()
        if reach is None or dest not in reach:
            logger.debug("move to %s ignored: out of reach", key_of(dest))
            return Action.IGNORED
        path = reconstruct_path(reach.came_from, self.player.pos, dest)
        if len(path) <= 1:
            return Action.IGNORED

        self._path = deque(path[1:])
        self._step_timer = 0.0
        self.selected = False
        self._reach = None
        logger.info("%s moves %s -> %s (%d steps)", self.player.name, key_of(self.player.pos), key_of(dest), len(path) - 1)
        return Action.MOVE_STARTED

    def _attack(self, p: GridPos) -> Action:
        # The unit's own cell is always in range and never holds a target,
        # so clicking it passes.
        if not self.player.in_attack_range(p):
            logger.debug("attack at %s ignored: out of range", key_of(p))
            return Action.IGNORED

        target = unit_at(targets_in_range(self.player, self.units), p)
        if target is None:
            self._note(f"{self.player.name} passes")
            self._start_enemy_turn()
            return Action.PASSED

        res = resolve_attack(self.player, target, self.board)
        if res.downed:
            self._note(f"{self.player.name} downs {target.name}")
        else:
            self._note(f"{self.player.name} hits {target.name} for {res.damage}")
        self._start_enemy_turn()
        return Action.ATTACKED

    # ---------- Movement steps ----------

    def step_move(self) -> Optional[GridPos]:
        """Advance the in-flight move by one cell. Returns the cell entered."""
        if not self._path:
            return None
        nxt = self._path.popleft()
        self.board.relocate(self.player.pos, nxt)
        self.player.pos = nxt
        if not self._path:
            self._end_player_move()
        return nxt

    def finish_move(self) -> None:
        while self._path:
            self.step_move()

    def _end_player_move(self) -> None:
        tile = self.board.tile_at(self.player.pos)
        effect = apply_end_of_move(self.player, tile)
        if effect is Effect.POLLUTION:
            self._note(f"Polluted ground! {self.player.name} loses energy ({self.player.energy})")
        elif effect is Effect.RECOVERY:
            self._note(f"{self.player.name} recovers on {tile.terrain.value} ({self.player.hp} hp, {self.player.energy} energy)")
        self.phase = Phase.PLAYER_ATTACK
        self.selected = True
        self._reach = None

    # ---------- Enemy phase ----------

    def _start_enemy_turn(self) -> None:
        self.phase = Phase.ENEMY_TURN
        self.selected = False
        self._reach = None
        self._enemy_timer = self.enemy_delay
        logger.info("enemy turn %d starts", self.turn)

    def run_enemy_turn(self) -> None:
        if self.phase is not Phase.ENEMY_TURN:
            return
        if not self.any_hostile_alive():
            self._note("All enemies downed.")
            self._begin_player_turn()
            return

        for e in self.units:
            if not e.hostile or e.downed:
                continue
            if self.player.downed:
                break
            report = take_turn(e, self.player, self.board)
            if report.attack is not None:
                if report.attack.downed:
                    self._note(f"{e.name} downs {self.player.name}!")
                else:
                    self._note(f"{e.name} hits {self.player.name} for {report.attack.damage}")

        self._begin_player_turn()

    def _begin_player_turn(self) -> None:
        self.phase = Phase.PLAYER_MOVE
        self.turn += 1
        self.selected = self.player.alive
        self._reach = None
        logger.info("turn %d: player phase", self.turn)

    # ---------- Clock ----------

    def update(self, dt: float) -> bool:
        """
        Pump pending move steps and the delayed enemy turn.
        Returns True if we just transitioned back to PLAYER_MOVE (new turn).
        """
        if self._path:
            self._step_timer += dt
            while self._path and self._step_timer >= self.step_time:
                self._step_timer -= self.step_time
                self.step_move()
            return False

        if self.phase is Phase.ENEMY_TURN:
            self._enemy_timer -= dt
            if self._enemy_timer <= 0.0:
                self.run_enemy_turn()
                return True
        return False

    def _note(self, msg: str) -> None:
        self.log.append(msg)
        logger.info(msg)
