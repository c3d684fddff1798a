from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional

import settings as S

from .board import Terrain
from .grid import GridPos, chebyshev


class Allegiance(Enum):
    CONTROLLED = "controlled"
    HOSTILE = "hostile"


@dataclass(eq=False)
class Unit:
    id: str
    name: str
    allegiance: Allegiance
    pos: GridPos
    max_hp: int
    move_range: int = 0
    attack_range: int = 0
    attack_damage: int = 0
    hp: Optional[int] = None  # defaults to max_hp
    energy: int = 0
    home_terrains: FrozenSet[Terrain] = field(default_factory=frozenset)
    downed: bool = False

    def __post_init__(self) -> None:
        if self.max_hp <= 0:
            raise ValueError(f"{self.id}: max_hp must be positive, got {self.max_hp}")
        for attr in ("move_range", "attack_range", "attack_damage"):
            if getattr(self, attr) < 0:
                raise ValueError(f"{self.id}: {attr} must be >= 0")
        if self.hp is None:
            self.hp = self.max_hp
        if not 0 <= self.hp <= self.max_hp:
            raise ValueError(f"{self.id}: hp {self.hp} outside 0..{self.max_hp}")
        if not 0 <= self.energy <= S.ENERGY_MAX:
            raise ValueError(f"{self.id}: energy {self.energy} outside 0..{S.ENERGY_MAX}")
        self.home_terrains = frozenset(self.home_terrains)
        self.downed = self.hp == 0

    @property
    def hostile(self) -> bool:
        return self.allegiance is Allegiance.HOSTILE

    @property
    def alive(self) -> bool:
        return not self.downed

    def opposes(self, other: "Unit") -> bool:
        return self.allegiance is not other.allegiance

    def in_attack_range(self, p: GridPos) -> bool:
        return chebyshev(self.pos, p) <= self.attack_range

    # --- Health / energy ---
    def take_damage(self, amount: int) -> int:
        """Apply damage, clamp at zero and mark downed. Returns damage dealt."""
        dealt = min(self.hp, max(0, amount))
        self.hp -= dealt
        if self.hp == 0:
            self.downed = True
        return dealt

    def heal(self, amount: int) -> int:
        before = self.hp
        self.hp = min(self.max_hp, self.hp + amount)
        return self.hp - before

    def restore_energy(self, amount: int) -> int:
        before = self.energy
        self.energy = min(S.ENERGY_MAX, self.energy + amount)
        return self.energy - before

    def drain_energy(self, amount: int) -> int:
        before = self.energy
        self.energy = max(0, self.energy - amount)
        return before - self.energy
