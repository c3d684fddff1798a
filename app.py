from __future__ import annotations
import logging
import math
import sys
from typing import Dict, Optional

import pygame as pg

import settings as S
from tactics import colors as C
from tactics.grid import Grid, GridPos, parse_key
from tactics.iso import IsoProjection
from tactics.scenario import build_encounter
from tactics.turns import Phase, Snapshot, TurnManager
from tactics.unit import Unit

logger = logging.getLogger(__name__)

PROJ = IsoProjection(S.TILE_W, S.TILE_H, S.ORIGIN)
UNIT_LIFT = 10  # sprites float a little above the tile center


class UnitSprite:
    """Pixel position of a unit, tweened toward its grid cell at constant speed."""

    def __init__(self, unit: Unit, proj: IsoProjection, speed_pps: float = S.MOVE_SPEED_PPS) -> None:
        self.unit_id = unit.id
        self.proj = proj
        self.speed = speed_pps
        cx, cy = proj.tile_center(unit.pos)
        self.pos_x = float(cx)
        self.pos_y = float(cy - UNIT_LIFT)
        self.target = (self.pos_x, self.pos_y)

    def follow(self, cell: GridPos) -> None:
        cx, cy = self.proj.tile_center(cell)
        self.target = (float(cx), float(cy - UNIT_LIFT))

    def update(self, dt: float) -> None:
        tx, ty = self.target
        dx = tx - self.pos_x
        dy = ty - self.pos_y
        dist = math.hypot(dx, dy)
        step = self.speed * dt
        if dist <= step or dist == 0.0:
            # Snap to target
            self.pos_x, self.pos_y = tx, ty
        else:
            self.pos_x += dx / dist * step
            self.pos_y += dy / dist * step

    def is_moving(self) -> bool:
        return (self.pos_x, self.pos_y) != self.target


# ---------- Drawing ----------

def draw_board(surface: pg.Surface, snap: Snapshot) -> None:
    """Terrain-colored diamonds; rocks dark, pollution black."""
    for t in snap.tiles:
        if not t.walkable:
            fill = C.OBSTACLE_FILL
        elif t.polluted:
            fill = C.POLLUTED_FILL
        else:
            fill = C.TERRAIN[t.terrain.value]
        poly = PROJ.diamond_points(t.pos)
        pg.draw.polygon(surface, fill, poly)
        pg.draw.polygon(surface, C.OUTLINE, poly, width=1)


def draw_overlays(surface: pg.Surface, snap: Snapshot, player: Unit) -> None:
    overlay = pg.Surface(surface.get_size(), pg.SRCALPHA)
    for k in snap.reachable:
        p = parse_key(k)
        poly = PROJ.diamond_points(p)
        pg.draw.polygon(overlay, C.MOVE_START_FILL if p == player.pos else C.MOVE_FILL, poly)
        pg.draw.polygon(overlay, C.MOVE_OUTLINE, poly, width=1)
    for p in snap.attack_cells:
        poly = PROJ.diamond_points(p)
        pg.draw.polygon(overlay, C.ATTACK_FILL, poly)
        pg.draw.polygon(overlay, C.ATTACK_OUTLINE, poly, width=1)
    surface.blit(overlay, (0, 0))


def draw_hover(surface: pg.Surface, mouse_pos: tuple[int, int], grid: Grid) -> Optional[GridPos]:
    hov = PROJ.pick(*mouse_pos, grid=grid)
    if hov is not None:
        pg.draw.polygon(surface, C.HOVER_OUTLINE, PROJ.diamond_points(hov), width=2)
    return hov


def draw_units(surface: pg.Surface, snap: Snapshot, sprites: Dict[str, UnitSprite], font: pg.font.Font) -> None:
    r = max(6, S.TILE_H // 3)
    for u in snap.units:
        if u.downed:
            continue
        sp = sprites[u.id]
        c = (int(sp.pos_x), int(sp.pos_y))
        if u.hostile:
            fill, outline = C.ENEMY_FILL, C.ENEMY_OUTLINE
            label = font.render(str(u.hp), True, C.TEXT)
            surface.blit(label, (c[0] - label.get_width() // 2, c[1] - r - label.get_height()))
        else:
            fill = C.UNIT_FILL if snap.selected else C.UNIT_IDLE_FILL
            outline = C.UNIT_OUTLINE
        pg.draw.circle(surface, fill, c, r)
        pg.draw.circle(surface, outline, c, r, width=2)


def draw_bar(surface: pg.Surface, x: int, y: int, pct: float, fg: tuple[int, int, int]) -> None:
    w, h = S.HUD_BAR_W, S.HUD_BAR_H
    p = max(0.0, min(1.0, pct))
    pg.draw.rect(surface, C.BAR_BG, pg.Rect(x, y, w, h), border_radius=6)
    if p > 0:
        pg.draw.rect(surface, fg, pg.Rect(x, y, int(w * p), h), border_radius=6)
    pg.draw.rect(surface, C.BAR_OUTLINE, pg.Rect(x, y, w, h), width=1, border_radius=6)


def phase_hint(phase: Phase, player: Unit) -> str:
    if phase is Phase.PLAYER_MOVE:
        return "MOVE (click a lit tile, or yourself to wait)"
    if phase is Phase.PLAYER_ATTACK:
        return f"ATTACK (range {player.attack_range}: click an enemy; an empty tile or yourself passes)"
    return "ENEMY TURN"


def draw_hud(surface: pg.Surface, snap: Snapshot, player: Unit, font: pg.font.Font) -> None:
    """HP / energy bars bottom-left, phase and recent log top-left."""
    x = 20
    y = S.WINDOW_H - 85
    panel = pg.Rect(x - 10, y - 18, S.HUD_BAR_W + 20, 70)
    pg.draw.rect(surface, C.HUD_PANEL, panel, border_radius=8)
    pg.draw.rect(surface, C.HUD_FRAME, panel, width=1, border_radius=8)
    draw_bar(surface, x, y, player.hp / player.max_hp, C.HP_BAR)
    draw_bar(surface, x, y + S.HUD_BAR_H + S.HUD_BAR_GAP, player.energy / S.ENERGY_MAX, C.ENERGY_BAR)

    phase_txt = phase_hint(snap.phase, player)
    lines = [
        f"Turn {snap.turn}   {phase_txt}",
        f"{player.name}  HP {player.hp}/{player.max_hp}  Energy {player.energy}/{S.ENERGY_MAX}",
    ]
    lines.extend(snap.log)
    ty = 10
    for text in lines:
        surf = font.render(text, True, C.TEXT)
        surface.blit(surf, (12, ty))
        ty += surf.get_height() + 2
    if player.downed:
        surf = font.render(f"{player.name} is down.", True, C.DOWNED_TEXT)
        surface.blit(surf, (12, ty + 6))


# ---------- Main ----------

def main() -> int:
    logging.basicConfig(level=logging.INFO)
    pg.init()
    try:
        screen = pg.display.set_mode((S.WINDOW_W, S.WINDOW_H))
        pg.display.set_caption("Iso Tactics")
        clock = pg.time.Clock()
        font = pg.font.SysFont("consolas", 16)

        tm: TurnManager = build_encounter()
        grid = tm.board.grid
        sprites: Dict[str, UnitSprite] = {u.id: UnitSprite(u, PROJ) for u in tm.units}

        running = True
        while running:
            dt = clock.tick(S.FPS) / 1000.0

            for e in pg.event.get():
                if e.type == pg.QUIT:
                    running = False
                elif e.type == pg.KEYDOWN and e.key == pg.K_ESCAPE:
                    running = False
                elif e.type == pg.MOUSEBUTTONDOWN and e.button == 1:
                    # No clicks while anything is still animating
                    if any(sp.is_moving() for sp in sprites.values()):
                        continue
                    gp = PROJ.pick(*e.pos, grid=grid)
                    if gp is not None:
                        action = tm.activate(gp)
                        logger.debug("click (%d, %d) -> %s", gp.q, gp.r, action.name)

            tm.update(dt)
            for u in tm.units:
                sp = sprites[u.id]
                sp.follow(u.pos)
                sp.update(dt)

            snap = tm.snapshot()
            screen.fill(C.BG)
            draw_board(screen, snap)
            draw_overlays(screen, snap, tm.player)
            draw_hover(screen, pg.mouse.get_pos(), grid)
            draw_units(screen, snap, sprites, font)
            draw_hud(screen, snap, tm.player, font)
            pg.display.flip()

        return 0
    finally:
        pg.quit()


if __name__ == "__main__":
    sys.exit(main())
