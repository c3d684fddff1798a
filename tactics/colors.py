from __future__ import annotations

BG = (14, 16, 18)
OUTLINE = (49, 68, 95)   # diamond outline
HOVER_OUTLINE = (250, 245, 200)
TEXT = (214, 226, 255)

# Terrain fills
TERRAIN = {
    "water": (18, 58, 102),
    "grass": (31, 90, 42),
    "sand": (122, 106, 42),
    "stone": (74, 74, 74),
    "lava": (122, 42, 42),
    "ice": (106, 166, 166),
}
POLLUTED_FILL = (10, 10, 10)
OBSTACLE_FILL = (43, 43, 43)

# Overlays (use on an alpha surface)
MOVE_FILL = (255, 255, 255, 56)
MOVE_START_FILL = (255, 255, 255, 26)
MOVE_OUTLINE = (158, 203, 255)
ATTACK_FILL = (255, 255, 255, 30)
ATTACK_OUTLINE = (255, 166, 166)

# Units
UNIT_FILL = (58, 208, 255)
UNIT_IDLE_FILL = (122, 160, 184)
UNIT_OUTLINE = (20, 40, 60)
ENEMY_FILL = (255, 59, 59)
ENEMY_OUTLINE = (60, 20, 20)

# HUD
HUD_PANEL = (11, 15, 20)
HUD_FRAME = (49, 68, 95)
BAR_BG = (43, 43, 43)
HP_BAR = (76, 255, 76)
ENERGY_BAR = (255, 225, 76)
BAR_OUTLINE = (120, 130, 150)
DOWNED_TEXT = (255, 90, 90)
