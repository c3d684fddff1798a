from __future__ import annotations

# Window
WINDOW_W = 1280
WINDOW_H = 720
FPS = 60

# Grid
GRID_COLS = 12
GRID_ROWS = 10

# Isometric tile size (2:1 diamond)
TILE_W = 64
TILE_H = 32

# Where the (0,0) tile's top vertex lands on screen.
ORIGIN_X = WINDOW_W // 2
ORIGIN_Y = 90
ORIGIN = (ORIGIN_X, ORIGIN_Y)

# Rocks (unwalkable tiles)
OBSTACLES = [(6, 3), (6, 4), (7, 4)]

# Pacing (seconds)
MOVE_STEP_TIME = 0.13      # one cell of a player move
ENEMY_TURN_DELAY = 0.3     # pause between player attack and enemy turn
MOVE_SPEED_PPS = 300       # sprite tween speed, pixels per second

# Resources
ENERGY_MAX = 1000
POLLUTION_ENERGY_PENALTY = 50
HOME_HP_RECOVERY = 200
HOME_ENERGY_RECOVERY = 250

# Roster (grid coords are (q, r)). Hostiles act in list order.
PLAYER_UNIT = {
    "id": "p1",
    "name": "Wheeler",
    "pos": (3, 4),
    "max_hp": 1500,
    "energy": 1000,
    "move_range": 2,
    "attack_range": 1,
    "attack_damage": 350,
    "home_terrains": ("lava", "sand"),
}
ENEMY_UNITS = [
    {
        "id": "e1",
        "name": "Ripper",
        "pos": (8, 4),
        "max_hp": 800,
        "move_range": 1,
        "attack_range": 1,
        "attack_damage": 350,
    },
    {
        "id": "e2",
        "name": "Sludge",
        "pos": (10, 8),
        "max_hp": 600,
        "move_range": 2,
        "attack_range": 1,
        "attack_damage": 200,
    },
]

# HUD
HUD_BAR_W = 320
HUD_BAR_H = 18
HUD_BAR_GAP = 10
LOG_LINES = 4
