"""
Game constants - all magic numbers in one place.
NO UI DEPENDENCIES.
"""

# =============================================================================
# TIC-TAC-TOE
# =============================================================================
BOARD_CELLS = 9

# Rows, columns, diagonals
WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

# =============================================================================
# SHOOTER - RULES
# =============================================================================
STARTING_LIVES = 3
POINTS_PER_HIT = 10
WIN_SCORE = 1000
FIRE_COOLDOWN = 0.3           # seconds between successful shots

# =============================================================================
# SHOOTER - PLAY FIELD (y grows downward, x centred on 0)
# =============================================================================
DEFAULT_FIELD_WIDTH = 400.0
FIELD_EDGE_MARGIN = 30.0      # keeps player and spawns inside the visible edge
SPAWN_Y = -400.0              # obstacles enter above the visible area
TOP_BOUNDARY = -400.0         # projectiles past this are gone
BOTTOM_BOUNDARY = 400.0       # obstacles past this cost a life
MUZZLE_Y = 325.0              # where projectiles leave the ship

PROJECTILE_VELOCITY = 5.0     # units per tick, upward
OBSTACLE_MIN_SIZE = 30.0
OBSTACLE_MAX_SIZE = 55.0
OBSTACLE_MIN_FALL_SPEED = 6.0
OBSTACLE_MAX_FALL_SPEED = 10.0
OBSTACLE_SPIN_PER_TICK = 2.0  # degrees

# =============================================================================
# SHOOTER - SCHEDULING (milliseconds)
# =============================================================================
TICK_INTERVAL_MS = 50         # ~20 Hz simulation
SPAWN_INTERVAL_MS = 1000      # ~1 Hz spawner

# =============================================================================
# GRID PUZZLE
# =============================================================================
# Board size -> (sub-block rows, sub-block cols)
SUB_BLOCK_DIMENSIONS = {
    4: (2, 2),
    6: (2, 3),
    9: (3, 3),
}
PUZZLE_SIZES = tuple(SUB_BLOCK_DIMENSIONS)
DEFAULT_PUZZLE_SIZE = 4
