"""
Game constants for the grid snake engine.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Row 0 is the top of the board, so UP decreases y.
DIRECTION_DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITE_DIRECTIONS = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

INITIAL_DIRECTION = RIGHT
INITIAL_LENGTH = 1

# Board settings
GRID_SIZE = 30

# Difficulty settings
SCORE_PER_LEVEL = 5
MAX_LEVEL = 10
BASE_INTERVAL_MS = 200
MIN_INTERVAL_MS = 50
INTERVAL_DECREMENT_MS = 15

# Food placement
MAX_FOOD_ATTEMPTS = 100
FALLBACK_SCAN = "scan"
FALLBACK_DEFERRED = "deferred"
PLACEMENT_FALLBACKS = {FALLBACK_SCAN, FALLBACK_DEFERRED}
