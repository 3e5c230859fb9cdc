"""
Engine constants: board geometry, game limits, search parameters and
evaluation weights.

All numeric constants used throughout the engine are defined here so that
the board, the evaluator and the search never introduce their own magic
numbers. Tuning the player means editing this file only.

Scores follow a White-positive convention: a positive evaluation favours
White, a negative one favours Black.
"""

# ---------------------------------------------------------------------------
# Board geometry
# ---------------------------------------------------------------------------
# The board is always 8x8. Squares are python-chess square indices
# (row * 8 + col, a1 = 0), so this number must stay 8.

BOARD_SIZE: int = 8

# Direction indices and their (column, row) deltas. The order is fixed:
# move generation walks directions 0..7, which makes it part of the
# observable move order.
N, NE, E, SE, S, SW, W, NW = range(8)

DIRECTION_DELTAS: tuple[tuple[int, int], ...] = (
    (0, 1),    # N
    (1, 1),    # NE
    (1, 0),    # E
    (1, -1),   # SE
    (0, -1),   # S
    (-1, -1),  # SW
    (-1, 0),   # W
    (-1, 1),   # NW
)

DIRECTION_NAMES: tuple[str, ...] = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")

# ---------------------------------------------------------------------------
# Game limits
# ---------------------------------------------------------------------------
# Number of moves *per side* after which the game is drawn. The board
# stores the limit in plies (twice this value).

DEFAULT_MOVE_LIMIT: int = 60

# ---------------------------------------------------------------------------
# Search parameters
# ---------------------------------------------------------------------------
# The automated player always searches to this fixed depth. There is no
# iterative deepening and no time budget.

SEARCH_DEPTH: int = 2

# Bounds of the alpha-beta window. Must be strictly larger in magnitude
# than any value evaluate() can return.
INFINITY: int = 1_000_000

# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------

WIN_SCORE: int = 1_000  # One side's pieces form a single region
DRAW_SCORE: int = 0     # Move limit reached

# Feature bonuses, each added at most once. They never sum to WIN_SCORE,
# so a decided position always outranks an undecided one.
BLOCKED_BONUS: int = 50    # Black has more blocked moves than White
SCATTER_BONUS: int = 100   # Black is more scattered than White is compact
REGION_BONUS: int = 200    # Black is split into more regions than White
