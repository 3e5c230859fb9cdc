"""
Square geometry: directions, distances, lines and neighbours.

Squares are python-chess square indices (0..63, index = row * 8 + col,
a1 = 0), which is exactly the indexing the Lines of Action board uses.
python-chess supplies the enumeration of all squares, their names, the
Chebyshev distance and the neighbour bitboards; this module adds the
line queries the movement rule needs.

Everything here is a pure function. The per-square tables (lines and
neighbours) are built once at import time and shared.
"""

import chess

from loa.constants import BOARD_SIZE, DIRECTION_DELTAS

SQUARES: tuple[chess.Square, ...] = tuple(chess.SQUARES)


def square(col: int, row: int) -> chess.Square:
    """Return the square at column COL, row ROW (both 0-based)."""
    if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
        raise ValueError(f"square out of range: col={col} row={row}")
    return chess.square(col, row)


def col(sq: chess.Square) -> int:
    return chess.square_file(sq)


def row(sq: chess.Square) -> int:
    return chess.square_rank(sq)


def name(sq: chess.Square) -> str:
    """Return the a1..h8 designator of SQ."""
    return chess.square_name(sq)


def parse(text: str) -> chess.Square:
    """Parse an a1..h8 designator. Raises ValueError if malformed."""
    return chess.parse_square(text)


def opposite_direction(direction: int) -> int:
    return (direction + 4) % 8


def move_dest(sq: chess.Square, direction: int, steps: int) -> chess.Square | None:
    """
    Return the square STEPS squares from SQ in DIRECTION, or None if that
    falls off the board.
    """
    dc, dr = DIRECTION_DELTAS[direction]
    c = col(sq) + dc * steps
    r = row(sq) + dr * steps
    if 0 <= c < BOARD_SIZE and 0 <= r < BOARD_SIZE:
        return chess.square(c, r)
    return None


def same_line(a: chess.Square, b: chess.Square, direction: int) -> bool:
    """
    Return True iff B lies on the infinite line through A in DIRECTION.

    A direction and its opposite denote the same line, and A is on every
    line through itself.
    """
    dc, dr = DIRECTION_DELTAS[direction]
    dx = col(b) - col(a)
    dy = row(b) - row(a)
    # B - A is parallel to the direction vector iff their cross product is 0.
    return dx * dr == dy * dc


def is_valid_move(a: chess.Square, b: chess.Square) -> bool:
    """Return True iff A != B and they share a row, column or diagonal."""
    if a == b:
        return False
    dx = col(b) - col(a)
    dy = row(b) - row(a)
    return dx == 0 or dy == 0 or abs(dx) == abs(dy)


def distance(a: chess.Square, b: chess.Square) -> int:
    """
    Return the number of single steps from A to B along their common line.

    Raises:
        ValueError: A and B are not on a common row, column or diagonal.
    """
    if a != b and not is_valid_move(a, b):
        raise ValueError(f"{name(a)} and {name(b)} are not on a common line")
    return chess.square_distance(a, b)


def direction(a: chess.Square, b: chess.Square) -> int:
    """
    Return the direction index (0..7, N first, clockwise) from A toward B.

    Raises:
        ValueError: A == B, or the squares are not on a common line.
    """
    if not is_valid_move(a, b):
        raise ValueError(f"no direction from {name(a)} to {name(b)}")
    dx = col(b) - col(a)
    dy = row(b) - row(a)
    step = ((dx > 0) - (dx < 0), (dy > 0) - (dy < 0))
    return DIRECTION_DELTAS.index(step)


def adjacent(sq: chess.Square) -> tuple[chess.Square, ...]:
    """Return the (up to 8) squares touching SQ, in increasing index order."""
    return _ADJACENT[sq]


def line(sq: chess.Square, direction: int) -> tuple[chess.Square, ...]:
    """Return every square on the line through SQ in DIRECTION, SQ included."""
    return _LINES[sq][direction]


def _build_lines() -> tuple[tuple[tuple[chess.Square, ...], ...], ...]:
    return tuple(
        tuple(tuple(s for s in SQUARES if same_line(sq, s, d)) for d in range(8))
        for sq in SQUARES
    )


_ADJACENT: tuple[tuple[chess.Square, ...], ...] = tuple(
    tuple(chess.SquareSet(chess.BB_KING_ATTACKS[sq])) for sq in SQUARES
)
_LINES = _build_lines()
