"""
The Lines of Action board: game state, move legality, move application
and retraction, region sizing and win detection.

Rules in brief:
    A piece moves in a straight line (row, column or diagonal) exactly as
    many squares as there are pieces, of either colour, anywhere on that
    line. It may jump its own pieces but not the opponent's, and may land
    on an opposing piece (capturing it) but not on its own. A side wins
    when all of its pieces form a single region of 8-connected squares.

State kept by the board:
    - 64 cells of Piece, indexed by python-chess square (row * 8 + col);
    - the side to move;
    - a history stack of applied-move records (move, moving piece, piece
      that stood on the destination), which drives retract();
    - an undo stack of full-grid snapshots, always the same depth as the
      history, which drives undo();
    - a ply limit after which the game is drawn;
    - cached region sizes and winner, dropped on every mutation.

Region sizes and the winner are derived data. They are recomputed lazily
on the first query after a mutation and never read stale.
"""

import logging
from dataclasses import dataclass
from typing import Sequence

import chess

from loa import geometry
from loa.constants import BOARD_SIZE, DEFAULT_MOVE_LIMIT
from loa.errors import EmptyHistoryError, IllegalMoveError, InvalidConfigurationError
from loa.move import Move
from loa.piece import Piece

_log = logging.getLogger(__name__)

_B, _W, _E = Piece.BLACK, Piece.WHITE, Piece.EMPTY

# Standard starting position. Bottom row (row 1) FIRST, so the rows read
# upside down compared to the printed board.
INITIAL_PIECES: tuple[tuple[Piece, ...], ...] = (
    (_E, _B, _B, _B, _B, _B, _B, _E),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_E, _B, _B, _B, _B, _B, _B, _E),
)


@dataclass(frozen=True)
class AppliedMove:
    """
    One entry of the move history.

    Attributes:
        move:     The move as played, with its capture flag set.
        moved:    The piece that moved.
        replaced: What stood on the destination before the move
                  (EMPTY unless the move was a capture).
    """

    move: Move
    moved: Piece
    replaced: Piece


def _flatten(contents: Sequence) -> list[Piece]:
    """Accept 8 rows of 8 (bottom row first) or 64 cells in square order."""
    if len(contents) == BOARD_SIZE * BOARD_SIZE:
        cells = list(contents)
    elif len(contents) == BOARD_SIZE and all(len(r) == BOARD_SIZE for r in contents):
        cells = [p for r in contents for p in r]
    else:
        raise ValueError("board contents must be 8 rows of 8 or 64 squares")
    if not all(isinstance(p, Piece) for p in cells):
        raise ValueError("board contents must be Piece values")
    return cells


class Board:
    """
    State of a game of Lines of Action.

    Board(contents, turn) builds a position where
        get(geometry.square(c, r)) == contents[r][c]
    with TURN to move. Board() is the standard starting position with
    Black to move.
    """

    def __init__(
        self,
        contents: Sequence | None = None,
        turn: Piece = Piece.BLACK,
    ) -> None:
        self.initialize(INITIAL_PIECES if contents is None else contents, turn)

    # -----------------------------------------------------------------------
    # Setup and copying
    # -----------------------------------------------------------------------

    def initialize(self, contents: Sequence, turn: Piece) -> None:
        """Reset to CONTENTS with TURN to move, forgetting all history."""
        if turn is Piece.EMPTY:
            raise ValueError("side to move must be BLACK or WHITE")
        self._cells: list[Piece] = _flatten(contents)
        self._turn: Piece = turn
        self._history: list[AppliedMove] = []
        self._snapshots: list[tuple[Piece, ...]] = []
        self._move_limit: int = 2 * DEFAULT_MOVE_LIMIT
        self._invalidate()

    def clear(self) -> None:
        """Return to the standard starting position, Black to move."""
        self.initialize(INITIAL_PIECES, Piece.BLACK)

    def copy(self) -> "Board":
        """Return an independent deep copy of this board."""
        board = Board.__new__(Board)
        board.copy_from(self)
        return board

    def copy_from(self, other: "Board") -> None:
        """
        Make this board a copy of OTHER: cells, side to move, move limit,
        history and undo stack. Nothing mutable is shared afterwards
        (snapshots and history records are immutable).
        """
        if other is self:
            return
        self._cells = list(other._cells)
        self._turn = other._turn
        self._history = list(other._history)
        self._snapshots = list(other._snapshots)
        self._move_limit = other._move_limit
        self._invalidate()

    def _invalidate(self) -> None:
        self._regions: dict[Piece, list[int]] | None = None
        self._winner: Piece | None = None
        self._winner_known: bool = False

    # -----------------------------------------------------------------------
    # Basic accessors
    # -----------------------------------------------------------------------

    def get(self, sq: chess.Square) -> Piece:
        return self._cells[sq]

    def set(self, sq: chess.Square, piece: Piece, next_turn: Piece | None = None) -> None:
        """
        Put PIECE on SQ, and make NEXT_TURN the side to move if given.
        History is not touched.
        """
        if next_turn is not None:
            if next_turn is Piece.EMPTY:
                raise ValueError("side to move must be BLACK or WHITE")
            self._turn = next_turn
        self._cells[sq] = piece
        self._invalidate()

    @property
    def turn(self) -> Piece:
        """The side to move."""
        return self._turn

    @property
    def moves_made(self) -> int:
        """Number of moves made and not undone or retracted."""
        return len(self._history)

    @property
    def moves(self) -> tuple[Move, ...]:
        """Moves made so far, oldest first, capture flags set."""
        return tuple(record.move for record in self._history)

    @property
    def history(self) -> tuple[AppliedMove, ...]:
        return tuple(self._history)

    @property
    def move_limit(self) -> int:
        """Number of plies after which the game is a draw."""
        return self._move_limit

    def set_move_limit(self, limit: int) -> None:
        """
        Draw the game once each side has made LIMIT moves.

        Raises:
            InvalidConfigurationError: 2 * LIMIT does not exceed moves_made.
        """
        if 2 * limit <= self.moves_made:
            raise InvalidConfigurationError(
                f"move limit {limit} too small: {self.moves_made} moves already made"
            )
        self._move_limit = 2 * limit
        self._invalidate()

    # -----------------------------------------------------------------------
    # Legality
    # -----------------------------------------------------------------------

    def line_count(self, sq: chess.Square, direction: int) -> int:
        """
        Number of pieces (either colour) on the whole line through SQ in
        DIRECTION, SQ itself included.
        """
        cells = self._cells
        return sum(1 for s in geometry.line(sq, direction) if cells[s] is not Piece.EMPTY)

    def _blocked(self, from_sq: chess.Square, to_sq: chess.Square) -> bool:
        """
        True if FROM_SQ -> TO_SQ lands on a piece of the mover's colour or
        passes over an opposing piece. Assumes FROM_SQ is occupied and the
        squares are on a common line.
        """
        piece = self._cells[from_sq]
        if self._cells[to_sq] is piece:
            return True
        enemy = piece.opposite()
        d = geometry.direction(from_sq, to_sq)
        for step in range(1, geometry.distance(from_sq, to_sq)):
            if self._cells[geometry.move_dest(from_sq, d, step)] is enemy:
                return True
        return False

    def is_legal_between(self, from_sq: chess.Square, to_sq: chess.Square) -> bool:
        """Return True iff FROM_SQ-TO_SQ is legal for the side to move."""
        piece = self._cells[from_sq]
        if piece is Piece.EMPTY or piece is not self._turn:
            return False
        if not geometry.is_valid_move(from_sq, to_sq):
            return False
        if self._blocked(from_sq, to_sq):
            return False
        d = geometry.direction(from_sq, to_sq)
        return geometry.distance(from_sq, to_sq) == self.line_count(from_sq, d)

    def is_legal(self, move: Move | None) -> bool:
        """Return True iff MOVE is legal for the side to move. The capture
        flag is ignored."""
        if move is None:
            return False
        return self.is_legal_between(move.from_square, move.to_square)

    def legal_moves(self) -> list[Move]:
        """
        All legal moves for the side to move.

        Order is part of the contract (the search's tie-break depends on
        it): origin squares by increasing index (row-major from a1), then
        direction N..NW, then increasing distance.
        """
        cells = self._cells
        moves: list[Move] = []
        for sq in geometry.SQUARES:
            if cells[sq] is not self._turn:
                continue
            for d in range(8):
                # Only the step equal to the line count can ever be legal.
                to_sq = geometry.move_dest(sq, d, self.line_count(sq, d))
                if to_sq is not None and self.is_legal_between(sq, to_sq):
                    moves.append(Move(sq, to_sq))
        return moves

    def legal_destinations(self) -> list[list[chess.Square]]:
        """
        Legal destinations per origin square: element S lists where the
        piece on square S may go. Squares with no legal move map to an
        empty list.
        """
        result: list[list[chess.Square]] = [[] for _ in geometry.SQUARES]
        for move in self.legal_moves():
            result[move.from_square].append(move.to_square)
        return result

    # -----------------------------------------------------------------------
    # Mutation
    # -----------------------------------------------------------------------

    def make_move(self, move: Move) -> None:
        """
        Play MOVE for the side to move.

        Raises:
            IllegalMoveError: MOVE is not legal. The board is unchanged.
        """
        if not self.is_legal(move):
            raise IllegalMoveError(move)
        from_sq, to_sq = move.from_square, move.to_square
        moved = self._cells[from_sq]
        replaced = self._cells[to_sq]
        played = Move(from_sq, to_sq, capture=replaced is moved.opposite())

        self._snapshots.append(tuple(self._cells))
        self._history.append(AppliedMove(played, moved, replaced))
        self._cells[to_sq] = moved
        self._cells[from_sq] = Piece.EMPTY
        self._turn = moved.opposite()
        self._invalidate()
        _log.debug("%s played %s (ply %d)", moved, played, self.moves_made)

    def undo(self) -> None:
        """
        Restore the full grid saved before the last move.

        Raises:
            EmptyHistoryError: no move to undo.
        """
        if not self._snapshots:
            raise EmptyHistoryError("nothing to undo")
        self._cells = list(self._snapshots.pop())
        record = self._history.pop()
        self._turn = self._turn.opposite()
        self._invalidate()
        _log.debug("undid %s", record.move)

    def retract(self) -> None:
        """
        Unmake the last move by restoring just its two squares.

        Raises:
            EmptyHistoryError: no move to retract.
        """
        if not self._history:
            raise EmptyHistoryError("nothing to retract")
        record = self._history.pop()
        self._snapshots.pop()
        self._cells[record.move.from_square] = record.moved
        self._cells[record.move.to_square] = record.replaced
        self._turn = record.moved
        self._invalidate()
        _log.debug("retracted %s", record.move)

    # -----------------------------------------------------------------------
    # Regions
    # -----------------------------------------------------------------------

    def _flood(self, start: chess.Square, visited: list[bool]) -> int:
        """
        Size of the region containing START, marking its squares in VISITED.
        Iterative, so the depth of the region does not matter.
        """
        cells = self._cells
        piece = cells[start]
        visited[start] = True
        stack = [start]
        size = 0
        while stack:
            sq = stack.pop()
            size += 1
            for n in geometry.adjacent(sq):
                if not visited[n] and cells[n] is piece:
                    visited[n] = True
                    stack.append(n)
        return size

    def _compute_regions(self) -> dict[Piece, list[int]]:
        if self._regions is None:
            regions: dict[Piece, list[int]] = {Piece.BLACK: [], Piece.WHITE: []}
            visited = [False] * len(self._cells)
            for sq in geometry.SQUARES:
                piece = self._cells[sq]
                if piece is Piece.EMPTY or visited[sq]:
                    continue
                regions[piece].append(self._flood(sq, visited))
            for sizes in regions.values():
                sizes.sort(reverse=True)
            self._regions = regions
        return self._regions

    def region_sizes(self, side: Piece) -> list[int]:
        """Sizes of SIDE's regions, largest first."""
        if side is Piece.EMPTY:
            raise ValueError("region sizes are defined for BLACK or WHITE only")
        return list(self._compute_regions()[side])

    def region_size_at(self, sq: chess.Square) -> int:
        """Size of the region containing SQ (0 if SQ is empty)."""
        if self._cells[sq] is Piece.EMPTY:
            return 0
        return self._flood(sq, [False] * len(self._cells))

    def pieces_contiguous(self, side: Piece) -> bool:
        """True iff all of SIDE's pieces form one region."""
        return len(self.region_sizes(side)) == 1

    def adjacent_allies(self, sq: chess.Square) -> list[chess.Square]:
        """Neighbours of SQ holding the same colour as SQ."""
        piece = self._cells[sq]
        if piece is Piece.EMPTY:
            return []
        return [n for n in geometry.adjacent(sq) if self._cells[n] is piece]

    # -----------------------------------------------------------------------
    # Counting (used by the evaluator)
    # -----------------------------------------------------------------------

    def count_pieces(self, side: Piece) -> int:
        return self._cells.count(side)

    def count_blocked(self, side: Piece) -> int:
        """
        Number of (piece, direction) pairs of SIDE whose line-count
        destination is on the board but blocked: an opposing piece lies in
        between or an own piece sits on it. Independent of the side to move.
        """
        count = 0
        for sq in geometry.SQUARES:
            if self._cells[sq] is not side:
                continue
            for d in range(8):
                to_sq = geometry.move_dest(sq, d, self.line_count(sq, d))
                if to_sq is not None and self._blocked(sq, to_sq):
                    count += 1
        return count

    # -----------------------------------------------------------------------
    # Game result
    # -----------------------------------------------------------------------

    def winner(self) -> Piece | None:
        """
        BLACK or WHITE if that side has won, EMPTY for a draw, None while
        the game is in progress.

        A side whose pieces are all connected wins, the side that just
        moved being checked first. Reaching the move limit is a draw unless
        one side is connected at that same check, in which case it wins.
        """
        if not self._winner_known:
            result = None
            if self.moves_made >= self._move_limit:
                result = Piece.EMPTY
            mover = self._turn.opposite()
            if self.pieces_contiguous(mover):
                result = mover
            elif self.pieces_contiguous(self._turn):
                result = self._turn
            self._winner = result
            self._winner_known = True
        return self._winner

    def game_over(self) -> bool:
        return self.winner() is not None

    # -----------------------------------------------------------------------
    # Dunder methods
    # -----------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells and self._turn is other._turn

    __hash__ = None

    def __str__(self) -> str:
        lines = ["==="]
        for r in range(BOARD_SIZE - 1, -1, -1):
            cells = "".join(
                f"{self._cells[geometry.square(c, r)].abbrev} " for c in range(BOARD_SIZE)
            )
            lines.append(f"    {cells}")
        lines.append(f"Next move: {self._turn.full_name}")
        lines.append("===")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"<Board turn={self._turn.full_name} moves_made={self.moves_made}>"
