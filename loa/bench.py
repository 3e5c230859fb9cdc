"""
Benchmark: measure nodes visited and time per move at the search depth.

Run before and after any change to the board or the search to quantify
its cost. A lower node count at the same depth means more effective
pruning; a higher NPS means faster move generation or evaluation.

Usage: python -m loa.bench [depth]
"""

import logging
import sys
import time

from loa.board import Board
from loa.constants import SEARCH_DEPTH
from loa.move import mv
from loa.piece import Piece
from loa.search import get_best_move

_log = logging.getLogger(__name__)

_B, _W, _E = Piece.BLACK, Piece.WHITE, Piece.EMPTY

# A sparse midgame: both sides split, captures available. Bottom row first.
_MIDGAME = (
    (_E, _B, _E, _B, _B, _E, _E, _E),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _B, _B, _E, _W),
    (_W, _E, _B, _E, _E, _W, _E, _E),
    (_W, _E, _W, _W, _E, _W, _E, _E),
    (_W, _E, _E, _E, _B, _E, _E, _W),
    (_E, _E, _E, _E, _E, _E, _E, _E),
    (_E, _B, _B, _B, _E, _B, _B, _E),
)


def _start() -> Board:
    return Board()


def _after(*moves: str):
    def build() -> Board:
        board = Board()
        for text in moves:
            board.make_move(mv(text))
        return board
    return build


def _midgame() -> Board:
    return Board(_MIDGAME, Piece.BLACK)


# Fixed forever: the same positions are used for every comparison.
POSITIONS = [
    ("Start", _start),
    ("After c1-c3", _after("c1-c3")),
    ("Opening", _after("c1-c3", "a2-c2", "d1-d3")),
    ("Midgame", _midgame),
]


def run_position(label: str, board: Board, depth: int = SEARCH_DEPTH) -> dict:
    """Search one position and return its metrics.

    Args:
        label: Human-readable position name for display.
        board: Position to search. Not modified.
        depth: Search depth in plies.

    Returns:
        Dict with keys: label, move, value, nodes, nps, time_ms.
    """
    start = time.monotonic()
    move, value, nodes = get_best_move(board, depth)
    elapsed_ms = max(1, int((time.monotonic() - start) * 1000))
    return {
        "label": label,
        "move": str(move) if move is not None else "(none)",
        "value": value,
        "nodes": nodes,
        "nps": nodes * 1000 // elapsed_ms,
        "time_ms": elapsed_ms,
    }


def main(argv: list[str] | None = None) -> None:
    """Run all benchmark positions and print a summary table."""
    logging.basicConfig(level=logging.INFO)
    args = sys.argv[1:] if argv is None else argv
    depth = int(args[0]) if args else SEARCH_DEPTH
    _log.info("Lines of Action benchmark, depth %d", depth)

    print(
        f"{'Position':<14} {'Move':<7} {'Value':>6} "
        f"{'Nodes':>8} {'NPS':>8} {'Time(ms)':>9}"
    )
    print("-" * 57)

    results = []
    for label, build in POSITIONS:
        r = run_position(label, build(), depth)
        results.append(r)
        print(
            f"{r['label']:<14} {r['move']:<7} {r['value']:>6} "
            f"{r['nodes']:>8,} {r['nps']:>8,} {r['time_ms']:>9,}"
        )

    total_nodes = sum(r["nodes"] for r in results)
    total_time = sum(r["time_ms"] for r in results)
    print("-" * 57)
    print(
        f"{'TOTAL':<14} {'':<7} {'':>6} "
        f"{total_nodes:>8,} {total_nodes * 1000 // max(1, total_time):>8,} {total_time:>9,}"
    )


if __name__ == "__main__":
    main()
