"""
Move replay for the Tower of Hanoi solver.

Applies a move sequence to a fresh set of rods and reports whether every
move was legal and the puzzle ended solved.
"""

from datetime import datetime
from typing import Iterable

from .config import ROD_LABELS
from .errors import IllegalMoveError
from .models import Move
from .solving.rods import RodState


def _apply_move(rods: RodState, move: Move) -> None:
    """Apply one recorded move, checking it against the current rods."""
    if move.source not in ROD_LABELS:
        raise IllegalMoveError(f"Unknown source rod: {move.source!r}")
    if move.target not in ROD_LABELS:
        raise IllegalMoveError(f"Unknown target rod: {move.target!r}")

    source = ROD_LABELS.index(move.source)
    target = ROD_LABELS.index(move.target)

    top = rods.top(source)
    if top is not None and top != move.disk:
        raise IllegalMoveError(
            f"Move records disk {move.disk} but top of rod {move.source} is disk {top}"
        )

    rods.move(source, target)


def replay_moves(moves: Iterable[Move], number_of_disks: int) -> dict:
    """
    Replay moves against rod A loaded with N disks.

    Stops at the first illegal move.

    Args:
        moves: Moves in execution order.
        number_of_disks: Number of disks initially on rod A.

    Returns:
        Report dict with the executed count, the failing move (if any),
        the final rod contents and whether the puzzle is solved.
    """
    rods = RodState.initial(number_of_disks)
    executed_moves_count = 0
    failed_move = None
    error = None

    for move in moves:
        try:
            _apply_move(rods, move)
        except IllegalMoveError as e:
            failed_move = move.to_dict()
            error = str(e)
            print(f"[ERROR] Replay stopped at move {move.id}: {error}")
            break
        executed_moves_count += 1

    solved = failed_move is None and rods.is_solved(number_of_disks)

    report = {
        "number_of_disks": number_of_disks,
        "executed_at": datetime.now().isoformat(timespec='seconds'),
        "executed_moves_count": executed_moves_count,
        "failed_move": failed_move,
        "error": error,
        "final_rods": rods.to_dict(),
        "solved": solved,
    }

    status = "solved" if solved else "not solved"
    print(f"[REPLAY] Complete: {executed_moves_count} moves applied, puzzle {status}")

    return report
