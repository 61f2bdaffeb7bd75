"""
Solution validation for the Tower of Hanoi solver.

Structural checks only: the move count must be minimal and each move must
be well formed. Whether each move is physically legal is checked by
hanoi_solver.replay instead.
"""

from typing import Sequence

from ..config import ROD_LABELS
from ..models import Move, minimal_move_count


def is_valid_move(move: Move) -> bool:
    """
    Check that a single move is structurally correct.

    Args:
        move: The move to check.

    Returns:
        True if both rods are known, they differ, and the disk is a
        positive integer.
    """
    disk = move.disk
    return (
        move.source in ROD_LABELS
        and move.target in ROD_LABELS
        and move.source != move.target
        and isinstance(disk, int)
        and not isinstance(disk, bool)
        and disk > 0
    )


def validate_solution(moves: Sequence[Move], number_of_disks: int) -> bool:
    """
    Validate a move sequence for an N-disk puzzle.

    Checks for:
    - Exactly 2^N - 1 moves
    - Every move well formed (see is_valid_move)

    Args:
        moves: Moves in execution order. Not modified.
        number_of_disks: Number of disks in the puzzle.

    Returns:
        True if both checks pass.
    """
    has_correct_move_count = len(moves) == minimal_move_count(number_of_disks)
    all_moves_valid = all(is_valid_move(m) for m in moves)

    return has_correct_move_count and all_moves_valid
