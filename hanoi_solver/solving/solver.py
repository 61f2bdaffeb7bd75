"""
Move generation for the Tower of Hanoi.

generate_solution() runs the classic recursive strategy against a simulated
set of rods and returns the full Solution. iter_moves() yields the same
moves lazily, without recursion, for puzzles too large to hold in memory.
"""

from typing import Generator

from ..config import ROD_LABELS, SOLUTION_SOURCE, get_max_disks, get_stream_max_disks
from ..errors import IllegalMoveError, InternalConsistencyError, InvalidDiskCount
from ..models import Move, Rod, Solution, describe_move
from .rods import RodState
from .validator import validate_solution


def check_disk_count(number_of_disks, max_disks: int) -> int:
    """
    Ensure a disk count is an integer in [1, max_disks].

    Args:
        number_of_disks: Requested disk count.
        max_disks: Largest accepted disk count.

    Returns:
        The disk count, unchanged.

    Raises:
        InvalidDiskCount: If the value is not an integer or is out of range.
    """
    if isinstance(number_of_disks, bool) or not isinstance(number_of_disks, int):
        raise InvalidDiskCount(
            f"Number of disks must be an integer, got {type(number_of_disks).__name__}."
        )
    if number_of_disks < 1 or number_of_disks > max_disks:
        raise InvalidDiskCount(f"Number of disks must be between 1 and {max_disks}.")
    return number_of_disks


def _resolve_bound(max_disks: int | None, default: int) -> int:
    if max_disks is None:
        return default
    if isinstance(max_disks, bool) or not isinstance(max_disks, int) or max_disks < 1:
        raise ValueError(f"max_disks must be a positive integer, got {max_disks!r}")
    return max_disks


def _roles_are_valid(source: int, target: int, auxiliary: int) -> bool:
    """Three distinct rod indices, each in range."""
    roles = (source, target, auxiliary)
    if any(r < 0 or r >= len(ROD_LABELS) for r in roles):
        return False
    return len(set(roles)) == len(roles)


def _take_disk(rods: RodState, source: int, target: int, move_id: int) -> Move:
    """Move the top disk in the simulation and record what was actually moved."""
    try:
        disk = rods.move(source, target)
    except IllegalMoveError as e:
        raise InternalConsistencyError(
            f"Simulation out of sync at move {move_id}: {e}"
        ) from e

    from_label = ROD_LABELS[source]
    to_label = ROD_LABELS[target]
    return Move(
        id=move_id,
        source=from_label,
        target=to_label,
        disk=disk,
        description=describe_move(disk, from_label, to_label),
    )


def _solve_hanoi(
    n: int,
    source: int,
    target: int,
    auxiliary: int,
    rods: RodState,
    moves: list[Move],
) -> None:
    """
    Move the top n disks of the source rod onto the target rod.

    Args:
        n: Number of disks to move.
        source: Rod index the disks start on.
        target: Rod index the disks end on.
        auxiliary: Spare rod index.
        rods: Simulation state, mutated in place.
        moves: Output list, appended to in execution order.
    """
    if n <= 0:
        return
    if not _roles_are_valid(source, target, auxiliary):
        return

    if n == 1:
        moves.append(_take_disk(rods, source, target, len(moves) + 1))
        return

    # Park the smaller n-1 disks on the spare rod
    _solve_hanoi(n - 1, source, auxiliary, target, rods, moves)

    # Largest disk of this subproblem goes straight across
    moves.append(_take_disk(rods, source, target, len(moves) + 1))

    # Bring the n-1 disks back on top of it
    _solve_hanoi(n - 1, auxiliary, target, source, rods, moves)


def generate_solution(number_of_disks: int, max_disks: int | None = None) -> Solution:
    """
    Generate the minimal solution for an N-disk puzzle.

    All disks start on rod A and finish on rod C, with rod B as the spare.

    Args:
        number_of_disks: Number of disks in the puzzle.
        max_disks: Largest accepted disk count (defaults to HANOI_MAX_DISKS).

    Returns:
        The complete Solution with 2^N - 1 moves.

    Raises:
        InvalidDiskCount: If number_of_disks is not an integer in range.
        InternalConsistencyError: If the simulation goes out of sync.
    """
    bound = _resolve_bound(max_disks, get_max_disks())
    check_disk_count(number_of_disks, bound)

    rods = RodState.initial(number_of_disks, Rod.A)
    moves: list[Move] = []

    _solve_hanoi(number_of_disks, Rod.A, Rod.C, Rod.B, rods, moves)

    return Solution(
        number_of_disks=number_of_disks,
        moves=tuple(moves),
        is_valid=validate_solution(moves, number_of_disks),
        source=SOLUTION_SOURCE,
    )


def iter_moves(number_of_disks: int, max_disks: int | None = None) -> Generator[Move, None, None]:
    """
    Yield the minimal solution one move at a time.

    Produces exactly the moves of generate_solution(), in the same order,
    but keeps only O(N) state so very large puzzles can be streamed.

    Args:
        number_of_disks: Number of disks in the puzzle.
        max_disks: Largest accepted disk count (defaults to HANOI_STREAM_MAX_DISKS).

    Yields:
        Move objects in execution order.
    """
    bound = _resolve_bound(max_disks, get_stream_max_disks())
    check_disk_count(number_of_disks, bound)

    rods = RodState.initial(number_of_disks, Rod.A)
    move_id = 0

    # Work items: ("solve", n, source, target, auxiliary) or ("move", source, target)
    stack: list[tuple] = [("solve", number_of_disks, Rod.A, Rod.C, Rod.B)]

    while stack:
        item = stack.pop()

        if item[0] == "move":
            _, source, target = item
            move_id += 1
            yield _take_disk(rods, source, target, move_id)
            continue

        _, n, source, target, auxiliary = item
        if n <= 0 or not _roles_are_valid(source, target, auxiliary):
            continue
        if n == 1:
            stack.append(("move", source, target))
            continue

        # Pushed in reverse so they pop in execution order
        stack.append(("solve", n - 1, auxiliary, target, source))
        stack.append(("move", source, target))
        stack.append(("solve", n - 1, source, auxiliary, target))
