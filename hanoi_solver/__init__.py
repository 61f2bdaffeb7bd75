"""
Tower of Hanoi Solver
=====================

Computes the minimal move sequence for the three-rod Tower of Hanoi puzzle
and verifies it.
"""

__version__ = "1.0.0"

from .errors import HanoiError, InvalidDiskCount, InternalConsistencyError, IllegalMoveError
from .models import Rod, Move, Solution, minimal_move_count
from .solving import generate_solution, iter_moves, validate_solution, is_valid_move
from .replay import replay_moves
from .service import handle_request

__all__ = [
    "HanoiError",
    "InvalidDiskCount",
    "InternalConsistencyError",
    "IllegalMoveError",
    "Rod",
    "Move",
    "Solution",
    "minimal_move_count",
    "generate_solution",
    "iter_moves",
    "validate_solution",
    "is_valid_move",
    "replay_moves",
    "handle_request",
]
