"""
Solving module for the Tower of Hanoi solver.

Provides:
- Rod state simulation
- Recursive and streaming move generation
- Solution validation
"""

from .rods import RodState
from .validator import validate_solution, is_valid_move
from .solver import generate_solution, iter_moves, check_disk_count

__all__ = [
    "RodState",
    "validate_solution",
    "is_valid_move",
    "generate_solution",
    "iter_moves",
    "check_disk_count",
]
