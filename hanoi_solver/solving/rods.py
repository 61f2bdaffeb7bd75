"""
Rod state for the Tower of Hanoi simulation.

Three stacks of disk sizes, each listed bottom (largest) to top (smallest).
"""

from ..config import ROD_LABELS
from ..errors import IllegalMoveError


class RodState:
    """
    Mutable three-rod puzzle state.

    Each solve or replay owns its own instance; nothing here is shared
    between calls.
    """

    def __init__(self, rods: list[list[int]] | None = None):
        if rods is None:
            rods = [[], [], []]
        if len(rods) != len(ROD_LABELS):
            raise ValueError(f"Expected {len(ROD_LABELS)} rods, got {len(rods)}")
        self._rods = [list(r) for r in rods]

    @classmethod
    def initial(cls, number_of_disks: int, rod: int = 0) -> "RodState":
        """Load disks N..1 onto a single rod, the others empty."""
        rods: list[list[int]] = [[], [], []]
        rods[rod] = list(range(number_of_disks, 0, -1))
        return cls(rods)

    @property
    def rods(self) -> list[list[int]]:
        """Copy of the three stacks, bottom to top."""
        return [list(r) for r in self._rods]

    def height(self, rod: int) -> int:
        return len(self._rods[rod])

    def top(self, rod: int) -> int | None:
        stack = self._rods[rod]
        return stack[-1] if stack else None

    def move(self, source: int, target: int) -> int:
        """
        Move the top disk from one rod to another.

        Args:
            source: Index of the rod to take the disk from.
            target: Index of the rod to place it on.

        Returns:
            The size of the disk that was moved.

        Raises:
            IllegalMoveError: If the source rod is empty, the rods are the
                same or invalid, or the disk would land on a smaller one.
        """
        for rod in (source, target):
            if not 0 <= rod < len(self._rods):
                raise IllegalMoveError(f"Invalid rod index: {rod}")
        if source == target:
            raise IllegalMoveError(f"Source and target are both rod {ROD_LABELS[source]}")

        from_stack = self._rods[source]
        to_stack = self._rods[target]

        if not from_stack:
            raise IllegalMoveError(f"Rod {ROD_LABELS[source]} is empty")

        disk = from_stack[-1]
        if to_stack and to_stack[-1] < disk:
            raise IllegalMoveError(
                f"Cannot place disk {disk} on smaller disk {to_stack[-1]} "
                f"(rod {ROD_LABELS[target]})"
            )

        to_stack.append(from_stack.pop())
        return disk

    def is_solved(self, number_of_disks: int, target: int = 2) -> bool:
        """True if all N disks sit on the target rod in order."""
        return self._rods[target] == list(range(number_of_disks, 0, -1))

    def to_dict(self) -> dict[str, list[int]]:
        return {label: list(stack) for label, stack in zip(ROD_LABELS, self._rods)}

    def __repr__(self) -> str:
        return f"RodState({self.to_dict()})"
