"""
Data model for Tower of Hanoi solutions.

Rods, moves and solutions, plus the dict shape they take when exported.
"""

from dataclasses import dataclass, field
from enum import IntEnum

from .config import ROD_LABELS, SOLUTION_SOURCE


class Rod(IntEnum):
    """One of the three rods, valued by its index in the rod state."""
    A = 0
    B = 1
    C = 2

    @property
    def label(self) -> str:
        return ROD_LABELS[self.value]


def minimal_move_count(number_of_disks: int) -> int:
    """Fewest moves that solve a three-rod puzzle with N disks (2^N - 1)."""
    return 2 ** number_of_disks - 1


def describe_move(disk: int, source: str, target: str) -> str:
    return f"Take disk {disk} from rod {source} to rod {target}"


def _parse_move_id(raw) -> int:
    """Accept both exported ids ("move-3") and bare integers."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    text = str(raw)
    if text.startswith("move-"):
        text = text[len("move-"):]
    try:
        return int(text)
    except ValueError:
        return 0


@dataclass(frozen=True)
class Move:
    """
    A single relocation of the top disk from one rod to another.

    Rods are stored by label ("A", "B", "C") so that moves read back from
    an exported file can be checked without trusting them first.
    """
    id: int
    source: str
    target: str
    disk: int
    description: str = ""

    def to_dict(self) -> dict:
        return {
            "id": f"move-{self.id}",
            "from": self.source,
            "to": self.target,
            "disk": self.disk,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Move":
        """Create a Move from its exported dict."""
        return cls(
            id=_parse_move_id(data.get("id", 0)),
            source=data.get("from", ""),
            target=data.get("to", ""),
            disk=data.get("disk", 0),
            description=data.get("description", ""),
        )


@dataclass(frozen=True)
class Solution:
    """
    A solved puzzle: the ordered moves plus provenance and validity.

    Built once per solve request and never modified afterwards.
    """
    number_of_disks: int
    moves: tuple[Move, ...]
    is_valid: bool
    source: str = SOLUTION_SOURCE
    total_moves: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "moves", tuple(self.moves))
        object.__setattr__(self, "total_moves", len(self.moves))

    def to_dict(self) -> dict:
        return {
            "numberOfDisks": self.number_of_disks,
            "moves": [m.to_dict() for m in self.moves],
            "totalMoves": self.total_moves,
            "source": self.source,
            "isValid": self.is_valid,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Solution":
        """
        Create a Solution from its exported dict.

        The stored isValid flag is kept as-is; callers that need to trust the
        file should run the validator on the loaded moves.
        """
        return cls(
            number_of_disks=data.get("numberOfDisks", 0),
            moves=tuple(Move.from_dict(m) for m in data.get("moves", [])),
            is_valid=bool(data.get("isValid", False)),
            source=data.get("source", SOLUTION_SOURCE),
        )
