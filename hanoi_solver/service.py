"""
Request handling for the Tower of Hanoi solver.

Turns a raw request payload into a response envelope:
    {"success": True, "solution": {...}}
    {"success": False, "error": "..."}
"""

from typing import Any

from .config import get_max_disks
from .errors import InvalidDiskCount
from .solving import generate_solution

NOT_A_NUMBER = "numberOfDisks must be a number."
NOT_WHOLE = "numberOfDisks must be a whole number."
INTERNAL_ERROR = "Internal server error."


def _out_of_range(max_disks: int) -> str:
    return f"numberOfDisks must be between 1 and {max_disks}."


def _reject(message: str) -> dict[str, Any]:
    return {"success": False, "error": message}


def parse_disk_count(data: Any, max_disks: int) -> int:
    """
    Pull a usable disk count out of a request payload.

    Args:
        data: Request payload, expected to be a dict with numberOfDisks.
        max_disks: Largest accepted disk count.

    Returns:
        The disk count as an int.

    Raises:
        InvalidDiskCount: With a caller-facing message.
    """
    value = data.get("numberOfDisks") if isinstance(data, dict) else None

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidDiskCount(NOT_A_NUMBER)

    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidDiskCount(NOT_WHOLE)
        value = int(value)

    if value < 1 or value > max_disks:
        raise InvalidDiskCount(_out_of_range(max_disks))

    return value


def handle_request(data: Any) -> dict[str, Any]:
    """
    Solve the puzzle described by a request payload.

    Invalid disk counts are rejected with a clear reason. Any other failure
    is logged and reported with a generic message.

    Args:
        data: Request payload, e.g. {"numberOfDisks": 3}.

    Returns:
        Response envelope dict.
    """
    max_disks = get_max_disks()

    try:
        number_of_disks = parse_disk_count(data, max_disks)
    except InvalidDiskCount as e:
        print(f"[WARN] Rejected request: {e}")
        return _reject(str(e))

    print(f"[INFO] Solution request: {number_of_disks} disks")

    try:
        solution = generate_solution(number_of_disks, max_disks=max_disks)
    except Exception as e:
        print(f"[ERROR] Error generating solution: {type(e).__name__}: {e}")
        return _reject(INTERNAL_ERROR)

    print(
        f"[INFO] Generated solution for {number_of_disks} disks with "
        f"{solution.total_moves} moves"
    )

    return {
        "success": True,
        "solution": solution.to_dict(),
    }
