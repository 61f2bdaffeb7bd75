"""
Solver configuration.

Defaults live here as module constants; deployments override the disk-count
bounds through environment variables (or a .env file).
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Rod labels, indexed by rod position
ROD_LABELS = ("A", "B", "C")

# Provenance tag stamped on every solution computed by the solver
SOLUTION_SOURCE = "generated"

# Largest puzzle generate_solution() will materialize
DEFAULT_MAX_DISKS = 8

# Largest puzzle iter_moves() will stream (2^30 - 1 moves)
DEFAULT_STREAM_MAX_DISKS = 30

MAX_DISKS_ENV = "HANOI_MAX_DISKS"
STREAM_MAX_DISKS_ENV = "HANOI_STREAM_MAX_DISKS"


def _read_bound(env_name: str, default: int) -> int:
    """
    Read a positive integer bound from the environment.

    Args:
        env_name: Environment variable to read.
        default: Value used when the variable is unset or invalid.

    Returns:
        The configured bound.
    """
    raw = os.environ.get(env_name)
    if raw is None or not raw.strip():
        return default

    try:
        value = int(raw)
    except ValueError:
        print(f"[WARN] {env_name}={raw!r} is not an integer, using {default}")
        return default

    if value < 1:
        print(f"[WARN] {env_name}={value} must be at least 1, using {default}")
        return default

    return value


def get_max_disks() -> int:
    """Upper bound on the disk count for a materialized solution."""
    return _read_bound(MAX_DISKS_ENV, DEFAULT_MAX_DISKS)


def get_stream_max_disks() -> int:
    """Upper bound on the disk count for streamed move generation."""
    return _read_bound(STREAM_MAX_DISKS_ENV, DEFAULT_STREAM_MAX_DISKS)
