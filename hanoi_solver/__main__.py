#!/usr/bin/env python3
"""
Tower of Hanoi Solver - CLI Entry Point
=======================================

Usage:
    python -m hanoi_solver solve 3 -o solution.json
    python -m hanoi_solver validate solution.json --replay
    python -m hanoi_solver stream 20 -o moves.jsonl
    python -m hanoi_solver request '{"numberOfDisks": 4}'
"""

import argparse
import json
import sys
from pathlib import Path

from .config import get_max_disks, get_stream_max_disks
from .errors import HanoiError, InvalidDiskCount
from .models import Solution, minimal_move_count
from .replay import replay_moves
from .service import handle_request
from .solving import generate_solution, iter_moves, check_disk_count, validate_solution
from .utils import (
    console,
    load_json,
    load_jsonl_header,
    load_moves_jsonl,
    print_error,
    print_header,
    print_solution_table,
    print_success,
    print_warning,
    save_json,
    save_moves_jsonl,
)


def positive_int(value: str) -> int:
    """argparse type for limits that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def cmd_solve(args) -> int:
    """Solve command - generate, show and optionally save a solution."""
    max_disks = get_max_disks() if args.max_disks is None else args.max_disks

    print_header("Tower of Hanoi Solver", f"Disks: {args.disks}\nLimit: {max_disks}")

    try:
        solution = generate_solution(args.disks, max_disks=max_disks)
    except InvalidDiskCount as e:
        print_error(str(e))
        return 1
    except HanoiError as e:
        print_error(f"Solver failed: {e}")
        return 1

    print_solution_table(solution, show=args.show)

    if args.output:
        save_json(solution.to_dict(), args.output)

    if not solution.is_valid:
        print_warning("Generated solution did not pass validation")
        return 1

    print_success(f"Solved {args.disks} disks in {solution.total_moves} moves")
    return 0


def _load_for_validation(path: Path) -> tuple[int, list]:
    """Load (number_of_disks, moves) from a .json solution or .jsonl stream."""
    if path.suffix == ".jsonl":
        header = load_jsonl_header(path)
        return header.get("numberOfDisks", 0), list(load_moves_jsonl(path))

    data = load_json(path)
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object at the top level")
    if not isinstance(data.get("moves", []), list):
        raise ValueError("\"moves\" must be a list")

    solution = Solution.from_dict(data)
    return solution.number_of_disks, list(solution.moves)


def cmd_validate(args) -> int:
    """Validate command - check an exported solution file."""
    if not args.solution.exists():
        print_error(f"Solution file not found: {args.solution}")
        return 1

    try:
        number_of_disks, moves = _load_for_validation(args.solution)
    except (ValueError, TypeError, AttributeError) as e:
        print_error(f"Could not read {args.solution}: {e}")
        return 1

    if isinstance(number_of_disks, bool) or not isinstance(number_of_disks, int) or number_of_disks < 0:
        print_error(f"Invalid disk count in {args.solution}: {number_of_disks!r}")
        return 1

    limit = get_stream_max_disks()
    if number_of_disks > limit:
        print_error(f"Disk count {number_of_disks} in {args.solution} exceeds the limit of {limit}")
        return 1

    print_header("VALIDATE", f"File: {args.solution}\nDisks: {number_of_disks}")

    expected = minimal_move_count(number_of_disks)
    is_valid = validate_solution(moves, number_of_disks)
    console.print(f"[INFO] Moves: {len(moves)} (minimal: {expected})")

    if not is_valid:
        print_error("Solution is not structurally valid")
        return 1

    if args.replay:
        console.print("\n[bold cyan]Replaying moves...[/bold cyan]")
        report = replay_moves(moves, number_of_disks)
        if not report["solved"]:
            print_error(report["error"] or "Moves do not solve the puzzle")
            return 1

    print_success("Solution is valid")
    return 0


def cmd_stream(args) -> int:
    """Stream command - write a large solution move by move."""
    max_disks = get_stream_max_disks() if args.max_disks is None else args.max_disks

    try:
        check_disk_count(args.disks, max_disks)
    except InvalidDiskCount as e:
        print_error(str(e))
        return 1

    total = minimal_move_count(args.disks)
    print_header("STREAM", f"Disks: {args.disks}\nMoves: {total}\nOutput: {args.output}")

    try:
        written = save_moves_jsonl(
            iter_moves(args.disks, max_disks=max_disks),
            args.output,
            args.disks,
            total=total,
        )
    except HanoiError as e:
        print_error(f"Solver failed: {e}")
        return 1

    print_success(f"Wrote {written} moves")
    return 0


def cmd_request(args) -> int:
    """Request command - run a raw JSON payload through the request handler."""
    try:
        payload = json.loads(args.payload)
    except json.JSONDecodeError as e:
        print_error(f"Invalid JSON payload: {e}")
        return 1

    response = handle_request(payload)
    print(json.dumps(response, indent=2, ensure_ascii=False))
    return 0 if response["success"] else 1


# =============================================================================
# Main
# =============================================================================

def main() -> int:
    parser = argparse.ArgumentParser(
        description="Tower of Hanoi Solver - Generate and verify optimal move sequences",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- SOLVE command ---
    solve_parser = subparsers.add_parser("solve", help="Generate a solution")
    solve_parser.add_argument("disks", type=int, help="Number of disks")
    solve_parser.add_argument("-o", "--output", type=Path,
                              help="Save the solution as JSON")
    solve_parser.add_argument("--max-disks", type=positive_int, metavar="N",
                              help="Override the disk-count limit (default: HANOI_MAX_DISKS or 8)")
    solve_parser.add_argument("--show", type=int, default=10, metavar="K",
                              help="Number of moves to print (default: 10)")
    solve_parser.set_defaults(func=cmd_solve)

    # --- VALIDATE command ---
    validate_parser = subparsers.add_parser("validate", help="Validate a saved solution")
    validate_parser.add_argument("solution", type=Path, help="Solution file (.json or .jsonl)")
    validate_parser.add_argument("--replay", action="store_true",
                                 help="Also replay every move against simulated rods")
    validate_parser.set_defaults(func=cmd_validate)

    # --- STREAM command ---
    stream_parser = subparsers.add_parser("stream", help="Write a large solution as JSONL")
    stream_parser.add_argument("disks", type=int, help="Number of disks")
    stream_parser.add_argument("-o", "--output", type=Path, default=Path("moves.jsonl"),
                               help="Output file (default: moves.jsonl)")
    stream_parser.add_argument("--max-disks", type=positive_int, metavar="N",
                               help="Override the streaming limit (default: HANOI_STREAM_MAX_DISKS or 30)")
    stream_parser.set_defaults(func=cmd_stream)

    # --- REQUEST command ---
    request_parser = subparsers.add_parser("request", help="Handle a raw JSON request payload")
    request_parser.add_argument("payload", type=str, help='e.g. \'{"numberOfDisks": 3}\'')
    request_parser.set_defaults(func=cmd_request)

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
