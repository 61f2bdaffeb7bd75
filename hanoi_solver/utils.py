"""
Utility functions for the Tower of Hanoi solver.

Includes:
- JSON / JSONL save and load helpers
- UI helpers
"""

import json
from pathlib import Path
from typing import Any, Generator, Iterable

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree
from tqdm import tqdm

from .models import Move, Solution

# Global console instance
console = Console()

def print_header(title: str, subtitle: str = ""):
    """Print a styled header."""
    console.print(Panel(f"[bold blue]{title}[/bold blue]\n[italic]{subtitle}[/italic]", expand=False))

def print_solution_table(solution: Solution, show: int = 10):
    """Print a summary table of the solution, then its first moves."""
    table = Table(title="Solution Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("Disks", str(solution.number_of_disks))
    table.add_row("Moves", str(solution.total_moves))
    table.add_row("Source", solution.source)
    table.add_row("Valid", "yes" if solution.is_valid else "[red]no[/red]")

    console.print(table)

    moves = solution.moves
    if moves and show > 0:
        tree = Tree("[bold green]Moves[/bold green]")
        for move in moves[:show]:
            tree.add(
                f"[dim]{move.id:>4}[/dim] disk [yellow]{move.disk}[/yellow]: "
                f"[blue]{move.source}[/blue] -> [blue]{move.target}[/blue]"
            )
        if len(moves) > show:
            tree.add(f"[italic]... and {len(moves) - show} more[/italic]")
        console.print(tree)

def print_error(msg: str):
    console.print(f"[bold red]ERROR:[/bold red] {msg}")

def print_warning(msg: str):
    console.print(f"[bold yellow]WARNING:[/bold yellow] {msg}")

def print_success(msg: str):
    console.print(f"[bold green]SUCCESS:[/bold green] {msg}")


def save_json(data: Any, path: Path) -> None:
    """
    Save data to a JSON file with pretty formatting.

    Args:
        data: The data to serialize.
        path: The output file path.
    """
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    print(f"[INFO] Saved: {path}")


def load_json(path: Path) -> Any:
    """
    Load data from a JSON file.

    Args:
        path: The input file path.

    Returns:
        The deserialized data.
    """
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def save_moves_jsonl(
    moves: Iterable[Move],
    path: Path,
    number_of_disks: int,
    total: int | None = None,
) -> int:
    """
    Stream moves to a JSONL file, one move per line after a header line.

    Header: {"type": "solution_header", "numberOfDisks": N, "totalMoves": M}

    Args:
        moves: Moves in execution order (may be a generator).
        path: Output file path.
        number_of_disks: Disk count recorded in the header.
        total: Expected move count, for the header and progress bar.

    Returns:
        Number of moves written.
    """
    written = 0
    with open(path, 'w', encoding='utf-8') as f:
        header = {
            "type": "solution_header",
            "numberOfDisks": number_of_disks,
            "totalMoves": total,
        }
        f.write(json.dumps(header, ensure_ascii=False) + '\n')

        with tqdm(total=total, unit="move") as pbar:
            for move in moves:
                f.write(json.dumps(move.to_dict(), ensure_ascii=False) + '\n')
                written += 1
                pbar.update(1)

    print(f"[INFO] Saved: {path}")
    return written


def load_jsonl_header(path: Path) -> dict:
    """Read the header line of a JSONL moves file (empty dict if missing)."""
    with open(path, 'r', encoding='utf-8') as f:
        first = f.readline().strip()
    if not first:
        return {}
    data = json.loads(first)
    if isinstance(data, dict) and data.get("type") == "solution_header":
        return data
    return {}


def load_moves_jsonl(path: Path) -> Generator[Move, None, None]:
    """
    Yield moves from a JSONL file written by save_moves_jsonl.

    Header and blank lines are skipped.

    Args:
        path: Path to the JSONL file.

    Yields:
        Move objects in file order.
    """
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            line = line.strip()
            if not line:
                continue

            data = json.loads(line)
            if data.get("type") == "solution_header":
                continue
            yield Move.from_dict(data)
