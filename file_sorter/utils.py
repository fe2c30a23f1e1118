"""
Utility functions for the file sorter.

Includes:
- Console output helpers
- JSON report writer
"""

import json
from pathlib import Path
from typing import Any, Mapping
from rich.console import Console
from rich.table import Table
from rich.tree import Tree
from rich.panel import Panel
from rich.markup import escape

# Global console instances
console = Console()
err_console = Console(stderr=True)


def print_header(title: str, subtitle: str = ""):
    """Print a styled header."""
    console.print(Panel(f"[bold blue]{title}[/bold blue]\n[italic]{escape(subtitle)}[/italic]", expand=False))


def rel_path(path: Path, root: Path) -> str:
    """Path relative to root, in POSIX form, for display."""
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return str(path)


def print_groups(groups: Mapping[str, list[Path]], root: Path):
    """Print the extension groups as a table."""
    table = Table(title="Extension Groups")
    table.add_column("Group", style="cyan")
    table.add_column("Files", style="magenta")
    table.add_column("Sample", style="dim")

    for key in sorted(groups):
        files = groups[key]
        sample = ", ".join(rel_path(f, root) for f in files[:3])
        if len(files) > 3:
            sample += ", ..."
        table.add_row(escape(key), str(len(files)), escape(sample))

    console.print(table)


def print_plan_table(plan):
    """Print a summary table of the plan."""
    renames = plan.renames
    folders = plan.directories_to_create

    table = Table(title="Plan Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Count", style="magenta")

    table.add_row("Moves", str(len(renames)))
    table.add_row("New Folders", str(len(folders)))

    console.print(table)

    if renames:
        tree = Tree("[bold green]Sample Moves[/bold green]")
        for old, new in list(renames.items())[:10]:
            tree.add(f"[yellow]{escape(rel_path(old, plan.root))}[/yellow] -> [blue]{escape(rel_path(new, plan.root))}[/blue]")
        if len(renames) > 10:
            tree.add(f"[italic]... and {len(renames)-10} more[/italic]")
        console.print(tree)


def print_error(msg: str):
    err_console.print(f"[bold red]ERROR:[/bold red] {escape(msg)}")


def print_warning(msg: str):
    err_console.print(f"[bold yellow]WARNING:[/bold yellow] {escape(msg)}")


def print_success(msg: str):
    console.print(f"[bold green]SUCCESS:[/bold green] {escape(msg)}")


def save_json(data: Any, path: Path) -> None:
    """
    Save data to a JSON file with pretty formatting.

    Args:
        data: The data to serialize.
        path: The output file path.
    """
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    console.print(f"[INFO] Saved: {path}", markup=False)
