#!/usr/bin/env python3
"""
Terminal UI
===========
Rich-based rendering of generated passphrases and their statistics.

Usage:
    from passkit.ui import render_result

    render_result(kit.generate())
"""

from typing import Dict, Iterable, Optional

from rich import box
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


def _console(console: Optional[Console]) -> Console:
    return console or Console()


def _stats_table(result) -> Table:
    table = Table(box=None, show_header=False, padding=(0, 1))
    table.add_column(style="dim", justify="right")
    table.add_column(style="bold")

    table.add_row("Possible:", result.space.formatted)
    table.add_row("Strength:", f"{result.space.strength} bits")
    table.add_row("Length:", str(result.length))
    table.add_row("Range:", f"{result.min_length}-{result.max_length}")
    return table


def render_result(result, console: Console = None, summary: str = None) -> None:
    """
    Print a passphrase panel with its search space and length statistics.

    Args:
        result: GenerationResult to display
        console: Rich console (a new one is created if omitted)
        summary: Optional word list description shown under the stats
    """
    console = _console(console)

    parts = [
        Text(result.passphrase, style="bold green"),
        Text(""),
        _stats_table(result),
    ]
    if summary:
        parts.append(Text(summary, style="dim"))

    console.print(Panel(
        Group(*parts),
        title="[bold]Passphrase[/bold]",
        border_style="cyan",
        box=box.ROUNDED,
    ))


def render_space(space, config, console: Console = None, summary: str = None) -> None:
    """Print the search space of a configuration without a passphrase."""
    console = _console(console)

    table = Table(box=None, show_header=False, padding=(0, 1))
    table.add_column(style="dim", justify="right")
    table.add_column(style="bold")
    table.add_row("Words:", str(config.word_count))
    table.add_row("Garble max:", str(config.effective_garble_max))
    table.add_row("Digit:", config.digit_policy.value)
    table.add_row("Possible:", space.formatted)
    table.add_row("Strength:", f"{space.strength} bits")
    if summary:
        table.add_row("List:", summary)

    console.print(Panel(table, title="[bold]Search Space[/bold]", border_style="yellow", box=box.ROUNDED))


def render_variants(word: str, variants: Iterable[str], console: Console = None) -> None:
    """Print the garbled variants of a word."""
    console = _console(console)
    variants = sorted(variants)

    if not variants:
        console.print(f"[yellow]No garbled variants for '{word}'.[/yellow]")
        return

    table = Table(box=box.SIMPLE)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Variant", style="bold")
    for i, variant in enumerate(variants, 1):
        table.add_row(str(i), variant)

    console.print(f"[bold]{word}[/bold]: {len(variants)} variants")
    console.print(table)


def render_lists(lists: Dict[str, int], default: str = None, console: Console = None) -> None:
    """Print the bundled word lists and their sizes."""
    console = _console(console)

    table = Table(box=box.SIMPLE)
    table.add_column("List", style="bold")
    table.add_column("Words", justify="right")
    table.add_column("")
    for name, size in lists.items():
        marker = "default" if name == default else ""
        table.add_row(name, f"{size:,}", marker)

    console.print(table)
