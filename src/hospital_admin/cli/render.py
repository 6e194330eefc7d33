"""Console rendering helpers for the menu.

Colors and layout only; nothing here touches session state.
"""

import shutil
from typing import Callable, Iterable, List, Sequence, TypeVar

import click

T = TypeVar("T")

DEFAULT_WIDTH = 80


def _width() -> int:
    return shutil.get_terminal_size((DEFAULT_WIDTH, 24)).columns


def title_banner(title: str) -> None:
    """Clear the screen and print a centered title."""
    click.clear()
    width = _width()
    banner = f"🏥 {title.upper()} 🏥"
    click.secho(banner.center(width), fg="magenta", bold=True)
    click.secho("═" * width, fg="magenta")


def header(title: str) -> None:
    rule = "═" * 35
    click.secho(f"\n{rule}\n {title.upper()} \n{rule}", fg="cyan")


def info(message: str) -> None:
    click.secho(f"  ✅ {message}", fg="green")


def warn(message: str) -> None:
    click.secho(f"  ⚠️  {message}", fg="yellow")


def error(message: str) -> None:
    click.secho(f"  ❌ {message}", fg="red", err=True)


def hint(message: str) -> None:
    click.secho(f"     {message}", dim=True, err=True)


def table(
    items: Iterable[T],
    headers: Sequence[str],
    get_row: Callable[[T], Sequence[str]],
) -> None:
    """Print items as an aligned table.

    Args:
        items: Rows to print
        headers: Column titles
        get_row: Maps an item to its cell strings
    """
    rows: List[Sequence[str]] = [get_row(item) for item in items]
    widths = [len(title) for title in headers]
    for row in rows:
        widths = [max(width, len(str(cell))) for width, cell in zip(widths, row)]

    def line(cells: Sequence[str]) -> str:
        return " | ".join(str(cell).ljust(width) for cell, width in zip(cells, widths))

    rule = "-" * min(_width(), max(len(line(headers)), 1))
    click.secho(f"\n{rule}\n{line(headers)}\n{rule}", fg="yellow")
    for row in rows:
        click.echo(line(row))
    click.echo(rule)
