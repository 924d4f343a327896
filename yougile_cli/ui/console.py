"""Rich console instance and message helpers."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from yougile_cli.ui.theme import get_theme

# Create the global console with our theme
console = Console(theme=get_theme().to_rich_theme(), highlight=False)


def _print_boxed(message: str, title: str, icon: str, color: str) -> None:
    content = Text()
    content.append(message, style=color)

    console.print(Panel(
        content,
        title=f"[{color} bold]{icon} {title}[/{color} bold]",
        title_align="left",
        border_style=color,
        box=box.ROUNDED,
        padding=(0, 2),
    ))


def print_error(message: str, title: str = "Error", hint: str | None = None) -> None:
    """Print an error message, with an optional hint below it."""
    _print_boxed(message, title, "✖", get_theme().error)
    if hint:
        console.print(f"  [warning]Hint:[/warning] [muted]{escape(hint)}[/muted]")


def print_success(message: str, title: str = "Success") -> None:
    _print_boxed(message, title, "✔", get_theme().success)


def print_warning(message: str, title: str = "Warning") -> None:
    _print_boxed(message, title, "⚠", get_theme().warning)


def print_header(title: str) -> None:
    """Print a command header line."""
    console.print()
    console.print(f"[primary.bold]{title}[/primary.bold]")
    console.print()
