"""Interactive prompts built on rich.prompt."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Optional, TypeVar

from rich.markup import escape
from rich.prompt import Confirm, Prompt

from yougile_cli.ui.console import console

T = TypeVar("T")

PROMPT_MARK = "[primary]❯[/primary]"


def ask_text(
    message: str,
    *,
    default: str = "",
    password: bool = False,
    validate: Callable[[str], Optional[str]] | None = None,
) -> str:
    """Ask for a line of text until ``validate`` returns no error message."""
    while True:
        answer = Prompt.ask(
            f"{PROMPT_MARK} [text]{message}[/text]",
            console=console,
            default=default,
            show_default=bool(default),
            password=password,
        ).strip()
        error = validate(answer) if validate else None
        if not error:
            return answer
        console.print(f"  [error]{escape(error)}[/error]")


def confirm(message: str, *, default: bool = False) -> bool:
    return Confirm.ask(f"{PROMPT_MARK} [text]{message}[/text]", console=console, default=default)


def choose(message: str, items: Sequence[T], label: Callable[[T], str]) -> T:
    """Show ``items`` as a numbered list and return the one picked."""
    if not items:
        raise ValueError("nothing to choose from")

    for i, item in enumerate(items, 1):
        console.print(f"  [number]{i:>2})[/number] {escape(label(item))}")

    choices = [str(i) for i in range(1, len(items) + 1)]
    answer = Prompt.ask(
        f"{PROMPT_MARK} [text]{message}[/text]",
        console=console,
        choices=choices,
        show_choices=False,
        default="1" if len(items) == 1 else ...,
    )
    return items[int(answer) - 1]


def parse_selection(text: str, count: int) -> Optional[list[int]]:
    """Parse ``"1,3 5-7"`` into sorted zero-based indexes.

    Returns None if any part is malformed or out of ``1..count``. An empty
    string selects nothing.
    """
    indexes: set[int] = set()
    for part in text.replace(",", " ").split():
        start, sep, end = part.partition("-")
        try:
            lo = int(start)
            hi = int(end) if sep else lo
        except ValueError:
            return None
        if lo > hi or lo < 1 or hi > count:
            return None
        indexes.update(range(lo - 1, hi))
    return sorted(indexes)


def choose_many(message: str, items: Sequence[T], label: Callable[[T], str]) -> list[T]:
    """Numbered multi-select; Enter picks nothing."""
    for i, item in enumerate(items, 1):
        console.print(f"  [number]{i:>2})[/number] {escape(label(item))}")

    while True:
        answer = Prompt.ask(
            f"{PROMPT_MARK} [text]{message}[/text] [muted](e.g. 1,3 or 2-4; Enter to skip)[/muted]",
            console=console,
            default="",
            show_default=False,
        )
        selected = parse_selection(answer, len(items))
        if selected is not None:
            return [items[i] for i in selected]
        console.print(f"  [error]Enter numbers between 1 and {len(items)}[/error]")
