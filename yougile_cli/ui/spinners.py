"""Spinner shown while a network call is in flight."""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager

from rich.markup import escape

from yougile_cli.ui.console import console

SPINNER_STYLES = {
    "default": "dots",
    "loading": "dots12",
    "auth": "arc",
}


@contextmanager
def create_spinner(
    message: str,
    style: str = "default",
    success_message: str | None = None,
    error_message: str | None = None,
) -> Generator[None, None, None]:
    """Context manager for showing a spinner during an operation.

    On success prints ``success_message`` (if given). On error prints
    ``error_message`` (if given) and re-raises.
    """
    spinner_type = SPINNER_STYLES.get(style, "dots")

    with console.status(
        f"[primary]{escape(message)}[/primary]",
        spinner=spinner_type,
        spinner_style="primary",
    ):
        try:
            yield
        except Exception:
            if error_message:
                console.print(f"  [error]✖[/error] {escape(error_message)}")
            raise
    if success_message:
        console.print(f"  [success]✔[/success] {escape(success_message)}")
