"""Help command - display CLI help and documentation."""

from __future__ import annotations

from typing import NamedTuple

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from yougile_cli import __version__
from yougile_cli.commands.base import BaseCommand
from yougile_cli.ui.console import console


class HelpEntry(NamedTuple):
    name: str
    aliases: list[str]
    description: str
    usage: str

    @classmethod
    def from_command(cls, command: type[BaseCommand]) -> HelpEntry:
        return cls(command.name, list(command.aliases), command.description, command.usage)


# Handled by the shell loop rather than a command class
SHELL_ENTRIES = [
    HelpEntry("quit", ["exit"], "Exit the interactive shell", "/quit"),
]


def help_entries() -> list[HelpEntry]:
    """One entry per registered command, in registration order."""
    from yougile_cli.commands import COMMAND_CLASSES

    return [HelpEntry.from_command(c) for c in COMMAND_CLASSES] + SHELL_ENTRIES


def _slashed(names: list[str]) -> str:
    return ", ".join(f"/{n}" for n in names)


class HelpCommand(BaseCommand):
    """Display help information."""

    name = "help"
    description = "Show this help message"
    usage = "/help [command]"
    aliases = ["h", "?"]

    def execute(self, args: list[str]) -> bool:
        """Display help."""
        _, remaining = self.parse_flags(args)

        if remaining:
            return self._show_command_help(remaining[0].lower().lstrip("/"))
        return self._show_general_help()

    def _show_general_help(self) -> bool:
        """Show general help with all commands."""
        table = Table(
            show_header=True,
            header_style="primary",
            border_style="muted",
            padding=(0, 2),
        )
        table.add_column("Command", style="command", width=10)
        table.add_column("Aliases", style="muted", width=10)
        table.add_column("Description", style="text")

        for entry in help_entries():
            table.add_row(f"/{entry.name}", _slashed(entry.aliases), entry.description)

        console.print(Panel(
            table,
            title=f"[primary]Yougile CLI {__version__}[/primary]",
            border_style="primary",
            padding=(1, 2),
        ))

        console.print()
        tips = Text()
        tips.append("Tips:\n", style="primary")
        tips.append("  • ", style="muted")
        tips.append("Use ", style="text")
        tips.append("/help <command>", style="command")
        tips.append(" for detailed command help\n", style="text")
        tips.append("  • ", style="muted")
        tips.append("Commands can be typed without the ", style="text")
        tips.append("/", style="command")
        tips.append(" prefix\n", style="text")
        tips.append("  • ", style="muted")
        tips.append("Quote titles with spaces: ", style="text")
        tips.append('create -t "Fix login" -q', style="command")
        console.print(tips)

        return True

    def _show_command_help(self, cmd_name: str) -> bool:
        """Show detailed help for a specific command."""
        entry = next(
            (e for e in help_entries() if cmd_name == e.name or cmd_name in e.aliases),
            None,
        )

        if entry is None:
            console.print(f"[error]Unknown command: {cmd_name}[/error]")
            console.print("[muted]Use /help to see available commands[/muted]")
            return False

        text = Text()
        text.append(f"{entry.description}\n\n", style="text")
        text.append("Usage:\n", style="muted")
        text.append(f"  {entry.usage}\n\n", style="command")
        text.append("Aliases:\n", style="muted")
        text.append(f"  {_slashed(entry.aliases) or '-'}", style="secondary")

        console.print()
        console.print(Panel(
            text,
            title=f"[primary]/{entry.name}[/primary]",
            border_style="primary",
            padding=(1, 2),
        ))

        return True
