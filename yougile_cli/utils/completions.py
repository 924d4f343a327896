"""Command completion for the interactive shell."""

from __future__ import annotations

from collections.abc import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

COMMANDS = {
    "/init": "Configure API key and defaults",
    "/create": "Create a new task",
    "/list": "List tasks",
    "/config": "View or edit configuration",
    "/help": "Show help",
    "/clear": "Clear the screen",
    "/quit": "Exit the shell",
    "/exit": "Exit the shell",
}

COMMAND_OPTIONS = {
    "/create": ["--title", "-t", "--description", "-d", "--quick", "-q"],
    "/list": ["--all", "-a", "--project", "-p"],
    "/help": [c.lstrip("/") for c in COMMANDS],
}

OPTION_META = {
    "--title": "task title",
    "-t": "task title",
    "--description": "task description",
    "-d": "task description",
    "--quick": "use default column",
    "-q": "use default column",
    "--all": "all tasks in project",
    "-a": "all tasks in project",
    "--project": "project id",
    "-p": "project id",
}

# Aliases resolve to the canonical command for option lookup
ALIASES = {"/c": "/create", "/ls": "/list", "/h": "/help", "/?": "/help"}


class CommandCompleter(Completer):
    """Completer for command names and their flags."""

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        text = document.text_before_cursor
        words = text.split()

        if not words:
            for cmd, desc in COMMANDS.items():
                yield Completion(cmd, start_position=0, display_meta=desc)
            return

        if len(words) == 1 and not text.endswith(" "):
            word = words[0].lower()
            for cmd, desc in COMMANDS.items():
                if cmd.lstrip("/").startswith(word.lstrip("/")):
                    yield Completion(cmd, start_position=-len(word), display_meta=desc)
            return

        cmd = words[0].lower()
        if not cmd.startswith("/"):
            cmd = "/" + cmd
        cmd = ALIASES.get(cmd, cmd)
        options = COMMAND_OPTIONS.get(cmd, [])

        current = "" if text.endswith(" ") else words[-1].lower()
        for opt in options:
            if opt.startswith(current):
                yield Completion(
                    opt,
                    start_position=-len(current),
                    display_meta=OPTION_META.get(opt, ""),
                )
