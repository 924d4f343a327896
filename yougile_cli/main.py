"""Main CLI entry point - one-shot commands or an interactive shell."""

from __future__ import annotations

import argparse
import logging
import shlex
import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.history import FileHistory
from prompt_toolkit.styles import Style

from yougile_cli import __version__
from yougile_cli.commands import COMMAND_CLASSES, AppContext, BaseCommand
from yougile_cli.core.config import get_config_dir, get_settings
from yougile_cli.core.errors import YougileError
from yougile_cli.core.logging_setup import setup_logging
from yougile_cli.ui.console import console, print_error
from yougile_cli.utils.completions import CommandCompleter

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_UNEXPECTED = 2
EXIT_INTERRUPTED = 130  # 128 + SIGINT

PROMPT_STYLE = Style.from_dict({
    "prompt": "#26C6DA bold",
    "completion-menu": "bg:#263238 #eceff1",
    "completion-menu.completion.current": "bg:#26C6DA #000000 bold",
    "completion-menu.meta.completion": "bg:#263238 #90a4ae",
})


class YougileCLI:
    """Main CLI application."""

    def __init__(self, ctx: AppContext | None = None):
        self.ctx = ctx or AppContext.create(get_settings())

        # Command registry: name and aliases -> instance
        self.commands: dict[str, BaseCommand] = {}
        for command_cls in COMMAND_CLASSES:
            command = command_cls(self.ctx)
            for key in (command.name, *command.aliases):
                self.commands[key] = command

    def run_command(self, name: str, args: list[str]) -> bool:
        """Execute one command, rendering known errors instead of raising."""
        command = self.commands.get(name.lower().lstrip("/"))
        if command is None:
            print_error(f"Unknown command: {name}")
            console.print('[muted]Run "yougile help" for available commands[/muted]')
            return False

        try:
            return command.execute(args)
        except YougileError as e:
            logger.debug("Command %s failed", command.name, exc_info=True)
            print_error(str(e), hint=e.hint)
            return False

    def run(self) -> int:
        """Run the interactive shell."""
        history_file = self.ctx.settings.resolved_history_file
        history_file.parent.mkdir(parents=True, exist_ok=True)
        session: PromptSession = PromptSession(
            history=FileHistory(str(history_file)),
            completer=CommandCompleter(),
            style=PROMPT_STYLE,
            complete_while_typing=True,
        )

        console.print(f"[primary.bold]Yougile CLI {__version__}[/primary.bold]")
        console.print("[muted]Type /help for commands, /quit to exit[/muted]\n")

        while True:
            try:
                user_input = session.prompt(HTML("<prompt>❯</prompt> ")).strip()
                if not user_input:
                    continue

                cmd_name, args = self._parse_input(user_input)

                if cmd_name in ("quit", "exit"):
                    console.print("[muted]Goodbye.[/muted]")
                    return EXIT_SUCCESS
                if cmd_name == "clear":
                    console.clear()
                    continue

                try:
                    self.run_command(cmd_name, args)
                except KeyboardInterrupt:
                    console.print("\n[warning]Interrupted[/warning]")
                except Exception as e:  # noqa: BLE001
                    logger.exception("Command %s crashed", cmd_name)
                    print_error(f"Command failed: {e}")

                console.print()

            except KeyboardInterrupt:
                console.print("\n[muted]Type /quit to exit[/muted]")
            except EOFError:
                console.print("\n[muted]Goodbye.[/muted]")
                return EXIT_SUCCESS

    def close(self) -> None:
        self.ctx.api.close()

    @staticmethod
    def _parse_input(user_input: str) -> tuple[str, list[str]]:
        """Split input into command and arguments, honouring quotes."""
        try:
            parts = shlex.split(user_input)
        except ValueError:
            parts = user_input.split()

        if not parts:
            return "", []
        return parts[0].lower().lstrip("/"), parts[1:]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yougile",
        description="Interactive CLI client for Yougile task management",
        allow_abbrev=False,
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logging on the console",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"yougile {__version__}",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help="init, create (c), list (ls), config (cfg) or help; starts a shell if omitted",
    )
    parser.add_argument("args", nargs=argparse.REMAINDER, help=argparse.SUPPRESS)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run a command or the shell, and return the exit code."""
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except YougileError as e:
        print_error(str(e), hint=e.hint)
        return EXIT_FAILURE

    setup_logging(
        verbose=args.verbose,
        console_level=settings.log_level,
        log_file=get_config_dir() / "yougile.log",
    )

    app = YougileCLI(AppContext.create(settings))
    try:
        if args.command:
            success = app.run_command(args.command, args.args)
            return EXIT_SUCCESS if success else EXIT_FAILURE
        return app.run()
    finally:
        app.close()


def cli() -> None:
    """Console-script entry point and final error boundary."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        console.print("\n[warning]Aborted by user.[/warning]")
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:  # noqa: BLE001
        logger.exception("Unexpected error")
        print_error(f"{type(e).__name__}: {e}", title="Unexpected error")
        sys.exit(EXIT_UNEXPECTED)


if __name__ == "__main__":
    cli()
