"""Config command - view or edit the stored configuration."""

from __future__ import annotations

from rich.markup import escape

from yougile_cli.commands.base import BaseCommand
from yougile_cli.commands.init import InitCommand
from yougile_cli.ui.console import console, print_success
from yougile_cli.ui.panels import create_config_panel
from yougile_cli.ui.prompts import choose, confirm

ACTIONS = [
    ("exit", "Nothing, exit"),
    ("init", "Reconfigure (run init)"),
    ("clear", "Clear defaults only"),
    ("show-key", "Show full API key"),
]


class ConfigCommand(BaseCommand):
    """View or edit configuration."""

    name = "config"
    description = "View configuration, clear defaults or reconfigure"
    usage = "/config"
    aliases = ["cfg"]

    def execute(self, args: list[str]) -> bool:
        """Show the configuration and offer edits."""
        config = self.store.load()
        if config is None or not config.api_key:
            console.print("[warning]No configuration found.[/warning]")
            if confirm("Run setup now?", default=True):
                return InitCommand(self.ctx).execute([])
            return True

        console.print()
        console.print(create_config_panel(config, self.store.path))
        console.print()

        action, _ = choose("What would you like to do?", ACTIONS, lambda a: a[1])

        if action == "init":
            return InitCommand(self.ctx).execute([])
        if action == "clear":
            self.store.save(config.clear_defaults())
            print_success("Defaults cleared.")
        elif action == "show-key":
            console.print(f"\n[warning]API Key:[/warning] {escape(config.api_key)}\n")

        return True
