"""CLI Commands for Yougile."""

from yougile_cli.commands.base import AppContext, BaseCommand
from yougile_cli.commands.config import ConfigCommand
from yougile_cli.commands.create import CreateCommand
from yougile_cli.commands.help import HelpCommand
from yougile_cli.commands.init import InitCommand
from yougile_cli.commands.list_tasks import ListCommand

__all__ = [
    "AppContext",
    "BaseCommand",
    "COMMAND_CLASSES",
    "InitCommand",
    "CreateCommand",
    "ListCommand",
    "ConfigCommand",
    "HelpCommand",
]

# Order shown in help
COMMAND_CLASSES: list[type[BaseCommand]] = [
    InitCommand,
    CreateCommand,
    ListCommand,
    ConfigCommand,
    HelpCommand,
]
