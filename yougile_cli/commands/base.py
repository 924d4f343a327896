"""Base command class and shared selection helpers for CLI commands."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from yougile_cli.core.api_client import YougileClient
from yougile_cli.core.config import ConfigStore, Settings
from yougile_cli.core.errors import YougileError
from yougile_cli.core.models import Board, Column, Project
from yougile_cli.ui.prompts import choose
from yougile_cli.ui.spinners import create_spinner


@dataclass
class AppContext:
    """Objects shared by every command for the life of the process."""

    settings: Settings
    store: ConfigStore
    api: YougileClient

    @classmethod
    def create(cls, settings: Settings) -> "AppContext":
        store = ConfigStore()
        api = YougileClient(store, api_host=settings.api_host, timeout=settings.timeout)
        return cls(settings=settings, store=store, api=api)


class BaseCommand(ABC):
    """Base class for all CLI commands."""

    name: str = "base"
    description: str = "Base command"
    usage: str = ""
    aliases: list[str] = []
    # Flags that never take a value
    switches: frozenset[str] = frozenset()

    def __init__(self, ctx: AppContext):
        self.ctx = ctx
        self.settings = ctx.settings
        self.store = ctx.store
        self.api = ctx.api

    @abstractmethod
    def execute(self, args: list[str]) -> bool:
        """
        Execute the command.

        Args:
            args: Command arguments

        Returns:
            True if successful, False otherwise
        """

    def parse_flags(self, args: list[str]) -> tuple[dict[str, Any], list[str]]:
        """Parse command-line flags from arguments."""
        flags: dict[str, Any] = {}
        remaining = []

        def takes_value(key: str, i: int) -> bool:
            return (
                key not in self.switches
                and i + 1 < len(args)
                and not args[i + 1].startswith("-")
            )

        i = 0
        while i < len(args):
            arg = args[i]
            if arg.startswith("--"):
                key = arg[2:]
                if "=" in key:
                    key, value = key.split("=", 1)
                    flags[key] = value
                elif takes_value(key, i):
                    flags[key] = args[i + 1]
                    i += 1
                else:
                    flags[key] = True
            elif arg.startswith("-") and len(arg) == 2:
                key = arg[1]
                if takes_value(key, i):
                    flags[key] = args[i + 1]
                    i += 1
                else:
                    flags[key] = True
            else:
                remaining.append(arg)
            i += 1

        return flags, remaining

    @staticmethod
    def flag(flags: dict[str, Any], long: str, short: str | None = None) -> Any:
        """Value of ``--long`` or ``-short``, whichever was given."""
        if long in flags:
            return flags[long]
        if short is not None:
            return flags.get(short)
        return None

    # Project → board → column selection shared by create, list and init.

    def pick_project(self) -> Project:
        with create_spinner("Loading projects...", style="loading", error_message="Failed to load projects"):
            projects = self.api.list_projects()
        if not projects:
            raise YougileError("No projects found")
        return choose("Select project", projects, lambda p: p.title)

    def pick_board(self, project: Project) -> Board:
        with create_spinner("Loading boards...", style="loading", error_message="Failed to load boards"):
            boards = self.api.list_boards(project.id)
        if not boards:
            raise YougileError("No boards found in this project")
        return choose("Select board", boards, lambda b: b.title)

    def pick_column(self, board: Board) -> Column:
        with create_spinner("Loading columns...", style="loading", error_message="Failed to load columns"):
            columns = self.api.list_columns(board.id)
        if not columns:
            raise YougileError("No columns found in this board")
        return choose("Select column", columns, lambda c: c.title)

    def pick_location(self) -> tuple[Project, Board, Column]:
        project = self.pick_project()
        board = self.pick_board(project)
        column = self.pick_column(board)
        return project, board, column
