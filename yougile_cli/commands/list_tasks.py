"""List command - show the tasks of a column or project."""

from __future__ import annotations

from typing import Optional

from rich.markup import escape

from yougile_cli.commands.base import BaseCommand
from yougile_cli.core.errors import YougileError
from yougile_cli.ui.console import console, print_error, print_header
from yougile_cli.ui.panels import format_task
from yougile_cli.ui.spinners import create_spinner


class ListCommand(BaseCommand):
    """List tasks."""

    name = "list"
    description = "List tasks in the default column, a picked column or a project"
    usage = "/list [-a] [-p [PROJECT_ID]]"
    aliases = ["ls"]
    switches = frozenset({"a", "all"})

    def execute(self, args: list[str]) -> bool:
        """List tasks."""
        flags, _ = self.parse_flags(args)
        config = self.store.require()

        print_header("📋 Tasks")

        list_all = bool(self.flag(flags, "all", "a"))
        project_flag = self.flag(flags, "project", "p")
        # Bare -p (no id) means "let me pick"
        pick_interactively = project_flag is True
        project_id: Optional[str] = project_flag if isinstance(project_flag, str) else None

        column_id: Optional[str] = None
        if list_all:
            project_id = project_id or config.default_project_id
        elif project_id:
            console.print(f"[muted]Project: {escape(project_id)}[/muted]\n")
        elif config.has_default_column and not pick_interactively:
            column_id = config.default_column_id
            console.print(f"[muted]Column: {escape(config.default_location)}[/muted]\n")
        else:
            _, _, column = self.pick_location()
            column_id = column.id

        try:
            with create_spinner("Loading tasks...", style="loading", error_message="Failed to load tasks"):
                tasks = self.api.list_tasks(column_id=column_id, project_id=project_id)
        except YougileError as e:
            print_error(str(e), hint=e.hint)
            return False

        if not tasks:
            console.print("[warning]No tasks found.[/warning]")
            return True

        console.print(f"[text]Found {len(tasks)} task(s):[/text]\n")
        for index, task in enumerate(tasks, 1):
            console.print(format_task(task, index))

        return True
