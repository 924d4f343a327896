"""Create command - create a task interactively or in quick mode."""

from __future__ import annotations

import logging
from typing import Any, Optional

from rich.markup import escape

from yougile_cli.commands.base import BaseCommand
from yougile_cli.core.config import YougileConfig
from yougile_cli.core.errors import YougileError
from yougile_cli.core.models import TaskCreateData, TaskDeadline, User
from yougile_cli.ui.console import console, print_error, print_header, print_warning
from yougile_cli.ui.panels import create_task_created_panel
from yougile_cli.ui.prompts import ask_text, choose_many, confirm
from yougile_cli.ui.spinners import create_spinner
from yougile_cli.utils.dates import DATE_HINT, parse_date, to_epoch_ms

logger = logging.getLogger(__name__)


def _user_label(user: User) -> str:
    if user.email and user.display_name != user.email:
        return f"{user.display_name} <{user.email}>"
    return user.display_name


class CreateCommand(BaseCommand):
    """Create a new task."""

    name = "create"
    description = "Create a new task"
    usage = "/create [title] [-t TITLE] [-d DESCRIPTION] [-q]"
    aliases = ["c"]
    switches = frozenset({"q", "quick"})

    def execute(self, args: list[str]) -> bool:
        """Create a task."""
        flags, remaining = self.parse_flags(args)
        config = self.store.require()

        print_header("📝 Create New Task")

        quick = bool(self.flag(flags, "quick", "q"))
        if quick and not config.has_default_column:
            print_warning('No default column set; run "yougile init" to choose one.')
            quick = False

        if quick:
            column_id = config.default_column_id
            column_name = config.default_column_name or "default"
            console.print(f"[muted]Using default: {escape(config.default_location)}[/muted]")
        else:
            column_id, column_name = self._select_column(config)

        data = self._task_details(flags, remaining, column_id, quick=quick)

        try:
            with create_spinner("Creating task...", error_message="Failed to create task"):
                created = self.api.create_task(data)
        except YougileError as e:
            print_error(str(e), hint=e.hint)
            return False

        logger.info("Created task %s in column %s", created.id, column_id)
        console.print()
        console.print(create_task_created_panel(created.id, column_name, data))
        return True

    def _select_column(self, config: YougileConfig) -> tuple[str, str]:
        """Offer the default location, else pick project → board → column."""
        if config.has_default_column:
            console.print(f"[muted]Default: {escape(config.default_location)}[/muted]")
            console.print()
            if confirm("Use default location?", default=True):
                return config.default_column_id, config.default_column_name or "default"

        _, _, column = self.pick_location()
        return column.id, column.title

    def _task_details(
        self,
        flags: dict[str, Any],
        remaining: list[str],
        column_id: str,
        quick: bool = False,
    ) -> TaskCreateData:
        """Collect title, description, deadline and assignees."""
        title = self.flag(flags, "title", "t")
        if not isinstance(title, str) or not title.strip():
            title = " ".join(remaining).strip()
        if not title:
            title = ask_text(
                "Task title",
                validate=lambda s: None if s else "Title is required",
            )

        description = self.flag(flags, "description", "d")
        if not isinstance(description, str):
            description = None
            if not quick:
                description = ask_text("Description (optional, press Enter to skip)") or None

        deadline = None
        assigned = None
        if not quick:
            deadline = self._ask_deadline()
            assigned = self._ask_assignees()

        return TaskCreateData(
            title=title,
            column_id=column_id,
            description=description,
            deadline=deadline,
            assigned=assigned,
        )

    def _ask_deadline(self) -> Optional[TaskDeadline]:
        if not confirm("Set deadline?", default=False):
            return None
        answer = ask_text(
            f"Deadline ({DATE_HINT})",
            validate=lambda s: None if parse_date(s) else f"Invalid date format. Use {DATE_HINT}",
        )
        return TaskDeadline(deadline=to_epoch_ms(parse_date(answer)), with_time=False)

    def _ask_assignees(self) -> Optional[list[str]]:
        if not confirm("Assign to someone?", default=False):
            return None

        # A failure here must not block task creation.
        try:
            with create_spinner("Loading users...", style="loading"):
                users = self.api.list_users()
        except YougileError as e:
            logger.warning("Could not load users: %s", e)
            print_warning(f"Failed to load users: {e}")
            return None

        if not users:
            console.print("[warning]No users found.[/warning]")
            return None

        selected = choose_many("Select assignees", users, _user_label)
        return [u.id for u in selected] or None
