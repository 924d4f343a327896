"""Panel and line renderers for configuration and tasks."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from yougile_cli.core.config import YougileConfig
from yougile_cli.core.models import Task, TaskCreateData
from yougile_cli.utils.dates import format_deadline, is_overdue


def truncate(text: str, limit: int) -> str:
    """Cut ``text`` to ``limit`` characters, marking the cut with '...'."""
    return text if len(text) <= limit else text[:limit] + "..."


def mask_key(api_key: str) -> str:
    return api_key[:8] + "..."


def create_config_panel(config: YougileConfig, path: Path) -> Panel:
    """Current configuration: API settings and defaults."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Setting", style="muted")
    table.add_column("Value")

    table.add_row("Config file", Text(str(path), style="path"))
    table.add_row("", "")
    table.add_row("Host", Text(config.api_host, style="key"))
    table.add_row("Key", Text(mask_key(config.api_key), style="key"))
    table.add_row("", "")

    defaults = [
        ("Project", config.default_project_id, config.default_project_name),
        ("Board", config.default_board_id, config.default_board_name),
        ("Column", config.default_column_id, config.default_column_name),
    ]
    for label, item_id, name in defaults:
        if item_id:
            table.add_row(label, Text(name or item_id, style="key"))
        else:
            table.add_row(label, Text("not set", style="dim"))

    return Panel(
        table,
        title="[primary]⚙ Yougile CLI Configuration[/primary]",
        border_style="primary",
        padding=(1, 2),
    )


def format_task(task: Task, index: int, now: datetime | None = None) -> Text:
    """One task as a status marker, number and title, plus detail lines."""
    text = Text()
    if task.completed:
        text.append("✓ ", style="task.done")
    else:
        text.append("○ ", style="task.open")
    text.append(f"{index}. ", style="dim")
    text.append(task.title, style="task.title.done" if task.completed else "task.title")

    if task.description:
        text.append(f"\n   {truncate(task.description, 60)}", style="muted")

    if task.deadline and task.deadline.deadline:
        date_str = format_deadline(task.deadline.deadline)
        if is_overdue(task.deadline.deadline, now) and not task.completed:
            text.append(f"\n   ⏰ {date_str}", style="task.overdue")
        else:
            text.append(f"\n   📅 {date_str}", style="task.deadline")

    return text


def create_task_created_panel(task_id: str, column_name: str, data: TaskCreateData) -> Panel:
    """Summary shown after a task is created."""
    text = Text()
    text.append("ID:          ", style="muted")
    text.append(task_id, style="number")
    text.append("\nColumn:      ", style="muted")
    text.append(column_name, style="text")
    text.append("\nTitle:       ", style="muted")
    text.append(data.title, style="text")
    if data.description:
        text.append("\nDescription: ", style="muted")
        text.append(truncate(data.description, 50), style="text")
    if data.deadline and data.deadline.deadline:
        text.append("\nDeadline:    ", style="muted")
        text.append(format_deadline(data.deadline.deadline), style="text")
    if data.assigned:
        text.append("\nAssignees:   ", style="muted")
        text.append(str(len(data.assigned)), style="number")

    return Panel(
        text,
        title="[success]✔ Task created[/success]",
        border_style="success",
        padding=(0, 2),
    )
