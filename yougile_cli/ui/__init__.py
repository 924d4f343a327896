"""UI components for the Yougile CLI."""

from yougile_cli.ui.console import (
    console,
    print_error,
    print_header,
    print_success,
    print_warning,
)
from yougile_cli.ui.panels import (
    create_config_panel,
    create_task_created_panel,
    format_task,
)
from yougile_cli.ui.prompts import ask_text, choose, choose_many, confirm
from yougile_cli.ui.spinners import create_spinner
from yougile_cli.ui.theme import Theme, get_theme

__all__ = [
    # Theme
    "Theme",
    "get_theme",
    # Console
    "console",
    "print_error",
    "print_success",
    "print_warning",
    "print_header",
    # Panels
    "create_config_panel",
    "create_task_created_panel",
    "format_task",
    # Prompts
    "ask_text",
    "confirm",
    "choose",
    "choose_many",
    # Spinners
    "create_spinner",
]
