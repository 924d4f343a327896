"""Init command - authenticate, store an API key and choose defaults."""

from __future__ import annotations

import logging
from typing import Optional

from rich.markup import escape

from yougile_cli.commands.base import BaseCommand
from yougile_cli.core.config import YougileConfig
from yougile_cli.core.errors import AuthError, YougileError
from yougile_cli.core.models import Company
from yougile_cli.ui.console import console, print_error, print_header, print_success, print_warning
from yougile_cli.ui.prompts import ask_text, choose, confirm
from yougile_cli.ui.spinners import create_spinner

logger = logging.getLogger(__name__)

AUTH_LOGIN = "login"
AUTH_API_KEY = "apikey"

AUTH_METHODS = [
    (AUTH_LOGIN, "Login with email & password (creates new API key)"),
    (AUTH_API_KEY, "Enter existing API key"),
]


def _validate_email(value: str) -> Optional[str]:
    return None if "@" in value else "Enter valid email"


def _company_label(company: Company) -> str:
    return f"{company.name} (admin)" if company.is_admin else company.name


class InitCommand(BaseCommand):
    """Configure the CLI with an API key and default location."""

    name = "init"
    description = "Log in or paste an API key, then choose defaults"
    usage = "/init"
    aliases = ["setup"]

    def execute(self, args: list[str]) -> bool:
        """Run the setup wizard."""
        print_header("🚀 Yougile CLI Setup")

        if self.store.has_valid_config():
            if not confirm("Configuration already exists. Overwrite?", default=False):
                console.print("[warning]Setup cancelled.[/warning]")
                return True

        method, _ = choose("How would you like to authenticate?", AUTH_METHODS, lambda m: m[1])
        if method == AUTH_LOGIN:
            api_key = self._login_flow()
            if api_key is None:
                return False
        else:
            api_key = ask_text(
                "Enter your Yougile API key",
                password=True,
                validate=lambda s: None if s else "API key is required",
            )

        config = YougileConfig(api_key=api_key, api_host=self.settings.api_host)
        self.store.save(config)
        self.api.reset_handle()

        with create_spinner("Testing connection..."):
            connected = self.api.test_connection()
        if not connected:
            print_error("Connection failed. Check your API key.")
            return False
        console.print("  [success]✔[/success] Connected to Yougile!")

        if confirm("Setup default project/board/column for quick task creation?", default=True):
            self.setup_defaults(config)

        console.print()
        print_success(f"Configuration saved to {self.store.path}")
        console.print("\n[primary]You can now use:[/primary]")
        console.print("  [command]yougile create[/command]    [muted]- Create a new task[/muted]")
        console.print("  [command]yougile list[/command]      [muted]- List tasks[/muted]")
        console.print("  [command]yougile config[/command]    [muted]- View/edit configuration[/muted]")
        return True

    def _login_flow(self) -> Optional[str]:
        """Email/password login; returns a freshly issued API key or None."""
        login = ask_text("Email", validate=_validate_email)
        password = ask_text(
            "Password",
            password=True,
            validate=lambda s: None if s else "Password is required",
        )

        try:
            with create_spinner("Getting your companies...", style="auth"):
                companies = self.api.list_companies(login, password)
        except AuthError as e:
            print_error(str(e), title="Authentication failed", hint="Check your credentials.")
            return None

        if not companies:
            print_error("No companies found for this account.")
            return None

        if len(companies) == 1:
            company = companies[0]
            console.print(f"[muted]Company: {escape(company.name)}[/muted]")
        else:
            company = choose("Select company", companies, _company_label)

        try:
            with create_spinner("Creating API key...", style="auth", success_message="API key created!"):
                return self.api.issue_api_key(login, password, company.id)
        except AuthError as e:
            print_error(str(e), title="Failed to create API key")
            return None

    def setup_defaults(self, config: YougileConfig) -> None:
        """Pick the default project, board and column, saving as it goes.

        Failures after the project is chosen keep what was picked so far
        and end the wizard without an error.
        """
        try:
            with create_spinner("Loading projects...", style="loading"):
                projects = self.api.list_projects()
        except YougileError as e:
            print_warning(f"Failed to load projects: {e}")
            return

        if not projects:
            console.print("[warning]No projects found.[/warning]")
            return

        project = choose("Select default project", projects, lambda p: p.title)
        config.default_project_id = project.id
        config.default_project_name = project.title

        try:
            with create_spinner("Loading boards...", style="loading"):
                boards = self.api.list_boards(project.id)
        except YougileError as e:
            logger.warning("Saving partial defaults; boards failed to load: %s", e)
            print_warning(f"Failed to load boards: {e}")
            self.store.save(config)
            return

        if not boards:
            console.print("[warning]No boards found in this project.[/warning]")
            self.store.save(config)
            return

        board = choose("Select default board", boards, lambda b: b.title)
        config.default_board_id = board.id
        config.default_board_name = board.title

        try:
            with create_spinner("Loading columns...", style="loading"):
                columns = self.api.list_columns(board.id)
        except YougileError as e:
            logger.warning("Saving partial defaults; columns failed to load: %s", e)
            print_warning(f"Failed to load columns: {e}")
            self.store.save(config)
            return

        if not columns:
            console.print("[warning]No columns found in this board.[/warning]")
            self.store.save(config)
            return

        column = choose("Select default column (where new tasks go)", columns, lambda c: c.title)
        config.default_column_id = column.id
        config.default_column_name = column.title

        self.store.save(config)
