"""Theme and color definitions for the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from rich.style import Style
from rich.theme import Theme as RichTheme


@dataclass
class Theme:
    """Color theme for the CLI - teal & amber palette."""

    # Accent colors
    primary: str = "#26C6DA"      # Teal - main accent
    secondary: str = "#FFB300"    # Amber - secondary accent

    # Status colors
    success: str = "#66BB6A"      # Green
    error: str = "#EF5350"        # Red
    warning: str = "#FFCA28"      # Yellow
    info: str = "#4FC3F7"         # Light blue

    # Text colors
    text: str = "#ECEFF1"         # Near-white
    muted: str = "#90A4AE"        # Blue-gray
    dim: str = "#546E7A"          # Dark blue-gray

    def to_rich_theme(self) -> RichTheme:
        """Convert to Rich theme."""
        return RichTheme({
            # Core styles
            "primary": Style(color=self.primary),
            "secondary": Style(color=self.secondary),
            "primary.bold": Style(color=self.primary, bold=True),

            # Status styles
            "success": Style(color=self.success, bold=True),
            "error": Style(color=self.error, bold=True),
            "warning": Style(color=self.warning),
            "info": Style(color=self.info),

            # Text styles
            "text": Style(color=self.text),
            "muted": Style(color=self.muted),
            "dim": Style(color=self.dim),

            # Semantic styles
            "command": Style(color=self.primary, bold=True),
            "path": Style(color=self.secondary),
            "number": Style(color=self.secondary),
            "key": Style(color=self.primary),

            # Task list styles
            "task.open": Style(color=self.dim),
            "task.done": Style(color=self.success, bold=True),
            "task.title": Style(color=self.text),
            "task.title.done": Style(color=self.dim, strike=True),
            "task.deadline": Style(color=self.muted),
            "task.overdue": Style(color=self.error, bold=True),
        })


# Default theme instance
_theme = Theme()


def get_theme() -> Theme:
    """Get the current theme."""
    return _theme


def set_theme(theme: Theme) -> None:
    """Set the current theme."""
    global _theme
    _theme = theme
