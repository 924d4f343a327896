"""Utility functions for the CLI."""

from yougile_cli.utils.completions import CommandCompleter
from yougile_cli.utils.dates import parse_date

__all__ = ["CommandCompleter", "parse_date"]
