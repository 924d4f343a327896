"""
Yougile CLI - An interactive command-line client for Yougile task management.

This CLI provides a terminal-first experience for:
- Authenticating and storing an API key locally
- Picking a default project, board and column
- Creating tasks interactively or in quick mode
- Listing tasks in a column or project
"""

__version__ = "1.0.0"
__app_name__ = "yougile"
