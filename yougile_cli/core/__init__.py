"""Core CLI components - configuration store, API client, models and errors."""

from yougile_cli.core.api_client import YougileClient
from yougile_cli.core.config import (
    ConfigStore,
    Settings,
    YougileConfig,
    get_config_path,
    get_settings,
)
from yougile_cli.core.errors import (
    ApiError,
    AuthError,
    ConfigurationError,
    HttpError,
    NetworkError,
    YougileError,
)

__all__ = [
    "ConfigStore",
    "Settings",
    "YougileConfig",
    "get_config_path",
    "get_settings",
    "YougileClient",
    "YougileError",
    "ConfigurationError",
    "AuthError",
    "ApiError",
    "HttpError",
    "NetworkError",
]
