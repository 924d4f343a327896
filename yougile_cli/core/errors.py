"""Exception hierarchy for the Yougile CLI.

Every error that crosses the core/commands boundary is a subclass of
:class:`YougileError`. Raw ``httpx`` exceptions never leave the API client;
they are caught and re-raised as one of the types below.

Hierarchy
---------
YougileError
├── ConfigurationError
├── AuthError
└── ApiError
    ├── HttpError
    └── NetworkError
"""

from __future__ import annotations


class YougileError(Exception):
    """Base exception for all Yougile CLI errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


class ConfigurationError(YougileError):
    """Raised when no usable local configuration exists."""


class AuthError(YougileError):
    """Raised when an authentication endpoint rejects the request."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.status_code = status_code


class ApiError(YougileError):
    """Raised when an authenticated API call fails."""


class HttpError(ApiError):
    """Non-2xx response, or a body that is not valid JSON."""

    def __init__(self, message: str, *, status_code: int, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.status_code = status_code


class NetworkError(ApiError):
    """Transport-level failure: connection refused, timeout, TLS, ..."""
