"""API Client for communicating with the Yougile REST API (v2)."""

from __future__ import annotations

import logging
from typing import Any, Optional, TypeVar

import httpx
from pydantic import ValidationError

from yougile_cli.core.config import DEFAULT_API_HOST, ConfigStore
from yougile_cli.core.errors import ApiError, AuthError, HttpError, NetworkError
from yougile_cli.core.models import (
    ApiModel,
    Board,
    Column,
    Company,
    CreatedTask,
    Project,
    Task,
    TaskCreateData,
    User,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=ApiModel)

JSON_HEADERS = {"Content-Type": "application/json"}


def unwrap_list(data: Any, model: type[M]) -> list[M]:
    """Unwrap a ``{"content": [...], "paging": {...}}`` envelope.

    Missing or empty ``content`` yields an empty list.
    """
    content = data.get("content") if isinstance(data, dict) else None
    try:
        return [model.model_validate(item) for item in content or []]
    except ValidationError as e:
        raise ApiError(f"Unexpected {model.__name__} data in response: {e}") from e


def _describe_failure(response: httpx.Response) -> str:
    """Short ``HTTP <code>: <message>`` text for a failed response."""
    message = ""
    try:
        body = response.json()
        if isinstance(body, dict):
            message = str(body.get("message") or body.get("error") or "")
    except ValueError:
        message = response.text.strip()
    text = f"HTTP {response.status_code}"
    return f"{text}: {message[:200]}" if message else text


class YougileClient:
    """HTTP client for the Yougile API.

    Auth endpoints work without any local configuration. Every other call
    goes through :attr:`client`, an authenticated ``httpx.Client`` built from
    the configuration store on first use and kept until :meth:`reset_handle`.
    """

    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        store: ConfigStore | None = None,
        api_host: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.store = store or ConfigStore()
        self.api_host = api_host or DEFAULT_API_HOST
        self.timeout = timeout if timeout is not None else self.DEFAULT_TIMEOUT
        self._transport = transport
        self._client: Optional[httpx.Client] = None
        self._auth_client: Optional[httpx.Client] = None  # Unauthenticated, for auth/*

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize the authenticated HTTP client.

        Raises ConfigurationError if no API key is stored.
        """
        if self._client is None:
            config = self.store.require()
            base_url = config.api_host or self.api_host
            logger.debug("Building authenticated client for %s", base_url)
            self._client = httpx.Client(
                base_url=base_url,
                headers={"Authorization": f"Bearer {config.api_key}", **JSON_HEADERS},
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    @property
    def auth_client(self) -> httpx.Client:
        """Lazy-initialize the HTTP client used for the auth endpoints."""
        if self._auth_client is None:
            self._auth_client = httpx.Client(
                base_url=self.api_host,
                headers=JSON_HEADERS,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._auth_client

    def reset_handle(self) -> None:
        """Drop the cached authenticated client.

        Call after the stored credentials change; the next call rebuilds the
        client from the current configuration.
        """
        if self._client is not None:
            self._client.close()
            self._client = None

    def close(self) -> None:
        """Close the HTTP clients."""
        self.reset_handle()
        if self._auth_client is not None:
            self._auth_client.close()
            self._auth_client = None

    def __enter__(self) -> "YougileClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _request(
        self,
        method: str,
        endpoint: str,
        json: Optional[dict] = None,
        params: Optional[dict] = None,
    ) -> Any:
        """Make an authenticated request and return the decoded JSON body.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: Path relative to the API host, e.g. ``"projects"``
            json: JSON body for the request
            params: Query parameters; ``None`` values are dropped
        """
        http_client = self.client
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        logger.debug("%s %s params=%s", method, endpoint, params)
        try:
            response = http_client.request(method, endpoint, json=json, params=params or None)
        except httpx.ConnectError as e:
            raise NetworkError(
                f"Connection failed: {e}",
                hint="Check your network connection and the API host in your config.",
            ) from e
        except httpx.TimeoutException as e:
            raise NetworkError(f"Request timed out after {int(self.timeout)}s") from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Request failed: {type(e).__name__}: {e}") from e

        if response.is_error:
            hint = None
            if response.status_code in (401, 403):
                hint = 'Your API key may be revoked. Run "yougile init" to create a new one.'
            raise HttpError(_describe_failure(response), status_code=response.status_code, hint=hint)

        try:
            return response.json()
        except ValueError as e:
            raise HttpError(
                f"Invalid JSON in response to {method} {endpoint}",
                status_code=response.status_code,
            ) from e

    def _auth_post(self, endpoint: str, payload: dict) -> Any:
        """POST to an auth endpoint, mapping every failure to AuthError."""
        logger.debug("POST %s", endpoint)
        try:
            response = self.auth_client.post(endpoint, json=payload)
        except httpx.HTTPError as e:
            raise AuthError(f"Authentication request failed: {type(e).__name__}: {e}") from e

        if response.status_code == 401:
            raise AuthError("Invalid email or password.", status_code=401)
        if response.is_error:
            raise AuthError(
                f"Authentication failed ({_describe_failure(response)})",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise AuthError(
                "Authentication endpoint returned invalid JSON",
                status_code=response.status_code,
            ) from e

    # Auth (no API key required)
    def list_companies(self, login: str, password: str) -> list[Company]:
        """List the companies the account belongs to."""
        data = self._auth_post("auth/companies", {"login": login, "password": password})
        return unwrap_list(data, Company)

    def issue_api_key(self, login: str, password: str, company_id: str) -> str:
        """Create a new API key for the given company."""
        data = self._auth_post(
            "auth/keys",
            {"login": login, "password": password, "companyId": company_id},
        )
        key = data.get("key") if isinstance(data, dict) else None
        if not key:
            raise AuthError("Server did not return an API key")
        return key

    # Projects / boards / columns
    def list_projects(self) -> list[Project]:
        return unwrap_list(self._request("GET", "projects"), Project)

    def list_boards(self, project_id: str | None = None) -> list[Board]:
        """List boards, optionally only those of one project."""
        data = self._request("GET", "boards", params={"projectId": project_id})
        return unwrap_list(data, Board)

    def list_columns(self, board_id: str) -> list[Column]:
        data = self._request("GET", "columns", params={"boardId": board_id})
        return unwrap_list(data, Column)

    # Users
    def list_users(self) -> list[User]:
        return unwrap_list(self._request("GET", "users"), User)

    # Tasks
    def create_task(self, data: TaskCreateData) -> CreatedTask:
        """Create a task; returns its id."""
        result = self._request("POST", "tasks", json=data.to_payload())
        try:
            return CreatedTask.model_validate(result)
        except ValidationError as e:
            raise ApiError(f"Task created but response had no id: {result!r}") from e

    def list_tasks(
        self,
        column_id: str | None = None,
        project_id: str | None = None,
    ) -> list[Task]:
        """List tasks filtered by column and/or project."""
        data = self._request(
            "GET",
            "task-list",
            params={"columnId": column_id, "projectId": project_id},
        )
        return unwrap_list(data, Task)

    def test_connection(self) -> bool:
        """Check that the stored key works. Never raises."""
        try:
            self.list_projects()
        except Exception as e:  # noqa: BLE001
            logger.info("Connection test failed: %s", e)
            return False
        return True
