"""Read-only projections of the Yougile API resources."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for wire models: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    def to_payload(self) -> dict:
        """Serialize for a request body, dropping unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class Company(ApiModel):
    id: str
    name: str = ""
    is_admin: bool = False


class Project(ApiModel):
    id: str
    title: str = ""
    deleted: Optional[bool] = None


class Board(ApiModel):
    id: str
    title: str = ""
    project_id: Optional[str] = None
    deleted: Optional[bool] = None


class Column(ApiModel):
    id: str
    title: str = ""
    board_id: Optional[str] = None
    deleted: Optional[bool] = None
    color: Optional[str | int] = None


class User(ApiModel):
    id: str
    email: str = ""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    real_name: Optional[str] = None
    is_admin: Optional[bool] = None

    @property
    def display_name(self) -> str:
        return self.real_name or self.email or self.id


class TaskDeadline(ApiModel):
    """Deadline block; timestamps are epoch milliseconds."""

    deadline: Optional[int] = None
    start_date: Optional[int] = None
    with_time: Optional[bool] = None


class Task(ApiModel):
    id: str
    title: str = ""
    description: Optional[str] = None
    column_id: Optional[str] = None
    assigned: Optional[list[str]] = None
    deadline: Optional[TaskDeadline] = None
    completed: Optional[bool] = None
    archived: Optional[bool] = None


class TaskCreateData(ApiModel):
    """Body of ``POST tasks``."""

    title: str
    column_id: str
    description: Optional[str] = None
    assigned: Optional[list[str]] = None
    deadline: Optional[TaskDeadline] = None


class CreatedTask(ApiModel):
    id: str
