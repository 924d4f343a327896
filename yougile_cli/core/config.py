"""CLI configuration: runtime settings and the persisted configuration record.

Two layers live here:

* :class:`Settings` - process-level knobs read from ``YOUGILE_*`` environment
  variables (and an optional ``.env``).
* :class:`ConfigStore` - the single JSON record at
  ``~/.config/yougile/config.json`` holding the API key, host and the default
  project/board/column chosen during ``init``.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, SettingsConfigDict

from yougile_cli import __app_name__
from yougile_cli.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_API_HOST = "https://yougile.com/api-v2/"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_config_dir() -> Path:
    """Directory holding the config record, history and log file."""
    return Path.home() / ".config" / __app_name__


def get_config_path() -> Path:
    """Location of the persisted configuration record."""
    return get_config_dir() / "config.json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="YOUGILE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_host: str = DEFAULT_API_HOST
    timeout: float = 30.0
    log_level: str = "WARNING"
    history_file: Optional[Path] = None

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def resolved_history_file(self) -> Path:
        return self.history_file or get_config_dir() / "history"


class YougileConfig(BaseModel):
    """The local configuration record."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    api_key: str = ""
    api_host: str = DEFAULT_API_HOST

    default_project_id: Optional[str] = None
    default_project_name: Optional[str] = None
    default_board_id: Optional[str] = None
    default_board_name: Optional[str] = None
    default_column_id: Optional[str] = None
    default_column_name: Optional[str] = None

    @property
    def has_default_column(self) -> bool:
        return bool(self.default_column_id)

    @property
    def default_location(self) -> str:
        """Human-readable ``project → board → column`` path of the defaults."""
        parts = [
            self.default_project_name or self.default_project_id,
            self.default_board_name or self.default_board_id,
            self.default_column_name or self.default_column_id,
        ]
        return " → ".join(p or "?" for p in parts)

    def clear_defaults(self) -> YougileConfig:
        """Return a copy with every default project/board/column field unset."""
        return self.model_copy(update={
            "default_project_id": None,
            "default_project_name": None,
            "default_board_id": None,
            "default_board_name": None,
            "default_column_id": None,
            "default_column_name": None,
        })

    def to_json(self) -> str:
        return json.dumps(self.model_dump(by_alias=True, exclude_none=True), indent=2, ensure_ascii=False)


class ConfigStore:
    """Loads and saves the configuration record."""

    def __init__(self, path: Path | None = None):
        self.path = Path(path) if path is not None else get_config_path()

    def load(self) -> Optional[YougileConfig]:
        """Load the record, or ``None`` when it is missing or unreadable.

        A corrupt file is treated the same as a missing one: the user simply
        has to run ``init`` again.
        """
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return None
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("Ignoring unreadable config at %s: %s", self.path, e)
            return None

        if not isinstance(data, dict):
            logger.warning("Ignoring config at %s: expected a JSON object", self.path)
            return None

        try:
            return YougileConfig.model_validate(data)
        except ValidationError as e:
            logger.warning("Ignoring invalid config at %s: %s", self.path, e)
            return None

    def save(self, config: YougileConfig) -> None:
        """Write the whole record, replacing the previous file atomically.

        Filesystem errors are not caught.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(config.to_json())
                f.write("\n")
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Saved config to %s", self.path)

    def has_valid_config(self) -> bool:
        config = self.load()
        return config is not None and bool(config.api_key)

    def require(self) -> YougileConfig:
        """Return the loaded record or raise :class:`ConfigurationError`."""
        config = self.load()
        if config is None or not config.api_key:
            raise ConfigurationError(
                "API key not configured.",
                hint='Run "yougile init" first.',
            )
        return config


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the global runtime settings."""
    global _settings
    if _settings is None:
        try:
            _settings = Settings()
        except ValidationError as e:
            problems = "; ".join(
                f"YOUGILE_{str(err['loc'][0]).upper()}: {err['msg']}" if err["loc"] else err["msg"]
                for err in e.errors()
            )
            raise ConfigurationError(
                f"Invalid settings: {problems}",
                hint="Fix the YOUGILE_* environment variables or .env file.",
            ) from e
    return _settings


def set_settings(settings: Settings) -> None:
    """Replace the global runtime settings."""
    global _settings
    _settings = settings
