"""
Configuration Management.

Loads settings from config/settings/*.yaml and environment overrides
from the process environment (and config/.env when present).

Environment (.env or process):
    DATABASE_PATH  - SQLite database file, overrides database.yaml
    PORT           - Listen port, overrides application.yaml

Settings (YAML):
    application.yaml   - App identity, server, cors headers, request limits
    database.yaml      - SQLite file location
    logging.yaml       - Logging configuration
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from modules.backend.core.config_schema import (
    ApplicationSchema,
    DatabaseSchema,
    LoggingSchema,
)


def find_project_root() -> Path:
    """Find project root by looking for .project_root marker file."""
    current = Path.cwd()
    while current != current.parent:
        if (current / ".project_root").exists():
            return current
        current = current.parent
    raise RuntimeError("Project root not found. Ensure .project_root file exists.")


def validate_project_root() -> Path:
    """
    Validate that the project root can be found.

    Raises SystemExit with a clear message if .project_root is not found.
    Use this in entry scripts before any configuration loading.
    """
    try:
        return find_project_root()
    except RuntimeError as e:
        raise SystemExit(f"Error: {e}") from e


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML configuration file from config/settings/."""
    project_root = find_project_root()
    config_path = project_root / "config" / "settings" / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


class Settings(BaseSettings):
    """Deployment overrides read from the environment. All optional."""

    database_path: str | None = None
    port: int | None = None

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ValueError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Properties return typed Pydantic model instances with attribute access.
    """

    def __init__(self) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml")
        self._database = _load_validated(DatabaseSchema, "database.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")

    @property
    def application(self) -> ApplicationSchema:
        """Application settings."""
        return self._application

    @property
    def database(self) -> DatabaseSchema:
        """Database settings."""
        return self._database

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging


@lru_cache
def get_settings() -> Settings:
    """Get cached environment settings. Reads config/.env if it exists."""
    env_path = find_project_root() / "config" / ".env"
    return Settings(_env_file=str(env_path))


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


def get_database_path() -> Path:
    """
    Resolve the SQLite database file.

    DATABASE_PATH wins over database.yaml. Relative paths are taken
    from the project root.
    """
    configured = get_settings().database_path or get_app_config().database.path
    path = Path(configured)
    if not path.is_absolute():
        path = find_project_root() / path
    return path


def get_database_url() -> str:
    """
    Construct the async SQLAlchemy URL for the todo database.

    Returns:
        Database connection URL string.
    """
    return f"sqlite+aiosqlite:///{get_database_path()}"


def get_server_address() -> tuple[str, int]:
    """
    Get the host and port the server listens on.

    Returns:
        Tuple of (host, port). PORT in the environment overrides the port.
    """
    server = get_app_config().application.server
    port = get_settings().port or server.port
    return server.host, port
