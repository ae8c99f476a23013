"""
Host settings for endpoint definition applications.

Values are merged from, highest priority first: keyword overrides,
ENDPOINTS_* environment variables, a TOML config file, model defaults.

The config file is endpoints.toml, or the [tool.endpoint_definitions] table
of a pyproject.toml, in the start directory or its nearest parent that has
one.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from .models.config import LoggingConfig, ServerConfig

if TYPE_CHECKING:
    from .interfaces.logger import ILogger

CONFIG_FILE_NAME = "endpoints.toml"
PYPROJECT_SECTION = "endpoint_definitions"


def _get_logger() -> ILogger:
    from ..services.logging import NullLogger

    return _current_logger if _current_logger is not None else NullLogger()


def _read_config(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        data = tomllib.load(f)
    if path.name == "pyproject.toml":
        return dict(data.get("tool", {}).get(PYPROJECT_SECTION, {}))
    return data


def _declares_section(pyproject: Path) -> bool:
    try:
        with open(pyproject, "rb") as f:
            return PYPROJECT_SECTION in tomllib.load(f).get("tool", {})
    except (OSError, tomllib.TOMLDecodeError) as e:
        _get_logger().debug("Skipping unreadable %s: %s", pyproject, e)
        return False


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Walk up from start_dir (default: cwd) to the nearest config file.

    Within one directory endpoints.toml is preferred over pyproject.toml.

    Returns:
        Path to the config file, or None if there is none.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate

        pyproject = directory / "pyproject.toml"
        if pyproject.is_file() and _declares_section(pyproject):
            return pyproject

    return None


class TomlConfigSource(PydanticBaseSettingsSource):
    """
    Settings source backed by the host's TOML config file.

    Adds ``config_file`` (the file used) to the values. A file that cannot be
    read or parsed yields only ``config_error`` so startup can report it.
    """

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
    ):
        super().__init__(settings_cls)
        self._path = config_path if config_path is not None else find_config_file(start_dir)
        self._values: dict[str, Any] | None = None

    def _load(self) -> dict[str, Any]:
        if self._values is None:
            self._values = self._read()
        return self._values

    def _read(self) -> dict[str, Any]:
        if self._path is None:
            return {}
        try:
            values = _read_config(self._path)
        except tomllib.TOMLDecodeError as e:
            _get_logger().warning("Failed to parse config file %s: %s", self._path, e)
            return {"config_error": f"Failed to parse config file: {e}"}
        except OSError as e:
            _get_logger().warning("Failed to read config file %s: %s", self._path, e)
            return {"config_error": f"Failed to read config file: {e}"}
        return {**values, "config_file": str(self._path)}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._load().get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return self._load()


class AppSettings(BaseSettings):
    """Configuration of an endpoint definition host.

    Environment variables use the ENDPOINTS_ prefix; nested sections use a
    double underscore, e.g. ENDPOINTS_LOGGING__LEVEL=debug.
    """

    model_config = SettingsConfigDict(
        env_prefix="ENDPOINTS_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    environment: str = "Production"
    application_name: str | None = None
    content_root: Path | None = None
    debug: bool = False
    logging: LoggingConfig = LoggingConfig()
    server: ServerConfig = ServerConfig()

    # Filled in by TomlConfigSource
    config_file: str | None = None
    config_error: str | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # load_settings() hands the config location over through module state
        toml_source = TomlConfigSource(
            settings_cls,
            config_path=_current_config_path,
            start_dir=_current_start_dir,
        )
        return (init_settings, env_settings, toml_source)

    def resolved_content_root(self) -> Path:
        """Content root, defaulting to the current working directory."""
        return (self.content_root or Path.cwd()).resolve()

    def resolved_application_name(self) -> str:
        """Application name, defaulting to the content root's directory name."""
        return self.application_name or self.resolved_content_root().name


_current_config_path: Path | None = None
_current_start_dir: str | None = None
_current_logger: ILogger | None = None


def load_settings(
    config_path: Path | None = None,
    start_dir: str | None = None,
    logger: ILogger | None = None,
    **overrides: Any,
) -> AppSettings:
    """Load settings from the config file, the environment and overrides.

    Args:
        config_path: Explicit config file; skips the directory search
        start_dir: Directory the search starts from (default: cwd)
        logger: Receives config file warnings (default: discarded)
        **overrides: Field values that win over every other source

    Returns:
        The merged AppSettings
    """
    global _current_config_path, _current_start_dir, _current_logger

    _current_config_path = config_path
    _current_start_dir = start_dir
    _current_logger = logger
    try:
        return AppSettings(**overrides)
    finally:
        _current_config_path = None
        _current_start_dir = None
        _current_logger = None
