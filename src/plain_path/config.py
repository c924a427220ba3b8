"""Configuration loading and logging bootstrap."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import ValidationError

from .config_loader import load_json_file
from .config_schema import Config, LoggingConfig
from .global_paths import GlobalPath
from .util.log import Log, LogFormat, LogLevel

log = Log.create({"service": "config"})

__all__ = [
    "Config",
    "ConfigError",
    "LogSettings",
    "LoggingConfig",
    "bootstrap_logging",
    "load_config",
]


class ConfigError(Exception):
    """Configuration error."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"Config error in {path}: {message}")


def load_config(path: Optional[str] = None) -> Config:
    """Load the config file, by default ``GlobalPath.config_file()``.

    A missing or unparseable file yields the default config. A file that
    parses but does not match the schema raises :class:`ConfigError`.
    """
    filepath = path or GlobalPath.config_file()
    data = load_json_file(filepath)
    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(filepath, str(e)) from e


@dataclass(frozen=True)
class LogSettings:
    level: LogLevel
    format: LogFormat
    console: bool
    file: bool
    dev_file: bool


def _pick(explicit: Optional[bool], configured: Optional[bool]) -> bool:
    if explicit is not None:
        return explicit
    return bool(configured)


def bootstrap_logging(
    config: Optional[Config] = None,
    *,
    level: Optional[str] = None,
    format: Optional[str] = None,
    console: Optional[bool] = None,
    file: Optional[bool] = None,
    dev_file: Optional[bool] = None,
) -> LogSettings:
    """Resolve logging settings and configure the process logger.

    Explicit arguments win over the ``logging`` section of *config*, which
    is loaded with :func:`load_config` when not given. Unset values fall
    back to info level, key/value lines and no sinks.
    """
    if config is None:
        config = load_config()
    section = config.logging or LoggingConfig()

    settings = LogSettings(
        level=LogLevel.parse(level or section.level),
        format=LogFormat.parse(format or section.format),
        console=_pick(console, section.console),
        file=_pick(file, section.file),
        dev_file=_pick(dev_file, section.dev_file),
    )
    Log.configure(
        level=settings.level,
        format=settings.format,
        console=settings.console,
        file=settings.file,
        dev=settings.dev_file,
    )
    log.debug("logging configured", {"level": settings.level.value, "format": settings.format.value})
    return settings
