"""Runtime settings read from the environment."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from please.core.history import history_path
from please.exceptions import ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


@dataclass
class Settings:
    """Configuration for one invocation.

    Only ANTHROPIC_API_KEY is required. Everything else has a default and can
    be overridden with a PLEASE_* variable (HISTFILE for the history path).
    """

    api_key: str = field(repr=False)
    history_file: Path
    history_size: int = 10
    model: str = "claude-sonnet-4-5-20250929"
    max_tokens: int = 256
    timeout: float = 60.0
    shell: str = "bash"
    log_level: str = "WARNING"
    log_file: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        if environ is None:
            environ = os.environ

        api_key = environ.get("ANTHROPIC_API_KEY", "").strip()
        if not api_key:
            raise ConfigError("ANTHROPIC_API_KEY", "environment variable not set")

        log_level = environ.get("PLEASE_LOG_LEVEL", cls.log_level).upper()
        if log_level not in LOG_LEVELS:
            raise ConfigError(
                "PLEASE_LOG_LEVEL", f"must be one of {', '.join(LOG_LEVELS)}", log_level
            )

        return cls(
            api_key=api_key,
            history_file=history_path(environ),
            history_size=_positive_int(environ, "PLEASE_HISTORY_SIZE", cls.history_size),
            model=_non_empty(environ, "PLEASE_MODEL", cls.model),
            max_tokens=_positive_int(environ, "PLEASE_MAX_TOKENS", cls.max_tokens),
            timeout=_positive_float(environ, "PLEASE_TIMEOUT", cls.timeout),
            shell=_non_empty(environ, "PLEASE_SHELL", cls.shell),
            log_level=log_level,
            log_file=environ.get("PLEASE_LOG_FILE") or None,
        )


def _non_empty(environ: Mapping[str, str], name: str, default: str) -> str:
    value = environ.get(name)
    if value is None:
        return default
    if not value.strip():
        raise ConfigError(name, "must not be empty")
    return value.strip()


def _positive_int(environ: Mapping[str, str], name: str, default: int) -> int:
    value = environ.get(name)
    if value is None:
        return default
    try:
        number = int(value)
    except ValueError:
        raise ConfigError(name, "must be an integer", value) from None
    if number < 1:
        raise ConfigError(name, "must be at least 1", value)
    return number


def _positive_float(environ: Mapping[str, str], name: str, default: float) -> float:
    value = environ.get(name)
    if value is None:
        return default
    try:
        number = float(value)
    except ValueError:
        raise ConfigError(name, "must be a number", value) from None
    if number <= 0:
        raise ConfigError(name, "must be greater than 0", value)
    return number


def configure_logging(settings: Settings) -> None:
    """Set up the root logger, replacing any handlers already installed."""
    if settings.log_file:
        logging.basicConfig(
            level=settings.log_level,
            format=LOG_FORMAT,
            filename=settings.log_file,
            force=True,
        )
    else:
        logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, force=True)

    if settings.log_level != "DEBUG":
        logging.getLogger("anthropic").setLevel(logging.WARNING)
        logging.getLogger("httpx").setLevel(logging.WARNING)
