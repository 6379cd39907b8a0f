"""Tests for environment-driven settings."""

import logging
from pathlib import Path

import pytest

from please.config import Settings, configure_logging
from please.exceptions import ConfigError

BASE_ENV = {"ANTHROPIC_API_KEY": "sk-ant-test"}


class TestSettingsFromEnv:
    """Tests for Settings.from_env()."""

    def test_defaults(self) -> None:
        settings = Settings.from_env(BASE_ENV)
        assert settings.api_key == "sk-ant-test"
        assert settings.history_file == Path.home() / ".zsh_history"
        assert settings.history_size == 10
        assert settings.model == "claude-sonnet-4-5-20250929"
        assert settings.max_tokens == 256
        assert settings.timeout == 60.0
        assert settings.shell == "bash"
        assert settings.log_level == "WARNING"
        assert settings.log_file is None

    @pytest.mark.parametrize("env", [{}, {"ANTHROPIC_API_KEY": ""}, {"ANTHROPIC_API_KEY": "  "}])
    def test_missing_api_key(self, env: dict) -> None:
        with pytest.raises(ConfigError) as exc_info:
            Settings.from_env(env)
        assert exc_info.value.variable == "ANTHROPIC_API_KEY"
        assert "not set" in str(exc_info.value)

    def test_histfile_override(self) -> None:
        settings = Settings.from_env({**BASE_ENV, "HISTFILE": "/tmp/my_history"})
        assert settings.history_file == Path("/tmp/my_history")

    def test_overrides(self) -> None:
        settings = Settings.from_env(
            {
                **BASE_ENV,
                "PLEASE_HISTORY_SIZE": "25",
                "PLEASE_MODEL": "claude-haiku-4-5",
                "PLEASE_MAX_TOKENS": "512",
                "PLEASE_TIMEOUT": "7.5",
                "PLEASE_SHELL": "zsh",
                "PLEASE_LOG_LEVEL": "debug",
                "PLEASE_LOG_FILE": "/tmp/please.log",
            }
        )
        assert settings.history_size == 25
        assert settings.model == "claude-haiku-4-5"
        assert settings.max_tokens == 512
        assert settings.timeout == 7.5
        assert settings.shell == "zsh"
        assert settings.log_level == "DEBUG"
        assert settings.log_file == "/tmp/please.log"

    @pytest.mark.parametrize(
        "name, value",
        [
            ("PLEASE_HISTORY_SIZE", "ten"),
            ("PLEASE_HISTORY_SIZE", "0"),
            ("PLEASE_MAX_TOKENS", "-5"),
            ("PLEASE_TIMEOUT", "soon"),
            ("PLEASE_TIMEOUT", "0"),
            ("PLEASE_MODEL", " "),
            ("PLEASE_SHELL", ""),
            ("PLEASE_LOG_LEVEL", "LOUD"),
        ],
    )
    def test_malformed_values(self, name: str, value: str) -> None:
        with pytest.raises(ConfigError) as exc_info:
            Settings.from_env({**BASE_ENV, name: value})
        assert exc_info.value.variable == name
        assert name in str(exc_info.value)

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-from-env")
        monkeypatch.setenv("PLEASE_HISTORY_SIZE", "3")
        settings = Settings.from_env()
        assert settings.api_key == "sk-ant-from-env"
        assert settings.history_size == 3


class TestConfigureLogging:
    """Tests for configure_logging()."""

    @pytest.fixture(autouse=True)
    def reset_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        root.handlers = []
        logging.getLogger("anthropic").setLevel(logging.NOTSET)
        logging.getLogger("httpx").setLevel(logging.NOTSET)
        yield
        for handler in root.handlers:
            handler.close()
        root.handlers = handlers
        root.setLevel(level)
        logging.getLogger("anthropic").setLevel(logging.NOTSET)
        logging.getLogger("httpx").setLevel(logging.NOTSET)

    def test_level_applied(self) -> None:
        configure_logging(Settings.from_env({**BASE_ENV, "PLEASE_LOG_LEVEL": "INFO"}))
        assert logging.getLogger().level == logging.INFO
        assert logging.getLogger("anthropic").level == logging.WARNING

    def test_debug_leaves_sdk_loggers_alone(self) -> None:
        configure_logging(Settings.from_env({**BASE_ENV, "PLEASE_LOG_LEVEL": "DEBUG"}))
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("anthropic").level == logging.NOTSET

    def test_log_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "please.log"
        configure_logging(
            Settings.from_env(
                {**BASE_ENV, "PLEASE_LOG_LEVEL": "INFO", "PLEASE_LOG_FILE": str(log_file)}
            )
        )
        logging.getLogger("please.test").info("hello log")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "hello log" in log_file.read_text()

    def test_replaces_existing_root_handler(self) -> None:
        root = logging.getLogger()
        existing = logging.NullHandler()
        root.addHandler(existing)
        root.setLevel(logging.CRITICAL)
        configure_logging(Settings.from_env({**BASE_ENV, "PLEASE_LOG_LEVEL": "ERROR"}))
        assert root.level == logging.ERROR
        assert existing not in root.handlers
        assert len(root.handlers) == 1

    def test_log_file_with_existing_handler(self, tmp_path: Path) -> None:
        logging.getLogger().addHandler(logging.NullHandler())
        log_file = tmp_path / "please.log"
        configure_logging(
            Settings.from_env(
                {**BASE_ENV, "PLEASE_LOG_LEVEL": "INFO", "PLEASE_LOG_FILE": str(log_file)}
            )
        )
        logging.getLogger("please.test").info("still logged")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "still logged" in log_file.read_text()
