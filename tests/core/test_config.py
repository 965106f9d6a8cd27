"""Unit tests for src/core/config.py and src/core/logging_config.py"""

import logging
from typing import Iterator

import pytest

from src.core.config import Settings, get_settings
from src.core.logging_config import configure_logging


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CHESS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("CHESS_REJECT_MOVES_AFTER_GAME_OVER", raising=False)
    settings = Settings(_env_file=None)
    assert settings.log_level == "WARNING"
    assert settings.reject_moves_after_game_over is False


def test_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHESS_LOG_LEVEL", "debug")
    monkeypatch.setenv("CHESS_REJECT_MOVES_AFTER_GAME_OVER", "true")
    settings = Settings(_env_file=None)
    assert settings.log_level == "debug"
    assert settings.reject_moves_after_game_over is True


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


@pytest.fixture
def restore_package_logger() -> Iterator[None]:
    """configure_logging changes process-wide state: put the package logger back afterwards"""
    package_logger = logging.getLogger("src")
    previous_level = package_logger.level
    yield
    package_logger.setLevel(previous_level)


@pytest.mark.parametrize(
    "level_name, expected",
    [("DEBUG", logging.DEBUG), ("info", logging.INFO), ("not-a-level", logging.WARNING)],
)
@pytest.mark.usefixtures("restore_package_logger")
def test_configure_logging(level_name: str, expected: int) -> None:
    configure_logging(Settings(_env_file=None, log_level=level_name))
    assert logging.getLogger("src").level == expected
