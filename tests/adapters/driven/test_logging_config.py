"""Tests for console logging setup."""

import logging
from collections.abc import Iterator

import pytest

from hostwatch.adapters.driven.logging.logging_config import HANDLER_NAME, configure_logs

__all__ = []


@pytest.fixture(autouse=True)
def restore_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Undo handler and level changes made by configure_logs."""
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    root = logging.getLogger()
    app = logging.getLogger("hostwatch")
    root_level, app_level = root.level, app.level
    yield
    for handler in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(handler)
    root.setLevel(root_level)
    app.setLevel(app_level)


def test_configure_logs_installs_one_handler() -> None:
    """Repeated calls must not duplicate console output."""
    first = configure_logs()
    second = configure_logs()

    named = [h for h in logging.getLogger().handlers if h.get_name() == HANDLER_NAME]
    assert named == [first]
    assert second is first


def test_configure_logs_default_levels() -> None:
    """Application at DEBUG, root at INFO, frameworks at WARNING."""
    configure_logs()

    assert logging.getLogger("hostwatch").level == logging.DEBUG
    assert logging.getLogger().level == logging.INFO
    assert logging.getLogger("aiohttp").level == logging.WARNING


def test_configure_logs_reads_log_level_env(monkeypatch) -> None:
    """LOG_LEVEL selects the application level."""
    monkeypatch.setenv("LOG_LEVEL", "warning")

    configure_logs()

    assert logging.getLogger("hostwatch").level == logging.WARNING


def test_configure_logs_argument_overrides_env(monkeypatch) -> None:
    """An explicit level wins over LOG_LEVEL."""
    monkeypatch.setenv("LOG_LEVEL", "ERROR")

    configure_logs("INFO")

    assert logging.getLogger("hostwatch").level == logging.INFO


def test_configure_logs_unknown_level_falls_back_to_debug() -> None:
    """A typo in the level name must not stop the monitor from starting."""
    configure_logs("LOUD")

    assert logging.getLogger("hostwatch").level == logging.DEBUG
