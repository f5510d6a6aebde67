"""Tests for main application entrypoint."""

import json
from unittest.mock import AsyncMock, Mock, patch

import pytest

from hostwatch.adapters.driven.config.settings import ServerEntry
from hostwatch.adapters.driven.metrics.monitor_metrics import Metrics
from hostwatch.main import main, run
from hostwatch.ports.settings import SettingsPort, Target

__all__ = []


def make_config(*addresses: str) -> Mock:
    config = Mock()
    config.poll_interval = 5
    config.teams_webhook_url = "http://localhost:8000/hook"
    config.servers = [ServerEntry(address=a) for a in addresses]
    config.concurrent_checks = False
    return config


@pytest.mark.asyncio
async def test_main_starts_loop_with_configured_targets() -> None:
    """Main should wrap the configuration into a SettingsPort and run the loop."""
    with (
        patch("hostwatch.main.configure_logs"),
        patch("hostwatch.main.load_settings") as mock_load_settings,
        patch("hostwatch.main.HttpClient") as mock_http_client_class,
        patch("hostwatch.main.make_stop_on_sigterm"),
        patch("hostwatch.main.start_monitor_loop", new_callable=AsyncMock) as mock_loop,
    ):
        mock_load_settings.return_value = make_config("10.0.0.1", "10.0.0.2")

        mock_http_client = AsyncMock()
        mock_http_client_class.return_value = mock_http_client
        mock_http_client.__aenter__.return_value = mock_http_client

        exit_code = await main()

    assert exit_code == 0
    mock_loop.assert_awaited_once()
    settings = mock_loop.call_args.kwargs["settings"]
    assert settings == SettingsPort(
        poll_interval_sec=5,
        alert_sink_url="http://localhost:8000/hook",
        targets=(Target("10.0.0.1"), Target("10.0.0.2")),
        concurrent_checks=False,
    )
    assert isinstance(mock_loop.call_args.kwargs["metrics"], Metrics)
    assert mock_loop.call_args.kwargs["stop_event"] is not None


@pytest.mark.asyncio
async def test_main_missing_poll_interval_runs_no_cycle(monkeypatch, tmp_path) -> None:
    """A config without pollInterval fails startup before any cycle."""
    config_file = tmp_path / "servers.json"
    config_file.write_text(
        json.dumps({"teamsWebhookURL": "http://localhost/hook", "servers": []})
    )
    monkeypatch.setenv("MONITOR_CONFIG_PATH", str(config_file))
    monkeypatch.delenv("CONCURRENT_CHECKS", raising=False)

    with (
        patch("hostwatch.main.configure_logs"),
        patch("hostwatch.main.HttpClient") as mock_http_client_class,
        patch("hostwatch.main.start_monitor_loop", new_callable=AsyncMock) as mock_loop,
        patch("hostwatch.main.logger") as mock_logger,
    ):
        exit_code = await main()

    assert exit_code == 1
    mock_loop.assert_not_called()
    mock_http_client_class.assert_not_called()
    mock_logger.error.assert_called_once()
    assert "pollInterval" in str(mock_logger.error.call_args.args[1])


@pytest.mark.asyncio
async def test_main_reports_loop_exception() -> None:
    """An exception escaping the loop is logged and turned into exit code 1."""
    with (
        patch("hostwatch.main.configure_logs"),
        patch("hostwatch.main.load_settings") as mock_load_settings,
        patch("hostwatch.main.HttpClient") as mock_http_client_class,
        patch("hostwatch.main.make_stop_on_sigterm"),
        patch("hostwatch.main.start_monitor_loop", new_callable=AsyncMock) as mock_loop,
        patch("hostwatch.main.logger") as mock_logger,
    ):
        mock_load_settings.return_value = make_config("10.0.0.1")
        mock_http_client = AsyncMock()
        mock_http_client_class.return_value = mock_http_client
        mock_http_client.__aenter__.return_value = mock_http_client
        mock_loop.side_effect = RuntimeError("Test error in loop")

        try:
            exit_code = await main()
        except RuntimeError:
            pytest.fail("main() should not raise; exceptions are caught internally")

    assert exit_code == 1
    mock_logger.error.assert_called()


def test_run_exits_with_main_exit_code() -> None:
    """run() should exit with the code returned by main()."""

    def fake_run(coro) -> int:
        coro.close()
        return 1

    with patch("hostwatch.main.asyncio.run", side_effect=fake_run), pytest.raises(SystemExit) as exc:
        run()

    assert exc.value.code == 1


def test_run_treats_ctrl_c_as_clean_shutdown() -> None:
    """Ctrl+C outside the loop exits with code 0."""

    def fake_run(coro) -> int:
        coro.close()
        raise KeyboardInterrupt

    with patch("hostwatch.main.asyncio.run", side_effect=fake_run), pytest.raises(SystemExit) as exc:
        run()

    assert exc.value.code == 0
