"""Application entrypoint."""

import asyncio
import logging

from hostwatch.adapters.driven.alert.webhook import WebhookDispatcher
from hostwatch.adapters.driven.config.settings import load_settings
from hostwatch.adapters.driven.http.client import HttpClient
from hostwatch.adapters.driven.logging.logging_config import configure_logs
from hostwatch.adapters.driven.metrics.monitor_metrics import Metrics
from hostwatch.adapters.driven.probe.ping import PingProbe
from hostwatch.adapters.driving.signals import make_stop_on_sigterm
from hostwatch.core.monitor_loop import start_monitor_loop
from hostwatch.ports.settings import SettingsPort, Target

__all__ = ["main", "run"]

logger = logging.getLogger(__name__)


async def main() -> int:
    """Start the host monitor.

    Startup sequence:
    1. Configure logging.
    2. Load and validate configuration (fatal on error).
    3. Run the monitor loop.
    4. Gracefully shutdown on SIGTERM/SIGINT.

    Returns:
        Process exit code.
    """
    configure_logs()
    logger.info("Starting host monitor...")

    try:
        config = load_settings()
    except (RuntimeError, ValueError) as exc:
        logger.error(
            "Configuration error: %s\n"
            "Hint: check MONITOR_CONFIG_PATH and that the file defines "
            "pollInterval, teamsWebhookURL and servers.",
            exc,
        )
        return 1

    # Wrap config into port so core depends on interface (hexagonal)
    settings_port = SettingsPort(
        poll_interval_sec=config.poll_interval,
        alert_sink_url=config.teams_webhook_url,
        targets=tuple(Target(address=server.address) for server in config.servers),
        concurrent_checks=config.concurrent_checks,
    )

    metrics = Metrics()
    http_client = HttpClient()
    probe = PingProbe()

    async with http_client as http:
        dispatcher = WebhookDispatcher(http=http, url=settings_port.alert_sink_url)
        stop = make_stop_on_sigterm()

        try:
            await start_monitor_loop(
                settings=settings_port,
                stop_fn=stop.is_set,
                probe_fn=probe.probe,
                alert_fn=dispatcher.dispatch,
                stop_event=stop,
                metrics=metrics,
            )
        except Exception as e:
            logger.error(f"Unhandled exception in monitor loop: {e}", exc_info=True)
            return 1

    logger.info("Host monitor stopped.")
    return 0


def run() -> None:
    """Console script entrypoint."""
    try:
        exit_code = asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Shutdown requested by user (Ctrl+C).")
        exit_code = 0
    raise SystemExit(exit_code)


if __name__ == "__main__":
    run()
