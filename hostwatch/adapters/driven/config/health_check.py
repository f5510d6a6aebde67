"""Healthcheck validator for container orchestration."""

import logging
import shutil

from hostwatch.adapters.driven.config.settings import load_settings
from hostwatch.adapters.driven.logging.logging_config import configure_logs
from hostwatch.adapters.driven.probe.ping import PING_EXECUTABLE

__all__ = ["main"]

logger = logging.getLogger(__name__)


def main() -> int:
    """Check that the monitor could start, without running a cycle.

    Fails when the configuration does not load or when the ping
    executable is not on PATH, since every check would then report
    its target down.

    Returns:
        0 if healthy, 1 if unhealthy.
    """
    configure_logs()

    try:
        settings = load_settings()
    except (RuntimeError, ValueError) as exc:
        logger.error(f"Monitor healthcheck FAILED: {exc}")
        return 1

    if shutil.which(PING_EXECUTABLE) is None:
        logger.error(f"Monitor healthcheck FAILED: {PING_EXECUTABLE!r} not found on PATH")
        return 1

    logger.info(
        f"Monitor healthcheck OK: {len(settings.servers)} server(s) "
        f"every {settings.poll_interval}s"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
