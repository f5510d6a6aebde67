"""Console logging setup for the monitor."""

import logging
import os

__all__ = ["configure_logs"]

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%d/%m/%y %H:%M:%S"
HANDLER_NAME = "hostwatch-console"
QUIET_LOGGERS = ("aiohttp", "asyncio")


def configure_logs(level: str | None = None) -> logging.Handler:
    """Install the console handler and set log levels.

    The root logger stays at INFO and the framework loggers at WARNING.
    The ``hostwatch`` loggers, which emit the per-target up/down lines,
    use ``level``, else the LOG_LEVEL environment variable, else DEBUG.
    Calling this again only updates levels; the handler is installed once.

    Args:
        level: Level name for the application loggers, e.g. "INFO".

    Returns:
        The console handler attached to the root logger.
    """
    root = logging.getLogger()
    handler = next((h for h in root.handlers if h.get_name() == HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root.addHandler(handler)
    root.setLevel(logging.INFO)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("hostwatch").setLevel(_resolve_level(level or os.getenv("LOG_LEVEL")))
    return handler


def _resolve_level(name: str | None) -> int:
    if not name:
        return logging.DEBUG
    value = logging.getLevelName(name.strip().upper())
    if isinstance(value, int):
        return value
    logging.getLogger(__name__).warning(f"Unknown log level {name!r}, using DEBUG")
    return logging.DEBUG
