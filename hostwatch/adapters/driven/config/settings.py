"""Configuration loading from the servers file and environment variables."""

import json
import logging
import os
from typing import Any

from dotenv import load_dotenv
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    TypeAdapter,
    ValidationError,
    field_validator,
)

__all__ = ["ServerEntry", "Settings", "load_settings", "DEFAULT_CONFIG_PATH"]

load_dotenv()

logger = logging.getLogger(__name__)
_http_url_adapter = TypeAdapter(HttpUrl)

DEFAULT_CONFIG_PATH = "servers.json"
_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


class ServerEntry(BaseModel):
    """One entry of the ``servers`` list.

    Attributes:
        address: Hostname or IP to monitor.
    """

    address: str = Field(..., min_length=1, strict=True, description="Hostname or IP.")


class Settings(BaseModel):
    """Runtime configuration for the monitor.

    Field aliases match the keys of the JSON configuration document.

    Attributes:
        poll_interval: Seconds between cycles (must be positive).
        teams_webhook_url: Chat webhook receiving down alerts.
        servers: Ordered list of monitored servers (may be empty).
        concurrent_checks: Probe all servers of a cycle in parallel.
    """

    model_config = ConfigDict(frozen=True)

    poll_interval: int = Field(
        ..., alias="pollInterval", gt=0, strict=True, description="Seconds between cycles."
    )
    teams_webhook_url: str = Field(
        ..., alias="teamsWebhookURL", description="Webhook endpoint that receives alerts."
    )
    servers: list[ServerEntry] = Field(..., description="Servers to monitor, in order.")
    concurrent_checks: bool = Field(
        default=False, description="Check servers concurrently within a cycle."
    )

    @field_validator("teams_webhook_url")
    @classmethod
    def validate_teams_webhook_url(cls, v: str) -> str:
        """Validate that the webhook is a valid HTTP(S) URL.

        Args:
            v: Webhook URL to validate.

        Returns:
            The validated URL.

        Raises:
            ValueError: If URL is invalid or not http(s).
        """
        try:
            url = _http_url_adapter.validate_python(v)
            if url.scheme not in ("http", "https"):
                raise ValueError("Only http:// and https:// webhooks allowed")
        except Exception as e:
            raise ValueError(f"Invalid webhook URL: {e}") from e
        return v


def read_config_file(path: str) -> dict[str, Any]:
    """Read the JSON configuration document.

    Args:
        path: Location of the configuration file.

    Returns:
        Parsed top-level JSON object.

    Raises:
        RuntimeError: If the file cannot be read.
        ValueError: If the file is not a JSON object.
    """
    try:
        with open(path) as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise RuntimeError(f"Configuration file not found: {path}") from e
    except OSError as e:
        raise RuntimeError(f"Could not read configuration file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"Configuration file contains invalid JSON: {path}") from e

    if not isinstance(data, dict):
        raise ValueError("Configuration file must contain a JSON object")
    return data


def _parse_bool_env(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise RuntimeError(f"{name} must be a boolean (got: {raw})")


def load_settings(path: str | None = None) -> Settings:
    """Load and validate settings from the configuration file and environment.

    The configuration file is read from ``path``, else from the
    MONITOR_CONFIG_PATH environment variable, else from ``servers.json``.

    Optional environment variables:
    - CONCURRENT_CHECKS: true/false, probe servers in parallel within a cycle.

    Args:
        path: Explicit configuration file path.

    Returns:
        Validated Settings object.

    Raises:
        RuntimeError: If the file is missing/unreadable or an env var is invalid.
        ValueError: If configuration is invalid.
    """
    config_path = path or os.getenv("MONITOR_CONFIG_PATH", DEFAULT_CONFIG_PATH)
    data = read_config_file(config_path)
    concurrent_checks = _parse_bool_env("CONCURRENT_CHECKS")

    try:
        settings = Settings.model_validate({**data, "concurrent_checks": concurrent_checks})
    except ValidationError as e:
        raise ValueError(f"Invalid configuration in {config_path}: {e}") from e

    logger.info(
        f"Monitor configured: interval={settings.poll_interval}s, "
        f"webhook={settings.teams_webhook_url}, "
        f"servers={len(settings.servers)}, "
        f"concurrent={settings.concurrent_checks}"
    )

    return settings
