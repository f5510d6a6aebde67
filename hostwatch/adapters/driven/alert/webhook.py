"""Chat webhook alert dispatcher."""

import asyncio
import logging

import aiohttp

from hostwatch.adapters.driven.http.client import HttpClient
from hostwatch.ports.alert import AlertDispatcherPort, AlertMessage

__all__ = ["WebhookDispatcher"]

logger = logging.getLogger(__name__)


class WebhookDispatcher(AlertDispatcherPort):
    """Best-effort delivery of alerts to an incoming chat webhook.

    Each alert is one POST with body ``{"text": ...}``. Failures are
    logged here and never propagated, so a sink that is down only costs
    a log line per alert.
    """

    def __init__(self, http: HttpClient, url: str) -> None:
        """Initialize dispatcher.

        Args:
            http: Open HTTP client shared by all deliveries.
            url: Webhook endpoint receiving the alerts.
        """
        self.http = http
        self.url = url

    async def dispatch(self, message: AlertMessage) -> bool:
        """Post one alert to the webhook.

        Args:
            message: Alert to deliver.

        Returns:
            True if the webhook answered 2xx, False otherwise.
        """
        try:
            status = await self.http.post_json(self.url, message.as_payload())
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"Could not send alert to webhook: {e!r}")
            return False
        except Exception as e:  # noqa: BLE001
            logger.error(f"Unexpected error sending alert: {e}", exc_info=True)
            return False

        if not 200 <= status < 300:
            logger.warning(f"Webhook rejected alert with status {status}")
            return False

        logger.info(f"Alert sent to webhook: {message.text}")
        return True
