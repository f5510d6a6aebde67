"""Alert port definition (interface and DTO)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

__all__ = ["AlertMessage", "AlertDispatcherPort"]


@dataclass(slots=True, frozen=True)
class AlertMessage:
    """Notification text for one failure event.

    Attributes:
        text: Human-readable message sent to the alert sink.
    """

    text: str

    @classmethod
    def host_down(cls, address: str) -> AlertMessage:
        return cls(text=f"Server {address} is down")

    def as_payload(self) -> dict[str, str]:
        """Return the JSON body expected by the chat webhook."""
        return {"text": self.text}


class AlertDispatcherPort(Protocol):
    """Interface for best-effort alert delivery.

    Delivery is fire-and-forget: implementations log their own failures
    and report them through the return value instead of raising.
    """

    async def dispatch(self, message: AlertMessage, /) -> bool:
        """Deliver one alert.

        Args:
            message: Alert to deliver.

        Returns:
            True if the sink accepted the alert, False otherwise.
        """
        ...
