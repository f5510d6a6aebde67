"""Settings port definition (DTO)."""

from dataclasses import dataclass

__all__ = ["SettingsPort", "Target"]


@dataclass(frozen=True)
class Target:
    """One monitored address.

    Attributes:
        address: Hostname or IP, passed as-is to the probe.
    """

    address: str


@dataclass(frozen=True)
class SettingsPort:
    """Runtime settings for the monitor loop.

    Decouples core from concrete configuration sources, enabling
    easy testing and implementation swapping.

    Attributes:
        poll_interval_sec: Seconds to sleep after each cycle.
        alert_sink_url: Webhook URL that receives down alerts.
        targets: Ordered addresses to check each cycle (may be empty).
        concurrent_checks: Check all targets of a cycle in parallel tasks.
    """

    poll_interval_sec: int
    alert_sink_url: str
    targets: tuple[Target, ...] = ()
    concurrent_checks: bool = False
