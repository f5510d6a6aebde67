"""Liveness port definition (interface and DTO)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

__all__ = ["LivenessResult", "LivenessProbePort"]


@dataclass(slots=True, frozen=True)
class LivenessResult:
    """Verdict of one probe for one target in one cycle.

    Attributes:
        is_up: True if the address answered.
        reason: Failure description when down; None when up.
    """

    is_up: bool
    reason: str | None = None

    @classmethod
    def up(cls) -> LivenessResult:
        return cls(is_up=True)

    @classmethod
    def down(cls, reason: str) -> LivenessResult:
        return cls(is_up=False, reason=reason)


class LivenessProbePort(Protocol):
    """Interface for reachability probes.

    Implementations must not raise for an unreachable or invalid address:
    every failure kind is reported as a Down result carrying its reason.
    """

    async def probe(self, address: str, /) -> LivenessResult:
        """Check whether the address is reachable right now.

        Args:
            address: Hostname or IP to probe.

        Returns:
            Up or Down(reason).
        """
        ...
