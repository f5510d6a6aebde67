"""Metrics port definition (interface and DTOs)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from hostwatch.ports.liveness import LivenessResult

__all__ = ["TargetCheckDto", "CycleReportDto", "MetricsPort"]


@dataclass(slots=True, frozen=True)
class TargetCheckDto:
    """Outcome of one target within one cycle.

    Attributes:
        address: Checked address.
        result: Liveness verdict.
        alert_delivered: None when the target was up, otherwise whether
            the alert reached the sink.
    """

    address: str
    result: LivenessResult
    alert_delivered: bool | None = None

    @property
    def is_up(self) -> bool:
        return self.result.is_up


@dataclass(slots=True, frozen=True)
class CycleReportDto:
    """Everything one cycle observed, in target order."""

    cycle: int
    started_at_sec: float
    finished_at_sec: float
    checks: tuple[TargetCheckDto, ...] = ()

    @property
    def duration_sec(self) -> float:
        return self.finished_at_sec - self.started_at_sec

    @property
    def down(self) -> int:
        return sum(1 for c in self.checks if not c.is_up)

    @property
    def up(self) -> int:
        return len(self.checks) - self.down


class MetricsPort(Protocol):
    """Interface for monitor metrics.

    The loop calls record_cycle() once per finished cycle and logs
    str(metrics). Metrics never feed back into check or alert decisions.
    """

    def record_cycle(self, report: CycleReportDto, /) -> None:
        ...

    def __str__(self) -> str:
        ...
