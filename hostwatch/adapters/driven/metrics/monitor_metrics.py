"""In-memory counters summarizing monitor cycles."""

from __future__ import annotations

from collections import Counter

from hostwatch.ports.metrics import CycleReportDto, MetricsPort

__all__ = ["Metrics"]


class Metrics(MetricsPort):
    """Lifetime counters fed from cycle reports.

    Tracks per-address down cycles and alert outcomes, plus the shape of
    the last cycle. Not thread-safe; the loop records from a single task.
    """

    def __init__(self) -> None:
        self.cycles = 0
        self.checks = 0
        self.last: CycleReportDto | None = None
        self.down_cycles: Counter[str] = Counter()
        self.alerts_sent: Counter[str] = Counter()
        self.alerts_failed: Counter[str] = Counter()

    def record_cycle(self, report: CycleReportDto) -> None:
        self.cycles += 1
        self.checks += len(report.checks)
        self.last = report
        for check in report.checks:
            if check.is_up:
                continue
            self.down_cycles[check.address] += 1
            if check.alert_delivered:
                self.alerts_sent[check.address] += 1
            else:
                self.alerts_failed[check.address] += 1

    @property
    def availability_pct(self) -> float:
        """Share of all checks so far that found the target up."""
        if not self.checks:
            return 100.0
        return (1 - sum(self.down_cycles.values()) / self.checks) * 100

    def __str__(self) -> str:
        if self.last is None:
            return "Metrics: no cycle finished yet"

        worst = self.down_cycles.most_common(1)
        worst_text = f"{worst[0][0]}({worst[0][1]})" if worst else "-"
        return (
            f"cycles={self.cycles} | "
            f"last: up={self.last.up} down={self.last.down} "
            f"in {self.last.duration_sec:.2f}s | "
            f"availability={self.availability_pct:5.1f}% | "
            f"alerts sent={sum(self.alerts_sent.values())} "
            f"failed={sum(self.alerts_failed.values())} | "
            f"most down={worst_text}"
        )
