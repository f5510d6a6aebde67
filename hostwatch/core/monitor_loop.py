"""Main monitor loop that periodically probes every target."""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from hostwatch.ports.alert import AlertMessage
from hostwatch.ports.liveness import LivenessResult
from hostwatch.ports.metrics import CycleReportDto, MetricsPort, TargetCheckDto
from hostwatch.ports.settings import SettingsPort, Target

__all__ = [
    "start_monitor_loop",
    "run_cycle",
    "process_target",
    "check_target",
    "get_now_time",
]

logger = logging.getLogger(__name__)

ProbeFn = Callable[[str], Awaitable[LivenessResult]]
AlertFn = Callable[[AlertMessage], Awaitable[bool]]


def get_now_time() -> float:
    """Get current monotonic time in seconds.

    Returns:
        Current time in seconds (monotonic).
    """
    return asyncio.get_running_loop().time()


async def check_target(target: Target, probe_fn: ProbeFn) -> LivenessResult:
    """Probe one target and log its status.

    A probe that raises is treated like any other probe failure: the
    target is reported down with the error as reason.

    Args:
        target: Target to check.
        probe_fn: Async reachability probe.

    Returns:
        Liveness verdict for this cycle.
    """
    try:
        result = await probe_fn(target.address)
    except Exception as e:  # noqa: BLE001
        logger.error(f"Probe raised for {target.address}: {e}", exc_info=True)
        result = LivenessResult.down(f"probe error: {e}")

    if result.is_up:
        logger.info(f"Server {target.address} is up")
    else:
        logger.warning(f"Server {target.address} is down: {result.reason}")
    return result


async def process_target(target: Target, probe_fn: ProbeFn, alert_fn: AlertFn) -> TargetCheckDto:
    """Check one target and alert if it is down.

    Never raises: a raising dispatcher counts as an undelivered alert.

    Args:
        target: Target to check.
        probe_fn: Async reachability probe.
        alert_fn: Async alert dispatcher.

    Returns:
        Verdict and alert outcome for this cycle.
    """
    result = await check_target(target, probe_fn)
    if result.is_up:
        return TargetCheckDto(address=target.address, result=result)

    message = AlertMessage.host_down(target.address)
    try:
        delivered = bool(await alert_fn(message))
    except Exception as e:  # noqa: BLE001
        logger.error(f"Alert dispatch failed for {target.address}: {e}", exc_info=True)
        delivered = False
    return TargetCheckDto(address=target.address, result=result, alert_delivered=delivered)


async def run_cycle(
    settings: SettingsPort,
    probe_fn: ProbeFn,
    alert_fn: AlertFn,
) -> list[TargetCheckDto]:
    """Check every configured target exactly once.

    Targets are processed in list order, one after the other, unless
    ``settings.concurrent_checks`` is set, in which case each target runs
    in its own task and the cycle ends when all of them have finished.

    Args:
        settings: Runtime configuration (targets, concurrency).
        probe_fn: Async reachability probe.
        alert_fn: Async alert dispatcher.

    Returns:
        Per-target outcomes in target order.
    """
    if settings.concurrent_checks:
        results = await asyncio.gather(
            *(process_target(target, probe_fn, alert_fn) for target in settings.targets)
        )
        return list(results)

    return [await process_target(target, probe_fn, alert_fn) for target in settings.targets]


async def _sleep_interval(seconds: float, stop_event: asyncio.Event | None) -> None:
    if stop_event is None:
        await asyncio.sleep(seconds)
        return
    try:
        await asyncio.wait_for(stop_event.wait(), timeout=seconds)
    except asyncio.TimeoutError:
        pass


async def start_monitor_loop(
    settings: SettingsPort,
    stop_fn: Callable[[], bool],
    probe_fn: ProbeFn,
    alert_fn: AlertFn,
    stop_event: asyncio.Event | None = None,
    metrics: MetricsPort | None = None,
) -> None:
    """Run the monitor loop until stopped.

    Each cycle:
    1. Probe every target (see run_cycle).
    2. Dispatch one alert per target found down.
    3. Record the cycle report into metrics, if any.
    4. Sleep for the full poll interval.
    5. Repeat until stop_fn() returns True or stop_event is set.

    Args:
        settings: Runtime configuration (interval, targets).
        stop_fn: Callable that returns True when loop should exit.
        probe_fn: Async reachability probe.
        alert_fn: Async alert dispatcher.
        stop_event: Optional event that cuts the inter-cycle sleep short
            and ends the loop.
        metrics: Optional collector fed one report per cycle.

    Notes:
        - Stop conditions are only consulted between cycles, so a started
          cycle always checks every target.
        - Nothing is carried from one cycle to the next: a host that stays
          down is alerted again every cycle.
    """
    logger.info(
        f"Monitoring {len(settings.targets)} target(s) every {settings.poll_interval_sec}s"
    )
    cycle = 0

    def should_stop() -> bool:
        return stop_fn() or (stop_event is not None and stop_event.is_set())

    while not should_stop():
        cycle += 1
        started = get_now_time()

        checks = await run_cycle(settings, probe_fn, alert_fn)

        report = CycleReportDto(
            cycle=cycle,
            started_at_sec=started,
            finished_at_sec=get_now_time(),
            checks=tuple(checks),
        )
        logger.debug(
            f"Cycle {cycle} finished in {report.duration_sec:.2f}s: "
            f"up={report.up} down={report.down}"
        )
        if metrics is not None:
            metrics.record_cycle(report)
            logger.info(f"Monitor metrics: {metrics}")

        await _sleep_interval(settings.poll_interval_sec, stop_event)

    logger.info(f"Monitor loop stopped after {cycle} cycle(s)")
