"""ICMP reachability probe backed by the system ``ping`` command."""

import asyncio
import logging
import os

from hostwatch.ports.liveness import LivenessProbePort, LivenessResult

__all__ = ["PingProbe", "build_ping_command", "PING_EXECUTABLE"]

logger = logging.getLogger(__name__)

PING_COUNT = 4
PING_EXECUTABLE = "ping"


def build_ping_command(
    address: str, count: int = PING_COUNT, executable: str = PING_EXECUTABLE
) -> list[str]:
    """Build the ping argv for the current platform.

    Args:
        address: Hostname or IP to ping.
        count: Echo requests sent in one burst.
        executable: Name or path of the ping binary.

    Returns:
        Argument list for create_subprocess_exec.
    """
    count_flag = "-n" if os.name == "nt" else "-c"
    return [executable, count_flag, str(count), address]


class PingProbe(LivenessProbePort):
    """Spawn ``ping`` once per check and map its exit code to a verdict.

    The whole burst of echo requests is one verdict: exit code 0 means
    up, anything else means down. The reason is the last line ping
    printed, which is where it reports loss or resolution errors.
    """

    def __init__(self, count: int = PING_COUNT, executable: str = PING_EXECUTABLE) -> None:
        self.count = count
        self.executable = executable

    async def probe(self, address: str) -> LivenessResult:
        args = build_ping_command(address, count=self.count, executable=self.executable)
        logger.debug("exec: %s", args)
        try:
            proc = await asyncio.create_subprocess_exec(
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            stdout_bytes, stderr_bytes = await proc.communicate()
        except OSError as e:
            return LivenessResult.down(f"could not run {self.executable}: {e}")

        if proc.returncode == 0:
            return LivenessResult.up()

        return LivenessResult.down(
            _last_line(stderr_bytes)
            or _last_line(stdout_bytes)
            or f"{self.executable} exited with code {proc.returncode}"
        )


def _last_line(output: bytes | None) -> str:
    if not output:
        return ""
    lines = [line.strip() for line in output.decode("utf-8", errors="replace").splitlines()]
    lines = [line for line in lines if line]
    return lines[-1] if lines else ""
