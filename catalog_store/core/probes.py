"""Timed probe calls against the store."""

import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from catalog_store.core.health import HealthStatus, ProbeResult

DEGRADED_MESSAGE = "Request exceeded expected duration"

# Nanosecond monotonic clock
Clock = Callable[[], int]


@dataclass(frozen=True)
class Probe:
    """A named store operation with its expected duration."""

    name: str
    uri: str
    threshold_ms: int
    call: Callable[[], Awaitable[Any]]


async def run_probe(probe: Probe, clock: Clock = time.perf_counter_ns) -> ProbeResult:
    """
    Run one probe and classify it by elapsed time.

    Exceptions raised by the probed call propagate to the caller.

    Returns:
        Healthy when the call took at most ``threshold_ms``, Degraded otherwise
    """
    start = clock()
    await probe.call()
    elapsed_ms = (clock() - start) // 1_000_000

    if elapsed_ms > probe.threshold_ms:
        return ProbeResult(
            uri=probe.uri,
            status_code=HealthStatus.DEGRADED,
            total_milliseconds=elapsed_ms,
            target_milliseconds=probe.threshold_ms,
            message=DEGRADED_MESSAGE,
        )

    return ProbeResult(
        uri=probe.uri,
        status_code=HealthStatus.HEALTHY,
        total_milliseconds=elapsed_ms,
        target_milliseconds=probe.threshold_ms,
    )
