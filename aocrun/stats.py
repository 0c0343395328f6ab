from __future__ import annotations

import logging
import statistics
import time
import typing as t
from dataclasses import dataclass
from dataclasses import field


log: logging.Logger = logging.getLogger(__name__)

Timer = t.Callable[[], float]


@dataclass(frozen=True)
class RunStats:
    """
    Wall-time durations (seconds) for repeated executions of the same operation,
    and the value returned by the final execution.
    """

    samples: tuple[float, ...]
    result: t.Any = field(default=None, compare=False)

    def __post_init__(self):
        if not self.samples:
            raise ValueError("RunStats needs at least one sample")

    @property
    def runs(self) -> int:
        return len(self.samples)

    @property
    def min(self) -> float:
        return min(self.samples)

    @property
    def max(self) -> float:
        return max(self.samples)

    @property
    def mean(self) -> float:
        return statistics.fmean(self.samples)

    @property
    def median(self) -> float:
        # even-sized samples get the mean of the two middle values
        return statistics.median(self.samples)


def timed(func: t.Callable[..., t.Any], *args: t.Any, timer: Timer = time.perf_counter):
    """Call func(*args) once, returning a 2-tuple of (result, elapsed seconds)."""
    t0 = timer()
    result = func(*args)
    return result, timer() - t0


def collect(
    operation: t.Callable[..., t.Any],
    runs: int,
    setup: t.Callable[[], t.Any] | None = None,
    timer: Timer = time.perf_counter,
) -> RunStats:
    """
    Execute `operation` `runs` times in a row and reduce the elapsed times to stats.

    If `setup` is given it is called before every run, outside of the timed region,
    and its return value is passed as the single argument to `operation`. This is
    for operations which consume their input and so need a fresh one each time.

    Any exception from the operation (or setup) propagates immediately, there are
    no stats for a partially successful batch.
    """
    if runs < 1:
        raise ValueError(f"runs must be at least 1 (got {runs})")
    samples = []
    result = None
    for i in range(runs):
        args = () if setup is None else (setup(),)
        result, elapsed = timed(operation, *args, timer=timer)
        log.debug("run %d/%d took %.6fs", i + 1, runs, elapsed)
        samples.append(elapsed)
    return RunStats(samples=tuple(samples), result=result)
