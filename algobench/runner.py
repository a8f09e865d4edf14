"""algobench runner — times operations and aggregates benchmark stats.

Data flow per benchmark:
1. Validate the iteration count (no invocation at all when it is < 1)
2. For each run: request a GC pass, Timer.start(), call the operation once
3. Timer.stop() turns the monotonic tick delta into an exact DurationValue
4. Optionally report the run ("Run i: <duration>")
5. Aggregate total / average / min / max with exact decimal arithmetic
6. Return a BenchmarkStats; rendering is left to the caller
"""

from __future__ import annotations

import gc
import logging
import time
from typing import TYPE_CHECKING, Any, Callable, Optional

from rich.console import Console

from algobench.config import TIMER_SETTLE_SECONDS
from algobench.errors import InvalidArgumentError, ProblemNotReadyError, TimerStateError
from algobench.models import BenchmarkStats, DurationValue, MethodRanking

if TYPE_CHECKING:
    from algobench.problems.base import Problem

logger = logging.getLogger(__name__)


class Timer:
    """Monotonic nanosecond stopwatch for a single start/stop span.

    start() asks the garbage collector for a pass and waits a short settle
    delay before reading the clock, so collector work triggered by earlier
    runs does not land inside the measured span.
    """

    def __init__(
        self,
        clock: Callable[[], int] = time.perf_counter_ns,
        settle_s: float = TIMER_SETTLE_SECONDS,
        sleep: Callable[[float], Any] = time.sleep,
        collect: Callable[[], Any] = gc.collect,
    ) -> None:
        self._clock = clock
        self._settle_s = settle_s
        self._sleep = sleep
        self._collect = collect
        self._start_ns: Optional[int] = None

    @property
    def running(self) -> bool:
        return self._start_ns is not None

    def start(self) -> None:
        self._collect()
        if self._settle_s > 0:
            self._sleep(self._settle_s)
        self._start_ns = self._clock()

    def stop(self) -> DurationValue:
        end_ns = self._clock()
        if self._start_ns is None:
            raise TimerStateError("Timer.stop() called before start()")
        elapsed = end_ns - self._start_ns
        self._start_ns = None
        return DurationValue.from_nanoseconds(elapsed)

    def measure(self, fn: Callable[[], Any]) -> tuple[Any, DurationValue]:
        """Run fn once inside a start/stop span.

        Returns (fn's return value, elapsed duration).
        """
        self.start()
        try:
            result = fn()
        except BaseException:
            self._start_ns = None
            raise
        return result, self.stop()


class BenchmarkRunner:
    """Runs a zero-argument operation N times, strictly sequentially."""

    def __init__(
        self,
        timer_factory: Callable[[], Timer] = Timer,
        console: Optional[Console] = None,
        collect: Callable[[], Any] = gc.collect,
    ) -> None:
        self._timer_factory = timer_factory
        self._console = console
        self._collect = collect

    def run(
        self,
        operation: Callable[[], Any],
        iterations: int,
        show_details: bool = False,
        label: str = "",
        on_run: Optional[Callable[[int, DurationValue], None]] = None,
    ) -> BenchmarkStats:
        """Benchmark operation and return aggregate statistics.

        Args:
            operation: Called exactly once per iteration; its return value is discarded.
            iterations: Number of runs, at least 1.
            show_details: Report every run as it finishes.
            label: Name carried into the stats (usually the method id).
            on_run: Per-run reporter used instead of the console when set.

        Raises:
            InvalidArgumentError: iterations is not an integer >= 1.
        """
        if isinstance(iterations, bool) or not isinstance(iterations, int) or iterations < 1:
            raise InvalidArgumentError(f"Iterations must be at least 1, got {iterations!r}")

        timer = self._timer_factory()
        runs: list[DurationValue] = []

        for i in range(1, iterations + 1):
            self._collect()
            timer.start()
            operation()
            duration = timer.stop()
            runs.append(duration)
            logger.debug("%s run %d/%d: %s ns", label or "benchmark", i, iterations, duration.nanoseconds)

            if show_details:
                if on_run is not None:
                    on_run(i, duration)
                elif self._console is not None:
                    self._console.print(f"  Run {i}: {duration}")

        return _aggregate(label, runs)


def _aggregate(label: str, runs: list[DurationValue]) -> BenchmarkStats:
    """Total, average, min and max via exact pairwise comparison."""
    total = DurationValue.sum(runs)
    minimum = maximum = runs[0]
    for duration in runs[1:]:
        if duration.compare(minimum) < 0:
            minimum = duration
        if duration.compare(maximum) > 0:
            maximum = duration
    return BenchmarkStats(
        label=label,
        iterations=len(runs),
        average=total / len(runs),
        minimum=minimum,
        maximum=maximum,
        total=total,
        runs=tuple(runs),
    )


def compare_methods(
    problem: Problem,
    iterations: int,
    runner: BenchmarkRunner,
    show_details: bool = False,
    on_start: Optional[Callable[[str], None]] = None,
) -> list[MethodRanking]:
    """Benchmark every declared method of a problem and rank by average.

    Methods hand their report back instead of printing, so the timed
    calls stay silent. Ties keep declaration order.

    Raises:
        ProblemNotReadyError: problem has no valid parameters.
        InvalidArgumentError: fewer than two methods, or iterations < 1.
    """
    if not problem.is_ready():
        raise ProblemNotReadyError("Run the setup first!")
    methods = problem.available_methods()
    if len(methods) < 2:
        raise InvalidArgumentError("At least 2 methods required for comparison!")

    measured: list[tuple[str, str, BenchmarkStats]] = []
    for method_id, description in methods.items():
        if on_start is not None:
            on_start(method_id)
        stats = runner.run(
            lambda m=method_id: problem.invoke(m),
            iterations,
            show_details=show_details,
            label=method_id,
        )
        measured.append((method_id, description, stats))

    measured.sort(key=lambda item: item[2].average)
    return [
        MethodRanking(rank=i, method=method_id, description=description, stats=stats)
        for i, (method_id, description, stats) in enumerate(measured, 1)
    ]
