"""Data models for algobench.

DurationValue, BenchmarkStats, MethodResult, MethodRanking — the typed
structures that flow through problems → runner → report.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Context, Decimal
from enum import Enum
from typing import Any, Iterable, Optional, Union

from algobench.config import DURATION_PRECISION
from algobench.errors import InvalidArgumentError, NegativeDurationError

_CONTEXT = Context(prec=DURATION_PRECISION, rounding=ROUND_HALF_EVEN)

_MILLISECOND = Decimal("0.001")
_SECOND = Decimal(1)


@dataclass(frozen=True, order=True)
class DurationValue:
    """Elapsed time in seconds, kept as an exact Decimal.

    Arithmetic runs in a fixed high-precision decimal context so that
    summing thousands of nanosecond-resolution runs never drifts the way
    binary floats do.
    """

    seconds: Decimal = Decimal(0)

    def __post_init__(self) -> None:
        if not isinstance(self.seconds, Decimal):
            raise TypeError(f"DurationValue needs a Decimal, got {type(self.seconds).__name__}")
        if self.seconds.is_nan() or self.seconds.is_infinite():
            raise InvalidArgumentError(f"Duration must be finite, got {self.seconds}")
        if self.seconds < 0:
            raise NegativeDurationError(f"Duration cannot be negative: {self.seconds}")

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int) -> DurationValue:
        """Convert an integer clock delta without losing precision."""
        return cls(Decimal(int(nanoseconds)).scaleb(-9, context=_CONTEXT))

    @classmethod
    def from_seconds(cls, seconds: Union[str, int, Decimal]) -> DurationValue:
        """Build from an exact seconds value. Floats are rejected."""
        if isinstance(seconds, float):
            raise TypeError("Use a str or Decimal for fractional seconds, not float")
        return cls(Decimal(seconds))

    @classmethod
    def sum(cls, values: Iterable[DurationValue]) -> DurationValue:
        total = Decimal(0)
        for value in values:
            total = _CONTEXT.add(total, value.seconds)
        return cls(total)

    @property
    def nanoseconds(self) -> int:
        return int(self.seconds.scaleb(9, context=_CONTEXT))

    def __add__(self, other: DurationValue) -> DurationValue:
        if not isinstance(other, DurationValue):
            return NotImplemented
        return DurationValue(_CONTEXT.add(self.seconds, other.seconds))

    def __sub__(self, other: DurationValue) -> DurationValue:
        if not isinstance(other, DurationValue):
            return NotImplemented
        diff = _CONTEXT.subtract(self.seconds, other.seconds)
        if diff < 0:
            raise NegativeDurationError(f"{self.seconds} - {other.seconds} is negative")
        return DurationValue(diff)

    def __truediv__(self, count: int) -> DurationValue:
        if isinstance(count, bool) or not isinstance(count, int):
            return NotImplemented
        if count < 1:
            raise InvalidArgumentError(f"Cannot divide a duration by {count}")
        return DurationValue(_CONTEXT.divide(self.seconds, Decimal(count)))

    def compare(self, other: DurationValue) -> int:
        """Exact three-way comparison: -1, 0 or 1."""
        return int(self.seconds.compare(other.seconds))

    def to_display_string(self) -> str:
        """Human label scaled to µs, ms or s."""
        if self.seconds < _MILLISECOND:
            micros = self.seconds.scaleb(6, context=_CONTEXT)
            return f"{micros.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP):,.2f} µs (microseconds)"
        if self.seconds < _SECOND:
            millis = self.seconds.scaleb(3, context=_CONTEXT)
            return f"{millis.quantize(Decimal('0.001'), rounding=ROUND_HALF_UP):,.3f} ms (milliseconds)"
        secs = self.seconds.quantize(Decimal("0.000001"), rounding=ROUND_HALF_UP)
        return f"{secs:,.6f} s (seconds)"

    def __str__(self) -> str:
        return self.to_display_string()


ZERO_DURATION = DurationValue()


@dataclass(frozen=True)
class BenchmarkStats:
    """Aggregate of one benchmark invocation."""

    label: str
    iterations: int
    average: DurationValue
    minimum: DurationValue
    maximum: DurationValue
    total: DurationValue
    runs: tuple[DurationValue, ...] = ()

    def to_dict(self) -> dict:
        """Serialize with exact decimal strings."""
        return {
            "label": self.label,
            "iterations": self.iterations,
            "average_s": f"{self.average.seconds:f}",
            "min_s": f"{self.minimum.seconds:f}",
            "max_s": f"{self.maximum.seconds:f}",
            "total_s": f"{self.total.seconds:f}",
            "runs_s": [f"{r.seconds:f}" for r in self.runs],
        }


class ResultStatus(str, Enum):
    """Outcome of invoking a problem method."""

    OK = "ok"
    NOT_READY = "not_ready"
    REFUSED = "refused"


NOT_READY_MESSAGE = "Problem not configured! Run Setup first."


@dataclass
class MethodResult:
    """What a problem method reports back instead of printing.

    The caller decides whether to render it, which keeps benchmarked
    runs silent in comparison mode.
    """

    method: str
    status: ResultStatus = ResultStatus.OK
    value: Any = None
    count: Optional[int] = None
    count_label: str = "Iterations"
    duration: Optional[DurationValue] = None
    label: str = "Result"
    notice: str = ""
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status == ResultStatus.OK

    @classmethod
    def not_ready(cls, method: str) -> MethodResult:
        return cls(method=method, status=ResultStatus.NOT_READY, notice=NOT_READY_MESSAGE)

    @classmethod
    def refused(cls, method: str, notice: str) -> MethodResult:
        return cls(method=method, status=ResultStatus.REFUSED, notice=notice)


@dataclass(frozen=True)
class MethodRanking:
    """One row of a comparison, ranked by average duration."""

    rank: int
    method: str
    description: str
    stats: BenchmarkStats
