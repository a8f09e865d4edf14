"""Policy constants for algobench.

Thresholds that change what the problems accept or warn about are grouped
in Policy so the CLI can override them per session.
"""

from __future__ import annotations

from dataclasses import dataclass

# Iterative sum refuses above this n (a loop this long runs for hours)
ITERATIVE_SUM_CEILING = 10_000_000_000

# Integer parameters above this print a "Big Number" warning
BIG_NUMBER_THRESHOLD = 100_000_000

# List sizes that trigger slow-algorithm warnings
LARGE_LIST_THRESHOLD = 100_000
VERY_LARGE_LIST_THRESHOLD = 1_000_000

# Numbers above this are shown in scientific notation
SCIENTIFIC_NOTATION_THRESHOLD = 10**15

# Lists longer than LIST_PREVIEW_LIMIT show LIST_PREVIEW_EDGE items per end
LIST_PREVIEW_LIMIT = 10
LIST_PREVIEW_EDGE = 5

DEFAULT_BENCHMARK_ITERATIONS = 5
DEFAULT_COMPARE_ITERATIONS = 3

# Pause between the cleanup request and the clock read
TIMER_SETTLE_SECONDS = 0.001

# Significant digits for duration arithmetic
DURATION_PRECISION = 50

# Range used by the default random list content
DEFAULT_RANDOM_MIN = 1
DEFAULT_RANDOM_MAX = 100


@dataclass(frozen=True)
class Policy:
    """Overridable thresholds consulted by the problems."""

    iterative_sum_ceiling: int = ITERATIVE_SUM_CEILING
    big_number_threshold: int = BIG_NUMBER_THRESHOLD
    large_list_threshold: int = LARGE_LIST_THRESHOLD
    very_large_list_threshold: int = VERY_LARGE_LIST_THRESHOLD


DEFAULT_POLICY = Policy()
