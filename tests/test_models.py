"""Tests for DurationValue arithmetic, comparison and display."""

from decimal import Decimal

import pytest

from algobench.errors import InvalidArgumentError, NegativeDurationError
from algobench.models import BenchmarkStats, DurationValue, MethodResult, ResultStatus, ZERO_DURATION


def d(seconds: str) -> DurationValue:
    return DurationValue.from_seconds(seconds)


# --- Construction (5 tests) ---

def test_from_nanoseconds_is_exact():
    assert DurationValue.from_nanoseconds(1).seconds == Decimal("0.000000001")
    assert DurationValue.from_nanoseconds(1_500_000_123).seconds == Decimal("1.500000123")


def test_nanoseconds_round_trip_property():
    assert DurationValue.from_nanoseconds(987_654_321).nanoseconds == 987_654_321


def test_float_seconds_rejected():
    with pytest.raises(TypeError):
        DurationValue.from_seconds(0.1)


def test_negative_duration_rejected():
    with pytest.raises(NegativeDurationError):
        DurationValue.from_seconds("-0.5")


def test_zero_duration_default():
    assert ZERO_DURATION.seconds == 0
    assert DurationValue() == ZERO_DURATION


# --- Arithmetic (7 tests) ---

def test_addition_commutative_and_associative():
    a, b, c = d("0.000000001"), d("0.1"), d("0.2")
    assert a + b == b + a
    assert (a + b) + c == a + (b + c)
    assert (a + b) + c == d("0.300000001")


def test_repeated_small_additions_do_not_drift():
    """Ten thousand 1ns runs add up to exactly 10µs."""
    one_ns = DurationValue.from_nanoseconds(1)
    total = ZERO_DURATION
    for _ in range(10_000):
        total = total + one_ns
    assert total == d("0.00001")
    assert DurationValue.sum([one_ns] * 10_000) == total


def test_tenths_sum_to_exactly_one_second():
    assert DurationValue.sum([d("0.1")] * 10) == d("1")


def test_subtract_end_minus_start():
    assert d("1.5") - d("0.25") == d("1.25")


def test_subtract_below_zero_rejected():
    with pytest.raises(NegativeDurationError):
        d("0.1") - d("0.2")


def test_divide_by_count():
    assert d("0.000000009") / 3 == d("0.000000003")
    assert d("1") / 4 == d("0.25")


@pytest.mark.parametrize("count", [0, -1])
def test_divide_by_non_positive_rejected(count):
    with pytest.raises(InvalidArgumentError):
        d("1") / count


# --- Comparison (3 tests) ---

def test_compare_three_way():
    assert d("0.1").compare(d("0.2")) == -1
    assert d("0.2").compare(d("0.2")) == 0
    assert d("0.3").compare(d("0.2")) == 1


def test_equality_ignores_trailing_zeros():
    assert d("1.0") == d("1")


def test_ordering_is_exact_at_nanosecond_scale():
    a = d("0.100000001")
    b = d("0.100000002")
    assert a < b
    assert max(a, b) == b


# --- Display boundaries (6 tests) ---

def test_display_just_below_one_millisecond_uses_microseconds():
    assert d("0.0009999").to_display_string() == "999.90 µs (microseconds)"


def test_display_one_millisecond_uses_milliseconds():
    assert d("0.001").to_display_string() == "1.000 ms (milliseconds)"


def test_display_just_below_one_second_uses_milliseconds():
    assert d("0.9999999").to_display_string().endswith("ms (milliseconds)")


def test_display_one_second_uses_seconds():
    assert d("1.0").to_display_string() == "1.000000 s (seconds)"


def test_display_groups_thousands():
    assert d("1234.5").to_display_string() == "1,234.500000 s (seconds)"


def test_str_is_display_string():
    assert str(d("0.0000025")) == "2.50 µs (microseconds)"


# --- Records (3 tests) ---

def test_benchmark_stats_to_dict_keeps_exact_strings():
    one = DurationValue.from_nanoseconds(1)
    stats = BenchmarkStats("x", 1, one, one, one, one, (one,))
    data = stats.to_dict()
    assert data["average_s"] == "0.000000001"
    assert data["runs_s"] == ["0.000000001"]
    assert data["iterations"] == 1


def test_method_result_not_ready():
    result = MethodResult.not_ready("iterative_sum")
    assert result.status == ResultStatus.NOT_READY
    assert not result.ok
    assert "Run Setup first" in result.notice


def test_method_result_refused():
    result = MethodResult.refused("iterative_sum", "too large")
    assert result.status == ResultStatus.REFUSED
    assert result.notice == "too large"
