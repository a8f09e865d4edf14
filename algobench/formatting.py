"""Presentation helpers for result values.

Large numbers get comma grouping and fall back to scientific notation
above SCIENTIFIC_NOTATION_THRESHOLD; long lists are previewed head/tail.
"""

from __future__ import annotations

from decimal import ROUND_DOWN, Decimal, InvalidOperation
from typing import Any, Sequence, Union

from algobench.config import LIST_PREVIEW_EDGE, LIST_PREVIEW_LIMIT, SCIENTIFIC_NOTATION_THRESHOLD

_MAX_FRACTION = Decimal("0.00000001")


def format_large_number(value: Union[int, str, Decimal]) -> str:
    """Format an exact number for display.

    Sum and product results can exceed float precision, so the value stays a
    Decimal until the final string. Fractions are cut to 8 digits with
    trailing zeros removed.
    """
    try:
        number = value if isinstance(value, Decimal) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        return str(value)
    if not number.is_finite():
        return str(value)

    if number > SCIENTIFIC_NOTATION_THRESHOLD:
        return f"{float(number):.3e} (scientific notation)"

    if number == number.to_integral_value():
        return f"{int(number):,}"

    number = number.quantize(_MAX_FRACTION, rounding=ROUND_DOWN)
    text = f"{number:,f}"
    return text.rstrip("0").rstrip(".")


def format_list(
    items: Sequence[Any],
    limit: int = LIST_PREVIEW_LIMIT,
    edge: int = LIST_PREVIEW_EDGE,
) -> str:
    """Show short lists in full, long ones as head, elision count, tail."""
    if len(items) <= limit:
        return "[" + ", ".join(str(x) for x in items) + "]"
    head = ", ".join(str(x) for x in items[:edge])
    tail = ", ".join(str(x) for x in items[-edge:])
    hidden = len(items) - 2 * edge
    return f"[{head}, ... +{hidden:,} more ..., {tail}]"


def format_value(value: Any) -> str:
    """Dispatch on the result type the way report output expects."""
    if isinstance(value, (list, tuple)):
        return format_list(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, str, Decimal)):
        return format_large_number(value)
    if isinstance(value, float):
        return f"{value:,.2f}"
    if isinstance(value, dict):
        return ", ".join(f"{key}: {format_value(v)}" for key, v in value.items())
    return str(value)
