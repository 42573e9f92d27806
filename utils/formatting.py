"""Output formatting utilities for the rainfall pages.

Provides reusable functions for:
- Formatting rainfall amounts with Indian digit grouping
- Formatting departure percentages
- Formatting district counts
"""

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Any, Optional


def _group_indian(digits: str) -> str:
    """Group an unsigned integer string the Indian way: 12,34,56,789."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups) + "," + tail


def format_num(n: Any, max_fraction_digits: int = 3) -> Any:
    """Format a number with ``en-IN`` grouping for display.

    Non-numbers and non-finite floats are returned unchanged so the caller
    can drop them straight into a template.

    Args:
        n: Value to format
        max_fraction_digits: Decimal places kept after rounding (default: 3)

    Returns:
        Formatted string like "12,34,567.891", or ``n`` itself

    Examples:
        format_num(1234567) -> "12,34,567"
        format_num(1234.5678) -> "1,234.568"
        format_num(float("nan")) -> nan
    """
    if isinstance(n, bool) or not isinstance(n, (int, float)):
        return n
    if not math.isfinite(n):
        return n

    quantum = Decimal(1).scaleb(-max_fraction_digits)
    with localcontext() as ctx:
        # enough precision for any finite float
        ctx.prec = 330
        rounded = Decimal(n).quantize(quantum, rounding=ROUND_HALF_UP)
    # negative values that round to zero keep their sign: -0.0001 -> "-0"
    sign = "-" if rounded.is_signed() else ""
    int_part, _, frac_part = f"{abs(rounded):f}".partition(".")
    frac_part = frac_part.rstrip("0")

    result = sign + _group_indian(int_part)
    if frac_part:
        result += "." + frac_part
    return result


def format_percent(value: Optional[float], precision: int = 1) -> str:
    """Format a departure percentage for display.

    Args:
        value: Percentage value (may be negative for a deficit)
        precision: Decimal places (default: 1)

    Returns:
        Formatted string like "-12.5%"

    Examples:
        format_percent(42.5) -> "42.5%"
        format_percent(0) -> "0.0%"
        format_percent(None) -> "-"
    """
    if value is None:
        return "-"
    return f"{value:.{precision}f}%"


def format_count(value: Optional[int]) -> str:
    """Format a count with Indian digit grouping; None renders as "-"."""
    if value is None:
        return "-"
    return format_num(int(value))
