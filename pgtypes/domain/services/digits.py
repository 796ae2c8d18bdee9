"""
Digit/weight model shared by the numeric engine.

A magnitude is a sequence of base-10000 limbs (most significant first) plus a
weight: the power of 10000 carried by the first limb. Functions here never
look at the sign; callers pass magnitudes only.
"""

from typing import Sequence

Digits = tuple[int, ...]

BASE: int = 10000
GROUP_LEN: int = 4  # decimal digits per limb, lg(BASE)

# PostgreSQL NUMERIC_MAX_PRECISION, NUMERIC_MAX_DISPLAY_SCALE and NUMERIC_MIN_DISPLAY_SCALE
MAX_PRECISION: int = 1000
MAX_DISPLAY_SCALE: int = MAX_PRECISION
MIN_DISPLAY_SCALE: int = 0

# PostgreSQL NUMERIC_MIN_SIG_DIGITS: inexact results are no worse than float8
MIN_SIG_DIGITS: int = 16

# Powers of ten used to cut a limb after 0..3 of its decimal digits.
ROUND_POWERS: tuple[int, int, int, int] = (0, 1000, 100, 10)


def trim_abs(digits: Sequence[int], weight: int) -> tuple[Digits, int]:
    """
    Strip leading and trailing zero limbs, adjusting weight for the leading ones.

    An all-zero (or empty) sequence yields the canonical zero ``((), 0)``.
    """
    left = 0
    while left < len(digits) and digits[left] == 0:
        left += 1

    right = len(digits)
    while right > left and digits[right - 1] == 0:
        right -= 1

    if left == right:
        return (), 0

    return tuple(digits[left:right]), weight - left


def digit_by_weight(digits: Sequence[int], weight: int, position: int) -> int:
    """Return the limb at limb-position ``position``, 0 outside the stored range."""
    if position > weight:
        return 0
    if position <= weight - len(digits):
        return 0
    return digits[weight - position]


def cmp_abs(d1: Sequence[int], w1: int, d2: Sequence[int], w2: int) -> int:
    """
    Compare two magnitudes.

    :return: -1 if |d1| < |d2|, 0 if equal, 1 if |d1| > |d2|
    """
    if not d1:
        return 0 if not d2 else -1
    if not d2:
        return 1

    if w1 != w2:
        return -1 if w1 < w2 else 1

    for a, b in zip(d1, d2):
        if a != b:
            return -1 if a < b else 1

    # Trimmed magnitudes that agree on every shared limb have the same length,
    # so this only decides for untrimmed input.
    if len(d1) != len(d2):
        return -1 if len(d1) < len(d2) else 1

    return 0


def scale_abs(digits: Sequence[int], weight: int) -> int:
    """
    Emulate PostgreSQL's dscale: number of decimal digits after the point.

    Every fractional limb counts as four digits ("0.9000" and "0.9" both give 4),
    and the result is never negative.
    """
    scale = (len(digits) - weight - 1) * GROUP_LEN
    return max(scale, 0)


__all__ = [
    "Digits",
    "BASE",
    "GROUP_LEN",
    "MAX_PRECISION",
    "MAX_DISPLAY_SCALE",
    "MIN_DISPLAY_SCALE",
    "MIN_SIG_DIGITS",
    "ROUND_POWERS",
    "trim_abs",
    "digit_by_weight",
    "cmp_abs",
    "scale_abs",
]
