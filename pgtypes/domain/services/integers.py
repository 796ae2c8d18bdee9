"""
Bridge between limb magnitudes and native integers.
"""

from typing import Sequence

from .digits import BASE, Digits

# 10000 > 2**13, so a weight w magnitude is at least 2**(13*w)
_BITS_PER_LIMB_FLOOR = 13


def from_int_abs(value: int) -> tuple[Digits, int]:
    """Split |value| into trimmed limbs by repeated division by 10000."""
    value = abs(value)
    if value == 0:
        return (), 0

    limbs: list[int] = []  # least significant first
    weight = -1
    while value:
        value, limb = divmod(value, BASE)
        if limb or limbs:  # skip trailing zero limbs
            limbs.append(limb)
        weight += 1

    limbs.reverse()
    return tuple(limbs), weight


def to_int_abs(digits: Sequence[int], weight: int) -> int:
    """
    Integer part of a magnitude (fraction truncated).

    Limb positions between the end of the digit array and the decimal point
    are not stored, so they are multiplied in as powers of 10000.
    """
    if not digits or weight < 0:
        return 0

    last = min(weight, len(digits) - 1)
    result = 0
    for i in range(last + 1):
        result = result * BASE + digits[i]

    return result * BASE ** (weight - last)


def to_int_saturated(
    digits: Sequence[int],
    weight: int,
    negative: bool,
    min_value: int,
    max_value: int,
    bits: int,
) -> int:
    """
    Integer part of a signed magnitude clamped to [min_value, max_value].

    :param bits: Width of the target type, used to skip building huge integers
    """
    if digits and weight * _BITS_PER_LIMB_FLOOR > bits:
        return min_value if negative else max_value

    magnitude = to_int_abs(digits, weight)
    value = -magnitude if negative else magnitude

    if value > max_value:
        return max_value
    if value < min_value:
        return min_value
    return value


__all__ = [
    "from_int_abs",
    "to_int_abs",
    "to_int_saturated",
]
