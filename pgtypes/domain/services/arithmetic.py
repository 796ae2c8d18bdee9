"""
Exact limb arithmetic: magnitude add/subtract, signed dispatch, multiplication.

Operands are trimmed (sign-less) magnitudes; results are trimmed too, so an
empty digit tuple with weight 0 is the only possible zero.
"""

from typing import Sequence

from .digits import BASE, Digits, cmp_abs, digit_by_weight, trim_abs


def _span(d1: Sequence[int], w1: int, d2: Sequence[int], w2: int) -> tuple[int, int]:
    """Lowest and highest limb positions covered by either operand."""
    lowest = min(w1 - len(d1) + 1, w2 - len(d2) + 1)
    highest = max(w1, w2)
    return lowest, highest


def add_abs(d1: Sequence[int], w1: int, d2: Sequence[int], w2: int) -> tuple[Digits, int]:
    """|d1| + |d2|"""
    lowest, highest = _span(d1, w1, d2, w2)

    limbs: list[int] = []  # least significant first
    carry = 0
    for position in range(lowest, highest + 1):
        total = digit_by_weight(d1, w1, position) + digit_by_weight(d2, w2, position) + carry
        carry, limb = divmod(total, BASE)
        limbs.append(limb)

    if carry:
        limbs.append(carry)
        highest += 1

    limbs.reverse()
    return trim_abs(limbs, highest)


def _sub_abs_ordered(
    d1: Sequence[int], w1: int, d2: Sequence[int], w2: int
) -> tuple[Digits, int]:
    """|d1| - |d2|, requires |d1| >= |d2|."""
    lowest, highest = _span(d1, w1, d2, w2)

    limbs: list[int] = []
    borrow = 0
    for position in range(lowest, highest + 1):
        diff = digit_by_weight(d1, w1, position) - digit_by_weight(d2, w2, position) - borrow
        if diff < 0:
            diff += BASE
            borrow = 1
        else:
            borrow = 0
        limbs.append(diff)

    limbs.reverse()
    return trim_abs(limbs, highest)


def sub_abs(
    d1: Sequence[int], w1: int, d2: Sequence[int], w2: int
) -> tuple[Digits, int, bool]:
    """
    |d1| - |d2| as a magnitude plus a flag.

    :return: (digits, weight, negative) where negative is True iff |d1| < |d2|
    """
    order = cmp_abs(d1, w1, d2, w2)
    if order < 0:
        digits, weight = _sub_abs_ordered(d2, w2, d1, w1)
        return digits, weight, True
    if order == 0:
        return (), 0, False

    digits, weight = _sub_abs_ordered(d1, w1, d2, w2)
    return digits, weight, False


def add(
    d1: Sequence[int], w1: int, n1: bool, d2: Sequence[int], w2: int, n2: bool
) -> tuple[Digits, int, bool]:
    """Signed addition; n1/n2 flag negative operands."""
    if n1 == n2:
        digits, weight = add_abs(d1, w1, d2, w2)
        return digits, weight, n1 and bool(digits)

    return sub(d1, w1, n1, d2, w2, not n2)


def sub(
    d1: Sequence[int], w1: int, n1: bool, d2: Sequence[int], w2: int, n2: bool
) -> tuple[Digits, int, bool]:
    """Signed subtraction; n1/n2 flag negative operands."""
    if n1 == n2:
        digits, weight, negative = sub_abs(d1, w1, d2, w2)
        if digits and n1:
            negative = not negative
        return digits, weight, negative

    return add(d1, w1, n1, d2, w2, not n2)


def mul_abs(d1: Sequence[int], w1: int, d2: Sequence[int], w2: int) -> tuple[Digits, int]:
    """
    |d1| * |d2| by schoolbook convolution.

    The product has at most len(d1) + len(d2) limbs: one per column plus a
    possible final carry, which raises the weight above w1 + w2.
    """
    if not d1 or not d2:
        return (), 0

    r1 = d1[::-1]
    r2 = d2[::-1]
    columns = len(r1) + len(r2) - 1

    limbs: list[int] = []  # least significant first
    carry = 0
    for i in range(columns):
        total = carry
        for j1 in range(max(0, i - len(r2) + 1), min(len(r1) - 1, i) + 1):
            total += r1[j1] * r2[i - j1]
        carry, limb = divmod(total, BASE)
        limbs.append(limb)

    weight = w1 + w2
    if carry:
        limbs.append(carry)
        weight += 1

    limbs.reverse()
    return trim_abs(limbs, weight)


__all__ = [
    "add_abs",
    "sub_abs",
    "add",
    "sub",
    "mul_abs",
]
