"""
Division engine.

Long division follows Knuth, The Art of Computer Programming vol. 2,
Algorithm 4.3.1D in base 10000, the same way PostgreSQL's div_var does.
Rounding, truncation and result scale selection follow PostgreSQL's
round_var, trunc_var and select_div_scale.
"""

from typing import Sequence

from .digits import (
    BASE,
    GROUP_LEN,
    MAX_DISPLAY_SCALE,
    MIN_DISPLAY_SCALE,
    MIN_SIG_DIGITS,
    ROUND_POWERS,
    Digits,
    scale_abs,
    trim_abs,
)


def round_abs(digits: Sequence[int], weight: int, scale: int) -> tuple[list[int], int]:
    """
    Round half-up to ``scale`` decimal digits after the point.

    A negative scale rounds before the decimal point. The carry may add a
    new leading limb (and bump the weight). Trim the result afterwards, not before.
    """
    if not digits:
        return [], 0

    decimal_digits = (weight + 1) * GROUP_LEN + scale
    # Below zero nothing survives; at exactly zero the first dropped digit can still round up to 1.
    if decimal_digits < 0:
        return [], 0

    base_digits = (decimal_digits + GROUP_LEN - 1) // GROUP_LEN
    decimal_digits %= GROUP_LEN  # 0, or number of decimal digits to keep in the last limb
    if base_digits > len(digits) or (base_digits == len(digits) and decimal_digits == 0):
        return list(digits), weight

    if decimal_digits == 0:
        extra = digits[base_digits]
        result = list(digits[:base_digits])
        carry = 1 if extra >= BASE // 2 else 0
    else:
        # Round within the last kept limb
        result = list(digits[:base_digits])
        pow10 = ROUND_POWERS[decimal_digits]
        base_digits -= 1
        extra = result[base_digits] % pow10
        result[base_digits] -= extra
        carry = 0
        if extra >= pow10 // 2:
            pow10 += result[base_digits]
            if pow10 >= BASE:
                pow10 -= BASE
                carry = 1
            result[base_digits] = pow10

    i = base_digits - 1
    while carry and i >= 0:
        carry += result[i]
        if carry >= BASE:
            result[i] = carry - BASE
            carry = 1
        else:
            result[i] = carry
            carry = 0
        i -= 1

    if carry:
        result.insert(0, carry)
        weight += 1

    return result, weight


def trunc_abs(digits: Sequence[int], weight: int, scale: int) -> tuple[list[int], int]:
    """Drop every decimal digit after ``scale`` fractional places (negative: before the point)."""
    if not digits:
        return [], 0

    decimal_digits = (weight + 1) * GROUP_LEN + scale
    if decimal_digits <= 0:
        return [], 0

    base_digits = (decimal_digits + GROUP_LEN - 1) // GROUP_LEN
    result = list(digits)

    if base_digits <= len(result):
        result = result[:base_digits]

        decimal_digits %= GROUP_LEN
        if decimal_digits > 0:
            pow10 = ROUND_POWERS[decimal_digits]
            result[-1] -= result[-1] % pow10

    return result, weight


def _divide_single(
    dividend: list[int], divisor: int, quotient: list[int]
) -> None:
    # Knuth 4.3.1 exercise 16: one limb of remainder carried forward.
    remainder = 0
    for i in range(len(quotient)):
        remainder = remainder * BASE + dividend[i + 1]
        quotient[i], remainder = divmod(remainder, divisor)


def _divide_knuth(
    dividend: list[int], divisor: list[int], dividend_digits: int, quotient: list[int]
) -> None:
    n = len(divisor) - 1

    # Scale both operands so the leading divisor limb is >= BASE/2;
    # dividend[0] is headroom for the carry out of the top.
    if divisor[1] < BASE // 2:
        factor = BASE // (divisor[1] + 1)

        carry = 0
        for i in range(n, 0, -1):
            carry, divisor[i] = divmod(carry + divisor[i] * factor, BASE)

        carry = 0
        # Only the first dividend_digits limbs of the dividend can be non-zero here
        for i in range(dividend_digits, -1, -1):
            carry, dividend[i] = divmod(carry + dividend[i] * factor, BASE)

    lead = divisor[1]
    second = divisor[2]

    # Quotient limb j comes from dividing dividend[j .. j + n] by the divisor.
    for j in range(len(quotient)):
        next2 = dividend[j] * BASE + dividend[j + 1]

        if next2 == 0:
            quotient[j] = 0
            continue

        estimate = BASE - 1 if dividend[j] == lead else next2 // lead

        # After this the estimate is either exact or one too large.
        while second * estimate > (next2 - estimate * lead) * BASE + dividend[j + 2]:
            estimate -= 1

        if estimate > 0:
            # Multiply and subtract; carry tracks the product, borrow the subtraction.
            carry = 0
            borrow = 0
            for i in range(n, -1, -1):
                carry += divisor[i] * estimate
                borrow -= carry % BASE
                carry //= BASE
                borrow += dividend[j + i]
                if borrow < 0:
                    dividend[j + i] = borrow + BASE
                    borrow = -1
                else:
                    dividend[j + i] = borrow
                    borrow = 0

            # A borrow out of the top limb means the estimate was one too large: add back.
            if borrow:
                estimate -= 1
                carry = 0
                for i in range(n, -1, -1):
                    carry += dividend[j + i] + divisor[i]
                    if carry >= BASE:
                        dividend[j + i] = carry - BASE
                        carry = 1
                    else:
                        dividend[j + i] = carry
                        carry = 0

        quotient[j] = estimate


def div_abs(
    d1: Sequence[int],
    w1: int,
    d2: Sequence[int],
    w2: int,
    scale: int,
    round_: bool,
) -> tuple[Digits, int]:
    """
    |d1| / |d2| to ``scale`` decimal digits after the point.

    :param scale: Number of fractional decimal digits to keep (may be negative)
    :param round_: Round half-up if True, truncate otherwise
    :return: Trimmed quotient digits and weight
    """
    if not d2:
        raise ZeroDivisionError("division by zero")

    weight = w1 - w2

    # Accurate limbs needed for the requested scale, at least one,
    # plus a guard limb when rounding.
    quotient_len = max(weight + 1 - (-scale // GROUP_LEN), 1)
    if round_:
        quotient_len += 1
    quotient = [0] * quotient_len

    # Working dividend: len(quotient) + len(d2) limbs, but never fewer than d1 itself,
    # plus dividend[0] which Knuth's notation does not count.
    dividend_len = max(quotient_len + len(d2), len(d1))
    dividend = [0] * (dividend_len + 1)
    dividend[1 : 1 + len(d1)] = d1

    # divisor[0] is a zero so that divisor[1 .. n] holds the data.
    divisor = [0] + list(d2)

    if len(d2) == 1:
        _divide_single(dividend, divisor[1], quotient)
    else:
        _divide_knuth(dividend, divisor, len(d1), quotient)

    if round_:
        digits, weight = round_abs(quotient, weight, scale)
    else:
        digits, weight = trunc_abs(quotient, weight, scale)

    return trim_abs(digits, weight)


def select_div_scale(d1: Sequence[int], w1: int, d2: Sequence[int], w2: int) -> int:
    """
    Pick the default result scale of x / y the way PostgreSQL does.

    The scale gives at least MIN_SIG_DIGITS significant digits and is never
    below either operand's display scale, clamped to [0, 1000].
    """
    first1 = 0
    for i, limb in enumerate(d1):
        if limb != 0:
            first1 = limb
            w1 -= i
            break
    if first1 == 0:
        w1 = 0

    first2 = 0
    for i, limb in enumerate(d2):
        if limb != 0:
            first2 = limb
            w2 -= i
            break
    if first2 == 0:
        w2 = 0

    # If the leading limbs are equal we can't be sure; assume x < y.
    qweight = w1 - w2
    if first1 <= first2:
        qweight -= 1

    rscale = MIN_SIG_DIGITS - qweight * GROUP_LEN
    rscale = max(rscale, scale_abs(d1, w1), scale_abs(d2, w2), MIN_DISPLAY_SCALE)
    return min(rscale, MAX_DISPLAY_SCALE)


__all__ = [
    "div_abs",
    "round_abs",
    "trunc_abs",
    "select_div_scale",
]
