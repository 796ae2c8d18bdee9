"""
Decimal literal parsing and formatting.

Accepted grammar (no exponent, no separators, no radix prefix):

    NaN
    [+-]? ( [0-9]+ ('.' [0-9]*)? | '.' [0-9]+ )
"""

from typing import NamedTuple

from pgtypes.domain.exceptions import NumericParseError

from .digits import GROUP_LEN, Digits

NAN_LITERAL = "NaN"
DECIMAL_POINT = "."


class ParsedLiteral(NamedTuple):
    nan: bool
    negative: bool
    digits: Digits
    weight: int


def _find_point(body: str, literal: str) -> int:
    """Return the decimal point index (len(body) if absent) after validating every char."""
    point = len(body)
    for i, ch in enumerate(body):
        if ch == DECIMAL_POINT:
            if point != len(body):
                raise NumericParseError(literal)
            point = i
        elif not ("0" <= ch <= "9"):
            raise NumericParseError(literal)
    return point


def _group(s: str, frac_pos: int) -> tuple[Digits, int]:
    # Pad so that both sides of frac_pos hold a whole number of groups.
    left_pad = -frac_pos % GROUP_LEN
    right_pad = -(left_pad + len(s)) % GROUP_LEN
    padded = "0" * left_pad + s + "0" * right_pad

    digits = tuple(
        int(padded[i : i + GROUP_LEN]) for i in range(0, len(padded), GROUP_LEN)
    )
    weight = -(-frac_pos // GROUP_LEN) - 1

    return digits, weight


def parse_unsigned(body: str, literal: str) -> tuple[Digits, int]:
    point = _find_point(body, literal)

    integer_part = body[:point]
    fraction_part = body[point + 1 :]
    if not integer_part and not fraction_part:
        raise NumericParseError(literal)

    s = (integer_part + fraction_part).rstrip("0")
    if not s:
        return (), 0

    stripped = s.lstrip("0")
    # Offset of the first fractional digit, relative to the first significant digit
    frac_pos = len(integer_part) - (len(s) - len(stripped))

    return _group(stripped, frac_pos)


def parse_literal(literal: str) -> ParsedLiteral:
    """
    Parse a decimal literal into sign flags and a canonical magnitude.

    :param literal: Text such as "-123.456", "123.", ".5" or "NaN"
    :return: ParsedLiteral with trimmed digits; zero is never negative
    :raises NumericParseError: if the literal does not match the grammar
    """
    if literal == NAN_LITERAL:
        return ParsedLiteral(nan=True, negative=False, digits=(), weight=0)

    body = literal
    negative = False
    if body[:1] in ("+", "-"):
        negative = body[0] == "-"
        body = body[1:]

    digits, weight = parse_unsigned(body, literal)
    if not digits:
        negative = False

    return ParsedLiteral(nan=False, negative=negative, digits=digits, weight=weight)


def format_abs(digits: Digits, weight: int) -> str:
    """
    Render a trimmed magnitude as the shortest plain decimal string.

    Limbs beyond the digit array up to the decimal point are rendered as zeros
    (weight 1 with digits (1000,) is "10000000").
    """
    if not digits:
        return "0"

    parts: list[str] = []

    if weight < 0:
        parts.append("0")
    else:
        for i in range(min(weight + 1, len(digits))):
            parts.append(str(digits[i]) if i == 0 else f"{digits[i]:04d}")

        missing = weight + 1 - len(digits)
        if missing > 0:
            parts.append("0" * (missing * GROUP_LEN))

    if len(digits) > weight + 1:
        parts.append(DECIMAL_POINT)
        if weight < -1:
            parts.append("0" * (GROUP_LEN * (-weight - 1)))

        last = len(digits) - 1
        for i in range(max(weight + 1, 0), len(digits)):
            group = f"{digits[i]:04d}"
            parts.append(group.rstrip("0") if i == last else group)

    return "".join(parts)


__all__ = [
    "NAN_LITERAL",
    "ParsedLiteral",
    "parse_literal",
    "parse_unsigned",
    "format_abs",
]
