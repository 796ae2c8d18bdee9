from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional, Union

from pgtypes.domain.exceptions import InvalidNumericError, NumericParseError
from pgtypes.domain.services import arithmetic, division, integers, text
from pgtypes.domain.services.digits import BASE, Digits, cmp_abs, scale_abs, trim_abs

from .int_kind import IntKind
from .sign import Sign


@dataclass(frozen=True)
class Numeric:
    """
    Arbitrary precision decimal with PostgreSQL ``numeric`` semantics.

    The value is ``sign * sum(digits[i] * 10000 ** (weight - i))``. Instances
    are always canonical: no leading or trailing zero limbs, zero is
    ``(POSITIVE, (), 0)`` and NaN is ``(NAN, (), 0)``.

    Add, subtract and multiply are exact. Division rounds or truncates to a
    requested scale, or picks one the way PostgreSQL does. Any NaN operand
    yields NaN; for ordering NaN equals NaN and is greater than every number.
    """

    sign: Sign = Sign.POSITIVE
    digits: Digits = ()
    weight: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "digits", tuple(self.digits))

        if not isinstance(self.sign, Sign):
            raise InvalidNumericError(f"unknown sign {self.sign!r}")
        if not isinstance(self.weight, int) or isinstance(self.weight, bool):
            raise InvalidNumericError(f"weight {self.weight!r} is not an integer")
        _check_limbs(self.digits)

        if not self.digits:
            if self.weight != 0:
                raise InvalidNumericError(f"empty digits with weight {self.weight}")
            if self.sign is Sign.NEGATIVE:
                raise InvalidNumericError("zero cannot be negative")
            return

        if self.sign is Sign.NAN:
            raise InvalidNumericError("NaN cannot carry digits")
        if self.digits[0] == 0 or self.digits[-1] == 0:
            raise InvalidNumericError(f"digits are not trimmed: {self.digits}")

    # ------------- constructors -------------

    @classmethod
    def zero(cls) -> "Numeric":
        return cls()

    @classmethod
    def nan(cls) -> "Numeric":
        return cls(sign=Sign.NAN)

    @classmethod
    def from_string(cls, literal: str) -> "Numeric":
        """
        Parse a decimal literal.

        :param literal: "NaN" or [+-]?(digits[.digits] | .digits)
        :raises NumericParseError: on malformed input
        """
        if not isinstance(literal, str):
            raise NumericParseError(repr(literal))

        parsed = text.parse_literal(literal)
        if parsed.nan:
            return cls.nan()

        return _build(parsed.digits, parsed.weight, parsed.negative)

    @classmethod
    def try_parse(cls, literal: str) -> Optional["Numeric"]:
        """Like from_string, but return None instead of raising."""
        try:
            return cls.from_string(literal)
        except NumericParseError:
            return None

    @classmethod
    def from_components(cls, sign: Sign, digits: Any, weight: int) -> "Numeric":
        """
        Build a Numeric from raw (sign, digits, weight), e.g. as read off the wire.

        Limb values are validated; zero limbs at either end are trimmed and
        zero/NaN are normalized to their canonical form.
        """
        digits = tuple(digits)
        _check_limbs(digits)

        if sign is Sign.NAN:
            if digits:
                raise InvalidNumericError("NaN cannot carry digits")
            return cls.nan()
        if not isinstance(sign, Sign):
            raise InvalidNumericError(f"unknown sign {sign!r}")

        trimmed, weight = trim_abs(digits, weight)
        return _build(trimmed, weight, sign is Sign.NEGATIVE)

    @classmethod
    def from_int(cls, value: int, kind: Optional[IntKind] = None) -> "Numeric":
        """
        Exact Numeric from an integer.

        :param kind: If given, value must fit this fixed-width integer type
        """
        if not isinstance(value, int):
            raise TypeError(f"expected int, got {type(value).__name__}")
        if kind is not None and not kind.contains(value):
            raise InvalidNumericError(f"{value} does not fit {kind.name}")

        digits, weight = integers.from_int_abs(value)
        return _build(digits, weight, value < 0)

    @classmethod
    def from_decimal(cls, value: Decimal) -> "Numeric":
        """Exact Numeric from a finite Decimal or Decimal NaN."""
        if value.is_snan():
            raise InvalidNumericError("signaling NaN is not supported")
        if value.is_nan():
            return cls.nan()
        if value.is_infinite():
            raise InvalidNumericError(f"{value} is not supported")

        return cls.from_string(format(value, "f"))

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        return self.sign is Sign.POSITIVE and not self.digits

    def is_nan(self) -> bool:
        return self.sign is Sign.NAN

    def is_negative(self) -> bool:
        return self.sign is Sign.NEGATIVE

    def sign_value(self) -> int:
        """-1 if x < 0, 0 if x is 0, 1 if x > 0 and 2 if x is NaN."""
        if self.sign is Sign.NEGATIVE:
            return -1
        if self.sign is Sign.NAN:
            return 2
        if not self.digits:
            return 0
        return 1

    def scale(self) -> int:
        """Emulated display scale: every fractional limb counts four digits."""
        return scale_abs(self.digits, self.weight)

    # ------------- conversions -------------

    def __str__(self) -> str:
        if self.sign is Sign.NAN:
            return text.NAN_LITERAL

        body = text.format_abs(self.digits, self.weight)
        return "-" + body if self.sign is Sign.NEGATIVE else body

    def __repr__(self) -> str:
        return f"Numeric('{self}')"

    def to_int(self, kind: IntKind = IntKind.INT64) -> int:
        """
        Integer part of x as the given fixed-width type.

        Out of range values saturate to the type's bounds; NaN gives 0.
        """
        if self.sign is Sign.NAN:
            return 0

        return integers.to_int_saturated(
            self.digits,
            self.weight,
            self.sign is Sign.NEGATIVE,
            kind.min_value,
            kind.max_value,
            kind.bits,
        )

    def __int__(self) -> int:
        if self.sign is Sign.NAN:
            raise ValueError("cannot convert NaN to integer")

        magnitude = integers.to_int_abs(self.digits, self.weight)
        return -magnitude if self.sign is Sign.NEGATIVE else magnitude

    def to_decimal(self) -> Decimal:
        return Decimal(str(self))

    def copy(self) -> "Numeric":
        return Numeric(sign=self.sign, digits=self.digits, weight=self.weight)

    # ------------- comparisons -------------

    def cmp(self, other: "Numeric") -> int:
        """
        Compare x and y.

        :return: -1 if x < y, 0 if x == y, 1 if x > y (NaN == NaN, NaN > any number)
        """
        if self.sign is Sign.NAN and other.sign is Sign.NAN:
            return 0
        if self.sign is Sign.NAN:
            return 1
        if other.sign is Sign.NAN:
            return -1

        if self.sign is not other.sign:
            return 1 if self.sign is Sign.POSITIVE else -1

        result = cmp_abs(self.digits, self.weight, other.digits, other.weight)
        return -result if self.sign is Sign.NEGATIVE else result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Numeric):
            return NotImplemented
        return self.cmp(other) == 0

    def __hash__(self) -> int:
        return hash((self.sign, self.digits, self.weight))

    def __lt__(self, other: "Numeric") -> bool:
        if not isinstance(other, Numeric):
            return NotImplemented
        return self.cmp(other) < 0

    def __le__(self, other: "Numeric") -> bool:
        if not isinstance(other, Numeric):
            return NotImplemented
        return self.cmp(other) <= 0

    def __gt__(self, other: "Numeric") -> bool:
        if not isinstance(other, Numeric):
            return NotImplemented
        return self.cmp(other) > 0

    def __ge__(self, other: "Numeric") -> bool:
        if not isinstance(other, Numeric):
            return NotImplemented
        return self.cmp(other) >= 0

    # ------------- arithmetic -------------

    def add(self, other: "Numeric") -> "Numeric":
        if self.sign is Sign.NAN or other.sign is Sign.NAN:
            return Numeric.nan()
        if self.is_zero():
            return other
        if other.is_zero():
            return self

        digits, weight, negative = arithmetic.add(
            self.digits, self.weight, self.sign is Sign.NEGATIVE,
            other.digits, other.weight, other.sign is Sign.NEGATIVE,
        )
        return _build(digits, weight, negative)

    def sub(self, other: "Numeric") -> "Numeric":
        if self.sign is Sign.NAN or other.sign is Sign.NAN:
            return Numeric.nan()
        if self.is_zero():
            return other.neg()
        if other.is_zero():
            return self

        digits, weight, negative = arithmetic.sub(
            self.digits, self.weight, self.sign is Sign.NEGATIVE,
            other.digits, other.weight, other.sign is Sign.NEGATIVE,
        )
        return _build(digits, weight, negative)

    def mul(self, other: "Numeric") -> "Numeric":
        if self.sign is Sign.NAN or other.sign is Sign.NAN:
            return Numeric.nan()
        if self.is_zero() or other.is_zero():
            return Numeric.zero()

        digits, weight = arithmetic.mul_abs(
            self.digits, self.weight, other.digits, other.weight
        )
        return _build(digits, weight, self.sign is not other.sign)

    def neg(self) -> "Numeric":
        if self.sign is Sign.NAN or self.is_zero():
            return self
        flipped = Sign.POSITIVE if self.sign is Sign.NEGATIVE else Sign.NEGATIVE
        return Numeric(sign=flipped, digits=self.digits, weight=self.weight)

    def abs(self) -> "Numeric":
        if self.sign is Sign.NEGATIVE:
            return Numeric(sign=Sign.POSITIVE, digits=self.digits, weight=self.weight)
        return self

    def quo_prec(self, other: "Numeric", scale: int, round_: bool = True) -> "Numeric":
        """
        x / y with ``scale`` decimal digits after the point.

        :param scale: Fractional digits to keep; negative values cut before the point
        :param round_: Round half-up if True, otherwise truncate toward zero
        :raises ZeroDivisionError: if y is zero
        """
        if self.sign is Sign.NAN or other.sign is Sign.NAN:
            return Numeric.nan()
        if other.is_zero():
            raise ZeroDivisionError("division by zero")
        if self.is_zero():
            return Numeric.zero()

        digits, weight = division.div_abs(
            self.digits, self.weight, other.digits, other.weight, scale, round_
        )
        return _build(digits, weight, self.sign is not other.sign)

    def quo(self, other: "Numeric") -> "Numeric":
        """x / y rounded at a scale chosen the way PostgreSQL chooses it."""
        if self.sign is Sign.NAN or other.sign is Sign.NAN:
            return Numeric.nan()

        scale = division.select_div_scale(
            self.digits, self.weight, other.digits, other.weight
        )
        return self.quo_prec(other, scale, True)

    def quo_rem(self, other: "Numeric") -> tuple["Numeric", "Numeric"]:
        """
        Truncated division: q = x / y rounded toward zero, r = x - y * q.

        The remainder has the sign of x (or is zero). This is T-division,
        not Euclidean division.

        :raises ZeroDivisionError: if y is zero
        """
        quotient = self.quo_prec(other, 0, False)
        remainder = self.sub(quotient.mul(other))
        return quotient, remainder

    def rem(self, other: "Numeric") -> "Numeric":
        return self.quo_rem(other)[1]

    # ------------- operators -------------

    def __add__(self, other: Union["Numeric", int]) -> "Numeric":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.add(coerced)

    def __radd__(self, other: int) -> "Numeric":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced.add(self)

    def __sub__(self, other: Union["Numeric", int]) -> "Numeric":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.sub(coerced)

    def __rsub__(self, other: int) -> "Numeric":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced.sub(self)

    def __mul__(self, other: Union["Numeric", int]) -> "Numeric":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.mul(coerced)

    def __rmul__(self, other: int) -> "Numeric":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced.mul(self)

    def __truediv__(self, other: Union["Numeric", int]) -> "Numeric":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.quo(coerced)

    def __rtruediv__(self, other: int) -> "Numeric":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced.quo(self)

    # Like decimal.Decimal, // and % truncate toward zero rather than flooring.
    def __floordiv__(self, other: Union["Numeric", int]) -> "Numeric":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.quo_prec(coerced, 0, False)

    def __mod__(self, other: Union["Numeric", int]) -> "Numeric":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.rem(coerced)

    def __divmod__(self, other: Union["Numeric", int]) -> tuple["Numeric", "Numeric"]:
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.quo_rem(coerced)

    def __neg__(self) -> "Numeric":
        return self.neg()

    def __pos__(self) -> "Numeric":
        return self

    def __abs__(self) -> "Numeric":
        return self.abs()


def _check_limbs(digits: Digits) -> None:
    for limb in digits:
        if not isinstance(limb, int) or isinstance(limb, bool):
            raise InvalidNumericError(f"limb {limb!r} is not an integer")
        if not 0 <= limb < BASE:
            raise InvalidNumericError(f"limb {limb} is outside [0, {BASE})")


def _build(digits: Digits, weight: int, negative: bool) -> Numeric:
    if not digits:
        return Numeric()
    return Numeric(
        sign=Sign.NEGATIVE if negative else Sign.POSITIVE,
        digits=digits,
        weight=weight,
    )


def _coerce(value: Any) -> Optional[Numeric]:
    if isinstance(value, Numeric):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Numeric.from_int(value)
    return None
