"""
PostgreSQL binary representation of ``numeric``.

Payload (big-endian)::

    int16 ndigits
    int16 weight
    uint16 sign      0x0000 positive, 0x4000 negative, 0xC000 NaN
    int16 dscale     ignored on decode
    int16 digits[ndigits]

The sign constants are only known here; the domain uses the Sign enum.
"""

import struct

from pgtypes.domain.exceptions import InvalidNumericError, SerializationError
from pgtypes.domain.values import Numeric, Sign

NUMERIC_OID = 1700
HEADER_LEN = 4 * 2

_HEADER = struct.Struct(">hhHh")

_INT16_MIN = -(1 << 15)
_INT16_MAX = (1 << 15) - 1

_SIGN_TO_WIRE: dict[Sign, int] = {
    Sign.POSITIVE: 0x0000,
    Sign.NEGATIVE: 0x4000,
    Sign.NAN: 0xC000,
}
_WIRE_TO_SIGN: dict[int, Sign] = {code: sign for sign, code in _SIGN_TO_WIRE.items()}


def encode_binary(value: Numeric) -> bytes:
    ndigits = len(value.digits)
    if ndigits > _INT16_MAX:
        raise SerializationError(f"cannot encode {ndigits} digits", NUMERIC_OID)
    if not _INT16_MIN <= value.weight <= _INT16_MAX:
        raise SerializationError(f"weight {value.weight} does not fit int16", NUMERIC_OID)

    dscale = value.scale()
    if dscale > _INT16_MAX:
        raise SerializationError(f"display scale {dscale} does not fit int16", NUMERIC_OID)

    header = _HEADER.pack(ndigits, value.weight, _SIGN_TO_WIRE[value.sign], dscale)
    return header + struct.pack(f">{ndigits}h", *value.digits)


def decode_binary(data: bytes) -> Numeric:
    """
    Decode a binary numeric payload (without the int32 length prefix).

    :raises SerializationError: on a short or inconsistent record, an unknown
        sign, NaN with digits, or a limb outside [0, 9999]
    """
    if len(data) < HEADER_LEN:
        raise SerializationError(f"numeric with invalid length {len(data)}", NUMERIC_OID)

    ndigits, weight, sign_code, _dscale = _HEADER.unpack_from(data)

    if ndigits < 0 or len(data) != HEADER_LEN + 2 * ndigits:
        raise SerializationError(
            f"inconsistent numeric: length {len(data)}, number of digits {ndigits}",
            NUMERIC_OID,
        )

    sign = _WIRE_TO_SIGN.get(sign_code)
    if sign is None:
        raise SerializationError(f"numeric with invalid sign 0x{sign_code:04X}", NUMERIC_OID)
    if sign is Sign.NAN and ndigits > 0:
        raise SerializationError(
            f"inconsistent numeric: NaN with number of digits {ndigits}", NUMERIC_OID
        )

    if ndigits == 0:
        # Servers may send NaN or zero with an arbitrary weight
        return Numeric.nan() if sign is Sign.NAN else Numeric.zero()

    digits = struct.unpack_from(f">{ndigits}h", data, HEADER_LEN)

    try:
        return Numeric.from_components(sign, digits, weight)
    except InvalidNumericError as e:
        raise SerializationError(str(e), NUMERIC_OID) from e
