from pgtypes.domain.exceptions import NumericParseError, SerializationError
from pgtypes.domain.values import Numeric

from .binary import NUMERIC_OID


def encode_text(value: Numeric) -> bytes:
    return str(value).encode("utf-8")


def decode_text(data: bytes) -> Numeric:
    try:
        literal = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise SerializationError(f"numeric text is not UTF-8: {e}", NUMERIC_OID) from e

    try:
        return Numeric.from_string(literal)
    except NumericParseError as e:
        raise SerializationError(f"received invalid numeric string {literal!r}", NUMERIC_OID) from e
