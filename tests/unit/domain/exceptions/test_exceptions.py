import pgtypes
from pgtypes.domain.exceptions import (
    DomainException,
    InvalidNumericError,
    NumericError,
    NumericParseError,
    SerializationError,
)


def test_hierarchy():
    assert issubclass(NumericError, DomainException)
    assert issubclass(NumericParseError, NumericError)
    assert issubclass(NumericParseError, ValueError)
    assert issubclass(InvalidNumericError, NumericError)
    assert issubclass(InvalidNumericError, ValueError)
    assert issubclass(SerializationError, DomainException)
    assert not issubclass(SerializationError, NumericError)


def test_messages():
    assert str(NumericParseError("1x")) == "Invalid numeric literal: '1x'"
    assert str(InvalidNumericError("bad limb")) == "Invalid numeric: bad limb"
    assert str(SerializationError("short record", 1700)) == "Serialization error: short record (OID 1700)"
    assert str(SerializationError("short record")) == "Serialization error: short record"
    assert SerializationError("x").oid is None


def test_package_exports():
    assert pgtypes.Numeric.from_string("1.5") == pgtypes.Numeric.from_int(3) / 2
    assert pgtypes.Sign.NAN is pgtypes.Numeric.nan().sign
    assert pgtypes.IntKind.INT64.bits == 64
    assert pgtypes.NumericParseError is NumericParseError
