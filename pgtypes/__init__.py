"""
PostgreSQL-compatible value types.

``Numeric`` is an arbitrary precision decimal with the same digit layout as
PostgreSQL's ``numeric``, plus text/binary wire codecs and an SQLAlchemy
column type built on top of it.
"""

from pgtypes.domain.exceptions import (
    DomainException,
    InvalidNumericError,
    NumericError,
    NumericParseError,
    SerializationError,
)
from pgtypes.domain.values import IntKind, Numeric, Sign

__all__ = [
    "Numeric",
    "Sign",
    "IntKind",
    "DomainException",
    "NumericError",
    "NumericParseError",
    "InvalidNumericError",
    "SerializationError",
]
