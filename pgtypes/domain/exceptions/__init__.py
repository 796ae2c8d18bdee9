from .base import DomainException
from .numeric import InvalidNumericError, NumericError, NumericParseError
from .serialization import SerializationError

__all__ = [
    "DomainException",
    "NumericError",
    "NumericParseError",
    "InvalidNumericError",
    "SerializationError",
]
