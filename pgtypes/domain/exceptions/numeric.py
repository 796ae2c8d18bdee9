from .base import DomainException


class NumericError(DomainException):
    """Base exception for Numeric value errors."""

    pass


class NumericParseError(NumericError, ValueError):
    """Raised when a string is not a valid numeric literal."""

    def __init__(self, literal: str):
        self.literal = literal

        super().__init__(f"Invalid numeric literal: {literal!r}")


class InvalidNumericError(NumericError, ValueError):
    """Raised when raw components violate the Numeric invariants."""

    def __init__(self, reason: str):
        super().__init__(f"Invalid numeric: {reason}")
