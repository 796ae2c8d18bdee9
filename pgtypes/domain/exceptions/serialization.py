from typing import Optional

from .base import DomainException


class SerializationError(DomainException):
    """Raised when a value cannot be encoded to or decoded from the wire format."""

    def __init__(self, reason: str, oid: Optional[int] = None):
        self.oid = oid

        message = f"Serialization error: {reason}"
        if oid is not None:
            message += f" (OID {oid})"

        super().__init__(message)
