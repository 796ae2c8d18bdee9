import struct
from enum import IntEnum
from typing import Optional

from pgtypes.domain.exceptions import SerializationError
from pgtypes.domain.values import Numeric
from pgtypes.shared.config import Settings
from pgtypes.shared.logging import get_logger

from .binary import NUMERIC_OID, decode_binary, encode_binary
from .text import decode_text, encode_text

logger = get_logger(__name__)

_LENGTH = struct.Struct(">i")
NULL_LENGTH = -1


class WireFormat(IntEnum):
    """PostgreSQL format codes."""

    TEXT = 0
    BINARY = 1

    @classmethod
    def from_name(cls, name: str) -> "WireFormat":
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown wire format: {name}") from None


class NumericCodec:
    """
    Encoder/decoder for numeric column values.

    The preferred transmission format is chosen per codec instance; there is
    no process-wide format registry.
    """

    def __init__(self, wire_format: WireFormat = WireFormat.BINARY) -> None:
        self._format = wire_format

    @classmethod
    def from_settings(cls, settings: Settings) -> "NumericCodec":
        return cls(WireFormat.from_name(settings.NUMERIC_WIRE_FORMAT))

    @property
    def format_code(self) -> int:
        return int(self._format)

    @property
    def wire_format(self) -> WireFormat:
        return self._format

    def encode(self, value: Numeric, oid: int = NUMERIC_OID) -> bytes:
        """
        Encode a value in the codec's format (payload only, no length prefix).

        :raises SerializationError: if oid is not numeric or the value cannot be represented
        """
        self._check_oid(oid, "encode into")

        if self._format is WireFormat.BINARY:
            return encode_binary(value)
        return encode_text(value)

    def decode(
        self,
        data: bytes,
        oid: int = NUMERIC_OID,
        wire_format: Optional[WireFormat] = None,
    ) -> Numeric:
        """
        Decode a payload.

        :param wire_format: Format the payload was sent in (default: the codec's own)
        :raises SerializationError: on a wrong oid or a malformed payload
        """
        self._check_oid(oid, "decode")
        wire_format = self._format if wire_format is None else wire_format

        try:
            if wire_format is WireFormat.BINARY:
                return decode_binary(data)
            if wire_format is WireFormat.TEXT:
                return decode_text(data)
        except SerializationError as e:
            logger.warning(
                "numeric_decode_failed",
                wire_format=wire_format.name,
                length=len(data),
                error=str(e),
            )
            raise

        raise SerializationError(f"unknown format {wire_format!r}", oid)

    def write(
        self, value: Optional[Numeric], buf: bytearray, oid: int = NUMERIC_OID
    ) -> None:
        """Append an int32 length prefix and the payload; None is written as NULL (-1)."""
        if value is None:
            self._check_oid(oid, "encode into")
            buf += _LENGTH.pack(NULL_LENGTH)
            return

        payload = self.encode(value, oid)
        buf += _LENGTH.pack(len(payload))
        buf += payload

    def read(
        self,
        buf: bytes,
        offset: int = 0,
        oid: int = NUMERIC_OID,
        wire_format: Optional[WireFormat] = None,
    ) -> tuple[Optional[Numeric], int]:
        """
        Read one length-prefixed value.

        :return: (value or None for NULL, offset just past the value)
        """
        if len(buf) - offset < _LENGTH.size:
            raise SerializationError("truncated numeric length prefix", oid)

        (length,) = _LENGTH.unpack_from(buf, offset)
        offset += _LENGTH.size

        if length == NULL_LENGTH:
            self._check_oid(oid, "decode")
            return None, offset
        if length < 0 or offset + length > len(buf):
            raise SerializationError(f"numeric with invalid length {length}", oid)

        payload = bytes(buf[offset : offset + length])
        return self.decode(payload, oid, wire_format), offset + length

    @staticmethod
    def _check_oid(oid: int, action: str) -> None:
        if oid != NUMERIC_OID:
            raise SerializationError(f"numeric codec cannot {action} this type", oid)
