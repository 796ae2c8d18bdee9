from .binary import NUMERIC_OID, decode_binary, encode_binary
from .codec import NumericCodec, WireFormat
from .text import decode_text, encode_text

__all__ = [
    "NUMERIC_OID",
    "NumericCodec",
    "WireFormat",
    "encode_binary",
    "decode_binary",
    "encode_text",
    "decode_text",
]
