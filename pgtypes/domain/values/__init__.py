from .int_kind import IntKind
from .numeric import Numeric
from .sign import Sign

__all__ = [
    "IntKind",
    "Numeric",
    "Sign",
]
