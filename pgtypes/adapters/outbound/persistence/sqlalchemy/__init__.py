from .types import NumericType, to_numeric

__all__ = [
    "NumericType",
    "to_numeric",
]
