from enum import Enum


class Sign(Enum):
    """Sign tag of a Numeric. NaN is a sign of its own, as in PostgreSQL."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NAN = "nan"

    def __str__(self) -> str:
        return self.value
