from decimal import Decimal
from typing import Any, Optional

from sqlalchemy import Numeric as SQLNumeric
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

from pgtypes.domain.exceptions import NumericError, SerializationError
from pgtypes.domain.values import Numeric
from pgtypes.shared.config import Settings
from pgtypes.shared.logging import get_logger

logger = get_logger(__name__)


class NumericType(TypeDecorator):
    """
    SQLAlchemy column type storing pgtypes.Numeric in a NUMERIC column.

    Bound values may be Numeric, Decimal, int or a decimal literal string.
    Result values come back as Numeric; NULL stays None.
    """

    impl = SQLNumeric
    cache_ok = True

    def __init__(self, precision: Optional[int] = None, scale: Optional[int] = None):
        super().__init__(precision=precision, scale=scale, asdecimal=True)

    @classmethod
    def from_settings(cls, settings: Settings) -> "NumericType":
        return cls(
            precision=settings.NUMERIC_SQL_PRECISION,
            scale=settings.NUMERIC_SQL_SCALE,
        )

    @property
    def python_type(self) -> type:
        return Numeric

    def process_bind_param(self, value: Any, dialect: Dialect) -> Optional[Decimal]:
        if value is None:
            return None

        return to_numeric(value).to_decimal()

    def process_result_value(self, value: Any, dialect: Dialect) -> Optional[Numeric]:
        if value is None:
            return None

        return to_numeric(value)


def to_numeric(value: Any) -> Numeric:
    """
    Convert a driver or application value to Numeric.

    :raises SerializationError: if the value has an unsupported type or is malformed
    """
    try:
        if isinstance(value, Numeric):
            return value
        if isinstance(value, Decimal):
            return Numeric.from_decimal(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return Numeric.from_int(value)
        if isinstance(value, str):
            return Numeric.from_string(value)
        if isinstance(value, (bytes, bytearray, memoryview)):
            return Numeric.from_string(bytes(value).decode("utf-8"))
    except (NumericError, UnicodeDecodeError) as e:
        logger.warning("numeric_conversion_failed", value=repr(value), error=str(e))
        raise SerializationError(f"cannot convert {value!r} to Numeric") from e

    raise SerializationError(f"cannot convert {type(value).__name__} to Numeric")
