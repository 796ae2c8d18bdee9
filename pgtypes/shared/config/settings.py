from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# PostgreSQL NUMERIC_MAX_PRECISION
MAX_SQL_PRECISION = 1000


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    LOG_LEVEL: str = Field(
        default="INFO", description="Logging level [DEBUG, INFO, WARNING, ERROR]"
    )

    JSON_LOGS: bool = Field(
        default=False,
        description="Should logs be in JSON format?",
    )

    NUMERIC_WIRE_FORMAT: Literal["binary", "text"] = Field(
        default="binary",
        description="Preferred PostgreSQL transmission format for numeric values",
    )

    NUMERIC_SQL_PRECISION: Optional[int] = Field(
        default=None,
        ge=1,
        le=MAX_SQL_PRECISION,
        description="Precision of NUMERIC columns declared with NumericType (unconstrained if unset)",
    )

    NUMERIC_SQL_SCALE: Optional[int] = Field(
        default=None,
        ge=0,
        le=MAX_SQL_PRECISION,
        description="Scale of NUMERIC columns declared with NumericType",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        valid_levels = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        if value.upper() not in valid_levels:
            raise ValueError(
                f"Invalid LOG_LEVEL '{value}'. Must be one of {valid_levels}"
            )
        return value.upper()

    @field_validator("NUMERIC_WIRE_FORMAT", mode="before")
    @classmethod
    def normalize_wire_format(cls, value: str) -> str:
        if isinstance(value, str):
            return value.lower()
        return value

    @model_validator(mode="after")
    def validate_sql_typmod(self) -> "Settings":
        if self.NUMERIC_SQL_SCALE is None:
            return self

        if self.NUMERIC_SQL_PRECISION is None:
            raise ValueError("NUMERIC_SQL_SCALE requires NUMERIC_SQL_PRECISION to be set")

        if self.NUMERIC_SQL_SCALE > self.NUMERIC_SQL_PRECISION:
            raise ValueError(
                f"NUMERIC_SQL_SCALE ({self.NUMERIC_SQL_SCALE}) "
                f"cannot exceed NUMERIC_SQL_PRECISION ({self.NUMERIC_SQL_PRECISION})"
            )
        return self


@lru_cache()
def get_settings() -> Settings:
    from pgtypes.shared.logging import get_logger

    logger = get_logger(__name__)

    try:
        settings = Settings()
        logger.debug("Settings loaded successfully")
        return settings

    except Exception as e:
        logger.error(f"Failed to load settings: {e}", exc_info=True)
        raise
