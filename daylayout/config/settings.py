from datetime import UTC, time, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="DAYLAYOUT_LOG_LEVEL")
    log_file: str | None = Field(
        default=None,
        validation_alias="DAYLAYOUT_LOG_FILE",
        description="Optional path of a rotating log file",
    )
    timezone: str = Field(
        default="UTC",
        validation_alias="DAYLAYOUT_TIMEZONE",
        description="IANA time zone the working hours are expressed in",
    )
    default_start_time: time = Field(
        default=time(9, 0),
        validation_alias="DAYLAYOUT_DEFAULT_START_TIME",
        description="Start of work used by the default week schedule",
    )
    default_end_time: time = Field(
        default=time(17, 0),
        validation_alias="DAYLAYOUT_DEFAULT_END_TIME",
        description="End of work used by the default week schedule",
    )
    default_break_minutes: int = Field(
        default=10,
        ge=0,
        validation_alias="DAYLAYOUT_DEFAULT_BREAK_MINUTES",
        description="Break inserted after each activity by the default week schedule",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """Fall back to UTC when the configured zone is unknown."""
        try:
            resolve_timezone(value)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(f"Unknown DAYLAYOUT_TIMEZONE '{value}'. Defaulting to UTC.")
            return "UTC"
        return value


def resolve_timezone(name: str | None) -> tzinfo:
    """Map an IANA zone name to a tzinfo; UTC needs no zone database."""
    if not name or name.upper() == "UTC":
        return UTC
    return ZoneInfo(name)


settings = Settings()
