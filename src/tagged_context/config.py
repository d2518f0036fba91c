from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tagged_context.domain.failures import ForeignMessagePolicy

LOG_LEVELS = frozenset(
    {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
)


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="TAGGED_CONTEXT_LOG_LEVEL")
    foreign_message: ForeignMessagePolicy = Field(
        default=ForeignMessagePolicy.ORIGINAL,
        validation_alias="TAGGED_CONTEXT_FOREIGN_MESSAGE",
    )
    include_traceback: bool = Field(
        default=True, validation_alias="TAGGED_CONTEXT_INCLUDE_TRACEBACK"
    )

    @field_validator("include_traceback", mode="before")
    @classmethod
    def _parse_include_traceback(cls, v: bool | str) -> bool | str:
        if v == "":
            return False
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _parse_log_level(cls, v: str) -> str:
        level = str(v).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {v!r}")
        return level

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )
