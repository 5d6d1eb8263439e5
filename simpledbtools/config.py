import logging
import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    preview_rows: int = Field(5, ge=0, description="SIMPLEDBTOOLS_PREVIEW_ROWS")
    sqlite_timeout: float = Field(5.0, ge=0, description="SIMPLEDBTOOLS_SQLITE_TIMEOUT")
    log_level: str = Field("WARNING", description="SIMPLEDBTOOLS_LOG_LEVEL")

    @field_validator("log_level", mode="before")
    @classmethod
    def known_level(cls, value):
        level = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r} (SIMPLEDBTOOLS_LOG_LEVEL)")
        return level


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Load settings from the environment (and a local .env, if any).

    Also applies the log level to the package logger, so clearing the cache
    and calling again picks up every changed variable.
    """
    load_dotenv(override=False)
    settings = Settings(
        preview_rows=os.getenv("SIMPLEDBTOOLS_PREVIEW_ROWS", "5"),
        sqlite_timeout=os.getenv("SIMPLEDBTOOLS_SQLITE_TIMEOUT", "5.0"),
        log_level=os.getenv("SIMPLEDBTOOLS_LOG_LEVEL", "WARNING"),
    )
    logging.getLogger("simpledbtools").setLevel(settings.log_level)
    return settings
