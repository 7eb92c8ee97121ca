# File: src/claude_stream/config.py
# Purpose: Runtime configuration with pydantic-settings
from functools import lru_cache
from typing import Literal, Optional, TextIO

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings for the stream renderer.
    Every field can be overridden with a CLAUDE_STREAM_<NAME> environment variable.
    """
    model_config = SettingsConfigDict(
        env_prefix="CLAUDE_STREAM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    # Logging Configuration
    APP_NAME: str = "claude-stream"
    LOG_LEVEL: str = "WARNING"
    LOG_DIR: str = ""  # empty disables log files
    LOG_JSON: bool = True

    # Output Configuration
    COLOR: Optional[bool] = None  # None = colour only when writing to a tty
    NOTICE_STREAM: Literal["stdout", "stderr"] = "stderr"

    # Input Configuration
    READ_CHUNK_SIZE: int = 64 * 1024

    def use_color(self, stream: TextIO) -> bool:
        """Resolve COLOR against the stream that will be written to"""
        if self.COLOR is not None:
            return self.COLOR
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Call get_settings.cache_clear() after changing the environment.
    """
    return Settings()
