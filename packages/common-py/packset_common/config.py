from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_LOG_LEVEL, DEFAULT_PACKSET, DEFAULT_VCS_TIMEOUT, ENV_PREFIX, LOG_LEVELS


class Settings(BaseSettings):
    """packset settings, read from PACKSET_* environment variables."""

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, extra="ignore")

    path: Optional[str] = None
    packset: str = DEFAULT_PACKSET
    log_level: str = DEFAULT_LOG_LEVEL
    vcs_timeout: float = DEFAULT_VCS_TIMEOUT

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.lower()
        if v not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {', '.join(LOG_LEVELS)}")
        return v

    @field_validator("vcs_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("vcs_timeout must be positive")
        return v


def get_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings()
