"""
Configuration settings for syncpath.
Uses pydantic-settings for environment variable management.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from syncpath.paths.validation import ValidationPolicy
from syncpath.utils.constants import (
    DEFAULT_ALLOW_DOTS_IN_NAMES,
    DEFAULT_CHECK_WILDCARDS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SUBSTITUTE_CHAR,
    ENV_PREFIX,
)
from syncpath.utils.exceptions import ConfigurationError
from syncpath.utils.validators import validate_substitute_char


class PathSettings(BaseSettings):
    """Path sanitization policy."""

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX)

    substitute_char: str = Field(
        default=DEFAULT_SUBSTITUTE_CHAR,
        description="Character that replaces disallowed content in names",
    )
    check_wildcards: bool = Field(
        default=DEFAULT_CHECK_WILDCARDS,
        description="Also replace '*' and '?' while sanitizing",
    )
    allow_dots_in_names: bool = Field(
        default=DEFAULT_ALLOW_DOTS_IN_NAMES,
        description="Keep '.' and '..' segments instead of replacing them",
    )
    expand_short_paths: bool = Field(
        default=False,
        description="Expand 8.3 short names through the filesystem (may change letter case)",
    )
    validation_policy: ValidationPolicy = Field(
        default=ValidationPolicy.PERMISSIVE,
        description="'permissive' accepts any path, 'strict' rejects illegal characters and overlong paths",
    )
    case_sensitive_filenames: Optional[bool] = Field(
        default=None,
        description="Case sensitivity of the local filesystem; unset means case-sensitive only on Linux",
    )

    @field_validator("substitute_char")
    @classmethod
    def check_substitute_char(cls, v):
        try:
            return validate_substitute_char(v)
        except ConfigurationError as e:
            # pydantic turns ValueError into a ValidationError
            raise ValueError(str(e)) from e


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    log_level: str = Field(default=DEFAULT_LOG_LEVEL, description="Logging level")

    paths: PathSettings = Field(default_factory=PathSettings)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
