"""
Shared settings base.

Every docembed settings class reads environment variables and an optional
``.env`` file the same way; subclasses only add an ``env_prefix``.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class DocembedSettings(BaseSettings):
    """Base class fixing how docembed settings are loaded."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
