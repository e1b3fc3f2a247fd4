"""Shared base classes for settings modules."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class ParserSettingsBase(BaseSettings):
    """Base class for parser default settings.

    Parser settings control the structural characters used when a
    CommandParser is created without an explicit configuration.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )


class AppSettingsBase(BaseSettings):
    """Base class for application-level settings (environment, logging)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )
