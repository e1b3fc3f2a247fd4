"""commandline configuration settings - main aggregator."""

from pydantic import Field

from commandline.configuration.base import AppSettingsBase
from commandline.configuration.parser import ParserSettings


class Settings(AppSettingsBase):
    """commandline configuration settings - main aggregator.

    Aggregates the application-level settings and the parser defaults into
    a single configuration object.

    Environment Variables:
        PREFIX: Environment prefix; empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        LOG_MAX_VALUE_LENGTH: Longest string value written to a log entry
            before it is truncated (default: 500)

    Example:
        ```python
        from commandline.configuration import settings

        if settings.parser.case_sensitive:
            ...

        if settings.is_production:
            ...
        ```
    """

    # Application-level settings
    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    LOG_MAX_VALUE_LENGTH: int = Field(default=500, gt=0)

    # Parser settings
    parser: ParserSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        if "parser" not in kwargs:
            kwargs["parser"] = ParserSettings()

        super().__init__(**kwargs)


# Create the singleton settings instance
settings = Settings()
