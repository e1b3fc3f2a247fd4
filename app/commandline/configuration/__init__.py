"""Configuration module - public API.

Centralized configuration management for commandline using Pydantic
BaseSettings.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    ParserSettings: Parser default settings class

Example:
    ```python
    from commandline.configuration import settings

    prefix = settings.parser.switch_prefix
    level = settings.LOG_LEVEL
    ```
"""

from commandline.configuration.parser import ParserSettings
from commandline.configuration.settings import Settings, settings

__all__ = ["Settings", "ParserSettings", "settings"]
