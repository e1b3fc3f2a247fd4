"""commandline - split free-form text into arguments and switches.

Example:
    from commandline import parse

    parser = parse('arg1 -loglevel:H "two words"')
    parser.args                      # ('arg1', 'two words')
    parser.switch_value("LogLevel")  # 'H'
"""

from typing import Any

from commandline.parsing import (
    SWITCH_PREFIX_NONE,
    ArgumentIndexError,
    ArgumentLookupError,
    CommandLineError,
    CommandParser,
    CommandParserBuilder,
    ConfigurationError,
    ParserConfig,
    Switch,
    SwitchFormatError,
    SwitchNotFoundError,
)


def parse(input_string: str, **config: Any) -> CommandParser:
    """Parse input_string with a configuration built from keyword arguments.

    Args:
        input_string: Text to parse.
        **config: ParserConfig fields (argument_separator, switch_prefix,
            value_separator, case_sensitive).

    Raises:
        ConfigurationError: If the configuration is invalid.
        SwitchFormatError: If a switch has no name.
    """
    return CommandParser(input_string, ParserConfig(**config))


__all__ = [
    "parse",
    "SWITCH_PREFIX_NONE",
    "ParserConfig",
    "Switch",
    "CommandParser",
    "CommandParserBuilder",
    "CommandLineError",
    "ConfigurationError",
    "SwitchFormatError",
    "ArgumentLookupError",
    "ArgumentIndexError",
    "SwitchNotFoundError",
]
