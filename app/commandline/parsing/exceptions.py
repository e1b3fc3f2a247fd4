"""Exceptions raised by the command line parser.

Each exception also derives from the matching builtin (ValueError,
IndexError, KeyError) so callers may catch either.
"""

from typing import Optional


class CommandLineError(Exception):
    """Base exception for all command line parsing errors.

    Example:
        try:
            parser = CommandParser.builder(text).build()
        except CommandLineError as e:
            logger.error("command_line_error", error=str(e))
    """

    pass


class ConfigurationError(CommandLineError, ValueError):
    """Raised when a parser configuration is invalid.

    Either a structural character is not a printable ASCII character, or the
    argument separator, switch prefix and value separator are not all
    different.

    Example:
        >>> CommandParser.builder("a b").set_switch_prefix(" ").build()
        Traceback (most recent call last):
        ...
        ConfigurationError: argument_separator, switch_prefix and value_separator must all be different
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class SwitchFormatError(CommandLineError, ValueError):
    """Raised when a switch token has a value separator but no name.

    Example:
        >>> CommandParser("-:value")
        Traceback (most recent call last):
        ...
        SwitchFormatError: Malformed switch: ':value'
    """

    def __init__(self, token: str):
        super().__init__(f"Malformed switch: {token!r}")
        self.token = token


class ArgumentLookupError(CommandLineError, LookupError):
    """Base exception for failed argument and switch lookups."""

    pass


class ArgumentIndexError(ArgumentLookupError, IndexError):
    """Raised when an argument index is outside [0, arg_count)."""

    def __init__(self, index: int, count: int):
        super().__init__(f"Argument index {index} out of range for {count} argument(s)")
        self.index = index
        self.count = count


class SwitchNotFoundError(ArgumentLookupError, KeyError):
    """Raised when the value of a switch that is not set is requested."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Switch is not set: {self.name}"
