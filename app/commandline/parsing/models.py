"""Data models for command line parsing.

Provides:
- SWITCH_PREFIX_NONE: Sentinel disabling prefix-based switch detection
- ParserConfig: Validated, immutable parser configuration
- Switch: A named switch with an optional value
- Character and quote helpers shared by the tokenizer and classifier
"""

import string
from dataclasses import dataclass, field
from typing import Any, Optional

from commandline.parsing.exceptions import ConfigurationError, SwitchFormatError

SWITCH_PREFIX_NONE = None
"""Switch prefix meaning "no prefix": switches are recognised by shape."""

QUOTE = '"'

_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_ASCII_ALNUM = frozenset(string.ascii_letters + string.digits)


def is_printable_ascii(char: Any) -> bool:
    """Is char a single character in the range 32 <= ord(char) < 126?"""
    return isinstance(char, str) and len(char) == 1 and 32 <= ord(char) < 126


def is_ascii_alnum(char: str) -> bool:
    return char in _ASCII_ALNUM


def fold_case(text: str) -> str:
    """Lower-case ASCII letters only; other characters are left untouched."""
    return text.translate(_ASCII_FOLD)


def has_unbalanced_quotes(text: str) -> bool:
    """True when text contains an odd number of double quotes."""
    return text.count(QUOTE) % 2 == 1


def strip_quotes(text: str) -> str:
    """Remove one pair of double quotes surrounding the whole of text.

    Quotes elsewhere in the value are kept:

        >>> strip_quotes('"Wiggly woo"')
        'Wiggly woo'
        >>> strip_quotes('D:"My Folder"')
        'D:"My Folder"'
    """
    if len(text) >= 2 and text[0] == QUOTE and text[-1] == QUOTE:
        return text[1:-1]
    return text


def stays_one_token(text: str, separator: str) -> bool:
    """True when splitting text on separator keeps it in one quoted token.

    Every separator must fall inside quotes and the quotes must balance.
    """
    fragments = text.split(separator)
    quotes = 0
    for fragment in fragments[:-1]:
        quotes += fragment.count(QUOTE)
        if quotes % 2 == 0:
            return False
    return (quotes + fragments[-1].count(QUOTE)) % 2 == 0


def validate_structural_char(name: str, value: Any, allow_none: bool = False) -> None:
    """Raise ConfigurationError unless value is a printable ASCII character.

    Args:
        name: Field name, used in the error message.
        value: The character to check.
        allow_none: Whether SWITCH_PREFIX_NONE is acceptable.
    """
    if allow_none and value is SWITCH_PREFIX_NONE:
        return
    if not is_printable_ascii(value):
        suffix = " or SWITCH_PREFIX_NONE" if allow_none else ""
        raise ConfigurationError(
            f"{name} must be a printable ASCII character{suffix}, got {value!r}",
            field=name,
        )


@dataclass(frozen=True)
class ParserConfig:
    """Structural characters and matching rules for a parse.

    Attributes:
        argument_separator: Character separating elements. Defaults to space.
        switch_prefix: Character introducing a switch, or SWITCH_PREFIX_NONE.
            Defaults to hyphen.
        value_separator: Character separating a switch name from its value.
            Defaults to colon.
        case_sensitive: Whether switch name lookups are case-sensitive.
            Defaults to False.

    The three structural characters must be printable ASCII and pairwise
    different; ConfigurationError is raised otherwise.
    """

    argument_separator: str = " "
    switch_prefix: Optional[str] = "-"
    value_separator: str = ":"
    case_sensitive: bool = False

    def __post_init__(self):
        """Validate the configuration."""
        validate_structural_char("argument_separator", self.argument_separator)
        validate_structural_char(
            "switch_prefix", self.switch_prefix, allow_none=True
        )
        validate_structural_char("value_separator", self.value_separator)

        chars = [self.argument_separator, self.value_separator]
        if self.has_switch_prefix:
            chars.append(self.switch_prefix)
        if len(set(chars)) != len(chars):
            raise ConfigurationError(
                "argument_separator, switch_prefix and value_separator "
                "must all be different"
            )

    @property
    def has_switch_prefix(self) -> bool:
        return self.switch_prefix is not SWITCH_PREFIX_NONE

    @property
    def stop_switches_token(self) -> Optional[str]:
        """Token that ends switch processing, e.g. '--'. None without a prefix."""
        if not self.has_switch_prefix:
            return None
        return self.switch_prefix * 2

    @classmethod
    def from_settings(cls, parser_settings) -> "ParserConfig":
        """Build a configuration from ParserSettings.

        Args:
            parser_settings: A commandline.configuration.ParserSettings.

        Raises:
            ConfigurationError: If the configured characters collide.
        """
        return cls(
            argument_separator=parser_settings.argument_separator,
            switch_prefix=parser_settings.switch_prefix,
            value_separator=parser_settings.value_separator,
            case_sensitive=parser_settings.case_sensitive,
        )


@dataclass(frozen=True)
class Switch:
    """A switch found in the parsed text.

    Equality and hashing use (name, value) only.

    Attributes:
        name: Switch name, without prefix.
        value: Switch value with surrounding quotes removed; empty when the
            switch has no value.
        value_separator: Separator used to display the switch.
    """

    name: str
    value: str = ""
    value_separator: str = field(default=":", compare=False)

    @classmethod
    def from_token(cls, text: str, value_separator: str) -> "Switch":
        """Create a Switch from '<name>[<value_separator><value>]'.

        Args:
            text: Switch text with any prefix already removed.
            value_separator: Character separating name and value.

        Raises:
            SwitchFormatError: If text starts with the value separator.
        """
        name, sep, value = text.partition(value_separator)
        if sep and not name:
            raise SwitchFormatError(text)
        return cls(name=name, value=strip_quotes(value), value_separator=value_separator)

    def to_token(
        self,
        switch_prefix: Optional[str] = SWITCH_PREFIX_NONE,
        argument_separator: str = " ",
    ) -> str:
        """Render the switch as a token that parses back to an equal Switch.

        The value is written as-is when that survives splitting and quote
        stripping, and wrapped in quotes otherwise:

            >>> Switch("C", "Wiggly woo").to_token("/")
            '/C:"Wiggly woo"'
            >>> Switch("D", 'D:"\\My Folder"').to_token("/")
            '/D:D:"\\My Folder"'

        Raises:
            ValueError: If no quoting of the value stays a single token,
                e.g. a value with an odd number of quotes.
        """
        value = self.value
        if (
            value == value.strip()
            and strip_quotes(value) == value
            and stays_one_token(value, argument_separator)
        ):
            rendered = value
        elif stays_one_token(QUOTE + value + QUOTE, argument_separator):
            rendered = QUOTE + value + QUOTE
        else:
            raise ValueError(
                f"Switch value {value!r} cannot be written as a single "
                f"token for separator {argument_separator!r}"
            )
        return f"{switch_prefix or ''}{self.name}{self.value_separator}{rendered}"

    def __str__(self) -> str:
        return f"{self.name}{self.value_separator}{self.value}"
