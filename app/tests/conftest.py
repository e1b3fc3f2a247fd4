"""Shared fixtures for commandline tests."""

import pytest

from commandline.parsing import (
    SWITCH_PREFIX_NONE,
    CommandParser,
    ParserConfig,
)
from tests.fixtures import command_lines


@pytest.fixture
def parser_factory():
    """Factory for creating CommandParser instances from config fields.

    Returns:
        Callable taking the input string and ParserConfig keyword arguments
    """

    def _factory(input_string: str, **config):
        return CommandParser(input_string, ParserConfig(**config))

    return _factory


@pytest.fixture
def slash_parser(parser_factory):
    """Parser for the '/' prefixed command line, case-sensitive."""
    return parser_factory(
        command_lines.SLASH_SWITCHES, switch_prefix="/", case_sensitive=True
    )


@pytest.fixture
def stop_switches_parser(parser_factory):
    """Parser for the command line containing a '--' sentinel."""
    return parser_factory(command_lines.STOP_SWITCHES, case_sensitive=True)


@pytest.fixture
def comma_parser(parser_factory):
    """Parser for the comma separated command line without switch prefix."""
    return parser_factory(
        command_lines.COMMA_NO_PREFIX,
        argument_separator=",",
        switch_prefix=SWITCH_PREFIX_NONE,
        case_sensitive=True,
    )


@pytest.fixture
def name_value_parser(parser_factory):
    """Parser for the comma separated name=value command line."""
    return parser_factory(
        command_lines.NAME_VALUE_PAIRS,
        argument_separator=",",
        switch_prefix=SWITCH_PREFIX_NONE,
        value_separator="=",
        case_sensitive=True,
    )
