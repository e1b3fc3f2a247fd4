"""Unit tests for CommandParserBuilder."""

import pytest

from commandline.parsing import (
    SWITCH_PREFIX_NONE,
    CommandParser,
    CommandParserBuilder,
    ConfigurationError,
    ParserConfig,
    Switch,
)
from tests.fixtures import command_lines


@pytest.mark.unit
class TestBuilderSetters:
    """Tests for the chained setters."""

    def test_builder_from_parser(self):
        assert isinstance(CommandParser.builder("a"), CommandParserBuilder)

    def test_defaults(self):
        assert CommandParserBuilder("a").build_config() == ParserConfig()

    def test_setters_chain(self):
        builder = CommandParserBuilder("a")
        assert builder.set_argument_separator(",") is builder
        assert builder.set_switch_prefix("/") is builder
        assert builder.set_value_separator("=") is builder
        assert builder.set_case_sensitive(True) is builder

    def test_setters_applied(self):
        config = (
            CommandParserBuilder("a")
            .set_argument_separator(",")
            .set_switch_prefix(SWITCH_PREFIX_NONE)
            .set_value_separator("=")
            .set_case_sensitive(True)
            .build_config()
        )
        assert config == ParserConfig(",", None, "=", True)

    @pytest.mark.parametrize("value", ["\t", "~", "ab", "", "é"])
    def test_argument_separator_rejected_immediately(self, value):
        with pytest.raises(ConfigurationError):
            CommandParserBuilder("a").set_argument_separator(value)

    @pytest.mark.parametrize("value", ["\x00", "~", "--"])
    def test_switch_prefix_rejected_immediately(self, value):
        with pytest.raises(ConfigurationError):
            CommandParserBuilder("a").set_switch_prefix(value)

    def test_switch_prefix_accepts_none(self):
        builder = CommandParserBuilder("a").set_switch_prefix(SWITCH_PREFIX_NONE)
        assert builder.build_config().switch_prefix is None

    @pytest.mark.parametrize("value", ["\r", "~", "::"])
    def test_value_separator_rejected_immediately(self, value):
        with pytest.raises(ConfigurationError):
            CommandParserBuilder("a").set_value_separator(value)


@pytest.mark.unit
class TestBuilderBuild:
    """Tests for build-time validation and the resulting parser."""

    def test_separator_equal_to_prefix(self):
        builder = CommandParserBuilder("a b").set_argument_separator("-")
        with pytest.raises(ConfigurationError, match="must all be different"):
            builder.build()

    def test_prefix_equal_to_value_separator(self):
        builder = CommandParserBuilder("a b").set_switch_prefix(":")
        with pytest.raises(ConfigurationError):
            builder.build()

    def test_conflict_resolved_before_build(self):
        parser = (
            CommandParserBuilder("a-b")
            .set_argument_separator("-")
            .set_switch_prefix("/")
            .build()
        )
        assert parser.args == ("a", "b")

    def test_build_parses_input(self):
        parser = (
            CommandParser.builder(command_lines.NAME_VALUE_PAIRS)
            .set_argument_separator(",")
            .set_switch_prefix(SWITCH_PREFIX_NONE)
            .set_value_separator("=")
            .set_case_sensitive(True)
            .build()
        )
        assert parser.switches[1] == Switch("age", "41")
        assert parser.config.case_sensitive is True
