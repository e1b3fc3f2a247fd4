"""Command line parser and its builder.

Format of the parsed text:

    [<argument> | <switch>] [<separator>... (<argument> | <switch>)]...

Switches look like:

    [<prefix>]<name>[<value-separator><value>]
    <prefix><prefix>        (all following elements are arguments)

Arguments and switch values containing the separator must be enclosed in
double quotes. With no prefix configured, an element shaped like
<name><value-separator><value> is a switch.

Example:
    parser = (
        CommandParser.builder('build "My Project" -out:bin -v')
        .set_case_sensitive(True)
        .build()
    )
    parser.args                 # ('build', 'My Project')
    parser.switch_value("out")  # 'bin'
    parser.is_switch_set("v")   # True
"""

from typing import Optional, Tuple

from commandline.configuration import settings as default_settings
from commandline.logging import bind_parse_context, get_module_logger
from commandline.parsing.classifier import classify_tokens
from commandline.parsing.exceptions import (
    ArgumentIndexError,
    ConfigurationError,
    SwitchNotFoundError,
)
from commandline.parsing.models import (
    ParserConfig,
    Switch,
    fold_case,
    validate_structural_char,
)
from commandline.parsing.tokenizer import split_tokens

logger = get_module_logger(__name__)


class CommandParser:
    """Arguments and switches found in a piece of text.

    The text is parsed once, when the parser is created. Afterwards the
    parser is read-only and may be shared between threads.

    Args:
        input_string: Text to parse. Leading and trailing whitespace is
            ignored.
        config: Parser configuration. Defaults to ParserConfig().

    Raises:
        SwitchFormatError: If a switch has a value separator but no name.
    """

    def __init__(self, input_string: str, config: Optional[ParserConfig] = None):
        self._config = config if config is not None else ParserConfig()
        self._input_string = input_string.strip()

        with bind_parse_context():
            tokens = split_tokens(self._input_string, self._config.argument_separator)
            args, switches = classify_tokens(tokens, self._config)
            logger.debug(
                "command_line_parsed",
                input_string=self._input_string,
                token_count=len(tokens),
                arg_count=len(args),
                switch_count=len(switches),
            )

        self._args: Tuple[str, ...] = tuple(args)
        self._switches: Tuple[Switch, ...] = tuple(switches)

    @staticmethod
    def builder(input_string: str) -> "CommandParserBuilder":
        """Return a builder for parsing input_string."""
        return CommandParserBuilder(input_string)

    @classmethod
    def from_settings(cls, input_string: str, settings=None) -> "CommandParser":
        """Parse input_string with the characters from the environment.

        Args:
            input_string: Text to parse.
            settings: Settings to use. Defaults to the settings singleton.

        Raises:
            ConfigurationError: If the configured characters collide.
        """
        settings = settings if settings is not None else default_settings
        return cls(input_string, ParserConfig.from_settings(settings.parser))

    @property
    def input_string(self) -> str:
        return self._input_string

    @property
    def config(self) -> ParserConfig:
        return self._config

    @property
    def args(self) -> Tuple[str, ...]:
        """All arguments, in input order."""
        return self._args

    @property
    def switches(self) -> Tuple[Switch, ...]:
        """All switches, in input order."""
        return self._switches

    @property
    def arg_count(self) -> int:
        return len(self._args)

    @property
    def switch_count(self) -> int:
        return len(self._switches)

    def get_arg(self, index: int) -> str:
        """Get the argument at index.

        Raises:
            ArgumentIndexError: If index is not in [0, arg_count).
        """
        if not 0 <= index < len(self._args):
            logger.warning(
                "argument_index_out_of_range", index=index, arg_count=len(self._args)
            )
            raise ArgumentIndexError(index, len(self._args))
        return self._args[index]

    def switch_index(self, name: str) -> int:
        """Index of the first switch called name, or -1 if it is not set."""
        if self._config.case_sensitive:
            for index, switch in enumerate(self._switches):
                if switch.name == name:
                    return index
        else:
            folded = fold_case(name)
            for index, switch in enumerate(self._switches):
                if fold_case(switch.name) == folded:
                    return index
        return -1

    def is_switch_set(self, name: str) -> bool:
        return self.switch_index(name) != -1

    def get_switch(self, name: str) -> Optional[Switch]:
        """First switch called name, or None."""
        index = self.switch_index(name)
        return self._switches[index] if index != -1 else None

    def switch_value(self, name: str) -> str:
        """Value of the first switch called name.

        An empty string means the switch is set without a value.

        Raises:
            SwitchNotFoundError: If the switch is not set.
        """
        index = self.switch_index(name)
        if index == -1:
            logger.warning("switch_value_not_found", switch_name=name)
            raise SwitchNotFoundError(name)
        return self._switches[index].value

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._input_string!r}, "
            f"args={len(self._args)}, switches={len(self._switches)})"
        )


class CommandParserBuilder:
    """Collects parser settings and creates a CommandParser.

    Each setter checks its own character immediately and returns the
    builder. The check that the three characters differ happens in build().

    Defaults: space separator, '-' prefix, ':' value separator,
    case-insensitive switch names.

    Example:
        parser = (
            CommandParserBuilder("name=Jane, age=41")
            .set_argument_separator(",")
            .set_switch_prefix(SWITCH_PREFIX_NONE)
            .set_value_separator("=")
            .build()
        )
    """

    def __init__(self, input_string: str):
        self._input_string = input_string
        self._argument_separator = " "
        self._switch_prefix: Optional[str] = "-"
        self._value_separator = ":"
        self._case_sensitive = False

    def set_argument_separator(self, argument_separator: str) -> "CommandParserBuilder":
        validate_structural_char("argument_separator", argument_separator)
        self._argument_separator = argument_separator
        return self

    def set_switch_prefix(self, switch_prefix: Optional[str]) -> "CommandParserBuilder":
        """Set the switch prefix; SWITCH_PREFIX_NONE disables it."""
        validate_structural_char("switch_prefix", switch_prefix, allow_none=True)
        self._switch_prefix = switch_prefix
        return self

    def set_value_separator(self, value_separator: str) -> "CommandParserBuilder":
        validate_structural_char("value_separator", value_separator)
        self._value_separator = value_separator
        return self

    def set_case_sensitive(self, case_sensitive: bool) -> "CommandParserBuilder":
        self._case_sensitive = bool(case_sensitive)
        return self

    def build_config(self) -> ParserConfig:
        """Validate the collected settings.

        Raises:
            ConfigurationError: If the structural characters are not all
                different.
        """
        try:
            return ParserConfig(
                argument_separator=self._argument_separator,
                switch_prefix=self._switch_prefix,
                value_separator=self._value_separator,
                case_sensitive=self._case_sensitive,
            )
        except ConfigurationError as e:
            logger.warning("invalid_parser_configuration", error=str(e))
            raise

    def build(self) -> CommandParser:
        return CommandParser(self._input_string, self.build_config())
