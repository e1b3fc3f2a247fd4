"""Parser default settings."""

from typing import Any, Optional

from pydantic import Field, field_validator

from commandline.configuration.base import ParserSettingsBase
from commandline.parsing.models import is_printable_ascii

# Values of COMMANDLINE_SWITCH_PREFIX that mean "no switch prefix"
_NO_PREFIX_VALUES = frozenset({"", "none", "null"})


def _validate_structural_char(value: Any, env_name: str) -> str:
    if not is_printable_ascii(value):
        raise ValueError(
            f"{env_name} must be a single printable ASCII character, got {value!r}"
        )
    return value


class ParserSettings(ParserSettingsBase):
    """Default structural characters for command line parsing.

    Environment Variables:
        COMMANDLINE_ARGUMENT_SEPARATOR: Separator between elements (default: space)
        COMMANDLINE_SWITCH_PREFIX: Switch prefix character (default: '-').
            An empty value or 'none' disables prefix-based switch detection.
        COMMANDLINE_VALUE_SEPARATOR: Separator between switch name and value
            (default: ':')
        COMMANDLINE_CASE_SENSITIVE: Whether switch names are case-sensitive
            (default: False)

    Only single-character checks happen here. The pairwise distinctness of
    the three characters is checked when a ParserConfig is built from these
    settings.

    Example:
        ```python
        from commandline.configuration import settings

        separator = settings.parser.argument_separator
        ```
    """

    argument_separator: str = Field(
        default=" ",
        alias="COMMANDLINE_ARGUMENT_SEPARATOR",
        description="Character separating arguments and switches",
    )
    switch_prefix: Optional[str] = Field(
        default="-",
        alias="COMMANDLINE_SWITCH_PREFIX",
        description="Character introducing a switch, or None for no prefix",
    )
    value_separator: str = Field(
        default=":",
        alias="COMMANDLINE_VALUE_SEPARATOR",
        description="Character separating a switch name from its value",
    )
    case_sensitive: bool = Field(
        default=False,
        alias="COMMANDLINE_CASE_SENSITIVE",
        description="Whether switch name lookups are case-sensitive",
    )

    @field_validator("argument_separator", mode="before")
    @classmethod
    def _check_argument_separator(cls, v: Any) -> str:
        return _validate_structural_char(v, "COMMANDLINE_ARGUMENT_SEPARATOR")

    @field_validator("value_separator", mode="before")
    @classmethod
    def _check_value_separator(cls, v: Any) -> str:
        return _validate_structural_char(v, "COMMANDLINE_VALUE_SEPARATOR")

    @field_validator("switch_prefix", mode="before")
    @classmethod
    def _parse_switch_prefix(cls, v: Any) -> Optional[str]:
        """Map the no-prefix spellings to None."""
        if v is None:
            return None
        if isinstance(v, str) and v.lower() in _NO_PREFIX_VALUES:
            return None
        return _validate_structural_char(v, "COMMANDLINE_SWITCH_PREFIX")
