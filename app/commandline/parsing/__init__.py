"""Command line parsing.

Provides quote-aware splitting of free-form text into positional arguments
and named switches, with configurable separator, switch prefix and value
separator characters.
"""

from commandline.parsing.classifier import TokenClassifier, TokenKind, classify_tokens
from commandline.parsing.exceptions import (
    ArgumentIndexError,
    ArgumentLookupError,
    CommandLineError,
    ConfigurationError,
    SwitchFormatError,
    SwitchNotFoundError,
)
from commandline.parsing.models import SWITCH_PREFIX_NONE, ParserConfig, Switch
from commandline.parsing.parser import CommandParser, CommandParserBuilder
from commandline.parsing.tokenizer import QuoteAwareSplitter, SplitState, split_tokens

__all__ = [
    "SWITCH_PREFIX_NONE",
    "ParserConfig",
    "Switch",
    "CommandParser",
    "CommandParserBuilder",
    "TokenClassifier",
    "TokenKind",
    "classify_tokens",
    "QuoteAwareSplitter",
    "SplitState",
    "split_tokens",
    "CommandLineError",
    "ConfigurationError",
    "SwitchFormatError",
    "ArgumentLookupError",
    "ArgumentIndexError",
    "SwitchNotFoundError",
]
