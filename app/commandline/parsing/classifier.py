"""Classification of raw tokens into arguments and switches."""

from enum import Enum
from typing import Iterable, List, Tuple, Union

from commandline.logging import get_module_logger
from commandline.parsing.exceptions import SwitchFormatError
from commandline.parsing.models import (
    ParserConfig,
    Switch,
    is_ascii_alnum,
    strip_quotes,
)

logger = get_module_logger(__name__)


class TokenKind(Enum):
    """What a raw token turned out to be."""

    ARGUMENT = "argument"
    SWITCH = "switch"
    STOP_SWITCHES = "stop_switches"


class TokenClassifier:
    """Decide, token by token, between argument, switch and the stop sentinel.

    Rules, first match wins:

    1. The token is two prefix characters (e.g. '--') and switches are still
       being processed: every later token is an argument. Nothing is emitted.
    2. Switch processing has stopped: argument.
    3. No prefix configured, token longer than 2, first character an ASCII
       letter or digit, value separator present: switch.
    4. Prefix configured, token starts with it and is longer than 1: switch
       built from the token minus the prefix.
    5. Anything else: argument.

    Arguments have one pair of surrounding double quotes removed.
    """

    def __init__(self, config: ParserConfig):
        self.config = config
        self.stop_switches = False

    def classify(self, token: str) -> Tuple[TokenKind, Union[str, Switch, None]]:
        """Classify one raw token.

        Args:
            token: A raw token produced by the tokenizer.

        Returns:
            (kind, item): item is the argument string, the Switch, or None
            for the stop sentinel.

        Raises:
            SwitchFormatError: If a switch token has no name before its
                value separator.
        """
        config = self.config

        if not self.stop_switches and token == config.stop_switches_token:
            self.stop_switches = True
            logger.debug("stop_switches_sentinel", token=token)
            return TokenKind.STOP_SWITCHES, None

        if self.stop_switches:
            return TokenKind.ARGUMENT, strip_quotes(token)

        if not config.has_switch_prefix:
            if (
                len(token) > 2
                and is_ascii_alnum(token[0])
                and config.value_separator in token
            ):
                return TokenKind.SWITCH, self._make_switch(token)
        elif token.startswith(config.switch_prefix) and len(token) > 1:
            return TokenKind.SWITCH, self._make_switch(token[1:])

        return TokenKind.ARGUMENT, strip_quotes(token)

    def _make_switch(self, text: str) -> Switch:
        try:
            return Switch.from_token(text, self.config.value_separator)
        except SwitchFormatError as e:
            logger.warning("malformed_switch", token=text, error=str(e))
            raise


def classify_tokens(
    tokens: Iterable[str], config: ParserConfig
) -> Tuple[List[str], List[Switch]]:
    """Route raw tokens into the argument and switch sequences.

    Args:
        tokens: Raw tokens in input order.
        config: Parser configuration.

    Returns:
        Tuple of (arguments, switches), each in input order.
    """
    classifier = TokenClassifier(config)
    args: List[str] = []
    switches: List[Switch] = []

    for token in tokens:
        kind, item = classifier.classify(token)
        if kind is TokenKind.ARGUMENT:
            args.append(item)
        elif kind is TokenKind.SWITCH:
            switches.append(item)

    return args, switches
