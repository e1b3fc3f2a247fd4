"""Quote-aware splitting of command text into raw tokens.

The text is first split on every occurrence of the argument separator.
Fragments are then joined back together (separator re-inserted) while the
accumulated text holds an odd number of double quotes, so a separator inside
a quoted region does not end a token:

    >>> split_tokens('a "b c" d', " ")
    ['a', '"b c"', 'd']
    >>> split_tokens('x=1, y="2, 3"', ",")
    ['x=1', 'y="2, 3"']

Runs of spaces are collapsed when the separator is a space. With any other
separator, empty fragments become empty tokens:

    >>> split_tokens("a,,b", ",")
    ['a', '', 'b']
"""

from enum import Enum
from typing import List, Optional

from commandline.logging import get_module_logger
from commandline.parsing.models import QUOTE

logger = get_module_logger(__name__)


class SplitState(Enum):
    """Position of the splitter relative to quoted text."""

    OUTSIDE = "outside"
    INSIDE_QUOTES = "inside_quotes"


class QuoteAwareSplitter:
    """Two-state machine that turns naive fragments into raw tokens.

    In OUTSIDE the pending buffer is always empty. In INSIDE_QUOTES the
    pending buffer holds an odd number of double quotes.

    Example:
        splitter = QuoteAwareSplitter(" ")
        splitter.feed('"a')   # None, state is INSIDE_QUOTES
        splitter.feed('b"')   # '"a b"', state is OUTSIDE
    """

    def __init__(self, separator: str):
        self.separator = separator
        self.state = SplitState.OUTSIDE
        self._pending = ""
        self._odd_quotes = False

    @property
    def pending(self) -> str:
        return self._pending

    def feed(self, fragment: str) -> Optional[str]:
        """Consume the next fragment.

        Args:
            fragment: Text between two occurrences of the separator.

        Returns:
            The completed token (whitespace-trimmed), or None while a quoted
            region is still open or the fragment was discarded.
        """
        if self.state is SplitState.OUTSIDE:
            if not fragment and self.separator == " ":
                return None
            self._pending = fragment
        else:
            self._pending += self.separator + fragment

        if fragment.count(QUOTE) % 2:
            self._odd_quotes = not self._odd_quotes

        if self._odd_quotes:
            self.state = SplitState.INSIDE_QUOTES
            return None

        token = self._pending.strip()
        self._reset()
        return token

    def finish(self) -> Optional[str]:
        """Flush a quoted region left open at the end of the input.

        Returns:
            The untrimmed pending text, or None if nothing is pending.
        """
        if self.state is SplitState.OUTSIDE:
            return None
        remainder = self._pending
        logger.debug("unbalanced_quotes_at_end", remainder=remainder)
        self._reset()
        return remainder

    def _reset(self) -> None:
        self._pending = ""
        self._odd_quotes = False
        self.state = SplitState.OUTSIDE


def split_tokens(text: str, separator: str) -> List[str]:
    """Split text into raw tokens, keeping quoted separators in place.

    Args:
        text: Command text, already trimmed.
        separator: The argument separator character.

    Returns:
        Raw tokens in input order. Empty text gives no tokens.
    """
    if not text:
        return []

    splitter = QuoteAwareSplitter(separator)
    tokens: List[str] = []
    for fragment in text.split(separator):
        token = splitter.feed(fragment)
        if token is not None:
            tokens.append(token)

    remainder = splitter.finish()
    if remainder is not None:
        tokens.append(remainder)
    return tokens
