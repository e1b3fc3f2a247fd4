"""Unit tests for quote-aware splitting.

Tests cover:
- Space collapsing versus empty tokens for other separators
- Separators inside quoted regions spanning several fragments
- Unbalanced quotes running to the end of the input
- The splitter state machine
"""

import pytest

from commandline.parsing.tokenizer import QuoteAwareSplitter, SplitState, split_tokens


@pytest.mark.unit
class TestSplitTokens:
    """Tests for split_tokens()."""

    def test_plain_words(self):
        assert split_tokens("a b c", " ") == ["a", "b", "c"]

    def test_empty_text(self):
        assert split_tokens("", " ") == []
        assert split_tokens("", ",") == []

    def test_consecutive_spaces_collapse(self):
        assert split_tokens("a   b", " ") == ["a", "b"]

    def test_consecutive_commas_give_empty_token(self):
        assert split_tokens("a,,b", ",") == ["a", "", "b"]

    def test_leading_and_trailing_separator(self):
        assert split_tokens(",a,", ",") == ["", "a", ""]

    def test_tokens_are_trimmed(self):
        assert split_tokens(" a ,  b ", ",") == ["a", "b"]

    def test_quoted_space_kept(self):
        assert split_tokens('x "a b c" y', " ") == ["x", '"a b c"', "y"]

    def test_quoted_spaces_runs_preserved(self):
        assert split_tokens('"a   b"', " ") == ['"a   b"']

    def test_quoted_comma_kept(self):
        text = 'address="123 Railway Cuttings, Camberwick Green",x=1'
        assert split_tokens(text, ",") == [
            'address="123 Railway Cuttings, Camberwick Green"',
            "x=1",
        ]

    def test_quote_mid_token(self):
        assert split_tokens('/C:"Wiggly woo" z', " ") == ['/C:"Wiggly woo"', "z"]

    def test_doubled_quotes_do_not_close_region(self):
        assert split_tokens('"say ""hi"" now" x', " ") == ['"say ""hi"" now"', "x"]

    def test_balanced_token_not_merged(self):
        assert split_tokens('"a" "b"', " ") == ['"a"', '"b"']

    def test_unbalanced_remainder_is_not_trimmed(self):
        assert split_tokens('a "b c ', " ") == ["a", '"b c ']

    def test_only_last_token_may_be_unbalanced(self):
        tokens = split_tokens('a "b c" d "e f', " ")
        assert [t.count('"') % 2 for t in tokens] == [0, 0, 0, 1]


@pytest.mark.unit
class TestQuoteAwareSplitter:
    """Tests for the splitter state machine."""

    def test_starts_outside(self):
        splitter = QuoteAwareSplitter(" ")
        assert splitter.state is SplitState.OUTSIDE
        assert splitter.pending == ""

    def test_open_quote_moves_inside(self):
        splitter = QuoteAwareSplitter(" ")
        assert splitter.feed('"a') is None
        assert splitter.state is SplitState.INSIDE_QUOTES
        assert splitter.pending == '"a'

    def test_closing_quote_emits_token(self):
        splitter = QuoteAwareSplitter(" ")
        splitter.feed('"a')
        assert splitter.feed("b") is None
        assert splitter.feed('c"') == '"a b c"'
        assert splitter.state is SplitState.OUTSIDE
        assert splitter.pending == ""

    def test_empty_fragment_inside_quotes_is_kept(self):
        splitter = QuoteAwareSplitter(" ")
        splitter.feed('"a')
        splitter.feed("")
        assert splitter.feed('b"') == '"a  b"'

    def test_empty_fragment_outside_discarded_for_space(self):
        splitter = QuoteAwareSplitter(" ")
        assert splitter.feed("") is None
        assert splitter.state is SplitState.OUTSIDE

    def test_empty_fragment_outside_emitted_for_comma(self):
        splitter = QuoteAwareSplitter(",")
        assert splitter.feed("") == ""

    def test_finish_outside_returns_none(self):
        splitter = QuoteAwareSplitter(" ")
        splitter.feed("a")
        assert splitter.finish() is None

    def test_finish_inside_returns_remainder(self):
        splitter = QuoteAwareSplitter(",")
        splitter.feed(' "a')
        assert splitter.finish() == ' "a'
        assert splitter.state is SplitState.OUTSIDE
