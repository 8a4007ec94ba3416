"""
Unit tests for the flag input tokenizer.
"""

import pytest
from flagschema import tokenize, Tokenizer, InputToken, SourceSpan


def pairs(source):
    return [(t.modifier, list(t.values)) for t in tokenize(source)]


class TestTokenizerBasics:
    """Test basic tokenizer functionality."""

    def test_empty_input(self):
        """Empty input produces no tokens."""
        assert tokenize("") == []

    def test_whitespace_only(self):
        """Whitespace-only input produces no tokens."""
        assert tokenize("   \t  ") == []

    def test_worked_example(self):
        """Flags with and without values."""
        assert pairs("-d /var/logs -p 8080 -l") == [
            ("d", ["/var/logs"]),
            ("p", ["8080"]),
            ("l", []),
        ]

    def test_multiple_values(self):
        """All words up to the next flag are values."""
        assert pairs("-s this is an array") == [("s", ["this", "is", "an", "array"])]

    def test_repeated_spaces(self):
        """Runs of whitespace never produce empty values."""
        assert pairs("-d   a    b  ") == [("d", ["a", "b"])]

    def test_tabs_and_newlines(self):
        """Any whitespace separates words."""
        assert pairs("-d\ta\n-l") == [("d", ["a"]), ("l", [])]

    def test_values_are_tuples(self):
        """Token values are immutable."""
        token = tokenize("-d x")[0]
        assert isinstance(token.values, tuple)


class TestSegments:
    """Test how dash-delimited segments are formed."""

    def test_leading_text_ignored(self):
        """Words before the first flag are dropped."""
        assert pairs("stray words -d x") == [("d", ["x"])]

    def test_no_flags_at_all(self):
        """Input without any dash produces no tokens."""
        assert pairs("just some words") == []

    def test_lone_dash_produces_nothing(self):
        """A dash with nothing after it yields no token."""
        assert pairs("-") == []
        assert pairs("- -l") == [("l", [])]

    def test_lone_dash_followed_by_words(self):
        """Words after a lone dash form the segment."""
        assert pairs("- foo bar") == [("foo", ["bar"])]

    def test_repeated_dashes_collapse(self):
        """Consecutive dashes act as one delimiter."""
        assert pairs("--x 1") == [("x", ["1"])]

    def test_dash_inside_word(self):
        """A dash inside a word does not start a flag."""
        assert pairs("-d /var/log-old 2024-01-01") == [("d", ["/var/log-old", "2024-01-01"])]

    def test_multichar_modifier_kept(self):
        """The tokenizer does not enforce one-character modifiers."""
        assert pairs("-dx foo") == [("dx", ["foo"])]

    def test_negative_number_is_a_flag(self):
        """A dash-prefixed number starts a new segment."""
        assert pairs("-p -5") == [("p", []), ("5", [])]


class TestSpans:
    """Test token span tracking."""

    def test_spans_cover_segments(self):
        """Spans run from the dash to the end of the last value."""
        source = "-d /var/logs -p 8080 -l"
        tokens = tokenize(source)
        assert tokens[0].span == SourceSpan(0, 12)
        assert tokens[1].span == SourceSpan(13, 20)
        assert tokens[2].span == SourceSpan(21, 23)
        assert source[tokens[1].span.start:tokens[1].span.end] == "-p 8080"

    def test_span_ignores_trailing_space(self):
        """Trailing whitespace is not part of the span."""
        token = tokenize("-l   ")[0]
        assert token.span == SourceSpan(0, 2)

    def test_token_str(self):
        """Tokens render back as input text."""
        assert str(tokenize("-d a  b")[0]) == "-d a b"
        assert str(InputToken("l", (), SourceSpan(0, 2))) == "-l"


class TestStreaming:
    """Test lazy iteration behavior."""

    def test_iteration_restarts(self):
        """Iterating twice yields the same tokens."""
        tokenizer = Tokenizer("-a 1 -b 2")
        assert list(tokenizer) == list(tokenizer)

    def test_lazy_pull(self):
        """Tokens are produced one per pull."""
        it = iter(Tokenizer("-a 1 -b 2"))
        assert next(it).modifier == "a"
        assert next(it).modifier == "b"

    def test_exhausted_iterator(self):
        """An exhausted iterator keeps signalling the end."""
        it = iter(Tokenizer("-a"))
        next(it)
        with pytest.raises(StopIteration):
            next(it)
        assert next(it, None) is None

    def test_tokenize_method(self):
        """Tokenizer.tokenize matches the convenience function."""
        assert Tokenizer("-a 1").tokenize() == tokenize("-a 1")
