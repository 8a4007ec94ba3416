"""
Tokenizer for flag input lines.

Converts an input such as "-d /var/logs -p 8080 -l" into a stream of
InputTokens:
- A whitespace-separated word starting with '-' opens a new segment
- The first word of a segment (after the dashes) is its modifier
- The remaining words up to the next dash word are its values
- Words before the first dash word are ignored
- A segment with no words ("-" alone) produces no token
"""

import re
from typing import Iterator, List, Optional

from .tokens import InputToken, SourceSpan, FLAG_PREFIX


_WORD_RE = re.compile(r"\S+")


class Tokenizer:
    """
    Lazy tokenizer over one input string.

    Usage:
        tokens = Tokenizer(line).tokenize()

    Or for streaming:
        for token in Tokenizer(line):
            process(token)

    Each iteration starts again from the beginning of the input.
    """

    def __init__(self, source: str):
        self.source = source

    def _make_token(self, words: List[str], start: int, end: int) -> Optional[InputToken]:
        if not words:
            return None
        return InputToken(words[0], tuple(words[1:]), SourceSpan(start, end))

    def __iter__(self) -> Iterator[InputToken]:
        """Iterate over tokens."""
        words: List[str] = []
        in_segment = False
        start = end = 0

        for match in _WORD_RE.finditer(self.source):
            word = match.group()
            if word.startswith(FLAG_PREFIX):
                token = self._make_token(words, start, end)
                if token is not None:
                    yield token
                # Repeated dashes collapse, so "--x" names "x"
                name = word.lstrip(FLAG_PREFIX)
                words = [name] if name else []
                in_segment = True
                start, end = match.start(), match.end()
            elif in_segment:
                words.append(word)
                end = match.end()

        token = self._make_token(words, start, end)
        if token is not None:
            yield token

    def tokenize(self) -> List[InputToken]:
        """Tokenize the entire input, returning a list of tokens."""
        return list(self)


def tokenize(source: str) -> List[InputToken]:
    """
    Convenience function to tokenize an input line.

    Args:
        source: The raw input, e.g. "-d /var/logs -p 8080"

    Returns:
        List of tokens
    """
    return Tokenizer(source).tokenize()
