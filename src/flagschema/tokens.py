"""
Token and kind definitions shared by the schema compiler and the tokenizer.

Schema tokens select an ArgKind through their type suffix:
- (none) -> BOOL
- *      -> STRING
- #      -> NUMBER
- [*]    -> STRING_ARRAY
- [#]    -> NUMBER_ARRAY
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional, Tuple


class ArgKind(Enum):
    """The closed set of value holder kinds."""

    BOOL = auto()               # l
    STRING = auto()             # d*
    NUMBER = auto()             # p#
    STRING_ARRAY = auto()       # s[*]
    NUMBER_ARRAY = auto()       # n[#]

    @property
    def is_array(self) -> bool:
        return self in (ArgKind.STRING_ARRAY, ArgKind.NUMBER_ARRAY)


@dataclass(frozen=True)
class SourceSpan:
    """A half-open range of character offsets in a schema or input string."""
    start: int          # 0-indexed offset of first character
    end: int            # 0-indexed offset one past the last character

    @property
    def length(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


@dataclass(frozen=True)
class InputToken:
    """One dash-introduced segment of the input: a modifier and its values."""
    modifier: str
    values: Tuple[str, ...]
    span: SourceSpan

    def __str__(self) -> str:
        if self.values:
            return f"-{self.modifier} {' '.join(self.values)}"
        return f"-{self.modifier}"


# Suffix mapping - maps schema type suffix to holder kind
SUFFIX_KINDS: dict[str, ArgKind] = {
    "*": ArgKind.STRING,
    "#": ArgKind.NUMBER,
    "[*]": ArgKind.STRING_ARRAY,
    "[#]": ArgKind.NUMBER_ARRAY,
}

FLAG_PREFIX = "-"
SCHEMA_SEPARATOR = ","
ARRAY_SEPARATOR = ","


def kind_for_suffix(suffix: str) -> Optional[ArgKind]:
    """Look up the holder kind for a schema suffix, if it is supported."""
    return SUFFIX_KINDS.get(suffix)

