"""
Typed value holders bound to flags.

An ArgValue pairs an ArgKind with the data bound so far. Holders start empty
(see the `*_arg` constructors), are fed input words through `set`, and are
read back through the canonical string `get` or the derived `as_*` accessors.
"""

import re
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from .tokens import ArgKind, ARRAY_SEPARATOR
from .errors import error_number_format


_INT_RE = re.compile(r"[+-]?[0-9]+")

INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


def parse_int(text: Optional[str]) -> Optional[int]:
    """Parse a signed decimal integer, or return None.

    Stricter than int(): no surrounding whitespace, no underscores, and the
    value must fit in a 64-bit signed integer.
    """
    if text is None or not _INT_RE.fullmatch(text):
        return None
    number = int(text)
    if not INT_MIN <= number <= INT_MAX:
        return None
    return number


def parse_bool(text: Optional[str]) -> Optional[bool]:
    """Parse exactly 'true' or 'false', or return None."""
    if text == "true":
        return True
    if text == "false":
        return False
    return None


@dataclass
class ArgValue:
    """
    A flag's value holder.

    `data` holds a bool for BOOL, an optional str/int for STRING/NUMBER, and
    a list for the array kinds.
    """
    kind: ArgKind
    data: Any = None

    def __post_init__(self):
        if self.kind.is_array and self.data is None:
            self.data = []
        elif self.kind == ArgKind.BOOL and self.data is None:
            self.data = False

    def __repr__(self) -> str:
        return f"ArgValue({self.kind.name}, {self.get()!r})"

    # --- Binding ---

    def set(self, values: Sequence[str]) -> None:
        """
        Bind input words to this holder.

        Scalars are replaced, arrays are appended to. Raises NumberFormatError
        when a NUMBER holder gets text that is not an integer; the prior value
        is kept in that case.
        """
        joined = "".join(values)

        if self.kind == ArgKind.BOOL:
            self.data = not values or joined.lower() == "true"
        elif self.kind == ArgKind.STRING:
            self.data = joined
        elif self.kind == ArgKind.NUMBER:
            number = parse_int(joined)
            if number is None:
                raise error_number_format(joined)
            self.data = number
        elif self.kind == ArgKind.STRING_ARRAY:
            self.data.extend(values)
        elif self.kind == ArgKind.NUMBER_ARRAY:
            # Unparsable words are dropped, not reported
            for word in values:
                number = parse_int(word)
                if number is not None:
                    self.data.append(number)

    # --- Reading ---

    def get(self) -> Optional[str]:
        """The canonical string form of the bound value."""
        if self.kind == ArgKind.BOOL:
            return "true" if self.data else "false"
        if self.kind.is_array:
            return ARRAY_SEPARATOR.join(str(item) for item in self.data)
        if self.data is None:
            return None
        return str(self.data)

    def as_bool(self) -> Optional[bool]:
        return parse_bool(self.get())

    def as_number(self) -> Optional[int]:
        return parse_int(self.get())

    def as_str_array(self) -> List[str]:
        """Split the canonical string on ','. Empty or absent gives []."""
        text = self.get()
        if not text:
            return []
        return text.split(ARRAY_SEPARATOR)

    def as_num_array(self) -> List[int]:
        """Like as_str_array, keeping only the parts that are integers."""
        numbers = (parse_int(part) for part in self.as_str_array())
        return [n for n in numbers if n is not None]

    @property
    def is_set(self) -> bool:
        """Whether the holder holds a non-default value."""
        if self.kind == ArgKind.BOOL:
            return bool(self.data)
        if self.kind.is_array:
            return len(self.data) > 0
        return self.data is not None


# Convenience constructors for empty holders

def bool_arg() -> ArgValue:
    """Create a boolean holder, default false."""
    return ArgValue(ArgKind.BOOL)


def string_arg() -> ArgValue:
    """Create a string holder, default absent."""
    return ArgValue(ArgKind.STRING)


def number_arg() -> ArgValue:
    """Create a number holder, default absent."""
    return ArgValue(ArgKind.NUMBER)


def string_array_arg() -> ArgValue:
    """Create a string array holder, default empty."""
    return ArgValue(ArgKind.STRING_ARRAY)


def number_array_arg() -> ArgValue:
    """Create a number array holder, default empty."""
    return ArgValue(ArgKind.NUMBER_ARRAY)


def new_arg(kind: ArgKind) -> ArgValue:
    """Create an empty holder of the given kind."""
    return ArgValue(kind)
