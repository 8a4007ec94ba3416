"""
Options controlling schema compilation and binding.
"""

from dataclasses import dataclass

DUPLICATE_ERROR = "error"
DUPLICATE_LAST = "last"

DUPLICATE_POLICIES = (DUPLICATE_ERROR, DUPLICATE_LAST)


@dataclass(frozen=True)
class ParseOptions:
    """
    Immutable parse settings, safe to share between calls.

    duplicate_flags:
        "error" rejects a schema that declares a flag twice (E001).
        "last" lets the later declaration replace the earlier one.
    """
    duplicate_flags: str = DUPLICATE_ERROR

    def __post_init__(self):
        if self.duplicate_flags not in DUPLICATE_POLICIES:
            raise ValueError(
                f"duplicate_flags must be one of {DUPLICATE_POLICIES}, "
                f"got {self.duplicate_flags!r}"
            )


DEFAULT_OPTIONS = ParseOptions()
