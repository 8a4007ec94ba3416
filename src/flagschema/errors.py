"""
Parse errors and diagnostics.

Error code ranges:
- E0xx: Schema errors
- E1xx: Input/binding errors
- E2xx: Coercion errors
"""

from dataclasses import dataclass, field
from typing import Optional, List
from .tokens import SourceSpan, SUFFIX_KINDS


@dataclass
class Diagnostic:
    """A single error report with enough context to point at the culprit."""
    code: str                       # E001, E101, etc.
    message: str                    # Human-readable message
    span: Optional[SourceSpan] = None
    source: Optional[str] = None    # The schema or input the span refers to
    hints: List[str] = field(default_factory=list)

    def format(self, show_source: bool = True) -> str:
        """Format the diagnostic for display."""
        parts = [f"error[{self.code}]: {self.message}"]

        # Source excerpt with caret
        if show_source and self.source is not None and self.span is not None:
            parts.append(f"  | {self.source}")
            underline_len = max(1, self.span.length)
            parts.append(f"  | {' ' * self.span.start}{'^' * underline_len}")

        for hint in self.hints:
            parts.append(f"  = hint: {hint}")

        return "\n".join(parts)

    def to_json(self) -> dict:
        """Convert to JSON-serializable dict for tooling integration."""
        return {
            "code": self.code,
            "message": self.message,
            "range": None if self.span is None else {
                "start": self.span.start,
                "end": self.span.end,
            },
            "hints": self.hints,
        }


class ParseError(Exception):
    """Base exception for every schema and binding failure."""

    def __init__(self, diagnostic: Diagnostic):
        self.diagnostic = diagnostic
        super().__init__(diagnostic.message)

    @property
    def code(self) -> str:
        return self.diagnostic.code

    def __str__(self) -> str:
        return self.diagnostic.format()


class InvalidSchemaError(ParseError):
    """Schema token is empty or redeclares a flag (E001)."""
    pass


class UnsupportedArgTypeError(ParseError):
    """Schema token carries an unknown type suffix (E002)."""

    def __init__(self, diagnostic: Diagnostic, suffix: str):
        self.suffix = suffix
        super().__init__(diagnostic)


class UnknownArgError(ParseError):
    """Input names a flag the schema does not declare (E101)."""

    def __init__(self, diagnostic: Diagnostic, flag: str):
        self.flag = flag
        super().__init__(diagnostic)


class NumberFormatError(ParseError):
    """Number flag received text that is not a signed integer (E201)."""

    def __init__(self, diagnostic: Diagnostic, text: str):
        self.text = text
        super().__init__(diagnostic)


# --- Schema error codes ---

def error_invalid_schema(span: SourceSpan = None, source: str = None) -> InvalidSchemaError:
    """E001: Empty schema token."""
    diag = Diagnostic(
        code="E001",
        message="invalid schema: empty flag declaration",
        span=span,
        source=source,
        hints=["declare flags as a comma-separated list, e.g. 'l,p#,d*'"],
    )
    return InvalidSchemaError(diag)


def error_duplicate_flag(flag: str, span: SourceSpan = None, source: str = None) -> InvalidSchemaError:
    """E001: Flag declared more than once."""
    diag = Diagnostic(
        code="E001",
        message=f"invalid schema: flag '{flag}' is declared more than once",
        span=span,
        source=source,
        hints=["use ParseOptions(duplicate_flags='last') to let the later declaration win"],
    )
    return InvalidSchemaError(diag)


def error_unsupported_arg_type(suffix: str, span: SourceSpan = None,
                               source: str = None) -> UnsupportedArgTypeError:
    """E002: Unknown type suffix."""
    supported = ", ".join(f"'{s}'" for s in SUFFIX_KINDS)
    diag = Diagnostic(
        code="E002",
        message=f"unsupported argument type '{suffix}'",
        span=span,
        source=source,
        hints=[f"supported suffixes: {supported}, or none for a boolean flag"],
    )
    return UnsupportedArgTypeError(diag, suffix)


# --- Binding error codes ---

def error_unknown_arg(flag: str, span: SourceSpan = None, source: str = None) -> UnknownArgError:
    """E101: Flag not present in the schema."""
    diag = Diagnostic(
        code="E101",
        message=f"unknown argument '-{flag}'",
        span=span,
        source=source,
    )
    return UnknownArgError(diag, flag)


# --- Coercion error codes ---

def error_number_format(text: str, span: SourceSpan = None, source: str = None) -> NumberFormatError:
    """E201: Text is not a signed integer."""
    diag = Diagnostic(
        code="E201",
        message=f"invalid number '{text}'",
        span=span,
        source=source,
        hints=["numbers are written as an optional sign followed by digits, e.g. 8080 or -3"],
    )
    return NumberFormatError(diag, text)
