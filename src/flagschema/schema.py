"""
Schema compiler.

Turns a schema such as "l,p#,d*,s[*],n[#]" into a mapping from flag name to
an empty value holder. Compilation stops at the first bad declaration.
"""

import logging
from typing import Dict, Iterator, Optional, Tuple

from .tokens import ArgKind, SourceSpan, SCHEMA_SEPARATOR, kind_for_suffix
from .values import ArgValue, new_arg
from .options import ParseOptions, DEFAULT_OPTIONS, DUPLICATE_ERROR
from .errors import (
    error_invalid_schema,
    error_unsupported_arg_type,
    error_duplicate_flag,
)

logger = logging.getLogger("flagschema.schema")


def split_schema(schema: str) -> Iterator[Tuple[str, SourceSpan]]:
    """Yield each trimmed schema token with its span in the schema."""
    offset = 0
    for piece in schema.split(SCHEMA_SEPARATOR):
        stripped = piece.strip()
        start = offset + (len(piece) - len(piece.lstrip()))
        yield stripped, SourceSpan(start, start + len(stripped))
        offset += len(piece) + len(SCHEMA_SEPARATOR)


def compile_token(token: str, span: SourceSpan = None,
                  schema: str = None) -> Tuple[str, ArgValue]:
    """
    Compile one trimmed schema token into (flag, empty holder).

    Raises:
        InvalidSchemaError: if the token is empty
        UnsupportedArgTypeError: if the type suffix is not recognized
    """
    if not token:
        raise error_invalid_schema(span, schema)

    flag, suffix = token[0], token[1:]
    if not suffix:
        return flag, new_arg(ArgKind.BOOL)

    kind = kind_for_suffix(suffix)
    if kind is None:
        suffix_span = None if span is None else SourceSpan(span.start + 1, span.end)
        raise error_unsupported_arg_type(suffix, suffix_span, schema)
    return flag, new_arg(kind)


def compile_schema(schema: str, options: Optional[ParseOptions] = None) -> Dict[str, ArgValue]:
    """
    Compile a schema string into a mapping of flag name to empty holder.

    Args:
        schema: Comma-separated flag declarations
        options: Parse options (duplicate flag policy)

    Returns:
        Dict of one-character flag name to ArgValue

    Raises:
        InvalidSchemaError: on an empty declaration or a duplicate flag
        UnsupportedArgTypeError: on an unknown type suffix
    """
    options = options or DEFAULT_OPTIONS
    args: Dict[str, ArgValue] = {}

    for token, span in split_schema(schema):
        flag, holder = compile_token(token, span, schema)
        if flag in args and options.duplicate_flags == DUPLICATE_ERROR:
            raise error_duplicate_flag(flag, span, schema)
        args[flag] = holder

    logger.debug("compiled schema %r: %s", schema,
                 ", ".join(f"{flag}={holder.kind.name}" for flag, holder in args.items()))
    return args
