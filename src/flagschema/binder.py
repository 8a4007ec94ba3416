"""
Binder: compiles a schema, tokenizes input, and binds values to flags.

Usage:
    from flagschema import parse

    args = parse("l,p#,d*", "-l -p 8080 -d /usr/logs")
    args["p"].as_number()   # 8080
"""

import logging
from typing import Dict, Optional

from .tokens import InputToken
from .values import ArgValue
from .options import ParseOptions, DEFAULT_OPTIONS
from .schema import compile_schema
from .tokenizer import Tokenizer
from .errors import NumberFormatError, error_unknown_arg

logger = logging.getLogger("flagschema.binder")


class Binder:
    """
    Binds input lines to schemas.

    Holds only immutable options; every call to `bind` compiles a fresh set of
    holders, so one Binder may serve any number of calls.
    """

    def __init__(self, options: Optional[ParseOptions] = None):
        self.options = options or DEFAULT_OPTIONS

    def bind_token(self, args: Dict[str, ArgValue], token: InputToken,
                   source: str = None) -> None:
        """
        Feed one token's values into the holder for its modifier.

        Raises:
            UnknownArgError: if the modifier is not a declared flag
            NumberFormatError: if a number flag gets non-integer text
        """
        holder = args.get(token.modifier)
        if holder is None:
            raise error_unknown_arg(token.modifier, token.span, source)

        try:
            holder.set(token.values)
        except NumberFormatError as e:
            # Point the diagnostic at the offending segment
            e.diagnostic.span = token.span
            e.diagnostic.source = source
            raise

        logger.debug("bound -%s %s -> %r", token.modifier, list(token.values), holder)

    def bind(self, schema: str, source: str) -> Dict[str, ArgValue]:
        """
        Compile `schema` and bind every token of `source` to it.

        Stops at the first error; nothing is returned in that case.
        """
        args = compile_schema(schema, self.options)
        for token in Tokenizer(source):
            self.bind_token(args, token, source)
        return args


def parse(schema: str, source: str, options: Optional[ParseOptions] = None) -> Dict[str, ArgValue]:
    """
    Convenience function to parse an input line against a schema.

    Args:
        schema: Comma-separated flag declarations, e.g. "l,p#,d*"
        source: The raw input, e.g. "-l -p 8080 -d /usr/logs"
        options: Optional parse options

    Returns:
        Dict of flag name to bound ArgValue; unbound flags keep defaults

    Raises:
        ParseError: InvalidSchemaError, UnsupportedArgTypeError,
            UnknownArgError or NumberFormatError
    """
    return Binder(options).bind(schema, source)
