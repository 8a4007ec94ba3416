"""
flagschema - schema-driven flag binding.

This module provides:
- Schema compiler: turns "l,p#,d*" into typed, empty value holders
- Tokenizer: splits "-l -p 8080 -d /usr/logs" into flag tokens
- Binder: feeds tokens into holders, failing on the first error
- Values: typed holders with string, bool, number and array accessors

Usage:
    from flagschema import parse, ParseError

    try:
        args = parse("l,p#,d*,s[*]", "-l -p 8080 -d /usr/logs -s a b")
    except ParseError as e:
        print(e)
    else:
        args["l"].as_bool()        # True
        args["p"].as_number()      # 8080
        args["d"].get()            # "/usr/logs"
        args["s"].as_str_array()   # ["a", "b"]
"""

import logging

from .tokens import (
    ArgKind,
    InputToken,
    SourceSpan,
    SUFFIX_KINDS,
)

from .tokenizer import (
    Tokenizer,
    tokenize,
)

from .schema import (
    compile_schema,
)

from .binder import (
    Binder,
    parse,
)

from .options import (
    ParseOptions,
)

from .values import (
    ArgValue,
    bool_arg,
    string_arg,
    number_arg,
    string_array_arg,
    number_array_arg,
    new_arg,
)

from .errors import (
    Diagnostic,
    ParseError,
    InvalidSchemaError,
    UnsupportedArgTypeError,
    UnknownArgError,
    NumberFormatError,
)

logging.getLogger("flagschema").addHandler(logging.NullHandler())

__all__ = [
    # Tokens
    'ArgKind',
    'InputToken',
    'SourceSpan',
    'SUFFIX_KINDS',

    # Tokenizer
    'Tokenizer',
    'tokenize',

    # Schema
    'compile_schema',

    # Binder
    'Binder',
    'parse',

    # Options
    'ParseOptions',

    # Values
    'ArgValue',
    'bool_arg',
    'string_arg',
    'number_arg',
    'string_array_arg',
    'number_array_arg',
    'new_arg',

    # Errors
    'Diagnostic',
    'ParseError',
    'InvalidSchemaError',
    'UnsupportedArgTypeError',
    'UnknownArgError',
    'NumberFormatError',
]
