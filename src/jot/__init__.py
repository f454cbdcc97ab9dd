"""
pyjot - Jot (JSON Optimized for Tokens) for Python

A compact, human-writable notation that round-trips losslessly with JSON
while spending fewer tokens: safe strings go unquoted, single-key nesting
chains fold into dotted keys, and runs of same-shaped objects become tables.
"""

import logging

from .decoder import parse
from .encoder import stringify
from .errors import JotDecodeError, JotEncodeError, JotError
from .types import JsonValue, ParseOptions, StringifyOptions

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "stringify",
    "parse",
    "JotError",
    "JotDecodeError",
    "JotEncodeError",
    "StringifyOptions",
    "ParseOptions",
    "JsonValue",
]
