"""Literal grammar shared by the encoder and the decoder.

Scalars are spelled identically in both directions: ``null``/``true``/
``false`` are reserved, number tokens are finite decimal literals, and any
other bare token is a string. A string is written bare only when reading the
bare token back reproduces it exactly; otherwise it is double-quoted.
"""

import json
import math
from typing import Optional

from .constants import (
    FALSE_LITERAL,
    INTEGER_PATTERN,
    NULL_LITERAL,
    NUMBER_PATTERN,
    RESERVED_WORDS,
    TRUE_LITERAL,
    UNSAFE_CHARS,
    UNSAFE_KEY_CHARS,
)
from .types import JsonPrimitive


def is_number_token(token: str) -> bool:
    """Check if ``token`` is a finite decimal or exponential number literal."""
    return parse_number(token) is not None


def parse_number(token: str) -> Optional[float]:
    """Parse a number token.

    Returns:
        ``int`` for plain digit runs, ``float`` otherwise, or None when the
        token is not a finite number literal
    """
    if NUMBER_PATTERN.fullmatch(token) is None:
        return None
    if INTEGER_PATTERN.fullmatch(token) is not None:
        return int(token)
    number = float(token)
    return number if math.isfinite(number) else None


def token_to_value(token: str) -> JsonPrimitive:
    """Decode a trimmed bare token: null, booleans, numbers, then strings."""
    if token == NULL_LITERAL:
        return None
    if token == TRUE_LITERAL:
        return True
    if token == FALSE_LITERAL:
        return False
    number = parse_number(token)
    if number is not None:
        return number
    return token


def _has_control_char(s: str) -> bool:
    return any(ord(c) < 0x20 for c in s)


def _is_ambiguous(s: str) -> bool:
    return s == "" or s != s.strip() or s in RESERVED_WORDS or is_number_token(s) or _has_control_char(s)


def needs_quotes(s: str) -> bool:
    """Check if a string value must be quoted to survive decoding."""
    return _is_ambiguous(s) or any(c in UNSAFE_CHARS for c in s)


def key_needs_quotes(s: str) -> bool:
    """Check if an object key must be quoted.

    Keys also reserve ``.`` (the fold separator) and may not contain
    whitespace, which ends an unquoted key.
    """
    return _is_ambiguous(s) or any(c in UNSAFE_KEY_CHARS or c.isspace() for c in s)


def is_fold_segment(s: str) -> bool:
    """Check if ``s`` can appear as one segment of an unquoted dotted key."""
    return s != "" and not any(c in UNSAFE_KEY_CHARS or c.isspace() or ord(c) < 0x20 for c in s)


def quote_string(s: str) -> str:
    """Render ``s`` as a double-quoted string with escapes."""
    return json.dumps(s, ensure_ascii=False)


def encode_string(s: str) -> str:
    return quote_string(s) if needs_quotes(s) else s


def encode_key(key: str) -> str:
    """Encode an object key or column name, quoting when required."""
    return quote_string(key) if key_needs_quotes(key) else key


def encode_number(value: float) -> str:
    if isinstance(value, int):
        return str(value)
    return repr(value)


def encode_primitive(value: JsonPrimitive) -> str:
    """Encode a scalar value.

    Args:
        value: Normalized scalar

    Returns:
        Token text
    """
    if value is None:
        return NULL_LITERAL
    if isinstance(value, bool):
        return TRUE_LITERAL if value else FALSE_LITERAL
    if isinstance(value, (int, float)):
        return encode_number(value)
    return encode_string(value)
