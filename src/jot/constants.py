"""Constants for Jot encoding and decoding."""

import re

# Literals
NULL_LITERAL = "null"
TRUE_LITERAL = "true"
FALSE_LITERAL = "false"
RESERVED_WORDS = frozenset({NULL_LITERAL, TRUE_LITERAL, FALSE_LITERAL})

# Structural characters
COLON = ":"
COMMA = ","
SEMICOLON = ";"
DOT = "."
DOUBLE_QUOTE = '"'
BACKSLASH = "\\"
OPEN_BRACE = "{"
CLOSE_BRACE = "}"
OPEN_BRACKET = "["
CLOSE_BRACKET = "]"
OPEN_TABLE = "{{"
CLOSE_TABLE = "}}"
NEWLINE = "\n"

# Characters that force a string value to be quoted
UNSAFE_CHARS = frozenset(':,{}[];"\\')
# Keys additionally reserve the fold separator
UNSAFE_KEY_CHARS = UNSAFE_CHARS | {DOT}

# Characters ending an unquoted key (whitespace also ends it)
KEY_TERMINATORS = ":,{}[];"

# Atom terminators by context
ARRAY_TERMINATORS = ",]"
OBJECT_TERMINATORS = ",}"
CELL_TERMINATORS = ",;}\n"
LAST_CELL_TERMINATORS = ";}\n"

# Decimal / exponential number literal
NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)

# Escapes accepted inside quoted strings
ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

# Defaults
DEFAULT_INDENT = "  "
DEFAULT_MAX_DEPTH = 256
