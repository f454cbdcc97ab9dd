"""Recursive-descent Jot parser."""

import logging
from typing import List, Optional, Tuple, Union

from .constants import (
    ARRAY_TERMINATORS,
    BACKSLASH,
    CELL_TERMINATORS,
    CLOSE_BRACE,
    CLOSE_BRACKET,
    CLOSE_TABLE,
    COLON,
    COMMA,
    DEFAULT_MAX_DEPTH,
    DOUBLE_QUOTE,
    ESCAPES,
    KEY_TERMINATORS,
    LAST_CELL_TERMINATORS,
    NEWLINE,
    OBJECT_TERMINATORS,
    OPEN_BRACE,
    OPEN_BRACKET,
    OPEN_TABLE,
    SEMICOLON,
)
from .errors import JotDecodeError
from .folding import deep_merge, unfold_key
from .primitives import token_to_value
from .tables import row_to_object
from .types import JsonArray, JsonObject, JsonValue, ParseOptions, ResolvedParseOptions

logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class JotParser:
    """Single-use parser over one input string.

    The cursor only moves forward; at most two characters of lookahead are
    needed (to tell ``{{`` from ``{``).
    """

    def __init__(self, doc: str, options: Optional[ResolvedParseOptions] = None) -> None:
        self.doc = doc
        self.pos = 0
        self.options = options or ResolvedParseOptions()
        self._depth = 0

    def parse(self) -> JsonValue:
        self._skip_whitespace()
        value = self._parse_value("")
        self._skip_whitespace()
        if self.pos < len(self.doc):
            raise self._error(f"Unexpected character {self.doc[self.pos]!r}")
        return value

    # Cursor helpers

    def _error(self, msg: str, pos: Optional[int] = None) -> JotDecodeError:
        return JotDecodeError(msg, self.doc, self.pos if pos is None else pos)

    def _peek(self) -> str:
        return self.doc[self.pos] if self.pos < len(self.doc) else ""

    def _at(self, token: str) -> bool:
        return self.doc.startswith(token, self.pos)

    def _at_end(self) -> bool:
        return self.pos >= len(self.doc)

    def _skip_whitespace(self) -> None:
        doc = self.doc
        while self.pos < len(doc) and doc[self.pos].isspace():
            self.pos += 1

    def _skip_inline_whitespace(self) -> None:
        doc = self.doc
        while self.pos < len(doc) and doc[self.pos].isspace() and doc[self.pos] != NEWLINE:
            self.pos += 1

    def _enter(self) -> None:
        self._depth += 1
        if self._depth > self.options.max_depth:
            raise self._error(f"Maximum nesting depth of {self.options.max_depth} exceeded")

    def _leave(self) -> None:
        self._depth -= 1

    # Values

    def _parse_value(self, terminators: str) -> JsonValue:
        self._skip_whitespace()
        ch = self._peek()
        if ch == OPEN_BRACE:
            return self._parse_table() if self._at(OPEN_TABLE) else self._parse_object()
        if ch == OPEN_BRACKET:
            return self._parse_array()
        if ch == DOUBLE_QUOTE:
            return self._parse_quoted()
        return self._parse_atom(terminators)

    def _parse_quoted(self) -> str:
        start = self.pos
        self.pos += 1
        doc = self.doc
        chunks: List[str] = []
        while self.pos < len(doc):
            ch = doc[self.pos]
            if ch == DOUBLE_QUOTE:
                self.pos += 1
                return "".join(chunks)
            if ch == BACKSLASH:
                chunks.append(self._parse_escape())
                continue
            chunks.append(ch)
            self.pos += 1
        raise self._error("Unterminated string", start)

    def _parse_escape(self) -> str:
        """Decode the escape sequence at the cursor and move past it."""
        start = self.pos
        self.pos += 1
        if self._at_end():
            raise self._error("Incomplete escape sequence", start)
        esc = self.doc[self.pos]
        if esc in ESCAPES:
            self.pos += 1
            return ESCAPES[esc]
        if esc != "u":
            raise self._error(f"Invalid escape sequence '\\{esc}'", start)

        digits = self.doc[self.pos + 1 : self.pos + 5]
        if len(digits) < 4 or not all(c in _HEX_DIGITS for c in digits):
            raise self._error(f"Invalid unicode escape '\\u{digits}'", start)
        code = int(digits, 16)
        if 0xD800 <= code <= 0xDFFF:
            raise self._error(f"Unsupported surrogate in unicode escape '\\u{digits}'", start)
        self.pos += 5
        return chr(code)

    def _parse_atom(self, terminators: str) -> JsonValue:
        start = self.pos
        doc = self.doc
        if not terminators:
            token = doc[start:].strip()
            self.pos = len(doc)
            if not token:
                raise self._error("Unexpected end of input", start)
            return token_to_value(token)

        while self.pos < len(doc) and doc[self.pos] not in terminators:
            self.pos += 1
        token = doc[start : self.pos].strip()
        if not token:
            if self._at_end():
                raise self._error("Unexpected end of input")
            raise self._error(f"Unexpected character {self._peek()!r}")
        return token_to_value(token)

    # Containers

    def _parse_array(self) -> JsonArray:
        start = self.pos
        self.pos += 1
        self._enter()
        result: JsonArray = []
        self._skip_whitespace()
        while self._peek() != CLOSE_BRACKET:
            if self._at_end():
                raise self._error("Unterminated array", start)
            result.append(self._parse_value(ARRAY_TERMINATORS))
            self._skip_whitespace()
            if self._peek() == COMMA:
                self.pos += 1
                self._skip_whitespace()
        self.pos += 1
        self._leave()
        return result

    def _parse_object(self) -> JsonObject:
        start = self.pos
        self.pos += 1
        self._enter()
        result: JsonObject = {}
        self._skip_whitespace()
        while self._peek() != CLOSE_BRACE:
            if self._at_end():
                raise self._error("Unterminated object", start)
            key, quoted = self._parse_key()
            self._skip_whitespace()
            if self._peek() != COLON:
                raise self._error(f"Expected ':' after key {key!r}")
            self.pos += 1
            value = self._parse_value(OBJECT_TERMINATORS)
            if quoted:
                result[key] = value
            else:
                deep_merge(result, unfold_key(key, value))
            self._skip_whitespace()
            if self._peek() == COMMA:
                self.pos += 1
                self._skip_whitespace()
        self.pos += 1
        self._leave()
        return result

    def _parse_key(self) -> Tuple[str, bool]:
        """Read an object key.

        Returns:
            ``(key, quoted)``; quoted keys are never unfolded
        """
        self._skip_whitespace()
        if self._peek() == DOUBLE_QUOTE:
            return self._parse_quoted(), True
        start = self.pos
        doc = self.doc
        while self.pos < len(doc) and doc[self.pos] not in KEY_TERMINATORS and not doc[self.pos].isspace():
            self.pos += 1
        if self.pos == start:
            raise self._error("Expected key")
        return doc[start : self.pos], False

    # Tables

    def _parse_table(self) -> List[JsonObject]:
        start = self.pos
        self.pos += len(OPEN_TABLE)
        self._enter()
        result: List[JsonObject] = []
        columns: List[str] = []
        while True:
            self._skip_whitespace()
            if self._at(CLOSE_TABLE):
                break
            if self._at_end():
                raise self._error("Unterminated table", start)

            row_start = self.pos
            if self._peek() == COLON:
                self.pos += 1
                columns = self._parse_schema_row()
            else:
                if not columns:
                    raise self._error("Data row without schema")
                result.append(row_to_object(columns, self._parse_data_row(len(columns))))

            self._skip_whitespace()
            if self._peek() == SEMICOLON:
                self.pos += 1
            if self.pos == row_start:
                raise self._error(f"Unexpected character {self._peek()!r}")
        self.pos += len(CLOSE_TABLE)
        self._leave()
        return result

    def _parse_schema_row(self) -> List[str]:
        """Read column names up to ``;``, a newline or ``}}``."""
        columns: List[str] = []
        doc = self.doc
        while True:
            self._skip_inline_whitespace()
            quoted = self._peek() == DOUBLE_QUOTE
            if quoted:
                name = self._parse_quoted()
                self._skip_inline_whitespace()
                if not self._at_end() and not self._at(CLOSE_TABLE) and self._peek() not in ",;\n":
                    raise self._error(f"Unexpected character {self._peek()!r} in schema row")
            else:
                start = self.pos
                while self.pos < len(doc) and doc[self.pos] not in ",;\n" and not self._at(CLOSE_TABLE):
                    self.pos += 1
                name = doc[start : self.pos].strip()
            # Quoted names are kept even when empty
            if quoted or name:
                columns.append(name)
            if self._peek() != COMMA:
                return columns
            self.pos += 1

    def _parse_data_row(self, count: int) -> List[JsonValue]:
        cells: List[JsonValue] = []
        for i in range(count):
            terminators = CELL_TERMINATORS if i < count - 1 else LAST_CELL_TERMINATORS
            cells.append(self._parse_cell(terminators))
            self._skip_whitespace()
            if self._peek() == COMMA:
                self.pos += 1
        return cells

    def _parse_cell(self, terminators: str) -> JsonValue:
        self._skip_whitespace()
        ch = self._peek()
        if ch == DOUBLE_QUOTE:
            return self._parse_quoted()
        if ch == OPEN_BRACE:
            return self._parse_table() if self._at(OPEN_TABLE) else self._parse_object()
        if ch == OPEN_BRACKET:
            return self._parse_array()

        start = self.pos
        doc = self.doc
        while self.pos < len(doc) and doc[self.pos] not in terminators and not self._at(CLOSE_TABLE):
            self.pos += 1
        token = doc[start : self.pos].strip()
        return token_to_value(token) if token else None


def parse(text: Union[str, bytes, bytearray], options: Optional[ParseOptions] = None) -> JsonValue:
    """Decode Jot text into a Python value.

    Args:
        text: Jot-formatted text; bytes are decoded as UTF-8
        options: Optional parse options

    Returns:
        Decoded value built from dicts, lists and scalars

    Raises:
        JotDecodeError: If the text is not valid Jot, or bytes input is not valid UTF-8
    """
    if isinstance(text, (bytes, bytearray)):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as exc:
            valid = bytes(text[: exc.start]).decode("utf-8")
            raise JotDecodeError("Invalid UTF-8 input", text.decode("utf-8", "replace"), len(valid)) from exc
    if not isinstance(text, str):
        raise TypeError(f"Jot text must be str, bytes or bytearray, not {type(text).__name__}")

    resolved_options = resolve_parse_options(options)
    try:
        value = JotParser(text, resolved_options).parse()
    except JotDecodeError as exc:
        logger.debug("Failed to parse %d characters of Jot: %s", len(text), exc)
        raise
    logger.debug("Parsed %d characters of Jot into %s", len(text), type(value).__name__)
    return value


def resolve_parse_options(options: Optional[ParseOptions]) -> ResolvedParseOptions:
    """Resolve parse options with defaults."""
    if options is None:
        return ResolvedParseOptions()
    return ResolvedParseOptions(max_depth=options.get("maxDepth", DEFAULT_MAX_DEPTH))
