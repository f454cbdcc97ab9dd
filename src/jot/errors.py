"""Exceptions raised by jot."""


class JotError(ValueError):
    """Base class for Jot encoding and decoding errors."""


class JotEncodeError(JotError):
    """Raised when a value cannot be represented in Jot."""


class JotDecodeError(JotError):
    """Raised when Jot text violates the grammar.

    Attributes:
        msg: The unformatted error message
        doc: The text being parsed
        pos: Offset in ``doc`` where parsing failed
        lineno: Line corresponding to ``pos`` (1-based)
        colno: Column corresponding to ``pos`` (1-based)
    """

    def __init__(self, msg: str, doc: str, pos: int) -> None:
        lineno = doc.count("\n", 0, pos) + 1
        colno = pos - doc.rfind("\n", 0, pos)
        super().__init__(f"{msg} at position {pos} (line {lineno}, column {colno})")
        self.msg = msg
        self.doc = doc
        self.pos = pos
        self.lineno = lineno
        self.colno = colno

    def __reduce__(self):
        return self.__class__, (self.msg, self.doc, self.pos)
