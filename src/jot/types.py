"""Type definitions for jot."""

from typing import Any, Dict, List, TypedDict, Union

from .constants import DEFAULT_INDENT, DEFAULT_MAX_DEPTH

# JSON-compatible types
JsonPrimitive = Union[str, int, float, bool, None]
JsonObject = Dict[str, Any]
JsonArray = List[Any]
JsonValue = Union[JsonPrimitive, JsonArray, JsonObject]


class StringifyOptions(TypedDict, total=False):
    """Options for Jot serialization.

    Attributes:
        pretty: Render with newlines and indentation (default: False)
        indent: Indentation unit, a string or a number of spaces (default: two spaces)
    """

    pretty: bool
    indent: Union[str, int]


class ParseOptions(TypedDict, total=False):
    """Options for Jot parsing.

    Attributes:
        maxDepth: Maximum container nesting accepted before failing (default: 256)
    """

    maxDepth: int


class ResolvedStringifyOptions:
    """Resolved serialization options with defaults applied."""

    def __init__(self, pretty: bool = False, indent: str = DEFAULT_INDENT) -> None:
        self.pretty = pretty
        self.indent = indent

    def pad(self, depth: "Depth") -> str:
        """Leading whitespace for a line at ``depth``; empty in compact mode."""
        return self.indent * depth if self.pretty else ""

    @property
    def separator(self) -> str:
        return ", " if self.pretty else ","

    def __repr__(self) -> str:
        return f"ResolvedStringifyOptions(pretty={self.pretty!r}, indent={self.indent!r})"


class ResolvedParseOptions:
    """Resolved parsing options with defaults applied."""

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self.max_depth = max_depth

    def __repr__(self) -> str:
        return f"ResolvedParseOptions(max_depth={self.max_depth!r})"


# Depth type for tracking indentation level
Depth = int
