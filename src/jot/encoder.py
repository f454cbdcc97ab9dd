"""Core Jot serialization functionality."""

import logging
from typing import Any, Optional

from .constants import DEFAULT_INDENT
from .encoders import encode_value
from .normalize import normalize_value
from .types import ResolvedStringifyOptions, StringifyOptions

logger = logging.getLogger(__name__)


def stringify(value: Any, options: Optional[StringifyOptions] = None) -> str:
    """Encode a value into Jot format.

    Args:
        value: The value to encode (must be JSON-serializable)
        options: Optional stringify options

    Returns:
        Jot-formatted string

    Raises:
        JotEncodeError: If the value holds data Jot cannot represent
    """
    resolved_options = resolve_options(options)
    normalized = normalize_value(value)
    text = encode_value(normalized, resolved_options, 0)
    logger.debug("Encoded %s into %d characters with %r", type(value).__name__, len(text), resolved_options)
    return text


def resolve_options(options: Optional[StringifyOptions]) -> ResolvedStringifyOptions:
    """Resolve stringify options with defaults.

    Args:
        options: Optional user-provided options

    Returns:
        Resolved options with defaults applied
    """
    if options is None:
        return ResolvedStringifyOptions()

    pretty = bool(options.get("pretty", False))
    indent = options.get("indent")
    if indent is None:
        indent = DEFAULT_INDENT

    # An integer indent means that many spaces
    if isinstance(indent, int) and not isinstance(indent, bool):
        indent = " " * indent

    return ResolvedStringifyOptions(pretty=pretty, indent=indent)
