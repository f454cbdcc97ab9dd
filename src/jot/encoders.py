"""Encoders for different value types.

Every renderer receives the resolved options and the current nesting depth
explicitly, so one ``stringify`` call never shares layout state with another.
"""

from typing import List

from .constants import CLOSE_TABLE, COLON, NEWLINE, OPEN_TABLE, SEMICOLON
from .folding import fold_key, get_fold_path
from .normalize import is_complex, is_json_array, is_json_object, is_json_primitive
from .primitives import encode_key, encode_primitive, key_needs_quotes
from .tables import SchemaGroup, table_groups
from .types import Depth, JsonArray, JsonObject, JsonValue, ResolvedStringifyOptions


def encode_value(
    value: JsonValue, options: ResolvedStringifyOptions, depth: Depth = 0, at_line_start: bool = False
) -> str:
    """Encode a value to Jot.

    Args:
        value: Normalized JSON value
        options: Resolved stringify options
        depth: Current indentation depth
        at_line_start: True when the value is laid out as an array item

    Returns:
        Jot text for ``value``
    """
    if is_json_primitive(value):
        return encode_primitive(value)
    if is_json_array(value):
        return encode_array(value, options, depth)
    if is_json_object(value):
        return encode_object(value, options, depth, at_line_start)
    raise TypeError(f"Unexpected value of type {type(value).__name__}; normalize before encoding")


def encode_array(arr: JsonArray, options: ResolvedStringifyOptions, depth: Depth) -> str:
    """Encode an array as a table, a single item, an expanded list or an inline list.

    Args:
        arr: List array
        options: Resolved stringify options
        depth: Current indentation depth
    """
    groups = table_groups(arr)
    if groups is not None:
        return encode_table(groups, options, depth)

    if len(arr) == 1:
        return f"[{encode_value(arr[0], options, depth)}]"

    if options.pretty and arr and any(is_complex(item) for item in arr):
        pad = options.pad(depth + 1)
        items = [f"{pad}{encode_value(item, options, depth + 1, at_line_start=True)}" for item in arr]
        return "[\n" + ",\n".join(items) + f"\n{options.pad(depth)}]"

    joined = options.separator.join(encode_value(item, options, depth) for item in arr)
    if options.pretty and arr:
        return f"[ {joined} ]"
    return f"[{joined}]"


def encode_table(groups: List[SchemaGroup], options: ResolvedStringifyOptions, depth: Depth) -> str:
    """Encode schema groups as a ``{{ }}`` table.

    Compact tables separate rows with ``;``. Pretty tables put each row on its
    own line: schema rows one level deeper than the table, data rows two.
    """
    sep = options.separator
    row_depth = depth + 2
    rows: List[str] = []
    for group in groups:
        rows.append(f"{options.pad(depth + 1)}{COLON}{sep.join(encode_key(k) for k in group.keys)}")
        for obj in group.objects:
            cells = sep.join(encode_value(obj[k], options, row_depth) for k in group.keys)
            rows.append(f"{options.pad(row_depth)}{cells}")

    if options.pretty:
        return OPEN_TABLE + NEWLINE + NEWLINE.join(rows) + NEWLINE + options.pad(depth) + CLOSE_TABLE
    return OPEN_TABLE + SEMICOLON.join(rows) + CLOSE_TABLE


def encode_key_value_pair(key: str, value: JsonValue, options: ResolvedStringifyOptions, depth: Depth) -> str:
    """Encode one object entry, folding single-entry chains under safe keys.

    Args:
        key: Key name
        value: Value to encode
        options: Resolved stringify options
        depth: Depth of the object's entries
    """
    rendered_key = encode_key(key)
    if is_json_object(value) and not key_needs_quotes(key):
        fold = get_fold_path(value)
        if fold is not None:
            path, value = fold
            rendered_key = fold_key(key, path)
    colon = ": " if options.pretty else COLON
    return f"{rendered_key}{colon}{encode_value(value, options, depth)}"


def encode_object(obj: JsonObject, options: ResolvedStringifyOptions, depth: Depth, at_line_start: bool = False) -> str:
    """Encode an object to Jot.

    In pretty mode a multi-entry object laid out as an array item keeps its
    first entry on the opening line, unless its last entry ends in a
    bracketed block; other multi-entry objects are fully expanded.

    Args:
        obj: Dictionary object
        options: Resolved stringify options
        depth: Current indentation depth
        at_line_start: True when the object is an array item
    """
    if not obj:
        return "{}"

    if not options.pretty:
        return "{" + ",".join(encode_key_value_pair(k, v, options, depth) for k, v in obj.items()) + "}"

    if len(obj) == 1:
        (key, value), = obj.items()
        return f"{{ {encode_key_value_pair(key, value, options, depth)} }}"

    inner = depth + 1
    pairs = [encode_key_value_pair(k, v, options, inner) for k, v in obj.items()]
    last_is_block = pairs[-1].endswith(("}", "]"))
    pad = options.pad(inner)

    if at_line_start and not last_is_block:
        lines = [pairs[0]] + [f"{pad}{p}" for p in pairs[1:]]
        return "{ " + ",\n".join(lines) + " }"

    lines = [f"{pad}{p}" for p in pairs]
    return "{\n" + ",\n".join(lines) + f"\n{options.pad(depth)}}}"
