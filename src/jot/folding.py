"""Key folding and unfolding.

Folding collapses a chain of single-entry objects into one dotted key
(``{"a": {"b": 1}}`` is written ``a.b:1``); unfolding rebuilds the chain
from the dotted key and deep-merges it into the object being decoded.
"""

from typing import List, Optional, Tuple

from .constants import DOT
from .primitives import is_fold_segment
from .types import JsonObject, JsonValue


def get_fold_path(value: JsonValue) -> Optional[Tuple[List[str], JsonValue]]:
    """Follow a chain of single-entry objects starting at ``value``.

    Args:
        value: The value of the entry being folded

    Returns:
        ``(path, leaf)`` with the traversed keys and the first value that is
        not a single-entry object with a foldable key, or None when
        ``value`` does not start a chain
    """
    path: List[str] = []
    current = value
    while isinstance(current, dict) and len(current) == 1:
        (key, inner), = current.items()
        if not is_fold_segment(key):
            break
        path.append(key)
        current = inner
    if not path:
        return None
    return path, current


def fold_key(key: str, path: List[str]) -> str:
    return DOT.join([key, *path])


def unfold_key(key_path: str, value: JsonValue) -> JsonObject:
    """Build the nested single-entry chain described by a dotted key.

    Args:
        key_path: Unquoted key, possibly containing ``.``
        value: Leaf value

    Returns:
        Object whose innermost entry holds ``value``
    """
    parts = key_path.split(DOT)
    result: JsonObject = {parts[-1]: value}
    for part in reversed(parts[:-1]):
        result = {part: result}
    return result


def deep_merge(target: JsonObject, source: JsonObject) -> JsonObject:
    """Merge ``source`` into ``target`` in place.

    Entries where both sides hold objects are merged recursively; any other
    collision is won by ``source``.
    """
    for key, incoming in source.items():
        existing = target.get(key)
        if key in target and isinstance(existing, dict) and isinstance(incoming, dict):
            deep_merge(existing, incoming)
        else:
            target[key] = incoming
    return target
