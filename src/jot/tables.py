"""Schema grouping for table encoding and row expansion for decoding."""

from typing import List, Sequence

from .types import JsonArray, JsonObject, JsonValue


class SchemaGroup:
    """A run of consecutive objects sharing one ordered key list."""

    __slots__ = ("keys", "objects")

    def __init__(self, keys: List[str], objects: List[JsonObject] | None = None) -> None:
        self.keys = keys
        self.objects: List[JsonObject] = objects if objects is not None else []

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SchemaGroup):
            return NotImplemented
        return self.keys == other.keys and self.objects == other.objects

    def __repr__(self) -> str:
        return f"SchemaGroup(keys={self.keys!r}, objects={self.objects!r})"


def group_by_schema(arr: Sequence[JsonObject]) -> List[SchemaGroup]:
    """Split objects into consecutive runs of identical key order.

    A new group starts whenever the schema changes, even when it returns to
    a schema seen earlier.
    """
    groups: List[SchemaGroup] = []
    for obj in arr:
        keys = list(obj.keys())
        if groups and groups[-1].keys == keys:
            groups[-1].objects.append(obj)
        else:
            groups.append(SchemaGroup(keys, [obj]))
    return groups


def is_table_candidate(arr: JsonArray) -> bool:
    """Check if an array may be written as a table.

    Requires two or more elements, all non-empty objects.
    """
    return len(arr) >= 2 and all(isinstance(item, dict) and item for item in arr)


def table_groups(arr: JsonArray) -> List[SchemaGroup] | None:
    """Return schema groups when table encoding pays off, else None.

    Tables are used only when at least one group holds two or more rows.
    """
    if not is_table_candidate(arr):
        return None
    groups = group_by_schema(arr)
    if any(len(group.objects) >= 2 for group in groups):
        return groups
    return None


def row_to_object(columns: List[str], cells: List[JsonValue]) -> JsonObject:
    """Zip a data row to the active column names."""
    return dict(zip(columns, cells))
