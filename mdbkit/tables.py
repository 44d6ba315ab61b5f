"""Listing of catalog entries by object type."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum


class ObjectType(IntEnum):
    """Kinds of object recorded in a database catalog."""

    FORM = 0
    TABLE = 1
    MACRO = 2
    SYSTEM_TABLE = 3
    REPORT = 4
    QUERY = 5
    LINKED_TABLE = 6
    MODULE = 7
    RELATIONSHIP = 8
    DATABASE_PROPERTY = 11
    ANY = -1


_TYPE_NAMES = {
    "form": ObjectType.FORM,
    "table": ObjectType.TABLE,
    "macro": ObjectType.MACRO,
    "systable": ObjectType.SYSTEM_TABLE,
    "report": ObjectType.REPORT,
    "query": ObjectType.QUERY,
    "linkedtable": ObjectType.LINKED_TABLE,
    "module": ObjectType.MODULE,
    "relationship": ObjectType.RELATIONSHIP,
    "dbprop": ObjectType.DATABASE_PROPERTY,
    "any": ObjectType.ANY,
    "all": ObjectType.ANY,
}


def valid_types() -> str:
    """Names accepted by :func:`object_type`, each followed by a space."""
    return "".join(f"{name} " for name in _TYPE_NAMES)


def object_type(name: str) -> ObjectType:
    """Look up an object type by name, ignoring case."""
    try:
        return _TYPE_NAMES[name.lower()]
    except KeyError:
        raise ValueError(f"Invalid type name: {name}") from None


def format_listing(
    entries: Iterable[tuple[str, int, bool]],
    objtype: int = ObjectType.TABLE,
    skip_system: bool = True,
    line_break: bool = False,
    delimiter: str = " ",
    show_type: bool = False,
) -> str:
    """Render ``(name, object_type, is_system)`` catalog entries as a listing."""
    parts = []
    for name, entry_type, is_system in entries:
        if objtype != ObjectType.ANY and entry_type != objtype:
            continue
        if skip_system and is_system:
            continue
        if show_type:
            parts.append(f"{delimiter}\n{int(entry_type)} ")
        parts.append(f"{name}\n" if line_break else f"{name}{delimiter}")
    if not line_break:
        parts.append("\n")
    return "".join(parts)