"""Typed accessors for untyped TOML data.

Used where chore.toml is ingested, so the rest of the code only sees
validated ``str``/``bool``/``tuple`` values.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]

__all__ = ["StrDict", "as_str_dict", "get_table", "get_str", "get_bool", "get_str_list"]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    if is_str_dict(obj):
        return obj
    return None


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    """Get a nested table, or None if missing or not a table."""
    return as_str_dict(table.get(key))


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a stripped, non-empty string, or None."""
    value = table.get(key)
    if not isinstance(value, str):
        return None
    s = value.strip()
    return s or None


def get_bool(table: Mapping[str, object], key: str) -> bool | None:
    value = table.get(key)
    if isinstance(value, bool):
        return value
    return None


def get_str_list(table: Mapping[str, object], key: str) -> tuple[str, ...] | None:
    """Get a list of strings as a tuple.

    Returns None if the key is missing, is not a list, or holds any
    non-string item.
    """
    value = table.get(key)
    if not isinstance(value, list):
        return None
    items = cast(list[object], value)
    if not all(isinstance(item, str) for item in items):
        return None
    return tuple(cast(list[str], items))
