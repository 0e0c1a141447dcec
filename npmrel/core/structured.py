"""Helpers for narrowing untyped JSON and TOML data.

npm prints `--json` payloads whose shape depends on the query (a bare string
for a single match, a list otherwise), and `package.json` files are free-form.
These helpers validate at runtime and narrow for the type checker.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]
ObjList = list[object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    if is_str_dict(obj):
        return obj
    return None


def as_obj_list(obj: object) -> ObjList | None:
    if isinstance(obj, list):
        return cast(ObjList, obj)
    return None


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a string value from a mapping, stripping whitespace.

    Returns None if missing, not a str, or empty after stripping.
    """
    value = table.get(key)
    if not isinstance(value, str):
        return None
    s = value.strip()
    return s or None


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    """Get a nested table (dict with string keys) from a mapping."""
    return as_str_dict(table.get(key))


def str_list(obj: object) -> list[str] | None:
    """Return obj as a list of strings, or None for any other shape.

    A bare string becomes a one-element list.
    """
    if isinstance(obj, str):
        return [obj]
    items = as_obj_list(obj)
    if items is None or not all(isinstance(item, str) for item in items):
        return None
    return cast(list[str], items)
