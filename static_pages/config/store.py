"""Clone the base store into a per-page working copy."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from static_pages.errors import TypeMismatchError

if typ.TYPE_CHECKING:
    from .models import ConfigValue, PageStore


def clone_config(base: typ.Mapping[str, object]) -> PageStore:
    """Return a deep, type-normalized copy of ``base``.

    Strings are copied as-is, JSON objects become fresh ``dict[str, str]``
    instances and JSON arrays become fresh ``list[str]`` instances, so mutating
    the clone (or anything inside it) never touches ``base``.

    Raises
    ------
    TypeMismatchError
        If any value is not a string, an object whose values are all strings,
        or an array whose items are all strings. ``base`` is left untouched.

    Examples
    --------
    >>> page = clone_config({"title": "Site", "tags": ["a", "b"]})
    >>> page["tags"].append("c")
    >>> page
    {'title': 'Site', 'tags': ['a', 'b', 'c']}
    """
    return {key: _normalize_value(key, value) for key, value in base.items()}


def _normalize_value(key: str, value: object) -> ConfigValue:
    match value:
        case str():
            return value
        case cabc.Mapping() if _all_strings(value.values()):
            return {str(name): item for name, item in value.items()}
        case list() | tuple() if _all_strings(value):
            return list(value)
        case _:
            raise TypeMismatchError(key, value)


def _all_strings(values: cabc.Iterable[object]) -> bool:
    return all(isinstance(item, str) for item in values)


__all__ = ["clone_config"]
