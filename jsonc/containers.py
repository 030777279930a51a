"""Container JSON values: arrays and objects."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterator
from typing import Any, Optional

from .arraylist import DEFAULT_SIZE, ArrayList
from .serialize import ToStringFlags, escape_string, indent
from .value import JsonType, JsonValue

DEFAULT_HASH_ENTRIES = 16


class AddFlags(enum.IntFlag):
    """Options for JsonObject.add."""

    NONE = 0
    KEY_IS_NEW = 1 << 1
    CONSTANT_KEY = 1 << 2
    KEY_IS_CONSTANT = CONSTANT_KEY


def _release_child(value: Optional[JsonValue]) -> None:
    if value is not None:
        value.release()


def _open_child(parts: list, had_children: bool, level: int, flags: int) -> None:
    if had_children:
        parts.append(",")
    pretty = bool(flags & ToStringFlags.PRETTY)
    if pretty:
        parts.append("\n")
    if flags & ToStringFlags.SPACED and not pretty:
        parts.append(" ")
    parts.append(indent(level + 1, flags))


def _close(parts: list, had_children: bool, level: int, flags: int, closer: str) -> str:
    pretty = bool(flags & ToStringFlags.PRETTY)
    if pretty and had_children:
        parts.append("\n")
        parts.append(indent(level, flags))
    if flags & ToStringFlags.SPACED and not pretty:
        parts.append(" ")
    parts.append(closer)
    return "".join(parts)


def _child_text(value: Optional[JsonValue], level: int, flags: int) -> str:
    if value is None:
        return "null"
    return value.serialize(level + 1, flags)


class JsonArray(JsonValue):
    """A JSON array; it owns one reference to each element."""

    json_type = JsonType.ARRAY

    def __init__(self, initial_size: int = DEFAULT_SIZE) -> None:
        super().__init__()
        self._list = ArrayList(_release_child, initial_size)

    @property
    def capacity(self) -> int:
        """Number of slots currently reserved."""
        return self._list.capacity

    def __len__(self) -> int:
        return len(self._list)

    def __iter__(self) -> Iterator[Optional[JsonValue]]:
        return iter(self._list)

    def __getitem__(self, index: int) -> Optional[JsonValue]:
        """Return the element at index, or None when it is null or out of range."""
        return self._list.get(index)

    def append(self, value: Optional[JsonValue]) -> None:
        """Add an element at the end, taking over the caller's reference."""
        self._list.append(value)

    def put(self, index: int, value: Optional[JsonValue]) -> None:
        """Store an element at index, releasing any element it replaces."""
        self._list.put(index, value)

    def delete(self, index: int, count: int = 1) -> None:
        """Remove count elements from index, releasing each one."""
        self._list.delete(index, count)

    def sort(self, key: Optional[Callable[[Optional[JsonValue]], Any]] = None) -> None:
        """Sort the elements in place by a key function."""
        self._list.sort(key)

    def bsearch(self, key: Any,
                compare: Callable[[Any, Optional[JsonValue]], int]) -> Optional[JsonValue]:
        """Binary search a sorted array; return the matching element or None."""
        return self._list.bsearch(key, compare)

    def shrink(self, empty_slots: int = 0) -> None:
        """Reserve just enough slots for the elements plus empty_slots."""
        self._list.shrink(empty_slots)

    def _dispose(self) -> None:
        self._list.free()

    def _serialize_default(self, level: int, flags: int) -> str:
        parts = ["["]
        had_children = False
        for value in self._list:
            _open_child(parts, had_children, level, flags)
            had_children = True
            parts.append(_child_text(value, level, flags))
        return _close(parts, had_children, level, flags, "]")

    def serialize(self, level: int = 0, flags: int = 0) -> str:
        """Return the JSON text for this array at the given nesting level."""
        return super().serialize(level, flags)


class JsonObject(JsonValue):
    """A JSON object keeping its fields in insertion order."""

    json_type = JsonType.OBJECT

    def __init__(self) -> None:
        super().__init__()
        self._fields: dict[str, Optional[JsonValue]] = {}

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, key: object) -> bool:
        return key in self._fields

    def __getitem__(self, key: str) -> Optional[JsonValue]:
        """Return the value for key; raise KeyError when the key is missing."""
        return self._fields[key]

    def add(self, key: str, value: Optional[JsonValue], opts: int = 0) -> None:
        """Set a field, taking over the caller's reference to value.

        A value already stored under the key is released and replaced in
        place, so the key keeps its position. Adding an object to itself
        raises ValueError.
        """
        if value is self:
            raise ValueError("an object cannot contain itself")
        key = str(key)
        if not opts & AddFlags.KEY_IS_NEW and key in self._fields:
            _release_child(self._fields[key])
        self._fields[key] = value

    def get(self, key: str) -> Optional[JsonValue]:
        """Return the value for key, or None when missing or null."""
        return self._fields.get(key)

    def delete(self, key: str) -> None:
        """Remove a field, releasing its value; missing keys are ignored."""
        if key in self._fields:
            _release_child(self._fields.pop(key))

    def keys(self) -> list[str]:
        """Return the field names in order."""
        return list(self._fields)

    def items(self) -> list[tuple[str, Optional[JsonValue]]]:
        """Return the (name, value) pairs in order."""
        return list(self._fields.items())

    def _dispose(self) -> None:
        fields, self._fields = self._fields, {}
        for value in fields.values():
            _release_child(value)

    def _serialize_default(self, level: int, flags: int) -> str:
        parts = ["{"]
        had_children = False
        separator = '": ' if flags & ToStringFlags.SPACED else '":'
        for key, value in self._fields.items():
            _open_child(parts, had_children, level, flags)
            had_children = True
            parts.append('"')
            parts.append(escape_string(key, flags))
            parts.append(separator)
            parts.append(_child_text(value, level, flags))
        return _close(parts, had_children, level, flags, "}")

    def serialize(self, level: int = 0, flags: int = 0) -> str:
        """Return the JSON text for this object at the given nesting level."""
        return super().serialize(level, flags)