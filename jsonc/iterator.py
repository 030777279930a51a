"""Cursor-style iteration over the fields of a JSON object."""

from __future__ import annotations

from typing import Optional

from .containers import JsonObject
from .value import JsonValue


class ObjectIterator:
    """A position among an object's fields, or the end position.

    Adding or removing fields after the iterator was made is not reflected
    in the order it walks. A value replaced under an existing key is seen.
    """

    def __init__(self, obj: Optional[JsonObject] = None, index: int = 0) -> None:
        self._obj = obj
        self._keys: tuple[str, ...] = tuple(obj.keys()) if obj is not None else ()
        self._index = index

    @property
    def at_end(self) -> bool:
        """Whether the iterator is past the last field."""
        return self._obj is None or self._index >= len(self._keys)

    def _require_field(self) -> None:
        if self.at_end:
            raise IndexError("iterator does not refer to a field")

    def advance(self) -> None:
        """Move to the next field, or to the end after the last one."""
        self._require_field()
        self._index += 1

    def peek_name(self) -> str:
        """Return the name of the current field."""
        self._require_field()
        return self._keys[self._index]

    def peek_value(self) -> Optional[JsonValue]:
        """Return the value of the current field without changing its reference count."""
        self._require_field()
        return self._obj.get(self._keys[self._index])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ObjectIterator):
            return NotImplemented
        if self.at_end or other.at_end:
            return self.at_end and other.at_end
        return self._obj is other._obj and self._index == other._index

    __hash__ = None  # type: ignore[assignment]


def _check_object(obj: object) -> JsonObject:
    if not isinstance(obj, JsonObject):
        raise TypeError("expected a JSON object")
    return obj


def iter_begin(obj: JsonObject) -> ObjectIterator:
    """Return an iterator at the first field; equal to the end one if there are none."""
    return ObjectIterator(_check_object(obj), 0)


def iter_end(obj: JsonObject) -> ObjectIterator:
    """Return the iterator for the position past the last field."""
    checked = _check_object(obj)
    return ObjectIterator(checked, len(checked))


def iter_init_default() -> ObjectIterator:
    """Return an iterator that refers to no field of any object."""
    return ObjectIterator()