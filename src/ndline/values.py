"""The closed JSON value model.

Two forms of the same six-variant union are used throughout ndline:

- **plain** (:data:`JsonValue`) — ``None``, ``bool``, ``int``, ``float``,
  ``str``, ``list`` and ``dict`` exactly as :mod:`json` produces them.
  Decoding returns this form.
- **tagged** (:data:`StructuredValue`) — one frozen dataclass per variant.
  ``from_python()`` is the only place a value outside the closed type is
  rejected, so the encoder can trust whatever comes out of it.

Example::

    >>> from_python({"id": 1, "tags": ["a"]})
    JsonObject(members={'id': JsonNumber(value=1), 'tags': JsonArray(items=(JsonString(value='a'),))})
    >>> to_python(JsonArray((JsonNull(), JsonBool(True))))
    [None, True]
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Union, assert_never

JsonValue = Union[None, bool, int, float, str, list["JsonValue"], dict[str, "JsonValue"]]


@dataclass(frozen=True)
class JsonNull:
    pass


@dataclass(frozen=True)
class JsonBool:
    value: bool


@dataclass(frozen=True)
class JsonNumber:
    value: int | float


@dataclass(frozen=True)
class JsonString:
    value: str


@dataclass(frozen=True)
class JsonArray:
    items: tuple[StructuredValue, ...] = ()


@dataclass(frozen=True)
class JsonObject:
    """Insertion-ordered mapping of string keys to values."""

    members: dict[str, StructuredValue] = field(default_factory=dict)


StructuredValue = Union[JsonNull, JsonBool, JsonNumber, JsonString, JsonArray, JsonObject]

_TAGGED = (JsonNull, JsonBool, JsonNumber, JsonString, JsonArray, JsonObject)


def from_python(obj: Any) -> StructuredValue:
    """Convert a plain Python value into its tagged form.

    Already-tagged values pass through unchanged.  Tuples are accepted as
    arrays.

    Raises:
        TypeError:  *obj* (or something nested in it) is not a JSON type,
                    or an object key is not a string.
        ValueError: a float is NaN or infinite.
    """
    if isinstance(obj, _TAGGED):
        return obj
    if obj is None:
        return JsonNull()
    # bool before int: bool is an int subclass.
    if isinstance(obj, bool):
        return JsonBool(obj)
    if isinstance(obj, int):
        return JsonNumber(int(obj))
    if isinstance(obj, float):
        if not math.isfinite(obj):
            raise ValueError(f"out of range float is not JSON: {obj!r}")
        return JsonNumber(obj)
    if isinstance(obj, str):
        return JsonString(obj)
    if isinstance(obj, (list, tuple)):
        return JsonArray(tuple(from_python(item) for item in obj))
    if isinstance(obj, dict):
        members: dict[str, StructuredValue] = {}
        for key, val in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"object keys must be str, got {type(key).__name__}")
            members[key] = from_python(val)
        return JsonObject(members)
    raise TypeError(f"{type(obj).__name__} is not a JSON value")


def to_python(value: StructuredValue) -> JsonValue:
    """Convert a tagged value back to the plain form :mod:`json` understands."""
    if isinstance(value, JsonNull):
        return None
    if isinstance(value, (JsonBool, JsonNumber, JsonString)):
        return value.value
    if isinstance(value, JsonArray):
        return [to_python(item) for item in value.items]
    if isinstance(value, JsonObject):
        return {key: to_python(val) for key, val in value.members.items()}
    assert_never(value)
