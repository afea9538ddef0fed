"""A small JSON value model with typed accessors and defaults."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator, Mapping
from enum import IntEnum
from typing import Any

_UINT64_MAX = (1 << 64) - 1
_INT64_MIN = -(1 << 63)


class JsonType(IntEnum):
    """Kind of value held by a :class:`JsonValue`."""

    NULL = 0x00
    BOOL = 0x01
    DOUBLE = 0x02
    STRING = 0x03
    ARRAY = 0x04
    OBJECT = 0x05
    INT = 0x06
    UNDEFINED = 0x80


def _wrap(value: Any) -> JsonValue:
    return value if isinstance(value, JsonValue) else JsonValue(value)


class JsonValue:
    """An immutable JSON value.

    Integers are kept as unsigned 64-bit numbers, so negative integers wrap.
    Arrays and objects are copied in and copied out.
    """

    __slots__ = ("_type", "_value")

    def __init__(self, value: Any = None) -> None:
        if value is None:
            self._type, self._value = JsonType.NULL, None
        elif isinstance(value, JsonType):
            self._type, self._value = value, None
        elif isinstance(value, JsonValue):
            self._type, self._value = value._type, value._value
        elif isinstance(value, bool):
            self._type, self._value = JsonType.BOOL, value
        elif isinstance(value, int):
            self._type, self._value = JsonType.INT, value & _UINT64_MAX
        elif isinstance(value, float):
            self._type, self._value = JsonType.DOUBLE, value
        elif isinstance(value, str):
            self._type, self._value = JsonType.STRING, value
        elif isinstance(value, JsonArray):
            self._type, self._value = JsonType.ARRAY, JsonArray(value)
        elif isinstance(value, JsonObject):
            self._type, self._value = JsonType.OBJECT, JsonObject(value)
        elif isinstance(value, (list, tuple)):
            self._type, self._value = JsonType.ARRAY, JsonArray(value)
        elif isinstance(value, Mapping):
            self._type, self._value = JsonType.OBJECT, JsonObject(value)
        else:
            raise TypeError(f"cannot hold a value of type {type(value).__name__}")

    @property
    def type(self) -> JsonType:
        return self._type

    @property
    def is_null(self) -> bool:
        return self._type is JsonType.NULL

    @property
    def is_bool(self) -> bool:
        return self._type is JsonType.BOOL

    @property
    def is_double(self) -> bool:
        return self._type is JsonType.DOUBLE

    @property
    def is_string(self) -> bool:
        return self._type is JsonType.STRING

    @property
    def is_array(self) -> bool:
        return self._type is JsonType.ARRAY

    @property
    def is_object(self) -> bool:
        return self._type is JsonType.OBJECT

    @property
    def is_int(self) -> bool:
        return self._type is JsonType.INT

    @property
    def is_undefined(self) -> bool:
        return self._type is JsonType.UNDEFINED

    def to_bool(self, default: bool = False) -> bool:
        return self._value if self._type is JsonType.BOOL else default

    def to_int(self, default: int = 0) -> int:
        return self._value if self._type is JsonType.INT else default

    def to_double(self, default: float = 0.0) -> float:
        return self._value if self._type is JsonType.DOUBLE else default

    def to_string(self, default: str = "") -> str:
        return self._value if self._type is JsonType.STRING else default

    def to_array(self, default: JsonArray | None = None) -> JsonArray:
        if self._type is JsonType.ARRAY and self._value is not None:
            return JsonArray(self._value)
        return JsonArray(default) if default is not None else JsonArray()

    def to_object(self, default: JsonObject | None = None) -> JsonObject:
        if self._type is JsonType.OBJECT and self._value is not None:
            return JsonObject(self._value)
        return JsonObject(default) if default is not None else JsonObject()

    def _to_plain(self) -> Any:
        if self._type in (JsonType.BOOL, JsonType.DOUBLE, JsonType.STRING, JsonType.INT):
            return self._value
        if self._type is JsonType.ARRAY:
            if not self._value:
                return None
            return [item._to_plain() for item in self._value]
        if self._type is JsonType.OBJECT:
            if not self._value:
                return None
            return {key: self._value[key]._to_plain() for key in self._value.keys()}
        return None

    def to_json(self) -> str:
        """Serialise compactly with a trailing newline; null or empty gives ""."""
        plain = self._to_plain()
        if plain is None:
            return ""
        text = json.dumps(plain, separators=(",", ":"), ensure_ascii=False, sort_keys=True)
        return text + "\n"

    @classmethod
    def from_json(cls, text: str) -> JsonValue:
        """Parse JSON text.

        Only a top-level object or array yields a value; anything else,
        including text that does not parse, yields null. Array elements are
        parsed as documents of their own, so scalar elements become null.
        Null members of objects are dropped.
        """
        try:
            parsed = json.loads(text)
            return cls._from_document(parsed)
        except (ValueError, OverflowError, RecursionError):
            return cls()

    @classmethod
    def _from_document(cls, parsed: Any) -> JsonValue:
        if isinstance(parsed, dict):
            members: dict[str, JsonValue] = {}
            for key, item in parsed.items():
                if isinstance(item, (dict, list)):
                    members[key] = cls._from_document(item)
                else:
                    member = cls._from_scalar(item)
                    if member is not None:
                        members[key] = member
            return cls(JsonObject(members))
        if isinstance(parsed, list):
            return cls(JsonArray(cls._from_document(item) for item in parsed))
        return cls()

    @classmethod
    def _from_scalar(cls, item: Any) -> JsonValue | None:
        if item is None:
            return None
        if isinstance(item, int) and not isinstance(item, bool):
            if _INT64_MIN <= item <= _UINT64_MAX:
                return cls(item)
            return cls(float(item))
        return cls(item)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonValue):
            return NotImplemented
        return self._type is other._type and self._value == other._value

    def __repr__(self) -> str:
        return f"JsonValue({self._type.name}, {self._value!r})"


class JsonObject:
    """A mapping of string keys to :class:`JsonValue`, iterated in key order."""

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, Any] | JsonObject | None = None) -> None:
        self._values: dict[str, JsonValue] = {}
        if values is None:
            return
        source = values._values if isinstance(values, JsonObject) else values
        for key, value in source.items():
            self[key] = value

    def keys(self) -> list[str]:
        return sorted(self._values)

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def __getitem__(self, key: str) -> JsonValue:
        return self._values.get(key, JsonValue())

    def __setitem__(self, key: str, value: Any) -> None:
        if not isinstance(key, str):
            raise TypeError("object keys must be strings")
        self._values[key] = _wrap(value)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonObject):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"JsonObject({self._values!r})"


class JsonArray:
    """An ordered sequence of :class:`JsonValue`."""

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[Any] | None = None) -> None:
        self._values: list[JsonValue] = [_wrap(v) for v in (values or ())]

    def append(self, value: Any) -> None:
        self._values.append(_wrap(value))

    def remove_at(self, index: int) -> None:
        """Remove the element at ``index``; out-of-range indexes are ignored."""
        if 0 <= index < len(self._values):
            del self._values[index]

    def __getitem__(self, index: int) -> JsonValue:
        if 0 <= index < len(self._values):
            return self._values[index]
        return JsonValue()

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonArray):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"JsonArray({self._values!r})"