"""
JSON value model the conversion engine builds into.

Four variants, mirroring what Goessner's mapping can produce:

- JsonNull    -> empty element
- JsonString  -> attribute values, text, CDATA
- JsonArray   -> repeated sibling elements, in document order
- JsonObject  -> everything else, keys kept in insertion order

Values are plain owned trees (no back-references, no sharing between
siblings). `to_python()` turns any value into None/str/list/dict so the
standard `json` module can render it.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional, Tuple


class JsonValue:
    """Base class of the value model."""

    __slots__ = ()

    def to_python(self) -> Any:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_python()!r})"


class JsonNull(JsonValue):
    __slots__ = ()

    def to_python(self) -> None:
        return None

    def __eq__(self, other: object) -> bool:
        return isinstance(other, JsonNull)

    def __hash__(self) -> int:
        return hash(None)


class JsonString(JsonValue):
    __slots__ = ("value",)

    def __init__(self, value: str):
        if not isinstance(value, str):
            raise TypeError(f"JsonString needs a str, got {type(value).__name__}")
        self.value = value

    def to_python(self) -> str:
        return self.value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, JsonString) and other.value == self.value

    def __hash__(self) -> int:
        return hash(self.value)


class JsonArray(JsonValue):
    __slots__ = ("_items",)

    def __init__(self, items: Optional[List[JsonValue]] = None):
        self._items: List[JsonValue] = []
        for item in items or ():
            self.append(item)

    def append(self, value: JsonValue) -> None:
        if not isinstance(value, JsonValue):
            raise TypeError(f"JsonArray items must be JsonValue, got {type(value).__name__}")
        self._items.append(value)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(self._items)

    def __getitem__(self, index: int) -> JsonValue:
        return self._items[index]

    def to_python(self) -> List[Any]:
        return _to_python(self)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, JsonArray) and _equal(self, other)

    __hash__ = None  # type: ignore[assignment]


class JsonObject(JsonValue):
    """Ordered string-keyed mapping with upsert semantics.

    `set` on an existing key replaces its value and keeps the key where it
    was first inserted; a new key is appended. Equality is order-sensitive.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Optional[List[Tuple[str, JsonValue]]] = None):
        self._entries: Dict[str, JsonValue] = {}
        for key, value in entries or ():
            self.set(key, value)

    def set(self, key: str, value: JsonValue) -> bool:
        """Insert or overwrite `key`. Returns True when a value was replaced."""
        if not isinstance(key, str):
            raise TypeError(f"JsonObject keys must be str, got {type(key).__name__}")
        if not isinstance(value, JsonValue):
            raise TypeError(f"JsonObject values must be JsonValue, got {type(value).__name__}")
        replaced = key in self._entries
        self._entries[key] = value
        return replaced

    def get(self, key: str, default: Optional[JsonValue] = None) -> Optional[JsonValue]:
        return self._entries.get(key, default)

    def keys(self) -> List[str]:
        return list(self._entries)

    def items(self) -> List[Tuple[str, JsonValue]]:
        return list(self._entries.items())

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __getitem__(self, key: str) -> JsonValue:
        return self._entries[key]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def to_python(self) -> Dict[str, Any]:
        return _to_python(self)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, JsonObject) and _equal(self, other)

    __hash__ = None  # type: ignore[assignment]


# Containers are walked with an explicit stack, never recursively, so deep
# documents stay within the interpreter's recursion limit.
_CONTAINERS = (JsonArray, JsonObject)


def _shell(value: JsonValue) -> Any:
    if isinstance(value, JsonArray):
        return []
    if isinstance(value, JsonObject):
        return {}
    return value.to_python()


def _to_python(value: JsonValue) -> Any:
    result = _shell(value)
    stack = [(value, result)]
    while stack:
        source, target = stack.pop()
        if isinstance(source, JsonArray):
            for item in source._items:
                plain = _shell(item)
                target.append(plain)
                if isinstance(item, _CONTAINERS):
                    stack.append((item, plain))
        elif isinstance(source, JsonObject):
            for key, item in source._entries.items():
                plain = _shell(item)
                target[key] = plain
                if isinstance(item, _CONTAINERS):
                    stack.append((item, plain))
    return result


def _equal(left: JsonValue, right: JsonValue) -> bool:
    stack = [(left, right)]
    while stack:
        a, b = stack.pop()
        if isinstance(a, JsonArray):
            if not isinstance(b, JsonArray) or len(a._items) != len(b._items):
                return False
            stack.extend(zip(a._items, b._items))
        elif isinstance(a, JsonObject):
            # Order-sensitive: same keys in the same order.
            if not isinstance(b, JsonObject) or list(a._entries) != list(b._entries):
                return False
            stack.extend((value, b._entries[key]) for key, value in a._entries.items())
        elif a != b:
            return False
    return True


def _empty(data: Any) -> JsonValue:
    if data is None:
        return JsonNull()
    if isinstance(data, str):
        return JsonString(data)
    if isinstance(data, (list, tuple)):
        return JsonArray()
    if isinstance(data, dict):
        return JsonObject()
    raise TypeError(f"Cannot represent {type(data).__name__} in the JSON value model")


def from_python(data: Any) -> JsonValue:
    """Build a JsonValue from None/str/list/dict, nested to any depth."""
    root = _empty(data)
    stack = [(data, root)]
    while stack:
        source, target = stack.pop()
        if isinstance(source, (list, tuple)):
            for item in source:
                value = _empty(item)
                target.append(value)
                stack.append((item, value))
        elif isinstance(source, dict):
            for key, item in source.items():
                value = _empty(item)
                target.set(key, value)
                stack.append((item, value))
    return root
