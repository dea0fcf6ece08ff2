from __future__ import annotations

# Plain JSON values as produced by `read_json`: objects keep every key/value pair in order
# (duplicates included), and non-integer numbers are parsed as exact `Decimal`.

import json
from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any


class JsonObject(dict):
    """JSON object that remembers every key/value pair it was read from.

    Behaves as a regular dict (a repeated key keeps its last value), while $pairs keeps all
    pairs in document order so callers can detect duplicated or ambiguous keys.
    """

    def __init__(self, pairs: Iterable[tuple[str, Any]] = ()):
        pairs = tuple(pairs)
        super().__init__(pairs)
        self._pairs = pairs

    @property
    def pairs(self) -> tuple[tuple[str, Any], ...]:
        return self._pairs

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._pairs)!r})"


def object_pairs(value: Mapping) -> list[tuple[Any, Any]]:
    """Return all key/value pairs of $value, including duplicates kept by `JsonObject`."""
    if isinstance(value, JsonObject):
        return list(value.pairs)
    return list(value.items())


def read_json(text: str | bytes) -> Any:
    """Parse JSON $text into plain values without losing precision.

    Numbers with a fraction or exponent become `Decimal`, and the non-standard constants
    NaN/Infinity/-Infinity become the matching `Decimal` so callers can reject them.

    Raises:
        json.JSONDecodeError: If $text is not valid JSON.
    """
    return json.loads(
        text,
        object_pairs_hook=JsonObject,
        parse_float=Decimal,
        parse_constant=Decimal,
    )


def json_type_name(value: Any) -> str:
    """Name the JSON type of a plain value, as used in error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float, Decimal)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__
