from __future__ import annotations

# Glue between codecs and the standard `json` module: a type-to-codec table plus
# `dumps`/`loads` helpers that dispatch through it.

import json
import logging
from decimal import Decimal
from typing import Any, Optional

from money_json.serialization.errors import UnsupportedTypeError
from money_json.serialization.json_values import read_json
from money_json.serialization.money_codec import MoneyJsonCodec
from money_json.serialization.protocol import JsonCodec
from money_json.utils.numeric_tools import format_decimal

logger = logging.getLogger(__name__)


class CodecRegistry:
    """Ordered table of codecs. The first codec whose `supports` accepts a type wins."""

    def __init__(self) -> None:
        self._codecs: list[JsonCodec] = []

    def register(self, codec: JsonCodec) -> None:
        """Append $codec to the table.

        Raises:
            ValueError: If the same codec instance is already registered.
        """
        if any(existing is codec for existing in self._codecs):
            raise ValueError(f"Cannot call `register` because $codec ({codec!r}) is already registered")

        self._codecs.append(codec)
        logger.debug(f"CodecRegistry registered codec {codec.__class__.__name__}")

    def find(self, value_type: type) -> Optional[JsonCodec]:
        """Return the first codec supporting $value_type, or None."""
        for codec in self._codecs:
            if codec.supports(value_type):
                return codec
        return None

    def require(self, value_type: type) -> JsonCodec:
        """Return the codec for $value_type.

        Raises:
            UnsupportedTypeError: If no registered codec supports $value_type.
        """
        codec = self.find(value_type)
        if codec is None:
            raise UnsupportedTypeError(value_type)
        return codec

    @property
    def codecs(self) -> tuple[JsonCodec, ...]:
        return tuple(self._codecs)

    def __len__(self) -> int:
        return len(self._codecs)

    def __repr__(self) -> str:
        names = ", ".join(codec.__class__.__name__ for codec in self._codecs)
        return f"{self.__class__.__name__}([{names}])"


def default_registry() -> CodecRegistry:
    """Create a new registry with `MoneyJsonCodec` registered."""
    registry = CodecRegistry()
    registry.register(MoneyJsonCodec())
    return registry


class CodecJSONEncoder(json.JSONEncoder):
    """`json.JSONEncoder` that serializes registered types through their codecs.

    Plain `Decimal` values are written as invariant decimal strings to keep their precision.
    """

    def __init__(self, *args, registry: Optional[CodecRegistry] = None, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._registry = registry if registry is not None else default_registry()

    def default(self, o: Any) -> Any:
        codec = self._registry.find(type(o))
        if codec is not None:
            return codec.encode(o)
        if isinstance(o, Decimal):
            return format_decimal(o)
        return super().default(o)


def dumps(obj: Any, registry: Optional[CodecRegistry] = None, **kwargs) -> str:
    """Serialize $obj to compact JSON text, encoding registered types through their codecs.

    Extra $kwargs are passed to `json.dumps` (e.g. `indent`, `sort_keys`).
    """
    kwargs.setdefault("separators", (",", ":"))
    return json.dumps(obj, cls=CodecJSONEncoder, registry=registry, **kwargs)


def loads(text: str | bytes, target_type: Optional[type] = None, registry: Optional[CodecRegistry] = None) -> Any:
    """Parse JSON $text; when $target_type is given, decode the top-level value with its codec.

    Without $target_type the plain values from `read_json` are returned.

    Raises:
        json.JSONDecodeError: If $text is not valid JSON.
        UnsupportedTypeError: If no codec supports $target_type.
        DecodeError: If the codec rejects the parsed value.
    """
    parsed = read_json(text)
    if target_type is None:
        return parsed

    registry = registry if registry is not None else default_registry()
    return registry.require(target_type).decode(parsed)
