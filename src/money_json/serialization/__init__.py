"""JSON serialization of domain values: codecs, decode errors and `json` module glue."""

from money_json.serialization.errors import (
    DecodeError,
    InvalidAmountError,
    MissingFieldError,
    ShapeMismatchError,
    UnknownCurrencyError,
    UnsupportedTypeError,
)
from money_json.serialization.json_support import CodecJSONEncoder, CodecRegistry, default_registry, dumps, loads
from money_json.serialization.json_values import JsonObject, read_json
from money_json.serialization.money_codec import MoneyJsonCodec
from money_json.serialization.protocol import JsonCodec

__all__ = [
    "DecodeError",
    "InvalidAmountError",
    "MissingFieldError",
    "ShapeMismatchError",
    "UnknownCurrencyError",
    "UnsupportedTypeError",
    "CodecJSONEncoder",
    "CodecRegistry",
    "default_registry",
    "dumps",
    "loads",
    "JsonObject",
    "read_json",
    "MoneyJsonCodec",
    "JsonCodec",
]
