from __future__ import annotations

import json
from decimal import Decimal

import pytest

from money_json.domain.monetary.currency_registry import EUR, USD
from money_json.domain.monetary.money import Money
from money_json.serialization.errors import MissingFieldError, UnsupportedTypeError
from money_json.serialization.json_support import CodecJSONEncoder, CodecRegistry, default_registry, dumps, loads
from money_json.serialization.json_values import JsonObject
from money_json.serialization.money_codec import MoneyJsonCodec


class _UpperCaseCodec:
    """Test codec for `str` values that writes them upper-case."""

    def supports(self, value_type: type) -> bool:
        return value_type is str

    def encode(self, value: str) -> str:
        return value.upper()

    def decode(self, value):
        return None if value is None else str(value).lower()


class _AlternativeMoneyCodec:
    """Test codec that claims `Money` and writes it as a plain string."""

    def supports(self, value_type: type) -> bool:
        return issubclass(value_type, Money)

    def encode(self, value: Money) -> str:
        return str(value)

    def decode(self, value):
        return None if value is None else Money.from_str(value)


# region CodecRegistry


def test_default_registry_contains_money_codec():
    registry = default_registry()

    assert len(registry) == 1
    assert isinstance(registry.find(Money), MoneyJsonCodec)
    assert registry.find(Decimal) is None


def test_registry_first_supporting_codec_wins():
    alternative = _AlternativeMoneyCodec()
    registry = CodecRegistry()
    registry.register(alternative)
    registry.register(MoneyJsonCodec())

    assert registry.find(Money) is alternative
    assert registry.codecs[0] is alternative


def test_registry_rejects_same_codec_twice():
    codec = MoneyJsonCodec()
    registry = CodecRegistry()
    registry.register(codec)

    with pytest.raises(ValueError, match="already registered"):
        registry.register(codec)


def test_registry_require_unknown_type_raises():
    with pytest.raises(UnsupportedTypeError, match="No JSON codec registered for type Decimal") as exc_info:
        default_registry().require(Decimal)

    assert exc_info.value.value_type is Decimal
    assert isinstance(exc_info.value, TypeError)


# endregion

# region dumps


def test_dumps_money_at_top_level():
    assert dumps(Money(Decimal("12.50"), USD)) == '{"amount":"12.50","currency":"USD"}'


def test_dumps_money_nested_in_document():
    document = {
        "price": Money(Decimal("1.00"), EUR),
        "fees": [Money(Decimal("0.25"), EUR), None],
        "qty": Decimal("1.5"),
    }

    assert dumps(document) == (
        '{"price":{"amount":"1.00","currency":"EUR"},'
        '"fees":[{"amount":"0.25","currency":"EUR"},null],'
        '"qty":"1.5"}'
    )


def test_dumps_passes_extra_arguments_to_json():
    text = dumps({"b": 1, "a": Money(Decimal("2"), USD)}, sort_keys=True, indent=2)

    assert json.loads(text) == {"a": {"amount": "2", "currency": "USD"}, "b": 1}
    assert text.index('"a"') < text.index('"b"')


def test_dumps_bare_decimal_as_invariant_string():
    """Decimals outside Money keep their exact digits and never use an exponent."""
    assert dumps([Decimal("12.50"), Decimal("1E+3")]) == '["12.50","1000"]'


def test_dumps_unsupported_type_raises_type_error():
    with pytest.raises(TypeError):
        dumps({"when": object()})


def test_dumps_with_custom_registry():
    registry = CodecRegistry()
    registry.register(_AlternativeMoneyCodec())

    assert dumps([Money(Decimal("3.10"), USD)], registry=registry) == '["3.10 USD"]'


def test_encoder_class_works_with_json_module():
    text = json.dumps({"total": Money(Decimal("9.99"), USD)}, cls=CodecJSONEncoder)

    assert text == '{"total": {"amount": "9.99", "currency": "USD"}}'


# endregion

# region loads


def test_loads_with_target_type_decodes_money():
    assert loads('{"amount":"12.5","currency":"USD"}', Money) == Money(Decimal("12.5"), USD)
    assert loads("null", Money) is None


def test_loads_without_target_type_returns_plain_values():
    parsed = loads('{"amount":1.10,"tags":["a"],"amount":2}')

    assert isinstance(parsed, JsonObject)
    assert parsed == {"amount": 2, "tags": ["a"]}
    assert parsed.pairs == (("amount", Decimal("1.10")), ("tags", ["a"]), ("amount", 2))


def test_loads_decode_errors_propagate():
    with pytest.raises(MissingFieldError):
        loads('{"amount":"5","Amount":"6","currency":"USD"}', Money)


def test_loads_unsupported_target_type():
    with pytest.raises(UnsupportedTypeError):
        loads('"x"', Decimal)


def test_loads_invalid_json_raises_json_error():
    with pytest.raises(json.JSONDecodeError):
        loads("{", Money)


def test_loads_with_custom_registry():
    registry = CodecRegistry()
    registry.register(_UpperCaseCodec())

    assert loads('"ABC"', str, registry=registry) == "abc"
    assert dumps("abc", registry=registry) == '"abc"'


def test_dumps_then_loads_round_trip():
    money = Money(Decimal("10.005"), USD)

    assert loads(dumps(money), Money) == money


# endregion
