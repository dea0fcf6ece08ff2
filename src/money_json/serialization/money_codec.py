from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Optional

from money_json.domain.monetary.currency import Currency, UnknownCurrencyCodeError
from money_json.domain.monetary.currency_resolver import CurrencyResolver, RegistryCurrencyResolver
from money_json.domain.monetary.money import Money
from money_json.serialization.errors import InvalidAmountError, MissingFieldError, ShapeMismatchError, UnknownCurrencyError
from money_json.serialization.json_values import json_type_name, object_pairs, read_json
from money_json.serialization.protocol import JsonCodec
from money_json.utils.numeric_tools import NotANumberError, format_decimal, parse_decimal, require_decimal_in_range

logger = logging.getLogger(__name__)

AMOUNT_FIELD = "amount"
CURRENCY_FIELD = "currency"


class MoneyJsonCodec(JsonCodec[Money]):
    """Converts `Money` to and from the JSON object `{"amount": "<decimal>", "currency": "<code>"}`.

    Encoding always writes "amount" first and "currency" second. The amount is written as an
    invariant decimal string, never as a JSON number, so no precision is lost on the wire.

    Decoding matches field names case-insensitively and ignores unknown fields. A field that
    matches more than one key (e.g. both "amount" and "Amount") is treated as missing, so
    ambiguous input is rejected instead of picking one of the values.

    Args:
        resolver: Resolves currency codes while decoding. Defaults to the `Currency` registry.
    """

    __slots__ = ("_resolver",)

    def __init__(self, resolver: Optional[CurrencyResolver] = None) -> None:
        self._resolver = resolver if resolver is not None else RegistryCurrencyResolver()

    @property
    def resolver(self) -> CurrencyResolver:
        return self._resolver

    # region JsonCodec protocol

    def supports(self, value_type: type) -> bool:
        """Implements: JsonCodec.supports"""
        return isinstance(value_type, type) and issubclass(value_type, Money)

    def encode(self, value: Money) -> dict[str, str]:
        """Implements: JsonCodec.encode

        Args:
            value: Money to encode. Absence must be handled by the caller.

        Returns:
            Dict with keys "amount" and "currency", in this order.

        Raises:
            TypeError: If $value is not a `Money` instance.
        """
        # Raise: absence is handled before a value reaches the codec
        if not isinstance(value, Money):
            raise TypeError(f"Cannot call `encode` because $value ({value!r}) is not a Money instance")

        return {
            AMOUNT_FIELD: format_decimal(value.value),
            CURRENCY_FIELD: value.currency.code,
        }

    def decode(self, value: Any) -> Money | None:
        """Implements: JsonCodec.decode

        Args:
            value: JSON null (`None`) or a JSON object (any `Mapping`).

        Returns:
            Decoded Money, or None when $value is JSON null.

        Raises:
            ShapeMismatchError: If $value is neither null nor an object.
            MissingFieldError: If "amount" or "currency" matches zero or several keys.
            InvalidAmountError: If the amount is not a finite decimal number within the supported range.
            UnknownCurrencyError: If the currency code cannot be resolved.
        """
        if value is None:
            return None

        if not isinstance(value, Mapping):
            logger.debug(f"Cannot decode Money from JSON {json_type_name(value)}")
            raise ShapeMismatchError(json_type_name(value))

        values_by_name = self._group_by_normalized_name(value)
        raw_amount = self._require_single(values_by_name, AMOUNT_FIELD)
        raw_currency = self._require_single(values_by_name, CURRENCY_FIELD)

        amount = self._parse_amount(raw_amount)
        currency = self._resolve_currency(raw_currency)
        return Money(amount, currency)

    # endregion

    # region Text helpers

    def encode_json(self, value: Money) -> str:
        """Encode $value as compact JSON text, e.g. '{"amount":"12.50","currency":"USD"}'."""
        return json.dumps(self.encode(value), separators=(",", ":"))

    def decode_json(self, text: str | bytes) -> Money | None:
        """Parse JSON $text and decode it.

        Raises:
            ShapeMismatchError: If $text is not valid JSON or cannot be read into plain values.
            DecodeError: Any other decode failure, see `decode`.
        """
        try:
            parsed = read_json(text)
        except ValueError as e:
            # JSONDecodeError, or an integer literal longer than the int conversion limit
            logger.debug(f"Cannot decode Money because JSON text cannot be read: {e}")
            raise ShapeMismatchError("malformed JSON text") from e

        return self.decode(parsed)

    # endregion

    # region Internal helpers

    @staticmethod
    def _group_by_normalized_name(obj: Mapping) -> dict[str, list[Any]]:
        values_by_name: dict[str, list[Any]] = {}
        for key, item in object_pairs(obj):
            if not isinstance(key, str):
                continue
            values_by_name.setdefault(key.casefold(), []).append(item)
        return values_by_name

    @staticmethod
    def _require_single(values_by_name: dict[str, list[Any]], field_name: str) -> Any:
        matches = values_by_name.get(field_name, [])
        # Raise: zero matches and ambiguous multiple matches are both missing
        if len(matches) != 1:
            logger.debug(f"Cannot decode Money because field '{field_name}' matched {len(matches)} key(s)")
            raise MissingFieldError(field_name, len(matches))
        return matches[0]

    @staticmethod
    def _parse_amount(raw: Any) -> Decimal:
        # Raise: bool is an int subclass but never an amount
        if isinstance(raw, bool) or not isinstance(raw, (str, Decimal, int, float)):
            raise InvalidAmountError(raw)

        try:
            if isinstance(raw, str):
                amount = parse_decimal(raw)
            else:
                # ints go in directly, floats via str; both then pass the same range check
                amount = Decimal(raw) if isinstance(raw, (Decimal, int)) else Decimal(str(raw))
                require_decimal_in_range(amount)
        except NotANumberError as e:
            logger.debug(f"Cannot decode Money because $amount is not a supported decimal number: {e.reason}")
            raise InvalidAmountError(raw) from e

        return amount

    def _resolve_currency(self, raw: Any) -> Currency:
        # Raise: currency codes are JSON strings
        if not isinstance(raw, str):
            raise UnknownCurrencyError(raw)

        try:
            return self._resolver.resolve(raw)
        except UnknownCurrencyCodeError as e:
            logger.debug(f"Cannot decode Money because $currency ('{raw}') is not a known currency code")
            raise UnknownCurrencyError(raw) from e

    # endregion

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(resolver={self._resolver!r})"
