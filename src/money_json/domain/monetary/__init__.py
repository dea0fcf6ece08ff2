"""Monetary domain package.

This package contains the `Currency` descriptor with its registry of predefined currencies,
the `Money` value type and the `CurrencyResolver` interface used by the JSON codec.
"""

from money_json.domain.monetary.currency import Currency, CurrencyType, UnknownCurrencyCodeError
from money_json.domain.monetary.currency_resolver import CurrencyResolver, RegistryCurrencyResolver
from money_json.domain.monetary.money import Money
from money_json.domain.monetary import currency_registry  # noqa: F401  (registers predefined currencies)

__all__ = [
    "Currency",
    "CurrencyType",
    "UnknownCurrencyCodeError",
    "CurrencyResolver",
    "RegistryCurrencyResolver",
    "Money",
]
