from __future__ import annotations

from typing import Protocol

from money_json.domain.monetary.currency import Currency


# region Interface


class CurrencyResolver(Protocol):
    """Maps a currency code to a `Currency` descriptor.

    Implementations must be safe for concurrent read-only use.
    """

    def resolve(self, code: str) -> Currency:
        """Return the currency identified by $code.

        Raises:
            UnknownCurrencyCodeError: If $code has no matching currency.
        """
        ...


# endregion


class RegistryCurrencyResolver(CurrencyResolver):
    """Resolves codes through the class-level `Currency` registry.

    Lookup is case-insensitive, so "usd" and "USD" resolve to the same currency.
    """

    __slots__ = ()

    def resolve(self, code: str) -> Currency:
        """Implements: CurrencyResolver.resolve"""
        return Currency.from_str(code)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
