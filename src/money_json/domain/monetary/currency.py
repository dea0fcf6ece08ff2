from __future__ import annotations

from enum import Enum
from typing import ClassVar


class CurrencyType(Enum):
    """Enumeration of currency types."""

    FIAT = "FIAT"
    CRYPTO = "CRYPTO"
    COMMODITY = "COMMODITY"


class UnknownCurrencyCodeError(ValueError):
    """Raised when a currency code has no entry in the currency registry."""

    def __init__(self, code: str, available_codes: list[str]):
        self.code = code
        self.available_codes = available_codes
        super().__init__(f"Currency with code '{code}' not found in registry. Available currencies: {available_codes}")


class Currency:
    """Currency descriptor identified by a short alphabetic code.

    Instances are immutable. Two currencies are equal when their codes are equal.

    Attributes:
        code (str): Currency code (e.g., "USD", "BTC"), stored upper-case.
        precision (int): Number of decimal places commonly used for the currency (0-18).
        name (str): Full currency name.
        currency_type (CurrencyType): Type of currency (FIAT, CRYPTO, COMMODITY).
    """

    __slots__ = ("_code", "_precision", "_name", "_currency_type")

    # Class-level registry of known currencies, keyed by upper-case code
    _registry: ClassVar[dict[str, Currency]] = {}

    def __init__(self, code: str, precision: int, name: str, currency_type: CurrencyType):
        """Initialize a Currency instance.

        Args:
            code (str): Currency code (e.g., "USD", "BTC").
            precision (int): Number of decimal places (0-18).
            name (str): Full currency name.
            currency_type (CurrencyType): Type of currency.

        Raises:
            ValueError: If parameters are invalid.
            TypeError: If currency_type is not CurrencyType instance.
        """
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

        if not isinstance(precision, int) or isinstance(precision, bool) or precision < 0 or precision > 18:
            raise ValueError(f"$precision must be an integer between 0 and 18, but provided value is: {precision}")

        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        if not isinstance(currency_type, CurrencyType):
            raise TypeError(f"$currency_type must be a CurrencyType instance, but provided value is: {currency_type}")

        self._code = code.upper().strip()
        self._precision = precision
        self._name = name.strip()
        self._currency_type = currency_type

    @property
    def code(self) -> str:
        return self._code

    @property
    def precision(self) -> int:
        return self._precision

    @property
    def name(self) -> str:
        return self._name

    @property
    def currency_type(self) -> CurrencyType:
        return self._currency_type

    # region Registry

    @classmethod
    def register(cls, currency: Currency, overwrite: bool = False) -> None:
        """Register a currency in the global registry.

        Args:
            currency (Currency): The currency to register.
            overwrite (bool): Whether to overwrite existing currency.

        Raises:
            ValueError: If currency already exists and overwrite is False.
            TypeError: If currency is not Currency instance.
        """
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        if currency.code in cls._registry and not overwrite:
            raise ValueError(f"Currency with code '{currency.code}' already exists in registry. Use overwrite=True to replace it.")

        cls._registry[currency.code] = currency

    @classmethod
    def unregister(cls, code: str) -> None:
        """Remove the currency registered under $code.

        Raises:
            UnknownCurrencyCodeError: If $code is not registered.
        """
        normalized = code.upper().strip()
        if normalized not in cls._registry:
            raise UnknownCurrencyCodeError(code, cls.registered_codes())

        del cls._registry[normalized]

    @classmethod
    def registered_codes(cls) -> list[str]:
        """Return codes of all registered currencies, sorted."""
        return sorted(cls._registry)

    @classmethod
    def from_str(cls, code: str) -> Currency:
        """Get currency from registry by code.

        Lookup is case-insensitive and ignores surrounding whitespace.

        Args:
            code (str): Currency code to look up.

        Returns:
            Currency: The registered currency instance.

        Raises:
            TypeError: If $code is not a string.
            UnknownCurrencyCodeError: If currency code is not found in registry.
        """
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code}")

        normalized = code.upper().strip()
        currency = cls._registry.get(normalized)
        if currency is None:
            raise UnknownCurrencyCodeError(code, cls.registered_codes())

        return currency

    # endregion

    def __eq__(self, other) -> bool:
        if not isinstance(other, Currency):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.code}', {self.precision}, '{self.name}', {self.currency_type})"
