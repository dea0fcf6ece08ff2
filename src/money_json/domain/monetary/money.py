from __future__ import annotations

from decimal import Decimal, InvalidOperation

from money_json.domain.monetary.currency import Currency
from money_json.utils.numeric_tools import DecimalLike, NotANumberError, as_decimal, require_decimal_in_range


class Money:
    """Immutable monetary amount bound to a currency.

    The amount is stored exactly as given: it is never rounded to the currency precision and
    its exponent is preserved, so `Money("12.50", USD).value` keeps the trailing zero.
    Floats are converted via `str` to keep binary noise out of the amount.
    """

    __slots__ = ("_value", "_currency")

    def __init__(self, value: DecimalLike, currency: Currency):
        """Initialize Money with value and currency.

        Args:
            value: Numeric value (Decimal-like scalar).
            currency (Currency): Currency object.

        Raises:
            ValueError: If value is not a finite decimal within the supported range.
            TypeError: If currency is not Currency instance.
        """
        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        # Raise: bool is an int subclass but never an amount
        if isinstance(value, bool):
            raise ValueError(f"Cannot init `Money` because $value ({value}) is a bool")

        # Raise: $value must be convertible to Decimal
        try:
            decimal_value = as_decimal(value)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Cannot init `Money` because $value ({value}) cannot be converted to Decimal") from e

        # Raise: NaN, Infinity and out-of-range values are not amounts
        try:
            require_decimal_in_range(decimal_value)
        except NotANumberError as e:
            raise ValueError(f"Cannot init `Money` because $value ({value}) is not a supported amount: {e.reason}") from e

        self._value = decimal_value
        self._currency = currency

    @property
    def value(self) -> Decimal:
        """Get the decimal value."""
        return self._value

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    def __eq__(self, other) -> bool:
        """Equal when currencies match and amounts are numerically equal (12.5 == 12.50)."""
        if not isinstance(other, Money):
            return False
        if self.currency != other.currency:
            return False
        return self.value == other.value

    def __hash__(self) -> int:
        return hash((self.value, self.currency.code))

    def __str__(self) -> str:
        """Return string like '1000.50 USD'."""
        return f"{self.value} {self.currency.code}"

    def __repr__(self) -> str:
        """Return string like 'Money(1000.50, USD)'."""
        return f"{self.__class__.__name__}({self.value}, {self.currency.code})"

    @classmethod
    def from_str(cls, value_str: str) -> Money:
        """Parse Money from string like '1000.50 USD'.

        Args:
            value_str (str): String representation.

        Returns:
            Money: Money object.

        Raises:
            ValueError: If string format is invalid.
        """
        value_str = value_str.strip()
        if not value_str:
            raise ValueError("Value string with $value_str = '' cannot be empty")

        parts = value_str.split()
        if len(parts) != 2:
            raise ValueError(f"Value string with $value_str = '{value_str}' must be in format 'value currency_code'")

        value_part, currency_part = parts

        try:
            value = Decimal(value_part)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Invalid value part '{value_part}' in string '{value_str}'") from e

        try:
            currency = Currency.from_str(currency_part)
        except ValueError as e:
            raise ValueError(f"Invalid currency part '{currency_part}' in string '{value_str}'") from e

        return cls(value, currency)
