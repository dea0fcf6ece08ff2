from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import TypeAlias

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float

# Plain or exponent notation, '.' as the only decimal separator, no grouping, no underscores
_INVARIANT_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

# Supported amount range: at most 29 integer digits (|value| < 1E+29) and at most 28 fractional digits
MAX_INTEGER_DIGITS = 29
MAX_FRACTION_DIGITS = 28


class NotANumberError(ValueError):
    """Raised when a value cannot be formatted or parsed as a finite invariant decimal."""

    def __init__(self, value: object, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Value {value!r} is not a valid decimal number: {reason}")


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.
    """
    if isinstance(value, Decimal):
        return value

    return Decimal(str(value))


def format_decimal(value: Decimal) -> str:
    """Format $value as a locale-independent decimal string.

    Output uses positional notation only (never an exponent), '.' as the decimal point and
    no grouping separators. Trailing zeros are kept, so `Decimal("12.50")` formats as "12.50".

    Args:
        value: Finite decimal to format.

    Returns:
        Invariant string representation of $value.

    Raises:
        NotANumberError: If $value is not a `Decimal`, is not finite or is out of range.
    """
    # Raise: only exact decimals can be formatted without loss
    if not isinstance(value, Decimal):
        raise NotANumberError(value, f"expected Decimal, got {type(value).__name__}")

    require_decimal_in_range(value)
    return format(value, "f")


def parse_decimal(text: str) -> Decimal:
    """Parse $text into an exact `Decimal`, independent of any locale setting.

    Accepts an optional sign, digits with an optional '.' fraction and an optional exponent.
    Surrounding whitespace is ignored. Grouping separators, ',' as a decimal point,
    underscores, NaN and Infinity are rejected.

    Args:
        text: String to parse.

    Returns:
        Parsed decimal with its exponent preserved ("12.50" stays `Decimal("12.50")`).

    Raises:
        NotANumberError: If $text is not a string, is not an invariant decimal or is out of range.
    """
    if not isinstance(text, str):
        raise NotANumberError(text, f"expected str, got {type(text).__name__}")

    stripped = text.strip()
    if not _INVARIANT_DECIMAL_PATTERN.fullmatch(stripped):
        raise NotANumberError(text, "not an invariant decimal literal")

    try:
        value = Decimal(stripped)
    except InvalidOperation as e:
        raise NotANumberError(text, "decimal conversion failed") from e

    require_decimal_in_range(value)
    return value


def require_decimal_in_range(value: Decimal) -> None:
    """Check that $value is finite and within the supported amount range.

    The range keeps positional formatting bounded: at most `MAX_INTEGER_DIGITS` integer digits
    and `MAX_FRACTION_DIGITS` fractional digits, so "1e50000000" is rejected before anything
    expands it.

    Raises:
        NotANumberError: If $value is NaN, Infinity or outside the supported range.
    """
    # Raise: NaN and Infinity have no positional representation
    if not value.is_finite():
        raise NotANumberError(value, "value is not finite")

    # Raise: adjusted() is the exponent of the most significant digit (zero reports its exponent)
    if value.adjusted() >= MAX_INTEGER_DIGITS:
        raise NotANumberError(value, f"value has more than {MAX_INTEGER_DIGITS} integer digits")

    if value.as_tuple().exponent < -MAX_FRACTION_DIGITS:
        raise NotANumberError(value, f"value has more than {MAX_FRACTION_DIGITS} fractional digits")
