"""Errors raised while decoding JSON values into domain objects."""

from __future__ import annotations


class DecodeError(Exception):
    """Base class for all decode failures. Each failure is terminal for the decode call."""


class ShapeMismatchError(DecodeError):
    """Raised when the input is neither JSON null nor a JSON object."""

    def __init__(self, actual_type: str):
        self.actual_type = actual_type
        super().__init__(f"Expected a JSON object or null, but got {actual_type}")


class MissingFieldError(DecodeError):
    """Raised when a required field is absent, or present more than once (ambiguous)."""

    def __init__(self, field_name: str, match_count: int = 0):
        self.field_name = field_name
        self.match_count = match_count
        if match_count > 1:
            message = f"Field '{field_name}' needs to be defined exactly once, but it matched {match_count} keys"
        else:
            message = f"Field '{field_name}' needs to be defined"
        super().__init__(message)


class InvalidAmountError(DecodeError):
    """Raised when the amount field is present but is not a finite decimal number."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Field 'amount' must be a decimal number, but provided value is: {value!r}")


class UnknownCurrencyError(DecodeError):
    """Raised when the currency field holds a code that cannot be resolved."""

    def __init__(self, code: object):
        self.code = code
        super().__init__(f"Field 'currency' holds unknown currency code: {code!r}")


class UnsupportedTypeError(TypeError):
    """Raised when no registered codec supports the requested type."""

    def __init__(self, value_type: type):
        self.value_type = value_type
        super().__init__(f"No JSON codec registered for type {value_type.__name__}")
