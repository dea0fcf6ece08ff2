from __future__ import annotations

from typing import Any, Protocol, TypeVar

T = TypeVar("T")


# region Interface


class JsonCodec(Protocol[T]):
    """Capability interface a codec exposes to the JSON glue.

    A codec converts one logical type to and from plain JSON values (dict, list, str, int,
    Decimal, bool, None). The glue picks a codec by asking `supports` and never relies on
    inheritance from a framework base class.
    """

    def supports(self, value_type: type) -> bool:
        """Return True when this codec converts instances of $value_type."""
        ...

    def encode(self, value: T) -> Any:
        """Convert $value into a plain JSON value."""
        ...

    def decode(self, value: Any) -> T | None:
        """Convert plain JSON $value back into the logical type.

        Returns None when $value is JSON null.

        Raises:
            DecodeError: If $value has the wrong shape or content.
        """
        ...


# endregion
