from __future__ import annotations

# Batch conversion between `Money` values and a pandas DataFrame with one wire record per row.
# Rows go through `MoneyJsonCodec`, so the wire format and decode errors match the JSON path.

import logging
from collections.abc import Iterable
from typing import Any, Optional

import pandas as pd

from money_json.domain.monetary.money import Money
from money_json.serialization.money_codec import AMOUNT_FIELD, CURRENCY_FIELD, MoneyJsonCodec

logger = logging.getLogger(__name__)

FRAME_COLUMNS = (AMOUNT_FIELD, CURRENCY_FIELD)


def money_to_frame(values: Iterable[Optional[Money]], codec: Optional[MoneyJsonCodec] = None) -> pd.DataFrame:
    """Encode $values into a DataFrame with string columns 'amount' and 'currency'.

    Each value becomes one row. A None entry becomes a row with both cells null.

    Args:
        values: Money values (or None) to encode, in row order.
        codec: Codec used for encoding. Defaults to a new `MoneyJsonCodec`.

    Returns:
        DataFrame with columns 'amount' and 'currency' (dtype object).
    """
    codec = codec if codec is not None else MoneyJsonCodec()

    rows = []
    for value in values:
        if value is None:
            rows.append({AMOUNT_FIELD: None, CURRENCY_FIELD: None})
        else:
            rows.append(codec.encode(value))

    return pd.DataFrame(rows, columns=list(FRAME_COLUMNS), dtype=object)


def money_from_frame(df: pd.DataFrame, codec: Optional[MoneyJsonCodec] = None) -> list[Optional[Money]]:
    """Decode every row of $df into Money.

    $df must have the columns 'amount' and 'currency'; other columns are ignored. A row
    where both cells are null decodes to None. Any other row is decoded by the codec, so a
    half-empty row raises the same `DecodeError` as the equivalent JSON object would.

    Args:
        df: Source data with one wire record per row.
        codec: Codec used for decoding. Defaults to a new `MoneyJsonCodec`.

    Returns:
        Decoded values in row order.

    Raises:
        ValueError: If $df is not a DataFrame or required columns are missing.
        DecodeError: If a row cannot be decoded.
    """
    # Check: $df must be a pandas DataFrame
    if not isinstance(df, pd.DataFrame):
        raise ValueError(f"Cannot call `money_from_frame` because $df is not a pandas DataFrame, but {type(df).__name__}")

    # Check: required columns present
    missing = [c for c in FRAME_COLUMNS if c not in df.columns]
    if missing:
        missing_cols = ", ".join(missing)
        raise ValueError(f"Cannot call `money_from_frame` because the DataFrame is missing required columns: {missing_cols}")

    codec = codec if codec is not None else MoneyJsonCodec()

    result: list[Optional[Money]] = []
    for amount, currency in zip(df[AMOUNT_FIELD], df[CURRENCY_FIELD]):
        amount = _none_if_null(amount)
        currency = _none_if_null(currency)
        if amount is None and currency is None:
            result.append(None)
            continue
        result.append(codec.decode({AMOUNT_FIELD: amount, CURRENCY_FIELD: currency}))

    logger.debug(f"Decoded {len(result)} row(s) into Money")
    return result


def _none_if_null(cell: Any) -> Any:
    # pd.isna returns an array for list-like cells; only scalars can be null here
    if pd.api.types.is_scalar(cell) and pd.isna(cell):
        return None
    return cell
