__version__ = "0.1.0"

from money_json.domain.monetary import Currency, Money
from money_json.serialization import DecodeError, MoneyJsonCodec, dumps, loads

__all__ = ["Currency", "Money", "DecodeError", "MoneyJsonCodec", "dumps", "loads"]
