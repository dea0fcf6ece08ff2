"""Predefined currencies, registered on import so codes resolve out of the box."""

from money_json.domain.monetary.currency import Currency, CurrencyType


# Fiat currencies
USD = Currency("USD", 2, "US Dollar", CurrencyType.FIAT)
EUR = Currency("EUR", 2, "Euro", CurrencyType.FIAT)
GBP = Currency("GBP", 2, "British Pound", CurrencyType.FIAT)
CHF = Currency("CHF", 2, "Swiss Franc", CurrencyType.FIAT)
CZK = Currency("CZK", 2, "Czech Koruna", CurrencyType.FIAT)
JPY = Currency("JPY", 0, "Japanese Yen", CurrencyType.FIAT)
KWD = Currency("KWD", 3, "Kuwaiti Dinar", CurrencyType.FIAT)

# Crypto currencies
BTC = Currency("BTC", 8, "Bitcoin", CurrencyType.CRYPTO)
ETH = Currency("ETH", 18, "Ethereum", CurrencyType.CRYPTO)

# Commodities
XAU = Currency("XAU", 4, "Gold", CurrencyType.COMMODITY)
XAG = Currency("XAG", 4, "Silver", CurrencyType.COMMODITY)

PREDEFINED_CURRENCIES = (USD, EUR, GBP, CHF, CZK, JPY, KWD, BTC, ETH, XAU, XAG)

for _currency in PREDEFINED_CURRENCIES:
    Currency.register(_currency, overwrite=True)
