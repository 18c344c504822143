"""Domain constants for the cost ledger."""

SUPPORTED_CURRENCIES = (
    "USD",
    "EURO",
    "GBP",
    "ILS",
)

# Codes accepted anywhere a currency is expected; EUR and EURO name the same currency.
VALID_CURRENCIES = frozenset({"USD", "EUR", "GBP", "ILS", "EURO"})

EURO_ALIASES = ("EUR", "EURO")

# Currencies a rate source is expected to quote; the euro may use either alias.
REQUIRED_RATE_CURRENCIES = ("USD", "GBP", "ILS")

DEFAULT_CATEGORIES = (
    "Food & Dining",
    "Transportation",
    "Housing",
    "Utilities",
    "Entertainment",
    "Healthcare",
    "Sport",
    "Shopping",
    "Education",
    "Travel",
    "Other",
)

DEFAULT_RATES_URL = (
    "https://shaidahari.github.io/exchaneRates_json/exchange-rates.json"
)

RATE_SOURCE_SETTING_KEY = "exchangeRateUrl"


__all__ = [
    "SUPPORTED_CURRENCIES",
    "VALID_CURRENCIES",
    "EURO_ALIASES",
    "REQUIRED_RATE_CURRENCIES",
    "DEFAULT_CATEGORIES",
    "DEFAULT_RATES_URL",
    "RATE_SOURCE_SETTING_KEY",
]
