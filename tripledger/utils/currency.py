"""
Currency helpers for the edges of the engine.

Amounts from forms, receipt extraction and the exchange-rate service are
converted to Money on the way in; formatting happens only at render time.
"""
from typing import Dict, Optional

from tripledger.core.config import settings
from tripledger.core.exceptions import InvalidArgument
from tripledger.core.money import Money, Numeric

CURRENCY_SYMBOLS: Dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "AUD": "A$",
    "CAD": "C$",
    "CHF": "CHF",
    "CNY": "¥",
    "HKD": "HK$",
    "NZD": "NZ$",
    "SGD": "S$",
    "MXN": "Mex$",
    "BRL": "R$",
    "COP": "COL$",
    "ARS": "AR$",
    "PEN": "S/.",
    "CLP": "CLP$",
    "UYU": "$U",
    "CRC": "₡",
}


def get_currency_symbol(code: str) -> str:
    return CURRENCY_SYMBOLS.get(code.upper(), code)


def format_currency(amount: Numeric, code: Optional[str] = None) -> str:
    """Render an amount for display, e.g. "$1,234.50" or "-€3.00"."""
    money = Money.from_value(amount).round(2)
    symbol = get_currency_symbol(code or settings.BASE_CURRENCY)
    sign = "-" if money < 0 else ""
    return f"{sign}{symbol}{money.abs().to_decimal():,.2f}"


def convert_to_base(amount: Numeric, rate: Numeric) -> Money:
    """
    Convert an amount in a foreign currency to the base currency.

    `rate` is the multiplier returned by the exchange-rate service for
    (from_currency, base_currency, date). Result is rounded to minor units.
    """
    multiplier = Money(rate)
    if multiplier <= 0:
        raise InvalidArgument(f"Exchange rate must be positive, got {multiplier}")
    return Money(amount).multiply(multiplier.to_decimal()).round(2)
