"""
Money formatting and parsing.

Amounts are integer minor units everywhere; a Currency's precision says how many
of the trailing digits are the fractional part. Nothing here goes through float.
"""

import re

from ..exceptions import InvalidInput
from ..models import Currency


# Display symbols for common ISO 4217 codes (en-US conventions).
# Codes not listed here are rendered as "1,234.56 CODE".
CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "CNY": "CN¥",
    "INR": "₹",
    "KRW": "₩",
    "CAD": "CA$",
    "AUD": "A$",
    "NZD": "NZ$",
    "MXN": "MX$",
    "BRL": "R$",
    "HKD": "HK$",
    "ILS": "₪",
    "VND": "₫",
    "PHP": "₱",
    "CHF": "CHF ",
}


def format_money(amount: int, currency: Currency) -> str:
    """
    Render an amount in minor units as a display string.

    Examples (USD, precision 2): 0 -> "$0.00", -123456 -> "-$1,234.56".
    """
    scale = 10 ** currency.precision
    whole, frac = divmod(abs(amount), scale)

    number = f"{whole:,}"
    if currency.precision:
        number += f".{frac:0{currency.precision}d}"

    sign = "-" if amount < 0 else ""
    symbol = CURRENCY_SYMBOLS.get(currency.code.upper())
    if symbol is None:
        # Non-ISO codes (BTC, ETH, ...) - number followed by the code
        return f"{sign}{number} {currency.code}"
    return f"{sign}{symbol}{number}"


def parse_money(text: str, currency: Currency) -> int:
    """
    Parse a user-entered amount into minor units.

    Accepts currency symbols, grouping separators, a leading sign and accounting
    parentheses. Fractional digits beyond the currency precision are truncated,
    short fractions are padded: with USD "1.5" -> 150, "1.239" -> 123, "-.50" -> -50.

    Raises InvalidInput if there is no digit to parse.
    """
    original = text
    text = text.strip()

    negative = False
    if text.startswith("(") and text.endswith(")"):
        negative = True
        text = text[1:-1]

    cleaned = re.sub(r"[^\d.\-]", "", text)
    if not re.search(r"\d", cleaned):
        raise InvalidInput(f'Invalid money input: "{original}"')

    parts = cleaned.split(".")
    whole = parts[0]
    frac = parts[1] if len(parts) > 1 else ""

    if whole.startswith("-"):
        negative = True

    whole_digits = re.sub(r"\D", "", whole) or "0"
    frac_digits = re.sub(r"\D", "", frac)[:currency.precision].ljust(currency.precision, "0")

    value = int(whole_digits) * 10 ** currency.precision + int(frac_digits or "0")
    return -value if negative else value
