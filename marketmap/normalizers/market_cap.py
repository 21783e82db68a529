"""Normalization of displayed market-cap text to numeric values."""

import math
import re
from decimal import Decimal, InvalidOperation, Overflow, localcontext


CURRENCY_SYMBOLS = ("$", "¥", "€", "£", "₹", "₩")

# Unit suffix -> multiplier
UNIT_MULTIPLIERS = {
    "T": Decimal("1e12"),
    "B": Decimal("1e9"),
    "M": Decimal("1e6"),
}

_LEADING_NUMBER = re.compile(r"^[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?")


def _leading_decimal(text: str) -> Decimal | None:
    match = _LEADING_NUMBER.match(text.strip())
    if not match:
        return None
    try:
        return Decimal(match.group(0))
    except InvalidOperation:
        return None


def parse_number(text: str) -> float:
    """Parse the leading number of ``text``, or 0.0 if there is none."""
    value = _leading_decimal(text)
    if value is None or not value.is_finite():
        return 0.0
    result = float(value)
    return result if math.isfinite(result) else 0.0


def parse_market_cap(text: str) -> float:
    """Convert a displayed market cap to a float.

    Handles currency symbols, thousands separators and the T/B/M unit
    suffixes used on ranking pages:

        >>> parse_market_cap("$760.67 B")
        760670000000.0
        >>> parse_market_cap("¥1,250")
        1250.0

    Unparseable or out-of-range text yields 0.0.
    """
    s = text
    for symbol in CURRENCY_SYMBOLS:
        s = s.replace(symbol, "")
    s = s.replace(",", "").strip()

    multiplier = Decimal(1)
    for suffix, factor in UNIT_MULTIPLIERS.items():
        if s.endswith(suffix):
            multiplier = factor
            s = s[: -len(suffix)].strip()
            break

    value = _leading_decimal(s)
    if value is None:
        return 0.0
    with localcontext() as ctx:
        ctx.traps[Overflow] = False
        scaled = value * multiplier
    return parse_number(str(scaled))


def clean_text(text: str) -> str:
    """Drop newlines and surrounding whitespace from cell text."""
    return text.replace("\n", "").strip()
