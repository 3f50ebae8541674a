"""Presentation helpers for cents amounts and answer values."""
from decimal import Decimal, ROUND_HALF_UP

CURRENCY_SYMBOL = "€"
THOUSANDS_SEPARATOR = "."
NBSP = "\u00a0"


def format_number(value) -> str:
    """Render a number the way it reads in a label: 3.0 -> "3", 2.5 -> "2.5"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_price(cents) -> str:
    """
    Format a cents amount as whole euros, e.g. 3500000 -> "€ 35.000".

    Rounds half away from zero, groups thousands with dots and separates
    the euro sign with a non-breaking space.
    """
    euros = (Decimal(str(cents)) / 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if euros < 0 else ""
    grouped = f"{abs(int(euros)):,}".replace(",", THOUSANDS_SEPARATOR)
    return f"{CURRENCY_SYMBOL}{NBSP}{sign}{grouped}"


def format_price_range(min_cents, max_cents) -> str:
    """Format a price range, collapsing equal bounds to a single price."""
    if min_cents == max_cents:
        return format_price(min_cents)
    return f"{format_price(min_cents)} - {format_price(max_cents)}"
