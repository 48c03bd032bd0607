"""Display helpers for currency amounts and form option labels."""

from decimal import Decimal, ROUND_HALF_UP

from transit_benefit.config import settings
from transit_benefit.models import FareTableEntry

CENTS = Decimal("0.01")


def format_amount(value: float) -> str:
    """
    Format a float with two decimals.

    Rounds the exact binary value of the float, with ties going away from
    zero, so 0.125 becomes "0.13" rather than Python's half-even "0.12".
    """
    return str(Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP))


def format_currency(value: float) -> str:
    """Format a float as dollars, e.g. 67.92 -> "$67.92"."""
    return f"${format_amount(value)}"


def zone_label(entry: FareTableEntry) -> str:
    """Label for a commuter rail zone, e.g. "Zone 1A - $90.00"."""
    return f"Zone {entry.key} - {format_currency(entry.monthly_price)}"


def route_label(entry: FareTableEntry) -> str:
    """Label for a ferry route, e.g. "Hingham-Hull - $329.00"."""
    name = "-".join(word[:1].upper() + word[1:] for word in entry.key.split("-"))
    return f"{name} - {format_currency(entry.monthly_price)}"


def tax_bracket_label(percent: int) -> str:
    """Label for a tax bracket, e.g. "22% - $44,726 to $95,375"."""
    return f"{percent}% - {settings.TAX_BRACKETS[percent]}"
