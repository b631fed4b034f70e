"""Display formatting for report cards and the dashboard."""

import re
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional, Union

from assetlens.utils.logging import get_logger

LOGGER = get_logger(__name__)

Number = Union[int, float, Decimal]

_CURRENCY_NOISE = re.compile(r"[\s$,]")


def format_currency(value: Optional[Number]) -> str:
    """Format a dollar amount with no cents, e.g. ``12000 -> "$12,000"``."""
    if value is None:
        return "$0"
    amount = Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(int(amount)):,}"


def parse_currency(value: Optional[str]) -> int:
    """Parse a ``"$N"`` display string back into whole dollars.

    Malformed strings count as zero and are logged, so one bad stored value
    cannot break a portfolio total.
    """
    if not value:
        return 0
    cleaned = _CURRENCY_NOISE.sub("", value)
    try:
        return int(Decimal(cleaned).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    except (InvalidOperation, ValueError):
        LOGGER.warning(f"Malformed currency value ignored in total: {value!r}")
        return 0


def format_mileage(mileage: int) -> str:
    return f"{mileage:,} miles"


def format_report_date(moment: Optional[datetime]) -> str:
    """Format a date the way result pages print it, e.g. ``Oct 19, 2026``."""
    moment = moment or datetime.now()
    return f"{moment.strftime('%b')} {moment.day}, {moment.year}"


def format_acres(acres: Optional[Number]) -> str:
    """Show small lots in square feet and larger ones in acres."""
    if acres is None:
        return "N/A"
    acres = Decimal(str(acres))
    if acres < 1:
        sqft = (acres * 43560).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return f"{int(sqft):,} sq ft"
    return f"{acres.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)} acres"
