# SPDX-License-Identifier: MPL-2.0
"""Reward-points scoring for receipts.

The score is the sum of seven independent rules. Each rule reads the receipt
on its own and parses only the field it needs; a field that fails to parse
contributes zero to that rule and is reported at DEBUG level, so
:func:`score` never raises for a decoded receipt.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from decimal import ROUND_CEILING, Decimal, DecimalException
from typing import Callable, Dict, Optional, Tuple

from receipt_points.core.models import Receipt

logger = logging.getLogger(__name__)

ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
ITEM_PAIR_POINTS = 5
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10

QUARTER = Decimal("0.25")
DESCRIPTION_PRICE_MULTIPLIER = Decimal("0.2")
AFTERNOON_HOUR = 14

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"
# Month, day and minute must be zero-padded; the hour may be one or two digits
DATE_SHAPE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
TIME_SHAPE = re.compile(r"[0-9]{1,2}:[0-9]{2}")

Rule = Callable[[Receipt], int]


def retailer_points(receipt: Receipt) -> int:
    """One point for every ASCII letter or digit in the retailer name."""
    return sum(1 for ch in receipt.retailer if ch.isascii() and ch.isalnum())


def round_dollar_points(receipt: Receipt) -> int:
    """50 points if the total has no cents."""
    return ROUND_DOLLAR_POINTS if receipt.total.endswith(".00") else 0


def quarter_multiple_points(receipt: Receipt) -> int:
    """25 points if the total is a multiple of 0.25."""
    total = receipt.total_amount
    if total is None:
        logger.debug(f"Unparseable total {receipt.total!r}, skipping quarter rule")
        return 0
    try:
        remainder = total % QUARTER
    except DecimalException:
        # Totals too large for the decimal context's precision
        logger.debug(f"Total {receipt.total!r} out of range for quarter rule")
        return 0
    return QUARTER_MULTIPLE_POINTS if remainder == 0 else 0


def item_pair_points(receipt: Receipt) -> int:
    """5 points for every two items."""
    return (len(receipt.items) // 2) * ITEM_PAIR_POINTS


def description_points(receipt: Receipt) -> int:
    """ceil(price * 0.2) for each item whose trimmed description length is a multiple of 3.

    Length is measured in UTF-8 bytes.
    """
    points = 0
    for item in receipt.items:
        if len(item.short_description.strip().encode("utf-8")) % 3 != 0:
            continue
        price = item.price_amount
        if price is None:
            logger.debug(f"Unparseable price {item.price!r} for item {item.short_description!r}")
            continue
        try:
            bonus = int((price * DESCRIPTION_PRICE_MULTIPLIER).to_integral_value(rounding=ROUND_CEILING))
        except DecimalException:
            logger.debug(f"Price {item.price!r} out of range for description rule")
            continue
        points += max(bonus, 0)
    return points


def _parse_strict(text: str, shape: re.Pattern[str], fmt: str) -> Optional[datetime]:
    """Parse text that must match both the zero-padded shape and the strptime format."""
    if not shape.fullmatch(text):
        return None
    try:
        return datetime.strptime(text, fmt)
    except ValueError:
        return None


def odd_day_points(receipt: Receipt) -> int:
    """6 points if the day of the purchase date is odd."""
    purchased_on = _parse_strict(receipt.purchase_date, DATE_SHAPE, DATE_FORMAT)
    if purchased_on is None:
        logger.debug(f"Unparseable purchase date {receipt.purchase_date!r}")
        return 0
    return ODD_DAY_POINTS if purchased_on.day % 2 == 1 else 0


def afternoon_points(receipt: Receipt) -> int:
    """10 points if the purchase happened during the 2pm hour (14:00 to 14:59)."""
    purchased_at = _parse_strict(receipt.purchase_time, TIME_SHAPE, TIME_FORMAT)
    if purchased_at is None:
        logger.debug(f"Unparseable purchase time {receipt.purchase_time!r}")
        return 0
    return AFTERNOON_POINTS if purchased_at.hour == AFTERNOON_HOUR else 0


RULES: Tuple[Tuple[str, Rule], ...] = (
    ("retailer", retailer_points),
    ("round_dollar", round_dollar_points),
    ("quarter_multiple", quarter_multiple_points),
    ("item_pairs", item_pair_points),
    ("description_length", description_points),
    ("odd_day", odd_day_points),
    ("afternoon", afternoon_points),
)


def breakdown(receipt: Receipt) -> Dict[str, int]:
    """Return each rule's contribution, in rule order."""
    return {name: rule(receipt) for name, rule in RULES}


def score(receipt: Receipt) -> int:
    """Compute the total reward points for a receipt."""
    return sum(breakdown(receipt).values())
