# SPDX-License-Identifier: MPL-2.0
"""Data models for Receipt Points."""
import math
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Optional, Tuple


def parse_amount(text: str) -> Optional[Decimal]:
    """Parse a currency amount.

    Returns ``None`` unless the text is a finite decimal whose magnitude fits
    in a double-precision float.
    """
    try:
        amount = Decimal(text)
    except (InvalidOperation, TypeError, ValueError):
        return None
    if not amount.is_finite() or math.isinf(float(amount)):
        return None
    return amount


@dataclass(frozen=True)
class Item:
    """A single purchased line item."""

    short_description: str
    price: str

    @property
    def price_amount(self) -> Optional[Decimal]:
        """The price as an exact decimal, or ``None`` if unparseable."""
        return parse_amount(self.price)


@dataclass(frozen=True)
class Receipt:
    """A submitted purchase receipt.

    Every field keeps the raw text it was submitted with. Identifier
    derivation hashes that text, and each scoring rule parses only the field
    it needs, so a malformed field never prevents the others from scoring.
    """

    retailer: str
    purchase_date: str
    purchase_time: str
    items: Tuple[Item, ...] = field(default_factory=tuple)
    total: str = ""

    @property
    def total_amount(self) -> Optional[Decimal]:
        """The total as an exact decimal, or ``None`` if unparseable."""
        return parse_amount(self.total)


@dataclass(frozen=True)
class ScoredReceipt:
    """A ledger entry: the derived identifier and the points awarded."""

    id: str  # noqa: A003
    points: int
