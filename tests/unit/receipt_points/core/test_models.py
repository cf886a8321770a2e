# SPDX-License-Identifier: MPL-2.0
"""Tests for the receipt data models."""

import dataclasses
from decimal import Decimal

import pytest

from receipt_points.core.models import Item, ScoredReceipt, parse_amount


@pytest.mark.parametrize(
    "text, expected",
    [
        ("35.35", Decimal("35.35")),
        ("12.00", Decimal("12.00")),
        ("0", Decimal("0")),
        ("abc", None),
        ("", None),
        ("NaN", None),
        ("-Infinity", None),
        ("1e300", Decimal("1e300")),
        ("1e400", None),
        ("-1e400", None),
    ],
)
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


def test_amounts_are_exact_decimals():
    item = Item("Pop", "0.10")
    assert isinstance(item.price_amount, Decimal)
    assert item.price_amount * 3 == Decimal("0.30")


def test_receipts_are_immutable(target_receipt):
    with pytest.raises(dataclasses.FrozenInstanceError):
        target_receipt.total = "0.00"
    with pytest.raises(dataclasses.FrozenInstanceError):
        target_receipt.items[0].price = "0.00"


def test_scored_receipt_is_immutable():
    entry = ScoredReceipt(id="abc", points=10)
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.points = 11
