# SPDX-License-Identifier: MPL-2.0
"""Shared fixtures for Receipt Points tests."""

import pytest

from receipt_points.api.schemas import ReceiptPayload
from receipt_points.core.models import Item, Receipt

TARGET_RECEIPT = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
        {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
        {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
    ],
    "total": "35.35",
}

CORNER_MARKET_RECEIPT = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
    ],
    "total": "9.00",
}


@pytest.fixture
def target_payload():
    """Wire-format receipt worth 28 points."""
    return {**TARGET_RECEIPT, "items": [dict(item) for item in TARGET_RECEIPT["items"]]}


@pytest.fixture
def corner_market_payload():
    """Wire-format receipt worth 109 points."""
    return {**CORNER_MARKET_RECEIPT, "items": [dict(item) for item in CORNER_MARKET_RECEIPT["items"]]}


@pytest.fixture
def target_receipt():
    return ReceiptPayload.model_validate(TARGET_RECEIPT).to_receipt()


@pytest.fixture
def corner_market_receipt():
    return ReceiptPayload.model_validate(CORNER_MARKET_RECEIPT).to_receipt()


def _make_receipt(**overrides):
    """Build a receipt that scores zero on every rule, with overrides applied."""
    fields = {
        "retailer": "",
        "purchase_date": "2022-01-02",
        "purchase_time": "09:00",
        "items": (),
        "total": "1.01",
    }
    fields.update(overrides)
    fields["items"] = tuple(
        item if isinstance(item, Item) else Item(*item) for item in fields["items"]
    )
    return Receipt(**fields)


@pytest.fixture
def make_receipt():
    """Factory for receipts that score zero unless overridden."""
    return _make_receipt
