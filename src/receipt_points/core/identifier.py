# SPDX-License-Identifier: MPL-2.0
"""Deterministic receipt identifiers.

An identifier is a SHA-256 content fingerprint of a receipt's retailer,
purchase date, purchase time and total, taken from their raw text. The item
list is not part of the fingerprint, so two receipts that agree on those four
fields share an identifier.
"""

import hashlib

from receipt_points.core.models import Receipt


def hash_sha256(data: bytes) -> bytes:
    """Return the SHA-256 digest of ``data``."""
    return hashlib.sha256(data).digest()


def derive_receipt_id(retailer: str, purchase_date: str, purchase_time: str, total: str) -> str:
    """Derive the identifier for a receipt's identity-bearing fields.

    Args:
        retailer: Retailer name as submitted.
        purchase_date: Purchase date as submitted.
        purchase_time: Purchase time as submitted.
        total: Total amount as submitted.

    Returns:
        64 lowercase hexadecimal characters.
    """
    data = retailer + purchase_date + purchase_time + total
    return hash_sha256(data.encode("utf-8")).hex()


def receipt_id(receipt: Receipt) -> str:
    """Derive the identifier for ``receipt``."""
    return derive_receipt_id(
        receipt.retailer, receipt.purchase_date, receipt.purchase_time, receipt.total
    )
